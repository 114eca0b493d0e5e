"""Normalisation and validation of user documents at the store boundary."""

from __future__ import annotations

import copy
from typing import Any, cast

from naturecards.core.constants import (
    MONGO_OID,
    PENDING_RECEIVING,
    PENDING_SENDING,
    TRADE_OFFERED_CARD,
    TRADE_REQUESTED_CARD,
    USER_FRIENDS,
    USER_ID,
    USER_LIST_FIELDS,
    USER_PENDING_FRIENDS,
    USER_PROFILE_PICTURE,
    USER_TRADING,
    USER_WIRE_ID,
)
from naturecards.errors import ValidationError

from .models import PendingFriend, TradeRequest, UserDocument


def unwrap_id(value: Any) -> str | None:
    """Return a plain string id from a string or a ``{"$oid": ...}`` object."""
    if isinstance(value, dict):
        value = value.get(MONGO_OID)
    if value is None or value == "":
        return None
    return str(value)


def normalize_user_document(raw: dict[str, Any]) -> UserDocument:
    """Turn a raw store payload into a UserDocument.

    Fills missing lists, unwraps ``_id`` and ``$oid`` values and leaves every
    other field untouched.
    """
    data = copy.deepcopy(raw)
    wire_id = data.pop(USER_WIRE_ID, None)
    user_id = unwrap_id(data.get(USER_ID)) or unwrap_id(wire_id)
    if user_id is None:
        raise ValidationError("User document has no id.")
    data[USER_ID] = user_id

    for field in USER_LIST_FIELDS:
        if data.get(field) is None:
            data[field] = []
    data.setdefault(USER_PROFILE_PICTURE, None)

    data[USER_FRIENDS] = [
        friend_id
        for friend_id in (unwrap_id(f) for f in data[USER_FRIENDS])
        if friend_id is not None
    ]
    return cast(UserDocument, data)


def is_well_formed_request(request: Any) -> bool:
    """Check that a pending friend entry names both parties."""
    if not isinstance(request, dict):
        return False
    return bool(request.get(PENDING_SENDING)) and bool(request.get(PENDING_RECEIVING))


def is_well_formed_trade(trade: Any) -> bool:
    """Check that a trade entry carries two cards with ids."""
    if not isinstance(trade, dict):
        return False
    for key in (TRADE_OFFERED_CARD, TRADE_REQUESTED_CARD):
        card = trade.get(key)
        if not isinstance(card, dict) or not card.get("id"):
            return False
    return True


def validate_user_document(doc: dict[str, Any]) -> None:
    """Raise ValidationError unless the document is safe to write back."""
    if not doc.get(USER_ID):
        raise ValidationError("User document has no id.")
    for field in USER_LIST_FIELDS:
        if not isinstance(doc.get(field, []), list):
            raise ValidationError(f"Field '{field}' must be a list.")
    if not all(isinstance(f, str) for f in doc.get(USER_FRIENDS, [])):
        raise ValidationError("Friend ids must be strings.")
    # Entries written by older clients may lack fields; only their shape is checked.
    for field in (USER_PENDING_FRIENDS, USER_TRADING):
        for entry in doc.get(field, []):
            if not isinstance(entry, dict):
                raise ValidationError(f"Entries of '{field}' must be objects.")


def to_wire(doc: UserDocument) -> dict[str, Any]:
    """Serialise a UserDocument the way the REST backend stores it."""
    data: dict[str, Any] = dict(doc)
    data[USER_WIRE_ID] = data.pop(USER_ID)
    return data


def make_pending_friend(sending: str, receiving: str) -> PendingFriend:
    """Build a pending friend entry."""
    return {"sending": sending, "receiving": receiving}


def make_trade_request(offered_card: Any, requested_card: Any) -> TradeRequest:
    """Build a trade entry pairing two cards."""
    return {"offeredCard": offered_card, "requestedCard": requested_card}
