from __future__ import annotations

from typing import TYPE_CHECKING, Any

from flask import current_app

from naturecards.errors import NotFoundError, ValidationError
from naturecards.gallery.documents import is_well_formed_trade, make_trade_request
from naturecards.gallery.services import fetch_document_pair, write_document_pair

if TYPE_CHECKING:
    from naturecards.gallery.models import Card, TradeRequest, UserDocument
    from naturecards.gallery.services import UserStore


def derive_trade_request_list(doc: UserDocument) -> list[TradeRequest]:
    """Return the trades embedded in ``doc`` as they are."""
    return list(doc.get("trading", []))


def _card_id(trade: Any, key: str) -> Any:
    if not isinstance(trade, dict):
        return None
    card = trade.get(key)
    return card.get("id") if isinstance(card, dict) else None


def _require_trade(trade: Any) -> None:
    if not is_well_formed_trade(trade):
        raise ValidationError("Trade request needs an offered and a requested card.")


def _require_owner(card: Card) -> str:
    owner = card.get("owner")
    if not owner:
        raise ValidationError(f"Card {card.get('id')} has no owner.")
    return owner


def _require_counterparty(user_id: str, owner: str) -> None:
    if owner == user_id:
        raise ValidationError("A trade needs two different users.")


def _holds(doc: UserDocument, card_id: Any) -> bool:
    return any(c.get("id") == card_id for c in doc["cards"] if isinstance(c, dict))


def accept_trade_request(store: UserStore, user_id: str, trade: TradeRequest) -> bool:
    """Swap the two cards of ``trade`` between the recipient and its sender."""
    try:
        _require_trade(trade)
        offered = trade["offeredCard"]
        requested = trade["requestedCard"]
        partner_id = _require_owner(offered)
        _require_counterparty(user_id, partner_id)
        current_user, partner = fetch_document_pair(store, user_id, partner_id)

        def is_resolved(t: Any) -> bool:
            # Both card identities must still match; stale partial matches stay.
            return _card_id(t, "offeredCard") == offered["id"] and _card_id(
                t, "requestedCard"
            ) == requested["id"]

        if not any(is_resolved(t) for t in current_user["trading"]):
            raise NotFoundError("Trade request not found.")
        if not _holds(current_user, requested["id"]) or not _holds(
            partner, offered["id"]
        ):
            raise ValidationError("Traded cards have changed hands.")

        offered_with_new_owner = {**offered, "owner": current_user["id"]}
        requested_with_new_owner = {**requested, "owner": partner["id"]}

        updated_current: UserDocument = {
            **current_user,
            "cards": [
                *(c for c in current_user["cards"] if c.get("id") != requested["id"]),
                offered_with_new_owner,
            ],
            "trading": [t for t in current_user["trading"] if not is_resolved(t)],
        }
        updated_partner: UserDocument = {
            **partner,
            "cards": [
                *(c for c in partner["cards"] if c.get("id") != offered["id"]),
                requested_with_new_owner,
            ],
            "trading": [t for t in partner["trading"] if not is_resolved(t)],
        }
        write_document_pair(store, updated_current, updated_partner)
        return True
    except Exception as e:
        current_app.logger.error(f"Error accepting trade: {e}")
        return False


def decline_trade_request(store: UserStore, user_id: str, trade: TradeRequest) -> bool:
    """Remove ``trade`` from both parties, matching on the offered card only."""
    try:
        _require_trade(trade)
        offered = trade["offeredCard"]
        current_user, partner = fetch_document_pair(
            store, user_id, _require_owner(offered)
        )

        updated_current: UserDocument = {
            **current_user,
            "trading": [
                t
                for t in current_user["trading"]
                if _card_id(t, "offeredCard") != offered["id"]
            ],
        }
        updated_partner: UserDocument = {
            **partner,
            "trading": [
                t for t in partner["trading"] if _card_id(t, "offeredCard") != offered["id"]
            ],
        }
        write_document_pair(store, updated_current, updated_partner)
        return True
    except Exception as e:
        current_app.logger.error(f"Error declining trade: {e}")
        return False


def send_trade_request(
    store: UserStore, user_id: str, offered_card: Card, requested_card: Card
) -> bool:
    """Offer ``offered_card`` for ``requested_card`` to the latter's owner."""
    try:
        trade = make_trade_request(offered_card, requested_card)
        _require_trade(trade)
        if _require_owner(offered_card) != user_id:
            raise ValidationError(f"Card {offered_card['id']} is not yours to offer.")
        target_id = _require_owner(requested_card)
        _require_counterparty(user_id, target_id)
        current_user, target = fetch_document_pair(store, user_id, target_id)

        updated_current: UserDocument = {
            **current_user,
            "trading": [*current_user["trading"], trade],
        }
        updated_target: UserDocument = {
            **target,
            "trading": [*target["trading"], trade],
        }
        write_document_pair(store, updated_current, updated_target)
        return True
    except Exception as e:
        current_app.logger.error(f"Error sending trade request: {e}")
        return False
