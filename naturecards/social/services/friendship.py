from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any

from flask import current_app

from naturecards.core.concurrency import gather_settled
from naturecards.core.constants import (
    DEFAULT_AVATAR,
    GALLERY_URL_TEMPLATE,
    STATUS_FRIEND,
    STATUS_NONE,
    STATUS_PENDING_INCOMING,
    STATUS_PENDING_OUTGOING,
)
from naturecards.gallery.documents import is_well_formed_request
from naturecards.gallery.services import (
    fetch_current_user_document,
    fetch_user_document,
)

if TYPE_CHECKING:
    from naturecards.gallery.models import PendingFriend, UserDocument
    from naturecards.gallery.services import UserStore

    from ..models import Friend, FriendRequest, FriendshipStatus


def gallery_url(user_id: str) -> str:
    """Return the link to a user's gallery page."""
    return GALLERY_URL_TEMPLATE.format(user_id=user_id)


def relationship_id(request: PendingFriend) -> str:
    """Return a stable key for a pending relationship."""
    return f"{request['sending']}:{request['receiving']}"


def to_friend(user: UserDocument) -> Friend:
    """Project a user document to the Friend view."""
    return {
        "id": user["id"],
        "username": user.get("username", ""),
        "profile_image": user.get("profile_picture") or DEFAULT_AVATAR,
        "gallery_url": gallery_url(user["id"]),
    }


def to_friend_request(
    request: PendingFriend, other: UserDocument, current_user_id: str
) -> FriendRequest:
    """Join a pending relationship with the other party's document."""
    return {
        "id": relationship_id(request),
        "sender_id": request["sending"],
        "recipient_id": request["receiving"],
        "username": other.get("username", ""),
        "profile_image": other.get("profile_picture") or DEFAULT_AVATAR,
        "sending": request["sending"],
        "receiving": request["receiving"],
        "incoming": request["receiving"] == current_user_id,
    }


def _fetch_each(store: UserStore, user_ids: list[str]) -> list[Any]:
    return gather_settled([partial(fetch_user_document, store, uid) for uid in user_ids])


def derive_friend_list(store: UserStore, doc: UserDocument) -> list[Friend]:
    """Fetch every friend of ``doc`` and project them to Friend views.

    Friends whose documents cannot be fetched are logged and left out.
    """
    friend_ids = list(doc.get("friends", []))
    friends: list[Friend] = []
    for friend_id, outcome in zip(friend_ids, _fetch_each(store, friend_ids)):
        if isinstance(outcome, Exception):
            current_app.logger.error(f"Error fetching friend {friend_id}: {outcome}")
            continue
        friends.append(to_friend(outcome))
    return friends


def derive_friend_request_list(
    store: UserStore, doc: UserDocument
) -> list[FriendRequest]:
    """Build FriendRequest views for the well-formed pending entries of ``doc``."""
    requests: list[PendingFriend] = []
    for request in doc.get("pending_friends", []):
        if not is_well_formed_request(request):
            current_app.logger.warning(f"Skipping malformed friend request: {request}")
            continue
        requests.append(request)

    other_ids = [
        r["sending"] if r["receiving"] == doc["id"] else r["receiving"]
        for r in requests
    ]
    results: list[FriendRequest] = []
    for request, outcome in zip(requests, _fetch_each(store, other_ids)):
        if isinstance(outcome, Exception):
            current_app.logger.error(
                f"Error processing friend request {relationship_id(request)}: {outcome}"
            )
            continue
        results.append(to_friend_request(request, outcome, doc["id"]))
    return results


def check_friendship_status(doc: UserDocument, user_id: str) -> FriendshipStatus:
    """Return where ``user_id`` stands relative to the owner of ``doc``."""
    if user_id in doc.get("friends", []):
        return STATUS_FRIEND
    pending = [r for r in doc.get("pending_friends", []) if isinstance(r, dict)]
    if any(r.get("receiving") == user_id for r in pending):
        return STATUS_PENDING_OUTGOING
    if any(r.get("sending") == user_id for r in pending):
        return STATUS_PENDING_INCOMING
    return STATUS_NONE


def get_friendship_status(
    store: UserStore, current_user_id: str, user_id: str
) -> FriendshipStatus:
    """Fetch the current user's document and derive the status of ``user_id``."""
    doc = fetch_current_user_document(store, current_user_id)
    return check_friendship_status(doc, user_id)
