"""Friend request mutations.

Every operation reads both documents, computes their new state and writes both
back side by side. The two writes are independent: if one fails the other may
already have landed, and nothing is rolled back.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from naturecards.core.concurrency import gather_all
from naturecards.errors import ConflictError, NotFoundError, ValidationError
from naturecards.gallery.documents import make_pending_friend
from naturecards.gallery.services import (
    fetch_current_user_document,
    fetch_document_pair,
    find_user_document_by_username,
    write_document_pair,
)

if TYPE_CHECKING:
    from naturecards.gallery.models import PendingFriend, UserDocument
    from naturecards.gallery.services import UserStore


def _is_request(request: PendingFriend, sending: str, receiving: str) -> bool:
    return (
        isinstance(request, dict)
        and request.get("sending") == sending
        and request.get("receiving") == receiving
    )


def _without_request(
    doc: UserDocument, sending: str, receiving: str
) -> list[PendingFriend]:
    return [
        r for r in doc.get("pending_friends", []) if not _is_request(r, sending, receiving)
    ]


def _without_pair(doc: UserDocument, first: str, second: str) -> list[PendingFriend]:
    return [
        r
        for r in doc.get("pending_friends", [])
        if not (_is_request(r, first, second) or _is_request(r, second, first))
    ]


def _with_friend(doc: UserDocument, friend_id: str) -> list[str]:
    friends = list(doc.get("friends", []))
    if friend_id not in friends:
        friends.append(friend_id)
    return friends


def accept_friend_request(store: UserStore, user_id: str, friend_id: str) -> None:
    """Accept the request ``friend_id`` sent to ``user_id``."""
    current_user, other_user = fetch_document_pair(store, user_id, friend_id)

    # The request has to be in the recipient's own list.
    if not any(
        _is_request(r, friend_id, user_id) for r in current_user["pending_friends"]
    ):
        raise NotFoundError("Friend request not found.")

    updated_current: UserDocument = {
        **current_user,
        "friends": _with_friend(current_user, friend_id),
        "pending_friends": _without_pair(current_user, friend_id, user_id),
    }
    updated_other: UserDocument = {
        **other_user,
        "friends": _with_friend(other_user, user_id),
        "pending_friends": _without_pair(other_user, friend_id, user_id),
    }
    write_document_pair(store, updated_current, updated_other)


def decline_friend_request(store: UserStore, user_id: str, friend_id: str) -> None:
    """Decline the request ``friend_id`` sent to ``user_id``."""
    _drop_request(store, user_id, friend_id, sending=friend_id, receiving=user_id)


def cancel_friend_request(store: UserStore, user_id: str, friend_id: str) -> None:
    """Withdraw the request ``user_id`` sent to ``friend_id``."""
    _drop_request(store, user_id, friend_id, sending=user_id, receiving=friend_id)


def _drop_request(
    store: UserStore, user_id: str, friend_id: str, sending: str, receiving: str
) -> None:
    current_user, other_user = fetch_document_pair(store, user_id, friend_id)
    if not any(
        _is_request(r, sending, receiving) for r in current_user["pending_friends"]
    ):
        raise NotFoundError("Friend request not found.")

    updated_current: UserDocument = {
        **current_user,
        "pending_friends": _without_request(current_user, sending, receiving),
    }
    updated_other: UserDocument = {
        **other_user,
        "pending_friends": _without_request(other_user, sending, receiving),
    }
    write_document_pair(store, updated_current, updated_other)


def send_friend_request(store: UserStore, user_id: str, username: str) -> PendingFriend:
    """Send a friend request from ``user_id`` to the user called ``username``."""
    current_user, target_user = gather_all(
        [
            partial(fetch_current_user_document, store, user_id),
            partial(find_user_document_by_username, store, username),
        ]
    )
    target_id = target_user["id"]
    if target_id == user_id:
        raise ValidationError("You cannot send a friend request to yourself.")

    for doc in (current_user, target_user):
        for request in doc["pending_friends"]:
            if _is_request(request, user_id, target_id) or _is_request(
                request, target_id, user_id
            ):
                raise ConflictError("Friend request already exists.")
    if target_id in current_user["friends"] or user_id in target_user["friends"]:
        raise ConflictError("Already friends with this user.")

    friend_request = make_pending_friend(user_id, target_id)
    updated_current: UserDocument = {
        **current_user,
        "pending_friends": [*current_user["pending_friends"], friend_request],
    }
    updated_target: UserDocument = {
        **target_user,
        "pending_friends": [*target_user["pending_friends"], friend_request],
    }
    write_document_pair(store, updated_current, updated_target)
    return friend_request
