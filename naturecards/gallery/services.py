from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from naturecards.core.concurrency import gather_all
from naturecards.errors import NotFoundError

from .documents import normalize_user_document, validate_user_document

if TYPE_CHECKING:
    from .models import UserDocument
    from .stores import FirestoreUserStore, HttpUserStore

    UserStore = FirestoreUserStore | HttpUserStore


def fetch_user_document(store: UserStore, user_id: str) -> UserDocument:
    """Fetch a user's document by id."""
    data = store.get_user(user_id)
    if data is None:
        raise NotFoundError(f"User {user_id} not found.")
    return normalize_user_document(data)


def fetch_current_user_document(store: UserStore, user_id: str | None) -> UserDocument:
    """Fetch the signed-in user's document."""
    if not user_id:
        raise NotFoundError("No user is signed in.")
    return fetch_user_document(store, user_id)


def find_user_document_by_username(store: UserStore, username: str) -> UserDocument:
    """Fetch a user's document by username."""
    data = store.find_by_username(username)
    if data is None:
        raise NotFoundError(f"User '{username}' not found.")
    return normalize_user_document(data)


def write_user_document(store: UserStore, doc: UserDocument) -> None:
    """Validate a whole user document and write it back."""
    validate_user_document(doc)
    store.put_user(doc)


def fetch_document_pair(
    store: UserStore, user_id: str, other_id: str
) -> tuple[UserDocument, UserDocument]:
    """Fetch the signed-in user's document and another user's side by side."""
    current_user, other_user = gather_all(
        [
            partial(fetch_current_user_document, store, user_id),
            partial(fetch_user_document, store, other_id),
        ]
    )
    return current_user, other_user


def write_document_pair(
    store: UserStore, first: UserDocument, second: UserDocument
) -> None:
    """Write two documents side by side.

    Both writes are waited for. If either fails the error is raised, but the
    other write is not undone.
    """
    gather_all(
        [
            partial(write_user_document, store, first),
            partial(write_user_document, store, second),
        ]
    )


class GalleryService:
    """Service class for reading and writing whole user documents."""

    fetch_user_document = staticmethod(fetch_user_document)
    fetch_current_user_document = staticmethod(fetch_current_user_document)
    find_user_document_by_username = staticmethod(find_user_document_by_username)
    write_user_document = staticmethod(write_user_document)
    fetch_document_pair = staticmethod(fetch_document_pair)
    write_document_pair = staticmethod(write_document_pair)
