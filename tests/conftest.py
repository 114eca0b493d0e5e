"""Common utilities for tests."""

from typing import Any, Optional

from mockfirestore import CollectionReference, MockFirestore, Query

from naturecards.gallery.stores import FirestoreUserStore


def patch_mockfirestore() -> None:
    """Apply monkeypatches to mockfirestore to support FieldFilter queries."""

    def collection_where(
        self: Any,
        field_path: Optional[str] = None,
        op_string: Optional[str] = None,
        value: Any = None,
        filter: Any = None,
    ) -> Any:  # noqa: E501
        if filter:
            return self._where(filter.field_path, filter.op_string, filter.value)
        return self._where(field_path, op_string, value)

    if not hasattr(CollectionReference, "_where"):
        CollectionReference._where = CollectionReference.where
        CollectionReference.where = collection_where

    def query_where(
        self: Any,
        field_path: Optional[str] = None,
        op_string: Optional[str] = None,
        value: Any = None,
        filter: Any = None,
    ) -> Any:
        if filter:
            return self._where(filter.field_path, filter.op_string, filter.value)
        return self._where(field_path, op_string, value)

    if not hasattr(Query, "_where"):
        Query._where = Query.where
        Query.where = query_where


def make_store() -> tuple[MockFirestore, FirestoreUserStore]:
    """Return an empty mock Firestore and a user store backed by it."""
    patch_mockfirestore()
    db = MockFirestore()
    return db, FirestoreUserStore(db)


def add_user(db: MockFirestore, user_id: str, **fields: Any) -> dict[str, Any]:
    """Store a user document with empty social lists unless given."""
    data: dict[str, Any] = {
        "username": user_id,
        "profile_picture": None,
        "cards": [],
        "friends": [],
        "pending_friends": [],
        "trading": [],
    }
    data.update(fields)
    db.collection("users").document(user_id).set(data)
    return data


def read_user(db: MockFirestore, user_id: str) -> dict[str, Any]:
    """Read a stored user document back as a dict."""
    return db.collection("users").document(user_id).get().to_dict()


def make_card(card_id: str, owner: str, **fields: Any) -> dict[str, Any]:
    """Build a card owned by ``owner``."""
    card: dict[str, Any] = {
        "id": card_id,
        "commonName": f"Card {card_id}",
        "scientificName": "Quercus robur",
        "image": f"https://example.com/{card_id}.png",
        "rarity": "common",
        "creator": owner,
        "owner": owner,
        "funFact": "Oaks can live for a thousand years.",
        "timeCreated": "2024-05-01T12:00:00Z",
        "location": "Seattle",
        "tradeStatus": True,
        "infoLink": "https://en.wikipedia.org/wiki/Quercus_robur",
        "username": owner,
    }
    card.update(fields)
    return card
