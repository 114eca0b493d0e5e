"""Data models for the gallery blueprint."""

from __future__ import annotations

from typing import Any, TypedDict

from naturecards.core.types import StoreDocument


class Card(TypedDict, total=False):
    """A collected card, embedded in its owner's document."""

    id: str
    commonName: str
    scientificName: str
    image: str
    rarity: str
    creator: str
    owner: str
    funFact: str
    timeCreated: Any
    location: Any
    tradeStatus: bool
    infoLink: str
    username: str


class PendingFriend(TypedDict):
    """A directed, unconfirmed friend relationship."""

    sending: str
    receiving: str


class TradeRequest(TypedDict):
    """A card offered by the sender against a card requested from the recipient."""

    offeredCard: Card
    requestedCard: Card


class UserDocument(StoreDocument, total=False):
    """A whole user record as held by the document store."""

    username: str
    profile_picture: str | None
    cards: list[Card]
    friends: list[str]
    pending_friends: list[PendingFriend]
    trading: list[TradeRequest]
