"""Data models for the social blueprint."""

from __future__ import annotations

from typing import Literal, TypedDict

from naturecards.gallery.models import TradeRequest

FriendshipStatus = Literal["friend", "pending_outgoing", "pending_incoming", "none"]


class Friend(TypedDict):
    """Display projection of a friend's document."""

    id: str
    username: str
    profile_image: str
    gallery_url: str


class FriendRequest(TypedDict):
    """A pending friend relationship joined with the other party's document."""

    id: str
    sender_id: str
    recipient_id: str
    username: str
    profile_image: str
    sending: str
    receiving: str
    incoming: bool


class SocialSection(TypedDict):
    """One independently loaded section of the social page."""

    items: list
    error: bool


class SocialPageData(TypedDict):
    """The three sections of the social page."""

    friends: SocialSection
    friend_requests: SocialSection
    trade_requests: SocialSection


__all__ = [
    "Friend",
    "FriendRequest",
    "FriendshipStatus",
    "SocialPageData",
    "SocialSection",
    "TradeRequest",
]
