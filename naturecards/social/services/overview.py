from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from flask import current_app

from naturecards.core.concurrency import gather_settled
from naturecards.gallery.services import fetch_current_user_document

from .friendship import derive_friend_list, derive_friend_request_list
from .trading import derive_trade_request_list

if TYPE_CHECKING:
    from naturecards.gallery.services import UserStore

    from ..models import SocialPageData, SocialSection


def get_social_page_data(store: UserStore, user_id: str) -> SocialPageData:
    """Load friends, friend requests and trade requests as three sections.

    Each section reads the current user's document on its own and fails on its
    own; a failed section comes back empty with its error flag set.
    """
    app = current_app._get_current_object()  # type: ignore[attr-defined]

    def section(derive: Callable[[Any], list]) -> Callable[[], list]:
        def task() -> list:
            with app.app_context():
                return derive(fetch_current_user_document(store, user_id))

        return task

    names = ["friends", "friend_requests", "trade_requests"]
    outcomes = gather_settled(
        [
            section(lambda doc: derive_friend_list(store, doc)),
            section(lambda doc: derive_friend_request_list(store, doc)),
            section(derive_trade_request_list),
        ]
    )

    data: dict[str, SocialSection] = {}
    for name, outcome in zip(names, outcomes):
        if isinstance(outcome, Exception):
            current_app.logger.error(f"Error loading {name}: {outcome}")
            data[name] = {"items": [], "error": True}
        else:
            data[name] = {"items": outcome, "error": False}
    return data  # type: ignore[return-value]
