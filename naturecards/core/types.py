"""Core data types for the naturecards application."""

from typing import Any, Dict, Optional, TypedDict  # noqa: UP035


class StoreDocument(TypedDict):
    """Generic document held by the user document store."""

    id: str


class APIResponse(TypedDict):
    """Generic API response structure."""

    success: bool
    message: str
    data: Optional[Dict[str, Any]]  # noqa: UP006
