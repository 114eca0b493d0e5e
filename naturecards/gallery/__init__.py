"""The gallery blueprint."""

from flask import Blueprint

from .models import Card, PendingFriend, TradeRequest, UserDocument

bp = Blueprint("gallery", __name__, url_prefix="/gallery")

from . import routes  # noqa: E402

__all__ = ["Card", "PendingFriend", "TradeRequest", "UserDocument", "routes"]
