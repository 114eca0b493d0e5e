"""Routes for the social blueprint."""

from __future__ import annotations

from typing import Any

from flask import current_app, g, jsonify, request

from naturecards.auth.decorators import login_required
from naturecards.core.types import APIResponse
from naturecards.errors import ValidationError
from naturecards.extensions import user_store
from naturecards.gallery.services import fetch_current_user_document

from . import bp
from .services import SocialService


def _json_body() -> dict[str, Any]:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object.")
    return payload


_TRADE_ACTIONS = {"send": "sent", "accept": "accepted", "decline": "declined"}


def _trade_response(success: bool, action: str):
    body: APIResponse = {
        "success": success,
        "message": f"Trade {_TRADE_ACTIONS[action]}."
        if success
        else f"Could not {action} trade.",
        "data": None,
    }
    return jsonify(body), 200 if success else 502


@bp.route("/")
@login_required
def overview():
    """Friends, friend requests and trade requests in one response."""
    return jsonify(SocialService.get_social_page_data(user_store.get(), g.user_id))


@bp.route("/friends")
@login_required
def friends():
    store = user_store.get()
    doc = fetch_current_user_document(store, g.user_id)
    return jsonify(SocialService.derive_friend_list(store, doc))


@bp.route("/friend-requests")
@login_required
def friend_requests():
    store = user_store.get()
    doc = fetch_current_user_document(store, g.user_id)
    return jsonify(SocialService.derive_friend_request_list(store, doc))


@bp.route("/trades")
@login_required
def trades():
    doc = fetch_current_user_document(user_store.get(), g.user_id)
    return jsonify(SocialService.derive_trade_request_list(doc))


@bp.route("/status/<string:user_id>")
@login_required
def friendship_status(user_id):
    """Where ``user_id`` stands relative to the signed-in user."""
    status = SocialService.get_friendship_status(user_store.get(), g.user_id, user_id)
    return jsonify({"user_id": user_id, "status": status})


@bp.route("/friend-requests", methods=["POST"])
@login_required
def send_friend_request():
    """Send a friend request by username."""
    username = _json_body().get("username")
    if not username or not isinstance(username, str):
        raise ValidationError("A username is required.")
    friend_request = SocialService.send_friend_request(
        user_store.get(), g.user_id, username.strip()
    )
    current_app.logger.info(
        f"User {g.user_id} sent a friend request to {friend_request['receiving']}"
    )
    return jsonify(friend_request), 201


@bp.route("/friend-requests/<string:friend_id>/accept", methods=["POST"])
@login_required
def accept_friend_request(friend_id):
    SocialService.accept_friend_request(user_store.get(), g.user_id, friend_id)
    return jsonify({"status": "success"})


@bp.route("/friend-requests/<string:friend_id>/decline", methods=["POST"])
@login_required
def decline_friend_request(friend_id):
    SocialService.decline_friend_request(user_store.get(), g.user_id, friend_id)
    return jsonify({"status": "success"})


@bp.route("/friend-requests/<string:friend_id>/cancel", methods=["POST"])
@login_required
def cancel_friend_request(friend_id):
    SocialService.cancel_friend_request(user_store.get(), g.user_id, friend_id)
    return jsonify({"status": "success"})


@bp.route("/trades", methods=["POST"])
@login_required
def send_trade_request():
    """Offer one of your cards for someone else's."""
    payload = _json_body()
    success = SocialService.send_trade_request(
        user_store.get(),
        g.user_id,
        payload.get("offeredCard"),
        payload.get("requestedCard"),
    )
    return _trade_response(success, "send")


@bp.route("/trades/accept", methods=["POST"])
@login_required
def accept_trade_request():
    success = SocialService.accept_trade_request(
        user_store.get(), g.user_id, _json_body()
    )
    return _trade_response(success, "accept")


@bp.route("/trades/decline", methods=["POST"])
@login_required
def decline_trade_request():
    success = SocialService.decline_trade_request(
        user_store.get(), g.user_id, _json_body()
    )
    return _trade_response(success, "decline")
