from flask import current_app, jsonify, request, session

from naturecards.errors import ValidationError
from naturecards.extensions import user_store
from naturecards.gallery.services import fetch_user_document

from . import bp


@bp.route("/session", methods=["POST"])
def session_login():
    """Start a session for the user named in the body.

    The presentation layer calls this after its own sign-in flow; the id is
    trusted as given.
    """
    payload = request.get_json(silent=True) or {}
    user_id = payload.get("user_id")
    if not user_id or not isinstance(user_id, str):
        raise ValidationError("A user_id is required.")

    user = fetch_user_document(user_store.get(), user_id)
    session.clear()
    session["user_id"] = user["id"]
    current_app.logger.info(f"Session started for user {user['id']}")
    return jsonify({"status": "success", "user_id": user["id"]})


@bp.route("/session", methods=["DELETE"])
def session_logout():
    """End the current session."""
    session.clear()
    return jsonify({"status": "success"})
