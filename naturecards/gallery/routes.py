"""Routes for the gallery blueprint."""

from flask import g, jsonify

from naturecards.auth.decorators import login_required
from naturecards.extensions import user_store

from . import bp
from .services import fetch_current_user_document, fetch_user_document


@bp.route("/me")
@login_required
def my_gallery():
    """Return the signed-in user's document."""
    return jsonify(fetch_current_user_document(user_store.get(), g.user_id))


@bp.route("/<string:user_id>")
@login_required
def user_gallery(user_id):
    """Return another user's document."""
    return jsonify(fetch_user_document(user_store.get(), user_id))
