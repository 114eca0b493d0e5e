"""Initialize the Flask app and its extensions."""

import json
import os

import firebase_admin
from firebase_admin import credentials
from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from .core.constants import (
    DEFAULT_BACKEND_URL,
    GALLERY_FETCH_PATH,
    GALLERY_UPDATE_PATH,
    HTTP_TIMEOUT_SECONDS,
)
from .extensions import user_store


def _init_firebase(app):
    """Initialize the Firebase Admin SDK for the Firestore user store."""
    cred = None
    project_id = None

    # First, try to load from environment variable (for production)
    cred_json = os.environ.get("FIREBASE_CREDENTIALS_JSON")
    if cred_json:
        try:
            cred_info = json.loads(cred_json)
            project_id = cred_info.get("project_id")
            cred = credentials.Certificate(cred_info)
        except (json.JSONDecodeError, ValueError) as e:
            app.logger.error(f"Error parsing FIREBASE_CREDENTIALS_JSON: {e}")

    # If env var fails or is not present, try loading from file (for local dev)
    if not cred:
        cred_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)), "firebase_credentials.json"
        )
        if os.path.exists(cred_path):
            try:
                with open(cred_path, "r") as f:
                    project_id = json.load(f).get("project_id")
                cred = credentials.Certificate(cred_path)
            except (json.JSONDecodeError, ValueError) as e:
                app.logger.error(f"Error loading credentials from file: {e}")

    if not cred:
        try:
            cred = credentials.ApplicationDefault()
            project_id = os.environ.get("FIREBASE_PROJECT_ID")
        except Exception as e:
            app.logger.error(
                f"Could not find any valid credentials (env, file, or default): {e}"
            )

    if cred and not firebase_admin._apps:
        options = {"projectId": project_id} if project_id else None
        try:
            firebase_admin.initialize_app(cred, options)
        except ValueError:
            # This can happen if the app is already initialized, which is fine.
            app.logger.info("Firebase app already initialized.")


def create_app(test_config=None):
    """Create and configure an instance of the Flask application."""
    app = Flask(__name__, instance_relative_config=True)

    app.config.from_mapping(
        SECRET_KEY=os.environ.get("SECRET_KEY") or "dev",
        USER_STORE_BACKEND=os.environ.get("USER_STORE_BACKEND") or "http",
        BACKEND_URL=os.environ.get("BACKEND_URL") or DEFAULT_BACKEND_URL,
        HTTP_TIMEOUT=float(os.environ.get("HTTP_TIMEOUT") or HTTP_TIMEOUT_SECONDS),
        GALLERY_FETCH_PATH=os.environ.get("GALLERY_FETCH_PATH") or GALLERY_FETCH_PATH,
        GALLERY_UPDATE_PATH=os.environ.get("GALLERY_UPDATE_PATH")
        or GALLERY_UPDATE_PATH,
    )

    if test_config:
        app.config.update(test_config)

    # Firestore is only needed when it backs the user store.
    if (
        not app.config.get("TESTING")
        and app.config["USER_STORE_BACKEND"].lower() == "firestore"
    ):
        _init_firebase(app)

    user_store.init_app(app)

    # Register blueprints
    from . import auth as auth_bp

    app.register_blueprint(auth_bp.bp)

    from . import gallery as gallery_bp

    app.register_blueprint(gallery_bp.bp)

    from . import social as social_bp

    app.register_blueprint(social_bp.bp)

    from . import error_handlers

    app.register_blueprint(error_handlers.error_handlers_bp)

    @app.route("/health")
    def health_check():
        """Perform a simple health check."""
        return "OK", 200

    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    app.logger.info(
        f"naturecards started with the {app.config['USER_STORE_BACKEND']} user store"
    )
    return app
