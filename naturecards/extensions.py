"""Flask extensions for the application."""

from flask import current_app


class UserStore:
    """Holds the user document store an application talks to."""

    extension_name = "naturecards.user_store"

    def init_app(self, app):
        """Build the store from config unless one was injected as USER_STORE."""
        from .gallery.stores import build_user_store

        store = app.config.get("USER_STORE") or build_user_store(app.config)
        app.extensions[self.extension_name] = store

    def get(self):
        """Return the store of the current application."""
        return current_app.extensions[self.extension_name]


user_store = UserStore()
