"""Decorators for the auth blueprint."""

from functools import wraps

from flask import g, session

from naturecards.errors import AuthenticationError


def login_required(f):
    """Reject the request unless a user id is stored in the session.

    The id is exposed to the view as ``g.user_id``.
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        user_id = session.get("user_id")
        if not user_id:
            raise AuthenticationError()
        g.user_id = user_id
        return f(*args, **kwargs)

    return decorated_function
