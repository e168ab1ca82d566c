"""
Admin Decorator

Admin authentication is token-based and fully separated from the
public site surface.
"""

from functools import wraps
from flask import current_app, g, request, session

SESSION_TOKEN_KEY = 'admin_token'


def current_admin_auth():
    """The authenticator bound to the active app by ``init_app``."""
    return current_app.extensions['admin_auth']


def token_from_request():
    """Return the admin token carried by the request, if any.

    A bearer ``Authorization`` header wins over the session cookie.
    """
    header = request.headers.get('Authorization', '')
    scheme, _, value = header.partition(' ')
    if scheme.lower() == 'bearer' and value.strip():
        return value.strip()
    return session.get(SESSION_TOKEN_KEY)


def admin_required(f):
    """Decorator to ensure the request carries a live admin session token.

    Raises ``Unauthorized`` (rendered as a 401 JSON body) otherwise. The
    validated session is exposed as ``g.admin_session``.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        g.admin_session = current_admin_auth().validate(token_from_request())
        return f(*args, **kwargs)
    return wrapper
