"""
Flask Extensions

Admin authentication is token-based and bound to the app like any other
extension, so the session store behind it can be swapped at init time.
"""

from flask_sqlalchemy import SQLAlchemy
from chataru.services.sessions import AdminAuthenticator

# Database instance
db = SQLAlchemy()

# Admin session authenticator (issue / validate / revoke)
admin_auth = AdminAuthenticator()
