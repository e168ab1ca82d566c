"""
Admin Blueprint

Admin authentication is token-based: login exchanges the configured
secret for a session token which every other admin route checks.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from chataru.admin import routes  # noqa: E402, F401
