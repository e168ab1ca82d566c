"""
Site Blueprint

Public surface: health check, catalogue listing, the enquiry form and the
static single-page fallback.
"""

from flask import Blueprint

site_bp = Blueprint('site', __name__)

from chataru.site import routes  # noqa: E402, F401
