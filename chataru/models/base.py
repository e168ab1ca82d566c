"""
Shared column helpers
"""

from datetime import datetime, timezone


def utcnow():
    return datetime.now(timezone.utc)


def isoformat(value):
    """Render a stored timestamp as ISO-8601, treating naive values as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()
