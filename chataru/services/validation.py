"""
Request field parsing

Every helper raises ``ValidationError`` with a message the caller can act on.
"""

from chataru.errors import ValidationError


def clean_text(value):
    """Strip a submitted value, mapping None to an empty string."""
    if value is None:
        return ''
    return str(value).strip()


def require_fields(error_message, /, **fields):
    """Return the stripped ``fields``, or raise if any of them is empty."""
    cleaned = {key: clean_text(value) for key, value in fields.items()}
    if not all(cleaned.values()):
        raise ValidationError(error_message)
    return cleaned


def parse_price(value):
    """Parse a price in minor currency units into a non-negative int."""
    text = clean_text(value)
    if not text:
        raise ValidationError('Price is required.')
    try:
        price = int(text)
    except ValueError:
        raise ValidationError('Price must be a whole number.')
    if price < 0:
        raise ValidationError('Price cannot be negative.')
    return price


def parse_page(limit=None, offset=None):
    """Parse optional ``limit``/``offset`` query values.

    Returns:
        (limit, offset) where limit is None for "everything"
    """
    try:
        limit = int(limit) if limit not in (None, '') else None
        offset = int(offset) if offset not in (None, '') else 0
    except (TypeError, ValueError):
        raise ValidationError('limit and offset must be whole numbers.')
    if (limit is not None and limit < 1) or offset < 0:
        raise ValidationError('limit must be positive and offset non-negative.')
    return limit, offset


def request_fields(req):
    """Submitted fields of ``req``: its JSON object body, else its form."""
    data = req.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return req.form
