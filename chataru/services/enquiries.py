"""
Enquiry Service

Public contact-form submissions, listed only on the admin side.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from chataru.errors import StorageError
from chataru.extensions import db
from chataru.models import Enquiry
from chataru.services.validation import clean_text, require_fields

logger = logging.getLogger(__name__)


def submit_enquiry(name, email, message, phone=None, source_page=None):
    """Append an enquiry.

    Raises:
        ValidationError: name, email or message is empty
        StorageError: the row could not be written
    """
    fields = require_fields(
        'Name, email and message are required.',
        name=name, email=email, message=message,
    )
    enquiry = Enquiry(
        name=fields['name'],
        email=fields['email'],
        message=fields['message'],
        phone=clean_text(phone),
        source_page=clean_text(source_page),
    )
    try:
        db.session.add(enquiry)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error saving enquiry')
        raise StorageError('Failed to save enquiry.')

    logger.info('Enquiry %s received from page %r', enquiry.id, enquiry.source_page)
    return enquiry


def list_enquiries(limit=None, offset=0):
    """Return enquiries newest first, optionally one page of them."""
    query = Enquiry.query.order_by(Enquiry.created_at.desc(), Enquiry.id.desc())
    if offset:
        query = query.offset(offset)
    if limit is not None:
        query = query.limit(limit)
    try:
        return query.all()
    except SQLAlchemyError:
        logger.exception('Error fetching enquiries')
        raise StorageError('Failed to fetch enquiries.')
