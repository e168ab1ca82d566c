"""
Catalogue Service

Product CRUD. Reads are public; writes are only reached through the
admin blueprint. Validation always runs before anything touches disk or
the database.
"""

import enum
import logging

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from chataru.errors import StorageError, ValidationError
from chataru.extensions import db
from chataru.models import Product
from chataru.services.uploads import has_file, is_allowed_image, save_image
from chataru.services.validation import clean_text, parse_price, require_fields

logger = logging.getLogger(__name__)


class WriteOutcome(enum.Enum):
    """Result of an update or delete addressed by id."""
    APPLIED = 'applied'
    NOT_FOUND = 'not_found'


def _check_image(image):
    if not is_allowed_image(image.filename):
        allowed = ', '.join(sorted(current_app.config['ALLOWED_IMAGE_EXTENSIONS']))
        raise ValidationError(f'Image must be one of: {allowed}.')


def _commit(failure_message):
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception(failure_message)
        raise StorageError(failure_message)


def list_products(limit=None, offset=0):
    """Return products newest first, optionally one page of them."""
    query = Product.query.order_by(Product.created_at.desc(), Product.id.desc())
    if offset:
        query = query.offset(offset)
    if limit is not None:
        query = query.limit(limit)
    try:
        return query.all()
    except SQLAlchemyError:
        logger.exception('Error fetching products')
        raise StorageError('Failed to fetch products.')


def create_product(name, price, description=None, image=None):
    """Store the image, then insert the product row that references it.

    Raises:
        ValidationError: name, price or image missing or malformed
        StorageError: the image or the row could not be written
    """
    if not has_file(image):
        raise ValidationError('Name, price and image are required.')
    fields = require_fields('Name, price and image are required.', name=name, price=price)
    price = parse_price(fields['price'])
    _check_image(image)

    image_ref = save_image(image)
    product = Product(
        name=fields['name'],
        price=price,
        description=clean_text(description),
        image=image_ref,
    )
    db.session.add(product)
    _commit('Failed to create product.')
    logger.info('Created product %s (%s)', product.id, product.name)
    return product


def update_product(product_id, name, price, description=None, image=None):
    """Replace a product's editable fields.

    ``name`` and ``price`` are required on every call. Without ``image`` the
    stored reference is kept. The superseded file stays on disk.

    Returns:
        WriteOutcome.APPLIED, or WriteOutcome.NOT_FOUND for an unknown id
    """
    fields = require_fields('Name and price are required.', name=name, price=price)
    price = parse_price(fields['price'])
    new_image = has_file(image)
    if new_image:
        _check_image(image)

    try:
        product = db.session.get(Product, product_id)
    except SQLAlchemyError:
        logger.exception('Error loading product %s', product_id)
        raise StorageError('Failed to update product.')
    if product is None:
        logger.info('Update of missing product %s ignored', product_id)
        return WriteOutcome.NOT_FOUND

    if new_image:
        product.image = save_image(image)
    product.name = fields['name']
    product.price = price
    product.description = clean_text(description)
    _commit('Failed to update product.')
    logger.info('Updated product %s', product_id)
    return WriteOutcome.APPLIED


def delete_product(product_id):
    """Delete a product row. Its image file is left in place.

    Returns:
        WriteOutcome.APPLIED, or WriteOutcome.NOT_FOUND for an unknown id
    """
    try:
        deleted = Product.query.filter_by(id=product_id).delete()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception('Error deleting product %s', product_id)
        raise StorageError('Failed to delete product.')
    _commit('Failed to delete product.')

    if not deleted:
        logger.info('Delete of missing product %s ignored', product_id)
        return WriteOutcome.NOT_FOUND
    logger.info('Deleted product %s', product_id)
    return WriteOutcome.APPLIED
