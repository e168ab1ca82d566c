"""
Image Upload Service

Stores product images under the public uploads folder and hands back the
path the site serves them from.
"""

import logging
import os
import time

from flask import current_app

from chataru.errors import StorageError

logger = logging.getLogger(__name__)


def has_file(file_storage):
    """True when the multipart field actually carried a file."""
    return file_storage is not None and bool(file_storage.filename)


def image_extension(filename):
    """Lowercase extension (with dot) of the client filename."""
    _, ext = os.path.splitext(filename or '')
    return ext.lower()


def is_allowed_image(filename):
    ext = image_extension(filename)
    return bool(ext) and ext[1:] in current_app.config['ALLOWED_IMAGE_EXTENSIONS']


def _unique_filename(folder, ext):
    stamp = time.time_ns()
    while os.path.exists(os.path.join(folder, f'{stamp}{ext}')):
        stamp += 1
    return f'{stamp}{ext}'


def save_image(file_storage):
    """Persist an uploaded image.

    Args:
        file_storage: werkzeug ``FileStorage`` from ``request.files``

    Returns:
        Public reference such as ``/uploads/1718000000000000000.png``

    Raises:
        StorageError: the file could not be written
    """
    folder = current_app.config['UPLOAD_FOLDER']
    ext = image_extension(file_storage.filename)
    try:
        os.makedirs(folder, exist_ok=True)
        filename = _unique_filename(folder, ext)
        file_storage.save(os.path.join(folder, filename))
    except OSError:
        logger.exception('Could not store uploaded image in %s', folder)
        raise StorageError('Failed to store image.')

    logger.info('Stored product image %s', filename)
    return current_app.config['UPLOAD_URL_PREFIX'].rstrip('/') + '/' + filename
