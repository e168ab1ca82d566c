"""
Chataru Craft - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from chataru.config import Config
from chataru.errors import ChataruError
from chataru.extensions import admin_auth, db

logger = logging.getLogger(__name__)


def create_app(config_class=Config, session_store=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)
        session_store: Optional ``SessionStore`` backing admin sessions
            (default: a fresh in-memory store)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__, static_folder=None)
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)
    admin_auth.init_app(app, store=session_store)

    # Register blueprints
    from chataru.admin import admin_bp
    from chataru.site import site_bp

    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(site_bp)

    _register_error_handlers(app)

    # Create database tables and the uploads folder
    with app.app_context():
        os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)
        _ensure_sqlite_folder(app.config['SQLALCHEMY_DATABASE_URI'])
        db.create_all()
        logger.info('DB tables ready (enquiries, products)')

    return app


def _ensure_sqlite_folder(uri):
    path = uri[len('sqlite:///'):] if uri.startswith('sqlite:///') else ''
    if path and path != ':memory:' and os.path.isabs(path):
        os.makedirs(os.path.dirname(path), exist_ok=True)


def _register_error_handlers(app):
    """Translate failures into ``{"error": ...}`` JSON responses."""

    @app.errorhandler(ChataruError)
    def handle_app_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        # Non-API paths keep Flask's default HTML error page
        if not request.path.startswith('/api/'):
            return error
        return jsonify(error=error.description), error.code

    @app.errorhandler(413)
    def handle_too_large(error):
        limit_mb = app.config['MAX_CONTENT_LENGTH'] // (1024 * 1024)
        return jsonify(error=f'Upload is larger than {limit_mb} MB.'), 413
