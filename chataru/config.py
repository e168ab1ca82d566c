"""
Configuration settings for the Chataru Craft site backend
"""
import os


def _database_url():
    url = os.environ.get('DATABASE_URL')
    if not url:
        return 'sqlite:///' + os.path.join(Config.basedir, 'instance', 'chataru.db')
    # Hosted Postgres providers still hand out the old scheme
    if url.startswith('postgres://'):
        url = 'postgresql://' + url[len('postgres://'):]
    return url


def _engine_options(url):
    if not url.startswith('postgresql'):
        return {}
    if os.environ.get('DATABASE_SSL', '').lower() == 'false':
        return {}
    return {'connect_args': {'sslmode': 'require'}}


class Config:
    """Flask application configuration"""

    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))

    # Flask secret key for the signed session cookie
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Database configuration
    SQLALCHEMY_DATABASE_URI = None
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Admin secret. Deliberately no fallback: an unset secret must be
    # reported as a deployment fault, not as a wrong password.
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or None
    # Seconds an admin session stays valid; 0 disables expiry
    ADMIN_SESSION_TTL = int(os.environ.get('ADMIN_SESSION_TTL') or 8 * 60 * 60)

    # Static site and uploads
    PUBLIC_FOLDER = os.environ.get('PUBLIC_FOLDER') or os.path.join(basedir, 'public')
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or os.path.join(PUBLIC_FOLDER, 'uploads')
    UPLOAD_URL_PREFIX = '/uploads'
    ALLOWED_IMAGE_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}
    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_UPLOAD_MB') or 5) * 1024 * 1024

    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    PORT = int(os.environ.get('PORT') or 3000)


Config.SQLALCHEMY_DATABASE_URI = _database_url()
Config.SQLALCHEMY_ENGINE_OPTIONS = _engine_options(Config.SQLALCHEMY_DATABASE_URI)


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    ADMIN_PASSWORD = 'letmein'
    ADMIN_SESSION_TTL = 60 * 60
