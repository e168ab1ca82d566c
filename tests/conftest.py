import io

import pytest

from chataru import create_app
from chataru.config import TestConfig
from chataru.extensions import db

ADMIN_PASSWORD = TestConfig.ADMIN_PASSWORD


def make_config(tmp_path, **overrides):
    """TestConfig pointed at a throwaway database and public folder."""
    attrs = {
        'SQLALCHEMY_DATABASE_URI': 'sqlite:///' + str(tmp_path / 'test.db'),
        'PUBLIC_FOLDER': str(tmp_path / 'public'),
        'UPLOAD_FOLDER': str(tmp_path / 'public' / 'uploads'),
    }
    attrs.update(overrides)
    return type('PerTestConfig', (TestConfig,), attrs)


@pytest.fixture()
def app(tmp_path):
    app = create_app(make_config(tmp_path))
    with app.app_context():
        yield app
        db.session.remove()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_client(app):
    client = app.test_client()
    r = client.post('/api/admin/login', json={'password': ADMIN_PASSWORD})
    assert r.status_code == 200
    return client


def image(name='mug.png', data=b'\x89PNG fake image bytes'):
    """Multipart file tuple for the Flask test client."""
    return (io.BytesIO(data), name)
