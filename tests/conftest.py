import pytest

from livemate import create_app
from livemate.extensions import db
from livemate.store import InMemoryPostStore
from config import Config


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    AUTO_CREATE_DB = False
    POST_STORE_BACKEND = "sqlalchemy"
    SOCKETIO_ASYNC_MODE = "threading"
    SITE_URL = "https://livemate.example/"


@pytest.fixture
def app():
    app = create_app(TestConfig)

    with app.app_context():
        db.drop_all()
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def memory_store():
    return InMemoryPostStore()


@pytest.fixture
def make_post(client):
    def _make_post(**overrides):
        payload = {
            "title": "Summer Sonic",
            "date": "2026-08-15",
            "area": "Makuhari Messe",
            "comment": "Looking for someone to go with",
            "contact_handle": "nagi_nyan",
        }
        payload.update(overrides)
        return client.post("/api/posts", json=payload)
    return _make_post
