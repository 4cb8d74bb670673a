"""Pytest configuration and fixtures."""

import os

import pytest

# Set test environment before the app modules read it
os.environ.setdefault("JWT_SECRET", "test-secret-0123456789abcdef0123456789")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from app import create_app
from config import Config
from extensions import db


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET = "test-secret-0123456789abcdef0123456789"
    # cheapest bcrypt cost; production default is 10
    BCRYPT_ROUNDS = 4
    LOG_LEVEL = "WARNING"


@pytest.fixture
def app():
    """App bound to a fresh in-memory database."""
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def editor(app):
    return app.extensions["code_ide"]


@pytest.fixture
def sample_user_data():
    return {
        "username": "ana",
        "name": "Ana",
        "email": "Ana@Mail.com",
        "password": "secret1",
    }


@pytest.fixture
def login(editor):
    """Register a user (if needed) and return the login payload with its token."""

    def _login(username="ana", email="ana@mail.com", password="secret1"):
        if editor.credentials.find_by_email(email) is None:
            editor.register({"username": username, "name": username.title(), "email": email, "password": password})
        return editor.authenticate({"email": email, "password": password})

    return _login
