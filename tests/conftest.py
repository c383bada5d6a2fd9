"""Shared pytest fixtures: an app on in-memory SQLite and users to call it as."""

import pytest
from passlib.context import CryptContext

from film_api import create_app, security
from film_api.config import TestConfig
from film_api.models import db
from film_api.models.user import ADMIN_ROLE, USER_ROLE
from utils import basic_auth


@pytest.fixture(autouse=True)
def _use_plaintext_passwords(monkeypatch):
    monkeypatch.setattr(security, "pwd_context", CryptContext(schemes=["plaintext"]))


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def store(app):
    return app.extensions["store"]


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_headers(store):
    store.add_user("admin", security.get_password_hash("admin-pass"), ADMIN_ROLE)
    return basic_auth("admin", "admin-pass")


@pytest.fixture()
def user_headers(store):
    store.add_user("viewer", security.get_password_hash("viewer-pass"), USER_ROLE)
    return basic_auth("viewer", "viewer-pass")
