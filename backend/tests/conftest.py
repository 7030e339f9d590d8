"""Pytest fixtures building a fresh application and schema per test.

Each test gets its own app bound to an in-memory SQLite database; tables are
created on entry and dropped on exit so no state leaks between cases.
"""

from __future__ import annotations

import os

import pytest
from product_api.core.config import TestingConfig
from product_api.core.extensions import db as _db  # Flask-SQLAlchemy instance
from product_api.core.extensions import get_token_provider
from product_api.factory import create_app  # application factory under test


@pytest.fixture()
def app():
    """Create a Flask application configured for testing.

    Yields
    ------
    flask.Flask
        Application with :class:`TestingConfig` applied, inside an active
        application context and with all tables created.
    """
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    os.environ.pop("TEST_DATABASE_URL", None)
    app = create_app(TestingConfig)
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def db(app):
    """Return the database extension bound to the testing application."""
    return _db


@pytest.fixture()
def session(db):
    """Return the Flask-scoped SQLAlchemy session used by the app code."""
    return db.session


@pytest.fixture()
def client(app):
    """Return a Flask test client."""
    return app.test_client()


@pytest.fixture()
def token_provider(app):
    """Return the token provider registered on the application."""
    return get_token_provider()


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


# -- Hook up Factory Boy to the Flask-scoped session ---------------------------
@pytest.fixture(autouse=True)
def _factories_session(request):
    """Wire Factory Boy's session helper for tests that use the database."""
    from tests.factories import SQLAlchemySession

    if "app" not in request.fixturenames:
        yield
        return
    SQLAlchemySession.set(request.getfixturevalue("session"))
    yield
    SQLAlchemySession.set(None)
