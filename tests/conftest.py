"""Shared fixtures.

Every test gets its own application bound to a fresh in-memory SQLite
database with the ``clients`` and ``contracts`` tables created.
"""
from __future__ import annotations

import pytest

from crm_api import create_app, db

TEST_DATABASE_URI = "sqlite://"


def make_app(**overrides):
    app = create_app(
        test_config={"TESTING": True, "SQLALCHEMY_DATABASE_URI": TEST_DATABASE_URI, **overrides}
    )
    with app.app_context():
        db.create_all()
    return app


@pytest.fixture
def app():
    app = make_app()
    yield app
    with app.app_context():
        db.drop_all()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def gateway(app):
    with app.app_context():
        yield app.extensions["gateway"]
