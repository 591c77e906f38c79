"""Shared pytest fixtures: an app on a private in-memory database."""
from uuid import uuid4

import pytest

from accountdemo import create_app
from accountdemo.config import Settings
from accountdemo.connection import memory_url


@pytest.fixture
def settings():
    """Settings pointing at a fresh in-memory SQLite database."""
    return Settings(url=memory_url(f"test_{uuid4().hex[:8]}"))


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.config["TESTING"] = True
    yield app
    app.extensions["engine"].dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def service(app):
    return app.extensions["account_service"]
