"""Fixtures for HTTP-level tests."""

from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from main import create_app



@pytest.fixture
def app():
    """Application without lifespan: no database is opened."""
    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def user_id():
    return uuid4()


@pytest.fixture
def buyer_headers(user_id):
    return {"X-User-Id": str(user_id)}


@pytest.fixture
def admin_headers(user_id):
    return {"X-User-Id": str(user_id), "X-User-Is-Admin": "true"}
