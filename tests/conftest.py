"""Shared fixtures for the Social Media API test suite.

Every test runs against a fresh in-memory SQLite database: the shared
connection is dropped, ``settings.database_url`` is pointed at
``:memory:`` and the migrations are applied again.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from social_media_api.app.core import db
from social_media_api.app.core.config import settings
from social_media_api.app.main import create_app


@pytest.fixture(autouse=True)
def database(monkeypatch: pytest.MonkeyPatch):
    """Provide an empty, migrated in-memory database."""
    db.close_connection()
    monkeypatch.setattr(settings, "database_url", ":memory:")
    db.init_db()
    yield db.get_connection()
    db.close_connection()


@pytest.fixture
def test_app() -> FastAPI:
    return create_app()


@pytest.fixture
def client(test_app: FastAPI) -> TestClient:
    """Create a TestClient for the application."""
    with TestClient(test_app) as test_client:
        yield test_client


@pytest.fixture
def registered_account(client: TestClient) -> dict:
    """Register ``sam`` / ``pass1`` through the API and return the body."""
    response = client.post("/register", json={"username": "sam", "password": "pass1"})
    assert response.status_code == 200
    return response.json()
