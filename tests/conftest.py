import asyncio

import pytest
from fastapi.testclient import TestClient

from bloglist.api.app import create_app
from bloglist.config import Settings
from bloglist.storage import Collections, InMemoryDocumentStore

from helpers import INITIAL_BLOGS


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def settings():
    """Fast hashing, fixed secret, no external services."""
    return Settings(
        jwt_secret_key="test-secret",
        password_hash_rounds=4,
        database_url="memory://",
        sentry_dsn="",
    )


@pytest.fixture
def store():
    """Fresh store seeded with the initial (ownerless) blogs."""
    store = InMemoryDocumentStore()
    for blog in INITIAL_BLOGS:
        asyncio.run(store.create(Collections.BLOGS, blog))
    return store


@pytest.fixture
def client(settings, store):
    app = create_app(settings=settings, storage=store)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def register(client):
    """Register an account through the API; returns the response body."""
    def _register(username="alice123", name="Alice Johnson", password="alicePassword"):
        response = client.post(
            "/api/users",
            json={"username": username, "name": name, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _register


@pytest.fixture
def token_for(client, register):
    """Register a fresh account and log it in; returns the token."""
    def _token_for(username="alice123", name="Alice Johnson", password="alicePassword"):
        register(username, name, password)
        response = client.post("/api/login", json={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return response.json()["token"]
    return _token_for


@pytest.fixture
def memory_store():
    """Empty store for async service/storage tests."""
    return InMemoryDocumentStore()
