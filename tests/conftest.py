"""
Pytest configuration for people-api tests.

Sets the environment before the application is imported: logs go to a
temporary directory and the store starts empty.
"""
import os
import tempfile

os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="people-api-logs-")
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["APP_ENV"] = "development"
os.environ["COLLECTION_PATH"] = "/api/users"

import pytest
from fastapi.testclient import TestClient

from people_api.api.main import app, create_app
from people_api.core.config import Settings
from people_api.store import get_person_store, reset_person_store


@pytest.fixture
def store():
    """Fresh, empty global store for each test."""
    reset_person_store()
    yield get_person_store()
    reset_person_store()


@pytest.fixture
def client(store):
    """TestClient over the default app, with lifespan events."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_client(store):
    """Build a client for an app created from custom settings."""
    clients = []

    def _make(raise_server_exceptions: bool = True, **overrides) -> TestClient:
        overrides.setdefault("seed_sample_data", False)
        test_client = TestClient(
            create_app(Settings(**overrides)),
            raise_server_exceptions=raise_server_exceptions,
        )
        test_client.__enter__()
        clients.append(test_client)
        return test_client

    yield _make

    for test_client in clients:
        test_client.__exit__(None, None, None)


@pytest.fixture
def created(client):
    """Create a person through the API and return the response body."""
    def _create(name: str = "Ann", age: int = 30, **extra) -> dict:
        response = client.post("/api/users", json={"name": name, "age": age, **extra})
        assert response.status_code == 200
        return response.json()
    return _create
