"""Shared pytest fixtures for the mpocket tests.

MongoDB is replaced by mongomock, injected through the DI container's client
factory, so unique indexes and DuplicateKeyError behave like a real server.
"""

import os

# Required settings must exist before mpocket.main builds its module-level app
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("AUTH_KEY", "test-auth-key")

import mongomock
import pytest
from fastapi.testclient import TestClient

from mpocket.core.config import Settings
from mpocket.di.container import DIContainer, set_container
from mpocket.main import create_application

AUTH_KEY = os.environ["AUTH_KEY"]

HEADERS = {"x-auth-key": AUTH_KEY, "Content-Type": "application/json"}

SAMPLE_RECORD = {
    "mobile": "9990001111",
    "name": "A",
    "dob": "2000-01-01",
    "email": "a@x.com",
    "employeeType": "staff",
    "pancard": "ABCDE1234F",
}


class CountingClientFactory:
    """Client factory returning one shared mongomock client and counting calls."""

    def __init__(self, client):
        self.client = client
        self.calls = 0

    def __call__(self, uri, **kwargs):
        self.calls += 1
        return self.client


@pytest.fixture
def settings():
    """Settings built from the test environment."""
    return Settings()


@pytest.fixture
def mongo_client():
    """In-memory MongoDB client."""
    return mongomock.MongoClient()


@pytest.fixture
def client_factory(mongo_client):
    return CountingClientFactory(mongo_client)


@pytest.fixture
def records_collection(mongo_client, settings):
    """The collection the service writes to."""
    return mongo_client[settings.mongo_database_name][settings.records_collection]


@pytest.fixture
def container(settings, client_factory):
    """DI container wired to mongomock."""
    di = DIContainer(settings, client_factory=client_factory)
    yield di
    set_container(None)


@pytest.fixture
def app(settings, container):
    return create_application(settings=settings, container=container)


@pytest.fixture
def client(app):
    """FastAPI test client; entering it runs the startup connect."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
