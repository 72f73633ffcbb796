"""
Pytest fixtures for the items API tests.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.storage import ItemStore


@pytest.fixture
def store():
    """A freshly seeded store, isolated per test."""
    return ItemStore()


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
def client(app):
    return TestClient(app)
