"""Shared fixtures: a fresh store and API client per test."""

import pytest
from fastapi.testclient import TestClient

from inventory.main import create_app
from inventory.services.inventory_service import InventoryStore


@pytest.fixture
def store():
    """Store seeded with the five default products."""
    return InventoryStore()


@pytest.fixture
def empty_store():
    return InventoryStore(products=[])


@pytest.fixture
def client(store):
    return TestClient(create_app(store))
