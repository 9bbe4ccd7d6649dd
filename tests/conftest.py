"""Shared pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.db.store import Store
from storefront.main import create_app

API = "/api/v1"


def build_settings(**overrides) -> Settings:
    values = {
        "API_PREFIX": API,
        "LOG_LEVEL": "WARNING",
        "SEED_DATA": True,
        "STRICT_ORDER_STATUS": False,
        "RATE_LIMIT_MAX_REQUESTS": 0,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def store() -> Store:
    return Store.seeded()


@pytest.fixture
def empty_store() -> Store:
    return Store()


@pytest.fixture
def make_client():
    """Factory for clients over an app built with custom settings."""
    clients = []

    def _make(store=None, **overrides) -> TestClient:
        app = create_app(build_settings(**overrides), store=store)
        client = TestClient(app)
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()


@pytest.fixture
def client(make_client, store) -> TestClient:
    return make_client(store=store)


@pytest.fixture
def empty_client(make_client, empty_store) -> TestClient:
    return make_client(store=empty_store)
