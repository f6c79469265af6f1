from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from bites.app import app
from bites.store.client import get_client


@pytest.fixture
def store():
    """A Redis client double: restaurants exist, the Bloom filter is empty."""
    mock = MagicMock()
    mock.exists.return_value = 1
    mock.bf.return_value.exists.return_value = 0
    app.dependency_overrides[get_client] = lambda: mock
    yield mock
    app.dependency_overrides.clear()


@pytest.fixture
def pipe(store):
    return store.pipeline.return_value


@pytest.fixture
def client(store):
    return TestClient(app)
