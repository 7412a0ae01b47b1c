from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from salesboard.data.store import MemoryStore
from salesboard.main import create_app
from tests.fakes import CATALOG


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore(CATALOG)


@pytest.fixture
def client(store: MemoryStore):
    with TestClient(create_app(store)) as test_client:
        yield test_client
