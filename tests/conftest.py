from unittest.mock import MagicMock

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from config.dataBase import get_todo_collection
from main import app


@pytest.fixture
def collection():
    """Mock pymongo collection handed to every todo route."""
    return MagicMock()


@pytest.fixture
def client(collection):
    """Create a test client whose routes talk to the mock collection."""
    app.dependency_overrides[get_todo_collection] = lambda: collection
    # not used as a context manager, so the startup ping never runs
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def async_client(collection):
    """Async client sharing the test's event loop, for concurrency checks."""
    app.dependency_overrides[get_todo_collection] = lambda: collection
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
