"""Root conftest — shared fixtures for core and API tests.

Invariants:
    - Every test gets a fresh, empty UserStore
    - get_user_store dependency overridden on the shared app, cleared after each test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from user_api.api.dependencies import get_user_store
from user_api.core.user_store import UserStore
from user_api.core.validate_user import UserFieldRules
from user_api.main import app


@pytest.fixture
def store():
    return UserStore()


@pytest.fixture
def rules():
    return UserFieldRules()


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_user_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def seed_users(store):
    """John and Jane, ids 1 and 2."""
    return [
        store.create("John Doe", "john@example.com"),
        store.create("Jane", "jane@example.com"),
    ]
