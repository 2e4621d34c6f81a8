"""API test fixtures: FastAPI test client wired to the per-test store.

Invariants:
    - get_person_store overridden with the fixture store (lifespan never runs)
    - Overrides cleared after every test

Design Decisions:
    - httpx AsyncClient over ASGITransport: same event loop as the async fixtures
    - failing_client disables raise_app_exceptions so the catch-all 500 response is observable
"""

import pytest
from httpx import ASGITransport, AsyncClient

from people_api.api.dependencies import get_person_store
from people_api.core.errors import DatabaseError
from people_api.main import app


@pytest.fixture
async def client(store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_person_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def failing_client():
    """Client whose store fails on every call: unexpected errors and database outages."""

    class _BrokenStore:
        async def list_all(self):
            raise RuntimeError("boom: internal detail")

        async def get_by_id(self, person_id):
            raise DatabaseError("connection refused by 10.0.0.5", "execute")

        async def ping(self):
            return False

    app.dependency_overrides[get_person_store] = lambda: _BrokenStore()

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
