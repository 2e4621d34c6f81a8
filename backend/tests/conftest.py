"""Root conftest: shared test configuration and database fixtures.

Invariants:
    - Environment pinned before any people_api import (get_settings is cached)
    - Every test gets a fresh in-memory SQLite database with the people table provisioned

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for CRUD semantics
      (PostgreSQL-specific features are not used by the store)
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOCALE", "pt-BR")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from people_api.core.domain_types import PersonId  # noqa: E402
from people_api.core.person_rules import NewPerson, parse_birth_date  # noqa: E402
from people_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from people_api.services.person_store import PersonStore  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_manager(test_engine):
    return DatabaseSessionManager(test_engine)


@pytest.fixture
async def store(db_manager):
    """PersonStore with the schema already provisioned."""
    store = PersonStore(db_manager)
    await store.ensure_schema()
    return store


@pytest.fixture
def make_person():
    """Factory for validated NewPerson values with sensible defaults."""
    return _make_person


def _make_person(
    person_id: str = "12345678901",
    name: str = "Maria Silva",
    phone: str = "11999990000",
    birth_date: str = "1990-5-17",
) -> NewPerson:
    return NewPerson(
        id=PersonId(person_id),
        name=name,
        phone=phone,
        birth_date=parse_birth_date(birth_date),
    )
