"""Boundary Protocols: contracts between the HTTP layer and persistence.

Invariants:
    - Routes depend on PersonRepository, never on SQLAlchemy directly
    - Implementation provided by services/person_store.py via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake with the same shape
"""

from datetime import date
from typing import Protocol

from people_api.core.domain_types import PersonId
from people_api.core.person_rules import NewPerson, PersonFields


class PersonLike(Protocol):
    """Structural contract for stored person rows handed back to routes."""
    id: str
    name: str
    phone: str
    birth_date: date


class PersonRepository(Protocol):
    """Contract for person persistence."""
    async def ensure_schema(self) -> None: ...
    async def list_all(self) -> list: ...
    async def get_by_id(self, person_id: PersonId) -> PersonLike | None: ...
    async def create(self, person: NewPerson) -> PersonLike: ...
    async def update(self, person_id: PersonId, fields: PersonFields) -> int: ...
    async def remove(self, person_id: PersonId) -> int: ...
    async def ping(self) -> bool: ...
