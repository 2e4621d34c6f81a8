"""Person Store: persistence for person records over one SQLAlchemy table.

Invariants:
    - Every operation opens its own session from DatabaseSessionManager (auto-rollback)
    - update/remove report affected row counts; a missing id is 0, never an error
    - create commits immediately; a duplicate id surfaces as ConstraintViolationError
    - ensure_schema is idempotent and only touches the people table

Design Decisions:
    - Store is locale-free: translating a conflict into a user message is the route's job
    - Bulk UPDATE/DELETE statements over load-then-mutate: one round trip, rowcount for free
    - list_all ordered by primary key: deterministic "store-default" order on every backend
"""

import logging

from sqlalchemy import delete, select, update

from people_api.core.domain_types import PersonId
from people_api.core.person_rules import NewPerson, PersonFields
from people_api.db.base import Base
from people_api.infrastructure.database import DatabaseSessionManager
from people_api.models.person import Person

logger = logging.getLogger(__name__)


class PersonStore:
    """CRUD over the people table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def ensure_schema(self) -> None:
        """Create the people table if it does not exist."""
        async with self._db.engine.begin() as conn:
            await conn.run_sync(
                Base.metadata.create_all, tables=[Person.__table__],
            )
        logger.info("Schema ensured for table 'people'")

    async def list_all(self) -> list[Person]:
        async with self._db.session() as db:
            result = await db.execute(select(Person).order_by(Person.id))
            return list(result.scalars().all())

    async def get_by_id(self, person_id: PersonId) -> Person | None:
        async with self._db.session() as db:
            return await db.get(Person, person_id)

    async def create(self, person: NewPerson) -> Person:
        """Insert a new person and return the stored row."""
        async with self._db.session() as db:
            row = Person(
                id=person.id,
                name=person.name,
                phone=person.phone,
                birth_date=person.birth_date,
            )
            db.add(row)
            await db.commit()
            logger.info("Person created", extra={"person_id": person.id})
            return row

    async def update(self, person_id: PersonId, fields: PersonFields) -> int:
        """Overwrite name/phone/birth_date. Returns affected row count."""
        async with self._db.session() as db:
            result = await db.execute(
                update(Person)
                .where(Person.id == person_id)
                .values(
                    name=fields.name,
                    phone=fields.phone,
                    birth_date=fields.birth_date,
                )
                .execution_options(synchronize_session=False),
            )
            await db.commit()
            affected = result.rowcount
        logger.info(
            "Person update applied",
            extra={"person_id": person_id, "affected": affected},
        )
        return affected

    async def remove(self, person_id: PersonId) -> int:
        """Delete by id. Returns affected row count."""
        async with self._db.session() as db:
            result = await db.execute(
                delete(Person)
                .where(Person.id == person_id)
                .execution_options(synchronize_session=False),
            )
            await db.commit()
            affected = result.rowcount
        logger.info(
            "Person delete applied",
            extra={"person_id": person_id, "affected": affected},
        )
        return affected

    async def ping(self) -> bool:
        return await self._db.health_check()
