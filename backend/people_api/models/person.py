"""Person ORM: the single persisted entity, keyed by CPF.

Invariants:
    - id is the 11-character CPF, primary key, never updated
    - name, phone, birth_date are non-nullable
    - updated_at is refreshed on every UPDATE statement, including bulk updates

Design Decisions:
    - String(11) primary key over surrogate integer: the CPF is the public identity
    - Date column for birth_date: the wire encoding lives in core/person_rules.py
    - created_at/updated_at exposed as createdAt/updatedAt: existing clients read both
"""

from datetime import date, datetime, timezone

from sqlalchemy import Date, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from people_api.core.domain_types import CPF_LENGTH
from people_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Person(Base):
    """Person record."""
    __tablename__ = "people"

    id: Mapped[str] = mapped_column(
        String(CPF_LENGTH), primary_key=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(255), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )
