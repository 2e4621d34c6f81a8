"""Person Schemas: Pydantic models for the /people API boundary.

Invariants:
    - Request models accept any JSON value per field; rules live in core/person_rules.py
      so the first failing field decides the single 400 message
    - birthDate is the wire name, birth_date the Python name (same for createdAt/updatedAt)
    - PersonResponse.birthDate is always "YYYY-M-D"

Design Decisions:
    - Any-typed request fields over str: Pydantic would answer a numeric id with its
      own multi-error envelope instead of "CPF inválido"
    - Unknown keys ignored: an "id" inside a PUT body has no effect (id is immutable)
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from people_api.core.person_rules import format_birth_date
from people_api.core.repository_protocols import PersonLike


class PersonUpdate(BaseModel):
    """PUT /people/{id} body."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Any = None
    phone: Any = None
    birth_date: Any = Field(None, alias="birthDate")


class PersonCreate(PersonUpdate):
    """POST /people body."""
    id: Any = None


class PersonResponse(BaseModel):
    """Public representation of a stored person."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    phone: str
    birth_date: str = Field(alias="birthDate")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")

    @classmethod
    def from_row(cls, person: PersonLike) -> "PersonResponse":
        return cls(
            id=person.id,
            name=person.name,
            phone=person.phone,
            birth_date=format_birth_date(person.birth_date),
            created_at=getattr(person, "created_at", None),
            updated_at=getattr(person, "updated_at", None),
        )
