"""Person Rules: pure validation and birth-date handling for person requests.

Invariants:
    - Checks run in a fixed order and the first failure wins:
      id (create only) → name → phone → birthDate
    - A value of the wrong JSON type fails the same check as an empty value
    - Birth dates travel as "YYYY-M-D" strings (no zero padding) and are stored as date
    - Updates move the birth date one calendar day forward, with month/year rollover

Design Decisions:
    - Pure functions returning frozen dataclasses: routes stay thin, tests need no DB
    - fullmatch with re.ASCII: "$" would accept a trailing newline and \\d would accept
      non-ASCII digits, neither of which the wire format allows
    - Pattern match alone is not enough for a DATE column: "2020-13-1" is rejected too
"""

import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any

from people_api.core.domain_types import CPF_LENGTH, Locale, PersonField, PersonId
from people_api.core.errors import PersonValidationError
from people_api.core.messages import invalid_field_message

BIRTH_DATE_PATTERN = re.compile(r"\d+-\d+-\d+", re.ASCII)
UPDATE_BIRTH_DATE_OFFSET = timedelta(days=1)


@dataclass(frozen=True)
class PersonFields:
    """Mutable columns of a person, already validated."""
    name: str
    phone: str
    birth_date: date


@dataclass(frozen=True)
class NewPerson(PersonFields):
    """A validated person ready to be inserted."""
    id: PersonId


# ─── Field checks ────────────────────────────────────────────────

def is_valid_cpf(value: Any) -> bool:
    return isinstance(value, str) and len(value) == CPF_LENGTH


def is_filled(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def parse_birth_date(value: Any) -> date | None:
    """Parse "YYYY-M-D" into a date, or None if the text is not a real date."""
    if not isinstance(value, str) or not BIRTH_DATE_PATTERN.fullmatch(value):
        return None
    try:
        year, month, day = (int(part) for part in value.split("-"))
        return date(year, month, day)
    except ValueError:
        return None


def format_birth_date(value: date) -> str:
    return f"{value.year}-{value.month}-{value.day}"


def shift_birth_date(value: date) -> date:
    """Apply the update offset. Raises OverflowError past date.max."""
    return value + UPDATE_BIRTH_DATE_OFFSET


# ─── Request validation ──────────────────────────────────────────

def _reject(field: PersonField, locale: Locale) -> PersonValidationError:
    return PersonValidationError(
        field.value, invalid_field_message(locale, field),
    )


def _validate_fields(
    name: Any, phone: Any, birth_date: Any, locale: Locale,
) -> PersonFields:
    if not is_filled(name):
        raise _reject(PersonField.NAME, locale)
    if not is_filled(phone):
        raise _reject(PersonField.PHONE, locale)
    parsed = parse_birth_date(birth_date)
    if parsed is None:
        raise _reject(PersonField.BIRTH_DATE, locale)
    return PersonFields(name=name, phone=phone, birth_date=parsed)


def validate_new_person(
    person_id: Any, name: Any, phone: Any, birth_date: Any,
    locale: Locale = Locale.PT_BR,
) -> NewPerson:
    """Validate a create request. Raises PersonValidationError on the first bad field."""
    if not is_valid_cpf(person_id):
        raise _reject(PersonField.ID, locale)
    fields = _validate_fields(name, phone, birth_date, locale)
    return NewPerson(
        id=PersonId(person_id),
        name=fields.name,
        phone=fields.phone,
        birth_date=fields.birth_date,
    )


def validate_person_update(
    name: Any, phone: Any, birth_date: Any,
    locale: Locale = Locale.PT_BR,
) -> PersonFields:
    """Validate an update request and apply the birth-date offset.

    The id is taken from the path and is not re-validated.
    """
    fields = _validate_fields(name, phone, birth_date, locale)
    try:
        shifted = shift_birth_date(fields.birth_date)
    except OverflowError:
        raise _reject(PersonField.BIRTH_DATE, locale)
    return PersonFields(name=fields.name, phone=fields.phone, birth_date=shifted)
