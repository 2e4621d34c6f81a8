"""People Routes: CRUD endpoints over the person store.

Invariants:
    - Each route is one request/response transaction with at most one store call
    - Validation runs before the store is touched; the first failing field wins
    - POST returns the created person; PUT and DELETE return the affected row count
    - GET by id returns JSON null (200) for an unknown id, not 404

Design Decisions:
    - Store injected through Depends(get_person_store): no module-level handle
    - Duplicate id translated to 409 here, where the request locale is known
"""

import logging

from fastapi import APIRouter, Depends

from people_api.api.dependencies import get_locale, get_person_store
from people_api.core.domain_types import Locale, PersonId
from people_api.core.errors import ConstraintViolationError, PersonAlreadyExistsError
from people_api.core.messages import already_exists_message
from people_api.core.person_rules import validate_new_person, validate_person_update
from people_api.core.repository_protocols import PersonRepository
from people_api.schemas.person import PersonCreate, PersonResponse, PersonUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/people", tags=["people"])


@router.get("", response_model=list[PersonResponse])
async def list_people(store: PersonRepository = Depends(get_person_store)):
    """List every stored person."""
    people = await store.list_all()
    return [PersonResponse.from_row(p) for p in people]


@router.get("/{person_id}", response_model=PersonResponse | None)
async def get_person(
    person_id: str, store: PersonRepository = Depends(get_person_store),
):
    """Get one person, or null when the id is unknown."""
    person = await store.get_by_id(PersonId(person_id))
    if person is None:
        return None
    return PersonResponse.from_row(person)


@router.post("", response_model=PersonResponse)
async def create_person(
    body: PersonCreate,
    store: PersonRepository = Depends(get_person_store),
    locale: Locale = Depends(get_locale),
):
    """Create a person. 400 on the first invalid field, 409 on a taken id."""
    new_person = validate_new_person(
        body.id, body.name, body.phone, body.birth_date, locale,
    )
    try:
        person = await store.create(new_person)
    except ConstraintViolationError as e:
        raise PersonAlreadyExistsError(
            new_person.id, already_exists_message(locale),
        ) from e
    return PersonResponse.from_row(person)


@router.put("/{person_id}", response_model=int)
async def update_person(
    person_id: str,
    body: PersonUpdate,
    store: PersonRepository = Depends(get_person_store),
    locale: Locale = Depends(get_locale),
):
    """Update name/phone/birthDate. The stored birth date is one day after the sent one."""
    fields = validate_person_update(
        body.name, body.phone, body.birth_date, locale,
    )
    return await store.update(PersonId(person_id), fields)


@router.delete("/{person_id}", response_model=int)
async def delete_person(
    person_id: str, store: PersonRepository = Depends(get_person_store),
):
    """Delete a person. Unknown ids yield 0."""
    return await store.remove(PersonId(person_id))
