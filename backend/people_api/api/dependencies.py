"""Route Dependencies: injectable accessors for per-process resources.

Invariants:
    - The store is built by the lifespan and read from app.state, never imported as a global
    - Tests swap the store with app.dependency_overrides[get_person_store]
"""

from fastapi import Request

from people_api.config import get_settings
from people_api.core.domain_types import Locale
from people_api.core.messages import resolve_locale
from people_api.core.repository_protocols import PersonRepository


def get_person_store(request: Request) -> PersonRepository:
    store = getattr(request.app.state, "person_store", None)
    if store is None:
        raise RuntimeError("Person store not initialized")
    return store


def get_locale() -> Locale:
    return resolve_locale(get_settings().locale)
