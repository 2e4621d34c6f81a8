"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - PersonId wraps the 11-character CPF string, never an int (leading zeros matter)
    - All valid locales encoded as an Enum, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PersonId = NewType("PersonId", str)

CPF_LENGTH = 11


# ─── Enums ───────────────────────────────────────────────────────

class Locale(str, Enum):
    """Locales with a translated validation message table."""
    PT_BR = "pt-BR"
    EN = "en"


class PersonField(str, Enum):
    """Request fields that carry a validation rule, in check order."""
    ID = "id"
    NAME = "name"
    PHONE = "phone"
    BIRTH_DATE = "birthDate"
