"""Error Hierarchy: typed, categorized exceptions for all People API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST body {"message": ...}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PeopleApiError base: one global handler catches all
    - Body carries only "message": existing clients read nothing else;
      code and category go to the logs instead
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Extra data attached to an error for the logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    person_id: str | None = None


class PeopleApiError(Exception):
    """Base exception for all People API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"message": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class PersonValidationError(PeopleApiError):
    """A request field failed its rule. Message is already localized."""
    def __init__(self, field: str, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class ConstraintViolationError(PeopleApiError):
    """Integrity constraint rejected a write."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONSTRAINT_VIOLATION", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


class PersonAlreadyExistsError(ConstraintViolationError):
    """POST with an id that is already stored."""
    def __init__(self, person_id: str, message: str):
        super().__init__(message, ErrorContext(person_id=person_id))
        self.code = "PERSON_ALREADY_EXISTS"
        self.person_id = person_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PeopleApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
