"""Error Handlers: global exception handlers for the People API.

Invariants:
    - PeopleApiError → its http_status with {"message": ...}
    - DatabaseError bodies carry only a localized "unavailable" message; the
      operation detail stays in the log
    - RequestValidationError (body is not a JSON object) → 400 {"message": ...}
    - Exception (catch-all) → 500 {"message": ...}, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (PeopleApiError), validation (Pydantic), catch-all (Exception)
    - Field-level Pydantic details are logged, not returned: the API contract is one message
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from people_api.api.dependencies import get_locale
from people_api.core.errors import DatabaseError, PeopleApiError, ErrorSeverity
from people_api.core.messages import (
    database_unavailable_message, internal_error_message, malformed_request_message,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PeopleApiError)
    async def people_api_error_handler(request: Request, exc: PeopleApiError):
        """Handle all People API domain/infrastructure errors."""
        log = (
            logger.error if exc.severity == ErrorSeverity.CRITICAL
            else logger.warning
        )
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "person_id": exc.context.person_id,
            },
        )
        content = exc.to_response()
        if isinstance(exc, DatabaseError):
            content = {"message": database_unavailable_message(get_locale())}
        return JSONResponse(status_code=exc.http_status, content=content)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed request bodies."""
        logger.warning(
            f"Malformed request on {request.url.path}: {exc.errors()}",
            extra={"error_code": "MALFORMED_REQUEST", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": malformed_request_message(get_locale())},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": internal_error_message(get_locale())},
        )
