"""People API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PeopleApiError → {"message": ...} JSON responses
    - CORS configured from settings (open by default)
    - Database reachable and schema provisioned before the first request is accepted;
      otherwise startup fails and the process exits

Design Decisions:
    - Lifespan owns the engine: built on startup, disposed on shutdown
    - Store kept on app.state and injected per request (no module-level singleton)
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from people_api import __version__
from people_api.api.error_handlers import register_error_handlers
from people_api.api.routes import health, people
from people_api.config import get_settings
from people_api.core.errors import DatabaseError
from people_api.infrastructure.database import DatabaseSessionManager
from people_api.infrastructure.observability import setup_logging
from people_api.services.person_store import PersonStore

logger = logging.getLogger(__name__)


async def provision_store(db: DatabaseSessionManager) -> PersonStore:
    """Check connectivity and create the schema. Raises DatabaseError if either fails."""
    store = PersonStore(db)
    logger.info("Checking database connection...")
    if not await store.ping():
        logger.critical("Unable to connect to the database")
        raise DatabaseError("Database unreachable", "connect")
    try:
        await store.ensure_schema()
    except Exception as e:
        logger.critical(f"Unable to provision schema: {e}")
        raise DatabaseError("Schema provisioning failed", "create_schema") from e
    logger.info("Database connection OK!")
    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = DatabaseSessionManager.from_url(
        settings.sqlalchemy_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        app.state.person_store = await provision_store(db)
    except DatabaseError:
        await db.close()
        raise
    logger.info("People API started")
    yield
    logger.info("People API shutting down")
    await db.close()


app = FastAPI(title="People API", version=__version__, lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(people.router)

register_error_handlers(app)


def run() -> None:
    """Serve the app on HOST:PORT (PORT defaults to 5000)."""
    settings = get_settings()
    uvicorn.run(
        "people_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
