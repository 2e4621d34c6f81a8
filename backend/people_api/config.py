"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Database credentials come from DB_HOST / DB_NAME / DB_USER / DB_PASS / DB_PORT
    - DATABASE_URL, when set, wins over the DB_* parts
    - get_settings() is cached (lru_cache): read once per process, no hot reload

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - URL assembled with sqlalchemy URL.create: passwords with '@' or '/' are escaped
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    db_host: str = "localhost"
    db_name: str = "people"
    db_user: str = "people"
    db_pass: str = ""
    db_port: int | None = None
    db_driver: str = "postgresql+asyncpg"
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    database_pool_size: int = 5
    database_max_overflow: int = 5

    # HTTP
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = ["*"]

    # Validation messages
    locale: str = "pt-BR"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def sqlalchemy_url(self) -> str | URL:
        """Effective database URL for create_async_engine."""
        if self.database_url:
            return self.database_url
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_pass or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
