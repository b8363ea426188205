"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - DSN is required; start-up fails with a validation error when it is absent
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - DATABASE_URL accepted as an alias of DSN for platforms that inject it
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    server_host: str = "0.0.0.0"
    server_port: int = 8080
    shutdown_timeout_seconds: int = 10

    # Database
    database_url: str = Field(
        validation_alias=AliasChoices("dsn", "database_url"),
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Plain postgres URLs need the asyncpg driver suffix."""
        if isinstance(v, str):
            for prefix in ("postgres://", "postgresql://"):
                if v.startswith(prefix):
                    return "postgresql+asyncpg://" + v[len(prefix):]
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Migrations
    migrate_db: bool = False
    alembic_config: str = "alembic.ini"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
