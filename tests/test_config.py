"""Settings — verifies defaults, DSN aliases and the asyncpg URL rewrite."""

import pytest
from pydantic import ValidationError

from album_catalog.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "DSN", "DATABASE_URL", "SERVER_HOST", "SERVER_PORT", "MIGRATE_DB",
        "SHUTDOWN_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    monkeypatch.setenv("DSN", "sqlite+aiosqlite:///:memory:")
    settings = Settings(_env_file=None)
    assert settings.server_host == "0.0.0.0"
    assert settings.server_port == 8080
    assert settings.shutdown_timeout_seconds == 10
    assert settings.migrate_db is False
    assert settings.log_format == "json"


def test_dsn_is_required():
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


@pytest.mark.parametrize(
    "dsn",
    ["postgres://u:p@db:5432/albums", "postgresql://u:p@db:5432/albums"],
)
def test_postgres_url_gets_asyncpg_driver(monkeypatch, dsn):
    monkeypatch.setenv("DSN", dsn)
    settings = Settings(_env_file=None)
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/albums"


def test_database_url_alias(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db/albums")
    assert Settings(_env_file=None).database_url == "postgresql+asyncpg://u:p@db/albums"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DSN", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("SERVER_HOST", "127.0.0.1")
    monkeypatch.setenv("SERVER_PORT", "9090")
    monkeypatch.setenv("MIGRATE_DB", "true")
    settings = get_settings()
    assert (settings.server_host, settings.server_port) == ("127.0.0.1", 9090)
    assert settings.migrate_db is True
