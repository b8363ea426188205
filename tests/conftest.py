"""Root conftest — shared test configuration and in-memory database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - DSN always set so Settings() can be built without a real environment
"""

import os

# Settings require a DSN; tests never reach a real server
os.environ.setdefault("DSN", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402

from album_catalog.db.base import Base  # noqa: E402
from album_catalog.db.session import (  # noqa: E402
    create_engine_for_url, create_session_factory,
)
import album_catalog.models  # noqa: E402, F401


@pytest.fixture
async def test_engine():
    engine = create_engine_for_url("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session
