"""API test fixtures — storage spy, pinned id/clock, and DB-backed client.

Invariants:
    - spy_client never touches a database: get_album_storage is overridden
    - db_client runs the real SQLAlchemy storage against in-memory SQLite
    - Dependency overrides and db_manager are restored after each test

Design Decisions:
    - The spy records calls and replays configured results/exceptions, so
      route tests assert on offset/limit and on what reached the storage
"""

import pytest
from httpx import ASGITransport, AsyncClient

from album_catalog.api.dependencies import (
    get_album_storage, get_clock, get_id_factory,
)
from album_catalog.core.album import Album
from album_catalog.core.domain_types import AlbumId
from album_catalog.infrastructure.database import DatabaseSessionManager, get_db
import album_catalog.infrastructure.database as db_module
from album_catalog.main import app
from tests.factories import FIXED_ID, FIXED_NOW


class AlbumStorageSpy:
    """AlbumStorage double: records calls, returns or raises what it is told."""

    def __init__(self):
        self.calls: list[tuple] = []
        self.find_all_result: list[Album] = []
        self.find_one_result: Album | None = None
        self.errors: dict[str, Exception] = {}

    def _maybe_raise(self, operation: str) -> None:
        if operation in self.errors:
            raise self.errors[operation]

    async def insert(self, album: Album) -> None:
        self.calls.append(("insert", album))
        self._maybe_raise("insert")

    async def find_all(self, offset: int, limit: int) -> list[Album]:
        self.calls.append(("find_all", offset, limit))
        self._maybe_raise("find_all")
        return self.find_all_result

    async def find_one(self, album_id: AlbumId) -> Album:
        self.calls.append(("find_one", album_id))
        self._maybe_raise("find_one")
        return self.find_one_result

    async def update(self, album: Album) -> None:
        self.calls.append(("update", album))
        self._maybe_raise("update")

    async def remove(self, album_id: AlbumId) -> None:
        self.calls.append(("remove", album_id))
        self._maybe_raise("remove")

    def operations(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def storage_spy():
    return AlbumStorageSpy()


@pytest.fixture
async def spy_client(storage_spy):
    """Client whose routes talk to the spy with a fixed id and clock."""
    app.dependency_overrides[get_album_storage] = lambda: storage_spy
    app.dependency_overrides[get_id_factory] = lambda: (lambda: FIXED_ID)
    app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def db_client(test_engine, test_session_factory):
    """Client backed by the real storage on the test database."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
