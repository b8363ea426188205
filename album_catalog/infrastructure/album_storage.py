"""SQLAlchemy Album Storage — AlbumStorage implementation over the `album` table.

Invariants:
    - Each operation is a single SQL statement and commits its own unit of work
    - Zero matching rows raise AlbumNotFoundError (find_all included)
    - Timestamps are written and read back as UTC
    - Any other SQLAlchemy/driver error propagates to the caller untouched

Design Decisions:
    - Bound to one AsyncSession (request-scoped via get_db)
    - Listing orders by lower(title), then id, so pages are stable across requests
    - populate_existing on reads: the session may already hold a stale instance
      after a bulk UPDATE issued through the same session
"""

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from album_catalog.core.album import Album, as_utc
from album_catalog.core.domain_types import AlbumId
from album_catalog.core.errors import AlbumNotFoundError
from album_catalog.models.album import AlbumRecord


class SqlAlchemyAlbumStorage:
    """Album persistence backed by an async SQLAlchemy session."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, album: Album) -> None:
        self.db.add(AlbumRecord.from_domain(album))
        await self.db.commit()

    async def find_all(self, offset: int, limit: int) -> list[Album]:
        query = (
            select(AlbumRecord)
            .order_by(func.lower(AlbumRecord.title).asc(), AlbumRecord.id.asc())
            .offset(offset)
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(query)
        albums = [record.to_domain() for record in result.scalars().all()]
        if not albums:
            raise AlbumNotFoundError()
        return albums

    async def find_one(self, album_id: AlbumId) -> Album:
        result = await self.db.execute(
            select(AlbumRecord)
            .where(AlbumRecord.id == album_id)
            .execution_options(populate_existing=True),
        )
        record = result.scalar_one_or_none()
        if record is None:
            raise AlbumNotFoundError()
        return record.to_domain()

    async def update(self, album: Album) -> None:
        result = await self.db.execute(
            update(AlbumRecord)
            .where(AlbumRecord.id == album.id)
            .values(
                title=album.title,
                artist=album.artist,
                price=album.price,
                created_at=as_utc(album.created_at),
                updated_at=as_utc(album.updated_at),
            ),
        )
        if result.rowcount == 0:
            await self.db.rollback()
            raise AlbumNotFoundError()
        await self.db.commit()

    async def remove(self, album_id: AlbumId) -> None:
        result = await self.db.execute(
            delete(AlbumRecord).where(AlbumRecord.id == album_id),
        )
        if result.rowcount == 0:
            await self.db.rollback()
            raise AlbumNotFoundError()
        await self.db.commit()
