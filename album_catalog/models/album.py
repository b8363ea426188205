"""Album ORM — persists albums in the `album` table.

Invariants:
    - id is a UUID primary key supplied by the application (never server-generated)
    - title/artist are varchar(255), price is a 64-bit integer
    - timestamps are stored as UTC (timestamp with time zone on PostgreSQL)

Design Decisions:
    - Index on title: listing orders by title
    - to_domain()/from_domain() keep SQLAlchemy types out of routes and core/
"""

import uuid
from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from album_catalog.core.album import Album, as_utc
from album_catalog.core.domain_types import AlbumId
from album_catalog.db.base import Base


class AlbumRecord(Base):
    """Album row."""
    __tablename__ = "album"
    __table_args__ = (Index("album_title_index", "title"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    artist: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(BigInteger, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )

    @classmethod
    def from_domain(cls, album: Album) -> "AlbumRecord":
        return cls(
            id=album.id,
            title=album.title,
            artist=album.artist,
            price=album.price,
            created_at=as_utc(album.created_at),
            updated_at=as_utc(album.updated_at),
        )

    def to_domain(self) -> Album:
        return Album(
            id=AlbumId(self.id),
            title=self.title,
            artist=self.artist,
            price=self.price,
            created_at=as_utc(self.created_at),
            updated_at=as_utc(self.updated_at),
        )
