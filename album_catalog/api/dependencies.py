"""Route Dependencies — injectable storage, validator, id factory and clock.

Invariants:
    - Routes obtain every collaborator through Depends (overridable in tests)
    - get_album_storage shares the request-scoped session from get_db

Design Decisions:
    - The body is read raw and decoded as JSON whatever the Content-Type says
    - Id factory and clock injected rather than called inline so route tests
      can pin the generated id and timestamps
"""

from typing import Callable
from datetime import datetime
from uuid import UUID, uuid4

from fastapi import Depends, Request
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from album_catalog.core.album import utc_now
from album_catalog.core.domain_types import AlbumId, parse_album_id
from album_catalog.core.errors import MalformedRequestError
from album_catalog.core.repository_protocols import AlbumStorage
from album_catalog.core.validate import Validator, validate_album
from album_catalog.infrastructure.album_storage import SqlAlchemyAlbumStorage
from album_catalog.infrastructure.database import get_db
from album_catalog.schemas.album import AlbumRequest


def get_album_storage(db: AsyncSession = Depends(get_db)) -> AlbumStorage:
    return SqlAlchemyAlbumStorage(db)


def get_validator() -> Validator:
    return validate_album


def get_id_factory() -> Callable[[], UUID]:
    return uuid4


def get_clock() -> Callable[[], datetime]:
    return utc_now


def album_id_path(album_id: str) -> AlbumId:
    """Path parameter parsed by core so a bad id gets its own 400 message."""
    return parse_album_id(album_id)


async def album_body(request: Request) -> AlbumRequest:
    """Decode the request body as an AlbumRequest regardless of content type."""
    try:
        return AlbumRequest.model_validate_json(await request.body())
    except ValidationError:
        raise MalformedRequestError("malformed request body") from None
