"""Album Routes — create, paginated list, get, update and delete albums.

Invariants:
    - Input parsed and validated before any storage call
    - AlbumNotFoundError surfaces as 404 {"message": "album not found"},
      except on listing where an empty page is 200 []
    - Unexpected storage failures are logged once (ERROR, with `error`) and
      answered with 500 {"message": "internal error"}

Design Decisions:
    - Storage, validator, id factory and clock come from Depends so route tests
      swap them without touching the database
    - Update/delete read the album first: the response carries the full record
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, Callable, Union
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from album_catalog.api.dependencies import (
    album_body, album_id_path, get_album_storage, get_clock, get_id_factory,
    get_validator,
)
from album_catalog.core.album import Album
from album_catalog.core.domain_types import AlbumId, parse_page
from album_catalog.core.errors import (
    AlbumNotFoundError, InternalError, InvalidRequestError,
)
from album_catalog.core.repository_protocols import AlbumStorage
from album_catalog.core.validate import Validator
from album_catalog.schemas.album import (
    AlbumRequest, AlbumResponse, MessageResponse, ProblemsResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/albums", tags=["albums"])

_BAD_REQUEST = {400: {"model": Union[MessageResponse, ProblemsResponse]}}
_NOT_FOUND = {404: {"model": MessageResponse}}
_INTERNAL = {500: {"model": MessageResponse}}
_ALBUM_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {"schema": AlbumRequest.model_json_schema()},
        },
    },
}


@asynccontextmanager
async def storage_operation(
    description: str, album_id: UUID | None = None,
) -> AsyncIterator[None]:
    """Log and convert unexpected storage failures; let not-found through."""
    try:
        yield
    except AlbumNotFoundError:
        raise
    except Exception as e:
        logger.error(
            description,
            extra={
                "error": str(e),
                "album_id": str(album_id) if album_id else None,
            },
        )
        raise InternalError(description) from e


def _check(validate: Validator, body: AlbumRequest) -> None:
    problems = validate(body.title, body.artist, body.price)
    if problems:
        raise InvalidRequestError(problems)


def _to_response(album: Album) -> AlbumResponse:
    return AlbumResponse.model_validate(album)


@router.post(
    "", response_model=AlbumResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_BAD_REQUEST, **_INTERNAL}, openapi_extra=_ALBUM_BODY,
)
async def create_album(
    body: AlbumRequest = Depends(album_body),
    storage: AlbumStorage = Depends(get_album_storage),
    validate: Validator = Depends(get_validator),
    new_id: Callable[[], UUID] = Depends(get_id_factory),
    now: Callable[[], datetime] = Depends(get_clock),
):
    """Add a new album to the catalog."""
    _check(validate, body)
    created_at = now()
    album = Album(
        id=AlbumId(new_id()),
        title=body.title,
        artist=body.artist,
        price=body.price,
        created_at=created_at,
        updated_at=created_at,
    )
    async with storage_operation("inserting album into the storage", album.id):
        await storage.insert(album)
    return _to_response(album)


@router.get(
    "", response_model=list[AlbumResponse],
    responses={**_BAD_REQUEST, **_INTERNAL},
)
async def list_albums(
    page_size: str | None = Query(
        None, description="Maximum quantity of albums a page can have (1-50)",
    ),
    page_number: str | None = Query(
        None, description="Number of the requested albums page (>= 1)",
    ),
    storage: AlbumStorage = Depends(get_album_storage),
):
    """Display a page of albums ordered by title."""
    page = parse_page(page_size, page_number)
    try:
        async with storage_operation("finding albums in the storage"):
            albums = await storage.find_all(page.offset, page.limit)
    except AlbumNotFoundError:
        return []
    return [_to_response(album) for album in albums]


@router.get(
    "/{album_id}", response_model=AlbumResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_INTERNAL},
)
async def get_album(
    album_id: AlbumId = Depends(album_id_path),
    storage: AlbumStorage = Depends(get_album_storage),
):
    """Return a single album."""
    async with storage_operation("finding one album in the storage", album_id):
        album = await storage.find_one(album_id)
    return _to_response(album)


@router.put(
    "/{album_id}", response_model=AlbumResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_INTERNAL},
    openapi_extra=_ALBUM_BODY,
)
async def update_album(
    album_id: AlbumId = Depends(album_id_path),
    body: AlbumRequest = Depends(album_body),
    storage: AlbumStorage = Depends(get_album_storage),
    validate: Validator = Depends(get_validator),
    now: Callable[[], datetime] = Depends(get_clock),
):
    """Update an existing album by id."""
    _check(validate, body)
    async with storage_operation("finding one album in the storage", album_id):
        album = await storage.find_one(album_id)
    album = album.with_changes(
        title=body.title, artist=body.artist, price=body.price,
        updated_at=now(),
    )
    async with storage_operation("updating album in the storage", album_id):
        await storage.update(album)
    return _to_response(album)


@router.delete(
    "/{album_id}", response_model=AlbumResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_INTERNAL},
)
async def delete_album(
    album_id: AlbumId = Depends(album_id_path),
    storage: AlbumStorage = Depends(get_album_storage),
):
    """Delete an album and return it."""
    async with storage_operation("finding one album in the storage", album_id):
        album = await storage.find_one(album_id)
    async with storage_operation("removing album from the storage", album_id):
        await storage.remove(album_id)
    return _to_response(album)
