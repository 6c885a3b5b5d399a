"""Rooms endpoints.

GET    /rooms             → list active rooms, each with its room type
POST   /rooms             → create (201)
GET    /rooms/{id_room}   → get one, with its room type
PATCH  /rooms/{id_room}   → partial update
DELETE /rooms/{id_room}   → soft-delete, returns {"message": ...}
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Path

from roomdesk.api.deps import get_room_service
from roomdesk.api.errors import to_http_exception
from roomdesk.domain.errors import NotFoundError, RequestValidationFailed
from roomdesk.services.room_service import RoomService

router = APIRouter(prefix="/rooms", tags=["rooms"])

# response_model=None: prices (Decimal) go out as JSON numbers via jsonable_encoder


@router.get("", response_model=None)
def list_rooms(
    service: RoomService = Depends(get_room_service),
) -> list[dict]:
    """List active rooms.

    Each room nests "roomtype" with id_roomtype, price and timestamps.
    """
    return service.list()


@router.post("", status_code=201, response_model=None)
def create_room(
    body: Any = Body(None),
    service: RoomService = Depends(get_room_service),
) -> dict:
    """Create a room from {"id_roomtype": str, "status": str}.

    Fails with 404 if id_roomtype does not exist, 400 on invalid input.
    """
    try:
        return service.create(body)
    except (RequestValidationFailed, NotFoundError) as exc:
        raise to_http_exception(exc) from exc


@router.get("/{id_room}", response_model=None)
def get_room(
    id_room: str = Path(..., description="Room ID"),
    service: RoomService = Depends(get_room_service),
) -> dict:
    try:
        return service.get(id_room)
    except NotFoundError as exc:
        raise to_http_exception(exc) from exc


@router.patch("/{id_room}", response_model=None)
def update_room(
    id_room: str = Path(..., description="Room ID"),
    body: Any = Body(None),
    service: RoomService = Depends(get_room_service),
) -> dict:
    """Update a room's category and/or status.

    Only the provided fields are changed (partial update).
    Fails with 404 if the new id_roomtype or the room itself is missing.
    """
    try:
        return service.update(id_room, body)
    except (RequestValidationFailed, NotFoundError) as exc:
        raise to_http_exception(exc) from exc


@router.delete("/{id_room}", response_model=None)
def delete_room(
    id_room: str = Path(..., description="Room ID"),
    service: RoomService = Depends(get_room_service),
) -> dict:
    try:
        return service.delete(id_room)
    except NotFoundError as exc:
        raise to_http_exception(exc) from exc
