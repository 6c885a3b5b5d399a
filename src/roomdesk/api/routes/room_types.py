"""Room Types (Categories) endpoints.

GET    /room_types                 → list active room types
POST   /room_types                 → create (201)
GET    /room_types/{id_roomtype}   → get one
PATCH  /room_types/{id_roomtype}   → partial update
DELETE /room_types/{id_roomtype}   → soft-delete, returns {"message": ...}

Lifecycle policy (soft delete):
  DELETE sets deleted = true rather than removing the row so that rooms keep
  their reference. The row is excluded from every read and from further
  update/delete calls, which answer 404.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Path

from roomdesk.api.deps import get_room_type_service
from roomdesk.api.errors import to_http_exception
from roomdesk.domain.errors import NotFoundError, RequestValidationFailed
from roomdesk.services.room_type_service import RoomTypeService

router = APIRouter(prefix="/room_types", tags=["room_types"])

# response_model=None: prices (Decimal) go out as JSON numbers via jsonable_encoder


@router.get("", response_model=None)
def list_room_types(
    service: RoomTypeService = Depends(get_room_type_service),
) -> list[dict]:
    return service.list()


@router.post("", status_code=201, response_model=None)
def create_room_type(
    body: Any = Body(None),
    service: RoomTypeService = Depends(get_room_type_service),
) -> dict:
    """Create a room type from {"room_type": str, "price": number}.

    The id is generated by the database. 400 on invalid input.
    """
    try:
        return service.create(body)
    except RequestValidationFailed as exc:
        raise to_http_exception(exc) from exc


@router.get("/{id_roomtype}", response_model=None)
def get_room_type(
    id_roomtype: str = Path(..., description="Room type ID"),
    service: RoomTypeService = Depends(get_room_type_service),
) -> dict:
    try:
        return service.get(id_roomtype)
    except NotFoundError as exc:
        raise to_http_exception(exc) from exc


@router.patch("/{id_roomtype}", response_model=None)
def update_room_type(
    id_roomtype: str = Path(..., description="Room type ID"),
    body: Any = Body(None),
    service: RoomTypeService = Depends(get_room_type_service),
) -> dict:
    """Update a room type's name and/or price.

    Only the provided fields are changed (partial update).
    Returns 404 for absent or soft-deleted room types.
    """
    try:
        return service.update(id_roomtype, body)
    except (RequestValidationFailed, NotFoundError) as exc:
        raise to_http_exception(exc) from exc


@router.delete("/{id_roomtype}", response_model=None)
def delete_room_type(
    id_roomtype: str = Path(..., description="Room type ID"),
    service: RoomTypeService = Depends(get_room_type_service),
) -> dict:
    try:
        return service.delete(id_roomtype)
    except NotFoundError as exc:
        raise to_http_exception(exc) from exc
