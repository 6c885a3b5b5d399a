"""Room service: lifecycle of individual rooms.

Rules:
- Input is validated against RoomValidation schemas before any query.
- A room's id_roomtype must name an existing room type on create/update.
  That lookup does not filter soft-deleted room types, and reads do not
  re-check the joined room type either: soft-deleting a category hides it
  from the catalog without invalidating the rooms that use it.
- Soft-deleted rooms behave as absent for get/update/delete.
"""

from __future__ import annotations

import logging
from typing import Any

from psycopg2.extensions import cursor as PgCursor

from roomdesk.domain.errors import RoomNotFoundError, RoomTypeReferenceNotFoundError
from roomdesk.domain.responses import (
    DELETED_RESPONSE,
    room_detail_response,
    room_response,
)
from roomdesk.domain.validation import RoomValidation, Validator
from roomdesk.infra.db import Database
from roomdesk.infra.repositories import room_types_repository, rooms_repository
from roomdesk.observability.logging import get_logger
from roomdesk.observability.redaction import safe_log_context


class RoomService:
    def __init__(
        self,
        db: Database,
        validator: Validator | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._db = db
        self._validator = validator or Validator()
        self._logger = logger or get_logger(__name__)

    def _log(self, message: str, **context: Any) -> None:
        self._logger.info(message, extra={"extra_fields": safe_log_context(**context)})

    @staticmethod
    def _require_room_type(cur: PgCursor, id_roomtype: str) -> None:
        room_type = room_types_repository.find_room_type(
            cur, id_roomtype, include_deleted=True
        )
        if room_type is None:
            raise RoomTypeReferenceNotFoundError(id_roomtype)

    def create(self, request: Any) -> dict[str, Any]:
        """Create a room in an existing room type.

        Raises:
            RequestValidationFailed: id_roomtype or status missing/invalid.
            RoomTypeReferenceNotFoundError: id_roomtype does not exist.
        """
        self._log("creating room")
        body = self._validator.validate(RoomValidation.CREATE, request)

        with self._db.txn() as cur:
            self._require_room_type(cur, body.id_roomtype)
            row = rooms_repository.insert_room(
                cur, id_roomtype=body.id_roomtype, status=body.status
            )

        self._log("room created", id_room=row["id_room"], id_roomtype=row["id_roomtype"])
        return room_response(row)

    def list(self) -> list[dict[str, Any]]:
        self._log("listing rooms")
        with self._db.txn() as cur:
            rows = rooms_repository.list_rooms_with_room_type(cur)
        return [room_detail_response(r) for r in rows]

    def get(self, id_room: str) -> dict[str, Any]:
        self._log("finding room", id_room=id_room)
        with self._db.txn() as cur:
            row = rooms_repository.find_room_with_room_type(cur, id_room)
        if row is None:
            raise RoomNotFoundError(id_room)
        return room_detail_response(row)

    def update(self, id_room: str, request: Any) -> dict[str, Any]:
        """Replace the provided fields of an active room.

        The room type reference is checked before the room itself, so a
        request naming a missing room type reports that first.

        Raises:
            RequestValidationFailed: Empty or invalid update.
            RoomTypeReferenceNotFoundError: New id_roomtype does not exist.
            RoomNotFoundError: No active room with this id.
        """
        self._log("updating room", id_room=id_room)
        body = self._validator.validate(RoomValidation.UPDATE, request)

        with self._db.txn() as cur:
            if body.id_roomtype is not None:
                self._require_room_type(cur, body.id_roomtype)
            if rooms_repository.find_room(cur, id_room) is None:
                raise RoomNotFoundError(id_room)
            row = rooms_repository.update_room(cur, id_room, body.changes())
            if row is None:
                raise RoomNotFoundError(id_room)

        return room_response(row)

    def delete(self, id_room: str) -> dict[str, str]:
        """Soft-delete an active room.

        Raises:
            RoomNotFoundError: Absent or already deleted.
        """
        self._log("deleting room", id_room=id_room)
        with self._db.txn() as cur:
            if rooms_repository.find_room(cur, id_room) is None:
                raise RoomNotFoundError(id_room)
            rooms_repository.mark_room_deleted(cur, id_room)

        return dict(DELETED_RESPONSE)
