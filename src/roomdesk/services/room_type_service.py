"""Room type service: lifecycle of the room_types catalog.

Rules:
- Input is validated against RoomTypeValidation schemas before any query.
- Soft-deleted room types behave as absent for get/update/delete.
- delete only flags the row; rooms pointing at it are left untouched.
"""

from __future__ import annotations

import logging
from typing import Any

from roomdesk.domain.errors import RoomTypeNotFoundError
from roomdesk.domain.responses import DELETED_RESPONSE, room_type_response
from roomdesk.domain.validation import RoomTypeValidation, Validator
from roomdesk.infra.db import Database
from roomdesk.infra.repositories import room_types_repository
from roomdesk.observability.logging import get_logger
from roomdesk.observability.redaction import safe_log_context


class RoomTypeService:
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

    def create(self, request: Any) -> dict[str, Any]:
        """Create a room type.

        Raises:
            RequestValidationFailed: room_type or price missing/invalid.
        """
        self._log("creating room type")
        body = self._validator.validate(RoomTypeValidation.CREATE, request)

        with self._db.txn() as cur:
            row = room_types_repository.insert_room_type(
                cur, room_type=body.room_type, price=body.price
            )

        self._log("room type created", id_roomtype=row["id_roomtype"])
        return room_type_response(row)

    def list(self) -> list[dict[str, Any]]:
        self._log("listing room types")
        with self._db.txn() as cur:
            rows = room_types_repository.list_room_types(cur)
        return [room_type_response(r) for r in rows]

    def get(self, id_roomtype: str) -> dict[str, Any]:
        self._log("finding room type", id_roomtype=id_roomtype)
        with self._db.txn() as cur:
            row = room_types_repository.find_room_type(cur, id_roomtype)
        if row is None:
            raise RoomTypeNotFoundError(id_roomtype)
        return room_type_response(row)

    def update(self, id_roomtype: str, request: Any) -> dict[str, Any]:
        """Replace the provided fields of an active room type.

        Raises:
            RequestValidationFailed: Empty or invalid update.
            RoomTypeNotFoundError: No active room type with this id.
        """
        self._log("updating room type", id_roomtype=id_roomtype)
        body = self._validator.validate(RoomTypeValidation.UPDATE, request)

        with self._db.txn() as cur:
            if room_types_repository.count_room_types(cur, id_roomtype) == 0:
                raise RoomTypeNotFoundError(id_roomtype)
            row = room_types_repository.update_room_type(cur, id_roomtype, body.changes())
            if row is None:
                raise RoomTypeNotFoundError(id_roomtype)

        return room_type_response(row)

    def delete(self, id_roomtype: str) -> dict[str, str]:
        """Soft-delete an active room type.

        Raises:
            RoomTypeNotFoundError: Absent or already deleted.
        """
        self._log("deleting room type", id_roomtype=id_roomtype)
        with self._db.txn() as cur:
            if room_types_repository.find_room_type(cur, id_roomtype) is None:
                raise RoomTypeNotFoundError(id_roomtype)
            room_types_repository.mark_room_type_deleted(cur, id_roomtype)

        return dict(DELETED_RESPONSE)
