"""Domain errors raised by the room services.

The route layer translates them into HTTP responses; status_code is the
status each one maps to.
"""

from __future__ import annotations

from typing import Any


class NotFoundError(Exception):
    """Entity absent or soft-deleted."""

    status_code = 404
    message = "Not found"

    def __init__(self, entity_id: str | None = None):
        self.entity_id = entity_id
        super().__init__(self.message)


class RoomNotFoundError(NotFoundError):
    message = "Room not found"


class RoomTypeNotFoundError(NotFoundError):
    message = "Room Type not found"


class RoomTypeReferenceNotFoundError(NotFoundError):
    """A room points at an id_roomtype that does not exist."""

    message = "Room Type does not exist"


class RequestValidationFailed(Exception):
    """Raw input rejected by a validation schema."""

    status_code = 400

    def __init__(self, schema: str, errors: list[dict[str, Any]]):
        self.schema = schema
        self.errors = errors
        super().__init__(f"Invalid {schema} request: {len(errors)} error(s)")
