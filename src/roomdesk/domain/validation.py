"""Request schemas and the validator that applies them.

Services never trust raw input: every create/update passes through
Validator.validate() with one of the named schemas below.

  RoomTypeValidation.CREATE   room_type + price required
  RoomTypeValidation.UPDATE   room_type and/or price
  RoomValidation.CREATE       id_roomtype + status required
  RoomValidation.UPDATE       id_roomtype and/or status
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from roomdesk.domain.errors import RequestValidationFailed


class _Request(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class _UpdateRequest(_Request):
    """Partial update: at least one field, and no explicit nulls."""

    @model_validator(mode="after")
    def _require_changes(self):
        if not self.model_fields_set:
            raise ValueError("No fields to update")
        nulls = sorted(f for f in self.model_fields_set if getattr(self, f) is None)
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self

    def changes(self) -> dict[str, Any]:
        """Only the fields the caller actually sent."""
        return self.model_dump(exclude_unset=True)


# ── Room types ────────────────────────────────────────────────────────────────


class RoomTypeCreateRequest(_Request):
    room_type: str = Field(min_length=1, max_length=100)
    price: Decimal = Field(ge=0, max_digits=12, decimal_places=2)


class RoomTypeUpdateRequest(_UpdateRequest):
    room_type: str | None = Field(default=None, min_length=1, max_length=100)
    price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)


# ── Rooms ─────────────────────────────────────────────────────────────────────


class RoomCreateRequest(_Request):
    id_roomtype: str = Field(min_length=1, max_length=64)
    status: str = Field(min_length=1, max_length=50)


class RoomUpdateRequest(_UpdateRequest):
    id_roomtype: str | None = Field(default=None, min_length=1, max_length=64)
    status: str | None = Field(default=None, min_length=1, max_length=50)


class RoomTypeValidation:
    CREATE = RoomTypeCreateRequest
    UPDATE = RoomTypeUpdateRequest


class RoomValidation:
    CREATE = RoomCreateRequest
    UPDATE = RoomUpdateRequest


RequestT = TypeVar("RequestT", bound=BaseModel)


class Validator:
    """Validate raw input (usually a decoded JSON body) against a schema."""

    def validate(self, schema: type[RequestT], raw: Any) -> RequestT:
        """Return the cleaned request.

        Raises:
            RequestValidationFailed: Carrying pydantic's error list, without
                the rejected input values.
        """
        try:
            return schema.model_validate(raw)
        except ValidationError as exc:
            raise RequestValidationFailed(
                schema.__name__,
                exc.errors(include_url=False, include_context=False, include_input=False),
            ) from exc
