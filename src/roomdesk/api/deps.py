"""FastAPI dependencies that hand services to the routes.

The Database lives on app.state (opened by the factory lifespan); services
are cheap wrappers built per request around it.
"""

from __future__ import annotations

from fastapi import HTTPException, Request

from roomdesk.domain.validation import Validator
from roomdesk.infra.db import Database
from roomdesk.services.room_service import RoomService
from roomdesk.services.room_type_service import RoomTypeService

_validator = Validator()


def get_database(request: Request) -> Database:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise HTTPException(status_code=503, detail="Database not available")
    return db


def get_room_type_service(request: Request) -> RoomTypeService:
    return RoomTypeService(get_database(request), _validator)


def get_room_service(request: Request) -> RoomService:
    return RoomService(get_database(request), _validator)
