"""Seed a demo room type and room for local/staging environments.

Usage:
    DATABASE_URL=... python -m roomdesk.operations.seed_demo

Idempotent: reuses the "Deluxe" room type and its first room when present.
Goes through the services, so the same validation applies as for the API.
"""

from __future__ import annotations

import sys
from typing import Any

from roomdesk.infra.config import Settings
from roomdesk.infra.db import Database
from roomdesk.services.room_service import RoomService
from roomdesk.services.room_type_service import RoomTypeService

DEMO_ROOM_TYPE = {"room_type": "Deluxe", "price": 100}
DEMO_ROOM_STATUS = "available"


def seed(db: Database) -> dict[str, Any]:
    """Ensure the demo room type and one room in it exist.

    Returns:
        {"room_type": <room type response>, "room": <room response>,
         "created": [names of entities created in this run]}
    """
    room_types = RoomTypeService(db)
    rooms = RoomService(db)
    created: list[str] = []

    room_type = next(
        (rt for rt in room_types.list() if rt["room_type"] == DEMO_ROOM_TYPE["room_type"]),
        None,
    )
    if room_type is None:
        room_type = room_types.create(DEMO_ROOM_TYPE)
        created.append("room_type")

    room = next(
        (r for r in rooms.list() if r["id_roomtype"] == room_type["id_roomtype"]),
        None,
    )
    if room is None:
        room = rooms.create(
            {"id_roomtype": room_type["id_roomtype"], "status": DEMO_ROOM_STATUS}
        )
        created.append("room")

    return {"room_type": room_type, "room": room, "created": created}


def main() -> int:
    try:
        db = Database.from_settings(Settings.from_env())
    except RuntimeError as exc:
        print(f"ERROR: {exc}")
        return 1

    try:
        result = seed(db)
    finally:
        db.close()

    print(f"room_type: {result['room_type']['id_roomtype']}")
    print(f"room:      {result['room']['id_room']}")
    print(f"created:   {', '.join(result['created']) or 'nothing (already seeded)'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
