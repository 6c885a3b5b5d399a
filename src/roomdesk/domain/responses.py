"""Response shapes returned by the room services.

Each builder copies an explicit field set out of a repository row, so the
deleted flag (and anything else the table grows) never leaks to callers.
"""

from __future__ import annotations

from typing import Any

DELETED_RESPONSE: dict[str, str] = {"message": "Deleted successfully"}


def room_type_response(row: dict[str, Any]) -> dict[str, Any]:
    return {
        "id_roomtype": row["id_roomtype"],
        "room_type": row["room_type"],
        "price": row["price"],
        "created_at": row["created_at"],
        "updated_at": row["updated_at"],
    }


def room_response(row: dict[str, Any]) -> dict[str, Any]:
    """Flat room view returned by create and update."""
    return {
        "id_room": row["id_room"],
        "id_roomtype": row["id_roomtype"],
        "status": row["status"],
        "created_at": row["created_at"],
        "updated_at": row["updated_at"],
    }


def room_detail_response(row: dict[str, Any]) -> dict[str, Any]:
    """Room view returned by list and get.

    Nests a trimmed room type (no display name) under "roomtype".
    """
    room_type = row["room_type"]
    response = room_response(row)
    response["roomtype"] = {
        "id_roomtype": room_type["id_roomtype"],
        "price": room_type["price"],
        "created_at": room_type["created_at"],
        "updated_at": room_type["updated_at"],
    }
    return response
