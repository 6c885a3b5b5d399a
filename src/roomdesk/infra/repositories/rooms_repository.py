"""Rooms repository - persistence for the rooms table.

Uses raw SQL with psycopg2 (no ORM). The caller owns the transaction.

Reads that include the room type join room_types without looking at its
deleted flag: a room keeps showing the category it was created with even
after that category is soft-deleted.
"""

from __future__ import annotations

from typing import Any

from psycopg2.extensions import cursor as PgCursor

_COLUMNS = "id_room, id_roomtype, status, created_at, updated_at, deleted"

_JOINED_COLUMNS = """
    r.id_room, r.id_roomtype, r.status, r.created_at, r.updated_at, r.deleted,
    rt.id_roomtype, rt.room_type, rt.price, rt.created_at, rt.updated_at, rt.deleted
"""

_UPDATABLE = frozenset({"id_roomtype", "status"})


def _row_to_dict(row: tuple) -> dict[str, Any]:
    return {
        "id_room": row[0],
        "id_roomtype": row[1],
        "status": row[2],
        "created_at": row[3],
        "updated_at": row[4],
        "deleted": row[5],
    }


def _joined_row_to_dict(row: tuple) -> dict[str, Any]:
    room = _row_to_dict(row[:6])
    room["room_type"] = {
        "id_roomtype": row[6],
        "room_type": row[7],
        "price": row[8],
        "created_at": row[9],
        "updated_at": row[10],
        "deleted": row[11],
    }
    return room


def find_room(cur: PgCursor, id_room: str) -> dict[str, Any] | None:
    """Fetch one active room by id, without its room type."""
    cur.execute(
        f"""
        SELECT {_COLUMNS}
        FROM rooms
        WHERE id_room = %s AND deleted = false
        """,  # noqa: S608
        (id_room,),
    )
    row = cur.fetchone()
    return _row_to_dict(row) if row is not None else None


def find_room_with_room_type(cur: PgCursor, id_room: str) -> dict[str, Any] | None:
    """Fetch one active room by id with its room type under "room_type"."""
    cur.execute(
        f"""
        SELECT {_JOINED_COLUMNS}
        FROM rooms r
        JOIN room_types rt ON rt.id_roomtype = r.id_roomtype
        WHERE r.id_room = %s AND r.deleted = false
        """,  # noqa: S608
        (id_room,),
    )
    row = cur.fetchone()
    return _joined_row_to_dict(row) if row is not None else None


def list_rooms_with_room_type(cur: PgCursor) -> list[dict[str, Any]]:
    """All active rooms with their room type, oldest first."""
    cur.execute(
        f"""
        SELECT {_JOINED_COLUMNS}
        FROM rooms r
        JOIN room_types rt ON rt.id_roomtype = r.id_roomtype
        WHERE r.deleted = false
        ORDER BY r.created_at, r.id_room
        """  # noqa: S608
    )
    return [_joined_row_to_dict(r) for r in cur.fetchall()]


def insert_room(
    cur: PgCursor,
    *,
    id_roomtype: str,
    status: str,
) -> dict[str, Any]:
    """Insert a room. id and timestamps are assigned by the database."""
    cur.execute(
        f"""
        INSERT INTO rooms (id_room, id_roomtype, status)
        VALUES (gen_random_uuid()::text, %s, %s)
        RETURNING {_COLUMNS}
        """,  # noqa: S608
        (id_roomtype, status),
    )
    return _row_to_dict(cur.fetchone())


def update_room(
    cur: PgCursor,
    id_room: str,
    fields: dict[str, Any],
) -> dict[str, Any] | None:
    """Replace the given columns and refresh updated_at.

    Args:
        cur: Database cursor.
        id_room: Room id.
        fields: Column -> new value, restricted to id_roomtype and status.

    Returns:
        Updated row dict, or None if no active row has this id.

    Raises:
        ValueError: If fields is empty or names a non-updatable column.
    """
    if not fields:
        raise ValueError("No fields to update")
    unknown = set(fields) - _UPDATABLE
    if unknown:
        raise ValueError(f"Cannot update rooms columns: {sorted(unknown)}")

    sets: list[str] = ["updated_at = now()"]
    params: list[Any] = []
    for column in sorted(fields):
        sets.append(f"{column} = %s")
        params.append(fields[column])
    params.append(id_room)

    cur.execute(
        f"""
        UPDATE rooms
        SET {", ".join(sets)}
        WHERE id_room = %s AND deleted = false
        RETURNING {_COLUMNS}
        """,  # noqa: S608 – SET clause only holds whitelisted column names
        params,
    )
    row = cur.fetchone()
    return _row_to_dict(row) if row is not None else None


def mark_room_deleted(cur: PgCursor, id_room: str) -> None:
    cur.execute(
        """
        UPDATE rooms
        SET deleted = true, updated_at = now()
        WHERE id_room = %s
        """,
        (id_room,),
    )
