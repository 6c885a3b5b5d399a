"""Room types repository - persistence for the room_types table.

Uses raw SQL with psycopg2 (no ORM). Every function takes a cursor; the
caller owns the transaction (with db.txn() as cur:).

Soft delete: rows are never removed, DELETE sets deleted = true. Reads filter
on deleted = false unless include_deleted is passed explicitly.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from psycopg2.extensions import cursor as PgCursor

_COLUMNS = "id_roomtype, room_type, price, created_at, updated_at, deleted"

# Columns a caller may change through update_room_type()
_UPDATABLE = frozenset({"room_type", "price"})


def _row_to_dict(row: tuple) -> dict[str, Any]:
    return {
        "id_roomtype": row[0],
        "room_type": row[1],
        "price": row[2],
        "created_at": row[3],
        "updated_at": row[4],
        "deleted": row[5],
    }


def find_room_type(
    cur: PgCursor,
    id_roomtype: str,
    *,
    include_deleted: bool = False,
) -> dict[str, Any] | None:
    """Fetch one room type by id.

    Args:
        cur: Database cursor.
        id_roomtype: Room type id.
        include_deleted: Also match soft-deleted rows.

    Returns:
        Row dict or None if not found.
    """
    query = f"SELECT {_COLUMNS} FROM room_types WHERE id_roomtype = %s"  # noqa: S608
    if not include_deleted:
        query += " AND deleted = false"
    cur.execute(query, (id_roomtype,))
    row = cur.fetchone()
    return _row_to_dict(row) if row is not None else None


def list_room_types(cur: PgCursor) -> list[dict[str, Any]]:
    """All active room types, oldest first."""
    cur.execute(
        f"""
        SELECT {_COLUMNS}
        FROM room_types
        WHERE deleted = false
        ORDER BY created_at, id_roomtype
        """  # noqa: S608
    )
    return [_row_to_dict(r) for r in cur.fetchall()]


def count_room_types(cur: PgCursor, id_roomtype: str) -> int:
    """Number of active room types with this id (0 or 1)."""
    cur.execute(
        """
        SELECT COUNT(*) FROM room_types
        WHERE id_roomtype = %s AND deleted = false
        """,
        (id_roomtype,),
    )
    return cur.fetchone()[0]


def insert_room_type(
    cur: PgCursor,
    *,
    room_type: str,
    price: Decimal,
) -> dict[str, Any]:
    """Insert a room type. id and timestamps are assigned by the database."""
    cur.execute(
        f"""
        INSERT INTO room_types (id_roomtype, room_type, price)
        VALUES (gen_random_uuid()::text, %s, %s)
        RETURNING {_COLUMNS}
        """,  # noqa: S608
        (room_type, price),
    )
    return _row_to_dict(cur.fetchone())


def update_room_type(
    cur: PgCursor,
    id_roomtype: str,
    fields: dict[str, Any],
) -> dict[str, Any] | None:
    """Replace the given columns and refresh updated_at.

    Args:
        cur: Database cursor.
        id_roomtype: Room type id.
        fields: Column -> new value, restricted to room_type and price.

    Returns:
        Updated row dict, or None if no active row has this id.

    Raises:
        ValueError: If fields is empty or names a non-updatable column.
    """
    if not fields:
        raise ValueError("No fields to update")
    unknown = set(fields) - _UPDATABLE
    if unknown:
        raise ValueError(f"Cannot update room_types columns: {sorted(unknown)}")

    sets: list[str] = ["updated_at = now()"]
    params: list[Any] = []
    for column in sorted(fields):
        sets.append(f"{column} = %s")
        params.append(fields[column])
    params.append(id_roomtype)

    cur.execute(
        f"""
        UPDATE room_types
        SET {", ".join(sets)}
        WHERE id_roomtype = %s AND deleted = false
        RETURNING {_COLUMNS}
        """,  # noqa: S608 – SET clause only holds whitelisted column names
        params,
    )
    row = cur.fetchone()
    return _row_to_dict(row) if row is not None else None


def mark_room_type_deleted(cur: PgCursor, id_roomtype: str) -> None:
    cur.execute(
        """
        UPDATE room_types
        SET deleted = true, updated_at = now()
        WHERE id_roomtype = %s
        """,
        (id_roomtype,),
    )
