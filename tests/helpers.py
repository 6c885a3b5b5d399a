"""Shared test helpers: an in-memory stand-in for the database and repositories.

The fake repositories expose the same functions (same signatures, cursor
first) as roomdesk.infra.repositories.*, so services can be exercised by
patching the repository module they import.
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Iterator

_EPOCH = datetime(2026, 1, 1, tzinfo=timezone.utc)


class FakeDatabase:
    """Stands in for roomdesk.infra.db.Database."""

    def __init__(self) -> None:
        self.cursor = object()
        self.txn_count = 0
        self.closed = False

    @contextmanager
    def txn(self) -> Iterator[Any]:
        self.txn_count += 1
        yield self.cursor

    def close(self) -> None:
        self.closed = True


class InMemoryTables:
    """room_types and rooms rows keyed by id, with a ticking clock."""

    def __init__(self) -> None:
        self.room_types: dict[str, dict[str, Any]] = {}
        self.rooms: dict[str, dict[str, Any]] = {}
        self._ticks = 0

    def now(self) -> datetime:
        self._ticks += 1
        return _EPOCH + timedelta(seconds=self._ticks)

    def add_room_type(self, room_type: str = "Standard", price: Any = "80", **overrides) -> dict:
        ts = self.now()
        row = {
            "id_roomtype": str(uuid.uuid4()),
            "room_type": room_type,
            "price": Decimal(str(price)),
            "created_at": ts,
            "updated_at": ts,
            "deleted": False,
        }
        row.update(overrides)
        self.room_types[row["id_roomtype"]] = row
        return dict(row)

    def add_room(self, id_roomtype: str, status: str = "available", **overrides) -> dict:
        ts = self.now()
        row = {
            "id_room": str(uuid.uuid4()),
            "id_roomtype": id_roomtype,
            "status": status,
            "created_at": ts,
            "updated_at": ts,
            "deleted": False,
        }
        row.update(overrides)
        self.rooms[row["id_room"]] = row
        return dict(row)


class FakeRoomTypesRepository:
    def __init__(self, tables: InMemoryTables) -> None:
        self.tables = tables

    def find_room_type(self, cur, id_roomtype, *, include_deleted=False):
        row = self.tables.room_types.get(id_roomtype)
        if row is None or (row["deleted"] and not include_deleted):
            return None
        return dict(row)

    def list_room_types(self, cur):
        return [dict(r) for r in self.tables.room_types.values() if not r["deleted"]]

    def count_room_types(self, cur, id_roomtype):
        return 1 if self.find_room_type(cur, id_roomtype) else 0

    def insert_room_type(self, cur, *, room_type, price):
        return self.tables.add_room_type(room_type=room_type, price=price)

    def update_room_type(self, cur, id_roomtype, fields):
        row = self.tables.room_types.get(id_roomtype)
        if row is None or row["deleted"]:
            return None
        row.update(fields)
        row["updated_at"] = self.tables.now()
        return dict(row)

    def mark_room_type_deleted(self, cur, id_roomtype):
        row = self.tables.room_types[id_roomtype]
        row["deleted"] = True
        row["updated_at"] = self.tables.now()


class FakeRoomsRepository:
    def __init__(self, tables: InMemoryTables) -> None:
        self.tables = tables

    def _join(self, row):
        joined = dict(row)
        joined["room_type"] = dict(self.tables.room_types[row["id_roomtype"]])
        return joined

    def find_room(self, cur, id_room):
        row = self.tables.rooms.get(id_room)
        if row is None or row["deleted"]:
            return None
        return dict(row)

    def find_room_with_room_type(self, cur, id_room):
        row = self.find_room(cur, id_room)
        return self._join(row) if row is not None else None

    def list_rooms_with_room_type(self, cur):
        return [self._join(r) for r in self.tables.rooms.values() if not r["deleted"]]

    def insert_room(self, cur, *, id_roomtype, status):
        return self.tables.add_room(id_roomtype, status)

    def update_room(self, cur, id_room, fields):
        row = self.tables.rooms.get(id_room)
        if row is None or row["deleted"]:
            return None
        row.update(fields)
        row["updated_at"] = self.tables.now()
        return dict(row)

    def mark_room_deleted(self, cur, id_room):
        row = self.tables.rooms[id_room]
        row["deleted"] = True
        row["updated_at"] = self.tables.now()


class MockCursor:
    """Records executed SQL and replays canned fetch results, in order."""

    def __init__(self, fetchone=None, fetchall=None) -> None:
        self.executed: list[tuple[str, Any]] = []
        self._fetchone = list(fetchone or [])
        self._fetchall = list(fetchall or [])

    def execute(self, query, params=None):
        self.executed.append((" ".join(query.split()), params))

    def fetchone(self):
        return self._fetchone.pop(0) if self._fetchone else None

    def fetchall(self):
        return self._fetchall.pop(0) if self._fetchall else []

    @property
    def last_sql(self) -> str:
        return self.executed[-1][0]

    @property
    def last_params(self):
        return self.executed[-1][1]
