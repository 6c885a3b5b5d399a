"""Create the rooms table.

Revision ID: 0002_rooms
Revises: 0001_room_types
Create Date: 2026-10-19
"""

from __future__ import annotations

from pathlib import Path

from alembic import op

revision = "0002_rooms"
down_revision = "0001_room_types"
branch_labels = None
depends_on = None


def upgrade() -> None:
    sql_path = Path(__file__).resolve().parents[1] / "sql" / "002_rooms.sql"
    sql = sql_path.read_text(encoding="utf-8")
    conn = op.get_bind()
    conn.exec_driver_sql(sql)


def downgrade() -> None:
    # Soft-deleted rows are dropped along with the table.
    conn = op.get_bind()
    conn.exec_driver_sql("DROP INDEX IF EXISTS idx_rooms_active;")
    conn.exec_driver_sql("DROP INDEX IF EXISTS idx_rooms_id_roomtype;")
    conn.exec_driver_sql("DROP TABLE IF EXISTS rooms;")
