"""Database access layer using psycopg2.

Provides:
- connect_kwargs(): DB_PASSWORD fallback for DSNs without a password
- txn(): Context manager for short, safe transactions on a connection
- Database: process-wide connection pool handed to each service
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Iterator
from urllib.parse import urlparse

from psycopg2.extensions import connection as PgConnection, cursor as PgCursor
from psycopg2.pool import ThreadedConnectionPool

from roomdesk.infra.config import Settings
from roomdesk.observability.logging import get_logger

logger = get_logger(__name__)


def _dsn_has_password(dsn: str) -> bool:
    if "://" in dsn:
        return bool(urlparse(dsn).password)
    return any(token.startswith("password=") for token in dsn.split())


def connect_kwargs(dsn: str, password: str = "") -> dict[str, Any]:
    """Extra psycopg2.connect kwargs for a DSN.

    The password is only injected when the DSN carries none, so a DSN with
    an inline password always wins.

    Args:
        dsn: libpq key=value DSN or postgres:// URL.
        password: Fallback password (DB_PASSWORD).

    Returns:
        {"password": ...} or an empty dict.
    """
    if password and not _dsn_has_password(dsn):
        return {"password": password}
    return {}


@contextmanager
def txn(conn: PgConnection) -> Iterator[PgCursor]:
    """Context manager for a short, safe transaction.

    Commits on successful exit, rolls back on exception.

    Example:
        with txn(conn) as cur:
            cur.execute("UPDATE rooms SET status = %s WHERE id_room = %s", (s, rid))
    """
    try:
        with conn.cursor() as cur:
            yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise


class Database:
    """Connection pool shared by every service for the lifetime of the process.

    FastAPI runs sync routes on a thread pool, hence ThreadedConnectionPool.
    The route thread pool is larger than maxconn, and getconn() raises
    PoolError when exhausted, so txn() waits on a slot first.
    """

    def __init__(
        self,
        dsn: str,
        *,
        password: str = "",
        minconn: int = 1,
        maxconn: int = 10,
    ) -> None:
        self._pool = ThreadedConnectionPool(
            minconn, maxconn, dsn, **connect_kwargs(dsn, password)
        )
        self._slots = threading.BoundedSemaphore(maxconn)
        logger.info(
            "database pool opened",
            extra={"extra_fields": {"minconn": minconn, "maxconn": maxconn}},
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> Database:
        """Open the pool described by settings.

        Raises:
            RuntimeError: If DATABASE_URL is not set.
            psycopg2.Error: On connection failure.
        """
        if not settings.database_url:
            raise RuntimeError("DATABASE_URL environment variable not set")
        return cls(
            settings.database_url,
            password=settings.db_password,
            minconn=settings.db_pool_min,
            maxconn=settings.db_pool_max,
        )

    @contextmanager
    def txn(self) -> Iterator[PgCursor]:
        """Borrow a pooled connection for one transaction.

        Blocks while all maxconn connections are checked out.
        """
        with self._slots:
            conn = self._pool.getconn()
            try:
                with txn(conn) as cur:
                    yield cur
            finally:
                self._pool.putconn(conn)

    def close(self) -> None:
        self._pool.closeall()
        logger.info("database pool closed")
