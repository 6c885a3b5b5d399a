"""Database URL helpers for Alembic migrations.

Kept apart from env.py so they can be tested without triggering
alembic.context at import time.

DATABASE_URL may be a postgres URL or a libpq key=value DSN (the form the
application hands to psycopg2); SQLAlchemy needs a URL, so DSNs are converted.
DB_PASSWORD fills in the password when DATABASE_URL has none.
"""

from __future__ import annotations

import os
from typing import Mapping

from psycopg2.extensions import parse_dsn
from sqlalchemy.engine import URL, make_url

_DRIVER = "postgresql+psycopg2"


def _url_from_uri(raw: str, fallback_password: str) -> URL:
    if raw.startswith("postgres://"):
        raw = "postgresql://" + raw[len("postgres://"):]
    url = make_url(raw).set(drivername=_DRIVER)
    if fallback_password and not url.password:
        url = url.set(password=fallback_password)
    return url


def _url_from_dsn(raw: str, fallback_password: str) -> URL:
    params = parse_dsn(raw)
    password = params.pop("password", "") or fallback_password
    user = params.pop("user", None)
    dbname = params.pop("dbname", None)
    host = params.pop("host", "localhost")
    port = params.pop("port", None)

    # Unix socket directory (e.g. /cloudsql/PROJECT:REGION:INSTANCE) goes in the query
    if host.startswith("/"):
        params["host"] = host
        host = None

    return URL.create(
        _DRIVER,
        username=user,
        password=password or None,
        host=host,
        port=int(port) if port else None,
        database=dbname,
        query=params,
    )


def get_database_url(env: Mapping[str, str] | None = None) -> str:
    """SQLAlchemy URL string for the migration engine.

    Raises:
        RuntimeError: If DATABASE_URL is not set.
    """
    if env is None:
        env = os.environ
    raw = env.get("DATABASE_URL", "").strip()
    if not raw:
        raise RuntimeError("DATABASE_URL is required to run migrations")

    fallback_password = env.get("DB_PASSWORD", "")
    if "://" in raw:
        url = _url_from_uri(raw, fallback_password)
    else:
        url = _url_from_dsn(raw, fallback_password)
    return url.render_as_string(hide_password=False)
