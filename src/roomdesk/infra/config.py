"""Process configuration read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    database_url may be empty. The app then starts without a pool: /health
    answers and resource routes return 503. Database.from_settings refuses it.
    """

    database_url: str = ""
    db_password: str = ""
    db_pool_min: int = 1
    db_pool_max: int = 10
    app_title: str = "Roomdesk"

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Settings:
        if env is None:
            env = os.environ

        pool_min = _env_int(env, "DB_POOL_MIN", 1)
        pool_max = _env_int(env, "DB_POOL_MAX", 10)
        if pool_min < 0 or pool_max < 1 or pool_min > pool_max:
            raise RuntimeError(
                f"Invalid pool bounds: DB_POOL_MIN={pool_min}, DB_POOL_MAX={pool_max}"
            )

        return cls(
            database_url=env.get("DATABASE_URL", ""),
            db_password=env.get("DB_PASSWORD", ""),
            db_pool_min=pool_min,
            db_pool_max=pool_max,
            app_title=env.get("APP_TITLE") or "Roomdesk",
        )
