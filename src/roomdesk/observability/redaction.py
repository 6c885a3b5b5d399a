"""Redaction helpers for safe logging. Request data must pass through these.

Ids, status tokens and schema/field names are logged as-is. Anything else a
client typed (room type names, odd path segments) only shows its length.
"""

import re
from decimal import Decimal
from typing import Any

_TOKEN_PATTERN = re.compile(r"[A-Za-z0-9_.,:-]{1,64}")


def redact_string(value: str) -> str:
    if _TOKEN_PATTERN.fullmatch(value):
        return value
    return f"str(len={len(value)})"


def redact_value(value: Any) -> str:
    """Redact any value for safe logging. Returns string representation.

    Mappings only expose their keys and sequences only their length.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, str):
        return redact_string(value)
    if isinstance(value, dict):
        return f"dict(keys={list(value.keys())})"
    if isinstance(value, (list, tuple)):
        return f"list(len={len(value)})"
    return f"<{type(value).__name__}>"


def safe_log_context(**kwargs: Any) -> dict[str, str]:
    return {k: redact_value(v) for k, v in kwargs.items()}
