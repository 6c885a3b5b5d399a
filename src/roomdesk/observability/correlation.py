"""Per-request correlation id, attached to every JSON log line."""

from __future__ import annotations

import re
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

CORRELATION_ID_HEADER = "X-Correlation-ID"

# Caller-supplied ids end up in a response header and in the logs
_ACCEPTED_ID = re.compile(r"[A-Za-z0-9._:-]{1,128}")

_current: ContextVar[str] = ContextVar("roomdesk_correlation_id", default="")


def get_correlation_id() -> str:
    """Id of the request being handled, or "" outside a request."""
    return _current.get()


def resolve_correlation_id(incoming: str | None) -> str:
    if incoming and _ACCEPTED_ID.fullmatch(incoming):
        return incoming
    return str(uuid.uuid4())


@contextmanager
def correlation_scope(incoming: str | None = None) -> Iterator[str]:
    """Bind a correlation id for the duration of the block.

    The caller's id is reused when it is well formed, otherwise a fresh
    UUID is generated. Yields the id in effect.
    """
    cid = resolve_correlation_id(incoming)
    token = _current.set(cid)
    try:
        yield cid
    finally:
        _current.reset(token)
