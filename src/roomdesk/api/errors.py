"""Translate domain errors into HTTP errors for the routes."""

from __future__ import annotations

from fastapi import HTTPException

from roomdesk.domain.errors import NotFoundError, RequestValidationFailed
from roomdesk.observability.logging import get_logger
from roomdesk.observability.redaction import safe_log_context

logger = get_logger(__name__)


def to_http_exception(exc: NotFoundError | RequestValidationFailed) -> HTTPException:
    if isinstance(exc, RequestValidationFailed):
        logger.info(
            "request rejected by validation",
            extra={
                "extra_fields": safe_log_context(
                    schema=exc.schema,
                    fields=",".join(
                        ".".join(str(p) for p in e.get("loc", ())) for e in exc.errors
                    ),
                )
            },
        )
        return HTTPException(status_code=exc.status_code, detail=exc.errors)

    return HTTPException(status_code=exc.status_code, detail=exc.message)
