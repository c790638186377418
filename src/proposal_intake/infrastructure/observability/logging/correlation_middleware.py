from __future__ import annotations

import time
from typing import Any
from uuid import uuid4

import structlog
from structlog.contextvars import bound_contextvars

from proposal_intake.infrastructure.observability.logging.asgi_headers import (
    extract_header,
    extract_method,
    extract_path,
)

CORRELATION_HEADER = b"x-correlation-id"

logger = structlog.get_logger(component=__name__)


class CorrelationMiddleware:
    """
    Pure ASGI middleware. Every log line written while a request is handled carries
    its correlation id (taken from X-Correlation-ID or generated) and request line.
    One "Request processed" line closes the request with status and duration.
    """

    def __init__(self, app: Any) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_status = 500

        async def send_and_record(message: dict[str, Any]) -> None:
            nonlocal response_status
            if message["type"] == "http.response.start":
                response_status = message["status"]
            await send(message)

        started = time.perf_counter()
        with bound_contextvars(
            correlation_id=extract_header(scope, CORRELATION_HEADER) or uuid4().hex,
            request_method=extract_method(scope),
            request_path=extract_path(scope),
            request_origin=extract_header(scope, b"origin"),
        ):
            try:
                await self.app(scope, receive, send_and_record)
            finally:
                logger.info(
                    "Request processed",
                    http_status=response_status,
                    duration_ms=round((time.perf_counter() - started) * 1000, 2),
                )
