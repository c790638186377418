"""Logging setup: structlog for application code, stdlib records from uvicorn and httpx
rendered through the same processor chain."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from proposal_intake.infrastructure.observability.logging.record_shaper import shape_intake_record

JSON_ENVIRONMENTS = {"qa", "staging", "prod", "production"}

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Installs the logging pipeline once per process; later calls are ignored."""
    global _configured  # noqa: PLW0603
    if _configured:
        return
    _configured = True

    json_output = _wants_json()
    processors = _shared_processors(json_output)
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[*processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *processors, renderer],
        )
    )
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level.upper())


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    # Lazy proxy: module-level loggers resolve the configuration on first use
    return structlog.get_logger(component=component)


def _shared_processors(json_output: bool) -> list[Any]:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        processors.append(structlog.processors.format_exc_info)
    processors.append(shape_intake_record)
    return processors


def _wants_json() -> bool:
    """LOG_FORMAT=json|console wins; otherwise JSON outside local environments."""
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if log_format in ("json", "console"):
        return log_format == "json"
    return os.environ.get("APP_ENV", "local").lower() in JSON_ENVIRONMENTS
