"""OpenTelemetry spans around outbound tracker calls.

Without configure_tracing() the API's no-op provider is in place and
trace_operation costs next to nothing.
"""

from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from proposal_intake.infrastructure.observability.logging.record_shaper import SERVICE_NAME

P = ParamSpec("P")
R = TypeVar("R")

_configured = False


def configure_tracing() -> None:
    """Console-exported spans for the whole process. Only the first call installs a provider."""
    global _configured  # noqa: PLW0603
    if _configured:
        return
    _configured = True

    provider = TracerProvider(resource=Resource.create({"service.name": SERVICE_NAME}))
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)


def get_tracer() -> trace.Tracer:
    return trace.get_tracer(SERVICE_NAME)


def trace_operation(
    span_name: str, attributes: dict[str, str] | None = None
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Runs a coroutine method inside a span named ``span_name``."""

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            # Tracer looked up per call so a provider installed after import is honoured
            with get_tracer().start_as_current_span(span_name, attributes=attributes):
                return await func(*args, **kwargs)

        return wrapper

    return decorator
