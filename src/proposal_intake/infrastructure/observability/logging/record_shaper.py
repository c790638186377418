"""Shapes flat structlog events into the intake log record.

Every line carries time, level, component, correlation id and message at the
top. Request, submission, tracker and error details are grouped under their
own keys, and only when the event supplied at least one of their fields.
Anything left over lands in ``extra``.
"""

from __future__ import annotations

from typing import Any

from opentelemetry import trace

SERVICE_NAME = "proposal-intake"

# group name -> (event key, record key) pairs
RECORD_GROUPS: dict[str, tuple[tuple[str, str], ...]] = {
    "request": (
        ("request_method", "method"),
        ("request_path", "path"),
        ("request_origin", "origin"),
        ("http_status", "status"),
        ("duration_ms", "duration_ms"),
    ),
    "submission": (
        ("outcome", "outcome"),
        ("ticket_key", "ticket_key"),
    ),
    "tracker": (
        ("upstream", "system"),
        ("operation", "operation"),
        ("account", "account"),
    ),
    "error": (
        ("error_type", "type"),
        ("error_code", "code"),
        ("error_details", "details"),
        ("error_retryable", "retryable"),
    ),
}

# Left at the top level so renderers can still format tracebacks
_RENDERER_KEYS = ("exception", "exc_info", "stack")


def _take_group(event_dict: dict[str, Any], pairs: tuple[tuple[str, str], ...]) -> dict[str, Any]:
    return {target: event_dict.pop(source) for source, target in pairs if source in event_dict}


def _active_trace_id() -> str | None:
    ctx = trace.get_current_span().get_span_context()
    if not ctx.is_valid:
        return None
    return format(ctx.trace_id, "032x")


def shape_intake_record(
    logger: Any,  # noqa: ARG001
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    record: dict[str, Any] = {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", method_name),
        "service": SERVICE_NAME,
        "component": event_dict.pop("component", None),
        "correlation_id": event_dict.pop("correlation_id", None),
        "message": event_dict.pop("event", ""),
    }

    trace_id = _active_trace_id()
    if trace_id is not None:
        record["trace_id"] = trace_id

    for name, pairs in RECORD_GROUPS.items():
        group = _take_group(event_dict, pairs)
        if group:
            record[name] = group

    for key in _RENDERER_KEYS:
        if key in event_dict:
            record[key] = event_dict.pop(key)

    if event_dict:
        record["extra"] = dict(event_dict)

    return record
