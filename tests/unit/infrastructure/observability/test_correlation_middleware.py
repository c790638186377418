import pytest
from structlog.contextvars import get_contextvars

from proposal_intake.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)


def http_scope(headers=()):
    return {"type": "http", "method": "POST", "path": "/api/submit", "headers": list(headers)}


async def no_body():
    return {"type": "http.request", "body": b"", "more_body": False}


@pytest.mark.asyncio
async def test_request_context_is_bound_while_handling_and_cleared_after():
    seen = {}
    sent = []

    async def app(scope, receive, send):
        seen.update(get_contextvars())
        await send({"type": "http.response.start", "status": 201, "headers": []})
        await send({"type": "http.response.body", "body": b""})

    async def send(message):
        sent.append(message)

    scope = http_scope([(b"x-correlation-id", b"corr-1"), (b"origin", b"http://localhost:5173")])
    await CorrelationMiddleware(app)(scope, no_body, send)

    assert seen == {
        "correlation_id": "corr-1",
        "request_method": "POST",
        "request_path": "/api/submit",
        "request_origin": "http://localhost:5173",
    }
    assert [m["type"] for m in sent] == ["http.response.start", "http.response.body"]
    assert "correlation_id" not in get_contextvars()


@pytest.mark.asyncio
async def test_correlation_id_is_generated_when_absent():
    seen = {}

    async def app(scope, receive, send):
        seen.update(get_contextvars())
        await send({"type": "http.response.start", "status": 404, "headers": []})
        await send({"type": "http.response.body", "body": b""})

    async def send(message):
        pass

    await CorrelationMiddleware(app)(http_scope(), no_body, send)

    assert len(seen["correlation_id"]) == 32
    assert seen["request_origin"] is None


@pytest.mark.asyncio
async def test_non_http_scopes_pass_straight_through():
    calls = []

    async def app(scope, receive, send):
        calls.append(get_contextvars())

    await CorrelationMiddleware(app)({"type": "lifespan"}, no_body, None)

    assert len(calls) == 1
    assert "correlation_id" not in calls[0]
