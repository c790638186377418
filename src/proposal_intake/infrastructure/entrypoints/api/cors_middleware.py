"""Pure ASGI middleware that answers CORS preflights and decorates every response.

Only the configured origin and local loopback origins get their Origin echoed back.
Any other origin receives the configured origin, which browsers then reject.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from proposal_intake.infrastructure.configuration.cors_settings import CorsSettings
from proposal_intake.infrastructure.observability.logging.asgi_headers import extract_header

LOOPBACK_PREFIXES = ("http://localhost:", "http://127.0.0.1:")
ALLOWED_METHODS = "POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type"


@dataclass(frozen=True)
class CorsPolicy:
    allowed_origin: str
    max_age_seconds: int = 86400

    @classmethod
    def from_settings(cls, settings: CorsSettings) -> "CorsPolicy":
        return cls(allowed_origin=settings.allowed_origin, max_age_seconds=settings.cors_max_age_seconds)

    def resolve_origin(self, origin: str | None) -> str:
        if origin and (origin == self.allowed_origin or origin.startswith(LOOPBACK_PREFIXES)):
            return origin
        return self.allowed_origin

    def headers_for(self, origin: str | None) -> dict[str, str]:
        return {
            "Access-Control-Allow-Origin": self.resolve_origin(origin),
            "Access-Control-Allow-Methods": ALLOWED_METHODS,
            "Access-Control-Allow-Headers": ALLOWED_HEADERS,
            "Access-Control-Max-Age": str(self.max_age_seconds),
        }


class CorsMiddleware:
    def __init__(self, app: Any, policy: CorsPolicy) -> None:
        self.app = app
        self.policy = policy

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        cors_headers = self._encode(self.policy.headers_for(extract_header(scope, b"origin")))

        if scope.get("method") == "OPTIONS":
            await self._send_preflight(send, cors_headers)
            return

        async def _with_cors(message: dict[str, Any]) -> None:
            if message.get("type") == "http.response.start":
                headers = list(message.get("headers", []))
                headers.extend(cors_headers)
                message = {**message, "headers": headers}
            await send(message)

        await self.app(scope, receive, _with_cors)

    @staticmethod
    async def _send_preflight(send: Any, cors_headers: list[tuple[bytes, bytes]]) -> None:
        await send({
            "type": "http.response.start",
            "status": 200,
            "headers": [*cors_headers, (b"content-length", b"0")],
        })
        await send({"type": "http.response.body", "body": b""})

    @staticmethod
    def _encode(headers: dict[str, str]) -> list[tuple[bytes, bytes]]:
        return [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in headers.items()]
