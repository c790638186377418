from __future__ import annotations

from typing import Any


def extract_header(scope: dict[str, Any], name: bytes) -> str | None:
    """Extract a header value from ASGI scope (case-insensitive)."""
    headers: list[tuple[bytes, bytes]] = scope.get("headers", [])
    lower_name = name.lower()
    for key, value in headers:
        if key.lower() == lower_name:
            return value.decode("latin-1")
    return None


def extract_path(scope: dict[str, Any]) -> str:
    return str(scope.get("path", "/"))


def extract_method(scope: dict[str, Any]) -> str:
    return str(scope.get("method", "UNKNOWN"))
