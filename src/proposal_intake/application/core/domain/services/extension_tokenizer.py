import re
from typing import Any

_FORM_SEPARATORS = re.compile(r"[,\s]+")


def split_extension_input(text: str | None) -> list[str]:
    """Form side: commas and/or whitespace separate tokens. Order and repeats are kept."""
    if not text:
        return []
    return [token for token in _FORM_SEPARATORS.split(text) if token]


def split_extension_field(value: Any) -> tuple[str, ...]:
    """Endpoint side: lists pass through, raw strings are split on commas."""
    if not value:
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    return tuple(str(item) for item in value if item is not None)
