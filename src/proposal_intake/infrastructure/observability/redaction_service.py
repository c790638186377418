import re
from typing import Any

REDACTED = "[REDACTED]"
REDACTED_EMAIL = "[REDACTED_EMAIL]"

# Group 1 is kept, the credential after it is masked
_CREDENTIAL_PATTERNS = [
    re.compile(r"((?:Basic|Bearer)\s+)[A-Za-z0-9\-._~+/=]+", re.IGNORECASE),
    re.compile(r"(Authorization:\s*)[A-Za-z0-9\-._~+/=]+", re.IGNORECASE),
    re.compile(r"((?:jira_)?api_token\s*[:=]\s*)['\"]?[A-Za-z0-9\-._~+/=]+['\"]?", re.IGNORECASE),
]
_EMAIL = re.compile(r"[^\s@\"']+@[^\s@\"']+\.[^\s@\"']+")

# A key containing any of these has its value masked whole
SENSITIVE_KEY_PARTS = ("authorization", "token", "password", "secret", "email")


def redact_text(text: str) -> str:
    """Masks Jira credentials and email addresses in free text such as upstream error bodies."""
    if not text:
        return text
    for pattern in _CREDENTIAL_PATTERNS:
        text = pattern.sub(rf"\g<1>{REDACTED}", text)
    return _EMAIL.sub(REDACTED_EMAIL, text)


def redact_dict(data: dict[str, Any]) -> dict[str, Any]:
    """Copy of ``data`` safe to log: sensitive keys masked, strings scrubbed, nesting followed."""
    return {key: REDACTED if _is_sensitive(key) else _redact(value) for key, value in data.items()}


def _is_sensitive(key: Any) -> bool:
    lowered = str(key).lower()
    return any(part in lowered for part in SENSITIVE_KEY_PARTS)


def _redact(value: Any) -> Any:
    if isinstance(value, str):
        return redact_text(value)
    if isinstance(value, dict):
        return redact_dict(value)
    if isinstance(value, list):
        return [_redact(item) for item in value]
    return value
