from enum import StrEnum


class FailureKind(StrEnum):
    VALIDATION = "validation"
    UPSTREAM_AUTH = "upstream_auth"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UPSTREAM_REJECTED = "upstream_rejected"
    INTERNAL = "internal"
