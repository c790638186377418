from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str
