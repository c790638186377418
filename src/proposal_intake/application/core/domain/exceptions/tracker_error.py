from __future__ import annotations

from dataclasses import dataclass

from proposal_intake.application.core.domain.value_objects.failure_kind import FailureKind


@dataclass
class TrackerError(Exception):
    """Raised by tracker adapters when an issue-tracker call does not succeed."""
    kind: FailureKind
    message: str
    status_code: int | None = None

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.kind.value}: {self.message}{code}"
