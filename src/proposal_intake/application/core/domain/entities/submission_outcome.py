from dataclasses import dataclass, field

from proposal_intake.application.core.domain.entities.ticket_reference import TicketReference
from proposal_intake.application.core.domain.value_objects.failure_kind import FailureKind


@dataclass(frozen=True)
class SubmissionOutcome:
    """
    Result of one submission attempt.
    Exactly one of `ticket` (created) or `failure_kind` (failed) is set.
    """
    ticket: TicketReference | None = None
    failure_kind: FailureKind | None = None
    errors: tuple[str, ...] = field(default_factory=tuple)
    message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.ticket is not None

    @classmethod
    def created(cls, ticket: TicketReference) -> "SubmissionOutcome":
        return cls(ticket=ticket)

    @classmethod
    def rejected(cls, errors: list[str]) -> "SubmissionOutcome":
        return cls(failure_kind=FailureKind.VALIDATION, errors=tuple(errors))

    @classmethod
    def failed(cls, kind: FailureKind, message: str) -> "SubmissionOutcome":
        return cls(failure_kind=kind, message=message)
