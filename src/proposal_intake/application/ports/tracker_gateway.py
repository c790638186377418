from abc import ABC, abstractmethod

from proposal_intake.application.core.domain.entities.proposal_submission import ProposalSubmission
from proposal_intake.application.core.domain.entities.ticket_reference import TicketReference


class TrackerGateway(ABC):
    """Outbound port to the issue tracker that receives proposals."""

    @abstractmethod
    async def create_ticket(self, submission: ProposalSubmission) -> TicketReference:
        """Creates one ticket. Raises TrackerError when the tracker does not accept it."""

    @abstractmethod
    async def whoami(self) -> str | None:
        """Returns the account the credentials resolve to."""
