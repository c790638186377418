from proposal_intake.application.core.domain.entities.proposal_submission import ProposalSubmission
from proposal_intake.application.core.domain.entities.submission_outcome import SubmissionOutcome
from proposal_intake.application.core.domain.exceptions.tracker_error import TrackerError
from proposal_intake.application.core.domain.services.submission_validator import SubmissionValidator
from proposal_intake.application.core.domain.value_objects.failure_kind import FailureKind
from proposal_intake.application.ports.tracker_gateway import TrackerGateway
from proposal_intake.infrastructure.observability.logger_factory_service import get_logger
from proposal_intake.infrastructure.observability.metrics_service import SUBMISSIONS_TOTAL

logger = get_logger(__name__)


class SubmitProposalUseCase:
    """
    Validates a proposal and forwards it to the tracker as a single ticket.
    Flow: Validate -> (optional identity diagnostic) -> Create.
    """

    def __init__(self, tracker: TrackerGateway, identity_check: bool = False):
        self.tracker = tracker
        self.identity_check = identity_check

    async def execute(self, submission: ProposalSubmission) -> SubmissionOutcome:
        outcome = await self._run(submission)
        label = "created" if outcome.succeeded else outcome.failure_kind.value
        SUBMISSIONS_TOTAL.labels(outcome=label).inc()
        return outcome

    async def _run(self, submission: ProposalSubmission) -> SubmissionOutcome:
        errors = SubmissionValidator.validate(submission)
        if errors:
            logger.info(
                "Submission rejected by validation",
                outcome=FailureKind.VALIDATION.value,
                error_type="ValidationError",
                error_details=[e.message for e in errors],
            )
            return SubmissionOutcome.rejected([e.message for e in errors])

        if self.identity_check:
            await self._log_identity()

        try:
            ticket = await self.tracker.create_ticket(submission)
        except TrackerError as e:
            logger.error(
                "Tracker refused the proposal",
                outcome=e.kind.value,
                error_type="TrackerError",
                error_code=e.status_code,
                error_details=e.message,
                error_retryable=e.kind == FailureKind.UPSTREAM_UNAVAILABLE,
            )
            return SubmissionOutcome.failed(e.kind, e.message)
        except Exception as e:
            logger.exception(
                "Unexpected failure while creating ticket",
                outcome=FailureKind.INTERNAL.value,
                error_type=type(e).__name__,
                error_details=str(e),
            )
            return SubmissionOutcome.failed(FailureKind.INTERNAL, str(e))

        logger.info("Proposal forwarded", outcome="created", ticket_key=ticket.key)
        return SubmissionOutcome.created(ticket)

    async def _log_identity(self) -> None:
        # Diagnostic only: the create call runs whatever happens here.
        try:
            account = await self.tracker.whoami()
            logger.info("Tracker credentials resolved", account=account)
        except Exception as e:
            logger.warning(
                "Tracker identity check failed",
                error_type=type(e).__name__,
                error_details=str(e),
            )
