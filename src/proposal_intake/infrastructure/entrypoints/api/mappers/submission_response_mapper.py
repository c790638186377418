from fastapi import status
from fastapi.responses import JSONResponse

from proposal_intake.application.core.domain.entities.submission_outcome import SubmissionOutcome
from proposal_intake.application.core.domain.value_objects.failure_kind import FailureKind

GENERIC_FAILURE_MESSAGE = "Failed to create Jira issue. Please try again later."


class SubmissionResponseMapper:
    """Translates a SubmissionOutcome into the JSON contract the form expects."""

    @staticmethod
    def to_response(outcome: SubmissionOutcome) -> JSONResponse:
        if outcome.succeeded:
            return JSONResponse(
                status_code=status.HTTP_200_OK,
                content={
                    "success": True,
                    "jiraKey": outcome.ticket.key,
                    "jiraUrl": outcome.ticket.url,
                },
            )

        if outcome.failure_kind == FailureKind.VALIDATION:
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"success": False, "errors": list(outcome.errors)},
            )

        # Upstream details stay in the logs
        return SubmissionResponseMapper.internal_error()

    @staticmethod
    def internal_error() -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": GENERIC_FAILURE_MESSAGE},
        )

    @staticmethod
    def not_found() -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Not found"},
        )
