from typing import Any

import httpx

from proposal_intake.application.core.domain.services.submission_validator import SubmissionValidator
from proposal_intake.infrastructure.configuration.form_client_settings import FormClientSettings
from proposal_intake.infrastructure.entrypoints.form.proposal_form import ProposalForm
from proposal_intake.infrastructure.entrypoints.form.submission_status import (
    DEFAULT_FAILURE_MESSAGE,
    SubmissionStatus,
)
from proposal_intake.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger(__name__)


class ProposalFormClient:
    """
    Client side of the intake flow: holds the form state, validates it with the same
    rules as the endpoint and posts it. Every submit or retry is one independent request.
    """

    def __init__(self, endpoint_url: str, timeout: float = 30.0):
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self.form = ProposalForm()
        self.errors: dict[str, str] = {}
        self.status: SubmissionStatus | None = None
        self.last_body: dict[str, Any] | None = None

    @classmethod
    def from_settings(cls, settings: FormClientSettings) -> "ProposalFormClient":
        return cls(settings.api_endpoint, timeout=settings.api_timeout_seconds)

    def update_field(self, name: str, value: str) -> None:
        if name not in ProposalForm.field_names():
            raise KeyError(f"Unknown form field: {name}")
        setattr(self.form, name, value)
        self.errors.pop(name, None)

    def fill(self, values: dict[str, Any]) -> None:
        for name, value in values.items():
            if isinstance(value, bool):
                # YAML turns an unquoted yes/no into a boolean
                value = "Yes" if value else "No"
            self.update_field(name, "" if value is None else str(value))

    def validate(self) -> bool:
        self.errors = {}
        for error in SubmissionValidator.validate_form(self.form.to_submission()):
            self.errors.setdefault(error.field, error.message)
        return not self.errors

    def submit(self) -> SubmissionStatus | None:
        """Returns None when validation blocks the request; nothing is sent in that case."""
        if not self.validate():
            logger.info("Form has errors, not submitting", error_details=sorted(self.errors))
            return None

        self.last_body = self.form.to_request_body()
        return self._send(self.last_body)

    def retry(self) -> SubmissionStatus:
        if self.last_body is None:
            raise RuntimeError("Nothing has been submitted yet")
        return self._send(self.last_body)

    def go_back(self) -> None:
        """Back to editing with the entered data intact."""
        self.status = None

    def reset(self) -> None:
        self.form = ProposalForm()
        self.errors = {}
        self.status = None
        self.last_body = None

    def _send(self, body: dict[str, Any]) -> SubmissionStatus:
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(self.endpoint_url, json=body)
            result = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                "Submission error",
                error_type=type(e).__name__,
                error_details=str(e),
                upstream="proposal-api",
            )
            self.status = SubmissionStatus.error(f"Network error: {e}. Please try again.")
            return self.status

        if response.is_success and isinstance(result, dict) and result.get("success"):
            self.status = SubmissionStatus.success(result.get("jiraKey"), result.get("jiraUrl"))
        else:
            self.status = SubmissionStatus.error(self._failure_message(result))
        return self.status

    @staticmethod
    def _failure_message(result: Any) -> str:
        if not isinstance(result, dict):
            return DEFAULT_FAILURE_MESSAGE
        if result.get("error"):
            return str(result["error"])
        if result.get("errors"):
            return "; ".join(str(e) for e in result["errors"])
        return DEFAULT_FAILURE_MESSAGE
