import time
from collections.abc import Awaitable

import httpx

from proposal_intake.application.core.domain.entities.proposal_submission import ProposalSubmission
from proposal_intake.application.core.domain.entities.ticket_reference import TicketReference
from proposal_intake.application.core.domain.exceptions.tracker_error import TrackerError
from proposal_intake.application.core.domain.value_objects.failure_kind import FailureKind
from proposal_intake.application.ports.tracker_gateway import TrackerGateway
from proposal_intake.infrastructure.drivers.tracker.clients.jira_http_client import JiraHttpClient
from proposal_intake.infrastructure.drivers.tracker.mappers.jira_issue_mapper import JiraIssueMapper
from proposal_intake.infrastructure.observability.logger_factory_service import get_logger
from proposal_intake.infrastructure.observability.metrics_service import (
    TRACKER_CALLS_TOTAL,
    TRACKER_LATENCY_SECONDS,
)
from proposal_intake.infrastructure.observability.redaction_service import redact_text
from proposal_intake.infrastructure.observability.tracing_setup import trace_operation

logger = get_logger(__name__)

ISSUE_PATH = "rest/api/3/issue"
MYSELF_PATH = "rest/api/3/myself"

_UNAVAILABLE_STATUSES = {408, 429}


class JiraRestAdapter(TrackerGateway):
    def __init__(self, client: JiraHttpClient, mapper: JiraIssueMapper):
        self.client = client
        self.mapper = mapper

    @trace_operation("tracker.create_issue", {"tracker": "jira"})
    async def create_ticket(self, submission: ProposalSubmission) -> TicketReference:
        payload = self.mapper.to_create_payload(submission)
        response = await self._send("create_issue", self.client.post(ISSUE_PATH, payload))

        data = self._json_body(response)
        key = data.get("key")
        if not key:
            raise TrackerError(
                FailureKind.UPSTREAM_REJECTED,
                "Jira response did not contain an issue key",
                response.status_code,
            )

        logger.info("Jira issue created", ticket_key=key, upstream="jira")
        return TicketReference(key=key, id=str(data.get("id", "")), url=self.client.browse_url(key))

    @trace_operation("tracker.myself", {"tracker": "jira"})
    async def whoami(self) -> str | None:
        response = await self._send("myself", self.client.get(MYSELF_PATH))
        data = self._json_body(response)
        return data.get("accountId") or data.get("displayName")

    async def _send(self, operation: str, request: Awaitable[httpx.Response]) -> httpx.Response:
        start = time.perf_counter()
        try:
            response = await request
        except httpx.HTTPError as e:
            TRACKER_CALLS_TOTAL.labels(operation=operation, outcome="transport_error").inc()
            raise TrackerError(
                FailureKind.UPSTREAM_UNAVAILABLE,
                f"Jira unreachable: {type(e).__name__}: {e}",
            ) from e
        finally:
            TRACKER_LATENCY_SECONDS.labels(operation=operation).observe(time.perf_counter() - start)

        if response.is_success:
            TRACKER_CALLS_TOTAL.labels(operation=operation, outcome="success").inc()
            return response

        TRACKER_CALLS_TOTAL.labels(operation=operation, outcome=str(response.status_code)).inc()
        logger.error(
            "Jira API error",
            upstream="jira",
            operation=operation,
            error_type="JiraHttpError",
            error_code=response.status_code,
            error_details=redact_text(response.text),
        )
        raise TrackerError(
            self._classify(response.status_code),
            f"Jira API error: {response.status_code}",
            response.status_code,
        )

    @staticmethod
    def _classify(status_code: int) -> FailureKind:
        if status_code in (401, 403):
            return FailureKind.UPSTREAM_AUTH
        if status_code in _UNAVAILABLE_STATUSES or status_code >= 500:
            return FailureKind.UPSTREAM_UNAVAILABLE
        return FailureKind.UPSTREAM_REJECTED

    @staticmethod
    def _json_body(response: httpx.Response) -> dict:
        try:
            data = response.json()
        except ValueError as e:
            raise TrackerError(
                FailureKind.UPSTREAM_REJECTED,
                "Jira returned a body that is not JSON",
                response.status_code,
            ) from e
        if not isinstance(data, dict):
            raise TrackerError(
                FailureKind.UPSTREAM_REJECTED,
                "Jira returned an unexpected JSON document",
                response.status_code,
            )
        return data
