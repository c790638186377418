from typing import Any

from proposal_intake.application.core.domain.entities.proposal_submission import ProposalSubmission
from proposal_intake.application.core.domain.services.proposal_narrative import ProposalNarrative
from proposal_intake.application.core.domain.value_objects.fast_track import FastTrack
from proposal_intake.application.core.domain.value_objects.isa_type import IsaType
from proposal_intake.infrastructure.configuration.jira_settings import JiraSettings
from proposal_intake.infrastructure.drivers.tracker.mappers.jira_adf_builder import JiraAdfBuilder


class JiraIssueMapper:
    """Maps a proposal to the `POST /rest/api/3/issue` body of the configured project."""

    def __init__(self, settings: JiraSettings):
        self.settings = settings

    def to_create_payload(self, submission: ProposalSubmission) -> dict[str, Any]:
        s = self.settings
        fields: dict[str, Any] = {
            "project": {"key": s.jira_project_key},
            "summary": submission.summary,
            "description": JiraAdfBuilder.text_to_adf(ProposalNarrative.render(submission)),
            "issuetype": {"name": s.jira_issue_type},
            s.jira_field_isa_type: {"value": IsaType.resolve(submission.isa_type)},
            s.jira_field_fast_track: {"value": FastTrack.from_raw(submission.fast_track).value},
        }

        if submission.github_url:
            fields[s.jira_field_github_url] = submission.github_url

        if submission.extensions:
            fields[s.jira_field_extensions] = list(submission.extensions)

        return {"fields": fields}
