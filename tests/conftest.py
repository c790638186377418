import pytest

from proposal_intake.application.core.domain.entities.proposal_submission import ProposalSubmission
from proposal_intake.infrastructure.configuration.main_settings import Settings

JIRA_BASE_URL = "https://jira.example.com"
ALLOWED_ORIGIN = "https://proposals.example.org"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        allowed_origin=ALLOWED_ORIGIN,
        jira_base_url=JIRA_BASE_URL,
        jira_user_email="bot@example.com",
        jira_api_token="mock_jira_token",
        jira_project_key="RVS",
        app_name="TestIntake",
    )


@pytest.fixture
def valid_body():
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@x.com",
        "affiliation": "Example Labs",
        "summary": "Zfoo",
        "description": "Adds foo.",
        "isaType": "ISA",
        "fastTrack": True,
        "githubUrl": None,
        "extensions": [],
    }


@pytest.fixture
def submission():
    return ProposalSubmission(
        first_name="Jane",
        last_name="Doe",
        email="jane@x.com",
        affiliation="Example Labs",
        summary="Zfoo",
        description="Adds foo.",
        isa_type="ISA",
        fast_track=True,
    )
