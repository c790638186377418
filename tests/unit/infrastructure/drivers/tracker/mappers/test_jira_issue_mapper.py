from dataclasses import replace

from proposal_intake.infrastructure.drivers.tracker.mappers.jira_issue_mapper import JiraIssueMapper


def test_payload_carries_project_type_and_flags(settings, submission):
    fields = JiraIssueMapper(settings).to_create_payload(submission)["fields"]

    assert fields["project"] == {"key": "RVS"}
    assert fields["issuetype"] == {"name": "Specification"}
    assert fields["summary"] == "Zfoo"
    assert fields["customfield_10042"] == {"value": "ISA"}
    assert fields["customfield_10041"] == {"value": "Yes"}
    assert "customfield_10043" not in fields
    assert "customfield_10044" not in fields


def test_description_is_adf_built_from_narrative(settings, submission):
    description = JiraIssueMapper(settings).to_create_payload(submission)["fields"]["description"]

    texts = [p["content"][0]["text"] for p in description["content"]]
    assert description["type"] == "doc"
    assert texts[0].startswith("**Proposer Information:**")
    assert texts[-1] == "**Proposal Details:**\nAdds foo."


def test_optional_fields_present_only_when_given(settings, submission):
    rich = replace(submission, github_url="https://github.com/a/b", extensions=("Zfoo", "Zbar"))

    fields = JiraIssueMapper(settings).to_create_payload(rich)["fields"]

    assert fields["customfield_10043"] == "https://github.com/a/b"
    assert fields["customfield_10044"] == ["Zfoo", "Zbar"]


def test_missing_classification_and_fast_track_use_defaults(settings, submission):
    fields = JiraIssueMapper(settings).to_create_payload(
        replace(submission, isa_type="", fast_track=None)
    )["fields"]

    assert fields["customfield_10042"] == {"value": "ISA"}
    assert fields["customfield_10041"] == {"value": "No"}


def test_custom_field_ids_follow_settings(settings, submission):
    custom = settings.model_copy(update={"jira_field_isa_type": "customfield_1", "jira_issue_type": "Task"})

    fields = JiraIssueMapper(custom).to_create_payload(submission)["fields"]

    assert fields["customfield_1"] == {"value": "ISA"}
    assert fields["issuetype"] == {"name": "Task"}
