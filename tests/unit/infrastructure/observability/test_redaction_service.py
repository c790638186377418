from proposal_intake.infrastructure.observability.redaction_service import redact_dict, redact_text


def test_basic_auth_and_emails_are_redacted():
    text = "Authorization: Basic Ym90OnRva2Vu failed for jane@x.com"

    redacted = redact_text(text)

    assert "Ym90OnRva2Vu" not in redacted
    assert "jane@x.com" not in redacted
    assert "[REDACTED_EMAIL]" in redacted


def test_sensitive_keys_are_masked_recursively():
    data = {
        "jira_api_token": "**********",
        "jira_user_email": "bot@example.com",
        "nested": {"password": "x", "summary": "Zfoo"},
        "jira_project_key": "RVS",
    }

    redacted = redact_dict(data)

    assert redacted["jira_api_token"] == "[REDACTED]"
    assert redacted["jira_user_email"] == "[REDACTED]"
    assert redacted["nested"] == {"password": "[REDACTED]", "summary": "Zfoo"}
    assert redacted["jira_project_key"] == "RVS"


def test_empty_text_is_returned_unchanged():
    assert redact_text("") == ""


def test_api_token_assignments_and_bearer_tokens_are_masked():
    redacted = redact_text("JIRA_API_TOKEN='abc.def-123' then Bearer eyJhbGciOi")

    assert "abc.def-123" not in redacted
    assert "eyJhbGciOi" not in redacted
    assert redacted.count("[REDACTED]") == 2
