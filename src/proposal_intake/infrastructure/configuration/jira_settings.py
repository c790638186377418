from typing import Any

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_QUOTES = "\"'"


class JiraSettings(BaseSettings):
    """
    Settings for the Jira Cloud project that receives proposals.
    """
    jira_base_url: str = Field(..., description="Jira Base URL, e.g. https://myorg.atlassian.net")
    jira_user_email: str = Field(..., description="Account used for Basic auth")
    jira_api_token: SecretStr = Field(..., description="API token paired with jira_user_email")
    jira_project_key: str = Field(..., description="Project that receives the tickets")
    jira_issue_type: str = Field(default="Specification")

    # Custom field ids of the proposal screen
    jira_field_isa_type: str = Field(default="customfield_10042")
    jira_field_fast_track: str = Field(default="customfield_10041")
    jira_field_github_url: str = Field(default="customfield_10043")
    jira_field_extensions: str = Field(default="customfield_10044")

    jira_identity_check: bool = Field(
        default=False,
        description="Call /myself before creating issues, for log diagnostics only",
    )
    jira_timeout_seconds: float = Field(default=10.0)

    @field_validator("jira_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("jira_user_email", mode="before")
    @classmethod
    def strip_email_quotes(cls, value: Any) -> Any:
        """Secrets pasted into dashboards often keep their surrounding quotes."""
        if isinstance(value, str):
            return value.strip().strip(_QUOTES)
        return value

    @field_validator("jira_api_token", mode="before")
    @classmethod
    def normalize_token(cls, value: Any) -> Any:
        if isinstance(value, SecretStr):
            value = value.get_secret_value()
        if isinstance(value, str):
            return "".join(value.strip().strip(_QUOTES).split())
        return value

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
