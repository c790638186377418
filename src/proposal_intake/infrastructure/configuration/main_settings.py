from pydantic import Field
from pydantic_settings import SettingsConfigDict

from proposal_intake.infrastructure.configuration.cors_settings import CorsSettings
from proposal_intake.infrastructure.configuration.jira_settings import JiraSettings


class Settings(JiraSettings, CorsSettings):
    """
    Combines all endpoint settings.
    Inherits from JiraSettings and CorsSettings.
    """
    app_name: str = "Proposal Intake"
    log_level: str = "INFO"
    tracing_enabled: bool = False
    metrics_port: int | None = Field(default=None, description="Expose Prometheus metrics on this port")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
