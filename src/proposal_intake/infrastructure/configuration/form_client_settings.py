from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FormClientSettings(BaseSettings):
    """Where the form client sends proposals."""
    api_endpoint: str = Field(default="http://localhost:8000/api/submit")
    api_timeout_seconds: float = Field(default=30.0)

    model_config = SettingsConfigDict(env_prefix="PROPOSAL_", env_file=".env", extra="ignore")
