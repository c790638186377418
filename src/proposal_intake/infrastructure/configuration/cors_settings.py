from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CorsSettings(BaseSettings):
    allowed_origin: str = Field(..., description="Origin the production form is served from")
    cors_max_age_seconds: int = Field(default=86400)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
