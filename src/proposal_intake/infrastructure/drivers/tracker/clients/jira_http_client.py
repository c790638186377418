import base64
from typing import Any

import httpx

from proposal_intake.infrastructure.configuration.jira_settings import JiraSettings


class JiraHttpClient:
    """Thin async wrapper over the Jira Cloud REST API using Basic auth."""

    def __init__(self, settings: JiraSettings):
        self.settings = settings
        self.base_url = settings.jira_base_url.rstrip("/")
        self.timeout = settings.jira_timeout_seconds

    def _get_headers(self) -> dict[str, str]:
        email = self.settings.jira_user_email
        token = self.settings.jira_api_token.get_secret_value()
        creds = f"{email}:{token}"
        encoded = base64.b64encode(creds.encode("utf-8")).decode("utf-8")
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"Basic {encoded}",
        }

    def browse_url(self, issue_key: str) -> str:
        return f"{self.base_url}/browse/{issue_key}"

    async def get(self, path: str) -> httpx.Response:
        url = f"{self.base_url}/{path.lstrip('/')}"
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(url, headers=self._get_headers())

    async def post(self, path: str, json_data: dict[str, Any]) -> httpx.Response:
        url = f"{self.base_url}/{path.lstrip('/')}"
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.post(url, headers=self._get_headers(), json=json_data)
