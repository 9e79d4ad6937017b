from typing import Any

import httpx
from pydantic import SecretStr


class GitHubHttpClient:
    """Thin async wrapper over the GitHub REST API."""

    def __init__(self, base_url: str, token: SecretStr | None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self._token = token
        self._timeout = timeout

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        token = self._token.get_secret_value() if self._token else ""
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def url(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    async def get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.get(self.url(path), headers=self._get_headers(), params=params)

    async def put(self, path: str, json_data: dict[str, Any]) -> httpx.Response:
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.put(self.url(path), headers=self._get_headers(), json=json_data)
