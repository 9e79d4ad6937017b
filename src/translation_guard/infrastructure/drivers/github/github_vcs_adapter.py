import base64
import urllib.parse
from typing import Any

import httpx

from translation_guard.core.application.ports.vcs_port import VcsPort
from translation_guard.core.domain.delivery import FileSnapshot
from translation_guard.core.domain.translation import ChangedFile
from translation_guard.core.exceptions import ProviderError, ProviderName
from translation_guard.infrastructure.drivers.github.github_http_client import GitHubHttpClient
from translation_guard.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger(__name__)


class GitHubVcsAdapter(VcsPort):
    """Commit diffs and file contents through the GitHub REST API."""

    def __init__(self, client: GitHubHttpClient):
        self.client = client

    async def get_changed_files(self, repository: str, sha: str) -> list[ChangedFile]:
        logger.info(f"Fetching changed files for commit {sha}", repository=repository)
        files: list[ChangedFile] = []
        next_path: str | None = f"repos/{repository}/commits/{sha}"
        while next_path:
            response = await self._send("get", next_path, context=f"get_commit({sha})")
            data = self._json(response, context=f"get_commit({sha})")
            for entry in data.get("files") or []:
                files.append(ChangedFile(filename=entry["filename"], diff_text=entry.get("patch") or ""))
            next_path = response.links.get("next", {}).get("url")
        return files

    async def get_file(self, repository: str, path: str, ref: str) -> FileSnapshot:
        encoded_path = urllib.parse.quote(path)
        response = await self._send(
            "get", f"repos/{repository}/contents/{encoded_path}", params={"ref": ref}, context=f"get_file({path})"
        )
        data = self._json(response, context=f"get_file({path})")
        try:
            content = base64.b64decode(data["content"]).decode("utf-8")
            return FileSnapshot(path=path, content=content, sha=data["sha"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ProviderError(ProviderName.GITHUB, f"Unreadable content for {path}: {exc}") from exc

    async def update_file(
        self, repository: str, snapshot: FileSnapshot, content: str, branch: str, message: str
    ) -> str:
        payload: dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
            "sha": snapshot.sha,
        }
        if branch:
            payload["branch"] = branch
        encoded_path = urllib.parse.quote(snapshot.path)
        logger.info(f"Committing annotations to {snapshot.path}", branch=branch, repository=repository)
        response = await self._send(
            "put", f"repos/{repository}/contents/{encoded_path}", json_data=payload, context=f"update_file({snapshot.path})"
        )
        data = self._json(response, context=f"update_file({snapshot.path})")
        return (data.get("commit") or {}).get("sha", "")

    async def _send(
        self,
        method: str,
        path: str,
        *,
        context: str,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
    ) -> httpx.Response:
        try:
            if method == "put":
                response = await self.client.put(path, json_data or {})
            else:
                response = await self.client.get(path, params=params)
        except httpx.HTTPError as exc:
            raise ProviderError(
                ProviderName.GITHUB, f"{context} failed: {exc}", retryable=True
            ) from exc
        if response.is_error:
            raise ProviderError(
                ProviderName.GITHUB,
                f"{context} failed: {self._error_message(response)}",
                status_code=response.status_code,
                retryable=response.status_code >= 500,
            )
        return response

    @staticmethod
    def _json(response: httpx.Response, context: str) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderError(ProviderName.GITHUB, f"{context} returned invalid JSON") from exc
        if not isinstance(data, dict):
            raise ProviderError(ProviderName.GITHUB, f"{context} returned unexpected payload")
        return data

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            return response.json().get("message") or response.reason_phrase
        except (ValueError, AttributeError):
            return response.reason_phrase
