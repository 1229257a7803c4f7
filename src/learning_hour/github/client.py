"""GitHub REST client used for code search and file retrieval."""

import base64
import binascii
import logging
from typing import Any, Optional

import httpx

from ..config import DEFAULT_GITHUB_API_URL
from ..exceptions import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

SEARCH_PAGE_SIZE = 30


class GitHubClient:
    """Thin wrapper over the GitHub REST API.

    Every operation requires a prior call to connect(). The client can also be
    used as a context manager, which connects on entry and disconnects on exit.
    """

    def __init__(
        self,
        token: Optional[str],
        base_url: str = DEFAULT_GITHUB_API_URL,
        timeout: int = 30,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._http: Optional[httpx.Client] = None

    @property
    def is_connected(self) -> bool:
        return self._http is not None

    def connect(self) -> None:
        """Open the HTTP session. Idempotent.

        Raises:
            ConfigurationError: If no GitHub token is configured
        """
        if self.is_connected:
            return
        if not self.token:
            raise ConfigurationError(
                "GITHUB_TOKEN is not set. Create a personal access token and add it to your .env file"
            )

        self._http = httpx.Client(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {self.token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=self.timeout,
            transport=self._transport,
        )
        logger.info("Connected to GitHub API at %s", self.base_url)

    def disconnect(self) -> None:
        if self._http is not None:
            self._http.close()
            self._http = None

    def __enter__(self) -> "GitHubClient":
        self.connect()
        return self

    def __exit__(self, *exc_info) -> None:
        self.disconnect()

    def search_code(self, owner: str, repo: str, query: str) -> list[dict[str, Any]]:
        """Search code within one repository.

        Returns:
            Search result items (each has at least ``path``)
        """
        data = self._get(
            "/search/code",
            operation="search code",
            params={"q": f"{query} repo:{owner}/{repo}", "per_page": SEARCH_PAGE_SIZE},
        )
        return list(data.get("items", []))

    def get_file_content(self, owner: str, repo: str, path: str) -> str:
        """Fetch and decode a file's text content."""
        data = self._get(f"/repos/{owner}/{repo}/contents/{path}", operation=f"fetch {path}")
        if isinstance(data, list):
            raise UpstreamError(f"{path} is a directory, not a file", operation="fetch file")

        encoded = data.get("content", "")
        if data.get("encoding", "base64") != "base64":
            return encoded
        try:
            return base64.b64decode(encoded).decode("utf-8", errors="replace")
        except (binascii.Error, ValueError) as e:
            raise UpstreamError(f"Could not decode {path}: {e}", operation="fetch file") from e

    def list_directory(self, owner: str, repo: str, path: str = "") -> list[dict[str, Any]]:
        """List directory entries (name, path, type)."""
        data = self._get(f"/repos/{owner}/{repo}/contents/{path}", operation="list directory")
        if not isinstance(data, list):
            return [data]
        return data

    def get_repository_info(self, owner: str, repo: str) -> dict[str, Any]:
        """Fetch repository metadata such as its primary language."""
        return self._get(f"/repos/{owner}/{repo}", operation="get repository")

    def _get(self, url: str, operation: str, params: Optional[dict] = None) -> Any:
        if self._http is None:
            raise ConfigurationError("GitHub client not connected")

        logger.debug("GitHub %s: GET %s %s", operation, url, params or "")
        try:
            response = self._http.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise UpstreamError(
                f"GitHub {operation} failed: {status} - {e.response.text[:200]}",
                operation=operation,
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"GitHub {operation} failed: {e}", operation=operation) from e
        except ValueError as e:
            raise UpstreamError(
                f"GitHub {operation} returned invalid JSON: {e}", operation=operation
            ) from e
