"""GitHub Contents API adapter — implements the DirectoryLister and ContentFetcher ports."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any
from urllib.parse import quote

import httpx

from letter_stats.domain.entities import EntryKind, RepositoryEntry
from letter_stats.domain.exceptions import (
    AccessDeniedError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    TransportError,
)
from letter_stats.domain.value_objects import RepoRef

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
_USER_AGENT = "letter-stats/1.0"


class GitHubContentsAdapter:
    """Concrete lister + fetcher backed by the GitHub v3 Contents API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        repo: RepoRef,
        token: str | None = None,
    ) -> None:
        self._client = client
        self._repo = repo
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": _USER_AGENT,
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def list_directory(self, path: str) -> list[RepositoryEntry]:
        """GET /repos/{owner}/{repo}/contents/{path} → [RepositoryEntry]."""
        endpoint = f"/repos/{self._repo.owner}/{self._repo.repo}/contents"
        path = path.strip("/")
        if path:
            # Git allows "#", "?" and "%" in names; they must not read as URL syntax.
            escaped = quote(path, safe="/")
            endpoint = f"{endpoint}/{escaped}"

        resp = await self._get(f"{_GITHUB_API}{endpoint}", what=path or "/")
        data = resp.json()

        # Listing a file path yields a single object instead of an array.
        items: list[dict[str, Any]] = data if isinstance(data, list) else [data]
        return [_to_entry(item) for item in items]

    async def fetch_content(self, ref: str) -> str:
        """Fetch raw file text from a ``download_url``."""
        resp = await self._get(ref, what=ref)
        return resp.text

    async def _get(self, url: str, what: str) -> httpx.Response:
        """Perform a GET request with error translation."""
        try:
            resp = await self._client.get(url, headers=self._api_headers)
        except httpx.HTTPError as exc:
            raise TransportError(f"Network error fetching {url}: {exc}") from exc

        if resp.status_code == 200:
            return resp

        if resp.status_code == 404:
            raise NotFoundError(f"Not found in {self._repo.full_name}: {what}")

        if resp.status_code == 401:
            raise AuthenticationError(
                "GitHub rejected the access token. Check the GITHUB_TOKEN environment variable."
            )

        if resp.status_code == 403:
            if resp.headers.get("x-ratelimit-remaining", "") == "0":
                reset_raw = resp.headers.get("x-ratelimit-reset", "")
                try:
                    reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                        "%Y-%m-%d %H:%M:%S UTC"
                    )
                except (ValueError, OSError):
                    reset_str = reset_raw or "unknown"
                raise RateLimitError(
                    f"GitHub API rate limit exceeded. Resets at {reset_str}. "
                    "Set the GITHUB_TOKEN environment variable to increase the limit."
                )
            raise AccessDeniedError(
                f"Access denied to {self._repo.full_name}. The repository may be private."
            )

        if resp.status_code == 429:
            raise RateLimitError("GitHub API rate limit exceeded (HTTP 429).")

        raise TransportError(f"GitHub returned HTTP {resp.status_code} for {url}")


def _to_entry(item: dict[str, Any]) -> RepositoryEntry:
    return RepositoryEntry(
        name=item.get("name") or "",
        kind=EntryKind.from_api(item.get("type")),
        path=item.get("path") or "",
        content_ref=item.get("download_url"),
    )
