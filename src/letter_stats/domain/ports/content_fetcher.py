"""Port: content fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol


class ContentFetcher(Protocol):
    """Abstract contract for retrieving raw file text by content reference."""

    async def fetch_content(self, ref: str) -> str:
        """Return the decoded text behind *ref*."""
        ...
