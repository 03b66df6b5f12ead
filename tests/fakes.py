"""In-memory test doubles for the listing, fetching and progress ports."""

from __future__ import annotations

import asyncio
from typing import Mapping, Sequence

from letter_stats.domain.entities import EntryKind, RepositoryEntry
from letter_stats.domain.exceptions import LetterStatsError, NotFoundError


def file_entry(path: str, ref: str | None = "auto") -> RepositoryEntry:
    name = path.rsplit("/", 1)[-1]
    content_ref = f"https://raw.example/{path}" if ref == "auto" else ref
    return RepositoryEntry(name=name, kind=EntryKind.FILE, path=path, content_ref=content_ref)


def dir_entry(path: str) -> RepositoryEntry:
    name = path.rsplit("/", 1)[-1]
    return RepositoryEntry(name=name, kind=EntryKind.DIRECTORY, path=path)


class FakeLister:
    """Serves listings from a ``{path: [entries]}`` mapping and records calls."""

    def __init__(
        self,
        tree: Mapping[str, Sequence[RepositoryEntry]],
        failures: Mapping[str, LetterStatsError] | None = None,
    ) -> None:
        self._tree = tree
        self._failures = dict(failures or {})
        self.calls: list[str] = []

    async def list_directory(self, path: str) -> Sequence[RepositoryEntry]:
        self.calls.append(path)
        await asyncio.sleep(0)
        if path in self._failures:
            raise self._failures[path]
        if path not in self._tree:
            raise NotFoundError(f"No such directory: {path}")
        return list(self._tree[path])


class FakeFetcher:
    """Serves file text from a ``{ref: content}`` mapping and records calls."""

    def __init__(
        self,
        contents: Mapping[str, str],
        failures: Mapping[str, LetterStatsError] | None = None,
        delays: Mapping[str, float] | None = None,
    ) -> None:
        self._contents = contents
        self._failures = dict(failures or {})
        self._delays = dict(delays or {})
        self.calls: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch_content(self, ref: str) -> str:
        self.calls.append(ref)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self._delays.get(ref, 0))
            if ref in self._failures:
                raise self._failures[ref]
            if ref not in self._contents:
                raise NotFoundError(f"File {ref} not found")
            return self._contents[ref]
        finally:
            self.in_flight -= 1


class RecordingProgress:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify_progress(self, message: str) -> None:
        self.messages.append(message)
