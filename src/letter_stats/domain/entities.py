"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum

ACCEPTED_EXTENSIONS: tuple[str, ...] = (".js", ".ts")

# Single lowercase letter → occurrence count.
LetterHistogram = Counter[str]


class EntryKind(str, Enum):
    """What a directory listing item points at."""

    FILE = "file"
    DIRECTORY = "dir"
    OTHER = "other"  # symlink, submodule

    @classmethod
    def from_api(cls, raw: str | None) -> EntryKind:
        if raw == "file":
            return cls.FILE
        if raw == "dir":
            return cls.DIRECTORY
        return cls.OTHER


@dataclass(frozen=True, slots=True)
class RepositoryEntry:
    """One item returned by a directory listing."""

    name: str
    kind: EntryKind
    path: str
    content_ref: str | None = None

    @property
    def is_eligible(self) -> bool:
        """True for a fetchable ``.js`` / ``.ts`` file."""
        return (
            self.kind is EntryKind.FILE
            and bool(self.content_ref)
            and self.name.lower().endswith(ACCEPTED_EXTENSIONS)
        )


@dataclass(frozen=True, slots=True)
class LetterCount:
    """A single row of the rendered report."""

    letter: str
    count: int


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """The final structured output returned to the caller."""

    histogram: LetterHistogram
    files_processed: int
