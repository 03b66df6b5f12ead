"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from letter_stats.domain.value_objects import normalize_repo_path


class LetterStatsRequest(BaseModel):
    """Request body for ``POST /letter-stats``."""

    path: str = ""
    recursive: bool = True

    @field_validator("path")
    @classmethod
    def _normalize_path(cls, v: str) -> str:
        # InvalidPathError is a ValueError, so pydantic reports it as a 422.
        return normalize_repo_path(v)


class LetterCountItem(BaseModel):
    letter: str
    count: int


class LetterStatsResponse(BaseModel):
    """Successful response from ``POST /letter-stats``."""

    repository: str
    files_processed: int
    letters: list[LetterCountItem]
