"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from letter_stats.interface.dependencies import get_repository_name, get_use_case
from letter_stats.interface.schemas import (
    LetterCountItem,
    LetterStatsRequest,
    LetterStatsResponse,
)
from letter_stats.services.analyze_repo import AnalyzeRepoUseCase
from letter_stats.services.report import render

router = APIRouter()


@router.post(
    "/letter-stats",
    response_model=LetterStatsResponse,
    responses={
        401: {"description": "GitHub token rejected"},
        403: {"description": "Repository is private"},
        404: {"description": "Path or file not found"},
        422: {"description": "Invalid request or directory tree too deep"},
        429: {"description": "GitHub API rate limit exceeded"},
        502: {"description": "GitHub transport error"},
    },
)
async def letter_stats(
    body: LetterStatsRequest,
    use_case: AnalyzeRepoUseCase = Depends(get_use_case),
    repository: str = Depends(get_repository_name),
) -> LetterStatsResponse:
    """Count letters across every JS/TS file of the configured repository."""
    result = await use_case.execute(body.path, recursive=body.recursive)
    return LetterStatsResponse(
        repository=repository,
        files_processed=result.files_processed,
        letters=[
            LetterCountItem(letter=row.letter, count=row.count)
            for row in render(result.histogram)
        ],
    )


@router.get("/health", include_in_schema=False)
async def health() -> dict[str, str]:
    return {"status": "ok"}
