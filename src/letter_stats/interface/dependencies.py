"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from letter_stats.infrastructure.config import Settings, get_settings
from letter_stats.infrastructure.github_contents_adapter import GitHubContentsAdapter
from letter_stats.infrastructure.logging_progress import LoggingProgressSink
from letter_stats.services.analyze_repo import AnalyzeRepoUseCase

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout_s))


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def build_use_case(client: httpx.AsyncClient, settings: Settings) -> AnalyzeRepoUseCase:
    """Wire the GitHub adapter and logging sink into a use case."""
    token = settings.github_token.get_secret_value() if settings.github_token else None
    adapter = GitHubContentsAdapter(client=client, repo=settings.repo_ref, token=token)
    return AnalyzeRepoUseCase(
        lister=adapter,
        fetcher=adapter,
        progress=LoggingProgressSink(),
        max_concurrency=settings.max_concurrency,
        max_depth=settings.max_depth,
    )


def get_use_case() -> AnalyzeRepoUseCase:
    """Build a use case around the shared HTTP client."""
    assert _http_client is not None, "startup() was not called"
    return build_use_case(_http_client, get_settings())


def get_repository_name() -> str:
    return get_settings().repo_ref.full_name
