"""Command-line entry point: one-shot letter statistics for the configured repository."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Sequence

import httpx

from letter_stats.domain.entities import AnalysisResult
from letter_stats.domain.exceptions import LetterStatsError
from letter_stats.domain.value_objects import normalize_repo_path
from letter_stats.infrastructure.config import Settings, get_settings
from letter_stats.interface.dependencies import build_use_case
from letter_stats.services.report import format_report, render

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="letter-stats",
        description="Count letter frequencies across the JS/TS files of a GitHub repository.",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="Walk every subdirectory (default: only the starting directory).",
    )
    parser.add_argument(
        "--path",
        default="",
        help="Directory inside the repository to start from (default: root).",
    )
    parser.add_argument(
        "--repo",
        default=None,
        help="Repository as owner/repo; overrides GITHUB_REPOSITORY.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


async def _analyze(settings: Settings, root: str, recursive: bool) -> AnalysisResult:
    async with httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout_s)) as client:
        use_case = build_use_case(client, settings)
        return await use_case.execute(root, recursive=recursive)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    settings = get_settings()
    if args.repo:
        settings = settings.model_copy(update={"github_repository": args.repo})

    logging.basicConfig(
        level="DEBUG" if args.verbose else settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    try:
        logger.info("Analysing %s", settings.repo_ref.full_name)
        root = normalize_repo_path(args.path)
        result = asyncio.run(_analyze(settings, root, args.recursive))
    except LetterStatsError as exc:
        logger.error("Letter statistics failed: %s", exc)
        return 1

    report = format_report(render(result.histogram))
    if report:
        print(report)
    logger.info("Processed %d file(s).", result.files_processed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
