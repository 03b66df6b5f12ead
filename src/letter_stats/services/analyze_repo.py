"""Analyze-repository use case — discovery followed by aggregation.

This is the single entry point for the business logic.  It depends only on
the listing and fetching ports plus a progress sink; the interface layer
injects concrete adapters at runtime.
"""

from __future__ import annotations

import logging

from letter_stats.domain.entities import AnalysisResult
from letter_stats.domain.exceptions import LetterStatsError
from letter_stats.domain.ports.content_fetcher import ContentFetcher
from letter_stats.domain.ports.directory_lister import DirectoryLister
from letter_stats.domain.ports.progress_sink import ProgressSink
from letter_stats.services.aggregation import AggregationPipeline
from letter_stats.services.tree_walker import TreeWalker

logger = logging.getLogger(__name__)


class AnalyzeRepoUseCase:
    """Orchestrates the full tree → histogram pipeline.

    Parameters
    ----------
    lister:
        Adapter that lists repository directories.
    fetcher:
        Adapter that returns raw file text by content reference.
    progress:
        Receives one notification per file before it is fetched.
    max_concurrency:
        Maximum number of listing / fetch calls in flight at once.
    max_depth:
        Recursion bound for discovery.
    """

    def __init__(
        self,
        lister: DirectoryLister,
        fetcher: ContentFetcher,
        progress: ProgressSink,
        max_concurrency: int = 10,
        max_depth: int = 32,
    ) -> None:
        self._walker = TreeWalker(lister, max_concurrency=max_concurrency, max_depth=max_depth)
        self._pipeline = AggregationPipeline(fetcher, progress, max_concurrency=max_concurrency)

    # ── Public entry point ──────────────────────────────────────────────

    async def execute(self, root: str = "", recursive: bool = True) -> AnalysisResult:
        """Discover every JS/TS file under *root* and count its letters.

        Discovery completes before any content is fetched.  Errors are
        logged and re-raised; no partial result is ever returned.
        """
        try:
            refs = await self._walker.discover(root, recursive=recursive)
            logger.info("Found %d js/ts files.", len(refs))
            histogram, processed = await self._pipeline.aggregate(refs)
        except LetterStatsError as exc:
            logger.error("An error occurred: %s", exc)
            raise

        return AnalysisResult(histogram=histogram, files_processed=processed)
