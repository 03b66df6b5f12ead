"""Aggregation pipeline — fetches every reference and folds it into one histogram."""

from __future__ import annotations

import asyncio
import logging
from collections import Counter
from typing import Sequence

from letter_stats.domain.entities import LetterHistogram
from letter_stats.domain.ports.content_fetcher import ContentFetcher
from letter_stats.domain.ports.progress_sink import ProgressSink
from letter_stats.services.concurrency import gather_or_cancel
from letter_stats.services.letter_counter import count_letters, merge

logger = logging.getLogger(__name__)


class AggregationPipeline:
    """Bounded-concurrency fetch + count + merge over a closed reference set.

    The first fetch failure cancels the pending fetches and propagates; a
    partially filled histogram is never returned.
    """

    def __init__(
        self,
        fetcher: ContentFetcher,
        progress: ProgressSink,
        max_concurrency: int = 10,
    ) -> None:
        self._fetcher = fetcher
        self._progress = progress
        self._max_concurrency = max_concurrency

    async def aggregate(self, refs: Sequence[str]) -> tuple[LetterHistogram, int]:
        """Return the merged histogram of all *refs* and how many were processed."""
        sem = asyncio.Semaphore(self._max_concurrency)
        lock = asyncio.Lock()
        histogram: LetterHistogram = Counter()

        async def _process(ref: str) -> None:
            nonlocal histogram
            async with sem:
                self._progress.notify_progress(f"Reading file: {ref}")
                content = await self._fetcher.fetch_content(ref)
            partial = count_letters(content)
            async with lock:
                histogram = merge(histogram, partial)

        await gather_or_cancel(*(_process(ref) for ref in refs))
        logger.debug("Aggregated %d file(s), %d letters", len(refs), sum(histogram.values()))
        return histogram, len(refs)
