"""Tests for letter_stats.services.aggregation."""

from __future__ import annotations

from collections import Counter

import pytest

from letter_stats.domain.exceptions import NotFoundError, TransportError
from letter_stats.services.aggregation import AggregationPipeline
from tests.fakes import FakeFetcher, RecordingProgress


@pytest.mark.asyncio
async def test_aggregate_merges_all_files(progress: RecordingProgress) -> None:
    fetcher = FakeFetcher({"one.js": "const a = 1;", "two.js": "let b = 2;"})

    histogram, processed = await AggregationPipeline(fetcher, progress).aggregate(
        ["one.js", "two.js"]
    )

    assert processed == 2
    assert histogram == {
        "c": 1, "o": 1, "n": 1, "s": 1, "t": 2, "a": 1, "l": 1, "e": 1, "b": 1,
    }


@pytest.mark.asyncio
async def test_aggregate_empty_reference_set(progress: RecordingProgress) -> None:
    histogram, processed = await AggregationPipeline(FakeFetcher({}), progress).aggregate([])

    assert histogram == Counter()
    assert processed == 0
    assert progress.messages == []


@pytest.mark.asyncio
async def test_progress_is_reported_per_file(progress: RecordingProgress) -> None:
    fetcher = FakeFetcher({"a.ts": "x", "b.ts": "y"})
    await AggregationPipeline(fetcher, progress).aggregate(["a.ts", "b.ts"])

    assert sorted(progress.messages) == ["Reading file: a.ts", "Reading file: b.ts"]


@pytest.mark.asyncio
async def test_result_does_not_depend_on_completion_order(progress: RecordingProgress) -> None:
    contents = {f"f{i}.js": "abc" * (i + 1) for i in range(6)}
    slow_first = {f"f{i}.js": 0.01 * (6 - i) for i in range(6)}

    fast, _ = await AggregationPipeline(FakeFetcher(contents), progress).aggregate(list(contents))
    slow, _ = await AggregationPipeline(
        FakeFetcher(contents, delays=slow_first), progress
    ).aggregate(list(contents))

    assert fast == slow == {"a": 21, "b": 21, "c": 21}


@pytest.mark.asyncio
async def test_concurrency_is_bounded(progress: RecordingProgress) -> None:
    refs = [f"f{i}.js" for i in range(12)]
    fetcher = FakeFetcher({ref: "a" for ref in refs}, delays={ref: 0.01 for ref in refs})

    histogram, _ = await AggregationPipeline(fetcher, progress, max_concurrency=3).aggregate(refs)

    assert histogram == {"a": 12}
    assert 1 < fetcher.max_in_flight <= 3


@pytest.mark.asyncio
async def test_fetch_failure_aborts_batch(progress: RecordingProgress) -> None:
    fetcher = FakeFetcher(
        {"1.js": "aaa", "3.js": "ccc"},
        failures={"2.js": TransportError("boom")},
    )

    with pytest.raises(TransportError, match="boom"):
        await AggregationPipeline(fetcher, progress, max_concurrency=1).aggregate(
            ["1.js", "2.js", "3.js"]
        )


@pytest.mark.asyncio
async def test_failure_cancels_pending_fetches(progress: RecordingProgress) -> None:
    fetcher = FakeFetcher(
        {"slow.js": "abc"},
        failures={"bad.js": NotFoundError("gone")},
        delays={"slow.js": 5.0},
    )

    with pytest.raises(NotFoundError):
        await AggregationPipeline(fetcher, progress).aggregate(["slow.js", "bad.js"])

    assert fetcher.in_flight == 0
