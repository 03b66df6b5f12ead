"""Report emitter — orders a histogram for display."""

from __future__ import annotations

from typing import Sequence

from letter_stats.domain.entities import LetterCount, LetterHistogram


def render(histogram: LetterHistogram) -> list[LetterCount]:
    """Sort by count descending, then by letter ascending."""
    ordered = sorted(histogram.items(), key=lambda item: (-item[1], item[0]))
    return [LetterCount(letter=letter, count=count) for letter, count in ordered]


def format_report(rows: Sequence[LetterCount]) -> str:
    return "\n".join(f"{row.letter}: {row.count}" for row in rows)
