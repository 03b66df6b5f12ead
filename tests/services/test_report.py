"""Tests for letter_stats.services.report."""

from __future__ import annotations

from collections import Counter

from letter_stats.domain.entities import LetterCount
from letter_stats.services.report import format_report, render


def test_render_sorts_by_count_descending() -> None:
    rows = render(Counter({"a": 1, "b": 5, "c": 3}))
    assert [row.letter for row in rows] == ["b", "c", "a"]


def test_render_breaks_ties_alphabetically() -> None:
    rows = render(Counter({"z": 2, "m": 2, "a": 2, "q": 7}))
    assert rows == [
        LetterCount("q", 7),
        LetterCount("a", 2),
        LetterCount("m", 2),
        LetterCount("z", 2),
    ]


def test_render_output_is_strictly_ordered() -> None:
    histogram = Counter("the quick brown fox jumps over the lazy dog".replace(" ", ""))
    rows = render(histogram)
    keys = [(-row.count, row.letter) for row in rows]
    assert keys == sorted(keys)
    assert len(set(keys)) == len(keys)


def test_render_empty_histogram() -> None:
    assert render(Counter()) == []
    assert format_report([]) == ""


def test_format_report_lines() -> None:
    text = format_report([LetterCount("e", 10), LetterCount("t", 4)])
    assert text == "e: 10\nt: 4"
