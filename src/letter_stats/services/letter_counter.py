"""Letter-frequency accumulator.

Pure functions only: counting is order-independent and merging is
associative and commutative, so partial histograms from concurrently
fetched files can be combined in any completion order.
"""

from __future__ import annotations

from collections import Counter

from letter_stats.domain.entities import LetterHistogram


def count_letters(text: str) -> LetterHistogram:
    """Return a case-insensitive histogram of the alphabetic characters in *text*.

    Digits, punctuation, whitespace and every other non-letter are ignored.
    """
    histogram: LetterHistogram = Counter()
    for ch in text:
        if ch.isalpha():
            # lower() may expand one code point into several (e.g. "İ")
            for folded in ch.lower():
                if folded.isalpha():
                    histogram[folded] += 1
    return histogram


def merge(a: LetterHistogram, b: LetterHistogram) -> LetterHistogram:
    """Per-letter sum of *a* and *b*; neither input is modified."""
    merged: LetterHistogram = Counter(a)
    merged.update(b)
    return merged
