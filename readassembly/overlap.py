"""Overlap detection between reads and merging of overlapping reads."""

from __future__ import annotations

from collections.abc import Sequence


def overlap_length(a: str, b: str) -> int:
    """Return how many leading characters of ``b`` end ``a``.

    The scan walks ``a`` once, extending a match against the start of
    ``b`` and restarting it on a mismatch without backtracking, so the
    result is the length of the prefix of ``b`` matched when ``a`` ends.
    """
    matched = 0
    position = 0
    fresh = True
    while position < len(a):
        if matched < len(b) and b[matched] == a[position]:
            matched += 1
            position += 1
            fresh = False
        elif not fresh:
            matched = 0
            fresh = True
        else:
            matched = 0
            position += 1
            fresh = True
    return matched


def merge(a: str, b: str, overlap: int) -> str:
    """Join ``b`` after ``a``, dropping the first ``overlap`` characters of ``b``."""
    if not 0 <= overlap <= len(b):
        raise ValueError(f"overlap {overlap} out of range for a read of length {len(b)}")
    return a + b[overlap:]


def merge_in_order(reads: Sequence[str]) -> str:
    """Merge reads left to right, each overlapping the read just before it."""
    if not reads:
        raise ValueError("no reads to merge")
    merged = reads[0]
    for previous, current in zip(reads, reads[1:]):
        merged = merge(merged, current, overlap_length(previous, current))
    return merged