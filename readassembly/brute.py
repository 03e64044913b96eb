"""Brute-force shortest common superstring over every read order."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

from readassembly.overlap import merge_in_order

T = TypeVar("T")


def swap_permutations(items: Sequence[T]) -> Iterator[tuple[T, ...]]:
    """Yield every ordering of ``items`` in swap-recursion order."""
    pool = list(items)
    last = len(pool) - 1

    def walk(start: int) -> Iterator[tuple[T, ...]]:
        if start == last:
            yield tuple(pool)
            return
        for index in range(start, last + 1):
            pool[start], pool[index] = pool[index], pool[start]
            yield from walk(start + 1)
            pool[start], pool[index] = pool[index], pool[start]

    return walk(0)


def shortest_common_superstring(reads: Sequence[str]) -> str:
    """Return the shortest in-order merge over all orderings of ``reads``.

    Ties keep the first ordering found.
    """
    if not reads:
        raise ValueError("no reads to assemble")
    return min((merge_in_order(order) for order in swap_permutations(reads)), key=len)