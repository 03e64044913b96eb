from itertools import permutations

import pytest

from readassembly.brute import shortest_common_superstring, swap_permutations
from readassembly.overlap import merge_in_order

SOURCE_READS = ["ACGGATGATC", "GATCAAGT", "AAGTCGGA"]


def test_swap_permutation_order():
    assert list(swap_permutations(["A", "B", "C"])) == [
        ("A", "B", "C"),
        ("A", "C", "B"),
        ("B", "A", "C"),
        ("B", "C", "A"),
        ("C", "B", "A"),
        ("C", "A", "B"),
    ]


def test_swap_permutations_cover_all_orderings():
    items = ["w", "x", "y", "z"]
    produced = list(swap_permutations(items))
    assert len(produced) == len(set(produced))
    assert set(produced) == set(permutations(items))


def test_swap_permutations_leave_input_unchanged():
    items = ["a", "b", "c"]
    list(swap_permutations(items))
    assert items == ["a", "b", "c"]


def test_swap_permutations_single_and_empty():
    assert list(swap_permutations(["only"])) == [("only",)]
    assert list(swap_permutations([])) == []


def test_source_example():
    assert shortest_common_superstring(SOURCE_READS) == "ACGGATGATCAAGTCGGA"


def test_result_is_no_longer_than_any_ordering():
    result = shortest_common_superstring(SOURCE_READS)
    for order in permutations(SOURCE_READS):
        assert len(result) <= len(merge_in_order(order))


def test_result_contains_every_read():
    reads = ["TTAC", "ACGG", "GGTT"]
    result = shortest_common_superstring(reads)
    assert all(read in result for read in reads)


def test_empty_reads_raise():
    with pytest.raises(ValueError):
        shortest_common_superstring([])