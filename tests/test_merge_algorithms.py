from itertools import product

import pytest

from in_place_merge_sort.merge_algorithms.impl.buffered_merge import buffered_merge
from in_place_merge_sort.merge_algorithms.impl.gap_merge import gap_merge, next_gap
from in_place_merge_sort.merge_algorithms.impl.shift_merge import shift_merge
from in_place_merge_sort.merge_algorithms.merge_algorithms import merge_algorithms


def _zero_one_runs(n: int):
    "Every sequence of length n made of two sorted 0-1 runs, with the split point."
    for a in range(1, n):
        b = n - a
        for zl, zr in product(range(a + 1), range(b + 1)):
            yield [0] * zl + [1] * (a - zl) + [0] * zr + [1] * (b - zr), a - 1


@pytest.mark.parametrize("merge", [shift_merge, gap_merge, buffered_merge])
@pytest.mark.parametrize("n", range(2, 13))
def test_merges_two_zero_one_runs(merge, n):
    for arr, mid in _zero_one_runs(n):
        expected = sorted(arr)
        merge(arr, 0, mid, n - 1)
        assert arr == expected


@pytest.mark.parametrize("merge", [shift_merge, gap_merge, buffered_merge])
def test_merge_only_touches_its_range(merge):
    arr = [99, 98, 1, 4, 7, 2, 3, 9, -1, -2]
    merge(arr, 2, 4, 7)
    assert arr == [99, 98, 1, 2, 3, 4, 7, 9, -1, -2]


@pytest.mark.parametrize("merge", [shift_merge, gap_merge, buffered_merge])
def test_merge_with_duplicates(merge):
    arr = [1, 2, 2, 4, 2, 2, 3, 4]
    merge(arr, 0, 3, 7)
    assert arr == [1, 2, 2, 2, 2, 3, 4, 4]


def test_shift_merge_leftover_left_run_stays_in_place():
    arr = [5, 6, 7, 1, 2]
    shift_merge(arr, 0, 2, 4)
    assert arr == [1, 2, 5, 6, 7]


def test_shift_merge_keeps_left_element_first_on_ties():
    arr = [(1, "left"), (1, "right")]
    shift_merge(arr, 0, 0, 1, key=lambda x: x[0])
    assert arr == [(1, "left"), (1, "right")]


def test_gap_merge_with_key():
    arr = ["ccc", "a", "bb"]
    gap_merge(arr, 0, 0, 2, key=len)
    assert arr == ["a", "bb", "ccc"]


def test_next_gap():
    assert next_gap(0) == 0
    assert next_gap(1) == 0
    assert next_gap(2) == 1
    assert next_gap(7) == 4
    assert next_gap(8) == 4
    gaps, gap = [], next_gap(11)
    while gap > 0:
        gaps.append(gap)
        gap = next_gap(gap)
    assert gaps == [6, 3, 2, 1]


def test_registry():
    assert [x.name for x in merge_algorithms] == ["buffered merge", "gap merge", "shift merge"]
    in_place = {x.name: x.in_place for x in merge_algorithms}
    assert in_place == {"buffered merge": False, "gap merge": True, "shift merge": True}
    stable = {x.name: x.stable for x in merge_algorithms}
    assert stable["gap merge"] is False
    assert stable["shift merge"] is True


def test_descriptor_defaults():
    algorithm = merge_algorithms[-1]
    assert algorithm.input_total(4) == 24
    assert len(list(algorithm.generator(3))) == 6
    assert algorithm.validator([0, 1, 2])
    assert not algorithm.validator([1, 0, 2])
