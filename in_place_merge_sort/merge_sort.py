"In-place merge sort: O(1) auxiliary space per merge, O(log n) recursion stack."
from collections.abc import Callable, MutableSequence
from typing import Any, Optional

from .merge_algorithms.impl.shift_merge import shift_merge
from .merge_algorithms.MergeAlgorithm import MergeFunc


class InvalidArgumentError(ValueError):
    def __init__(self) -> None:
        super().__init__("Input sequence cannot be None")


def in_place_merge_sort(
    arr: MutableSequence,
    left: int,
    right: int,
    key: Optional[Callable[[Any], Any]] = None,
    merge: MergeFunc = shift_merge,
) -> None:
    if left >= right:
        return
    mid = left + (right - left) // 2
    in_place_merge_sort(arr, left, mid, key, merge)
    in_place_merge_sort(arr, mid + 1, right, key, merge)
    merge(arr, left, mid, right, key)


def sort(arr: Optional[MutableSequence] = None, key: Optional[Callable[[Any], Any]] = None, merge: MergeFunc = shift_merge) -> None:
    if arr is None:
        raise InvalidArgumentError
    if len(arr) <= 1:
        return
    in_place_merge_sort(arr, 0, len(arr) - 1, key, merge)
