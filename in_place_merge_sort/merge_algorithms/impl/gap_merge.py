from collections.abc import Callable, MutableSequence
from typing import Any, Optional

from ..MergeAlgorithm import MergeAlgorithm


def next_gap(gap: int) -> int:
    if gap <= 1:
        return 0
    return (gap + 1) // 2


def gap_merge(arr: MutableSequence, left: int, mid: int, right: int, key: Optional[Callable[[Any], Any]] = None) -> None:
    "Shell-style merge of two adjacent sorted runs; `mid` is unused and the result is not stable."
    if key is None:
        key = lambda x: x
    gap = next_gap(right - left + 1)
    while gap > 0:
        for i in range(left, right - gap + 1):
            j = i + gap
            if key(arr[i]) > key(arr[j]):
                arr[i], arr[j] = arr[j], arr[i]
        gap = next_gap(gap)


algorithm = MergeAlgorithm("gap merge", gap_merge, stable=False)
