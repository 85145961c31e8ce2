from collections.abc import Callable, MutableSequence
from typing import Any, Optional

from ..MergeAlgorithm import MergeAlgorithm


def shift_merge(arr: MutableSequence, left: int, mid: int, right: int, key: Optional[Callable[[Any], Any]] = None) -> None:
    """Merge the sorted runs arr[left..mid] and arr[mid+1..right] without a buffer.

    A right-run element smaller than arr[i] is lifted out, arr[i..j-1] slides one
    slot to the right, and the element drops into the hole at i. Both runs stay
    contiguous and sorted after every step, so whatever is left over when either
    cursor runs out is already in place.
    """
    if key is None:
        key = lambda x: x
    i, j = left, mid + 1
    while i <= mid and j <= right:
        if key(arr[i]) <= key(arr[j]):
            i += 1
            continue
        value = arr[j]
        for k in range(j, i, -1):
            arr[k] = arr[k - 1]
        arr[i] = value
        i += 1
        mid += 1
        j += 1


algorithm = MergeAlgorithm("shift merge", shift_merge)
