from collections.abc import Callable, MutableSequence
from typing import Any, Optional

from ..MergeAlgorithm import MergeAlgorithm


# baseline for the statistics only, it allocates a list of right - left + 1 elements
def buffered_merge(arr: MutableSequence, l: int, m: int, r: int, key: Optional[Callable[[Any], Any]] = None) -> None:
    if key is None:
        key = lambda x: x
    result = []
    i, j = l, m + 1
    while i <= m and j <= r:
        if key(arr[i]) <= key(arr[j]):
            result.append(arr[i])
            i += 1
        else:
            result.append(arr[j])
            j += 1
    for i in range(i, m + 1):
        result.append(arr[i])
    for j in range(j, r + 1):
        result.append(arr[j])
    arr[l : r + 1] = result


algorithm = MergeAlgorithm("buffered merge", buffered_merge, in_place=False)
