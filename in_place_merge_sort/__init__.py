from .merge_algorithms.impl.gap_merge import gap_merge
from .merge_algorithms.impl.shift_merge import shift_merge
from .merge_sort import InvalidArgumentError, in_place_merge_sort, sort
