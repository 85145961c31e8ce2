from collections.abc import Callable, Generator, Iterable, MutableSequence, Sequence
from itertools import permutations
from math import factorial
from random import Random
from typing import Any, NamedTuple, Optional


def _sampler(N: int, r: Random) -> Generator[list[int], None, None]:
    arr = list(range(N))
    while True:
        r.shuffle(arr)
        yield arr


MergeFunc = Callable[[MutableSequence, int, int, int, Optional[Callable[[Any], Any]]], None]


class MergeAlgorithm(NamedTuple):
    name: str
    func: MergeFunc
    max_N: int = 8
    in_place: bool = True
    stable: bool = True
    generator: Callable[[int], Iterable[Sequence[int]]] = lambda n: permutations(range(n))
    input_total: Callable[[int], int] = factorial
    sampler: Callable[[int, Random], Generator[Sequence[int], None, None]] = _sampler
    validator: Callable[[Iterable[int]], bool] = lambda arr: all(i == v for i, v in enumerate(arr))
