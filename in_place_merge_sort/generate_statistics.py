from decimal import Decimal
from itertools import product
from math import log2, nan
from multiprocessing import Pool
from random import Random
from time import thread_time

import numpy as np
import pandas as pd
import plotly.express as px
from tqdm import tqdm

from .Config import *
from .merge_algorithms.merge_algorithms import merge_algorithms
from .merge_algorithms.MergeAlgorithm import MergeAlgorithm
from .merge_sort import sort


class InvalidMergeAlgorithmError(Exception):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid merge algorithm: `{name}` left its input unsorted")


# copy from functools.cmp_to_key
# since member "obj" is not present in the documentation, it is not guaranteed to be exist in the future
# fmt: off
def cmp_to_key(mycmp):
    """Convert a cmp= function into a key= function"""
    class K(object):
        __slots__ = ['obj']
        def __init__(self, obj):
            self.obj = obj
        def __lt__(self, other):
            return mycmp(self.obj, other.obj) < 0
        def __gt__(self, other):
            return mycmp(self.obj, other.obj) > 0
        def __eq__(self, other):
            return mycmp(self.obj, other.obj) == 0
        def __le__(self, other):
            return mycmp(self.obj, other.obj) <= 0
        def __ge__(self, other):
            return mycmp(self.obj, other.obj) >= 0
        __hash__ = None
    return K
# fmt: on


class MoveCountingList(list):
    "Counts element writes, a slice assignment counts one move per written element."

    def __init__(self, *args) -> None:
        super().__init__(*args)
        self.move_cnt = 0

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            value = list(value)
            self.move_cnt += len(value)
        else:
            self.move_cnt += 1
        super().__setitem__(index, value)


def to_displayable_int(x: int) -> str:
    return str(x) if x < 1e9 else f"{Decimal(x):.2e}"


def get_operation_cnts(merge_algorithm: MergeAlgorithm, N: int) -> tuple[np.ndarray, np.ndarray]:
    def cmp(x: int, y: int) -> int:
        nonlocal comparison_cnt
        comparison_cnt += 1
        return x - y

    key = cmp_to_key(cmp)

    do_sample = N > merge_algorithm.max_N
    comparison_cnts: list[int] = []
    move_cnts: list[int] = []
    if do_sample:
        start_time = thread_time()
    r = Random(SAMPLE_SEED)
    for val_array in merge_algorithm.sampler(N, r) if do_sample else merge_algorithm.generator(N):
        arr = MoveCountingList(map(key, val_array))
        comparison_cnt = 0
        sort(arr, merge=merge_algorithm.func)
        if not merge_algorithm.validator(x.obj for x in arr):
            raise InvalidMergeAlgorithmError(merge_algorithm.name)
        comparison_cnts.append(comparison_cnt)
        move_cnts.append(arr.move_cnt)
        if do_sample and (len(move_cnts) >= MAX_SAMPLES or int((thread_time() - start_time) * 1000) >= MAX_SAMPLE_TIME_MS):
            break

    return np.array(comparison_cnts), np.array(move_cnts)


def _work(args: tuple[int, int]) -> str:
    merge_algorithm_idx, N = args
    merge_algorithm = merge_algorithms[merge_algorithm_idx]
    comparison_cnts, move_cnts = get_operation_cnts(merge_algorithm, N)
    input_total = merge_algorithm.input_total(N)
    n_log_n = N * log2(N) if N > 1 else nan
    return ",".join(
        map(
            str,
            (
                merge_algorithm.name,
                N,
                to_displayable_int(input_total),
                len(move_cnts),
                comparison_cnts.min(),
                comparison_cnts.max(),
                comparison_cnts.mean(),
                move_cnts.min(),
                move_cnts.max(),
                move_cnts.mean(),
                comparison_cnts.mean() / n_log_n,
                move_cnts.mean() / n_log_n,
            ),
        )
    )


def generate_statistics() -> None:
    tasks = list(product(range(len(merge_algorithms)), STATISTICS_NS))
    print(f"init: {len(tasks)} tasks for {', '.join(f'`{x.name}`' for x in merge_algorithms)}")
    RESULT_DIR.parent.mkdir(parents=True, exist_ok=True)
    with Pool() as pool, open(RESULT_DIR, "w") as f:
        f.write("name,N,input,samples,best cmp,worst cmp,avg cmp,best move,worst move,avg move,cmp ratio,move ratio\n")
        for result in tqdm(pool.imap_unordered(_work, tasks), total=len(tasks)):
            f.write(result + "\n")
            f.flush()
    print(f"fin:  results written to {RESULT_DIR}")


def sort_result() -> pd.DataFrame:
    df = pd.read_csv(RESULT_DIR)
    df = df.sort_values(["name", "N"])
    df.to_csv(RESULT_DIR, index=False)
    for name, group in df.groupby("name"):
        group.drop(columns=["name"]).to_csv(RESULT_DIR.parent / f"{name}.csv", index=False)
    return df


def plot_result(df: pd.DataFrame) -> None:
    df = df.melt(id_vars=["name", "N"], value_vars=["avg cmp", "avg move"], var_name="operation", value_name="count")
    fig = px.line(df, x="N", y="count", color="name", facet_col="operation", log_y=True, markers=True, title="Average Operation Count")
    fig.write_html(RESULT_DIR.with_suffix(".html"))


if __name__ == "__main__":
    generate_statistics()
    plot_result(sort_result())
