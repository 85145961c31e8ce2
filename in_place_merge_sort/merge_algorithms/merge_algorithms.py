from importlib import import_module
from pathlib import Path

from .MergeAlgorithm import MergeAlgorithm

merge_algorithms: list[MergeAlgorithm] = []
for file in sorted((Path(__file__).parent / "impl").glob("*.py")):
    if file.stem.startswith("_"):
        continue
    module = import_module(f".{file.stem}", package="in_place_merge_sort.merge_algorithms.impl")
    merge_algorithms.append(module.algorithm)
