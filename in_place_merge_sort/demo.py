from collections.abc import Sequence
from typing import Optional

from .Config import *
from .merge_sort import sort


def format_array(arr: Optional[Sequence], limit: Optional[int] = None) -> str:
    if arr is None:
        return "null"
    if limit is not None and len(arr) > limit:
        return f"[{', '.join(map(str, arr[:limit]))}...]"
    return f"[{', '.join(map(str, arr))}]"


def run_case(i: int, label: str, arr: list, limit: Optional[int] = None) -> None:
    suffix = f" (first {limit})" if limit is not None else ""
    print(f"Test Case {i}: {label}")
    print(f"Input{suffix}:  {format_array(arr, limit)}")
    sort(arr)
    print(f"Output{suffix}: {format_array(arr, limit)}")
    print()


def main() -> None:
    print("=== In-Place Merge Sort Test Cases ===\n")
    cases = [(label, list(arr)) for label, arr in DEMO_CASES]
    for i, (label, arr) in enumerate(cases, 1):
        run_case(i, label, arr)
    label, arr = LARGE_DEMO_CASE
    run_case(len(cases) + 1, label, list(arr), PREVIEW_LENGTH)

    print("=== Complexity Analysis ===")
    print("Comparisons: O(n log n)")
    print("Element moves: O(n^2) worst case for the shift merge")
    print("Space Complexity: O(log n) for recursion stack")
    print("Auxiliary Space for Merging: O(1)")


if __name__ == "__main__":
    main()
