from pathlib import Path

SAMPLE_SEED = 20231012
MAX_SAMPLE_TIME_MS = 3000
MAX_SAMPLES = 2000
STATISTICS_NS = list(range(2, 9)) + list(range(10, 100, 10)) + list(range(100, 600, 100))
RESULT_DIR = Path("logs/statistics.csv")

PREVIEW_LENGTH = 10
DEMO_CASES = [
    ("Unsorted Array", [12, 11, 13, 5, 6, 7]),
    ("Already Sorted Array", [1, 2, 3, 4, 5, 6]),
    ("Reverse Sorted Array", [9, 8, 7, 6, 5, 4]),
    ("Array with Duplicate Elements", [4, 2, 4, 1, 2, 3, 4]),
    ("Single Element Array", [42]),
    ("Empty Array", []),
]
LARGE_DEMO_CASE = ("Larger Array (first 10 elements shown)", [64, 34, 25, 12, 22, 11, 90, 88, 75, 50, 33, 44, 55, 66])
