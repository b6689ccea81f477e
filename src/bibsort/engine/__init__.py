"""Sort run orchestration.

This package provides the main entry point for parsing, validating,
sorting and writing a bibliography, including configuration and result
types.
"""

from bibsort.engine.config import SortConfig, SortResult
from bibsort.engine.report import DuplicateReport
from bibsort.engine.runner import (
    check_duplicates,
    find_duplicate_dois,
    find_duplicate_keys,
    run_sort,
    sort_entries,
)

__all__ = [
    "DuplicateReport",
    "SortConfig",
    "SortResult",
    "check_duplicates",
    "find_duplicate_dois",
    "find_duplicate_keys",
    "run_sort",
    "sort_entries",
]
