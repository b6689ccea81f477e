"""Segmentation of bibliography text into entries.

Main entry points:
- read_entries: Parse a bibliography file
- segment_entries: Parse lines already in memory
- iter_entries: Lazily parse a line stream
"""

from bibsort.parse.braces import BraceBalancer
from bibsort.parse.lines import LineSupply
from bibsort.parse.reader import read_entries
from bibsort.parse.segmenter import fold_case, iter_entries, segment_entries

__all__ = [
    "BraceBalancer",
    "LineSupply",
    "fold_case",
    "iter_entries",
    "read_entries",
    "segment_entries",
]
