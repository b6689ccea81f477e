"""Sort BibTeX-like bibliographies by key or first author.

This package provides:
- Data models (bibsort.models): BibEntry, SortBy
- Parsing (bibsort.parse): brace-balanced entry segmentation
- Fields (bibsort.fields): author and DOI extraction from raw entries
- Engine (bibsort.engine): sorting, duplicate detection, run driver
- Output (bibsort.output): writing sorted entries
- Audit (bibsort.audit): JSONL run logging
- CLI (bibsort.cli): command-line interface
- Public API (bibsort.api): high-level convenience functions
"""

__version__ = "0.4.0"
__license__ = "MIT"

from bibsort.api import parse_file, parse_text, sort_bib, sort_file
from bibsort.engine import DuplicateReport, SortConfig, SortResult
from bibsort.errors import (
    AuthorNameError,
    BibSortError,
    DuplicateEntriesError,
    ParseError,
)
from bibsort.models import BibEntry, SortBy

__all__ = [
    "__version__",
    "__license__",
    "AuthorNameError",
    "BibEntry",
    "BibSortError",
    "DuplicateEntriesError",
    "DuplicateReport",
    "ParseError",
    "SortBy",
    "SortConfig",
    "SortResult",
    "parse_file",
    "parse_text",
    "sort_bib",
    "sort_file",
]
