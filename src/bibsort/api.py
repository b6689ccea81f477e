"""Public API for sorting bibliographies.

This module provides the main public API for bibsort, enabling:
- Parsing files and in-memory text into BibEntry objects
- Sorting bibliography text with duplicate detection
- Running a complete file-to-file sort
"""

from __future__ import annotations

from pathlib import Path

from bibsort.engine import (
    SortConfig,
    SortResult,
    check_duplicates,
    run_sort,
    sort_entries,
)
from bibsort.errors import DuplicateEntriesError
from bibsort.models import BibEntry, SortBy
from bibsort.output import format_entries
from bibsort.parse import read_entries, segment_entries

__all__ = [
    "parse_file",
    "parse_text",
    "sort_bib",
    "sort_file",
]


def parse_file(
    path: str | Path,
    *,
    case_sensitive: bool = False,
    allow_empty_keys: bool = False,
) -> list[BibEntry]:
    """Parse a bibliography file.

    Parameters
    ----------
    path : str | Path
        Path to file to parse.
    case_sensitive : bool, optional
        Keep citation keys as written instead of case-folding them.
    allow_empty_keys : bool, optional
        Accept entries without a key.

    Returns
    -------
    list[BibEntry]
        Entries in file order.

    Raises
    ------
    ParseError
        If the file is malformed.
    FileNotFoundError
        If file does not exist.

    Examples
    --------
        >>> from bibsort import parse_file
        >>> entries = parse_file("literature.bib")
        >>> [e.key for e in entries]
        ['boers2019', 'newman2003']
    """
    return read_entries(path, case_sensitive=case_sensitive, allow_empty_keys=allow_empty_keys)


def parse_text(
    text: str,
    *,
    case_sensitive: bool = False,
    allow_empty_keys: bool = False,
) -> list[BibEntry]:
    """Parse bibliography text already in memory. See :func:`parse_file`."""
    return segment_entries(
        text.split("\n"),
        case_sensitive=case_sensitive,
        allow_empty_keys=allow_empty_keys,
    )


def sort_bib(
    text: str,
    *,
    sort_by: SortBy | str = SortBy.KEY,
    case_sensitive: bool = False,
    duplicate_detection: bool = True,
    allow_empty_keys: bool = False,
    doi_duplicate_detection: bool = True,
    allow_empty_doi: bool = False,
) -> str:
    """Sort bibliography text.

    Parameters
    ----------
    text : str
        Bibliography text.
    sort_by : SortBy | str, optional
        Sort order, by default SortBy.KEY.
    case_sensitive : bool, optional
        Compare keys and authors case-sensitively.
    duplicate_detection : bool, optional
        Fail on duplicate citation keys.
    allow_empty_keys : bool, optional
        Accept entries without a key.
    doi_duplicate_detection : bool, optional
        Fail on duplicate DOIs.
    allow_empty_doi : bool, optional
        Ignore ``doi`` fields that hold no DOI.

    Returns
    -------
    str
        Sorted entries, each followed by a blank line.

    Raises
    ------
    ParseError
        If the text is malformed.
    DuplicateEntriesError
        If duplicate keys or DOIs were found.
    """
    sort_by = SortBy(sort_by)
    entries = parse_text(text, case_sensitive=case_sensitive, allow_empty_keys=allow_empty_keys)
    entries = sort_entries(entries, SortBy.KEY, case_sensitive=case_sensitive)

    report = check_duplicates(
        entries,
        duplicate_detection=duplicate_detection,
        doi_duplicate_detection=doi_duplicate_detection,
        allow_empty_doi=allow_empty_doi,
    )
    if report.has_problems:
        raise DuplicateEntriesError(report)

    if sort_by is not SortBy.KEY:
        entries = sort_entries(entries, sort_by, case_sensitive=case_sensitive)

    return format_entries(entries)


def sort_file(
    path: str | Path,
    out_path: str | Path | None = None,
    **options: object,
) -> SortResult:
    """Sort a bibliography file.

    Parameters
    ----------
    path : str | Path
        Input file.
    out_path : str | Path | None, optional
        Output file; stdout when None. May be the input file itself.
    **options
        Remaining :class:`SortConfig` fields.

    Returns
    -------
    SortResult
        Counts and output location.

    Examples
    --------
        >>> from bibsort import sort_file
        >>> sort_file("literature.bib", "literature.bib", sort_by="first_author_field")
    """
    config = SortConfig(bib_path=Path(path), out_path=out_path, **options)  # type: ignore[arg-type]
    return run_sort(config)
