"""Sort run driver.

Chains the stages of a run:

    parse     read and segment the input file (handle closed afterwards)
    validate  sort by key, then look for duplicate keys and DOIs
    sort      optional stable re-sort by first author
    write     emit entries to a file or stdout

Nothing is written unless every earlier stage succeeded, so the output
path may be the input path.
"""

import time
from collections.abc import Callable, Iterable
from itertools import pairwise

from bibsort.audit.logger import AuditLogger
from bibsort.engine.config import SortConfig, SortResult
from bibsort.engine.report import DuplicateReport
from bibsort.errors import BibSortError, DuplicateEntriesError
from bibsort.fields import (
    find_doi,
    first_author_first_name,
    first_author_from_content,
)
from bibsort.models import BibEntry, SortBy
from bibsort.output import write_bib_file, write_to_stdout
from bibsort.parse import fold_case, read_entries
from bibsort.utils import calculate_file_sha256

__all__ = [
    "sort_key_function",
    "sort_entries",
    "find_duplicate_keys",
    "find_duplicate_dois",
    "check_duplicates",
    "run_sort",
]


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------


def sort_key_function(sort_by: SortBy, *, case_sensitive: bool) -> Callable[[BibEntry], str]:
    """Return the function computing an entry's sort key.

    Parameters
    ----------
    sort_by : SortBy
        Sort order.
    case_sensitive : bool
        Compare without case folding.

    Returns
    -------
    Callable[[BibEntry], str]
        Sort key function.
    """
    if sort_by is SortBy.FIRST_AUTHOR_FIELD:
        return lambda e: fold_case(first_author_from_content(e.raw_text), case_sensitive)

    if sort_by is SortBy.FIRST_AUTHOR_FIRST_NAME:
        return lambda e: fold_case(first_author_first_name(e.raw_text, e.key), case_sensitive)

    return lambda e: fold_case(e.key, case_sensitive)


def sort_entries(
    entries: Iterable[BibEntry],
    sort_by: SortBy = SortBy.KEY,
    *,
    case_sensitive: bool = False,
) -> list[BibEntry]:
    """Stable sort of entries by codepoint order of their sort keys.

    Each sort key is computed once per entry.

    Parameters
    ----------
    entries : Iterable[BibEntry]
        Entries to sort.
    sort_by : SortBy, optional
        Sort order, by default SortBy.KEY.
    case_sensitive : bool, optional
        Compare without case folding.

    Returns
    -------
    list[BibEntry]
        New sorted list.

    Raises
    ------
    AuthorNameError
        If sorting by first name and a first author has several commas.
    """
    return sorted(entries, key=sort_key_function(SortBy(sort_by), case_sensitive=case_sensitive))


# ---------------------------------------------------------------------------
# Duplicate detection
# ---------------------------------------------------------------------------


def find_duplicate_keys(sorted_entries: list[BibEntry]) -> list[str]:
    """Find keys shared by adjacent entries.

    Parameters
    ----------
    sorted_entries : list[BibEntry]
        Entries sorted by key.

    Returns
    -------
    list[str]
        One key per adjacent pair with equal, non-empty keys.
    """
    return [prev.key for prev, cur in pairwise(sorted_entries) if prev.key and prev.key == cur.key]


def find_duplicate_dois(
    entries: list[BibEntry],
    *,
    allow_empty_doi: bool = False,
) -> tuple[list[str], list[str]]:
    """Find DOIs used by more than one entry.

    DOIs are compared exactly as written. Entries with an empty key or
    without a ``doi`` field are skipped.

    Parameters
    ----------
    entries : list[BibEntry]
        Entries in the order duplicates should be reported.
    allow_empty_doi : bool, optional
        Skip entries whose ``doi`` field holds no DOI instead of
        reporting them.

    Returns
    -------
    tuple[list[str], list[str]]
        (duplicate DOIs as written, keys of entries with unparseable DOI)
    """
    seen: set[str] = set()
    duplicates: list[str] = []
    unparseable: list[str] = []

    for entry in entries:
        if not entry.has_key:
            continue

        lookup = find_doi(entry.raw_text)
        if not lookup.field_found:
            continue

        if lookup.doi is None:
            if not allow_empty_doi:
                unparseable.append(entry.key)
            continue

        if lookup.doi in seen:
            duplicates.append(lookup.doi)
        else:
            seen.add(lookup.doi)

    return duplicates, unparseable


def check_duplicates(
    sorted_entries: list[BibEntry],
    *,
    duplicate_detection: bool = True,
    doi_duplicate_detection: bool = True,
    allow_empty_doi: bool = False,
) -> DuplicateReport:
    """Run the enabled duplicate passes.

    Parameters
    ----------
    sorted_entries : list[BibEntry]
        Entries sorted by key.
    duplicate_detection : bool, optional
        Look for duplicate keys.
    doi_duplicate_detection : bool, optional
        Look for duplicate DOIs.
    allow_empty_doi : bool, optional
        Do not report ``doi`` fields without a DOI.

    Returns
    -------
    DuplicateReport
        Everything found; empty when the entries are clean.
    """
    report = DuplicateReport()

    if duplicate_detection:
        report.duplicate_keys = find_duplicate_keys(sorted_entries)

    if doi_duplicate_detection:
        report.duplicate_dois, report.unparseable_dois = find_duplicate_dois(
            sorted_entries, allow_empty_doi=allow_empty_doi
        )

    return report


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------


def _log_report(report: DuplicateReport, logger: AuditLogger) -> None:
    for key in report.duplicate_keys:
        logger.duplicate_found("key", key, entry_key=key)
    for doi in report.duplicate_dois:
        logger.duplicate_found("doi", doi)
    for key in report.unparseable_dois:
        logger.duplicate_found("unparseable_doi", key, entry_key=key)


def _timed_stage(logger: AuditLogger | None, stage: str) -> float:
    if logger:
        logger.stage_started(stage)
    return time.perf_counter()


def _finish_stage(
    logger: AuditLogger | None,
    stage: str,
    started: float,
    counters: dict[str, int] | None = None,
) -> None:
    if logger:
        logger.stage_finished(stage, time.perf_counter() - started, counters)


def run_sort(
    config: SortConfig,
    *,
    audit_logger: AuditLogger | None = None,
) -> SortResult:
    """Parse, validate, sort and write a bibliography.

    Parameters
    ----------
    config : SortConfig
        Run configuration.
    audit_logger : AuditLogger | None, optional
        Receives stage, duplicate and artifact events.

    Returns
    -------
    SortResult
        Counts and output location.

    Raises
    ------
    ParseError
        If the input is malformed.
    DuplicateEntriesError
        If the duplicate passes found anything; nothing is written.
    OSError
        If the input cannot be read or the output cannot be created.
    """
    logger = audit_logger

    try:
        started = _timed_stage(logger, "parse")
        entries = read_entries(
            config.bib_path,
            case_sensitive=config.case_sensitive,
            allow_empty_keys=config.allow_empty_keys,
        )
        _finish_stage(logger, "parse", started, {"entries": len(entries)})

        started = _timed_stage(logger, "validate")
        entries = sort_entries(entries, SortBy.KEY, case_sensitive=config.case_sensitive)
        report = check_duplicates(
            entries,
            duplicate_detection=config.duplicate_detection,
            doi_duplicate_detection=config.doi_duplicate_detection,
            allow_empty_doi=config.allow_empty_doi,
        )
        if logger:
            _log_report(report, logger)
        _finish_stage(logger, "validate", started, {"problems": report.problem_count})

        if report.has_problems:
            raise DuplicateEntriesError(report)

        if config.sort_by is not SortBy.KEY:
            started = _timed_stage(logger, "sort")
            entries = sort_entries(entries, config.sort_by, case_sensitive=config.case_sensitive)
            _finish_stage(logger, "sort", started)

        started = _timed_stage(logger, "write")
        written = _write_output(entries, config, logger)
        _finish_stage(logger, "write", started, {"entries": written})

    except (BibSortError, OSError) as e:
        if logger:
            logger.error(type(e).__name__, str(e), stage=logger.current_stage)
        raise

    return SortResult(
        entries_read=len(entries),
        entries_written=written,
        output_path=str(config.out_path) if config.out_path is not None else None,
        report=report,
    )


def _write_output(
    entries: list[BibEntry],
    config: SortConfig,
    logger: AuditLogger | None,
) -> int:
    if config.out_path is None:
        written = write_to_stdout(entries)
        return 0 if written is None else written

    written = write_bib_file(entries, config.out_path)
    if logger:
        logger.artifact_written(
            path=str(config.out_path),
            sha256=calculate_file_sha256(config.out_path),
            bytes_written=config.out_path.stat().st_size,
            entry_count=written,
        )
    return written
