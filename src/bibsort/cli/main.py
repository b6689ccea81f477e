"""Command-line interface for bibsort.

Sorts a bibliography file and writes it to stdout or a file.
"""

import importlib.metadata
import sys
import time
import traceback
from pathlib import Path
from typing import NoReturn

import click

from bibsort.audit import AuditLogger, generate_run_id
from bibsort.engine import SortConfig, run_sort
from bibsort.errors import BibSortError, DuplicateEntriesError
from bibsort.models import SortBy

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("bibsort")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.4.0"  # Fallback for development


@click.command()
@click.version_option(version=__version__, prog_name="bibsort")
@click.argument(
    "bib_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--case-sensitive",
    "-c",
    is_flag=True,
    help="Make sorting and duplicate detection case sensitive",
)
@click.option(
    "--out",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the sorted file here instead of printing to stdout",
)
@click.option(
    "--no-duplicate-detection",
    "--ndd",
    "-n",
    "no_duplicate_detection",
    is_flag=True,
    help="Do not abort on duplicate keys",
)
@click.option(
    "--allow-empty-keys",
    "--aek",
    "allow_empty_keys",
    is_flag=True,
    help="Allow entries without a key; they are exempt from duplicate detection",
)
@click.option(
    "--allow-doi-duplicates",
    "--add",
    "allow_doi_duplicates",
    is_flag=True,
    help="Do not abort on duplicate DOIs",
)
@click.option(
    "--allow-empty-doi",
    "--aed",
    "allow_empty_doi",
    is_flag=True,
    help=(
        "Ignore doi fields without a DOI, like doi = {}. "
        'Entries without "doi =" are always ignored'
    ),
)
@click.option(
    "--sort-by-first-author-field",
    "--sbfaf",
    "sort_by_first_author_field",
    is_flag=True,
    help="Sort by the first author exactly as written in the author field",
)
@click.option(
    "--sort-by-first-author-first-name",
    "--sbfafn",
    "sort_by_first_author_first_name",
    is_flag=True,
    help='Sort by the first author reordered from "Last, First" to "First Last"',
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Append JSONL audit events for this run to the given file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def cli(
    bib_path: Path,
    case_sensitive: bool,
    out: Path | None,
    no_duplicate_detection: bool,
    allow_empty_keys: bool,
    allow_doi_duplicates: bool,
    allow_empty_doi: bool,
    sort_by_first_author_field: bool,
    sort_by_first_author_first_name: bool,
    log_file: Path | None,
    verbose: bool,
) -> None:
    """Sort the entries of the bib file BIB_PATH by their key.

    Duplicate keys and duplicate DOIs abort the run before anything is
    written.

    Do NOT redirect the output into the input file: the shell truncates
    it before bibsort reads it. Use -o instead, which only overwrites the
    file after it was parsed without errors.

    Examples
    --------
        bibsort literature.bib
        bibsort literature.bib -o literature.bib
        bibsort literature.bib --sbfafn --aed
    """
    if sort_by_first_author_field and sort_by_first_author_first_name:
        raise click.UsageError(
            "--sort-by-first-author-field and --sort-by-first-author-first-name "
            "cannot be used together"
        )

    sort_by = SortBy.KEY
    if sort_by_first_author_field:
        sort_by = SortBy.FIRST_AUTHOR_FIELD
    elif sort_by_first_author_first_name:
        sort_by = SortBy.FIRST_AUTHOR_FIRST_NAME

    config = SortConfig(
        bib_path=bib_path,
        out_path=out,
        case_sensitive=case_sensitive,
        duplicate_detection=not no_duplicate_detection,
        allow_empty_keys=allow_empty_keys,
        doi_duplicate_detection=not allow_doi_duplicates,
        allow_empty_doi=allow_empty_doi,
        sort_by=sort_by,
    )

    if verbose:
        click.echo(f"Sorting: {bib_path}", err=True)
        click.echo(f"  Sort by: {sort_by.value}", err=True)
        click.echo(f"  Case sensitive: {case_sensitive}", err=True)
        click.echo(f"  Output: {out if out is not None else '<stdout>'}", err=True)

    logger = AuditLogger(generate_run_id(), log_file) if log_file is not None else None
    started = time.perf_counter()

    try:
        if logger:
            logger.run_started(sys.argv, config.to_dict())

        result = run_sort(config, audit_logger=logger)

    except DuplicateEntriesError as e:
        for message in e.report.messages():
            click.secho(message, fg="red", err=True)
        _fail(e, logger, started, verbose)

    except (BibSortError, OSError) as e:
        _fail(e, logger, started, verbose)

    if logger:
        logger.run_finished("success", time.perf_counter() - started, result.entries_read)
        logger.close()

    if verbose:
        click.echo(f"Parsed {result.entries_read} entries", err=True)

    if result.output_path is not None:
        click.secho(
            f"✓ Successfully wrote {result.entries_written} entries to {result.output_path}",
            fg="green",
        )


def _fail(
    error: Exception,
    logger: AuditLogger | None,
    started: float,
    verbose: bool,
) -> NoReturn:
    click.secho(f"✗ Error: {error}", fg="red", err=True)
    if verbose:
        click.echo(traceback.format_exc(), err=True)

    if logger:
        logger.run_finished("failed", time.perf_counter() - started)
        logger.close()

    sys.exit(1)


if __name__ == "__main__":
    cli()
