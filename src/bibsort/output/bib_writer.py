"""Bibliography writer for sorted entries.

Every entry is written exactly as it was read, followed by one blank line.
"""

import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from bibsort.models import BibEntry

__all__ = [
    "format_entry",
    "format_entries",
    "write_entries",
    "write_bib_file",
    "write_to_stdout",
]


def format_entry(entry: BibEntry) -> str:
    """Format an entry as its raw text plus a blank line."""
    return f"{entry.raw_text}\n\n"


def format_entries(entries: Iterable[BibEntry]) -> str:
    """Format entries into the complete output text."""
    return "".join(format_entry(entry) for entry in entries)


def write_entries(entries: Iterable[BibEntry], stream: TextIO) -> int:
    """Write entries to an open text stream.

    Parameters
    ----------
    entries : Iterable[BibEntry]
        Entries in output order.
    stream : TextIO
        Destination stream.

    Returns
    -------
    int
        Number of entries written.
    """
    count = 0
    for entry in entries:
        stream.write(format_entry(entry))
        count += 1
    return count


def write_bib_file(entries: list[BibEntry], output_path: Path) -> int:
    """Write entries to a UTF-8 file, replacing any existing content.

    Parameters
    ----------
    entries : list[BibEntry]
        Entries in output order.
    output_path : Path
        Output file path.

    Returns
    -------
    int
        Number of entries written.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8", newline="\n") as f:
        return write_entries(entries, f)


def write_to_stdout(entries: list[BibEntry], stream: TextIO | None = None) -> int | None:
    """Write entries to stdout, stopping quietly if the reader goes away.

    Parameters
    ----------
    entries : list[BibEntry]
        Entries in output order.
    stream : TextIO | None, optional
        Stream to write to, by default ``sys.stdout``.

    Returns
    -------
    int | None
        Number of entries written, or None if the pipe was closed by the
        downstream reader (e.g. ``bibsort refs.bib | head``).
    """
    out = stream if stream is not None else sys.stdout
    try:
        count = write_entries(entries, out)
        out.flush()
    except BrokenPipeError:
        _silence_stdout()
        return None
    return count


def _silence_stdout() -> None:
    # interpreter flushes stdout again at exit
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        pass
