"""Output of sorted entries."""

from bibsort.output.bib_writer import (
    format_entries,
    format_entry,
    write_bib_file,
    write_entries,
    write_to_stdout,
)

__all__ = [
    "format_entries",
    "format_entry",
    "write_bib_file",
    "write_entries",
    "write_to_stdout",
]
