"""Exception hierarchy for bibsort.

Structural problems in the input (malformed entry starts, unbalanced
braces, missing keys, ambiguous author names) are raised immediately as
``ParseError`` subclasses. Validation problems (duplicate keys, duplicate
or unparseable DOIs) are collected over the whole file and surfaced once
as ``DuplicateEntriesError``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bibsort.engine.report import DuplicateReport

__all__ = [
    "BibSortError",
    "ParseError",
    "OutsideEntryError",
    "MissingBraceError",
    "MissingKeyError",
    "UnbalancedBraceError",
    "UnexpectedEndError",
    "InputDecodeError",
    "AuthorNameError",
    "DuplicateEntriesError",
]


class BibSortError(Exception):
    """Base class for all bibsort failures."""


class ParseError(BibSortError):
    """Raised when the bibliography cannot be segmented into entries."""

    def __init__(
        self,
        message: str,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        """Initialize parse error.

        Parameters
        ----------
        message : str
            Error message.
        line_number : int | None, optional
            1-based input line where the problem was detected.
        line : str | None, optional
            Offending line text.
        """
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        if line is not None:
            message = f"{message}\nLine was: {line}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class OutsideEntryError(ParseError):
    """Non-blank text outside any entry that does not start a new one."""


class MissingBraceError(ParseError):
    """Line starts with ``@`` but has no opening brace."""


class MissingKeyError(ParseError):
    """Entry has no citation key and empty keys are not allowed."""


class UnbalancedBraceError(ParseError):
    """A closing brace appeared before its opening brace."""


class UnexpectedEndError(ParseError):
    """Input ended while an entry was still open."""


class InputDecodeError(ParseError):
    """Input is not valid UTF-8."""


class AuthorNameError(ParseError):
    """First author has more than one comma and cannot be reordered."""

    def __init__(self, author: str, key: str | None = None) -> None:
        """Initialize author name error.

        Parameters
        ----------
        author : str
            First-author text that could not be reordered.
        key : str | None, optional
            Citation key of the offending entry.
        """
        where = f" in entry '{key}'" if key else ""
        super().__init__(
            f"Malformed author{where}: '{author}' has more than one comma, "
            "expected 'Last, First' or 'First Last'"
        )
        self.author = author
        self.key = key


class DuplicateEntriesError(BibSortError):
    """Raised after the duplicate passes found at least one problem."""

    def __init__(self, report: DuplicateReport) -> None:
        """Initialize duplicate error.

        Parameters
        ----------
        report : DuplicateReport
            Every problem found during the duplicate passes.
        """
        super().__init__(
            "The file contains at least one duplicate key or duplicate doi "
            f"({report.problem_count} problem(s), see messages above). "
            "Fix the file or use the --allow options. Aborted writing anything."
        )
        self.report = report
