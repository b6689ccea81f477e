"""Split a stream of lines into bibliography entries.

Entries: @<entrytype>{citekey, field = {value}, ...}
An entry ends at the ``}`` that balances its first ``{``; text after it on
the same line is handed back to the line supply. Blank lines between
entries are ignored; any other text outside an entry is an error.
"""

import re
from collections.abc import Iterable, Iterator

from bibsort.errors import (
    MissingBraceError,
    MissingKeyError,
    OutsideEntryError,
    UnexpectedEndError,
)
from bibsort.models import BibEntry
from bibsort.parse.braces import BraceBalancer
from bibsort.parse.lines import LineSupply

__all__ = ["iter_entries", "segment_entries", "fold_case"]

ENTRY_START_PATTERN = re.compile(r"@[^{]*\{")
KEY_PATTERN = re.compile(r"\s*([^,\s{}]+)")


def fold_case(text: str, case_sensitive: bool) -> str:
    """Case-fold text unless comparisons are case-sensitive."""
    return text if case_sensitive else text.casefold()


def iter_entries(
    lines: Iterable[str] | LineSupply,
    *,
    case_sensitive: bool = False,
    allow_empty_keys: bool = False,
) -> Iterator[BibEntry]:
    """Yield entries from lines of bibliography text.

    Parameters
    ----------
    lines : Iterable[str] | LineSupply
        Input lines, with or without trailing newlines.
    case_sensitive : bool, optional
        Keep citation keys as written instead of case-folding them.
    allow_empty_keys : bool, optional
        Accept entries without a key; they get the empty key.

    Yields
    ------
    BibEntry
        Entries in input order.

    Raises
    ------
    OutsideEntryError
        If a non-blank line outside an entry does not start with ``@``.
    MissingBraceError
        If an entry start has no opening brace.
    MissingKeyError
        If an entry has no key and empty keys are not allowed.
    UnbalancedBraceError
        If a brace is closed before it was opened.
    UnexpectedEndError
        If input ends inside an entry.
    """
    supply = lines if isinstance(lines, LineSupply) else LineSupply(lines)

    while True:
        line = supply.next_line()
        if line is None:
            return

        text = line.lstrip()
        if not text:
            continue

        line_number = supply.line_number
        if not text.startswith("@"):
            raise OutsideEntryError(
                "Mismatched brackets? Encountered text outside bib items "
                "that does not start a new bib item",
                line_number,
                line,
            )

        key = _extract_key(text, line_number, line, allow_empty_keys)
        yield BibEntry(
            key=fold_case(key, case_sensitive),
            raw_text=_collect_entry_text(text, supply, line_number),
            line_number=line_number,
        )


def segment_entries(
    lines: Iterable[str] | LineSupply,
    *,
    case_sensitive: bool = False,
    allow_empty_keys: bool = False,
) -> list[BibEntry]:
    """Parse all entries into a list. See :func:`iter_entries`."""
    return list(
        iter_entries(lines, case_sensitive=case_sensitive, allow_empty_keys=allow_empty_keys)
    )


def _extract_key(text: str, line_number: int, line: str, allow_empty_keys: bool) -> str:
    start = ENTRY_START_PATTERN.match(text)
    if not start:
        raise MissingBraceError(
            "Line starts with @ but cannot be parsed - missing {?", line_number, line
        )

    key_match = KEY_PATTERN.match(text, start.end())
    if key_match:
        return key_match.group(1)

    if allow_empty_keys:
        return ""

    raise MissingKeyError("Cannot find key", line_number, line)


def _collect_entry_text(first_line: str, supply: LineSupply, start_line: int) -> str:
    balancer = BraceBalancer()
    parts: list[str] = []

    line: str | None = first_line
    line_number = start_line
    while True:
        consumed, leftover = balancer.consume(line, line_number)
        parts.append(consumed)

        if balancer.balanced:
            if leftover is not None:
                supply.push_back(leftover)
            return "\n".join(parts)

        line = supply.next_line()
        if line is None:
            raise UnexpectedEndError(
                f"Unexpected end of file inside the entry starting on line {start_line} "
                "- did you forget to close a bracket?"
            )
        line_number = supply.line_number
