"""Delimited field value extraction from raw entry text.

Values may be wrapped in ``{...}`` (with nesting), ``'...'`` or ``"..."``.
A backslash escapes exactly the next character, which is then never
treated as a delimiter.
"""

from enum import StrEnum
from typing import NamedTuple

from ._patterns import field_position_pattern

__all__ = [
    "DelimiterState",
    "locate_field",
    "extract_delimited",
    "strip_outer_delimiters",
    "field_value",
]

_OPENERS = {
    "{": "}",
    "'": "'",
    '"': '"',
}


class DelimiterState(StrEnum):
    """Scanner state while looking for the end of a delimited value.

    Attributes
    ----------
    NONE : str
        No delimiter opened yet.
    OPEN_BRACE : str
        Inside ``{...}``; the scan carries the nesting depth.
    SINGLE_QUOTE : str
        Inside ``'...'``.
    DOUBLE_QUOTE : str
        Inside ``"..."``.
    """

    NONE = "none"
    OPEN_BRACE = "open_brace"
    SINGLE_QUOTE = "single_quote"
    DOUBLE_QUOTE = "double_quote"


class _Scan(NamedTuple):
    state: DelimiterState
    depth: int = 0  # only meaningful for OPEN_BRACE


_SCAN_FOR_OPENER = {
    "{": _Scan(DelimiterState.OPEN_BRACE, 1),
    "'": _Scan(DelimiterState.SINGLE_QUOTE),
    '"': _Scan(DelimiterState.DOUBLE_QUOTE),
}


def locate_field(raw_text: str, field_name: str) -> int | None:
    """Find where the value of a field assignment starts.

    Parameters
    ----------
    raw_text : str
        Entry text.
    field_name : str
        Field name, matched case-insensitively as a whole word.

    Returns
    -------
    int | None
        Offset just past ``=`` and any whitespace after it, or None if the
        entry has no such assignment.
    """
    match = field_position_pattern(field_name).search(raw_text)
    if match is None:
        return None
    return match.end()


def extract_delimited(text: str) -> str:
    """Cut the first delimited value out of text.

    Parameters
    ----------
    text : str
        Text starting at (or before) a field value.

    Returns
    -------
    str
        The value including its outer delimiters. If no delimiter opens,
        ``text`` is returned unchanged; if the delimiter never closes, the
        span runs to the end of ``text``.

    Examples
    --------
        >>> extract_delimited("{Complex {N}etworks},\\n year = 2019")
        '{Complex {N}etworks}'
    """
    scan = _Scan(DelimiterState.NONE)
    start = 0
    escape_next = False

    for i, char in enumerate(text):
        if escape_next:
            escape_next = False
            continue

        if char == "\\":
            escape_next = True
            continue

        if scan.state is DelimiterState.NONE:
            if char in _SCAN_FOR_OPENER:
                scan = _SCAN_FOR_OPENER[char]
                start = i
        elif scan.state is DelimiterState.OPEN_BRACE:
            if char == "{":
                scan = scan._replace(depth=scan.depth + 1)
            elif char == "}":
                if scan.depth == 1:
                    return text[start : i + 1]
                scan = scan._replace(depth=scan.depth - 1)
        elif scan.state is DelimiterState.SINGLE_QUOTE:
            if char == "'":
                return text[start : i + 1]
        elif char == '"':
            return text[start : i + 1]

    if scan.state is DelimiterState.NONE:
        return text
    return text[start:]


def strip_outer_delimiters(value: str) -> str:
    """Remove the outer delimiters of an extracted value.

    Parameters
    ----------
    value : str
        Output of :func:`extract_delimited`.

    Returns
    -------
    str
        Content between the outer delimiters, unchanged otherwise.
    """
    if not value or value[0] not in _OPENERS:
        return value

    closer = _OPENERS[value[0]]
    if len(value) >= 2 and value.endswith(closer):
        return value[1:-1]
    return value[1:]


def field_value(raw_text: str, field_name: str) -> str | None:
    """Return the content of a field, without its delimiters.

    Bare values (``year = 2019``) run up to the next comma, newline or
    closing brace.

    Parameters
    ----------
    raw_text : str
        Entry text.
    field_name : str
        Field name, matched case-insensitively.

    Returns
    -------
    str | None
        Field content, or None if the field is absent.

    Examples
    --------
        >>> field_value("@article{k,\\n title = {A {B} C}\\n}", "title")
        'A {B} C'
    """
    pos = locate_field(raw_text, field_name)
    if pos is None:
        return None

    rest = raw_text[pos:]
    if rest[:1] in _OPENERS:
        return strip_outer_delimiters(extract_delimited(rest))

    end = len(rest)
    for stop in (",", "\n", "}"):
        idx = rest.find(stop)
        if idx != -1:
            end = min(end, idx)
    return rest[:end].strip()
