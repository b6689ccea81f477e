"""Entry data models for bibsort.

This module defines the in-memory representation of one bibliography
record and the available sort orders.
"""

from dataclasses import dataclass
from enum import StrEnum

__all__ = ["BibEntry", "SortBy"]


@dataclass(frozen=True)
class BibEntry:
    """One bibliography record exactly as it appeared in the input.

    Attributes
    ----------
    key : str
        Citation key, case-folded unless case-sensitive mode was requested.
        Empty only when empty keys were explicitly allowed.
    raw_text : str
        Entry text from ``@`` through the balancing ``}``, newline-joined
        when the entry spanned several lines.
    line_number : int
        1-based input line on which the entry started.
    """

    key: str
    raw_text: str
    line_number: int = 0

    @property
    def has_key(self) -> bool:
        """Whether the entry takes part in duplicate detection."""
        return bool(self.key)


class SortBy(StrEnum):
    """Available sort orders.

    Attributes
    ----------
    KEY : str
        Citation key (default).
    FIRST_AUTHOR_FIELD : str
        Cleaned first-author text as written in the entry.
    FIRST_AUTHOR_FIRST_NAME : str
        First author reordered from "Last, First" to "First Last".
    """

    KEY = "key"
    FIRST_AUTHOR_FIELD = "first_author_field"
    FIRST_AUTHOR_FIRST_NAME = "first_author_first_name"
