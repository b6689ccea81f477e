"""Pre-compiled regex patterns for field lookup.

Patterns are built once at import and only ever read.
"""

import re
from functools import lru_cache

AUTHOR_POS_RE = re.compile(r"\bauthor\s*=\s*", re.IGNORECASE)
DOI_POS_RE = re.compile(r"\bdoi\s*=\s*", re.IGNORECASE)
DOI_RE = re.compile(r"10\.[)(.\w/\-:]+")
AND_RE = re.compile(r"\band\b", re.IGNORECASE)

_KNOWN_FIELDS = {
    "author": AUTHOR_POS_RE,
    "doi": DOI_POS_RE,
}


@lru_cache(maxsize=64)
def _compile_field_pattern(field_name: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(field_name)}\s*=\s*", re.IGNORECASE)


def field_position_pattern(field_name: str) -> re.Pattern[str]:
    """Return the pattern matching ``<field_name> =`` as a whole word.

    Parameters
    ----------
    field_name : str
        Field name, matched case-insensitively.

    Returns
    -------
    re.Pattern[str]
        Pattern whose match ends just past ``=`` and following whitespace.
    """
    name = field_name.casefold()
    known = _KNOWN_FIELDS.get(name)
    if known is not None:
        return known
    return _compile_field_pattern(name)
