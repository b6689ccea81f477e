"""Field lookup in raw entry text.

Entries are never parsed into fields up front; values are pulled out of
``BibEntry.raw_text`` on demand.
"""

from bibsort.fields.authors import (
    clean_string,
    first_author_first_name,
    first_author_from_content,
)
from bibsort.fields.doi import DoiLookup, find_doi
from bibsort.fields.extract import (
    DelimiterState,
    extract_delimited,
    field_value,
    locate_field,
    strip_outer_delimiters,
)

__all__ = [
    "DelimiterState",
    "DoiLookup",
    "clean_string",
    "extract_delimited",
    "field_value",
    "find_doi",
    "first_author_first_name",
    "first_author_from_content",
    "locate_field",
    "strip_outer_delimiters",
]
