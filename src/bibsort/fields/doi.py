"""DOI lookup inside raw entry text."""

from typing import NamedTuple

from ._patterns import DOI_POS_RE, DOI_RE

__all__ = ["DoiLookup", "find_doi"]


class DoiLookup(NamedTuple):
    """Result of looking for a DOI in an entry.

    Attributes
    ----------
    field_found : bool
        Whether the entry has a ``doi =`` assignment.
    doi : str | None
        DOI-shaped token from that assignment, None if there is none.
    """

    field_found: bool
    doi: str | None


def find_doi(raw_text: str) -> DoiLookup:
    """Find the DOI of an entry.

    Only the text between ``doi =`` and the next comma is searched, so an
    empty ``doi = {}`` never picks up a DOI from another field.

    Parameters
    ----------
    raw_text : str
        Entry text.

    Returns
    -------
    DoiLookup
        Whether a doi field exists and the DOI found in it.
    """
    match = DOI_POS_RE.search(raw_text)
    if match is None:
        return DoiLookup(False, None)

    doi_part = raw_text[match.end() :].split(",", 1)[0]
    doi_match = DOI_RE.search(doi_part)
    if doi_match is None:
        return DoiLookup(True, None)

    return DoiLookup(True, doi_match.group(0))
