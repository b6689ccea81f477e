"""First-author extraction used for author-based sorting."""

from bibsort.errors import AuthorNameError

from ._patterns import AND_RE
from .extract import extract_delimited, locate_field

__all__ = [
    "clean_string",
    "first_author_from_content",
    "first_author_first_name",
]

_DECORATION = frozenset("{}'\"")


def clean_string(text: str, *, keep_escapes: bool = False) -> str:
    """Strip brace and quote decoration from a field value.

    Unescaped ``{``, ``}``, ``'`` and ``"`` are removed. The character
    after an unescaped backslash is always copied literally.

    Parameters
    ----------
    text : str
        Raw field text.
    keep_escapes : bool, optional
        Retain the escaping backslash itself. Sort keys use the default,
        which drops it.

    Returns
    -------
    str
        Cleaned text.

    Examples
    --------
        >>> clean_string("{M\\\\\\"uller}, {Hans}")
        'M"uller, Hans'
    """
    chars: list[str] = []
    escape_next = False

    for char in text:
        if escape_next:
            chars.append(char)
            escape_next = False
        elif char == "\\":
            escape_next = True
            if keep_escapes:
                chars.append(char)
        elif char not in _DECORATION:
            chars.append(char)

    return "".join(chars)


def first_author_from_content(raw_text: str) -> str:
    """Return the cleaned first author of an entry.

    The author value is cut at the first whole-word ``and`` (any case),
    the conventional BibTeX separator between names.

    Parameters
    ----------
    raw_text : str
        Entry text.

    Returns
    -------
    str
        First author as written (e.g. ``"Smith, John"``), or an empty
        string if the entry has no author field.
    """
    pos = locate_field(raw_text, "author")
    if pos is None:
        return ""

    value = extract_delimited(raw_text[pos:])
    and_match = AND_RE.search(value)
    if and_match:
        value = value[: and_match.start()]

    return clean_string(value).strip()


def first_author_first_name(raw_text: str, key: str | None = None) -> str:
    """Return the first author as "First Last".

    Parameters
    ----------
    raw_text : str
        Entry text.
    key : str | None, optional
        Citation key, used in the error message.

    Returns
    -------
    str
        ``"Last, First"`` reordered to ``"First Last"``; names without a
        comma are returned unchanged.

    Raises
    ------
    AuthorNameError
        If the first author contains more than one comma.
    """
    author = first_author_from_content(raw_text)
    parts = author.split(",")

    if len(parts) == 1:
        return author
    if len(parts) > 2:
        raise AuthorNameError(author, key)

    last, first = (part.strip() for part in parts)
    return f"{first} {last}".strip()
