"""Read bibliography files into entries."""

from pathlib import Path

from bibsort.errors import InputDecodeError
from bibsort.models import BibEntry
from bibsort.parse.lines import LineSupply
from bibsort.parse.segmenter import segment_entries

__all__ = ["read_entries"]


def read_entries(
    path: str | Path,
    *,
    case_sensitive: bool = False,
    allow_empty_keys: bool = False,
) -> list[BibEntry]:
    """Parse every entry of a UTF-8 bibliography file.

    The file handle is closed before this function returns, so callers may
    safely overwrite the same path afterwards.

    Parameters
    ----------
    path : str | Path
        Bibliography file.
    case_sensitive : bool, optional
        Keep citation keys as written.
    allow_empty_keys : bool, optional
        Accept entries without a key.

    Returns
    -------
    list[BibEntry]
        Entries in file order.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    InputDecodeError
        If the file is not valid UTF-8.
    ParseError
        If the file is structurally malformed.
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    # utf-8-sig drops a leading byte order mark; lone \r stays inside lines
    with file_path.open("r", encoding="utf-8-sig", newline="\n") as f:
        supply = LineSupply(f)
        try:
            return segment_entries(
                supply,
                case_sensitive=case_sensitive,
                allow_empty_keys=allow_empty_keys,
            )
        except UnicodeDecodeError as e:
            raise InputDecodeError(
                f"Error reading {file_path.name} - the file needs to be "
                f"encoded with UTF-8 ({e.reason})",
                supply.line_number + 1,
            ) from e
