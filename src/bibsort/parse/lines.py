"""Pull-based line source with one fragment of pushback."""

from collections.abc import Iterable, Iterator

__all__ = ["LineSupply"]


class LineSupply:
    """Cursor over text lines that can return one fragment to the stream.

    When an entry's closing brace is not the last character of a line, the
    remainder belongs to whatever follows the entry. The segmenter pushes
    that remainder back so the next call to :meth:`next_line` yields it
    before any new source line.

    Attributes
    ----------
    line_number : int
        1-based number of the last line pulled from the source (0 before
        the first pull). Returning a pushed-back fragment does not advance it.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        """Initialize line supply.

        Parameters
        ----------
        lines : Iterable[str]
            Source lines. One trailing ``\\n`` or ``\\r\\n`` is stripped;
            any other control characters are kept.
        """
        self._lines: Iterator[str] = iter(lines)
        self._pending: str | None = None
        self.line_number = 0

    def __iter__(self) -> "LineSupply":
        return self

    def __next__(self) -> str:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line

    @property
    def has_pending(self) -> bool:
        """Whether a pushed-back fragment is waiting."""
        return self._pending is not None

    def next_line(self) -> str | None:
        """Return the pending fragment, else the next source line.

        Returns
        -------
        str | None
            Next line of text, or None when the source is exhausted.
        """
        if self._pending is not None:
            fragment, self._pending = self._pending, None
            return fragment

        line = next(self._lines, None)
        if line is None:
            return None

        self.line_number += 1
        return line.removesuffix("\n").removesuffix("\r")

    def push_back(self, fragment: str) -> None:
        """Return a fragment so that it is yielded next.

        Parameters
        ----------
        fragment : str
            Unconsumed tail of the previous line.

        Raises
        ------
        RuntimeError
            If a fragment is already pending.
        """
        if self._pending is not None:
            raise RuntimeError("LineSupply holds at most one pushed-back fragment")
        self._pending = fragment
