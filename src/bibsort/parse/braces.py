"""Incremental brace counting for entry segmentation."""

from bibsort.errors import UnbalancedBraceError

__all__ = ["BraceBalancer"]


class BraceBalancer:
    """Track brace depth of one entry across successive lines.

    A backslash escapes exactly the next character on the same line, so
    ``\\{`` and ``\\}`` never change the counts.

    Attributes
    ----------
    open_count : int
        Unescaped ``{`` seen so far.
    close_count : int
        Unescaped ``}`` seen so far.
    """

    def __init__(self) -> None:
        """Initialize balancer with zero counts."""
        self.open_count = 0
        self.close_count = 0

    @property
    def balanced(self) -> bool:
        """Whether the entry's opening brace has been closed."""
        return self.open_count > 0 and self.open_count == self.close_count

    def consume(self, line: str, line_number: int | None = None) -> tuple[str, str | None]:
        """Scan a line until the entry's closing brace.

        Parameters
        ----------
        line : str
            Text to scan.
        line_number : int | None, optional
            Input line number used in error messages.

        Returns
        -------
        tuple[str, str | None]
            (consumed, leftover). ``consumed`` ends with the balancing
            brace if it was found on this line; ``leftover`` is the
            unscanned remainder, or None when nothing remains.

        Raises
        ------
        UnbalancedBraceError
            If a ``}`` closes more braces than were opened.
        """
        escape_next = False

        for i, char in enumerate(line):
            if escape_next:
                escape_next = False
                continue

            if char == "\\":
                escape_next = True
            elif char == "{":
                self.open_count += 1
            elif char == "}":
                self.close_count += 1
                if self.close_count > self.open_count:
                    raise UnbalancedBraceError(
                        "Bracket was closed before it was opened", line_number, line
                    )
                if self.open_count == self.close_count:
                    leftover = line[i + 1 :]
                    return line[: i + 1], leftover or None

        return line, None
