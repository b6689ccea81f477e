"""Sort run configuration and result dataclasses."""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from bibsort.engine.report import DuplicateReport
from bibsort.models import SortBy


@dataclass
class SortConfig:
    """Configuration for one sort run.

    Attributes
    ----------
    bib_path : Path
        Bibliography file to sort.
    out_path : Path | None
        Output file. If None, entries are written to stdout. May equal
        ``bib_path``: the input is fully read before anything is written.
    case_sensitive : bool
        Compare keys and authors case-sensitively (default: False).
    duplicate_detection : bool
        Abort on duplicate citation keys (default: True).
    allow_empty_keys : bool
        Accept entries without a key; they are exempt from duplicate
        detection (default: False).
    doi_duplicate_detection : bool
        Abort on duplicate DOIs (default: True).
    allow_empty_doi : bool
        Skip entries whose ``doi`` field holds no DOI instead of
        reporting them (default: False).
    sort_by : SortBy
        Sort order (default: SortBy.KEY).
    """

    bib_path: Path
    out_path: Path | None = None
    case_sensitive: bool = False
    duplicate_detection: bool = True
    allow_empty_keys: bool = False
    doi_duplicate_detection: bool = True
    allow_empty_doi: bool = False
    sort_by: SortBy = SortBy.KEY

    def __post_init__(self) -> None:
        """Coerce paths and validate sort order."""
        self.bib_path = Path(self.bib_path)

        if self.out_path is not None:
            self.out_path = Path(self.out_path)

        try:
            self.sort_by = SortBy(self.sort_by)
        except ValueError:
            valid = ", ".join(s.value for s in SortBy)
            raise ValueError(f"sort_by must be one of {valid}, got {self.sort_by!r}") from None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["bib_path"] = str(self.bib_path)
        data["out_path"] = str(self.out_path) if self.out_path is not None else None
        data["sort_by"] = self.sort_by.value
        return data


@dataclass
class SortResult:
    """Outcome of a successful sort run.

    Attributes
    ----------
    entries_read : int
        Entries parsed from the input.
    entries_written : int
        Entries written before output ended (less than ``entries_read``
        only when stdout was closed early).
    output_path : str | None
        Output file, or None for stdout.
    report : DuplicateReport
        Duplicate pass findings (empty on success).
    """

    entries_read: int
    entries_written: int
    output_path: str | None
    report: DuplicateReport = field(default_factory=DuplicateReport)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
