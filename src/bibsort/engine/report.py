"""Duplicate detection report."""

from dataclasses import asdict, dataclass, field
from typing import Any

__all__ = ["DuplicateReport"]


@dataclass
class DuplicateReport:
    """Problems found by the duplicate passes.

    Attributes
    ----------
    duplicate_keys : list[str]
        One key per adjacent pair of entries sharing it.
    duplicate_dois : list[str]
        One DOI per entry repeating an earlier entry's DOI.
    unparseable_dois : list[str]
        Keys of entries whose ``doi`` field holds no DOI.
    """

    duplicate_keys: list[str] = field(default_factory=list)
    duplicate_dois: list[str] = field(default_factory=list)
    unparseable_dois: list[str] = field(default_factory=list)

    @property
    def problem_count(self) -> int:
        """Total number of reported problems."""
        return len(self.duplicate_keys) + len(self.duplicate_dois) + len(self.unparseable_dois)

    @property
    def has_problems(self) -> bool:
        """Whether anything was reported."""
        return self.problem_count > 0

    def messages(self) -> list[str]:
        """Human-readable message per problem, keys first."""
        msgs = [f"Duplicate key: {key}" for key in self.duplicate_keys]
        msgs.extend(f"Duplicate DOI: {doi}" for doi in self.duplicate_dois)
        msgs.extend(
            f"Cannot parse DOI in item with key {key}, even though it has a doi field"
            for key in self.unparseable_dois
        )
        return msgs

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
