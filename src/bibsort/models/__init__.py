"""Shared data types for bibsort.

Domain-specific types live closer to their consumers:
- Run configuration and results → bibsort.engine.config
- Duplicate report → bibsort.engine.report
- Audit types → bibsort.audit.models
"""

from bibsort.models.entries import BibEntry, SortBy

__all__ = [
    "BibEntry",
    "SortBy",
]
