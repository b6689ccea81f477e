"""Common utility functions for bibsort."""

from bibsort.utils.hashing import calculate_file_sha256, format_sha256
from bibsort.utils.timestamps import get_iso_timestamp

__all__ = [
    "calculate_file_sha256",
    "format_sha256",
    "get_iso_timestamp",
]
