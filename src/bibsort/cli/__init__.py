"""Command-line interface for bibsort."""
