"""Shared fixtures for parsing unit tests."""

import pytest

from bibsort.parse import LineSupply


@pytest.fixture
def supply_of():
    """Build a LineSupply from a block of text."""

    def _supply(text: str) -> LineSupply:
        return LineSupply(text.split("\n"))

    return _supply
