"""Pytest configuration and fixtures for test suite."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from bibsort.models import BibEntry  # noqa: E402

BOERS_2019 = (
    "@article{boers2019,\n"
    "    author = {N. Boers AND B. Goswami AND J. Kurths},\n"
    "    title = {Complex networks reveal global pattern of extreme-rainfall teleconnections},\n"
    "    journal = {Nature},\n"
    "    year = 2019,\n"
    "    doi = {10.1038/s41586-018-0872-x}\n"
    "}"
)

NEWMAN_2003 = (
    "@article{Newman2003,\n"
    "    author = {Newman, M. E. J.},\n"
    "    title = {The Structure and Function of {Complex} Networks},\n"
    "    journal = {SIAM Review},\n"
    "    doi = {10.1137/S003614450342480}\n"
    "}"
)

ALBERT_2002 = (
    "@article{albert2002,\n"
    '    author = "Albert, R{\\\'e}ka and Barab{\\\'a}si, Albert-L{\\\'a}szl{\\\'o}",\n'
    "    title = {Statistical mechanics of complex networks},\n"
    "    doi = {10.1103/RevModPhys.74.47}\n"
    "}"
)


@pytest.fixture
def sample_bib_text() -> str:
    """Three entries in unsorted order, separated by blank lines."""
    return "\n\n".join([NEWMAN_2003, BOERS_2019, ALBERT_2002]) + "\n"


@pytest.fixture
def write_bib(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing bibliography text to a temporary file."""

    def _write(text: str, name: str = "literature.bib") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_entry() -> Callable[..., BibEntry]:
    """Factory for entries with minimal boilerplate.

    Without ``raw_text`` a one-line entry is built from the key and
    optional author/doi fields.
    """

    def _factory(
        key: str = "key2024",
        *,
        author: str | None = None,
        doi: str | None = None,
        raw_text: str | None = None,
        line_number: int = 1,
    ) -> BibEntry:
        if raw_text is None:
            fields = [f"@article{{{key}"]
            if author is not None:
                fields.append(f" author = {{{author}}}")
            if doi is not None:
                fields.append(f" doi = {{{doi}}}")
            raw_text = ",".join(fields) + "}"
        return BibEntry(key=key, raw_text=raw_text, line_number=line_number)

    return _factory
