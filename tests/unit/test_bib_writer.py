"""Tests for the bibliography writer."""

import io
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from bibsort.models import BibEntry
from bibsort.output import bib_writer, format_entries, write_bib_file, write_to_stdout

EntryFactory = Callable[..., BibEntry]


class _ClosedPipe(io.StringIO):
    """Stream whose reader has gone away."""

    def write(self, text: str) -> int:
        raise BrokenPipeError(32, "Broken pipe")


@pytest.fixture
def silenced(monkeypatch: pytest.MonkeyPatch) -> list[bool]:
    """Record calls to the stdout silencer instead of touching real descriptors."""
    calls: list[bool] = []
    monkeypatch.setattr(bib_writer, "_silence_stdout", lambda: calls.append(True))
    return calls


@pytest.mark.unit
def test_format_entries_blank_line_after_each(make_entry: EntryFactory) -> None:
    """Test every entry is followed by exactly one blank line."""
    entries = [
        make_entry("a", raw_text="@misc{a}"),
        make_entry("b", raw_text="@misc{b,\n x = 1}"),
    ]

    assert format_entries(entries) == "@misc{a}\n\n@misc{b,\n x = 1}\n\n"


@pytest.mark.unit
def test_write_bib_file_creates_parents(make_entry: EntryFactory, tmp_path: Path) -> None:
    """Test nested output directories are created and text is kept byte for byte."""
    out = tmp_path / "nested" / "out.bib"
    entries = [make_entry("a", raw_text="@misc{a, t = {x\ry}}")]

    assert write_bib_file(entries, out) == 1
    assert out.read_bytes() == b"@misc{a, t = {x\ry}}\n\n"


@pytest.mark.unit
def test_write_to_stdout_counts_entries(make_entry: EntryFactory) -> None:
    """Test entries written to a live stream are counted."""
    stream = io.StringIO()

    assert write_to_stdout([make_entry("a"), make_entry("b")], stream) == 2
    assert stream.getvalue().count("\n\n") == 2


@pytest.mark.unit
def test_write_to_stdout_broken_pipe(make_entry: EntryFactory, silenced: list[bool]) -> None:
    """Test a closed downstream pipe stops writing without raising."""
    result = write_to_stdout([make_entry("a")], _ClosedPipe())

    assert result is None
    assert silenced == [True]


@pytest.mark.unit
def test_silence_stdout_without_descriptor(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test silencing is a no-op when stdout has no file descriptor."""
    monkeypatch.setattr(sys, "stdout", io.StringIO())

    bib_writer._silence_stdout()
