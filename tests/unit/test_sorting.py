"""Tests for sorting and duplicate detection."""

from collections.abc import Callable

import pytest

from bibsort.engine import (
    check_duplicates,
    find_duplicate_dois,
    find_duplicate_keys,
    sort_entries,
)
from bibsort.errors import AuthorNameError
from bibsort.models import BibEntry, SortBy

EntryFactory = Callable[..., BibEntry]


# ---------------------------------------------------------------------------
# sort_entries
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_sort_by_key(make_entry: EntryFactory) -> None:
    """Test default ordering is by key."""
    entries = [make_entry("zzz"), make_entry("aaa"), make_entry("mmm")]

    result = sort_entries(entries)

    assert [e.key for e in result] == ["aaa", "mmm", "zzz"]


@pytest.mark.unit
def test_sort_is_stable(make_entry: EntryFactory) -> None:
    """Test entries with equal keys keep their input order."""
    first = make_entry("same", author="First")
    second = make_entry("same", author="Second")
    entries = [first, make_entry("aaa"), second]

    result = sort_entries(entries)

    assert result == [entries[1], first, second]


@pytest.mark.unit
def test_sort_returns_new_list(make_entry: EntryFactory) -> None:
    """Test the input list is not reordered."""
    entries = [make_entry("b"), make_entry("a")]

    sort_entries(entries)

    assert [e.key for e in entries] == ["b", "a"]


@pytest.mark.unit
def test_sort_codepoint_order_case_sensitive(make_entry: EntryFactory) -> None:
    """Test case-sensitive sorting puts uppercase before lowercase."""
    entries = [make_entry("apple"), make_entry("Zebra")]

    assert [e.key for e in sort_entries(entries, case_sensitive=True)] == ["Zebra", "apple"]
    assert [e.key for e in sort_entries(entries)] == ["apple", "Zebra"]


@pytest.mark.unit
def test_sort_by_first_author_field(make_entry: EntryFactory) -> None:
    """Test sorting by the first author as written."""
    entries = [
        make_entry("k1", author="Zimmer, Anna and Alpha, Bob"),
        make_entry("k2", author="Miller, Carl"),
        make_entry("k3"),
    ]

    result = sort_entries(entries, SortBy.FIRST_AUTHOR_FIELD)

    assert [e.key for e in result] == ["k3", "k2", "k1"]


@pytest.mark.unit
def test_sort_by_first_author_first_name(make_entry: EntryFactory) -> None:
    """Test sorting by first name after reordering."""
    entries = [
        make_entry("k1", author="Alpha, Zoe"),
        make_entry("k2", author="Zulu, Adam"),
        make_entry("k3", author="Mia Middle"),
    ]

    result = sort_entries(entries, SortBy.FIRST_AUTHOR_FIRST_NAME)

    assert [e.key for e in result] == ["k2", "k3", "k1"]


@pytest.mark.unit
def test_sort_by_first_name_accepts_string(make_entry: EntryFactory) -> None:
    """Test sort order may be given by its value."""
    entries = [make_entry("k1", author="B"), make_entry("k2", author="A")]

    result = sort_entries(entries, "first_author_first_name")  # type: ignore[arg-type]

    assert [e.key for e in result] == ["k2", "k1"]


@pytest.mark.unit
def test_sort_by_first_name_malformed_author(make_entry: EntryFactory) -> None:
    """Test an ambiguous first author aborts the sort."""
    entries = [make_entry("ok", author="A, B"), make_entry("bad", author="X, Y, Z")]

    with pytest.raises(AuthorNameError):
        sort_entries(entries, SortBy.FIRST_AUTHOR_FIRST_NAME)


# ---------------------------------------------------------------------------
# Duplicate keys
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_duplicate_keys_reported_per_pair(make_entry: EntryFactory) -> None:
    """Test one message per adjacent equal pair."""
    entries = [make_entry("a"), make_entry("a"), make_entry("a"), make_entry("b")]

    assert find_duplicate_keys(entries) == ["a", "a"]


@pytest.mark.unit
def test_empty_keys_exempt(make_entry: EntryFactory) -> None:
    """Test empty keys never count as duplicates."""
    entries = [make_entry(""), make_entry(""), make_entry("x")]

    assert find_duplicate_keys(entries) == []


@pytest.mark.unit
def test_duplicate_keys_case_sensitivity() -> None:
    """Test Smith2020 and smith2020 collide only when case-insensitive."""
    from bibsort.parse import segment_entries

    lines = ["@misc{smith2020}", "@misc{Smith2020}"]

    folded = sort_entries(segment_entries(lines))
    exact = sort_entries(segment_entries(lines, case_sensitive=True), case_sensitive=True)

    assert find_duplicate_keys(folded) == ["smith2020"]
    assert find_duplicate_keys(exact) == []


# ---------------------------------------------------------------------------
# Duplicate DOIs
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_duplicate_dois(make_entry: EntryFactory) -> None:
    """Test repeated DOIs are reported and DOIs differing in case are not."""
    entries = [
        make_entry("a", doi="10.1000/abc"),
        make_entry("b", doi="10.1000/ABC"),
        make_entry("c", doi="10.1000/abc"),
    ]

    duplicates, unparseable = find_duplicate_dois(entries)

    assert duplicates == ["10.1000/abc"]
    assert unparseable == []


@pytest.mark.unit
def test_unparseable_doi_reported(make_entry: EntryFactory) -> None:
    """Test a doi field without DOI is reported unless allowed."""
    entries = [make_entry("a", doi=""), make_entry("b", doi="not a doi")]

    assert find_duplicate_dois(entries) == ([], ["a", "b"])
    assert find_duplicate_dois(entries, allow_empty_doi=True) == ([], [])


@pytest.mark.unit
def test_doi_check_skips_empty_keys_and_missing_fields(make_entry: EntryFactory) -> None:
    """Test empty-key entries and entries without doi field are skipped."""
    entries = [
        make_entry("", doi="10.1/x"),
        make_entry("a", doi="10.1/x"),
        make_entry("b"),
        make_entry("", doi=""),
    ]

    assert find_duplicate_dois(entries) == ([], [])


# ---------------------------------------------------------------------------
# check_duplicates
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_check_duplicates_combines_passes(make_entry: EntryFactory) -> None:
    """Test both passes contribute to one report."""
    entries = [
        make_entry("a", doi="10.1/x"),
        make_entry("a", doi="10.1/y"),
        make_entry("b", doi="10.1/x"),
    ]

    report = check_duplicates(entries)

    assert report.duplicate_keys == ["a"]
    assert report.duplicate_dois == ["10.1/x"]
    assert report.problem_count == 2
    assert report.messages() == ["Duplicate key: a", "Duplicate DOI: 10.1/x"]


@pytest.mark.unit
def test_check_duplicates_passes_independent(make_entry: EntryFactory) -> None:
    """Test each pass can be disabled on its own."""
    entries = [make_entry("a", doi="10.1/x"), make_entry("a", doi="10.1/x")]

    no_keys = check_duplicates(entries, duplicate_detection=False)
    no_dois = check_duplicates(entries, doi_duplicate_detection=False)
    neither = check_duplicates(entries, duplicate_detection=False, doi_duplicate_detection=False)

    assert no_keys.duplicate_keys == [] and no_keys.duplicate_dois == ["10.1/x"]
    assert no_dois.duplicate_keys == ["a"] and no_dois.duplicate_dois == []
    assert not neither.has_problems
