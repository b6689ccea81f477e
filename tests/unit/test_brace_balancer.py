"""Tests for incremental brace balancing."""

import pytest

from bibsort.errors import UnbalancedBraceError
from bibsort.parse import BraceBalancer


@pytest.mark.unit
def test_single_line_entry_balances() -> None:
    """Test a complete one-line entry is consumed entirely."""
    balancer = BraceBalancer()

    consumed, leftover = balancer.consume("@misc{key, title = {T}}")

    assert consumed == "@misc{key, title = {T}}"
    assert leftover is None
    assert balancer.balanced


@pytest.mark.unit
def test_leftover_after_closing_brace() -> None:
    """Test text after the balancing brace is returned as leftover."""
    balancer = BraceBalancer()

    consumed, leftover = balancer.consume("@misc{a} @misc{b}")

    assert consumed == "@misc{a}"
    assert leftover == " @misc{b}"


@pytest.mark.unit
def test_counts_accumulate_across_lines() -> None:
    """Test balance is only reached on the line closing the first brace."""
    balancer = BraceBalancer()

    balancer.consume("@article{k,")
    assert not balancer.balanced
    balancer.consume("  title = {A {B} C},")
    assert not balancer.balanced
    assert (balancer.open_count, balancer.close_count) == (3, 2)

    consumed, leftover = balancer.consume("}")
    assert consumed == "}"
    assert leftover is None
    assert balancer.balanced


@pytest.mark.unit
def test_line_without_braces_is_consumed_whole() -> None:
    """Test a line with no braces leaves the balancer unbalanced."""
    balancer = BraceBalancer()

    consumed, leftover = balancer.consume("no braces here")

    assert consumed == "no braces here"
    assert leftover is None
    assert not balancer.balanced


@pytest.mark.unit
@pytest.mark.parametrize("line", ["@misc{k, title = {a \\} b}}", "@misc{k, note = {\\{}}"])
def test_escaped_braces_not_counted(line: str) -> None:
    """Test backslash-escaped braces leave the depth unchanged."""
    balancer = BraceBalancer()

    consumed, leftover = balancer.consume(line)

    assert consumed == line
    assert leftover is None
    assert balancer.balanced


@pytest.mark.unit
def test_close_before_open_raises() -> None:
    """Test a closing brace before any opening brace is fatal."""
    balancer = BraceBalancer()

    with pytest.raises(UnbalancedBraceError, match="closed before it was opened") as exc:
        balancer.consume("}@misc{", line_number=7)

    assert exc.value.line_number == 7
