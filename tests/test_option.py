"""Tests for the bool -> Option adapters."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from boolext import (
    Nothing,
    Some,
    as_option,
    as_option_false,
    some,
    some_false,
    some_with,
    some_with_false,
)
from fakes import CountingThunk, exploding


@dataclass(frozen=True)
class Foo:
    pass


def test_as_option_on_membership() -> None:
    """Test membership checks map onto Some(None) / Nothing()."""
    values = [1, 2, 3]
    assert as_option(2 in values) == Some(None)
    assert as_option(4 in values) == Nothing()


def test_as_option_false() -> None:
    assert as_option_false(False) == Some(None)
    assert as_option_false(True) == Nothing()


def test_some_wraps_value() -> None:
    """Test some() keeps the payload on True and drops it on False."""
    values = [1, 2, 3]
    assert some(2 in values, Foo()) == Some(Foo())
    assert some(4 in values, Foo()) == Nothing()


def test_some_accepts_none_payload() -> None:
    """Test Some(None) is distinct from Nothing()."""
    assert some(True, None) == Some(None)
    assert some(True, None) != Nothing()


def test_some_false() -> None:
    assert some_false(False, "x") == Some("x")
    assert some_false(True, "x") == Nothing()


def test_some_with_runs_thunk_once_on_true() -> None:
    thunk = CountingThunk(Foo())
    assert some_with(True, thunk) == Some(Foo())
    assert thunk.calls == 1


def test_some_with_skips_thunk_on_false() -> None:
    """Test the expensive computation is elided when the operand is False."""
    assert some_with(False, exploding) == Nothing()


def test_some_with_false() -> None:
    thunk = CountingThunk("x")
    assert some_with_false(False, thunk) == Some("x")
    assert some_with_false(True, exploding) == Nothing()
    assert thunk.calls == 1


def test_some_with_propagates_thunk_errors() -> None:
    """Test errors raised inside the thunk are not swallowed."""
    def failing() -> str:
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        some_with(True, failing)


def test_option_predicates() -> None:
    assert Some(1).is_some() and not Some(1).is_nothing()
    assert Nothing().is_nothing() and not Nothing().is_some()
    assert Some(5).unwrap() == 5
