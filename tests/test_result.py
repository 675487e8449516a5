"""Tests for the bool -> Result adapters."""

from __future__ import annotations

import pytest

from boolext import (
    Err,
    Ok,
    as_result,
    as_result_false,
    ok,
    ok_false,
    ok_false_with,
    ok_or_err,
    ok_or_err_false,
    ok_or_err_false_with,
    ok_or_err_with,
    ok_with,
)
from fakes import CountingThunk, exploding


class TestUnitResults:
    """Tests for as_result / as_result_false."""

    def test_as_result(self):
        assert as_result(True) == Ok(None)
        assert as_result(False) == Err(None)

    def test_as_result_false(self):
        assert as_result_false(True) == Err(None)
        assert as_result_false(False) == Ok(None)


class TestOk:
    """Tests for ok / ok_with."""

    def test_ok_on_membership(self):
        values = [1, 2, 3]
        assert ok(2 in values, "Foo") == Ok("Foo")
        assert ok(4 in values, "Foo") == Err(None)

    def test_ok_with_true_runs_thunk_once(self):
        thunk = CountingThunk(42)
        assert ok_with(True, thunk) == Ok(42)
        assert thunk.calls == 1

    def test_ok_with_false_elides_thunk(self):
        assert ok_with(False, exploding) == Err(None)


class TestOkFalse:
    """Tests for the ok_false / ok_false_with pair and their opposite polarities."""

    def test_ok_false_fails_on_true(self):
        assert ok_false(True, "bad") == Err("bad")

    def test_ok_false_succeeds_on_false(self):
        assert ok_false(False, "bad") == Ok(None)

    def test_ok_false_with_succeeds_on_true(self):
        assert ok_false_with(True, exploding) == Ok(None)

    def test_ok_false_with_fails_on_false(self):
        thunk = CountingThunk("missing")
        assert ok_false_with(False, thunk) == Err("missing")
        assert thunk.calls == 1

    @pytest.mark.parametrize("b", [True, False])
    def test_eager_and_lazy_variants_have_opposite_polarity(self, b):
        eager = ok_false(b, "e")
        lazy = ok_false_with(b, lambda: "e")
        assert eager.is_ok() != lazy.is_ok()


class TestOkOrErr:
    """Tests for ok_or_err and its lazy / complement variants."""

    def test_ok_or_err_on_membership(self):
        values = [1, 2, 3]
        assert ok_or_err(2 in values, "Foo", "Err") == Ok("Foo")
        assert ok_or_err(4 in values, "Foo", "Err") == Err("Err")

    def test_ok_or_err_with_true_short_circuits(self):
        ok_thunk = CountingThunk("Foo")
        assert ok_or_err_with(True, ok_thunk, exploding) == Ok("Foo")
        assert ok_thunk.calls == 1

    def test_ok_or_err_with_false_short_circuits(self):
        err_thunk = CountingThunk("Bar")
        assert ok_or_err_with(False, exploding, err_thunk) == Err("Bar")
        assert err_thunk.calls == 1

    def test_ok_or_err_false(self):
        assert ok_or_err_false(True, "Foo", "Err") == Err("Err")
        assert ok_or_err_false(False, "Foo", "Err") == Ok("Foo")

    def test_ok_or_err_false_with(self):
        assert ok_or_err_false_with(True, exploding, lambda: "Err") == Err("Err")
        assert ok_or_err_false_with(False, lambda: "Foo", exploding) == Ok("Foo")

    def test_error_payload_is_generic(self):
        error = KeyError("user")
        outcome = ok_or_err(False, 1, error)
        assert outcome.is_err()
        assert outcome.error is error


def test_result_predicates() -> None:
    """Test Ok/Err predicates and unwrap."""
    assert Ok(1).is_ok() and not Ok(1).is_err()
    assert Err(1).is_err() and not Err(1).is_ok()
    assert Ok("v").unwrap() == "v"
    assert Ok(1) != Err(1)
