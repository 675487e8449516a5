"""BoolExt - method-call surface over the boolean combinators."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Self, TypeVar

from boolext.kernel import ops
from boolext.kernel.types import Option, Result

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class BoolExt:
    """Immutable wrapper exposing every combinator as a method.

    Each method delegates to the free function of the same name in
    ``boolext.kernel.ops`` with ``value`` as the operand. The side-effect
    methods return the wrapper itself so that calls can be chained.

    Example:
        >>> BoolExt(2 in [1, 2, 3]).ok_or_err("Foo", "Err")
        Ok(value='Foo')
    """

    value: bool

    def __bool__(self) -> bool:
        return bool(self.value)

    def __invert__(self) -> BoolExt:
        return BoolExt(not self.value)

    # Option adapters

    def as_option(self) -> Option[None]:
        return ops.as_option(self.value)

    def as_option_false(self) -> Option[None]:
        return ops.as_option_false(self.value)

    def some(self, value: T) -> Option[T]:
        return ops.some(self.value, value)

    def some_false(self, value: T) -> Option[T]:
        return ops.some_false(self.value, value)

    def some_with(self, thunk: Callable[[], T]) -> Option[T]:
        return ops.some_with(self.value, thunk)

    def some_with_false(self, thunk: Callable[[], T]) -> Option[T]:
        return ops.some_with_false(self.value, thunk)

    # Result adapters

    def as_result(self) -> Result[None, None]:
        return ops.as_result(self.value)

    def as_result_false(self) -> Result[None, None]:
        return ops.as_result_false(self.value)

    def ok(self, value: T) -> Result[T, None]:
        return ops.ok(self.value, value)

    def ok_with(self, thunk: Callable[[], T]) -> Result[T, None]:
        return ops.ok_with(self.value, thunk)

    def ok_false(self, err: E) -> Result[None, E]:
        return ops.ok_false(self.value, err)

    def ok_false_with(self, thunk: Callable[[], E]) -> Result[None, E]:
        return ops.ok_false_with(self.value, thunk)

    def ok_or_err(self, ok: T, err: E) -> Result[T, E]:
        return ops.ok_or_err(self.value, ok, err)

    def ok_or_err_with(self, ok: Callable[[], T], err: Callable[[], E]) -> Result[T, E]:
        return ops.ok_or_err_with(self.value, ok, err)

    def ok_or_err_false(self, ok: T, err: E) -> Result[T, E]:
        return ops.ok_or_err_false(self.value, ok, err)

    def ok_or_err_false_with(self, ok: Callable[[], T], err: Callable[[], E]) -> Result[T, E]:
        return ops.ok_or_err_false_with(self.value, ok, err)

    # Value-mapping adapters

    def map(self, if_true: Callable[[], T], if_false: Callable[[], T]) -> T:
        return ops.map(self.value, if_true, if_false)

    def select(self, if_true: T, if_false: T) -> T:
        return ops.select(self.value, if_true, if_false)

    def map_or(self, default: T, if_true: Callable[[], T]) -> T:
        return ops.map_or(self.value, default, if_true)

    def map_or_default(self, if_true: Callable[[], T], factory: Callable[[], T]) -> T:
        return ops.map_or_default(self.value, if_true, factory)

    # Side-effect adapters

    def do_true(self, action: Callable[[], object]) -> Self:
        """Run ``action`` if the operand holds and return this wrapper for chaining."""
        ops.do_true(self.value, action)
        return self

    def do_false(self, action: Callable[[], object]) -> Self:
        """Run ``action`` if the operand is false and return this wrapper for chaining."""
        ops.do_false(self.value, action)
        return self

    def try_do_true(self, action: Callable[[], Result[None, E]]) -> Result[bool, E]:
        return ops.try_do_true(self.value, action)

    def try_do_false(self, action: Callable[[], Result[None, E]]) -> Result[bool, E]:
        return ops.try_do_false(self.value, action)

    # Assertion adapters

    def expect(self, message: str) -> None:
        ops.expect(self.value, message)

    def expect_false(self, message: str) -> None:
        ops.expect_false(self.value, message)
