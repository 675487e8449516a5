"""Boolean combinators: option, result, mapping, side-effect and assertion adapters."""

# Naming scheme:
#
# 1. A bare name (``some``, ``ok``, ``ok_or_err``) selects on ``True``.
#
# 2. A ``_false`` suffix selects on ``False``: op_false(b, ...) == op(not b, ...)
#    for every option/result pair except ok_false / ok_false_with, which keep
#    opposite polarities (see their docstrings).
#
# 3. A ``_with`` suffix takes zero-argument callables instead of values. Only the
#    callable of the selected branch is invoked, exactly once.
#
# Exceptions raised by thunks or actions propagate unchanged.


from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from boolext.kernel.errors import ExpectError
from boolext.kernel.types import Err, Nothing, Ok, Option, Result, Some

T = TypeVar("T")
E = TypeVar("E")


# Option adapters


def as_option(b: bool) -> Option[None]:
    """Transform ``True`` into ``Some(None)`` and ``False`` into ``Nothing()``.

    Example:
        >>> as_option(2 in [1, 2, 3])
        Some(value=None)
    """
    return Some(None) if b else Nothing()


def as_option_false(b: bool) -> Option[None]:
    return as_option(not b)


def some(b: bool, value: T) -> Option[T]:
    """Transform ``True`` into ``Some(value)`` and ``False`` into ``Nothing()``.

    Args:
        b: The operand
        value: Payload for the present branch, already evaluated by the caller

    Returns:
        Option[T]: ``Some(value)`` when ``b`` holds, ``Nothing()`` otherwise
    """
    return Some(value) if b else Nothing()


def some_false(b: bool, value: T) -> Option[T]:
    return some(not b, value)


def some_with(b: bool, thunk: Callable[[], T]) -> Option[T]:
    """Lazy ``some``: ``thunk`` runs only when ``b`` holds.

    Args:
        b: The operand
        thunk: Zero-argument callable producing the payload

    Returns:
        Option[T]: ``Some(thunk())`` when ``b`` holds, ``Nothing()`` otherwise
    """
    if b:
        return Some(thunk())
    return Nothing()


def some_with_false(b: bool, thunk: Callable[[], T]) -> Option[T]:
    return some_with(not b, thunk)


# Result adapters


def as_result(b: bool) -> Result[None, None]:
    """Transform ``True`` into ``Ok(None)`` and ``False`` into ``Err(None)``."""
    return Ok(None) if b else Err(None)


def as_result_false(b: bool) -> Result[None, None]:
    return as_result(not b)


def ok(b: bool, value: T) -> Result[T, None]:
    """Transform ``True`` into ``Ok(value)`` and ``False`` into ``Err(None)``."""
    return Ok(value) if b else Err(None)


def ok_with(b: bool, thunk: Callable[[], T]) -> Result[T, None]:
    """Lazy ``ok``: ``thunk`` runs only when ``b`` holds."""
    if b:
        return Ok(thunk())
    return Err(None)


def ok_false(b: bool, err: E) -> Result[None, E]:
    """Transform ``True`` into ``Err(err)`` and ``False`` into ``Ok(None)``.

    Note:
        The polarity is the opposite of ``ok_false_with``, which fails on
        ``False``. Both are kept as they are; callers relying on either
        behaviour must not be silently switched to the other.
    """
    return Err(err) if b else Ok(None)


def ok_false_with(b: bool, thunk: Callable[[], E]) -> Result[None, E]:
    """Transform ``True`` into ``Ok(None)`` and ``False`` into ``Err(thunk())``.

    ``thunk`` runs only on the failure branch. See ``ok_false`` for the
    polarity difference between the two.

    Example:
        >>> ok_false_with(4 in [1, 2, 3], lambda: "missing")
        Err(error='missing')
    """
    if b:
        return Ok(None)
    return Err(thunk())


def ok_or_err(b: bool, ok: T, err: E) -> Result[T, E]:
    """Transform ``True`` into ``Ok(ok)`` and ``False`` into ``Err(err)``.

    Example:
        >>> ok_or_err(2 in [1, 2, 3], "Foo", "Err")
        Ok(value='Foo')
    """
    return Ok(ok) if b else Err(err)


def ok_or_err_with(b: bool, ok: Callable[[], T], err: Callable[[], E]) -> Result[T, E]:
    """Lazy ``ok_or_err``.

    Args:
        b: The operand
        ok: Zero-argument callable producing the success payload
        err: Zero-argument callable producing the failure payload

    Returns:
        Result[T, E]: ``Ok(ok())`` when ``b`` holds, ``Err(err())`` otherwise.
        The callable of the other branch is never invoked.
    """
    if b:
        return Ok(ok())
    return Err(err())


def ok_or_err_false(b: bool, ok: T, err: E) -> Result[T, E]:
    return ok_or_err(not b, ok, err)


def ok_or_err_false_with(b: bool, ok: Callable[[], T], err: Callable[[], E]) -> Result[T, E]:
    return ok_or_err_with(not b, ok, err)


# Value-mapping adapters


def map(b: bool, if_true: Callable[[], T], if_false: Callable[[], T]) -> T:  # noqa: A001
    """Fold the boolean by calling the thunk of the selected branch.

    Args:
        b: The operand
        if_true: Called when ``b`` holds
        if_false: Called otherwise

    Returns:
        T: The result of the one thunk that ran
    """
    if b:
        return if_true()
    return if_false()


def select(b: bool, if_true: T, if_false: T) -> T:
    """Eager ``map``: pick one of two already evaluated values.

    Example:
        >>> select(4 in [1, 2, 3], "yes", "no")
        'no'
    """
    return if_true if b else if_false


def map_or(b: bool, default: T, if_true: Callable[[], T]) -> T:
    """Return ``if_true()`` when ``b`` holds, ``default`` otherwise."""
    if b:
        return if_true()
    return default


def map_or_default(b: bool, if_true: Callable[[], T], factory: Callable[[], T]) -> T:
    """Return ``if_true()`` when ``b`` holds, ``factory()`` otherwise.

    ``factory`` is usually a type whose no-argument call builds its empty
    value, e.g. ``int`` or ``list``.
    """
    if b:
        return if_true()
    return factory()


# Side-effect adapters


def do_true(b: bool, action: Callable[[], object]) -> bool:
    """Run ``action`` when ``b`` holds; always return ``b``.

    The return value of ``action`` is discarded.
    """
    if b:
        action()
    return b


def do_false(b: bool, action: Callable[[], object]) -> bool:
    """Run ``action`` when ``b`` does not hold; always return the original ``b``."""
    do_true(not b, action)
    return b


def try_do_true(b: bool, action: Callable[[], Result[None, E]]) -> Result[bool, E]:
    """Run a fallible ``action`` when ``b`` holds.

    Args:
        b: The operand
        action: Zero-argument callable returning ``Ok(...)`` or ``Err(error)``

    Returns:
        Result[bool, E]: The action's ``Err`` unchanged if it failed,
        ``Ok(b)`` otherwise (including when the action did not run)
    """
    if b:
        outcome = action()
        if isinstance(outcome, Err):
            return outcome
    return Ok(b)


def try_do_false(b: bool, action: Callable[[], Result[None, E]]) -> Result[bool, E]:
    """Run a fallible ``action`` when ``b`` does not hold.

    Returns ``Ok(b)`` with the original operand on success.
    """
    outcome = try_do_true(not b, action)
    if isinstance(outcome, Err):
        return outcome
    return Ok(b)


# Assertion adapters


def expect(b: bool, message: str) -> None:
    """Do nothing when ``b`` holds, raise ``ExpectError(message)`` otherwise.

    Raises:
        ExpectError: If ``b`` is false
    """
    if not b:
        raise ExpectError(message)


def expect_false(b: bool, message: str) -> None:
    """Do nothing when ``b`` is false, raise ``ExpectError(message)`` otherwise."""
    expect(not b, message)
