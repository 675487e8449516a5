"""Option and Result variants produced by the boolean adapters - pure data definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Some(Generic[T]):
    """
    Present option.

    Attributes:
        value: The wrapped value. ``None`` stands in for the unit value.
    """

    value: T

    def is_some(self) -> Literal[True]:
        return True

    def is_nothing(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Nothing:
    """Absent option. Every instance compares equal to every other."""

    def is_some(self) -> Literal[False]:
        return False

    def is_nothing(self) -> Literal[True]:
        return True


@dataclass(frozen=True)
class Ok(Generic[T]):
    """
    Successful outcome.

    Attributes:
        value: The success payload. ``None`` stands in for the unit value.
    """

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """
    Failed outcome.

    Attributes:
        error: The failure payload, of any caller-chosen type.
    """

    error: E

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True


Option = Union[Some[T], Nothing]
Result = Union[Ok[T], Err[E]]
