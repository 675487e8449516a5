"""Error raised by the assertion adapters."""

from __future__ import annotations


class ExpectError(AssertionError):
    """Raised when a boolean does not hold the value an assertion demanded.

    This is an invariant violation, not a recoverable outcome; the
    message supplied at the call site is kept verbatim.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ExpectError({self.message!r})"
