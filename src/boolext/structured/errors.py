"""Error types for boolean coercion."""

from __future__ import annotations


class CoercionError(Exception):
    """Error raised when a raw value cannot be read as a boolean.

    This error preserves the raw value for debugging purposes.
    """

    def __init__(self, message: str, raw_value: object) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"CoercionError({super().__repr__()}, raw_value={self.raw_value!r})"
