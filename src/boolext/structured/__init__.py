"""Structured input for boolean combinators.

This module reads raw, loosely typed values (strings, integers) as
boolean operands using pydantic's bool validation.
"""

from .coerce import DEFAULT_CONFIG, CoerceConfig, coerce_bool, ext, try_coerce_bool
from .errors import CoercionError

__all__ = [
    "CoercionError",
    "CoerceConfig",
    "DEFAULT_CONFIG",
    "coerce_bool",
    "try_coerce_bool",
    "ext",
]
