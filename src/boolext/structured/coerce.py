"""Coercion of loosely typed input into a boolean operand."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pydantic import StrictBool, TypeAdapter, ValidationError

from boolext.kernel.ext import BoolExt
from boolext.kernel.types import Err, Ok, Result
from boolext.structured.errors import CoercionError

logger = logging.getLogger(__name__)

_LAX = TypeAdapter(bool)
_STRICT = TypeAdapter(StrictBool)


@dataclass(frozen=True)
class CoerceConfig:
    """
    Settings for reading raw values as booleans.

    Attributes:
        strict: Accept only real ``bool`` values. When false, pydantic's
            lax rules apply: ``"yes"``/``"no"``, ``"on"``/``"off"``,
            ``"true"``/``"false"``, ``1``/``0`` and similar are accepted.
    """

    strict: bool = False


DEFAULT_CONFIG = CoerceConfig()


def coerce_bool(raw: Any, config: CoerceConfig | None = None) -> bool:
    """Read ``raw`` as a boolean.

    Args:
        raw: The value to read, e.g. an environment variable or a form field
        config: Coercion settings, ``DEFAULT_CONFIG`` when omitted

    Returns:
        The boolean ``raw`` represents

    Raises:
        CoercionError: If ``raw`` is not an accepted boolean representation
    """
    config = config or DEFAULT_CONFIG
    adapter = _STRICT if config.strict else _LAX
    try:
        return adapter.validate_python(raw)
    except ValidationError as e:
        logger.debug("Rejected boolean input %r (strict=%s)", raw, config.strict)
        mode = "strict" if config.strict else "lax"
        raise CoercionError(f"Not a boolean ({mode}): {raw!r}", raw) from e


def try_coerce_bool(raw: Any, config: CoerceConfig | None = None) -> Result[bool, CoercionError]:
    """Like ``coerce_bool`` but returns ``Ok(bool)`` or ``Err(CoercionError)``."""
    try:
        return Ok(coerce_bool(raw, config))
    except CoercionError as e:
        return Err(e)


def ext(raw: Any, config: CoerceConfig | None = None) -> BoolExt:
    """Coerce ``raw`` and wrap it for method-style combinator calls.

    Example:
        >>> ext("yes").some("enabled")
        Some(value='enabled')
    """
    return BoolExt(coerce_bool(raw, config))
