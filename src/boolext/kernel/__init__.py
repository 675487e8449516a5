"""Kernel layer - pure boolean combinators for boolext."""

from boolext.kernel.errors import ExpectError
from boolext.kernel.ext import BoolExt
from boolext.kernel.ops import (
    as_option,
    as_option_false,
    as_result,
    as_result_false,
    do_false,
    do_true,
    expect,
    expect_false,
    map,
    map_or,
    map_or_default,
    ok,
    ok_false,
    ok_false_with,
    ok_or_err,
    ok_or_err_false,
    ok_or_err_false_with,
    ok_or_err_with,
    ok_with,
    select,
    some,
    some_false,
    some_with,
    some_with_false,
    try_do_false,
    try_do_true,
)
from boolext.kernel.types import Err, Nothing, Ok, Option, Result, Some

__all__ = [
    # Types
    "Some",
    "Nothing",
    "Option",
    "Ok",
    "Err",
    "Result",
    "ExpectError",
    # Wrapper
    "BoolExt",
    # Option adapters
    "as_option",
    "as_option_false",
    "some",
    "some_false",
    "some_with",
    "some_with_false",
    # Result adapters
    "as_result",
    "as_result_false",
    "ok",
    "ok_with",
    "ok_false",
    "ok_false_with",
    "ok_or_err",
    "ok_or_err_with",
    "ok_or_err_false",
    "ok_or_err_false_with",
    # Value-mapping adapters
    "map",
    "select",
    "map_or",
    "map_or_default",
    # Side-effect adapters
    "do_true",
    "do_false",
    "try_do_true",
    "try_do_false",
    # Assertion adapters
    "expect",
    "expect_false",
]
