from .kernel import (
    BoolExt,
    Err,
    ExpectError,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
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
from .structured import CoerceConfig, CoercionError, coerce_bool, ext, try_coerce_bool

__all__ = [
    # Types
    "Some",
    "Nothing",
    "Option",
    "Ok",
    "Err",
    "Result",
    # Errors
    "ExpectError",
    "CoercionError",
    # Wrapper
    "BoolExt",
    # Combinators
    "as_option",
    "as_option_false",
    "some",
    "some_false",
    "some_with",
    "some_with_false",
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
    "map",
    "select",
    "map_or",
    "map_or_default",
    "do_true",
    "do_false",
    "try_do_true",
    "try_do_false",
    "expect",
    "expect_false",
    # Structured input
    "CoerceConfig",
    "coerce_bool",
    "try_coerce_bool",
    "ext",
]
