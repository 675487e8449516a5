from __future__ import annotations

import logging
import os

from boolext import BoolExt, Err, Ok, ext, ok_or_err, ok_or_err_with, some_with

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def load_profile(user: str) -> dict[str, str]:
    print(f"loading profile for {user}")
    return {"name": user}


def check_membership(values: list[int], candidate: int) -> None:
    present = candidate in values
    print(f"{candidate} in {values}:", ok_or_err(present, "Foo", "Err"))


def main() -> None:
    check_membership([1, 2, 3], 2)
    check_membership([1, 2, 3], 4)

    # The profile is only loaded when the user is known
    known = "alice" in {"alice", "bob"}
    print(some_with(known, lambda: load_profile("alice")))

    verbose = ext(os.environ.get("BOOLEXT_VERBOSE", "off"))
    verbose.do_true(lambda: print("verbose mode")).do_false(lambda: print("quiet mode"))

    seen = [1, 2, 3]
    BoolExt(42 in seen).expect_false("42 must be unique")
    seen.append(42)

    outcome = ok_or_err_with(len(seen) > 3, lambda: sum(seen), lambda: "too few values")
    match outcome:
        case Ok(value):
            print("sum:", value)
        case Err(error):
            print("error:", error)


if __name__ == "__main__":
    main()
