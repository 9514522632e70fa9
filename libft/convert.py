"""Conversions between text and 32-bit integers."""

from __future__ import annotations

import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_OVERFLOW_DIGITS = 20
_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a C int conversion does.

    Leading whitespace is skipped and an optional sign is read. A sign that is
    not followed by a digit gives 0. An unsigned run of 20 or more digits gives
    -1. Other results wrap around to a signed 32-bit integer.
    """
    match = _NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    if sign and not digits:
        return 0
    if not sign and len(digits) >= _OVERFLOW_DIGITS:
        return -1
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return _wrap_int32(value)


def itoa(n: int) -> str:
    """Format a signed 32-bit integer as decimal text."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)