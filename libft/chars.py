"""ASCII character classification and case conversion."""

from __future__ import annotations

from typing import TypeVar

CharLike = TypeVar("CharLike", int, str)

_LOWER_START, _LOWER_END = ord("a"), ord("z")
_UPPER_START, _UPPER_END = ord("A"), ord("Z")
_DIGIT_START, _DIGIT_END = ord("0"), ord("9")
_CASE_OFFSET = 32


def _code(c: int | str) -> int:
    """Return the code point of a character given as an int or a one-character str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _is_lower(code: int) -> bool:
    return _LOWER_START <= code <= _LOWER_END


def _is_upper(code: int) -> bool:
    return _UPPER_START <= code <= _UPPER_END


def is_alpha(c: int | str) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return _is_lower(code) or _is_upper(code)


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return _DIGIT_START <= _code(c) <= _DIGIT_END


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else comes back unchanged."""
    code = _code(c)
    if _is_upper(code):
        return _convert(c, code + _CASE_OFFSET)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else comes back unchanged."""
    code = _code(c)
    if _is_lower(code):
        return _convert(c, code - _CASE_OFFSET)
    return c