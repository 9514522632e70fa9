"""Building new strings: copying, slicing, joining, trimming, splitting and mapping."""

from __future__ import annotations

from itertools import count
from typing import Callable, Union


def _terminated(s: str) -> str:
    return s.partition("\0")[0]


def _separator(sep: Union[int, str]) -> str:
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single character, got {sep!r}")
        return sep
    return chr(sep & 0xFF)


def strdup(s: str) -> str:
    """Copy of s up to its first NUL."""
    return _terminated(s)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s, beginning at index start.

    A start at or past the end of s gives an empty string.
    """
    if start < 0:
        raise ValueError(f"negative start {start}")
    if length < 0:
        raise ValueError(f"negative length {length}")
    text = _terminated(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenation of s1 and s2."""
    return _terminated(s1) + _terminated(s2)


def strtrim(s: str, charset: str) -> str:
    """s with every character of charset removed from both ends."""
    text = _terminated(s)
    chars = _terminated(charset)
    if not text or not chars:
        return text
    return text.strip(chars)


def split(s: str, sep: Union[int, str]) -> list[str]:
    """The non-empty pieces of s between occurrences of sep, in order."""
    return [piece for piece in _terminated(s).split(_separator(sep)) if piece]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of f(index, character) for each character of s."""
    return "".join(f(index, char) for index, char in enumerate(_terminated(s)))


def striteri(buf: bytearray, f: Callable[[int, memoryview], None]) -> None:
    """Call f(index, view) for each byte of the NUL-terminated string in buf.

    The view starts at that byte, so f may change buf in place from there on.
    The walk stops at the first NUL or at the end of buf, checked afresh after
    every call.
    """
    with memoryview(buf) as view:
        for index in count():
            if index >= len(buf) or buf[index] == 0:
                break
            with view[index:] as tail:
                f(index, tail)