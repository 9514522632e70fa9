"""C-style string length, searching, comparison and bounded copying."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Union

ByteSource = Union[bytes, bytearray, memoryview]


def _terminated(s: str) -> str:
    return s.partition("\0")[0]


def _cbytes(data: ByteSource) -> bytes:
    return bytes(data).partition(b"\0")[0]


def _code(c: Union[int, str]) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c & 0xFF


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the first occurrence of c, or None.

    An int is taken as an unsigned char. Searching for NUL finds the
    terminator, at index strlen(s).
    """
    text = _terminated(s)
    code = _code(c)
    if code == 0:
        return len(text)
    index = text.find(chr(code))
    return None if index < 0 else index


def strrchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the last occurrence of c, or None; NUL finds the terminator."""
    text = _terminated(s)
    code = _code(c)
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first
    unequal pair, with the end of a string counting as NUL."""
    if n < 0:
        raise ValueError(f"negative length {n}")
    pairs = zip_longest(_terminated(s1), _terminated(s2), fillvalue="\0")
    for x, y in islice(pairs, n):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of little within the first length characters of big, or None.

    An empty little is found at index 0.
    """
    if length < 0:
        raise ValueError(f"negative length {length}")
    index = _terminated(big)[:length].find(_terminated(little))
    return None if index < 0 else index


def strlcpy(dst: bytearray, src: ByteSource, size: int) -> int:
    """Copy src into dst, writing at most size bytes including the NUL.

    Returns the length of src, so a result of size or more means the copy
    was truncated.
    """
    if size < 0:
        raise ValueError(f"negative size {size}")
    data = _cbytes(src)
    if size == 0:
        return len(data)
    count = min(size - 1, len(data))
    if count >= len(dst):
        raise ValueError(f"size {size} exceeds destination buffer of {len(dst)} bytes")
    dst[:count] = data[:count]
    dst[count] = 0
    return len(data)


def strlcat(dst: bytearray, src: ByteSource, size: int) -> int:
    """Append src to the NUL-terminated string in dst within a buffer of size bytes.

    Returns the length of the string it tried to build: the initial length of
    dst (or size, when size is smaller) plus the length of src.
    """
    if size < 0:
        raise ValueError(f"negative size {size}")
    data = _cbytes(src)
    if size == 0:
        return len(data)
    end = bytes(dst).find(b"\0")
    if end < 0:
        raise ValueError("destination is not NUL-terminated")
    count = max(0, min(size - 1 - end, len(data)))
    stop = end + count
    if stop >= len(dst):
        raise ValueError(f"size {size} exceeds destination buffer of {len(dst)} bytes")
    dst[end:stop] = data[:count]
    dst[stop] = 0
    if 0 < size < end:
        return len(data) + size
    return end + len(data)