"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from libft.convert import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _until_nul(s: str) -> str:
    return s.split("\0", 1)[0]


def putchar_fd(c: str | int, fd: int) -> None:
    """Write one character to a file descriptor.

    An int is written as the single byte it holds; a str must be one character.
    """
    if isinstance(c, int):
        data = bytes([c & 0xFF])
    else:
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode()
    _write_all(fd, data)


def putstr_fd(s: str, fd: int) -> None:
    """Write a string to a file descriptor, stopping at the first NUL."""
    _write_all(fd, _until_nul(s).encode())


def putendl_fd(s: str, fd: int) -> None:
    """Write a string followed by a newline to a file descriptor."""
    _write_all(fd, (_until_nul(s) + "\n").encode())


def putnbr_fd(n: int, fd: int) -> None:
    """Write a signed 32-bit integer in decimal to a file descriptor."""
    _write_all(fd, itoa(n).encode())