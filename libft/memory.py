"""Byte-buffer operations: filling, copying, comparing and searching."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
WritableBuffer = Union[bytearray, memoryview]

_ALLOC_LIMIT = 2**31 - 1


def _check_span(buf: Buffer, n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if n > len(buf):
        raise ValueError(f"length {n} exceeds {name} size {len(buf)}")


def bzero(buf: WritableBuffer, n: int) -> None:
    """Set the first n bytes of a writable buffer to zero."""
    _check_span(buf, n)
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate a zero-filled buffer of nmemb elements of size bytes each.

    A zero count or size gives an empty buffer. A request larger than
    2147483647 bytes in total, or in either factor, raises MemoryError.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    total = nmemb * size
    if total > _ALLOC_LIMIT or nmemb > _ALLOC_LIMIT or size > _ALLOC_LIMIT:
        raise MemoryError(f"cannot allocate {nmemb} x {size} bytes")
    return bytearray(total)


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c (as an unsigned char) in
    the first n bytes, or None."""
    _check_span(buf, n)
    target = c & 0xFF
    return next(
        (index for index, byte in enumerate(memoryview(buf)[:n]) if byte == target),
        None,
    )


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare the first n bytes; return the difference of the first unequal
    pair, or 0 when they match."""
    _check_span(a, n, "first buffer")
    _check_span(b, n, "second buffer")
    for x, y in zip(memoryview(a)[:n], memoryview(b)[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: WritableBuffer, src: Buffer, n: int) -> WritableBuffer:
    """Copy n bytes from src into the start of dest and return dest."""
    _check_span(dest, n, "destination")
    _check_span(src, n, "source")
    dest[:n] = memoryview(src)[:n]
    return dest


def memmove(dest: WritableBuffer, src: Buffer, n: int) -> WritableBuffer:
    """Copy n bytes from src into dest, correct even when the two overlap."""
    _check_span(dest, n, "destination")
    _check_span(src, n, "source")
    dest[:n] = bytes(memoryview(src)[:n])
    return dest


def memset(buf: WritableBuffer, c: int, n: int) -> WritableBuffer:
    """Fill the first n bytes with c (as an unsigned char) and return buf."""
    _check_span(buf, n)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf