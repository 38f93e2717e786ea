"""Byte-buffer operations on bytearray and bytes-like objects.

Mutating functions work in place on a bytearray (or writable memoryview)
and return it. Lengths beyond the buffers involved raise ValueError.
"""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    _check_length(n, buf)
    buf[:n] = bytes(n)


def memset(buf: bytearray, ch: int, n: int) -> bytearray:
    """Fill the first *n* bytes of *buf* with the low byte of *ch*."""
    _check_length(n, buf)
    buf[:n] = bytes([ch & 0xFF]) * n
    return buf


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy *n* bytes from *src* into the start of *dest*."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy *n* bytes within *buf* from offset *src* to offset *dest*.

    The regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n)
    if dest + n > len(buf) or src + n > len(buf):
        raise ValueError("region extends past the end of the buffer")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def memchr(buf: bytes, ch: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of *ch* in the first *n* bytes, or None."""
    _check_length(n, buf)
    index = bytes(buf[:n]).find(ch & 0xFF)
    return None if index < 0 else index


def memcmp(buf1: bytes, buf2: bytes, n: int) -> int:
    """Difference of the first differing bytes among the first *n*, or 0."""
    _check_length(n, buf1, buf2)
    for a, b in zip(buf1[:n], buf2[:n]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of *count* elements of *size* bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and SIZE_MAX // size < count:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)