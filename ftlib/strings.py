"""String utilities: bounded copies, searches, comparisons and conversions.

Positions are returned as indices rather than pointers, and a failed
search returns None. Functions that fill a fixed-size C buffer return the
resulting string together with the length the operation tried to create.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[int, str]

_WHITESPACE = frozenset(" \n\t\v\f\r")
_LLONG_MAX = 2**63 - 1
_LLONG_MIN = -(2**63)


def _target_char(c: CharLike) -> str:
    """Turn *c* into the single character that a C ``(char)c`` cast gives."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c & 0xFF)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _to_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def strlen(s: str) -> int:
    """Number of characters in *s*."""
    return len(s)


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters including the terminator.

    Returns the buffer's new contents and the length of *src*. With a size
    of zero the buffer is left as it was.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* characters.

    Returns the buffer's new contents and the length the full
    concatenation would have had, counting *dst* as at most *size* long.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dst_len = min(len(dst), size)
    if dst_len == size:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of *c* in *s*, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    target = _target_char(c)
    if target == "\0":
        index = s.find(target)
        return len(s) if index < 0 else index
    index = s.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of *c* in *s*, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    target = _target_char(c)
    if target == "\0":
        return len(s)
    index = s.rfind(target)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; the sign tells which string is greater."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of *little* within the first *length* characters of *big*, or None."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as a 32-bit signed value.

    Leading whitespace and one sign are accepted; parsing stops at the
    first non-digit. A value beyond the 64-bit range gives -1 when
    positive and 0 when negative; otherwise it wraps to 32 bits.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + sign * (ord(ch) - ord("0"))
        if value < _LLONG_MIN:
            return 0
        if value > _LLONG_MAX:
            return -1
    return _to_int32(value)


def strdup(s: str) -> str:
    """A copy of *s*."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """At most *length* characters of *s* from *start*; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: str) -> str:
    """Concatenate *s1* and *s2*; a missing *s1* counts as empty."""
    if s2 is None:
        raise TypeError("s2 must be a string")
    return (s1 or "") + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> list[str]:
    """Split *s* on the character *sep*, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def itoa(n: int) -> str:
    """Decimal representation of *n*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string of ``f(index, char)`` for every character of *s*."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], str]) -> None:
    """Replace each element of *chars* in place with ``f(index, char)``."""
    for i, ch in enumerate(list(chars)):
        chars[i] = f(i, ch)