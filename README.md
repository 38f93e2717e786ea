# ftlib

Small, dependency-free helpers for low-level work on characters, byte
buffers, strings and linked lists.

## Modules

### `ftlib.chars`

ASCII classification and case conversion. Each function takes an integer
code or a one-character string. A string of any other length raises
`ValueError`, and any other type raises `TypeError`.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` (codes 0–127), and
  `is_print` (codes 32–126) return a `bool`.
- `to_upper` and `to_lower` change only ASCII letters. They return an `int`
  for an `int` argument and a `str` for a `str` argument.

### `ftlib.memory`

Operations on `bytearray` and other bytes-like buffers. A negative length,
or a length that runs past a buffer, raises `ValueError`.

- `bzero(buf, n)` sets the first `n` bytes of `buf` to zero.
- `memset(buf, ch, n)` fills the first `n` bytes of `buf` with the low byte
  of `ch` and returns `buf`.
- `memcpy(dest, src, n)` copies `n` bytes from `src` into `dest` and
  returns `dest`.
- `memmove(buf, dest, src, n)` copies `n` bytes within `buf` from offset
  `src` to offset `dest`. The two regions may overlap. It returns `buf`.
- `memchr(buf, ch, n)` returns the index of the first matching byte among
  the first `n` bytes, or `None` if there is no match.
- `memcmp(buf1, buf2, n)` returns the difference of the first pair of bytes
  that differ, or `0` if none do.
- `calloc(count, size)` returns a zero-filled `bytearray` of `count * size`
  bytes. It raises `OverflowError` when that product exceeds the 64-bit
  size limit.

### `ftlib.strings`

String helpers. Searches return an index, or `None` if nothing is found.

- `strlen(s)` returns the number of characters in `s`.
- `strdup(s)` returns a copy of `s`.
- `strlcpy(dst, src, size)` and `strlcat(dst, src, size)` model a buffer of
  `size` characters. Each returns a tuple of the buffer's new contents and
  the length the operation tried to create.
- `strchr(s, c)` and `strrchr(s, c)` find the first or last occurrence of
  `c`. Searching for `"\0"` finds the end of the string.
- `strncmp(s1, s2, n)` compares at most `n` characters.
- `strnstr(big, little, length)` searches for `little` within the first
  `length` characters of `big`.
- `atoi(text)` reads a leading, optionally signed decimal integer after
  whitespace. It returns the value as a 32-bit signed integer. If the value
  goes past the 64-bit range, it returns `-1` for a positive value and `0`
  for a negative one.
- `itoa(n)` returns the decimal text of `n`.
- `substr(s, start, length)`, `strjoin(s1, s2)` (a `None` first argument
  counts as empty), `strtrim(s, charset)`, and `split(s, sep)` (drops empty
  pieces).
- `strmapi(s, f)` builds a new string from `f(index, char)` for each
  character of `s`.
- `striteri(chars, f)` replaces each element of a mutable sequence in
  place.

### `ftlib.lists`

`LinkedList` is a singly linked list made of `Node` objects. Each `Node`
has `content` and `next`.

- `LinkedList(items)` builds a list from an optional iterable of contents.
- `add_front(content)` and `add_back(content)` add a new node and return it.
- `last()` returns the last node, or `None` if the list is empty.
- `len()` gives the number of nodes, and iterating yields the contents.
- `clear(delete)` empties the list. If `delete` is given, it is first
  called on each content.
- `for_each(f)` calls `f` on every content.
- `map(f, delete)` returns a new list of `f(content)`. If `f` raises part
  way through, the contents already built are passed to `delete` and the
  exception propagates.

## Not included

The package does not write characters, strings, lines or numbers to file
descriptors. For that, use `os.write` or Python's file objects directly.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftlib.strings import split, strtrim, atoi, itoa, strlcpy
from ftlib.memory import memmove
from ftlib.lists import LinkedList

split("--1-2--3---4", "-")   # ['1', '2', '3', '4']
strtrim("xxhixx", "x")       # 'hi'
atoi("  -42abc")             # -42
itoa(-2147483648)            # '-2147483648'
strlcpy("", "hello", 3)      # ('he', 5)

memmove(bytearray(b"abcdef"), 2, 0, 3)   # bytearray(b'ababcf')

items = LinkedList([1, 2, 3])
items.add_front(0)
doubled = items.map(lambda x: x * 2, None)
list(doubled)                # [0, 2, 4, 6]
len(doubled)                 # 4
```