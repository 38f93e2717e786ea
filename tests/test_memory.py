import pytest

from ftlib.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_bzero_too_long():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


def test_memset_fills_and_returns_same_buffer():
    buf = bytearray(5)
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == b"xxx\x00\x00"


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x100 + ord("A"), 4)
    assert all(b == ord("A") for b in buf)


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"hello", 4)
    assert result is dest
    assert dest[:4] == b"hello"[:4]
    assert dest[4:] == b".."


def test_memcpy_zero_length_leaves_dest():
    dest = bytearray(b"keep")
    memcpy(dest, b"", 0)
    assert dest == b"keep"


def test_memcpy_source_too_short():
    with pytest.raises(ValueError):
        memcpy(bytearray(8), b"ab", 3)


def test_memmove_overlap_forward():
    original = b"abcdef"
    buf = bytearray(original)
    memmove(buf, 2, 0, 4)
    assert buf[2:6] == original[0:4]
    assert buf[:2] == original[:2]


def test_memmove_overlap_backward():
    original = b"abcdef"
    buf = bytearray(original)
    result = memmove(buf, 0, 2, 4)
    assert result is buf
    assert buf[0:4] == original[2:6]
    assert buf[4:] == original[4:]


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_found():
    assert memchr(b"hello", ord("l"), 5) == 2


def test_memchr_respects_length():
    assert memchr(b"hello", ord("o"), 4) is None


def test_memchr_truncates_char():
    data = b"\x00\x01\xff"
    assert memchr(data, -1, 3) == data.index(0xFF)


def test_memcmp_equal_prefix():
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\x80", b"\x00", 1) > 0


def test_memcmp_antisymmetric():
    a, b = b"zebra", b"zeal!"
    assert memcmp(a, b, 5) == -memcmp(b, a, 5)


def test_calloc_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert not any(buf)


def test_calloc_zero_size():
    assert len(calloc(0, 5)) == 0
    assert len(calloc(5, 0)) == 0


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2**63, 4)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 1)