import pytest

from tilegfx.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == b"xxx" + b"def"


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_memset_zero_length_leaves_buffer():
    buf = bytearray(b"keep")
    memset(buf, 0, 0)
    assert buf == b"keep"


def test_memset_past_end_raises():
    with pytest.raises(IndexError):
        memset(bytearray(3), 1, 4)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert buf[:4] == bytes(4)
    assert buf[4:] == b"ef"


def test_calloc_is_zeroed_with_product_length():
    buf = calloc(3, 7)
    assert len(buf) == 21
    assert not any(buf)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memcpy_copies_and_returns_destination():
    src = b"hello world"
    dst = bytearray(len(src))
    result = memcpy(dst, src, 5)
    assert result is dst
    assert dst[:5] == src[:5]
    assert dst[5:] == bytes(len(src) - 5)


def test_memcpy_same_object_returns_none():
    buf = bytearray(b"same")
    assert memcpy(buf, buf, 4) is None
    assert buf == b"same"


def test_memcpy_source_too_short_raises():
    with pytest.raises(IndexError):
        memcpy(bytearray(8), b"abc", 5)


def test_memmove_forward_overlap():
    original = b"abcdefgh"
    buf = bytearray(original)
    result = memmove(buf, 2, 0, 4)
    assert result is buf
    assert buf[:2] == original[:2]
    assert buf[2:6] == original[0:4]
    assert buf[6:] == original[6:]


def test_memmove_backward_overlap():
    original = b"abcdefgh"
    buf = bytearray(original)
    memmove(buf, 0, 2, 5)
    assert buf[:5] == original[2:7]
    assert buf[5:] == original[5:]


def test_memmove_keeps_length():
    buf = bytearray(b"0123456789")
    memmove(buf, 3, 1, 6)
    assert len(buf) == 10


def test_memmove_out_of_range_raises():
    with pytest.raises(IndexError):
        memmove(bytearray(6), 4, 0, 3)


def test_memchr_finds_first_match():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.find(b"n")


def test_memchr_respects_limit():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_matches_high_bytes():
    data = b"\x01\xff\x02"
    assert memchr(data, -1, 3) == 1


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_returns_difference():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) > 0
    assert memcmp(b"\x00", b"\xff", 1) < 0


def test_memcmp_length_past_end_raises():
    with pytest.raises(IndexError):
        memcmp(b"ab", b"abc", 3)