"""Filling, copying, searching and comparing mutable byte buffers.

Buffers are ``bytearray`` or writable ``memoryview`` objects for the
functions that modify them; any bytes-like object is accepted as a source.
Lengths and offsets that reach past the end of a buffer raise
``IndexError``.
"""

from __future__ import annotations

import operator
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def _span(buf: BytesLike, n: int, *, start: int = 0) -> int:
    """Validate that ``n`` bytes from ``start`` fit inside ``buf``."""
    n = operator.index(n)
    start = operator.index(start)
    if n < 0 or start < 0:
        raise IndexError("lengths and offsets must not be negative")
    if start + n > len(buf):
        raise IndexError(
            f"range {start}..{start + n} exceeds buffer of {len(buf)} bytes"
        )
    return n


def memset(buf: bytearray | memoryview, value: int, length: int):
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (low 8 bits).

    Returns ``buf``.
    """
    length = _span(buf, length)
    buf[:length] = bytes([operator.index(value) & 0xFF]) * length
    return buf


def bzero(buf: bytearray | memoryview, length: int) -> None:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    count = operator.index(count)
    size = operator.index(size)
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: bytearray | memoryview, src: BytesLike, n: int):
    """Copy the first ``n`` bytes of ``src`` into ``dst``.

    Returns ``dst``; when ``dst`` and ``src`` are the same object nothing is
    copied and ``None`` is returned.
    """
    if dst is src:
        return None
    n = _span(dst, n)
    _span(src, n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray | memoryview, dst_offset: int, src_offset: int, n: int):
    """Copy ``n`` bytes inside ``buf`` from ``src_offset`` to ``dst_offset``.

    The two regions may overlap. Returns ``buf``.
    """
    n = _span(buf, n, start=dst_offset)
    _span(buf, n, start=src_offset)
    dst_offset = operator.index(dst_offset)
    src_offset = operator.index(src_offset)
    if dst_offset != src_offset:
        buf[dst_offset:dst_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(buf: BytesLike, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` among the first
    ``n`` bytes, or ``None`` if there is none."""
    n = _span(buf, n)
    index = bytes(buf[:n]).find(operator.index(value) & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers as unsigned values.

    Returns the difference of the first differing pair, or 0 if they match.
    """
    n = _span(a, n)
    _span(b, n)
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0