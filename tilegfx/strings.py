"""String searching, comparison, copying and splitting helpers.

Positions are returned as indices into the string, or ``None`` where
nothing is found. Searching for the NUL character finds the position just
past the end of the string, where a terminator would sit.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from typing import Any

_NUL = "\0"


def _char(c: str | int) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c))


def _non_negative(value: int, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str | int) -> int | None:
    """Return the index of the first ``c`` in ``s``, or ``None``.

    Searching for NUL returns ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Return the index of the last ``c`` in ``s``, or ``None``.

    Searching for NUL returns ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns 0 when they match over that span, otherwise the difference of
    the codes of the first differing characters, where the end of a string
    counts as code 0.
    """
    n = _non_negative(n, "n")
    for left, right in zip(s1[:n], s2[:n]):
        if left != right:
            return ord(left) - ord(right)
    common = min(len(s1), len(s2), n)
    if common == n:
        return 0
    left_code = ord(s1[common]) if common < len(s1) else 0
    right_code = ord(s2[common]) if common < len(s2) else 0
    return left_code - right_code


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Find ``needle`` wholly within the first ``n`` characters of
    ``haystack``; return its index or ``None``.

    An empty needle is found at index 0.
    """
    n = _non_negative(n, "n")
    if not needle:
        return 0
    if len(needle) > len(haystack) or n < len(needle):
        return None
    index = haystack.find(needle, 0, min(n, len(haystack)))
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the
    terminator.

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src``. With ``size`` 0 nothing is copied.
    """
    size = _non_negative(size, "size")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create: the sum
    of both lengths, or ``len(src) + size`` when ``size`` is smaller than
    ``len(dest)``. With ``size`` 0 nothing changes and ``len(src)`` is
    returned.
    """
    size = _non_negative(size, "size")
    if size < 1:
        return dest, len(src)
    room = max(size - 1 - len(dest), 0)
    result = dest + src[:room]
    if size < len(dest):
        return result, len(src) + size
    return result, len(dest) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` from ``start``.

    A start at or past the end gives an empty string.
    """
    start = _non_negative(start, "start")
    length = _non_negative(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str | None, s2: str | None) -> str:
    """Concatenate two strings; ``None`` counts as empty."""
    return (s1 or "") + (s2 or "")


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if s is None or charset is None:
        raise TypeError("strtrim needs a string and a character set")
    return s.strip(charset)


def split(s: str, sep: str | int) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    return [piece for piece in s.split(_char(sep)) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[Any], func: Callable[[int, MutableSequence[Any]], Any]) -> None:
    """Call ``func(index, s)`` for every index of the mutable sequence ``s``.

    ``func`` may change ``s[index]`` in place.
    """
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence")
    for index in range(len(s)):
        func(index, s)