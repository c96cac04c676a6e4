"""Character classification, case mapping and integer/text conversion.

Characters may be given either as a one-character string or as an integer
code; case-mapping functions return the same kind they were given.
"""

from __future__ import annotations

import operator
import re

_INT_BITS = 32
_INT_SPAN = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))

_NUMBER_PREFIX = re.compile(r"[ \n\t\v\f\r]*([+-]?)([0-9]*)")


def _code(c: str | int) -> int:
    """Return the integer code of a character given as ``str`` or ``int``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def is_alpha(c: str | int) -> bool:
    """True for the ASCII letters ``A``-``Z`` and ``a``-``z``."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """True for the ASCII digits ``0``-``9``."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for the printable ASCII range, space through tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: str | int) -> str | int:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: str | int) -> str | int:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as a 32-bit signed value.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit. Text without digits yields 0. Values outside the 32-bit
    range wrap around.
    """
    match = _NUMBER_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return (value - _INT_MIN) % _INT_SPAN + _INT_MIN


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    return str(operator.index(n))