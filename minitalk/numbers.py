"""Conversion between 32-bit signed integers and their decimal text."""

from __future__ import annotations

import sys
from typing import TextIO

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32


def _wrap_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range, two's complement style."""
    value &= (1 << _INT_BITS) - 1
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading ASCII whitespace is skipped, one optional ``+`` or ``-`` is
    taken, then ASCII digits are read until the first non-digit. Text
    with no digits gives 0. The result wraps into the signed 32-bit range.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int32(_wrap_int32(value) * sign)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``, with a leading ``-`` when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)


def put_number(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of ``n`` to ``stream`` (standard output by default)."""
    (stream if stream is not None else sys.stdout).write(itoa(n))