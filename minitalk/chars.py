"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. Only the ASCII ranges count, whatever the locale.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    """Return the integer code of a character given as ``str`` or ``int``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def is_alpha(c: CharLike) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits.

    Integer codes are reduced to a single byte first.
    """
    code = _code(c)
    if isinstance(c, int):
        code &= 0xFF
    return is_alpha(code) or is_digit(code)


def is_ascii(c: CharLike) -> bool:
    """True for codes in the 7-bit ASCII range 0-127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, from space up to but not including DEL."""
    return 32 <= _code(c) < 127


def _convert(c: CharLike, low: str, high: str, offset: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += offset
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else as is.

    The result has the same type as the argument.
    """
    return _convert(c, "A", "Z", 32)


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else as is.

    The result has the same type as the argument.
    """
    return _convert(c, "a", "z", -32)