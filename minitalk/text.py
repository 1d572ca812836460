"""String and byte helpers: splitting, trimming, searching and comparing."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Optional, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected a character or an int, got {type(c).__name__}")


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    return [word for word in s.split(_char(sep)) if word]


def trim(s: str, charset: str) -> str:
    """Strip every character found in ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    _check_count(length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def find_within(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first ``little`` lying wholly inside ``big[:length]``.

    An empty ``little`` is found at index 0; no match gives ``None``.
    """
    _check_count(length)
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the character codes at the first position
    where they differ; the end of a string counts as code 0. Equal
    prefixes give 0.
    """
    _check_count(n)
    pairs = zip_longest(map(ord, s1), map(ord, s2), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b or a == 0:
            return a - b
    return 0


def find_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or ``None``.

    Looking for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0" and ch not in s:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def find_last_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or ``None``.

    Looking for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character of ``s``."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def compare_bytes(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_count(n)
    if n > len(a) or n > len(b):
        raise ValueError(f"cannot compare {n} bytes of shorter data")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def find_byte(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (taken modulo 256) in ``data[:n]``."""
    _check_count(n)
    if n > len(data):
        raise ValueError(f"cannot search {n} bytes of {len(data)}-byte data")
    index = data.find(value & 0xFF, 0, n)
    return None if index < 0 else index