"""A small printf-style formatter.

It handles the conversions ``%c``, ``%s``, ``%d``, ``%i``, ``%u``, ``%x``,
``%X``, ``%p`` and ``%%``. Integers follow C widths. ``%d`` and ``%i``
wrap into signed 32 bits. ``%u``, ``%x`` and ``%X`` wrap into unsigned
32 bits. ``%p`` wraps into unsigned 64 bits. Any other character after
``%`` is written as itself, and a lone ``%`` at the end of the template
is dropped.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, TextIO

from minitalk.numbers import itoa

_UINT32_MASK = (1 << 32) - 1
_UINT64_MASK = (1 << 64) - 1

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"


def _as_int(value: Any, spec: str) -> int:
    if not isinstance(value, int):
        raise TypeError(
            f"%{spec} expects an int, got {type(value).__name__}"
        )
    return int(value)


def _signed32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _format_signed(value: Any) -> str:
    return itoa(_signed32(_as_int(value, "d")))


def _format_unsigned(value: Any) -> str:
    return str(_as_int(value, "u") & _UINT32_MASK)


def _format_hex_lower(value: Any) -> str:
    return format(_as_int(value, "x") & _UINT32_MASK, "x")


def _format_hex_upper(value: Any) -> str:
    return format(_as_int(value, "X") & _UINT32_MASK, "X")


def _format_pointer(value: Any) -> str:
    address = 0 if value is None else _as_int(value, "p") & _UINT64_MASK
    if address == 0:
        return NULL_POINTER
    return "0x" + format(address, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "d": _format_signed,
    "i": _format_signed,
    "u": _format_unsigned,
    "x": _format_hex_lower,
    "X": _format_hex_upper,
    "p": _format_pointer,
}

_MISSING = object()


def _pieces(template: str, args: tuple[Any, ...]) -> Iterator[str]:
    chars = iter(template)
    values = iter(args)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            yield spec
            continue
        value = next(values, _MISSING)
        if value is _MISSING:
            raise ValueError(f"not enough arguments for %{spec} in {template!r}")
        yield convert(value)


def render(template: str, *args: Any) -> str:
    """Return ``template`` with its conversions filled in from ``args``."""
    return "".join(_pieces(template, args))


def printf(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the rendered template to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = render(template, *args)
    (stream if stream is not None else sys.stdout).write(text)
    return len(text)