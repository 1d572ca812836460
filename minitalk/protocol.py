"""Wire format for sending text one bit per signal.

Each byte travels as eight bits, least significant bit first. A 0 bit
is carried by ``SIGUSR1`` and a 1 bit by ``SIGUSR2``. A message is its
bytes followed by a single NUL byte that marks its end.
"""

from __future__ import annotations

import signal
from typing import Iterator, Optional, Union

BITS_PER_CHAR = 8
ZERO_SIGNAL = signal.SIGUSR1
ONE_SIGNAL = signal.SIGUSR2
TERMINATOR = 0


def _check_byte(byte: int) -> int:
    if isinstance(byte, bool) or not isinstance(byte, int):
        raise TypeError(f"expected a byte value as int, got {type(byte).__name__}")
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte value out of range 0-255: {byte}")
    return byte


def _as_bytes(message: Union[str, bytes]) -> bytes:
    if isinstance(message, str):
        data = message.encode("utf-8")
    elif isinstance(message, (bytes, bytearray)):
        data = bytes(message)
    else:
        raise TypeError(f"expected str or bytes, got {type(message).__name__}")
    if TERMINATOR in data:
        raise ValueError("message must not contain a NUL byte")
    return data


def encode_char(byte: int) -> tuple[int, ...]:
    """Return the eight bits of ``byte``, least significant first."""
    value = _check_byte(byte)
    return tuple((value >> shift) & 1 for shift in range(BITS_PER_CHAR))


def encode_message(message: Union[str, bytes]) -> Iterator[int]:
    """Yield the bits of ``message`` and of its closing NUL byte.

    A ``str`` is sent as UTF-8. A message holding a NUL byte is refused.
    """
    data = _as_bytes(message)

    def bits() -> Iterator[int]:
        for byte in data:
            yield from encode_char(byte)
        yield from encode_char(TERMINATOR)

    return bits()


class BitDecoder:
    """Reassemble messages from a stream of bits."""

    def __init__(self) -> None:
        self._bits = 0
        self._value = 0
        self._buffer = bytearray()

    @property
    def bits_pending(self) -> int:
        """Bits received so far towards the current byte."""
        return self._bits

    @property
    def buffer(self) -> bytes:
        """Bytes of the message received so far."""
        return bytes(self._buffer)

    def feed(self, bit: int) -> Optional[bytes]:
        """Take one bit; return the whole message once its NUL byte is complete."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        self._value |= int(bit) << self._bits
        self._bits += 1
        if self._bits < BITS_PER_CHAR:
            return None
        byte = self._value
        self._value = 0
        self._bits = 0
        if byte != TERMINATOR:
            self._buffer.append(byte)
            return None
        message = bytes(self._buffer)
        self._buffer.clear()
        return message