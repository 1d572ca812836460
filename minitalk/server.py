"""Receive messages sent one signal per bit and print them."""

from __future__ import annotations

import os
import signal
import sys
from typing import Callable, Optional, Sequence, TextIO

from minitalk.fmt import printf
from minitalk.protocol import ONE_SIGNAL, ZERO_SIGNAL, BitDecoder

_BIT_FOR_SIGNAL = {ZERO_SIGNAL: 0, ONE_SIGNAL: 1}


class MessageServer:
    """Decode incoming bit signals, acknowledge each byte, print each message."""

    def __init__(
        self,
        send_signal: Callable[[int, int], None] = os.kill,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._send_signal = send_signal
        self._stream = stream
        self._decoder = BitDecoder()
        self._peer = 0

    @property
    def peer_pid(self) -> int:
        """Process id of the last known sender, or 0."""
        return self._peer

    def handle_signal(self, signum: int, sender_pid: int) -> Optional[str]:
        """Take one bit signal; return the message text once it is complete.

        Each completed non-NUL byte is acknowledged to the sender with
        ``SIGUSR1``. Raises ``OSError`` if that acknowledgement fails.
        """
        bit = _BIT_FOR_SIGNAL.get(signum)
        if bit is None:
            raise ValueError(f"unexpected signal {signum}")
        if sender_pid:
            self._peer = sender_pid
        message = self._decoder.feed(bit)
        if message is not None:
            text = message.decode("utf-8", errors="replace")
            printf("Received message: %s\n", text or None, stream=self._stream)
            return text
        if self._decoder.bits_pending == 0 and self._peer:
            self._send_signal(self._peer, ZERO_SIGNAL)
        return None

    def serve(self) -> None:
        """Print this process id, then handle bit signals until interrupted."""
        signals = {ZERO_SIGNAL, ONE_SIGNAL}
        printf("Server PID: %d\n", os.getpid(), stream=self._stream)
        (self._stream or sys.stdout).flush()
        old_mask = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        try:
            while True:
                info = signal.sigwaitinfo(signals)
                if self.handle_signal(info.si_signo, info.si_pid) is not None:
                    (self._stream or sys.stdout).flush()
        finally:
            signal.pthread_sigmask(signal.SIG_SETMASK, old_mask)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the server until interrupted. Returns the exit status."""
    server = MessageServer()
    try:
        server.serve()
    except OSError:
        printf("Error: Failed to send acknowledgment\n")
        return 1
    except KeyboardInterrupt:
        return 0
    return 0