"""Send a text message to a server process, one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from contextlib import contextmanager
from typing import Iterator, Optional, Sequence, Union

from minitalk.fmt import printf
from minitalk.numbers import atoi
from minitalk.protocol import ONE_SIGNAL, ZERO_SIGNAL, encode_char, encode_message

BIT_DELAY = 200e-6
PROGRAM = "client"


def _send_bit(pid: int, bit: int) -> None:
    os.kill(pid, ONE_SIGNAL if bit else ZERO_SIGNAL)
    time.sleep(BIT_DELAY)


def send_char(pid: int, byte: int) -> None:
    """Send the eight bits of ``byte`` to process ``pid``.

    Raises ``OSError`` if a signal cannot be delivered.
    """
    for bit in encode_char(byte):
        _send_bit(pid, bit)


def send_message(pid: int, message: Union[str, bytes]) -> None:
    """Send ``message`` and its closing NUL byte to process ``pid``."""
    for bit in encode_message(message):
        _send_bit(pid, bit)


@contextmanager
def _acknowledgements_held() -> Iterator[set[int]]:
    """Hold server acknowledgements pending so they can be read with their sender."""
    signals = {ZERO_SIGNAL, ONE_SIGNAL}
    old_handlers = {signum: signal.getsignal(signum) for signum in signals}
    old_mask = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
    try:
        yield signals
    finally:
        for signum in signals:
            signal.signal(signum, signal.SIG_IGN)
        signal.pthread_sigmask(signal.SIG_SETMASK, old_mask)
        for signum, handler in old_handlers.items():
            signal.signal(signum, handler)


def _report_acknowledgements(signals: set[int]) -> bool:
    """Print pending acknowledgements; return True on the end-of-message signal."""
    while (info := signal.sigtimedwait(signals, 0)) is not None:
        if info.si_signo == ZERO_SIGNAL:
            printf("received signal from server, pid: %d\n", info.si_pid)
        elif info.si_signo == ONE_SIGNAL:
            printf("end message signal %d\n", info.si_pid)
            return True
    return False


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the client: ``<server_pid> <message>``. Returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf("Usage: %s <server_pid> <message>\n", PROGRAM)
        return 1
    pid_text, message = args
    with _acknowledgements_held() as signals:
        pid = atoi(pid_text)
        if pid <= 0:
            printf("Invalid PID: %s\n", pid_text)
            return 1
        printf('Sending message "%s" to PID %d\n', message, pid)
        try:
            send_message(pid, message)
        except OSError:
            return 1
        if _report_acknowledgements(signals):
            return 0
    printf("Message sent successfully!\n")
    return 0