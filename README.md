# minitalk

minitalk sends a text message from one process to another. It uses only two
POSIX signals. Each byte of the message goes out as eight signals, least
significant bit first:

- `SIGUSR1` carries a 0 bit.
- `SIGUSR2` carries a 1 bit.

A zero byte marks the end of the message. A `str` message is sent as UTF-8,
and a message that contains a NUL byte is refused. For each non-zero byte it
receives, the server sends `SIGUSR1` back to the sender as an
acknowledgement.

The commands use `signal.sigwaitinfo` and `signal.sigtimedwait`, so they
need a platform that has them, such as Linux.

## Installation

```
pip install .
```

## Command-line use

Start the server in one terminal. It prints its process id and then waits:

```
minitalk-server
Server PID: 12345
```

Send a message from another terminal:

```
minitalk-client 12345 "hello there"
```

The client prints `Sending message "hello there" to PID 12345`, sends the
bits with a short pause after each one, and then prints
`Message sent successfully!`. While it sends, incoming acknowledgements are
held back. Once the message is out, it prints
`received signal from server, pid: <pid>` if an acknowledgement is waiting.
Signals of the same kind that arrive before they are read merge into one, so
you get at most one such line and not one line per byte.

When the terminating byte arrives, the server prints
`Received message: hello there`. An empty message is shown as `(null)`.
Press Ctrl-C to stop the server. If the server cannot send an
acknowledgement, it prints `Error: Failed to send acknowledgment` and exits
with status 1.

The client needs exactly two arguments. With a different number, it prints
`Usage: client <server_pid> <message>` and exits with status 1. If the PID
does not parse to a positive number, it prints `Invalid PID: ...` and exits
with status 1. It also exits with status 1, without a message, if a signal
cannot be delivered.

## Library use

You can use the wire encoding without sending any signals:

```python
from minitalk.protocol import BitDecoder, encode_message

decoder = BitDecoder()
for bit in encode_message("hi"):   # 8 bits per byte, then 8 zero bits
    message = decoder.feed(bit)
print(message)                     # b'hi'
```

- `minitalk.protocol`
  - `encode_char(byte)` returns the eight bits of one byte.
  - `BitDecoder.feed(bit)` returns the complete message as `bytes` once its
    zero byte has arrived, and `None` before that.
- `minitalk.client`
  - `send_char(pid, byte)` sends one byte to a running process.
  - `send_message(pid, message)` sends a message to a running process.
- `minitalk.server.MessageServer` is the receiving side.
  - `handle_signal(signum, sender_pid)` takes one `SIGUSR1`/`SIGUSR2`. It
    returns the message text when the message is complete.
  - `serve()` prints the process id. It then blocks both signals and waits
    for them with `sigwaitinfo` until it is interrupted.
  - The constructor accepts a `send_signal` callable, which defaults to
    `os.kill`, and an output `stream`.

The package also includes some small helpers:

- `minitalk.fmt`
  - `render(template, *args)` does printf-style formatting for the
    `%c %s %d %i %u %x %X %p %%` conversions, using C integer widths.
  - `printf(template, *args, stream=None)` writes the same text and returns
    its length.
- `minitalk.numbers` provides `atoi` (C-style parsing that wraps into 32
  bits), `itoa` and `put_number`.
- `minitalk.chars` provides ASCII classification and case conversion:
  - `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print`
  - `to_lower` and `to_upper`
- `minitalk.text` provides string and byte utilities:
  - `split`, `trim` and `substr`
  - `find_within`, `find_char` and `find_last_char`
  - `compare_n` and `map_indexed`
  - `compare_bytes` and `find_byte`

## Limitations

The server keeps a single decoding state for everyone. It cannot tell
apart messages from two clients that send at the same time. The only
acknowledgement is `SIGUSR1`, so the client does not wait for each bit to
be confirmed. It relies on the fixed pause between bits.

## Running the tests

```
pip install ".[test]"
pytest
```