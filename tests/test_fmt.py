import io

import pytest

from minitalk.fmt import printf, render


def test_plain_text_is_unchanged():
    assert render("Server PID: ready\n") == "Server PID: ready\n"


def test_percent_escape():
    assert render("100%%") == "100%"


def test_trailing_percent_is_dropped():
    assert render("abc%") == "abc"


def test_unknown_specifier_is_written_as_itself():
    assert render("%q%z") == "qz"


def test_string_conversion():
    assert render("Received message: %s\n", "hello") == "Received message: hello\n"


def test_null_string():
    assert render("%s", None) == "(null)"


def test_char_from_str():
    assert render("[%c]", "A") == "[A]"


def test_char_from_int_matches_chr():
    assert render("%c", 65) == chr(65)


def test_char_from_int_keeps_low_byte():
    assert render("%c", 256 + 66) == chr(66)


@pytest.mark.parametrize("n", [0, 7, 42, -1, 2147483647, -2147483648, 123456789])
def test_signed_round_trip(n):
    assert int(render("%d", n)) == n
    assert render("%i", n) == render("%d", n)


def test_signed_wraps_to_32_bits():
    assert int(render("%d", 2**31)) == -(2**31)


def test_zero_renders_as_single_digit():
    assert render("%d|%u|%x|%X", 0, 0, 0, 0) == "0|0|0|0"


def test_unsigned_wraps_negative():
    assert int(render("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [1, 15, 16, 255, 4096, 0xDEADBEEF])
def test_hex_round_trip(n):
    text = render("%x", n)
    assert int(text, 16) == n
    assert text == text.lower()
    assert render("%X", n) == text.upper()


def test_null_pointer():
    assert render("%p", 0) == "(nil)"
    assert render("%p", None) == "(nil)"


@pytest.mark.parametrize("address", [1, 0x7FFE1234, 2**63 + 5])
def test_pointer_round_trip(address):
    text = render("%p", address)
    assert text.startswith("0x")
    assert int(text[2:], 16) == address


def test_several_conversions_in_order():
    result = render("%s=%d (%c)", "pid", 5, "x")
    assert result == "pid=5 (x)"


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        render("%d and %d", 1)


def test_wrong_type_for_integer_raises():
    with pytest.raises(TypeError):
        render("%d", "12")


def test_wrong_type_for_string_raises():
    with pytest.raises(TypeError):
        render("%s", 12)


def test_multi_character_char_raises():
    with pytest.raises(ValueError):
        render("%c", "ab")


def test_printf_writes_to_stream_and_counts():
    stream = io.StringIO()
    count = printf("Sending %s to PID %d\n", "hi", 99, stream=stream)
    assert stream.getvalue() == "Sending hi to PID 99\n"
    assert count == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", None)
    captured = capsys.readouterr()
    assert captured.out == "(null)"
    assert count == len(captured.out)