import io

import pytest

from cubray.printer import (
    NULL_POINTER,
    PrintfError,
    printf,
    render,
    write_char,
    write_line,
    write_str,
)


def test_plain_text_unchanged():
    assert render("hello world") == "hello world"


def test_char_and_string():
    assert render("[%c|%s]", "x", "abc") == "[x|abc]"


def test_char_from_code():
    assert render("%c", ord("A")) == "A"


def test_none_string_prints_null():
    assert render("%s", None) == "(null)"


def test_percent_literal():
    assert render("100%%") == "100%"


def test_unknown_conversion_kept():
    assert render("a%qb") == "a%qb"


def test_lone_percent_at_end_raises():
    with pytest.raises(PrintfError):
        render("abc%")


def test_missing_argument_raises():
    with pytest.raises(PrintfError):
        render("%d %d", 1)


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -(2**31), 2**31 - 1])
def test_decimal_round_trip(n):
    assert int(render("%d", n)) == n
    assert render("%i", n) == render("%d", n)


def test_decimal_wraps_to_32_bits():
    assert int(render("%d", 2**31)) == -(2**31)


def test_unsigned_of_negative_wraps():
    assert int(render("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 2**32 - 1])
def test_hex_round_trip(n):
    lower = render("%x", n)
    upper = render("%X", n)
    assert int(lower, 16) == n
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_null_pointer():
    assert render("%p", 0) == NULL_POINTER
    assert render("%p", None) == NULL_POINTER


def test_pointer_has_prefix_and_value():
    text = render("%p", 0xBEEF)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xBEEF


def test_printf_writes_and_counts():
    buffer = io.StringIO()
    count = printf("%s=%d\n", "x", 5, stream=buffer)
    assert buffer.getvalue() == "x=5\n"
    assert count == len(buffer.getvalue())


def test_write_char():
    buffer = io.StringIO()
    assert write_char("z", buffer) == 1
    assert buffer.getvalue() == "z"


def test_write_char_rejects_strings():
    with pytest.raises(ValueError):
        write_char("ab", io.StringIO())


def test_write_str_and_none():
    buffer = io.StringIO()
    assert write_str("abc", buffer) == 3
    assert write_str(None, buffer) == 0
    assert buffer.getvalue() == "abc"


def test_write_line():
    buffer = io.StringIO()
    assert write_line("row", buffer) == 4
    write_line(None, buffer)
    assert buffer.getvalue() == "row\n"