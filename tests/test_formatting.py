import io

import pytest

from cubkit.formatting import (
    format_string,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)


def test_plain_text_passes_through():
    assert format_string("hello world") == "hello world"


def test_percent_escape():
    assert format_string("100%%") == "100%"


def test_char_from_string_and_int():
    assert format_string("%c%c", "a", ord("b")) == "ab"


def test_string_and_null():
    assert format_string("[%s]", "abc") == "[abc]"
    assert format_string("%s", None) == "(null)"


def test_string_stops_at_nul():
    assert format_string("%s", "ab\0cd") == "ab"


@pytest.mark.parametrize("value", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_decimal_round_trip(value):
    assert int(format_string("%d", value)) == value
    assert format_string("%i", value) == format_string("%d", value)


def test_int_min_text():
    assert format_string("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_32_bits():
    assert int(format_string("%d", 2**31)) == -(2**31)


@pytest.mark.parametrize("value", [0, 1, 4096, 2**32 - 1])
def test_unsigned_round_trip(value):
    assert int(format_string("%u", value)) == value


def test_unsigned_negative_wraps():
    assert int(format_string("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("value", [0, 15, 16, 255, 0xDEADBEEF])
def test_hex_round_trip(value):
    low = format_string("%x", value)
    high = format_string("%X", value)
    assert int(low, 16) == value
    assert low.lower() == low
    assert high == low.upper()


def test_hex_negative_wraps():
    assert int(format_string("%x", -1), 16) == 2**32 - 1


def test_pointer_null_and_value():
    assert format_string("%p", None) == "0x0"
    assert format_string("%p", 0) == "0x0"
    text = format_string("%p", 0x1234)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x1234


def test_pointer_of_object_uses_identity():
    obj = object()
    assert int(format_string("%p", obj)[2:], 16) == id(obj)


def test_unknown_specifier_written_without_percent():
    assert format_string("a%qb") == "aqb"


def test_trailing_percent_dropped():
    assert format_string("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_string("%d", "x")
    with pytest.raises(TypeError):
        format_string("%s", 5)


def test_mixed_conversions():
    text = format_string("%s=%d (%c)", "n", 5, "!")
    assert text == "n=5 (!)"


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%s:%d%%", "v", -3, stream=out)
    assert out.getvalue() == "v:-3%"
    assert count == len(out.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("x%sx", "y")
    assert capsys.readouterr().out == "xyx"
    assert count == 3


def test_put_char():
    out = io.StringIO()
    put_char("z", stream=out)
    assert out.getvalue() == "z"


def test_put_str_and_none():
    out = io.StringIO()
    put_str("abc", stream=out)
    put_str(None, stream=out)
    assert out.getvalue() == "abc"


def test_put_endl_and_none():
    out = io.StringIO()
    put_endl("line", stream=out)
    put_endl(None, stream=out)
    assert out.getvalue() == "line\n"


@pytest.mark.parametrize("value", [0, 42, -42, -2147483648, 2147483647])
def test_put_nbr_round_trip(value):
    out = io.StringIO()
    put_nbr(value, stream=out)
    assert int(out.getvalue()) == value


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("12", stream=io.StringIO())