import io

import pytest

from pixelfall.printf import (
    DECIMAL_DIGITS,
    LOWER_HEX_DIGITS,
    NULL_POINTER,
    NULL_STRING,
    UPPER_HEX_DIGITS,
    format_string,
    printf,
    put_base,
)


@pytest.mark.parametrize("n", [0, 1, 9, 10, 255, 4096, 123456789])
def test_put_base_decimal_matches_str(n):
    assert put_base(n, DECIMAL_DIGITS) == str(n)


@pytest.mark.parametrize("n", [0, 15, 16, 255, 0xDEADBEEF])
def test_put_base_hex_round_trip(n):
    assert int(put_base(n, LOWER_HEX_DIGITS), 16) == n
    assert put_base(n, UPPER_HEX_DIGITS) == put_base(n, LOWER_HEX_DIGITS).upper()


def test_put_base_negative():
    assert put_base(-42, DECIMAL_DIGITS) == "-42"


def test_put_base_rejects_short_alphabet():
    with pytest.raises(ValueError):
        put_base(5, "0")


def test_plain_text_unchanged():
    assert format_string("hello world") == "hello world"


def test_char_from_str_and_int():
    assert format_string("%c%c", "a", ord("b")) == "ab"


def test_string_and_null():
    assert format_string("[%s]", "abc") == "[abc]"
    assert format_string("%s", None) == NULL_STRING


def test_empty_string_argument():
    assert format_string("a%sb", "") == "ab"


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648])
def test_signed_decimal(n):
    assert format_string("%d", n) == str(n)
    assert format_string("%i", n) == str(n)


def test_signed_decimal_wraps_to_32_bits():
    assert format_string("%d", 2**31) == str(-(2**31))


def test_unsigned_wraps_negative():
    assert format_string("%u", -1) == str(0xFFFFFFFF)


@pytest.mark.parametrize("n", [0, 10, 255, 0xABCDEF])
def test_hex_lower_and_upper(n):
    assert format_string("%x", n) == format(n, "x")
    assert format_string("%X", n) == format(n, "X")


def test_hex_of_negative_is_32_bit():
    assert format_string("%x", -1) == "f" * 8


def test_pointer():
    text = format_string("%p", 0x1234)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0x1234


def test_null_pointer():
    assert format_string("%p", None) == NULL_POINTER
    assert format_string("%p", 0) == NULL_POINTER


def test_percent_literal():
    assert format_string("100%%") == "100%"


def test_unknown_conversion_produces_nothing():
    assert format_string("a%qb") == "ab"


def test_trailing_percent_dropped():
    assert format_string("abc%") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d")


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_string("%d", "x")


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_string(None)


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("Error\n%s", "Map is not a .ber", file=out)
    assert out.getvalue() == "Error\nMap is not a .ber"
    assert count == len(out.getvalue())


def test_printf_count_with_unknown_conversion():
    out = io.StringIO()
    count = printf("x%wy%d", 5, file=out)
    assert out.getvalue() == "xy5"
    assert count == 3


def test_printf_default_stdout(capsys):
    count = printf("%s-%d", "a", 1)
    captured = capsys.readouterr().out
    assert captured == "a-1"
    assert count == len(captured)