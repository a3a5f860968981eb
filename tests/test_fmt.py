import pytest

from solong.fmt import (
    format_hex,
    format_message,
    format_pointer,
    format_unsigned,
    printf,
)


def test_null_string():
    assert format_message("%s", None) == "(null)"


def test_plain_string_and_literal_text():
    assert format_message("moves: %s!", "many") == "moves: many!"


def test_percent_escape():
    assert format_message("100%%") == "100%"


def test_trailing_percent_dropped():
    assert format_message("abc%") == "abc"


def test_unknown_conversion_keeps_character():
    assert format_message("a%qb") == "aqb"


@pytest.mark.parametrize("value", [0, 7, 42, 123456, -5, -100])
def test_decimal_matches_int(value):
    assert format_message("%d", value) == str(value)
    assert format_message("%i", value) == str(value)


def test_int_min():
    assert format_message("%d", -2147483648) == "-2147483648"


def test_decimal_wraps_to_int32():
    assert format_message("%d", 2**31) == "-2147483648"


@pytest.mark.parametrize("value", [0, 1, 255, 4096, 0xDEADBEEF])
def test_hex_round_trip(value):
    assert int(format_hex(value, False), 16) == value
    assert format_hex(value, True) == format_hex(value, False).upper()


def test_hex_lowercase_digits_only():
    text = format_hex(0xABCDEF, False)
    assert set(text) <= set("0123456789abcdef")


def test_hex_negative_wraps():
    assert format_hex(-1, False) == "ffffffff"
    assert format_message("%X", -1) == "FFFFFFFF"


@pytest.mark.parametrize("value", [0, 9, 10, 4294967295])
def test_unsigned_round_trip(value):
    assert int(format_unsigned(value)) == value
    assert format_message("%u", value) == format_unsigned(value)


def test_unsigned_negative_wraps():
    assert format_unsigned(-1) == "4294967295"


def test_pointer_zero():
    assert format_pointer(0) == "0x0"


@pytest.mark.parametrize("value", [1, 255, 0x7FFF12345678])
def test_pointer_round_trip(value):
    text = format_pointer(value)
    assert text.startswith("0x")
    assert int(text[2:], 16) == value
    assert format_message("%p", value) == text


def test_char_from_int_and_str():
    assert format_message("%c%c", ord("P"), "E") == "PE"


def test_char_rejects_long_string():
    with pytest.raises(TypeError):
        format_message("%c", "PE")


def test_missing_argument():
    with pytest.raises(TypeError):
        format_message("%d %d", 1)


def test_printf_writes_and_counts(capsys):
    count = printf("%d\n", 12)
    out = capsys.readouterr().out
    assert out == "12\n"
    assert count == len(out)


def test_printf_null_count(capsys):
    count = printf("%s", None)
    assert capsys.readouterr().out == "(null)"
    assert count == 6