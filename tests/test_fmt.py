import io

import pytest

from solong_map.fmt import printf, putendl, putnbr, putstr, sprintf


def test_plain_text_is_unchanged():
    assert sprintf("hello world") == "hello world"


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_string_conversion():
    assert sprintf("[%s]", "map") == "[map]"


def test_int_min():
    assert sprintf("%d", -2147483648) == "-2147483648"


@pytest.mark.parametrize("value", [0, 1, -1, 42, -999, 2147483647])
def test_signed_round_trip(value):
    assert int(sprintf("%d", value)) == value
    assert sprintf("%i", value) == sprintf("%d", value)


def test_signed_wraps_to_32_bits():
    assert int(sprintf("%d", 2147483648)) == -2147483648


def test_unsigned_wraps_negative():
    assert int(sprintf("%u", -1)) == 2**32 - 1


@pytest.mark.parametrize("value", [0, 9, 10, 255, 4096, 123456789])
def test_hex_round_trip(value):
    lower = sprintf("%x", value)
    upper = sprintf("%X", value)
    assert int(lower, 16) == value
    assert int(upper, 16) == value
    assert lower == lower.lower()
    assert upper == upper.upper()


def test_pointer_prefix_and_value():
    text = sprintf("%p", 48879)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 48879


def test_null_pointer():
    assert sprintf("%p", None) == "0x0"


def test_char_conversion():
    assert sprintf("%c", "A") == "A"
    assert sprintf("%c", 66) == chr(66)


def test_percent_literal():
    assert sprintf("%%") == "%"


def test_spaces_after_percent_are_skipped():
    assert sprintf("% d", 5) == sprintf("%d", 5)
    assert sprintf("%   s", "x") == "x"


def test_unknown_conversion_prints_nothing():
    assert sprintf("a%qb") == "ab"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("Error: %s %d\n", "bad", 3, file=out)
    assert count == len(out.getvalue())
    assert out.getvalue() == sprintf("Error: %s %d\n", "bad", 3)


def test_putstr_and_putendl():
    out = io.StringIO()
    putstr("abc", out)
    putendl("def", out)
    assert out.getvalue() == "abc" + "def" + "\n"


def test_putnbr_round_trip():
    out = io.StringIO()
    putnbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"
    other = io.StringIO()
    putnbr(31415, other)
    assert int(other.getvalue()) == 31415


def test_putstr_rejects_none():
    with pytest.raises(TypeError):
        putstr(None, io.StringIO())