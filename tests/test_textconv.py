import pytest

from ftlib.spec import FormatSpec
from ftlib.textconv import (
    convert_char,
    convert_float,
    convert_percent,
    convert_pointer,
    convert_string,
)


def test_char_plain():
    assert convert_char("a", FormatSpec()) == "a"


def test_char_from_code_is_reduced_modulo_256():
    assert convert_char(256 + ord("A"), FormatSpec()) == "A"
    assert convert_char(ord("z"), FormatSpec()) == "z"


def test_char_padding_sides():
    right = convert_char("a", FormatSpec(width=3))
    left = convert_char("a", FormatSpec(width=3, left_align=True))
    assert len(right) == len(left) == 3
    assert right.endswith("a") and right.strip() == "a"
    assert left.startswith("a") and left.strip() == "a"


def test_char_rejects_long_string():
    with pytest.raises(ValueError):
        convert_char("ab", FormatSpec())


def test_string_plain_and_truncated():
    assert convert_string("hello", FormatSpec()) == "hello"
    assert convert_string("hello", FormatSpec(precision=2)) == "hello"[:2]


def test_string_stops_at_nul():
    assert convert_string("ab\0cd", FormatSpec()) == "ab"


def test_string_width_invariants():
    padded = convert_string("hello", FormatSpec(width=10))
    left = convert_string("hello", FormatSpec(width=10, left_align=True))
    assert len(padded) == 10 and padded.lstrip(" ") == "hello"
    assert len(left) == 10 and left.rstrip(" ") == "hello"


def test_string_width_counts_truncated_text():
    result = convert_string("hello", FormatSpec(width=4, precision=2))
    assert len(result) == 4
    assert result.strip() == "he"


def test_null_string():
    assert convert_string(None, FormatSpec()) == "(null)"
    assert convert_string(None, FormatSpec(precision=6)) == "(null)"
    assert convert_string(None, FormatSpec(precision=3)) == ""


def test_null_pointer():
    assert convert_pointer(None, FormatSpec()) == "(nil)"
    assert convert_pointer(0, FormatSpec()) == "(nil)"
    assert convert_pointer(0, FormatSpec(width=8)) == "   (nil)"


def test_pointer_hex_round_trip():
    result = convert_pointer(0xDEADBEEF, FormatSpec())
    assert result.startswith("0x")
    assert result == result.lower()
    assert int(result, 16) == 0xDEADBEEF


def test_pointer_is_unsigned_64_bit():
    assert int(convert_pointer(-1, FormatSpec()), 16) == (1 << 64) - 1


def test_pointer_left_aligned():
    result = convert_pointer(255, FormatSpec(width=12, left_align=True))
    assert len(result) == 12
    assert int(result.rstrip(), 16) == 255


def test_percent_ignores_width():
    assert convert_percent(FormatSpec(width=5)) == "%"


@pytest.mark.parametrize("value", [1e10, -1e10, float("inf"), float("nan")])
def test_float_out_of_range(value):
    assert convert_float(value, FormatSpec()) == "Nan"


@pytest.mark.parametrize("value", [1.5, 0.125, 3.0, 42.75, 1000.5])
def test_float_exact_values_round_trip(value):
    assert float(convert_float(value, FormatSpec())) == value


def test_float_negative_is_signed_positive():
    assert convert_float(-2.25, FormatSpec()) == "-" + convert_float(2.25, FormatSpec())


def test_float_at_most_six_decimals():
    result = convert_float(0.1, FormatSpec())
    integer, decimals = result.split(".")
    assert integer == "0"
    assert decimals.startswith("1")
    assert len(decimals) <= 6


def test_float_leading_zero_between_nine_and_ten():
    assert convert_float(9.5, FormatSpec()) == "09.5"


def test_float_ignores_spec():
    plain = convert_float(1.5, FormatSpec())
    assert convert_float(1.5, FormatSpec(width=20, plus=True)) == plain