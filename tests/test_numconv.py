import pytest

from ftlib.numconv import convert_decimal, convert_hex, convert_unsigned
from ftlib.spec import FormatSpec


@pytest.mark.parametrize(
    "spec, pattern, value",
    [
        (FormatSpec(), "%d", 42),
        (FormatSpec(), "%d", -42),
        (FormatSpec(width=6), "%6d", -42),
        (FormatSpec(left_align=True, width=6), "%-6d", -42),
        (FormatSpec(zero_pad=True, width=6), "%06d", -42),
        (FormatSpec(plus=True), "%+d", 7),
        (FormatSpec(space=True), "% d", 7),
        (FormatSpec(precision=4), "%.4d", -7),
        (FormatSpec(width=8, precision=4), "%8.4d", 123),
        (FormatSpec(left_align=True, width=8, precision=4), "%-8.4d", 123),
        (FormatSpec(plus=True, zero_pad=True, width=5), "%+05d", 12),
        (FormatSpec(precision=0), "%.0d", 5),
    ],
)
def test_decimal_matches_standard_formatting(spec, pattern, value):
    assert convert_decimal(value, spec) == pattern % value


@pytest.mark.parametrize("value", [0, 1, -1, 2**31 - 1, -(2**31)])
def test_decimal_extremes_round_trip(value):
    assert int(convert_decimal(value, FormatSpec())) == value


def test_decimal_wraps_to_32_bits():
    assert convert_decimal(2**31, FormatSpec()) == str(-(2**31))


def test_decimal_zero_with_zero_precision_is_empty():
    assert convert_decimal(0, FormatSpec(precision=0)) == ""


def test_decimal_zero_with_zero_precision_fills_width():
    spec = FormatSpec(width=4, precision=0)
    assert convert_decimal(0, spec) == " " * spec.width


def test_decimal_sign_kept_when_zero_has_no_digits():
    assert convert_decimal(0, FormatSpec(plus=True, precision=0)) == "+"


def test_decimal_zero_flag_ignored_with_precision():
    with_zero = convert_decimal(5, FormatSpec(zero_pad=True, width=5, precision=2))
    without_zero = convert_decimal(5, FormatSpec(width=5, precision=2))
    assert with_zero == without_zero


@pytest.mark.parametrize("width", [0, 3, 10])
def test_decimal_width_invariant(width):
    result = convert_decimal(-123, FormatSpec(width=width))
    assert len(result) == max(width, len(str(-123)))


def test_decimal_rejects_non_int():
    with pytest.raises(TypeError):
        convert_decimal("5", FormatSpec())


@pytest.mark.parametrize(
    "spec, pattern, value",
    [
        (FormatSpec(), "%u", 42),
        (FormatSpec(width=6), "%6u", 42),
        (FormatSpec(left_align=True, width=6), "%-6u", 42),
        (FormatSpec(zero_pad=True, width=8), "%08u", 42),
        (FormatSpec(precision=5), "%.5u", 42),
        (FormatSpec(width=8, precision=5), "%8.5u", 42),
    ],
)
def test_unsigned_matches_standard_formatting(spec, pattern, value):
    assert convert_unsigned(value, spec) == pattern % value


def test_unsigned_wraps_negative():
    assert convert_unsigned(-1, FormatSpec()) == str(2**32 - 1)


def test_unsigned_zero_with_zero_precision_fills_width():
    spec = FormatSpec(width=3, precision=0)
    assert convert_unsigned(0, spec) == " " * spec.width


def test_unsigned_rejects_bool():
    with pytest.raises(TypeError):
        convert_unsigned(True, FormatSpec())


@pytest.mark.parametrize(
    "spec, pattern, value, upper",
    [
        (FormatSpec(), "%x", 255, False),
        (FormatSpec(), "%X", 255, True),
        (FormatSpec(alternate=True), "%#x", 255, False),
        (FormatSpec(alternate=True), "%#X", 255, True),
        (FormatSpec(zero_pad=True, width=8), "%08x", 255, False),
        (FormatSpec(left_align=True, width=8), "%-8x", 255, False),
        (FormatSpec(precision=4), "%.4x", 255, False),
        (FormatSpec(alternate=True, precision=4), "%#.4x", 255, False),
        (FormatSpec(alternate=True, width=10), "%#10x", 255, False),
    ],
)
def test_hex_matches_standard_formatting(spec, pattern, value, upper):
    assert convert_hex(value, spec, upper) == pattern % value


@pytest.mark.parametrize("value", [0, 1, 0xDEADBEEF, -1, 2**40 + 7])
def test_hex_round_trip(value):
    assert int(convert_hex(value, FormatSpec()), 16) == value & (2**32 - 1)


def test_hex_upper_is_upper_case_of_lower():
    spec = FormatSpec(alternate=True, width=12)
    assert convert_hex(0xABCDEF, spec, upper=True) == convert_hex(0xABCDEF, spec).upper()


def test_hex_alternate_has_no_effect_on_zero():
    assert convert_hex(0, FormatSpec(alternate=True)) == convert_hex(0, FormatSpec())


def test_hex_zero_fill_precedes_prefix():
    spec = FormatSpec(alternate=True, zero_pad=True, width=8)
    assert convert_hex(255, spec) == "00000xff"


def test_hex_rejects_float():
    with pytest.raises(TypeError):
        convert_hex(1.5, FormatSpec())