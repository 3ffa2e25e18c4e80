import math

import numpy as np
import pytest

from seximal import (
    ErrorKind,
    InvalidDigitError,
    MagnitudeOverflowError,
    MisplacedSignError,
    TooManyRadixPointsError,
    config,
    format_float,
    parse_float,
)
from seximal._float import (
    FractionDigit,
    fraction_digits,
    last_fraction_digit,
    next_fraction_digit,
)

WIDTHS = [32, 64]


# ===================================
# 1. Digit selection
# ===================================

@pytest.mark.parametrize("fraction, expected", [
    (0.0, FractionDigit(0, True)),
    (0.5, FractionDigit(3, True)),
    (0.25, FractionDigit(1, False)),
    (0.75, FractionDigit(4, False)),
    (0.9, FractionDigit(5, False)),
    (0.1, FractionDigit(0, False)),
])
def test_next_fraction_digit(fraction, expected):
    assert next_fraction_digit(fraction) == expected


@pytest.mark.parametrize("fraction, expected", [
    (0.5, 3),
    (0.0625, 0),
    (0.125, 1),
    # Ties: 1.5 rounds up to 2, 4.5 rounds down to 4.
    (0.25, 2),
    (0.75, 4),
    # Rounds past the top digit; the caller carries.
    (0.96875, 6),
])
def test_last_fraction_digit(fraction, expected):
    assert last_fraction_digit(fraction) == expected


def test_fraction_digits_stops_on_exact_digit():
    assert fraction_digits(0.25, 10) == ([1, 3], 0)


def test_fraction_digits_carries_out():
    assert fraction_digits(0.99609375, 2) == ([0, 0], 1)
    assert fraction_digits(0.96875, 1) == ([0], 1)


def test_fraction_digits_needs_a_slot():
    with pytest.raises(ValueError):
        fraction_digits(0.5, 0)


# ===================================
# 2. Formatting
# ===================================

@pytest.mark.parametrize("width", WIDTHS)
@pytest.mark.parametrize("value, expected", [
    (0.0, "0"),
    (-0.0, "0"),
    (2.0, "2"),
    (36.0, "100"),
    (2.5, "2.3"),
    (-6.25, "-10.13"),
    (0.75, "0.43"),
])
def test_format_float(width, value, expected):
    assert format_float(value, width) == expected


def test_tie_on_last_digit_goes_to_even():
    # 2**-10 expands to 0.000113321|3: the last kept digit ties between 1 and 2.
    assert format_float(2.0**-10, 32) == "0.000113322"
    # 3 * 2**-10 ties between 4 and 5 on the last kept digit.
    assert format_float(3 * 2.0**-10, 32) == "0.000344404"


def test_carry_reaches_the_whole_part(monkeypatch):
    monkeypatch.setitem(config.FLOAT_LENGTH, 32, 4)
    assert format_float(1.99609375, 32) == "2"


def test_length_budget():
    assert len(format_float(0.1, 64)) <= 20
    assert len(format_float(0.1, 32)) <= 11
    assert format_float(0.1, 64).startswith("0.0333")
    assert format_float(-0.1, 64) == "-" + format_float(0.1, 64)


def test_tiny_values_format_as_zero():
    assert format_float(-1e-30) == "0"


def test_huge_values_are_shifted():
    text = format_float(1e300)
    assert "." not in text
    assert set(text) <= set("012345")
    assert math.isclose(parse_float(text), 1e300, rel_tol=1e-12)


@pytest.mark.parametrize("value, expected", [
    (float("nan"), "nan"),
    (float("inf"), "inf"),
    (float("-inf"), "-inf"),
])
def test_non_finite(value, expected):
    assert format_float(value) == expected


def test_units_digit_rounds_when_the_whole_part_fills_the_budget():
    # 6**18 takes 19 digits, leaving no room for a fraction in 20 characters.
    assert format_float(6.0**18 + 0.75) == "1000000000000000001"
    assert parse_float(format_float(6.0**18 + 0.75)) == 6.0**18 + 1
    assert format_float(6.0**18 + 0.25) == "1000000000000000000"
    # Ties go to the even units digit.
    assert format_float(6.0**18 + 0.5) == "1000000000000000000"
    assert format_float(6.0**18 + 1.5) == "1000000000000000002"
    assert format_float(-(6.0**18 + 0.75)) == "-1000000000000000001"


def test_unknown_width_has_no_budget():
    with pytest.raises(ValueError):
        format_float(1.0, 16)


# ===================================
# 3. Parsing
# ===================================

@pytest.mark.parametrize("width", WIDTHS)
@pytest.mark.parametrize("text, expected", [
    ("0", 0.0),
    ("100", 36.0),
    ("2.3", 2.5),
    ("-10.13", -6.25),
    ("0.43", 0.75),
])
def test_parse_float(width, text, expected):
    assert parse_float(text, width) == expected


def test_parse_float_returns_native_width():
    assert parse_float("1", 32).dtype == np.float32
    assert parse_float("1", 64).dtype == np.float64


@pytest.mark.parametrize("value", [0.1, 3.14159, -123.456, 1e10, 2.0**-20, 7.75])
def test_near_round_trip(value):
    assert math.isclose(parse_float(format_float(value, 64), 64), value, rel_tol=1e-14, abs_tol=6.0**-17)
    single = float(np.float32(value))
    assert math.isclose(parse_float(format_float(value, 32), 32), single, rel_tol=1e-6, abs_tol=6.0**-8)


@pytest.mark.parametrize("text, position", [
    ("1.2.3", 3),
    ("-1.2.3", 4),
    ("..", 1),
])
def test_too_many_radix_points(text, position):
    with pytest.raises(TooManyRadixPointsError) as excinfo:
        parse_float(text)
    assert excinfo.value.kind is ErrorKind.TOO_MANY_RADIX_POINTS
    assert excinfo.value.position == position


@pytest.mark.parametrize("text, position", [
    ("1.6", 2),
    ("7", 0),
    ("-2.35x", 5),
    ("", 0),
    (".5", 0),
    ("1.", 2),
])
def test_invalid_float_digits(text, position):
    with pytest.raises(InvalidDigitError) as excinfo:
        parse_float(text)
    assert excinfo.value.position == position


def test_misplaced_sign_in_float():
    with pytest.raises(MisplacedSignError):
        parse_float("1-.2")
    with pytest.raises(MisplacedSignError):
        parse_float("1.-2")


@pytest.mark.parametrize("width", WIDTHS)
def test_leading_zeros_do_not_overflow(width):
    assert parse_float("0" * 60 + "1", width) == 1
    assert parse_float("-" + "0" * 400 + "2.3", width) == -2.5


def test_parse_float_overflow():
    text = "1" + "0" * 60
    with pytest.raises(MagnitudeOverflowError):
        parse_float(text, 32)
    assert math.isclose(parse_float(text, 64), 6.0**60)
