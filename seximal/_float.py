"""
Float codec: converts between native IEEE floats and seximal strings with a
fractional part.

Formatting is bounded by an output length budget per float width (see
``Config.FLOAT_LENGTH``). Each fractional digit is searched for outward from
the midpoint digit; an exact match ends the expansion, otherwise the
expansion continues until the budget's last position, which is rounded to
nearest with ties to even.
"""
import logging
import math
from typing import NamedTuple

import numpy as np

from ._integer import digit_value, format_integer, split_sign
from ._native import NativeFloat
from .config import config
from .errors import (
    InvalidDigitError,
    MagnitudeOverflowError,
    SeximalError,
    TooManyRadixPointsError,
)

logger = logging.getLogger(__name__)


class FractionDigit(NamedTuple):
    """One fractional digit. An exact digit ends the expansion."""

    digit: int
    exact: bool


def _search(scaled):
    # Largest digit not above `scaled`, walking out from the midpoint.
    digit = config.MIDPOINT_DIGIT
    if scaled > digit:
        while digit < config.RADIX - 1 and digit + 1 <= scaled:
            digit += 1
    elif scaled < digit:
        while digit > 0 and digit > scaled:
            digit -= 1
    return digit


def next_fraction_digit(fraction) -> FractionDigit:
    """Pick the next digit of `fraction`, a value in [0, 1)."""
    scaled = fraction * config.RADIX
    digit = _search(scaled)
    return FractionDigit(digit, scaled == digit)


def last_fraction_digit(fraction) -> int:
    """
    Pick the digit for the final position, rounded to nearest.

    Ties go to the even digit. The result is ``RADIX`` when rounding up
    from the top digit; the caller carries it.
    """
    scaled = fraction * config.RADIX
    low = _search(scaled)
    high = low + 1
    below = scaled - low
    above = high - scaled
    if below < above:
        return low
    if above < below:
        return high
    return low if low % 2 == 0 else high


def fraction_digits(fraction, count):
    """
    Expand `fraction` into at most `count` seximal digits.

    Returns the digit values and the carry (0 or 1) out of the first
    digit produced by rounding the last one.
    """
    if count < 1:
        raise ValueError(f"count must be positive, got {count}")

    digits = []
    while len(digits) < count - 1:
        step = next_fraction_digit(fraction)
        digits.append(step.digit)
        if step.exact:
            return digits, 0
        fraction = fraction * config.RADIX - step.digit
    digits.append(last_fraction_digit(fraction))

    carry = 0
    for index in range(len(digits) - 1, -1, -1):
        carry, digits[index] = divmod(digits[index] + carry, config.RADIX)
        if not carry:
            break
    return digits, carry


def _length_budget(native):
    try:
        return config.FLOAT_LENGTH[native.bits]
    except KeyError:
        raise ValueError(f"no output length budget for {native.name}") from None


def format_float(value, width: int = 64) -> str:
    """
    Format a float as a seximal string.

    >>> format_float(2.5)
    '2.3'
    >>> format_float(-6.25, 32)
    '-10.13'
    """
    native = NativeFloat(width)
    length = _length_budget(native)
    value = float(native.type(value))

    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "-inf" if value < 0 else "inf"
    if value == 0:
        return config.DIGITS[0]

    sign = "-" if value < 0 else ""
    magnitude = abs(value)

    shift = 0
    while magnitude > config.WHOLE_PART_LIMIT:
        magnitude /= config.RADIX
        shift += 1
    if shift:
        logger.debug(f"Shifted {value!r} down {shift} seximal places")

    whole = int(magnitude)
    fraction = magnitude - whole
    whole_digits = format_integer(whole)

    fraction_part = ""
    slots = length - len(whole_digits) - 1
    if fraction and slots > 0:
        digits, carry = fraction_digits(fraction, slots)
        if carry:
            logger.debug(f"Last digit of {value!r} carried into the whole part")
            whole_digits = format_integer(whole + carry)
        fraction_part = "".join(config.DIGITS[d] for d in digits).rstrip(config.DIGITS[0])
    elif fraction:
        # The units digit is the last position: round half to even.
        if fraction > 0.5 or (fraction == 0.5 and whole % 2):
            whole_digits = format_integer(whole + 1)

    body = whole_digits + config.DIGITS[0] * shift
    if fraction_part:
        body += "." + fraction_part
    if body == config.DIGITS[0]:
        return body
    return sign + body


def parse_float(text: str, width: int = 64):
    """
    Parse a seximal real literal (``-?[0-5]+(\\.[0-5]+)?``) into a numpy
    float of the given width.

    >>> float(parse_float("2.3"))
    2.5
    >>> float(parse_float("-10.13", 32))
    -6.25

    The result is accumulated digit by digit in the native width, so it
    approximates the exact value rather than being correctly rounded.
    """
    native = NativeFloat(width)
    try:
        return _parse(text, native)
    except SeximalError as e:
        logger.debug(f"Rejected {text!r} as {native.name}: {e.message}")
        raise


def _parse(text, native):
    negative, body = split_sign(text)
    offset = int(negative)

    groups = body.split(".")
    if len(groups) > 2:
        raise TooManyRadixPointsError(
            "a seximal real number has at most one '.'",
            text,
            offset + len(groups[0]) + 1 + len(groups[1]),
        )
    whole_group = groups[0]
    fraction_group = groups[1] if len(groups) == 2 else None
    if not whole_group:
        raise InvalidDigitError("expected a digit before '.'", text, offset)
    if fraction_group == "":
        raise InvalidDigitError("expected a digit after '.'", text, len(text))

    ftype = native.type
    six = ftype(config.RADIX)
    with np.errstate(over="ignore", invalid="ignore"):
        value = ftype(0)
        for position, char in enumerate(whole_group):
            value = value * six + ftype(digit_value(char, text, offset + position))

        if fraction_group:
            start = offset + len(whole_group) + 1
            fraction = ftype(0)
            for position in range(len(fraction_group) - 1, -1, -1):
                digit = digit_value(fraction_group[position], text, start + position)
                fraction = (fraction + ftype(digit)) / six
            value += fraction

    if not np.isfinite(value):
        raise MagnitudeOverflowError(f"value does not fit {native.name}", text)
    return -value if negative else value
