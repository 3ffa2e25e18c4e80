"""
Integer codec: converts between native integers and seximal digit strings.
"""
import logging
import operator

from ._native import NativeInteger
from .config import config
from .errors import (
    InvalidDigitError,
    MagnitudeOverflowError,
    MisplacedSignError,
    SeximalError,
)

logger = logging.getLogger(__name__)


def split_sign(text):
    """
    Split a seximal literal into its sign and the text after it.

    Raises MisplacedSignError for a '-' past the first character and
    InvalidDigitError when nothing follows the sign.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    negative = text.startswith("-")
    body = text[1:] if negative else text
    misplaced = body.find("-")
    if misplaced != -1:
        raise MisplacedSignError(
            "'-' may only appear as the first character",
            text,
            misplaced + negative,
        )
    if not body:
        raise InvalidDigitError("expected at least one seximal digit", text, len(text))
    return negative, body


def digit_value(char, text, position):
    """Return the value of one seximal digit."""
    value = config.DIGITS.find(char)
    if value == -1:
        raise InvalidDigitError(f"{char!r} is not a seximal digit", text, position)
    return value


def parse_integer(text: str, width: int = 64, signed: bool = True, *, overflow_check=None) -> int:
    """
    Parse a seximal integer literal (``-?[0-5]+``) into a native integer.

    >>> parse_integer("21")
    13
    >>> parse_integer("-100", 8)
    -36

    With the "conservative" overflow check a literal of n digits is
    rejected whenever ``6 ** (n - 1)`` exceeds the width's maximum, even
    if leading zeros keep its value in range. Either policy rejects
    values outside the width's range.
    """
    if width < 1:
        raise ValueError(f"width must be positive, got {width}")
    policy = overflow_check or config.OVERFLOW_CHECK
    if policy not in config.OVERFLOW_CHECKS:
        raise ValueError(f"overflow_check must be one of {config.OVERFLOW_CHECKS}")

    native = NativeInteger(width, signed)
    try:
        return _parse(text, native, policy)
    except SeximalError as e:
        logger.debug(f"Rejected {text!r} as {native.name}: {e.message}")
        raise


def _parse(text, native, policy):
    negative, digits = split_sign(text)
    if negative and not native.signed:
        raise InvalidDigitError("an unsigned value must be a seximal whole number", text, 0)
    offset = 1 if negative else 0

    if policy == "conservative" and config.RADIX ** (len(digits) - 1) > native.max:
        raise MagnitudeOverflowError(
            f"{len(digits)} digits exceed the capacity of {native.name}", text
        )

    value = 0
    weight = 1
    for position in range(len(digits) - 1, -1, -1):
        value += digit_value(digits[position], text, position + offset) * weight
        weight *= config.RADIX

    if negative:
        value = -value
    if not native.contains(value):
        raise MagnitudeOverflowError(
            f"value is outside [{native.min}, {native.max}] for {native.name}", text
        )
    return value


def format_integer(value) -> str:
    """
    Format an integer as a seximal string.

    >>> format_integer(13)
    '21'
    >>> format_integer(-36)
    '-100'
    """
    value = operator.index(value)
    if value == 0:
        return config.DIGITS[0]

    sign = "-" if value < 0 else ""
    value = abs(value)
    digits = []
    while value > 0:
        value, remainder = divmod(value, config.RADIX)
        digits.append(config.DIGITS[remainder])
    return sign + "".join(reversed(digits))
