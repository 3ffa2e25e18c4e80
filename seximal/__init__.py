#!/usr/bin/env python3
"""
Seximal: Base-6 Numeric Types

This library provides seximal (base-6) equivalents of the native fixed-width
integer and floating-point types. Values are stored and computed on in the
native binary representation; only their textual form is seximal. Every type
supports arithmetic with itself or the equivalent native type, ordering, and
conversion to every other type with native cast semantics.

Examples:
    >>> from seximal import Si12, Sf144
    >>> x = Si12(13)
    >>> str(x)
    '21'
    >>> Si12.parse("-100").value
    -36
    >>> str(x + 23)
    '100'

    >>> str(Sf144(-6.25))
    '-10.13'
    >>> float(Sf144.parse("2.3"))
    2.5

Constants:
    Si12, Si24, Si52, Si144, Si332, Sisize: Signed 8/16/32/64/128-bit and pointer-sized integers
    Su12, Su24, Su52, Su144, Su332, Susize: The unsigned counterparts
    Sf52, Sf144: 32 and 64-bit floats
    parse_integer, format_integer, parse_float, format_float: The base-6 codecs
    Ordering, compare: Three-way comparison
    config: Library-wide defaults (overflow check policy, float output budgets)
"""
import logging

from ._float import format_float, parse_float
from ._integer import format_integer, parse_integer
from ._types import (
    ALL_TYPES,
    FLOAT_TYPES,
    INTEGER_TYPES,
    Ordering,
    SeximalFloat,
    SeximalInteger,
    Sf52,
    Sf144,
    Si12,
    Si24,
    Si52,
    Si144,
    Si332,
    Sisize,
    Su12,
    Su24,
    Su52,
    Su144,
    Su332,
    Susize,
    compare,
)
from .config import Config, config
from .errors import (
    ErrorKind,
    InvalidDigitError,
    MagnitudeOverflowError,
    MisplacedSignError,
    SeximalError,
    TooManyRadixPointsError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

version = "0.1.0"
