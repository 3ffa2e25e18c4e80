"""
The seximal wrapper family: one value class per native numeric type.

Class names spell the native width in seximal, so ``Si12`` wraps an
8-bit signed integer (8 is "12" in seximal) and ``Sf144`` wraps a 64-bit
float.
"""
import enum
import functools
import numbers

import numpy as np

from . import _native
from ._float import format_float, parse_float
from ._integer import format_integer, parse_integer


class Ordering(enum.Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    def __str__(self):
        return self.name.capitalize()


def compare(a, b) -> Ordering:
    """Three-way comparison of two values of the same kind."""
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def _binary(method):
    # Operator against the same class or a native number, in either order.
    @functools.wraps(method)
    def forward(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return type(self)(method(self, self._value, rhs))

    return forward


def _reflected(method):
    @functools.wraps(method)
    def backward(self, other):
        lhs = self._coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return type(self)(method(self, lhs, self._value))

    return backward


@functools.total_ordering
class _Seximal:
    __slots__ = ("_value",)

    native = None
    # Make numpy scalars defer to the reflected operators.
    __array_ufunc__ = None

    @property
    def value(self):
        """The held native value."""
        return self._value

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r})"

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._value < other._value

    def __hash__(self):
        return hash((type(self).__name__, self._value))

    def cmp(self, other) -> Ordering:
        if type(other) is not type(self):
            raise TypeError(f"cannot compare {type(self).__name__} with {type(other).__name__}")
        return compare(self._value, other._value)

    def astype(self, cls):
        """Convert to another wrapper class with native cast semantics."""
        return cls(_native.cast(self._value, cls.native))


class SeximalInteger(_Seximal):
    """
    A native integer shown in seximal.

    Construction wraps out-of-range values to the width, as do the
    arithmetic operators. ``/`` truncates toward zero and ``%`` takes the
    sign of the dividend.
    """

    __slots__ = ()

    def __init__(self, value=0):
        if isinstance(value, str):
            raise TypeError(f"use {type(self).__name__}.parse() for seximal text")
        self._value = self.native.wrap(int(value))

    @classmethod
    def parse(cls, text, *, overflow_check=None):
        """Parse a seximal integer literal into an instance."""
        return cls(parse_integer(text, cls.native.bits, cls.native.signed, overflow_check=overflow_check))

    def __str__(self):
        return format_integer(self._value)

    def __int__(self):
        return self._value

    def __index__(self):
        return self._value

    def __float__(self):
        return float(self._value)

    def _coerce(self, other):
        if type(other) is type(self):
            return other._value
        if isinstance(other, (numbers.Integral, np.integer)):
            return int(other)
        return NotImplemented

    @staticmethod
    def _truncated_div(a, b):
        if b == 0:
            raise ZeroDivisionError("integer division by zero")
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q

    @_binary
    def __add__(self, a, b):
        return a + b

    @_binary
    def __sub__(self, a, b):
        return a - b

    @_binary
    def __mul__(self, a, b):
        return a * b

    @_binary
    def __truediv__(self, a, b):
        return self._truncated_div(a, b)

    @_binary
    def __mod__(self, a, b):
        return a - b * self._truncated_div(a, b)

    @_reflected
    def __radd__(self, a, b):
        return a + b

    @_reflected
    def __rsub__(self, a, b):
        return a - b

    @_reflected
    def __rmul__(self, a, b):
        return a * b

    @_reflected
    def __rtruediv__(self, a, b):
        return self._truncated_div(a, b)

    @_reflected
    def __rmod__(self, a, b):
        return a - b * self._truncated_div(a, b)


def _ieee(operation):
    # Native float semantics: inf and nan results instead of warnings.
    @functools.wraps(operation)
    def silenced(self, a, b):
        with np.errstate(all="ignore"):
            return operation(self, a, b)

    return silenced


class SeximalFloat(_Seximal):
    """
    A native IEEE float shown in seximal.

    Arithmetic runs in the native width through numpy. ``%`` is ``fmod``,
    and division by zero, overflow and invalid operations give IEEE
    results without raising.
    """

    __slots__ = ()

    def __init__(self, value=0.0):
        if isinstance(value, str):
            raise TypeError(f"use {type(self).__name__}.parse() for seximal text")
        with np.errstate(over="ignore"):
            self._value = self.native.type(value)

    @classmethod
    def parse(cls, text):
        """Parse a seximal real literal into an instance."""
        return cls(parse_float(text, cls.native.bits))

    def __str__(self):
        return format_float(self._value, self.native.bits)

    def __float__(self):
        return float(self._value)

    def __int__(self):
        return int(self._value)

    def _coerce(self, other):
        if type(other) is type(self):
            return other._value
        if isinstance(other, (numbers.Real, np.number)):
            with np.errstate(over="ignore"):
                return self.native.type(other)
        return NotImplemented

    @_binary
    @_ieee
    def __add__(self, a, b):
        return np.add(a, b)

    @_binary
    @_ieee
    def __sub__(self, a, b):
        return np.subtract(a, b)

    @_binary
    @_ieee
    def __mul__(self, a, b):
        return np.multiply(a, b)

    @_binary
    @_ieee
    def __truediv__(self, a, b):
        return np.true_divide(a, b)

    @_binary
    @_ieee
    def __mod__(self, a, b):
        return np.fmod(a, b)

    @_reflected
    @_ieee
    def __radd__(self, a, b):
        return np.add(a, b)

    @_reflected
    @_ieee
    def __rsub__(self, a, b):
        return np.subtract(a, b)

    @_reflected
    @_ieee
    def __rmul__(self, a, b):
        return np.multiply(a, b)

    @_reflected
    @_ieee
    def __rtruediv__(self, a, b):
        return np.true_divide(a, b)

    @_reflected
    @_ieee
    def __rmod__(self, a, b):
        return np.fmod(a, b)


class Si12(SeximalInteger):
    """Seximal equivalent of a signed 8-bit integer."""
    __slots__ = ()
    native = _native.INT8


class Si24(SeximalInteger):
    """Seximal equivalent of a signed 16-bit integer."""
    __slots__ = ()
    native = _native.INT16


class Si52(SeximalInteger):
    """Seximal equivalent of a signed 32-bit integer."""
    __slots__ = ()
    native = _native.INT32


class Si144(SeximalInteger):
    """Seximal equivalent of a signed 64-bit integer."""
    __slots__ = ()
    native = _native.INT64


class Si332(SeximalInteger):
    """Seximal equivalent of a signed 128-bit integer."""
    __slots__ = ()
    native = _native.INT128


class Sisize(SeximalInteger):
    """Seximal equivalent of a signed pointer-sized integer."""
    __slots__ = ()
    native = _native.INTP


class Su12(SeximalInteger):
    """Seximal equivalent of an unsigned 8-bit integer."""
    __slots__ = ()
    native = _native.UINT8


class Su24(SeximalInteger):
    """Seximal equivalent of an unsigned 16-bit integer."""
    __slots__ = ()
    native = _native.UINT16


class Su52(SeximalInteger):
    """Seximal equivalent of an unsigned 32-bit integer."""
    __slots__ = ()
    native = _native.UINT32


class Su144(SeximalInteger):
    """Seximal equivalent of an unsigned 64-bit integer."""
    __slots__ = ()
    native = _native.UINT64


class Su332(SeximalInteger):
    """Seximal equivalent of an unsigned 128-bit integer."""
    __slots__ = ()
    native = _native.UINT128


class Susize(SeximalInteger):
    """Seximal equivalent of an unsigned pointer-sized integer."""
    __slots__ = ()
    native = _native.UINTP


class Sf52(SeximalFloat):
    """Seximal equivalent of a 32-bit float."""
    __slots__ = ()
    native = _native.FLOAT32


class Sf144(SeximalFloat):
    """Seximal equivalent of a 64-bit float."""
    __slots__ = ()
    native = _native.FLOAT64


INTEGER_TYPES = (Si12, Si24, Si52, Si144, Si332, Sisize, Su12, Su24, Su52, Su144, Su332, Susize)
FLOAT_TYPES = (Sf52, Sf144)
ALL_TYPES = INTEGER_TYPES + FLOAT_TYPES

for _cls in INTEGER_TYPES:
    _cls.MIN = _cls.native.min
    _cls.MAX = _cls.native.max


def _converter(target):
    def convert(self):
        return self.astype(target)

    convert.__name__ = f"as_{target.__name__.lower()}"
    convert.__doc__ = f"Return this value as a {target.__name__} using a native cast."
    return convert


for _target in ALL_TYPES:
    for _cls in ALL_TYPES:
        if _cls is not _target:
            setattr(_cls, f"as_{_target.__name__.lower()}", _converter(_target))
