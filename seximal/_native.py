"""
Descriptors for the native numeric types behind each seximal wrapper, and
the one cast every cross-type conversion goes through.
"""
import logging
from typing import NamedTuple, Optional

import numpy as np

logger = logging.getLogger(__name__)

# Width of a pointer-sized integer on this platform.
POINTER_BITS = np.dtype(np.intp).itemsize * 8


class NativeInteger(NamedTuple):
    """A signed or unsigned two's complement integer of a fixed bit width."""

    bits: int
    signed: bool

    @property
    def name(self):
        return f"{'int' if self.signed else 'uint'}{self.bits}"

    @property
    def dtype(self) -> Optional[np.dtype]:
        """The matching numpy dtype, or None for widths numpy lacks."""
        if self.bits > 64:
            return None
        return np.dtype(self.name)

    @property
    def min(self) -> int:
        if self.dtype is not None:
            return int(np.iinfo(self.dtype).min)
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        if self.dtype is not None:
            return int(np.iinfo(self.dtype).max)
        return (1 << (self.bits - 1 if self.signed else self.bits)) - 1

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def wrap(self, value: int) -> int:
        """Truncate `value` to this width, reinterpreting the top bit as sign."""
        wrapped = value & ((1 << self.bits) - 1)
        if self.signed and wrapped > self.max:
            wrapped -= 1 << self.bits
        if wrapped != value:
            logger.debug(f"Cast of {value} to {self.name} wrapped to {wrapped}")
        return wrapped


class NativeFloat(NamedTuple):
    """An IEEE binary float of a fixed bit width."""

    bits: int

    @property
    def name(self):
        return f"float{self.bits}"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.name)

    @property
    def type(self):
        """The numpy scalar type, e.g. ``np.float32``."""
        return self.dtype.type

    @property
    def precision(self) -> int:
        """Approximate number of significant decimal digits."""
        return int(np.finfo(self.dtype).precision)

    @property
    def significand_bits(self) -> int:
        return int(np.finfo(self.dtype).nmant) + 1


INT8 = NativeInteger(8, True)
INT16 = NativeInteger(16, True)
INT32 = NativeInteger(32, True)
INT64 = NativeInteger(64, True)
INT128 = NativeInteger(128, True)
INTP = NativeInteger(POINTER_BITS, True)
UINT8 = NativeInteger(8, False)
UINT16 = NativeInteger(16, False)
UINT32 = NativeInteger(32, False)
UINT64 = NativeInteger(64, False)
UINT128 = NativeInteger(128, False)
UINTP = NativeInteger(POINTER_BITS, False)
FLOAT32 = NativeFloat(32)
FLOAT64 = NativeFloat(64)


def cast(value, target):
    """
    Convert a native value to `target` the way a native `as` cast would.

    Integer targets wrap. Float targets round to the target width. Floats
    cast to integers truncate toward zero before wrapping; ``int()``
    raises for nan and infinities.
    """
    if isinstance(target, NativeFloat):
        with np.errstate(over="ignore"):
            return target.type(value)
    if isinstance(value, (float, np.floating)):
        value = int(value)
    return target.wrap(int(value))
