"""
Error handling for seximal parsing.
Every parse failure is a typed, recoverable error; formatting never fails.
"""
from enum import Enum


class ErrorKind(Enum):
    INVALID_DIGIT = "invalid digit"
    MISPLACED_SIGN = "misplaced sign"
    TOO_MANY_RADIX_POINTS = "too many radix points"
    OVERFLOW = "overflow"
    # Reported by the wrapper layer's casts, never raised.
    NATIVE_CAST_LOSS = "native cast loss"


class SeximalError(ValueError):
    """Base class for all seximal parse errors."""

    kind = None

    def __init__(self, message, text=None, position=None):
        super().__init__(message)
        self.message = message
        self.text = text
        self.position = position

    def __str__(self):
        location = ""
        if self.text is not None:
            location += f"input {self.text!r}"
        if self.position is not None:
            location += f", position {self.position}"

        if location:
            return f"{self.__class__.__name__}: {location}\n  {self.message}"
        return f"{self.__class__.__name__}: {self.message}"


class InvalidDigitError(SeximalError):
    """A character outside 0-5 where a digit is expected."""
    kind = ErrorKind.INVALID_DIGIT


class MisplacedSignError(SeximalError):
    """A '-' anywhere but the first character."""
    kind = ErrorKind.MISPLACED_SIGN


class TooManyRadixPointsError(SeximalError):
    """More than one '.' in a real number."""
    kind = ErrorKind.TOO_MANY_RADIX_POINTS


class MagnitudeOverflowError(SeximalError, OverflowError):
    """The parsed magnitude does not fit the target width."""
    kind = ErrorKind.OVERFLOW
