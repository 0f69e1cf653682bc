"""Error kinds raised by the conversion and parsing functions.

Every failure is reported through one of the three concrete exception
classes below. They share the `TimeMsError` base (itself a `ValueError`) and
expose a closed `ErrorKind` so callers can branch exhaustively on `err.kind`
instead of inspecting messages.
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of failure categories."""

    OUT_OF_RANGE = "out_of_range"
    MALFORMED_INPUT = "malformed_input"
    MISSING_TIMEZONE = "missing_timezone"


class TimeMsError(ValueError):
    """Base class for all conversion failures.

    Attributes:
        kind: The `ErrorKind` of this failure.
        value: The input that could not be converted.
    """

    kind: ErrorKind

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class OutOfRangeError(TimeMsError):
    """Epoch milliseconds outside int64 or the representable calendar range."""

    kind = ErrorKind.OUT_OF_RANGE


class MalformedInputError(TimeMsError):
    """String is neither a zoned nor a naive date-time."""

    kind = ErrorKind.MALFORMED_INPUT


class MissingTimezoneError(TimeMsError):
    """Naive date-time given where an explicit offset is required."""

    kind = ErrorKind.MISSING_TIMEZONE


__all__ = [
    "ErrorKind",
    "TimeMsError",
    "OutOfRangeError",
    "MalformedInputError",
    "MissingTimezoneError",
]
