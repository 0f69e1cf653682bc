"""Conversions between epoch milliseconds and calendar date-times.

Epoch milliseconds are signed 64-bit integers counting from
1970-01-01T00:00:00Z. This package converts them to and from aware UTC
datetimes, naive local datetimes and ISO-8601 strings, and parses loosely
formatted date-time strings under a `TzMassaging` policy.
"""
from __future__ import annotations

from .conversions.epoch import (
    epoch_ms_to_utc,
    epoch_ms_to_utc_string,
    epoch_ms_to_utc_z_string,
    now_to_epoch_ms,
    zoned_to_epoch_ms,
)
from .conversions.local_tz import epoch_ms_to_local_naive
from .conversions.parser import parse_dt_str_to_epoch_ms, parse_dt_str_to_utc
from .errors import (
    ErrorKind,
    MalformedInputError,
    MissingTimezoneError,
    OutOfRangeError,
    TimeMsError,
)
from .models import TzMassaging

__all__ = [
    "epoch_ms_to_utc",
    "epoch_ms_to_local_naive",
    "epoch_ms_to_utc_string",
    "epoch_ms_to_utc_z_string",
    "now_to_epoch_ms",
    "zoned_to_epoch_ms",
    "parse_dt_str_to_epoch_ms",
    "parse_dt_str_to_utc",
    "TzMassaging",
    "ErrorKind",
    "TimeMsError",
    "OutOfRangeError",
    "MalformedInputError",
    "MissingTimezoneError",
]
