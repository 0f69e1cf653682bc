"""Epoch-millisecond <-> UTC datetime conversion.

Epoch milliseconds are signed 64-bit integers counting from
1970-01-01T00:00:00Z. Negative values are split with floor division so that
-1 maps to 1969-12-31T23:59:59.999Z rather than rounding toward zero.

All datetimes produced here are timezone-aware UTC. Values whose calendar
date falls outside what `datetime` can represent (years 1..9999) raise
`OutOfRangeError`; nothing is clamped.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from ..errors import OutOfRangeError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MS = timedelta(milliseconds=1)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _check_epoch_ms(ms: int) -> None:
    if isinstance(ms, bool) or not isinstance(ms, int):
        raise TypeError(f"epoch milliseconds must be an int, got {type(ms).__name__}")
    if not INT64_MIN <= ms <= INT64_MAX:
        raise OutOfRangeError(f"{ms} does not fit in a signed 64-bit integer", ms)


def split_epoch_ms(ms: int) -> tuple[int, int]:
    """Split epoch milliseconds into whole seconds and a 0..999 remainder.

    >>> split_epoch_ms(-1)
    (-1, 999)
    """
    _check_epoch_ms(ms)
    return divmod(ms, 1000)


def epoch_ms_to_utc(ms: int) -> datetime:
    """Convert epoch milliseconds to a timezone-aware UTC datetime.

    Args:
        ms: Milliseconds since the Unix epoch, may be negative.

    Returns:
        Aware datetime in UTC whose microsecond field carries the milliseconds.

    Raises:
        OutOfRangeError: If `ms` is outside int64 or the datetime range.
    """
    seconds, millis = split_epoch_ms(ms)
    try:
        return EPOCH + timedelta(seconds=seconds, milliseconds=millis)
    except OverflowError as e:
        raise OutOfRangeError(f"{ms} ms is outside the representable calendar range", ms) from e


def zoned_to_epoch_ms(dt: datetime) -> int:
    """Convert an aware datetime (UTC or any offset) to epoch milliseconds.

    The offset is part of the instant, so UTC and fixed-offset inputs take the
    same path. Sub-millisecond precision is floored.

    Raises:
        ValueError: If `dt` is naive.
    """
    if dt.tzinfo is None or dt.utcoffset() is None:
        raise ValueError("zoned_to_epoch_ms requires a timezone-aware datetime")
    return (dt - EPOCH) // ONE_MS


def now_to_epoch_ms() -> int:
    """Return the current UTC wall-clock time as epoch milliseconds."""
    return zoned_to_epoch_ms(datetime.now(timezone.utc))


def _render_utc(dt: datetime) -> str:
    # Omit the fraction on whole seconds, otherwise always three digits.
    timespec = "milliseconds" if dt.microsecond else "seconds"
    return dt.isoformat(timespec=timespec)


def epoch_ms_to_utc_string(ms: int) -> str:
    """Render epoch milliseconds as an ISO-8601 UTC string.

    Examples:
        0 -> "1970-01-01T00:00:00+00:00"
        -1 -> "1969-12-31T23:59:59.999+00:00"
    """
    return _render_utc(epoch_ms_to_utc(ms))


def epoch_ms_to_utc_z_string(ms: int) -> str:
    """Like `epoch_ms_to_utc_string` but with a trailing `Z` (e.g. "1970-01-01T00:00:00Z")."""
    return _render_utc(epoch_ms_to_utc(ms)).replace("+00:00", "Z")


__all__ = [
    "EPOCH",
    "split_epoch_ms",
    "epoch_ms_to_utc",
    "zoned_to_epoch_ms",
    "now_to_epoch_ms",
    "epoch_ms_to_utc_string",
    "epoch_ms_to_utc_z_string",
]
