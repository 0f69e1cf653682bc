"""Date-time string parsing and normalization to epoch milliseconds.

Accepted grammar (after trimming surrounding whitespace):

    YYYY-MM-DD{T| }HH:MM:SS[.fraction][offset]

where `fraction` is one or more digits (a comma is also accepted) and
`offset` is `Z`, `+HH`, `+HHMM` or `+HH:MM` (sign `+` or `-`). Only ASCII
digits are accepted. A space
separator is rewritten to `T` so a single strict grammar applies.

Parsing proceeds in two attempts: first as a zoned timestamp (offset
required), then as a naive one. What happens to a naive result depends on
the `TzMassaging` policy; an explicit offset in the string always wins.

Precision: fraction digits past the sixth are dropped when building the
datetime, and `zoned_to_epoch_ms` floors to whole milliseconds, so digits
past the third never round up.
"""
from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from ..config import get_settings
from ..errors import MalformedInputError, MissingTimezoneError, OutOfRangeError
from ..models import TzMassaging
from .epoch import zoned_to_epoch_ms
from .local_tz import localize_naive

logger = logging.getLogger(__name__)

_SPACE_SEPARATOR_RE = re.compile(r"^(\d{4}-\d{2}-\d{2}) (?=\d)", re.ASCII)

_FIELDS = (
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:[.,](?P<fraction>\d+))?"
)
_ZONED_RE = re.compile(
    _FIELDS + r"(?P<offset>[Zz]|(?P<sign>[+-])(?P<off_h>\d{2})(?::?(?P<off_m>\d{2}))?)",
    re.ASCII,
)
_NAIVE_RE = re.compile(_FIELDS, re.ASCII)


def normalize_separator(dt_str: str) -> str:
    """Trim whitespace and rewrite a date/time space separator to `T`."""
    return _SPACE_SEPARATOR_RE.sub(r"\1T", dt_str.strip(), count=1)


def _build_naive(m: re.Match[str]) -> Optional[datetime]:
    fraction = m.group("fraction") or ""
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    try:
        return datetime(
            int(m.group("year")),
            int(m.group("month")),
            int(m.group("day")),
            int(m.group("hour")),
            int(m.group("minute")),
            int(m.group("second")),
            microsecond,
        )
    except ValueError:
        return None


def _parse_zoned(normalized: str) -> Optional[datetime]:
    m = _ZONED_RE.fullmatch(normalized)
    if m is None:
        return None
    naive = _build_naive(m)
    if naive is None:
        return None
    if m.group("offset") in ("Z", "z"):
        return naive.replace(tzinfo=timezone.utc)
    hours = int(m.group("off_h"))
    minutes = int(m.group("off_m") or 0)
    if hours > 23 or minutes > 59:
        return None
    offset = timedelta(hours=hours, minutes=minutes)
    if m.group("sign") == "-":
        offset = -offset
    return naive.replace(tzinfo=timezone(offset))


def _parse_naive(normalized: str) -> Optional[datetime]:
    m = _NAIVE_RE.fullmatch(normalized)
    if m is None:
        return None
    return _build_naive(m)


def _parse_aware(dt_str: str, tz_massaging: Optional[TzMassaging]) -> datetime:
    if not isinstance(dt_str, str):
        raise MalformedInputError(f"expected a string, got {type(dt_str).__name__}", dt_str)
    if tz_massaging is None:
        policy = get_settings().TIME_MS_DEFAULT_TZ_MASSAGING
    else:
        policy = TzMassaging(tz_massaging)
    normalized = normalize_separator(dt_str)

    zoned = _parse_zoned(normalized)
    if zoned is not None:
        return zoned

    naive = _parse_naive(normalized)
    if naive is None:
        raise MalformedInputError(f"not a date-time: {dt_str!r}", dt_str)

    logger.debug("No offset in %r, applying %s", dt_str, policy.value)
    if policy is TzMassaging.HAS_TZ:
        raise MissingTimezoneError(f"timezone offset required: {dt_str!r}", dt_str)
    if policy is TzMassaging.LOCAL_TZ:
        return localize_naive(naive)
    return naive.replace(tzinfo=timezone.utc)


def parse_dt_str_to_utc(dt_str: str, tz_massaging: Optional[TzMassaging] = None) -> datetime:
    """Parse a date-time string into a timezone-aware UTC datetime.

    Args:
        dt_str: Date-time string using `T` or a space between date and time.
        tz_massaging: How to treat a string without an offset. Defaults to the
            configured `TIME_MS_DEFAULT_TZ_MASSAGING`.

    Returns:
        Aware datetime in UTC.

    Raises:
        MalformedInputError: The string is not a recognizable date-time.
        MissingTimezoneError: No offset present and the policy is `HAS_TZ`.
        OutOfRangeError: The UTC instant leaves the datetime range.
    """
    aware = _parse_aware(dt_str, tz_massaging)
    try:
        return aware.astimezone(timezone.utc)
    except OverflowError as e:
        raise OutOfRangeError(f"{dt_str!r} is outside the representable UTC range", dt_str) from e


def parse_dt_str_to_epoch_ms(dt_str: str, tz_massaging: Optional[TzMassaging] = None) -> int:
    """Parse a date-time string into epoch milliseconds.

    >>> parse_dt_str_to_epoch_ms("1970-01-01 00:00:00.123")
    123
    >>> parse_dt_str_to_epoch_ms("1969-12-31T16:00:00-0800", TzMassaging.HAS_TZ)
    0
    """
    return zoned_to_epoch_ms(_parse_aware(dt_str, tz_massaging))


__all__ = [
    "normalize_separator",
    "parse_dt_str_to_utc",
    "parse_dt_str_to_epoch_ms",
]
