"""Local timezone resolution.

"Local" is the zone named by `TIME_MS_LOCAL_TIMEZONE` when configured,
otherwise the process's system zone. Offsets are always resolved for the
instant or calendar date being converted, never for "now", so DST rules are
honoured across transitions.
"""
from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from ..config import get_settings
from ..errors import OutOfRangeError
from .epoch import epoch_ms_to_utc

logger = logging.getLogger(__name__)


def get_local_timezone() -> Optional[tzinfo]:
    """Return the configured local zone, or None for the system zone."""
    name = get_settings().TIME_MS_LOCAL_TIMEZONE
    if not name:
        return None
    return ZoneInfo(name)


def utc_to_local(dt: datetime) -> datetime:
    """Shift an aware datetime into the local zone (result stays aware)."""
    tz = get_local_timezone()
    try:
        # astimezone(None) converts to the system zone
        return dt.astimezone(tz)
    except (OverflowError, OSError) as e:
        raise OutOfRangeError(f"{dt.isoformat()} has no local representation", dt) from e


def localize_naive(naive: datetime) -> datetime:
    """Attach the local zone valid at `naive`'s calendar date.

    The result stays in local time; callers shift to UTC if they need to, so
    wall times next to the calendar edges still yield an epoch value.
    Wall times that do not exist or occur twice around a DST transition use
    `fold=0`, i.e. the offset in effect before the transition.
    """
    tz = get_local_timezone()
    if tz is not None:
        aware = naive.replace(tzinfo=tz, fold=0)
    else:
        try:
            # A naive datetime is interpreted in the system zone by astimezone()
            aware = naive.replace(fold=0).astimezone()
        except (OverflowError, OSError) as e:
            raise OutOfRangeError(f"{naive.isoformat()} has no local offset", naive) from e
    logger.debug("Localized %s as %s (zone=%s)", naive.isoformat(), aware.isoformat(), tz or "system")
    return aware


def epoch_ms_to_local_naive(ms: int) -> datetime:
    """Convert epoch milliseconds to a naive datetime in the local zone.

    Raises:
        OutOfRangeError: If `ms` (or its local shift) leaves the datetime range.
    """
    return utc_to_local(epoch_ms_to_utc(ms)).replace(tzinfo=None)


__all__ = [
    "get_local_timezone",
    "utc_to_local",
    "localize_naive",
    "epoch_ms_to_local_naive",
]
