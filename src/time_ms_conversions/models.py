"""Value types shared across the conversion modules."""
from __future__ import annotations

from enum import Enum


class TzMassaging(str, Enum):
    """Policy for interpreting a date-time string that may lack an offset.

    COND_ADD_TZ_UTC: assume UTC when no offset is present.
    HAS_TZ: an explicit offset is required; its absence is an error.
    LOCAL_TZ: assume the local zone, using the offset valid at the parsed
        calendar date.

    An offset present in the string always wins over the policy.
    """

    COND_ADD_TZ_UTC = "cond_add_tz_utc"
    HAS_TZ = "has_tz"
    LOCAL_TZ = "local_tz"


__all__ = ["TzMassaging"]
