"""Conversion subpackage split by concern.

All functions here are pure apart from reading the clock (`now_to_epoch_ms`)
and the cached settings. The public API is re-exported from the top-level
package; import from here only when testing internals.

Modules:
    epoch: epoch milliseconds <-> UTC datetimes and UTC strings
    local_tz: local zone resolution and naive local conversions
    parser: date-time string parsing under a `TzMassaging` policy

Invariants:
    - Epoch milliseconds are split with floor division
    - Sub-millisecond precision is truncated, never rounded
    - Offsets present in input strings take precedence over any policy
"""
from __future__ import annotations

from . import epoch as epoch  # noqa: F401
from . import local_tz as local_tz  # noqa: F401
from . import parser as parser  # noqa: F401

__all__ = ["epoch", "local_tz", "parser"]
