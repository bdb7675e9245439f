"""Clock and local-time conversion.

This module wraps the operating system's wall clock and local time-zone
tables:
    - The current time in microseconds since the Unix epoch
    - Local calendar fields for a Unix timestamp
    - Local wall-clock time to absolute seconds, with fold selection

Examples:
    >>> from kalends.convert import utc_to_seconds, EPOCH_SECONDS
    >>> utc_to_seconds(1970, 1, 1, 0, 0, 0) == EPOCH_SECONDS
    True
"""

from __future__ import annotations

from kalends.convert.epoch import (
    EPOCH_ORDINAL,
    EPOCH_SECONDS,
    local,
    local_fields,
    local_to_seconds,
    now_microseconds,
    utc_to_seconds,
)

__all__ = [
    "EPOCH_ORDINAL",
    "EPOCH_SECONDS",
    "local",
    "local_fields",
    "local_to_seconds",
    "now_microseconds",
    "utc_to_seconds",
]
