"""Wall clock and local-time conversion.

This module wraps the two operating system services the library depends
on: the current wall-clock time and the local time-zone tables. All other
modules are pure calculation.

Functions:
    now_microseconds: Current time in microseconds since the Unix epoch.
    local_fields: Local calendar fields for a Unix timestamp in seconds.
    utc_to_seconds: Seconds since 0001-01-01 00:00:00 for calendar fields.
    local: Local wall-clock seconds for an absolute second count.
    local_to_seconds: Absolute seconds for a local wall-clock time.

Absolute second counts here are measured from 0001-01-01 00:00:00, the
start of ordinal day 1, not from the Unix epoch. EPOCH_SECONDS converts
between the two.

Examples:
    >>> utc_to_seconds(1970, 1, 1, 0, 0, 0) == EPOCH_SECONDS
    True
"""

from __future__ import annotations

import logging
import time

from kalends._internal.calendar import ymd_to_ordinal
from kalends._internal.constants import (
    EPOCH_ORDINAL,
    EPOCH_SECONDS,
    MAX_FOLD_SECONDS,
    MAX_YEAR,
    MIN_YEAR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from kalends.errors import RangeError

logger = logging.getLogger(__name__)


def now_microseconds() -> int:
    """Return the current wall-clock time in microseconds since the Unix epoch."""
    return time.time_ns() // 1000


def local_fields(seconds: int) -> tuple[int, int, int, int, int, int]:
    """Return local (year, month, day, hour, minute, second) for a Unix timestamp.

    A leap second (second 60) is clamped to 59.

    Raises:
        RangeError: If the platform cannot convert the timestamp.
    """
    try:
        tm = time.localtime(seconds)
    except (OverflowError, OSError) as e:
        raise RangeError(
            f"timestamp {seconds} is out of range for the platform",
            field="timestamp",
            value=seconds,
        ) from e
    return (
        tm.tm_year,
        tm.tm_mon,
        tm.tm_mday,
        tm.tm_hour,
        tm.tm_min,
        min(tm.tm_sec, 59),
    )


def utc_to_seconds(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> int:
    """Return seconds since 0001-01-01 00:00:00 for the given fields.

    The fields are not treated as being in any zone; the result is the
    plain count of seconds.

    Raises:
        RangeError: If year is outside 1-9999.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise RangeError(f"year {year} is out of range", field="year", value=year)
    ordinal = ymd_to_ordinal(year, month, day)
    return (
        ordinal * SECONDS_PER_DAY
        + hour * SECONDS_PER_HOUR
        + minute * SECONDS_PER_MINUTE
        + second
    )


def local(u: int) -> int:
    """Return the local wall-clock time, in absolute seconds, at instant u."""
    return utc_to_seconds(*local_fields(u - EPOCH_SECONDS))


def local_to_seconds(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    fold: int = 0,
) -> int:
    """Return the instant u, in absolute seconds, whose local time is the given fields.

    Solves local(u) == t for u. The local offset is sampled at the first
    estimate and again MAX_FOLD_SECONDS earlier (fold=0) or later
    (fold=1), which finds both offsets around a single transition.

    - When the local time occurs twice, fold=0 gives the earlier instant
      and fold=1 the later one.
    - When the local time is skipped (a gap), neither offset solves the
      equation; fold=0 gives the later candidate and fold=1 the earlier.

    Raises:
        RangeError: If a sampled instant falls outside the platform's or the
            library's range.

    Examples:
        >>> local_to_seconds(1970, 1, 1, 0, 0, 0) - EPOCH_SECONDS  # doctest: +SKIP
        0
    """
    t = utc_to_seconds(year, month, day, hour, minute, second)
    a = local(t) - t
    u1 = t - a
    t1 = local(u1)
    if t1 == t:
        # One solution found; look for another on the side fold selects
        u2 = u1 + MAX_FOLD_SECONDS if fold else u1 - MAX_FOLD_SECONDS
        b = local(u2) - u2
        if a == b:
            return u1
    else:
        b = t1 - u1
    u2 = t - b
    t2 = local(u2)
    if t2 == t:
        if t1 == t and u1 != u2:
            logger.debug(
                "ambiguous local time %04d-%02d-%02d %02d:%02d:%02d, fold=%d picks offset %d",
                year, month, day, hour, minute, second, fold, b,
            )
        return u2
    if t1 == t:
        return u1
    logger.debug(
        "local time %04d-%02d-%02d %02d:%02d:%02d falls in a gap between offsets %d and %d",
        year, month, day, hour, minute, second, a, b,
    )
    return min(u1, u2) if fold else max(u1, u2)


__all__ = [
    "EPOCH_ORDINAL",
    "EPOCH_SECONDS",
    "local",
    "local_fields",
    "local_to_seconds",
    "now_microseconds",
    "utc_to_seconds",
]
