"""Normalization utilities for Kalends.

Mixed-radix carry routines that fold out-of-range components into their
canonical ranges after arithmetic, carrying overflow from microseconds
up through seconds, minutes, hours, days, months and years.

Every routine returns new values; inputs are never mutated. Results that
leave the representable range raise RangeError rather than wrap.

This module is not part of the public API.
"""

from __future__ import annotations

from kalends._internal.calendar import (
    days_in_month,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from kalends._internal.constants import (
    MAX_DELTA_DAYS,
    MAX_ORDINAL,
    MAX_YEAR,
    MIN_YEAR,
    SECONDS_PER_DAY,
    US_PER_SECOND,
)
from kalends.errors import RangeError


def normalize_pair(hi: int, lo: int, factor: int) -> tuple[int, int]:
    """One step of a mixed-radix conversion.

    A "hi" unit is worth `factor` "lo" units. If lo is outside
    [0, factor), the excess is moved into hi using floor division, so the
    remainder is non-negative even when lo is negative.

    Args:
        hi: The higher-order component.
        lo: The lower-order component.
        factor: Number of lo units per hi unit (> 0).

    Returns:
        Tuple of (hi, lo) with 0 <= lo < factor.

    Examples:
        >>> normalize_pair(0, 90, 60)
        (1, 30)
        >>> normalize_pair(5, -1, 60)
        (4, 59)
    """
    if lo < 0 or lo >= factor:
        carry, lo = divmod(lo, factor)
        hi += carry
    return (hi, lo)


def check_delta_days(days: int) -> None:
    """Raise RangeError if an interval day count is out of range."""
    if not -MAX_DELTA_DAYS <= days <= MAX_DELTA_DAYS:
        raise RangeError(
            f"days must be between {-MAX_DELTA_DAYS} and {MAX_DELTA_DAYS}, got {days}",
            field="days",
            value=days,
        )


def normalize_interval(
    days: int, seconds: int, microseconds: int
) -> tuple[int, int, int]:
    """Normalize an interval triple to canonical form.

    After normalization 0 <= seconds < 86400 and
    0 <= microseconds < 1_000_000; the sign lives in days.

    Raises:
        RangeError: If the resulting day count exceeds MAX_DELTA_DAYS.

    Examples:
        >>> normalize_interval(0, 0, -1)
        (-1, 86399, 999999)
    """
    seconds, microseconds = normalize_pair(seconds, microseconds, US_PER_SECOND)
    days, seconds = normalize_pair(days, seconds, SECONDS_PER_DAY)
    check_delta_days(days)
    return (days, seconds, microseconds)


def normalize_date(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Fold an out-of-range day into month and year.

    The month must already be in [1, 12]; only the day is expected to be
    out of range. Being a single day out (day 0, or one past the end of
    the month) is resolved in constant time. Larger offsets go through
    an ordinal round trip.

    Raises:
        RangeError: If the result falls outside years MIN_YEAR..MAX_YEAR.

    Examples:
        >>> normalize_date(2021, 3, 0)
        (2021, 2, 28)
        >>> normalize_date(2020, 12, 32)
        (2021, 1, 1)
        >>> normalize_date(2021, 1, 366)
        (2022, 1, 1)
    """
    dim = days_in_month(year, month)
    if day < 1 or day > dim:
        if day == 0:
            month -= 1
            if month > 0:
                day = days_in_month(year, month)
            else:
                year -= 1
                month = 12
                day = 31
        elif day == dim + 1:
            month += 1
            day = 1
            if month > 12:
                month = 1
                year += 1
        else:
            ordinal = ymd_to_ordinal(year, month, 1) + day - 1
            if ordinal < 1 or ordinal > MAX_ORDINAL:
                raise RangeError(
                    f"date out of range: day offset {day} from {year:04d}-{month:02d}",
                    field="day",
                    value=day,
                )
            return ordinal_to_ymd(ordinal)

    if year < MIN_YEAR or year > MAX_YEAR:
        raise RangeError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}",
            field="year",
            value=year,
        )
    return (year, month, day)


def normalize_datetime(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    microsecond: int,
) -> tuple[int, int, int, int, int, int, int]:
    """Force all datetime fields into range.

    Carries microsecond -> second -> minute -> hour -> day, then defers
    to normalize_date for the month and year carry.

    Raises:
        RangeError: If the result falls outside years MIN_YEAR..MAX_YEAR.

    Examples:
        >>> normalize_datetime(2021, 1, 1, 0, 0, 0, -1)
        (2020, 12, 31, 23, 59, 59, 999999)
    """
    second, microsecond = normalize_pair(second, microsecond, US_PER_SECOND)
    minute, second = normalize_pair(minute, second, 60)
    hour, minute = normalize_pair(hour, minute, 60)
    day, hour = normalize_pair(day, hour, 24)
    year, month, day = normalize_date(year, month, day)
    return (year, month, day, hour, minute, second, microsecond)


__all__ = [
    "normalize_pair",
    "check_delta_days",
    "normalize_interval",
    "normalize_date",
    "normalize_datetime",
]
