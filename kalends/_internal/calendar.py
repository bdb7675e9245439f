"""Calendar utilities for Kalends.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths, and conversion between
(year, month, day) and a linear day ordinal where ordinal 1 is
0001-01-01. ISO week numbering is built on top of the ordinal.

All functions are pure. This module is not part of the public API.
"""

from __future__ import annotations

from kalends._internal.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_100_YEARS,
    DAYS_IN_400_YEARS,
    DAYS_IN_4_YEARS,
    DAYS_IN_MONTH,
    MAX_YEAR,
    MIN_YEAR,
)
from kalends.errors import RangeError


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check.

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.
    """
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_before_year(year: int) -> int:
    """Return the number of days before January 1st of year.

    days_before_year(1) == 0. Only meaningful for year >= 1.
    """
    y = year - 1
    return y * 365 + y // 4 - y // 100 + y // 400


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based day of the year (1-366)."""
    return days_before_month(year, month) + day


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal.

    Args:
        year: The year (>= 1).
        month: The month (1-12).
        day: The day of the month.

    Returns:
        The ordinal day number, 1 for 0001-01-01.

    Examples:
        >>> ymd_to_ordinal(1, 1, 1)
        1
        >>> ymd_to_ordinal(1970, 1, 1)
        719163
    """
    return days_before_year(year) + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal to year, month, day.

    The leap-year pattern repeats exactly every 400 years, so the ordinal
    is first split into whole 400-year cycles, then 100-year, 4-year and
    single-year cycles.

    Args:
        ordinal: The ordinal day number (>= 1).

    Returns:
        Tuple of (year, month, day).

    Examples:
        >>> ordinal_to_ymd(1)
        (1, 1, 1)
        >>> ordinal_to_ymd(146097)  # last day of the first 400-year cycle
        (400, 12, 31)
    """
    # n is the 0-based offset from 0001-01-01
    n400, n = divmod(ordinal - 1, DAYS_IN_400_YEARS)
    year = n400 * 400 + 1

    # n100 can be 4: the day is December 31 closing a 400-year cycle
    n100, n = divmod(n, DAYS_IN_100_YEARS)

    n4, n = divmod(n, DAYS_IN_4_YEARS)

    # n1 can be 4: the day is December 31 closing a 4-year cycle
    n1, n = divmod(n, 365)

    year += n100 * 100 + n4 * 4 + n1
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    # Year is now exact and n is the 0-based day of year. The month
    # estimate below is either exact or one too large.
    leap = n1 == 3 and (n4 != 24 or n100 == 3)
    month = (n + 50) >> 5
    preceding = DAYS_BEFORE_MONTH[month] + (1 if month > 2 and leap else 0)
    if preceding > n:
        month -= 1
        preceding -= days_in_month(year, month)
    return (year, month, n - preceding + 1)


def weekday(year: int, month: int, day: int) -> int:
    """Return the day of the week, Monday=0 through Sunday=6.

    0001-01-01 is a Monday.
    """
    return (ymd_to_ordinal(year, month, day) + 6) % 7


def iso_week1_monday(year: int) -> int:
    """Return the ordinal of the Monday that starts ISO week 1 of year.

    Week 1 is the first calendar week containing a Thursday.
    """
    first_day = ymd_to_ordinal(year, 1, 1)
    first_weekday = (first_day + 6) % 7
    week1_monday = first_day - first_weekday
    if first_weekday > 3:  # 1/1 was Fri, Sat or Sun
        week1_monday += 7
    return week1_monday


def has_iso_week_53(year: int) -> bool:
    """Return True if the ISO year has 53 weeks.

    That is the case for years starting on a Thursday and for leap
    years starting on a Wednesday.
    """
    first_weekday = weekday(year, 1, 1)
    return first_weekday == 3 or (first_weekday == 2 and is_leap_year(year))


def iso_calendar(year: int, month: int, day: int) -> tuple[int, int, int]:
    """Return the ISO (year, week, weekday) for a date, all 1-based.

    Examples:
        >>> iso_calendar(2021, 1, 1)  # Friday, belongs to 2020-W53
        (2020, 53, 5)
        >>> iso_calendar(2024, 12, 30)  # Monday, belongs to 2025-W01
        (2025, 1, 1)
    """
    iso_year = year
    week1_monday = iso_week1_monday(iso_year)
    today = ymd_to_ordinal(year, month, day)

    week, day_offset = divmod(today - week1_monday, 7)
    if week < 0:
        iso_year -= 1
        week1_monday = iso_week1_monday(iso_year)
        week, day_offset = divmod(today - week1_monday, 7)
    elif week >= 52 and today >= iso_week1_monday(iso_year + 1):
        iso_year += 1
        week = 0

    return (iso_year, week + 1, day_offset + 1)


def iso_to_ordinal(year: int, week: int, iso_weekday: int) -> int:
    """Convert an ISO (year, week, weekday) triple to an ordinal.

    The calendar year of the resulting ordinal may differ from the ISO
    year near year boundaries.

    Raises:
        RangeError: If year, week or weekday is out of range.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise RangeError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}",
            field="year",
            value=year,
        )
    if week < 1 or week > 53 or (week == 53 and not has_iso_week_53(year)):
        raise RangeError(
            f"week out of range for ISO year {year}, got {week}",
            field="week",
            value=week,
        )
    if iso_weekday < 1 or iso_weekday > 7:
        raise RangeError(
            f"weekday must be between 1 and 7, got {iso_weekday}",
            field="weekday",
            value=iso_weekday,
        )
    return iso_week1_monday(year) + (week - 1) * 7 + (iso_weekday - 1)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_year",
    "days_before_month",
    "day_of_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "weekday",
    "iso_week1_monday",
    "has_iso_week_53",
    "iso_calendar",
    "iso_to_ordinal",
]
