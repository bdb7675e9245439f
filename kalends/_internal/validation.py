"""Validation utilities for Kalends.

Range checks for constructor arguments. Each check raises RangeError
carrying the offending field name and value, or TypeError when the
argument is not an int.

This module is not part of the public API.
"""

from __future__ import annotations

from kalends._internal.calendar import days_in_month
from kalends._internal.constants import MAX_YEAR, MIN_YEAR
from kalends.errors import RangeError


def check_int(name: str, value: object) -> None:
    """Raise TypeError unless value is an int (bool is rejected).

    Examples:
        >>> check_int("day", 1.5)
        Traceback (most recent call last):
        ...
        TypeError: day must be an int, got float
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def _check_field(name: str, value: int, low: int, high: int) -> None:
    check_int(name, value)
    if value < low or value > high:
        raise RangeError(
            f"{name} must be between {low} and {high}, got {value}",
            field=name,
            value=value,
        )


def validate_year(year: int) -> None:
    """Validate that a year is within MIN_YEAR to MAX_YEAR.

    Raises:
        RangeError: If year is out of range.
    """
    _check_field("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        RangeError: If month is out of range.
    """
    _check_field("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        RangeError: If day is invalid for the month.
    """
    check_int("day", day)
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise RangeError(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}",
            field="day",
            value=day,
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate year, month and day together, in that order."""
    validate_year(year)
    validate_month(month)
    validate_day(year, month, day)


def validate_time(hour: int, minute: int, second: int, microsecond: int) -> None:
    """Validate the four time-of-day fields, in order.

    Raises:
        RangeError: If any field is out of range.
    """
    _check_field("hour", hour, 0, 23)
    _check_field("minute", minute, 0, 59)
    _check_field("second", second, 0, 59)
    _check_field("microsecond", microsecond, 0, 999_999)


__all__ = [
    "check_int",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_date",
    "validate_time",
]
