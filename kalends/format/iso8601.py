"""ISO 8601 formatting and parsing.

This module provides functions for converting Date, Time and DateTime
values to and from their ISO 8601 string representations.

Functions:
    parse_iso8601: Parse an ISO 8601 string into a Date, Time or DateTime.
    format_iso8601: Format a Date, Time or DateTime as an ISO 8601 string.

Only the naive extended forms are supported:

Dates:
    - YYYY-MM-DD (exactly 10 characters)

Times:
    - HH, HH:MM, HH:MM:SS
    - HH:MM:SS.fff (milliseconds)
    - HH:MM:SS.ffffff (microseconds)

DateTimes:
    - YYYY-MM-DDTHH:MM:SS[.ffffff]
    - YYYY-MM-DD HH:MM:SS[.ffffff]

Strings with a UTC offset suffix (Z, +HH:MM) are rejected, since none of
the value types carries an offset.

Examples:
    >>> from kalends import DateTime
    >>> from kalends.format import parse_iso8601, format_iso8601

    >>> parse_iso8601("2024-01-15")
    Date(2024, 1, 15)

    >>> format_iso8601(DateTime(2024, 1, 15, 14, 30, 45))
    '2024-01-15T14:30:45'
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Union, overload

from kalends.errors import ParseError

if TYPE_CHECKING:
    from kalends.core.date import Date
    from kalends.core.datetime import DateTime
    from kalends.core.time import Time

# Type alias for calendar values
TemporalType = Union["Date", "Time", "DateTime"]

_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_TIME_PATTERN = re.compile(
    r"(\d{2})(?::(\d{2})(?::(\d{2})(?:\.(\d{3}|\d{6}))?)?)?", re.ASCII
)
_OFFSET_SUFFIX = re.compile(r"([Zz]|[+-]\d{2}(?::?\d{2})?)$", re.ASCII)


def _reject_offset(s: str) -> None:
    match = _OFFSET_SUFFIX.search(s)
    if match and _TIME_PATTERN.fullmatch(s[: match.start()]):
        raise ParseError(f"UTC offsets are not supported: {s!r}")


def _parse_fraction(frac: str | None) -> int:
    if not frac:
        return 0
    # 3 digits are milliseconds
    return int(frac.ljust(6, "0"))


def format_date(value: "Date") -> str:
    """Format a Date as YYYY-MM-DD."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_time(value: "Time") -> str:
    """Format a Time as HH:MM:SS, appending .ffffff when microseconds are non-zero.

    Examples:
        >>> from kalends import Time
        >>> format_time(Time(9, 5, 0, 120))
        '09:05:00.000120'
    """
    text = f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    if value.microsecond:
        text += f".{value.microsecond:06d}"
    return text


def format_datetime(value: "DateTime", sep: str = "T") -> str:
    """Format a DateTime as a date part, the separator and a time part."""
    return f"{format_date(value.date())}{sep}{format_time(value.time())}"


def parse_date(s: str) -> "Date":
    """Parse a YYYY-MM-DD string into a Date.

    Raises:
        ParseError: If the string is not exactly of the form YYYY-MM-DD.
        RangeError: If the date components are invalid.

    Examples:
        >>> parse_date("2024-02-29")
        Date(2024, 2, 29)
    """
    from kalends.core.date import Date

    match = _DATE_PATTERN.fullmatch(s)
    if not match:
        raise ParseError(f"invalid ISO 8601 date: {s!r}, expected YYYY-MM-DD")
    year, month, day = (int(g) for g in match.groups())
    return Date(year, month, day)


def parse_time(s: str) -> "Time":
    """Parse an HH[:MM[:SS[.fff|.ffffff]]] string into a Time.

    Raises:
        ParseError: If the string is malformed or carries a UTC offset.
        RangeError: If the time components are invalid.
    """
    from kalends.core.time import Time

    match = _TIME_PATTERN.fullmatch(s)
    if not match:
        _reject_offset(s)
        raise ParseError(f"invalid ISO 8601 time: {s!r}")
    hour_str, minute_str, second_str, frac_str = match.groups()
    return Time(
        int(hour_str),
        int(minute_str) if minute_str else 0,
        int(second_str) if second_str else 0,
        _parse_fraction(frac_str),
    )


def parse_datetime(s: str) -> "DateTime":
    """Parse a date part, a 'T' or space separator, and a time part.

    Raises:
        ParseError: If the string is malformed or carries a UTC offset.
        RangeError: If any component is invalid.

    Examples:
        >>> parse_datetime("2021-08-31 15:59:55.123")
        DateTime(2021, 8, 31, 15, 59, 55, 123000)
    """
    from kalends.core.datetime import DateTime

    if len(s) < 12 or s[10] not in "T ":
        raise ParseError(
            f"invalid ISO 8601 datetime: {s!r}, expected YYYY-MM-DDTHH:MM:SS[.ffffff]"
        )
    date = parse_date(s[:10])
    time = parse_time(s[11:])
    return DateTime.combine(date, time)


def parse_iso8601(s: str) -> TemporalType:
    """Parse an ISO 8601 string into a Date, Time or DateTime.

    Detection rules:
        - 10 characters with dashes -> Date
        - a 'T' or space after the date part -> DateTime
        - anything else -> Time

    Raises:
        ParseError: If the string matches none of the forms.

    Examples:
        >>> parse_iso8601("14:30:45")
        Time(14, 30, 45, microsecond=0)

        >>> parse_iso8601("2024-01-15T14:30:45")
        DateTime(2024, 1, 15, 14, 30, 45, 0)
    """
    if not s:
        raise ParseError("empty string")
    if len(s) > 10 and s[10] in "T ":
        return parse_datetime(s)
    if "-" in s[:10] and len(s) == 10:
        return parse_date(s)
    return parse_time(s)


@overload
def format_iso8601(value: "Date") -> str: ...


@overload
def format_iso8601(value: "Time") -> str: ...


@overload
def format_iso8601(value: "DateTime", *, sep: str = "T") -> str: ...


def format_iso8601(value: TemporalType, *, sep: str = "T") -> str:
    """Format a Date, Time or DateTime as an ISO 8601 string.

    Args:
        value: The value to format.
        sep: Separator between date and time (DateTime only).

    Raises:
        TypeError: If value is not a Date, Time or DateTime.
    """
    from kalends.core.date import Date
    from kalends.core.datetime import DateTime
    from kalends.core.time import Time

    if isinstance(value, DateTime):
        return format_datetime(value, sep=sep)
    elif isinstance(value, Date):
        return format_date(value)
    elif isinstance(value, Time):
        return format_time(value)
    else:
        raise TypeError(
            f"expected Date, Time, or DateTime, got {type(value).__name__}"
        )


__all__ = [
    "format_date",
    "format_datetime",
    "format_iso8601",
    "format_time",
    "parse_date",
    "parse_datetime",
    "parse_iso8601",
    "parse_time",
]
