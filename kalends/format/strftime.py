"""strftime-style formatting and parsing.

This module provides strftime-style formatting for Date, Time and
DateTime values. Names are always English; there is no locale support.

Supported Directives (formatting):
    %a, %A - Abbreviated / full weekday name (Mon, Monday)
    %w - Weekday as a number, Sunday=0 (0-6)
    %d - 2-digit day (01-31)
    %b, %B - Abbreviated / full month name (Jan, January)
    %m - 2-digit month (01-12)
    %y, %Y - 2-digit / 4-digit year
    %H - 2-digit hour, 24-hour (00-23)
    %I - 2-digit hour, 12-hour (01-12)
    %p - AM or PM
    %M - 2-digit minute (00-59)
    %S - 2-digit second (00-59)
    %f - Microseconds (000000-999999)
    %z, %Z - Always empty; values carry no UTC offset
    %j - 3-digit day of the year (001-366)
    %U - Week of the year, Sunday as first day (00-53)
    %W - Week of the year, Monday as first day (00-53)
    %c - ctime()-style date and time
    %x - MM/DD/YY
    %X - HH:MM:SS
    %% - Literal %

A Date formats as if its time were midnight. A Time formats as if its
date were 1900-01-01.

Functions:
    strftime: Format a value using a strftime-style format string.
    strptime: Parse a string into a DateTime using a format string.
    ctime: Format a value like C's ctime(), without the trailing newline.

Examples:
    >>> from kalends import DateTime
    >>> dt = DateTime(2021, 8, 31, 15, 59, 55)
    >>> strftime(dt, "%a %d %b %Y %I:%M %p")
    'Tue 31 Aug 2021 03:59 PM'

    >>> strptime("2021-08-31 15:59:55", "%Y-%m-%d %H:%M:%S")
    DateTime(2021, 8, 31, 15, 59, 55, 0)
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Union

from kalends._internal.calendar import day_of_year, weekday
from kalends.errors import ParseError

if TYPE_CHECKING:
    from kalends.core.date import Date
    from kalends.core.datetime import DateTime
    from kalends.core.time import Time

# Type alias for calendar values
TemporalType = Union["Date", "Time", "DateTime"]

# Indexed by weekday(), Monday=0
DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
DAY_FULL_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Indexed by month - 1
MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
MONTH_FULL_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Mapping of format directives to their patterns for parsing
_PARSE_PATTERNS: dict[str, str] = {
    "%Y": r"(?P<year>\d{4})",  # 4-digit year
    "%m": r"(?P<month>\d{2})",  # 2-digit month
    "%d": r"(?P<day>\d{2})",  # 2-digit day
    "%H": r"(?P<hour>\d{2})",  # 2-digit hour
    "%M": r"(?P<minute>\d{2})",  # 2-digit minute
    "%S": r"(?P<second>\d{2})",  # 2-digit second
    "%f": r"(?P<microsecond>\d{6})",  # 6-digit microsecond
    "%%": r"%",  # Literal %
}


def _fields(value: TemporalType) -> tuple[int, int, int, int, int, int, int]:
    """Return (year, month, day, hour, minute, second, microsecond) for any value."""
    from kalends.core.date import Date
    from kalends.core.datetime import DateTime
    from kalends.core.time import Time

    if isinstance(value, DateTime):
        return (
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
        )
    elif isinstance(value, Date):
        return (value.year, value.month, value.day, 0, 0, 0, 0)
    elif isinstance(value, Time):
        return (1900, 1, 1, value.hour, value.minute, value.second, value.microsecond)
    else:
        raise TypeError(
            f"expected Date, Time, or DateTime, got {type(value).__name__}"
        )


def _format_ctime(year: int, month: int, day: int, hour: int, minute: int, second: int) -> str:
    wday = weekday(year, month, day)
    return (
        f"{DAY_NAMES[wday]} {MONTH_NAMES[month - 1]} {day:2d} "
        f"{hour:02d}:{minute:02d}:{second:02d} {year:04d}"
    )


def _week_of_year(year: int, month: int, day: int, first_weekday: int) -> int:
    """Return the week number where weeks start on first_weekday (Monday=0).

    Days before the first such weekday of the year are in week 0.
    """
    yday = day_of_year(year, month, day) - 1
    offset = (weekday(year, month, day) - first_weekday) % 7
    return (yday + 7 - offset) // 7


def _format_directive(
    directive: str,
    fields: tuple[int, int, int, int, int, int, int],
    fmt: str,
) -> str:
    """Format a single directive character.

    Raises:
        ParseError: If the directive is not supported.
    """
    year, month, day, hour, minute, second, microsecond = fields

    if directive == "a":
        return DAY_NAMES[weekday(year, month, day)]
    elif directive == "A":
        return DAY_FULL_NAMES[weekday(year, month, day)]
    elif directive == "w":
        return str((weekday(year, month, day) + 1) % 7)
    elif directive == "d":
        return f"{day:02d}"
    elif directive == "b":
        return MONTH_NAMES[month - 1]
    elif directive == "B":
        return MONTH_FULL_NAMES[month - 1]
    elif directive == "m":
        return f"{month:02d}"
    elif directive == "y":
        return f"{year % 100:02d}"
    elif directive == "Y":
        return f"{year:04d}"
    elif directive == "H":
        return f"{hour:02d}"
    elif directive == "I":
        return f"{hour % 12 or 12:02d}"
    elif directive == "p":
        return "AM" if hour < 12 else "PM"
    elif directive == "M":
        return f"{minute:02d}"
    elif directive == "S":
        return f"{second:02d}"
    elif directive == "f":
        return f"{microsecond:06d}"
    elif directive in ("z", "Z"):
        return ""
    elif directive == "j":
        return f"{day_of_year(year, month, day):03d}"
    elif directive == "U":
        return f"{_week_of_year(year, month, day, 6):02d}"
    elif directive == "W":
        return f"{_week_of_year(year, month, day, 0):02d}"
    elif directive == "c":
        return _format_ctime(year, month, day, hour, minute, second)
    elif directive == "x":
        return f"{month:02d}/{day:02d}/{year % 100:02d}"
    elif directive == "X":
        return f"{hour:02d}:{minute:02d}:{second:02d}"
    elif directive == "%":
        return "%"
    else:
        raise ParseError(f"unsupported strftime directive %{directive} in {fmt!r}")


def strftime(value: TemporalType, fmt: str) -> str:
    """Format a Date, Time or DateTime using a strftime-style format string.

    Args:
        value: The value to format.
        fmt: Format string with %-directives.

    Returns:
        Formatted string.

    Raises:
        ParseError: If the format has an unsupported directive or ends
            with a lone '%'.
        TypeError: If value is not a Date, Time or DateTime.

    Examples:
        >>> from kalends import Date, Time
        >>> strftime(Date(2021, 1, 1), "%A %j %H:%M")
        'Friday 001 00:00'

        >>> strftime(Time(0, 5), "%Y-%m-%d %I:%M %p")
        '1900-01-01 12:05 AM'
    """
    fields = _fields(value)

    result = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%":
            if i + 1 >= len(fmt):
                raise ParseError(f"format string ends with a lone '%': {fmt!r}")
            result.append(_format_directive(fmt[i + 1], fields, fmt))
            i += 2
        else:
            result.append(fmt[i])
            i += 1

    return "".join(result)


def ctime(value: TemporalType) -> str:
    """Return a ctime()-style string such as 'Fri Jan  1 00:00:00 2021'.

    The day of the month is padded with a space, not a zero.
    """
    year, month, day, hour, minute, second, _ = _fields(value)
    return _format_ctime(year, month, day, hour, minute, second)


def _format_to_regex(fmt: str) -> str:
    """Convert a strptime format string to a regex pattern.

    Raises:
        ParseError: If format contains unsupported directives.
    """
    result = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%":
            directive = fmt[i : i + 2]
            if directive not in _PARSE_PATTERNS:
                raise ParseError(
                    f"unsupported strptime directive: {directive!r}. "
                    f"Supported: %Y, %m, %d, %H, %M, %S, %f, %%"
                )
            result.append(_PARSE_PATTERNS[directive])
            i += 2
        else:
            # Escape regex special characters
            result.append(re.escape(fmt[i]))
            i += 1

    return "".join(result)


def strptime(s: str, fmt: str) -> "DateTime":
    """Parse a string using a strftime-style format string.

    The whole string must match the whole format.

    Args:
        s: The string to parse.
        fmt: Format string with %-directives.

    Returns:
        A DateTime parsed from the string. Missing time components
        default to 0.

    Raises:
        ParseError: If the string doesn't match the format, the format
            has an unsupported directive, or year, month or day is missing.
        RangeError: If a parsed component is out of range.

    Examples:
        >>> strptime("2024-01-15", "%Y-%m-%d")
        DateTime(2024, 1, 15, 0, 0, 0, 0)

        >>> strptime("14:30:45", "%H:%M:%S")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ParseError: strptime requires year, month, and day...
    """
    from kalends.core.datetime import DateTime

    pattern = _format_to_regex(fmt)

    try:
        match = re.fullmatch(pattern, s, re.ASCII)
    except re.error as e:
        # A directive used twice gives a duplicate group name
        raise ParseError(f"invalid strptime format {fmt!r}: {e}") from e
    if not match:
        raise ParseError(f"string {s!r} does not match format {fmt!r}")

    groups = match.groupdict()

    if groups.get("year") is None or groups.get("month") is None or groups.get("day") is None:
        raise ParseError(
            "strptime requires year, month, and day components. "
            f"Got: year={groups.get('year')}, month={groups.get('month')}, "
            f"day={groups.get('day')}"
        )

    return DateTime(
        int(groups["year"]),
        int(groups["month"]),
        int(groups["day"]),
        int(groups.get("hour") or 0),
        int(groups.get("minute") or 0),
        int(groups.get("second") or 0),
        int(groups.get("microsecond") or 0),
    )


__all__ = [
    "DAY_FULL_NAMES",
    "DAY_NAMES",
    "MONTH_FULL_NAMES",
    "MONTH_NAMES",
    "ctime",
    "strftime",
    "strptime",
]
