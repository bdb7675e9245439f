"""Kalends: calendar and clock value types.

Kalends provides naive date and time values with microsecond resolution
in the proleptic Gregorian calendar, years 1 through 9999.

Core Types:
    Date: Calendar date (year, month, day)
    Time: Time of day (hour, minute, second, microsecond)
    DateTime: Combined date and time, read as local time for timestamps
    Interval: Signed span of days, seconds and microseconds
    IsoCalendarDate: ISO 8601 (year, week, weekday) triple

Format Functions:
    parse_iso8601: Parse ISO 8601 date/time/datetime string
    format_iso8601: Format a value as an ISO 8601 string

Exceptions:
    KalendsError: Base exception
    RangeError: Value outside its declared range
    DomainError: Division or modulo by zero
    ParseError: Failed to parse string or format

Example:
    >>> from kalends import DateTime, Interval
    >>> DateTime(2021, 1, 1) - Interval(microseconds=1)
    DateTime(2020, 12, 31, 23, 59, 59, 999999)
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from kalends.core.date import Date, IsoCalendarDate
from kalends.core.datetime import DateTime
from kalends.core.interval import Interval
from kalends.core.time import Time

# Exceptions
from kalends.errors import (
    DomainError,
    KalendsError,
    ParseError,
    RangeError,
)

# Format functions
from kalends.format import format_iso8601, parse_iso8601

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "DateTime",
    "Interval",
    "IsoCalendarDate",
    "Time",
    # Exceptions
    "KalendsError",
    "RangeError",
    "DomainError",
    "ParseError",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
]
