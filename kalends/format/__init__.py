"""Formatting and parsing.

This module provides functions for converting Date, Time and DateTime
values to and from string representations:
    - ISO 8601 formatting and parsing
    - strftime-style formatting and parsing, and ctime()

Functions:
    parse_iso8601: Parse ISO 8601 date/time/datetime string.
    format_iso8601: Format a value as an ISO 8601 string.
    strftime: Format a value using a strftime pattern.
    strptime: Parse a string into a DateTime using a strftime pattern.
    ctime: Format a value like C's ctime().

Examples:
    >>> from kalends import DateTime
    >>> from kalends.format import parse_iso8601, format_iso8601

    >>> parse_iso8601("2024-01-15T14:30:45").hour
    14

    >>> format_iso8601(DateTime(2024, 1, 15, 14, 30, 45))
    '2024-01-15T14:30:45'
"""

from __future__ import annotations

from kalends.format.iso8601 import format_iso8601, parse_iso8601
from kalends.format.strftime import ctime, strftime, strptime

__all__: list[str] = [
    # ISO 8601
    "parse_iso8601",
    "format_iso8601",
    # strftime
    "strftime",
    "strptime",
    "ctime",
]
