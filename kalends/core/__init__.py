"""Core value types.

This module provides the fundamental calendar and clock types:
    - Date: Calendar date in the proleptic Gregorian calendar
    - Time: Time of day with microsecond resolution
    - DateTime: Combined date and time without timezone
    - Interval: Signed span of time with microsecond resolution
"""

from __future__ import annotations

from kalends.core.date import Date, IsoCalendarDate
from kalends.core.datetime import DateTime
from kalends.core.interval import Interval
from kalends.core.time import Time

__all__: list[str] = [
    "Date",
    "DateTime",
    "Interval",
    "IsoCalendarDate",
    "Time",
]
