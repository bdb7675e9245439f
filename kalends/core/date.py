"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
in the proleptic Gregorian calendar, years 1 through 9999.
"""

from __future__ import annotations

from typing import NamedTuple, overload

from kalends._internal.calendar import (
    day_of_year,
    is_leap_year,
    iso_calendar,
    iso_to_ordinal,
    ordinal_to_ymd,
    weekday,
    ymd_to_ordinal,
)
from kalends._internal.constants import MAX_ORDINAL, MAX_YEAR, MIN_YEAR
from kalends._internal.normalize import normalize_date
from kalends._internal.validation import validate_date
from kalends.core.interval import Interval
from kalends.errors import RangeError


class IsoCalendarDate(NamedTuple):
    """An ISO 8601 week date: (ISO year, week 1-53, weekday 1-7)."""

    year: int
    week: int
    weekday: int


def _check_ordinal(ordinal: int) -> None:
    if ordinal < 1 or ordinal > MAX_ORDINAL:
        raise RangeError(
            f"ordinal must be between 1 and {MAX_ORDINAL}, got {ordinal}",
            field="ordinal",
            value=ordinal,
        )


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    The Gregorian rules are extended backward to year 1 without
    interruption. Dates order chronologically, which is the same as
    ordering their (year, month, day) tuples.

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> Date(2021, 2, 28) + Interval(1)
        Date(2021, 3, 1)

        >>> Date(2021, 1, 1) - Date(2020, 1, 1)
        Interval(days=366, seconds=0, microseconds=0)
    """

    __slots__ = ("_year", "_month", "_day")

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Raises:
            RangeError: If any component is out of range.

        Examples:
            >>> Date(2021, 2, 29)  # 2021 is not a leap year
            Traceback (most recent call last):
            ...
            kalends.errors.RangeError: day must be between 1 and 28 for 2021-02, got 29
        """
        validate_date(year, month, day)
        self._year: int = year
        self._month: int = month
        self._day: int = day

    @classmethod
    def _from_fields(cls, year: int, month: int, day: int) -> Date:
        """Create a Date without validation.

        Only for fields that are already known to be valid, e.g. the
        output of normalize_date or ordinal_to_ymd.
        """
        instance = object.__new__(cls)
        instance._year = year
        instance._month = month
        instance._day = day
        return instance

    @classmethod
    def today(cls) -> Date:
        """Return the current local date."""
        from kalends.convert.epoch import now_microseconds

        return cls.from_timestamp(now_microseconds() // 1_000_000)

    @classmethod
    def from_timestamp(cls, seconds: int) -> Date:
        """Return the local date for a Unix timestamp in seconds.

        Raises:
            RangeError: If the platform cannot convert the timestamp.
        """
        from kalends.convert.epoch import local_fields

        year, month, day, _, _, _ = local_fields(seconds)
        return cls(year, month, day)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Date:
        """Create a Date from an ordinal day number (1 = 0001-01-01).

        Raises:
            RangeError: If the ordinal is outside 1..MAX_ORDINAL.

        Examples:
            >>> Date.from_ordinal(1)
            Date(1, 1, 1)
            >>> Date.from_ordinal(719163)
            Date(1970, 1, 1)
        """
        _check_ordinal(ordinal)
        return cls._from_fields(*ordinal_to_ymd(ordinal))

    @classmethod
    def from_iso_calendar(cls, year: int, week: int, weekday: int) -> Date:
        """Create a Date from an ISO year, week number and weekday.

        The calendar year of the result may differ from the ISO year
        near year boundaries.

        Raises:
            RangeError: If year, week or weekday is invalid, or the
                resulting date is out of range.

        Examples:
            >>> Date.from_iso_calendar(2020, 53, 5)
            Date(2021, 1, 1)
        """
        ordinal = iso_to_ordinal(year, week, weekday)
        _check_ordinal(ordinal)
        return cls._from_fields(*ordinal_to_ymd(ordinal))

    @classmethod
    def from_iso_format(cls, s: str) -> Date:
        """Parse a date from the canonical YYYY-MM-DD form.

        Raises:
            ParseError: If the string is not exactly YYYY-MM-DD.
            RangeError: If the date components are invalid.
        """
        from kalends.format.iso8601 import parse_date

        return parse_date(s)

    @classmethod
    def min(cls) -> Date:
        """Return the earliest representable date, 0001-01-01."""
        return cls._from_fields(MIN_YEAR, 1, 1)

    @classmethod
    def max(cls) -> Date:
        """Return the latest representable date, 9999-12-31."""
        return cls._from_fields(MAX_YEAR, 12, 31)

    @classmethod
    def resolution(cls) -> Interval:
        """Return the smallest difference between two dates."""
        return Interval(1)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @property
    def weekday(self) -> int:
        """Return the day of the week, Monday=0 through Sunday=6.

        Examples:
            >>> Date(2024, 1, 15).weekday  # Monday
            0
        """
        return weekday(self._year, self._month, self._day)

    @property
    def iso_weekday(self) -> int:
        """Return the ISO day of the week, Monday=1 through Sunday=7."""
        return self.weekday + 1

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366)."""
        return day_of_year(self._year, self._month, self._day)

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self._year)

    def to_ordinal(self) -> int:
        """Return the ordinal day number for this date.

        Examples:
            >>> Date(1, 1, 1).to_ordinal()
            1
        """
        return ymd_to_ordinal(self._year, self._month, self._day)

    def iso_calendar(self) -> IsoCalendarDate:
        """Return the ISO (year, week, weekday) for this date.

        Examples:
            >>> Date(2021, 1, 1).iso_calendar()
            IsoCalendarDate(year=2020, week=53, weekday=5)
        """
        return IsoCalendarDate(*iso_calendar(self._year, self._month, self._day))

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Date:
        """Return a new Date with specified components replaced.

        Raises:
            RangeError: If the resulting date is invalid.

        Examples:
            >>> Date(2024, 1, 15).replace(month=6)
            Date(2024, 6, 15)
        """
        return Date(
            year if year is not None else self._year,
            month if month is not None else self._month,
            day if day is not None else self._day,
        )

    def to_iso_format(self) -> str:
        """Return the date as YYYY-MM-DD.

        Examples:
            >>> Date(2024, 1, 15).to_iso_format()
            '2024-01-15'
        """
        from kalends.format.iso8601 import format_date

        return format_date(self)

    def strftime(self, fmt: str) -> str:
        """Format this date; time directives render as midnight."""
        from kalends.format.strftime import strftime

        return strftime(self, fmt)

    def ctime(self) -> str:
        """Return a ctime()-style string, e.g. 'Fri Jan  1 00:00:00 2021'."""
        from kalends.format.strftime import ctime

        return ctime(self)

    def _add_days(self, days: int) -> Date:
        year, month, day = normalize_date(self._year, self._month, self._day + days)
        return Date._from_fields(year, month, day)

    def __add__(self, other: object) -> Date:
        """Add an Interval to this date.

        Only the interval's day component is applied.

        Raises:
            RangeError: If the result is out of range.
        """
        if not isinstance(other, Interval):
            return NotImplemented
        return self._add_days(other.days)

    __radd__ = __add__

    @overload
    def __sub__(self, other: Interval) -> Date: ...

    @overload
    def __sub__(self, other: Date) -> Interval: ...

    def __sub__(self, other: object) -> Date | Interval:
        """Subtract an Interval or a Date from this date.

        Subtracting a Date returns the difference in days as an Interval.

        Examples:
            >>> Date(2024, 1, 25) - Interval(10)
            Date(2024, 1, 15)
        """
        if isinstance(other, Interval):
            return self._add_days(-other.days)
        if isinstance(other, Date):
            return Interval._from_fields(self.to_ordinal() - other.to_ordinal(), 0, 0)
        return NotImplemented

    def _key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Date({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """Dates are always truthy."""
        return True


__all__ = ["Date", "IsoCalendarDate"]
