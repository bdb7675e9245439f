"""DateTime class combining a calendar date and a time of day.

This module provides the DateTime class: a naive timestamp with
microsecond resolution, interpreted in the local time of the host when
converted to or from epoch timestamps.
"""

from __future__ import annotations

from typing import overload

from kalends._internal.calendar import (
    iso_to_ordinal,
    ordinal_to_ymd,
    weekday,
    ymd_to_ordinal,
)
from kalends._internal.constants import (
    EPOCH_SECONDS,
    MAX_ORDINAL,
    MAX_YEAR,
    MIN_YEAR,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    US_PER_SECOND,
)
from kalends._internal.normalize import normalize_datetime
from kalends._internal.validation import validate_date, validate_time
from kalends.core.date import Date, IsoCalendarDate
from kalends.core.interval import Interval
from kalends.core.time import Time
from kalends.errors import RangeError


class DateTime:
    """A date and time of day without timezone.

    DateTime holds the union of Date's and Time's fields. Arithmetic with
    an Interval carries overflow across the day boundary into month and
    year. Ordering is chronological, which is the same as ordering the
    (year, month, day, hour, minute, second, microsecond) tuple.

    Attributes:
        year, month, day: Date components.
        hour, minute, second, microsecond: Time components.

    Examples:
        >>> dt = DateTime(2024, 1, 15, 14, 30, 45)
        >>> dt.date(), dt.time()
        (Date(2024, 1, 15), Time(14, 30, 45, microsecond=0))

        >>> DateTime(2021, 1, 1) - Interval(0, 0, 1)
        DateTime(2020, 12, 31, 23, 59, 59, 999999)
    """

    __slots__ = (
        "_year",
        "_month",
        "_day",
        "_hour",
        "_minute",
        "_second",
        "_us",
    )

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> None:
        """Create a DateTime from component parts.

        Raises:
            RangeError: If any component is out of range.
        """
        validate_date(year, month, day)
        validate_time(hour, minute, second, microsecond)
        self._year: int = year
        self._month: int = month
        self._day: int = day
        self._hour: int = hour
        self._minute: int = minute
        self._second: int = second
        self._us: int = microsecond

    @classmethod
    def _from_fields(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        microsecond: int,
    ) -> DateTime:
        """Create a DateTime from normalized fields, skipping validation."""
        instance = object.__new__(cls)
        instance._year = year
        instance._month = month
        instance._day = day
        instance._hour = hour
        instance._minute = minute
        instance._second = second
        instance._us = microsecond
        return instance

    # Factory methods

    @classmethod
    def now(cls) -> DateTime:
        """Return the current local date and time."""
        from kalends.convert.epoch import now_microseconds

        return cls.from_timestamp(now_microseconds())

    @classmethod
    def from_timestamp(cls, microseconds: int) -> DateTime:
        """Return the local DateTime for a Unix timestamp in microseconds.

        Args:
            microseconds: Microseconds since 1970-01-01 00:00:00 UTC.

        Raises:
            RangeError: If the platform cannot convert the timestamp.
        """
        from kalends.convert.epoch import local_fields

        seconds, us = divmod(microseconds, US_PER_SECOND)
        year, month, day, hour, minute, second = local_fields(seconds)
        return cls(year, month, day, hour, minute, second, us)

    @classmethod
    def from_ordinal(cls, ordinal: int) -> DateTime:
        """Return midnight of the date with the given ordinal.

        Examples:
            >>> DateTime.from_ordinal(719163)
            DateTime(1970, 1, 1, 0, 0, 0, 0)
        """
        d = Date.from_ordinal(ordinal)
        return cls._from_fields(d.year, d.month, d.day, 0, 0, 0, 0)

    @classmethod
    def from_iso_calendar(cls, year: int, week: int, weekday: int) -> DateTime:
        """Return midnight of the given ISO week date."""
        ordinal = iso_to_ordinal(year, week, weekday)
        if ordinal < 1 or ordinal > MAX_ORDINAL:
            raise RangeError(
                f"ISO week date {year}-W{week:02d}-{weekday} is out of range",
                field="year",
                value=year,
            )
        return cls._from_fields(*ordinal_to_ymd(ordinal), 0, 0, 0, 0)

    @classmethod
    def combine(cls, date: Date, time: Time) -> DateTime:
        """Combine a Date and a Time into a DateTime.

        Examples:
            >>> DateTime.combine(Date(2024, 1, 15), Time(14, 30))
            DateTime(2024, 1, 15, 14, 30, 0, 0)
        """
        return cls._from_fields(
            date.year,
            date.month,
            date.day,
            time.hour,
            time.minute,
            time.second,
            time.microsecond,
        )

    @classmethod
    def strptime(cls, s: str, fmt: str) -> DateTime:
        """Parse a string using a strftime-style format.

        Examples:
            >>> DateTime.strptime("2021/08/31 15:59:55.123456", "%Y/%m/%d %H:%M:%S.%f")
            DateTime(2021, 8, 31, 15, 59, 55, 123456)
        """
        from kalends.format.strftime import strptime

        return strptime(s, fmt)

    @classmethod
    def from_iso_format(cls, s: str) -> DateTime:
        """Parse YYYY-MM-DDTHH:MM:SS[.ffffff] (a space may replace the T).

        Raises:
            ParseError: If the string is malformed.
            RangeError: If a component is out of range.
        """
        from kalends.format.iso8601 import parse_datetime

        return parse_datetime(s)

    @classmethod
    def min(cls) -> DateTime:
        return cls._from_fields(MIN_YEAR, 1, 1, 0, 0, 0, 0)

    @classmethod
    def max(cls) -> DateTime:
        return cls._from_fields(MAX_YEAR, 12, 31, 23, 59, 59, 999_999)

    @classmethod
    def resolution(cls) -> Interval:
        return Interval(0, 0, 1)

    # Properties

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
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def microsecond(self) -> int:
        return self._us

    @property
    def weekday(self) -> int:
        """Return the day of the week, Monday=0 through Sunday=6."""
        return weekday(self._year, self._month, self._day)

    @property
    def iso_weekday(self) -> int:
        """Return the ISO day of the week, Monday=1 through Sunday=7."""
        return self.weekday + 1

    # Extract Date and Time

    def date(self) -> Date:
        """Return the date portion."""
        return Date._from_fields(self._year, self._month, self._day)

    def time(self) -> Time:
        """Return the time-of-day portion."""
        return Time._from_fields(self._hour, self._minute, self._second, self._us)

    def to_ordinal(self) -> int:
        """Return the ordinal of the date portion."""
        return ymd_to_ordinal(self._year, self._month, self._day)

    def iso_calendar(self) -> IsoCalendarDate:
        """Return the ISO (year, week, weekday) of the date portion."""
        return self.date().iso_calendar()

    def timestamp(self, *, fold: int = 0) -> int:
        """Return the Unix timestamp in microseconds, reading self as local time.

        When the local time occurs twice (a backward clock transition),
        the earlier instant is returned unless fold=1.

        Raises:
            RangeError: If the platform cannot convert the time.
        """
        from kalends.convert.epoch import local_to_seconds

        seconds = local_to_seconds(
            self._year,
            self._month,
            self._day,
            self._hour,
            self._minute,
            self._second,
            fold,
        )
        return (seconds - EPOCH_SECONDS) * US_PER_SECOND + self._us

    # Replacement

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        microsecond: int | None = None,
    ) -> DateTime:
        """Return a new DateTime with specified components replaced.

        Raises:
            RangeError: If any component is out of range.

        Examples:
            >>> DateTime(2024, 1, 15, 14, 30, 45).replace(hour=10)
            DateTime(2024, 1, 15, 10, 30, 45, 0)
        """
        return DateTime(
            year if year is not None else self._year,
            month if month is not None else self._month,
            day if day is not None else self._day,
            hour if hour is not None else self._hour,
            minute if minute is not None else self._minute,
            second if second is not None else self._second,
            microsecond if microsecond is not None else self._us,
        )

    # String forms

    def to_iso_format(self, sep: str = "T") -> str:
        """Return YYYY-MM-DDTHH:MM:SS, with .ffffff when non-zero.

        Examples:
            >>> DateTime(2024, 1, 15, 14, 30, 45).to_iso_format()
            '2024-01-15T14:30:45'
            >>> DateTime(2024, 1, 15, 14, 30, 45, 12).to_iso_format(sep=" ")
            '2024-01-15 14:30:45.000012'
        """
        from kalends.format.iso8601 import format_datetime

        return format_datetime(self, sep=sep)

    def strftime(self, fmt: str) -> str:
        from kalends.format.strftime import strftime

        return strftime(self, fmt)

    def ctime(self) -> str:
        from kalends.format.strftime import ctime

        return ctime(self)

    # Arithmetic operators

    def _shift(self, days: int, seconds: int, microseconds: int) -> DateTime:
        fields = normalize_datetime(
            self._year,
            self._month,
            self._day + days,
            self._hour,
            self._minute,
            self._second + seconds,
            self._us + microseconds,
        )
        return DateTime._from_fields(*fields)

    def __add__(self, other: object) -> DateTime:
        """Add an Interval to this datetime.

        Raises:
            RangeError: If the result is outside years 1-9999.

        Examples:
            >>> DateTime(2024, 1, 15, 12, 0, 0) + Interval(days=1, hours=2)
            DateTime(2024, 1, 16, 14, 0, 0, 0)
        """
        if not isinstance(other, Interval):
            return NotImplemented
        return self._shift(other.days, other.seconds, other.microseconds)

    __radd__ = __add__

    @overload
    def __sub__(self, other: Interval) -> DateTime: ...

    @overload
    def __sub__(self, other: DateTime) -> Interval: ...

    def __sub__(self, other: object) -> DateTime | Interval:
        """Subtract an Interval or a DateTime from this datetime.

        Examples:
            >>> DateTime(2024, 1, 15, 14, 0) - DateTime(2024, 1, 15, 12, 0)
            Interval(days=0, seconds=7200, microseconds=0)
        """
        if isinstance(other, Interval):
            return self._shift(-other.days, -other.seconds, -other.microseconds)
        if isinstance(other, DateTime):
            delta_days = self.to_ordinal() - other.to_ordinal()
            delta_seconds = (
                (self._hour - other._hour) * SECONDS_PER_HOUR
                + (self._minute - other._minute) * SECONDS_PER_MINUTE
                + (self._second - other._second)
            )
            delta_us = self._us - other._us
            return Interval(delta_days, delta_seconds, delta_us)
        return NotImplemented

    # Comparison operators

    def _key(self) -> tuple[int, int, int, int, int, int, int]:
        return (
            self._year,
            self._month,
            self._day,
            self._hour,
            self._minute,
            self._second,
            self._us,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"DateTime({self._year}, {self._month}, {self._day}, {self._hour}, "
            f"{self._minute}, {self._second}, {self._us})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """DateTimes are always truthy."""
        return True


__all__ = ["DateTime"]
