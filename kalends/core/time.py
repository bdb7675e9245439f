"""Time class representing a time of day.

This module provides the Time class for representing time-of-day values
with microsecond resolution. A Time has no date and no timezone.
"""

from __future__ import annotations

from kalends._internal.validation import validate_time
from kalends.core.interval import Interval


class Time:
    """A time of day with microsecond resolution.

    Time covers midnight (00:00:00) through 23:59:59.999999. It supports
    comparison but no arithmetic.

    Attributes:
        hour: The hour component (0-23).
        minute: The minute component (0-59).
        second: The second component (0-59).
        microsecond: The microsecond component (0-999999).

    Examples:
        >>> t = Time(14, 30, 45)
        >>> t.hour, t.minute, t.second
        (14, 30, 45)

        >>> bool(Time(0, 0))  # midnight is falsy
        False
    """

    __slots__ = ("_hour", "_minute", "_second", "_us")

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> None:
        """Create a Time from component parts.

        Raises:
            RangeError: If any component is out of range.
        """
        validate_time(hour, minute, second, microsecond)
        self._hour: int = hour
        self._minute: int = minute
        self._second: int = second
        self._us: int = microsecond

    @classmethod
    def _from_fields(cls, hour: int, minute: int, second: int, microsecond: int) -> Time:
        """Create a Time from fields known to be valid, skipping validation."""
        instance = object.__new__(cls)
        instance._hour = hour
        instance._minute = minute
        instance._second = second
        instance._us = microsecond
        return instance

    @classmethod
    def now(cls) -> Time:
        """Return the current local time of day."""
        from kalends.core.datetime import DateTime

        return DateTime.now().time()

    @classmethod
    def midnight(cls) -> Time:
        """Return a Time representing midnight (00:00:00)."""
        return cls._from_fields(0, 0, 0, 0)

    @classmethod
    def min(cls) -> Time:
        return cls._from_fields(0, 0, 0, 0)

    @classmethod
    def max(cls) -> Time:
        return cls._from_fields(23, 59, 59, 999_999)

    @classmethod
    def resolution(cls) -> Interval:
        return Interval(0, 0, 1)

    @classmethod
    def from_iso_format(cls, s: str) -> Time:
        """Parse a time from ISO 8601 format.

        Supports HH, HH:MM, HH:MM:SS, HH:MM:SS.fff and HH:MM:SS.ffffff.

        Raises:
            ParseError: If the string is not one of the accepted forms.
            RangeError: If the time components are invalid.

        Examples:
            >>> Time.from_iso_format("14:30:45.123")
            Time(14, 30, 45, microsecond=123000)
        """
        from kalends.format.iso8601 import parse_time

        return parse_time(s)

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

    def replace(
        self,
        hour: int | None = None,
        minute: int | None = None,
        second: int | None = None,
        microsecond: int | None = None,
    ) -> Time:
        """Return a new Time with specified components replaced.

        Raises:
            RangeError: If any component is out of range.

        Examples:
            >>> Time(14, 30, 45).replace(hour=10)
            Time(10, 30, 45, microsecond=0)
        """
        return Time(
            hour if hour is not None else self._hour,
            minute if minute is not None else self._minute,
            second if second is not None else self._second,
            microsecond if microsecond is not None else self._us,
        )

    def to_iso_format(self) -> str:
        """Return the time as HH:MM:SS, with .ffffff when non-zero.

        Examples:
            >>> Time(14, 30, 45).to_iso_format()
            '14:30:45'
            >>> Time(14, 30, 45, 500).to_iso_format()
            '14:30:45.000500'
        """
        from kalends.format.iso8601 import format_time

        return format_time(self)

    def strftime(self, fmt: str) -> str:
        """Format this time; date directives render as 1900-01-01."""
        from kalends.format.strftime import strftime

        return strftime(self, fmt)

    def _key(self) -> tuple[int, int, int, int]:
        return (self._hour, self._minute, self._second, self._us)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __bool__(self) -> bool:
        """Return False at midnight, True otherwise."""
        return self._key() != (0, 0, 0, 0)

    def __repr__(self) -> str:
        return (
            f"Time({self._hour}, {self._minute}, {self._second}, "
            f"microsecond={self._us})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["Time"]
