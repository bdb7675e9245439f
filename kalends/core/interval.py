"""Interval class representing a signed span of time.

This module provides the Interval class: the distance between two dates,
times-of-day or datetimes, with microsecond resolution.
"""

from __future__ import annotations

from kalends._internal.constants import (
    MAX_DELTA_DAYS,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    US_PER_MILLISECOND,
    US_PER_SECOND,
)
from kalends._internal.normalize import check_delta_days, normalize_interval
from kalends._internal.validation import check_int
from kalends.errors import DomainError


def _is_scalar(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Interval:
    """A signed span of time with microsecond resolution.

    An Interval is stored as a canonical (days, seconds, microseconds)
    triple. The representation is normalized such that:
    - `_seconds` is always in the range [0, 86400)
    - `_us` is always in the range [0, 1_000_000)
    - `_days` carries the sign and stays within +/-999,999,999

    Attributes:
        days: The days component (can be negative).
        seconds: The seconds component within the day [0, 86400).
        microseconds: The microseconds component within the second [0, 1e6).

    Examples:
        >>> Interval(hours=25)
        Interval(days=1, seconds=3600, microseconds=0)

        >>> Interval(microseconds=-1)
        Interval(days=-1, seconds=86399, microseconds=999999)

        >>> Interval(days=50, seconds=27, microseconds=10, milliseconds=29000,
        ...          minutes=5, hours=8, weeks=2)
        Interval(days=64, seconds=29156, microseconds=10)
    """

    __slots__ = ("_days", "_seconds", "_us")

    def __init__(
        self,
        days: int = 0,
        seconds: int = 0,
        microseconds: int = 0,
        milliseconds: int = 0,
        minutes: int = 0,
        hours: int = 0,
        weeks: int = 0,
    ) -> None:
        """Create an Interval from component parts.

        All parameters can be positive, negative, or zero. They are summed
        and folded into a single canonical triple.

        Raises:
            TypeError: If any part is not an int.
            RangeError: If the resulting day count is out of range.
        """
        for name, value in (
            ("days", days),
            ("seconds", seconds),
            ("microseconds", microseconds),
            ("milliseconds", milliseconds),
            ("minutes", minutes),
            ("hours", hours),
            ("weeks", weeks),
        ):
            check_int(name, value)
        d, s, us = normalize_interval(
            days + weeks * 7,
            seconds + minutes * SECONDS_PER_MINUTE + hours * SECONDS_PER_HOUR,
            microseconds + milliseconds * US_PER_MILLISECOND,
        )
        self._days: int = d
        self._seconds: int = s
        self._us: int = us

    @classmethod
    def _from_fields(cls, days: int, seconds: int, microseconds: int) -> Interval:
        """Create an Interval from an already-canonical triple.

        This is an internal factory method that bypasses normalization
        for use when the triple is known to be canonical.
        """
        check_delta_days(days)
        instance = object.__new__(cls)
        instance._days = days
        instance._seconds = seconds
        instance._us = microseconds
        return instance

    @classmethod
    def from_microseconds(cls, microseconds: int) -> Interval:
        """Create an Interval from a total microsecond count.

        Examples:
            >>> Interval.from_microseconds(-1)
            Interval(days=-1, seconds=86399, microseconds=999999)
        """
        check_int("microseconds", microseconds)
        seconds, us = divmod(microseconds, US_PER_SECOND)
        days, seconds = divmod(seconds, SECONDS_PER_DAY)
        return cls._from_fields(days, seconds, us)

    @classmethod
    def min(cls) -> Interval:
        """Return the most negative representable Interval."""
        return cls._from_fields(-MAX_DELTA_DAYS, 0, 0)

    @classmethod
    def max(cls) -> Interval:
        """Return the most positive representable Interval."""
        return cls._from_fields(MAX_DELTA_DAYS, SECONDS_PER_DAY - 1, US_PER_SECOND - 1)

    @classmethod
    def resolution(cls) -> Interval:
        """Return the smallest non-zero Interval (one microsecond)."""
        return cls._from_fields(0, 0, 1)

    @property
    def days(self) -> int:
        """Return the days component (can be negative)."""
        return self._days

    @property
    def seconds(self) -> int:
        """Return the seconds within the day, in [0, 86400)."""
        return self._seconds

    @property
    def microseconds(self) -> int:
        """Return the microseconds within the second, in [0, 1_000_000)."""
        return self._us

    def total_microseconds(self) -> int:
        """Return the total span in microseconds (exact).

        Examples:
            >>> Interval(seconds=1, microseconds=500).total_microseconds()
            1000500
        """
        return (self._days * SECONDS_PER_DAY + self._seconds) * US_PER_SECOND + self._us

    def total_milliseconds(self) -> int:
        """Return the total span in whole milliseconds, rounded toward -inf."""
        return self.total_microseconds() // US_PER_MILLISECOND

    def total_seconds(self) -> int:
        """Return the total span in whole seconds, rounded toward -inf.

        The sub-second remainder is discarded.

        Examples:
            >>> Interval(days=1, seconds=3600).total_seconds()
            90000
            >>> Interval(microseconds=-1).total_seconds()
            -1
        """
        return self.total_microseconds() // US_PER_SECOND

    def _key(self) -> tuple[int, int, int]:
        return (self._days, self._seconds, self._us)

    def __add__(self, other: object) -> Interval:
        """Add two intervals.

        Examples:
            >>> Interval(seconds=30) + Interval(seconds=45)
            Interval(days=0, seconds=75, microseconds=0)
        """
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(
            self._days + other._days,
            self._seconds + other._seconds,
            self._us + other._us,
        )

    def __sub__(self, other: object) -> Interval:
        """Subtract one interval from another."""
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(
            self._days - other._days,
            self._seconds - other._seconds,
            self._us - other._us,
        )

    def __mul__(self, other: object) -> Interval:
        """Multiply an interval by an integer.

        Examples:
            >>> Interval(hours=13) * 2
            Interval(days=1, seconds=7200, microseconds=0)
        """
        if not _is_scalar(other):
            return NotImplemented
        return Interval.from_microseconds(self.total_microseconds() * other)

    def __rmul__(self, other: object) -> Interval:
        """Support int * Interval."""
        return self.__mul__(other)

    def __floordiv__(self, other: object) -> Interval | int:
        """Floor-divide by an integer or by another interval.

        Dividing by an integer scales the interval and returns an Interval.
        Dividing by an Interval returns how many whole divisors fit, as an int.

        Raises:
            DomainError: If the divisor is zero.

        Examples:
            >>> Interval(seconds=100) // 3
            Interval(days=0, seconds=33, microseconds=333333)
            >>> Interval(days=1) // Interval(hours=5)
            4
        """
        if isinstance(other, Interval):
            divisor = other.total_microseconds()
            if divisor == 0:
                raise DomainError("division by a zero-length interval", field="divisor", value=other)
            return self.total_microseconds() // divisor
        if _is_scalar(other):
            if other == 0:
                raise DomainError("division of an interval by zero", field="divisor", value=other)
            return Interval.from_microseconds(self.total_microseconds() // other)
        return NotImplemented

    # Intervals only support integer arithmetic, so / floors like //
    __truediv__ = __floordiv__

    def __mod__(self, other: object) -> Interval:
        """Return the floor remainder of dividing by another interval.

        The result has the same sign as the divisor, or is zero.

        Raises:
            DomainError: If the divisor is a zero-length interval.

        Examples:
            >>> Interval(hours=7) % Interval(hours=3)
            Interval(days=0, seconds=3600, microseconds=0)
        """
        if not isinstance(other, Interval):
            return NotImplemented
        divisor = other.total_microseconds()
        if divisor == 0:
            raise DomainError("modulo by a zero-length interval", field="divisor", value=other)
        return Interval.from_microseconds(self.total_microseconds() % divisor)

    def __divmod__(self, other: object) -> tuple[int, Interval]:
        """Return (self // other, self % other) for an Interval divisor."""
        if not isinstance(other, Interval):
            return NotImplemented
        divisor = other.total_microseconds()
        if divisor == 0:
            raise DomainError("divmod by a zero-length interval", field="divisor", value=other)
        q, r = divmod(self.total_microseconds(), divisor)
        return q, Interval.from_microseconds(r)

    def __neg__(self) -> Interval:
        """Return the negation of this interval.

        Examples:
            >>> -Interval(seconds=30)
            Interval(days=-1, seconds=86370, microseconds=0)
        """
        return Interval(-self._days, -self._seconds, -self._us)

    def __pos__(self) -> Interval:
        return self

    def __abs__(self) -> Interval:
        """Return the interval with a non-negative sign."""
        if self._days < 0:
            return -self
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __bool__(self) -> bool:
        """Return True if this is a non-zero interval."""
        return self._days != 0 or self._seconds != 0 or self._us != 0

    def __repr__(self) -> str:
        return (
            f"Interval(days={self._days}, seconds={self._seconds}, "
            f"microseconds={self._us})"
        )

    def __str__(self) -> str:
        """Return a human-readable string representation.

        Returns:
            String like "1 day, 2:30:45" or "-1 day, 23:59:59.500000".
        """
        minutes, secs = divmod(self._seconds, SECONDS_PER_MINUTE)
        hours, minutes = divmod(minutes, 60)

        time_str = f"{hours}:{minutes:02d}:{secs:02d}"
        if self._us:
            time_str += f".{self._us:06d}"

        if self._days == 0:
            return time_str
        plural = "" if abs(self._days) == 1 else "s"
        return f"{self._days} day{plural}, {time_str}"


__all__ = ["Interval"]
