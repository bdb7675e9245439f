"""Tests for calendar math: leap years, ordinals, weekdays and ISO weeks."""

from __future__ import annotations

import pytest

from kalends._internal.calendar import (
    day_of_year,
    days_before_month,
    days_before_year,
    days_in_month,
    days_in_year,
    has_iso_week_53,
    is_leap_year,
    iso_calendar,
    iso_to_ordinal,
    ordinal_to_ymd,
    weekday,
    ymd_to_ordinal,
)
from kalends._internal.constants import EPOCH_ORDINAL, MAX_ORDINAL
from kalends.errors import RangeError


class TestLeapYears:
    """Tests for the Gregorian leap-year rule."""

    @pytest.mark.parametrize(
        "year, expected",
        [
            (2000, True),
            (1900, False),
            (2024, True),
            (2023, False),
            (1600, True),
            (4, True),
            (1, False),
        ],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        """Divisible by 4, except centuries not divisible by 400."""
        assert is_leap_year(year) is expected

    def test_days_in_month(self) -> None:
        """February depends on the leap year; other months are fixed."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2023, 4) == 30
        assert days_in_month(2023, 12) == 31

    def test_days_in_year(self) -> None:
        """Leap years have 366 days."""
        assert days_in_year(2020) == 366
        assert days_in_year(2021) == 365

    def test_days_before(self) -> None:
        """Counts of preceding days."""
        assert days_before_year(1) == 0
        assert days_before_year(2) == 365
        assert days_before_month(2021, 1) == 0
        assert days_before_month(2021, 3) == 59
        assert days_before_month(2020, 3) == 60

    def test_day_of_year(self) -> None:
        """Day of year is 1-based."""
        assert day_of_year(2021, 1, 1) == 1
        assert day_of_year(2020, 12, 31) == 366
        assert day_of_year(2021, 8, 31) == 243


class TestOrdinals:
    """Tests for ordinal <-> (year, month, day) conversion."""

    def test_known_ordinals(self) -> None:
        """Fixed points of the ordinal scale."""
        assert ymd_to_ordinal(1, 1, 1) == 1
        assert ymd_to_ordinal(1970, 1, 1) == EPOCH_ORDINAL
        assert ymd_to_ordinal(2021, 1, 1) == 737791
        assert ymd_to_ordinal(9999, 12, 31) == MAX_ORDINAL

    @pytest.mark.parametrize(
        "ordinal, expected",
        [
            (1, (1, 1, 1)),
            (365, (1, 12, 31)),
            (1461, (4, 12, 31)),
            (1462, (5, 1, 1)),
            (36524, (100, 12, 31)),
            (146097, (400, 12, 31)),
            (146098, (401, 1, 1)),
            (EPOCH_ORDINAL, (1970, 1, 1)),
            (MAX_ORDINAL, (9999, 12, 31)),
        ],
    )
    def test_cycle_boundaries(self, ordinal: int, expected: tuple[int, int, int]) -> None:
        """Last days of 4-, 100- and 400-year cycles decode correctly."""
        assert ordinal_to_ymd(ordinal) == expected

    @pytest.mark.parametrize("year", [1, 4, 100, 400, 1900, 2000, 2020, 2021, 9999])
    def test_round_trip_every_day(self, year: int) -> None:
        """ordinal_to_ymd inverts ymd_to_ordinal for every day of the year."""
        first = ymd_to_ordinal(year, 1, 1)
        for offset in range(days_in_year(year)):
            y, m, d = ordinal_to_ymd(first + offset)
            assert y == year
            assert ymd_to_ordinal(y, m, d) == first + offset

    def test_consecutive_ordinals_are_consecutive_days(self) -> None:
        """Moving one ordinal forward always moves one calendar day."""
        for ordinal in range(EPOCH_ORDINAL - 400, EPOCH_ORDINAL + 400):
            y, m, d = ordinal_to_ymd(ordinal)
            ny, nm, nd = ordinal_to_ymd(ordinal + 1)
            if nd != 1:
                assert (ny, nm, nd) == (y, m, d + 1)
            else:
                assert d == days_in_month(y, m)


class TestWeekday:
    """Tests for weekday computation."""

    def test_known_weekdays(self) -> None:
        """Monday=0 through Sunday=6."""
        assert weekday(1, 1, 1) == 0
        assert weekday(1970, 1, 1) == 3
        assert weekday(2021, 1, 1) == 4
        assert weekday(2024, 1, 15) == 0
        assert weekday(1900, 1, 1) == 0
        assert weekday(9999, 12, 31) == 4


class TestIsoCalendar:
    """Tests for ISO 8601 week dates."""

    def test_year_boundary_backward(self) -> None:
        """2021-01-01 (Friday) belongs to the last week of 2020."""
        assert iso_calendar(2021, 1, 1) == (2020, 53, 5)

    def test_year_boundary_forward(self) -> None:
        """2024-12-30 (Monday) starts week 1 of 2025."""
        assert iso_calendar(2024, 12, 30) == (2025, 1, 1)

    def test_mid_year(self) -> None:
        """A plain mid-year date."""
        assert iso_calendar(2024, 1, 15) == (2024, 3, 1)

    def test_first_day_of_calendar(self) -> None:
        """0001-01-01 is a Monday and starts ISO week 1 of year 1."""
        assert iso_calendar(1, 1, 1) == (1, 1, 1)

    def test_has_iso_week_53(self) -> None:
        """Thursday starts and leap-year Wednesday starts have 53 weeks."""
        assert has_iso_week_53(2015)
        assert has_iso_week_53(2020)
        assert not has_iso_week_53(2021)
        assert not has_iso_week_53(2024)

    @pytest.mark.parametrize("year", [1, 2004, 2015, 2020, 2021, 2024, 9999])
    def test_round_trip_every_day(self, year: int) -> None:
        """iso_to_ordinal inverts iso_calendar for every day of the year."""
        first = ymd_to_ordinal(year, 1, 1)
        for offset in range(days_in_year(year)):
            y, m, d = ordinal_to_ymd(first + offset)
            iso_year, week, wd = iso_calendar(y, m, d)
            assert 1 <= week <= 53
            assert 1 <= wd <= 7
            assert iso_to_ordinal(iso_year, week, wd) == first + offset

    def test_week_53_rejected_for_short_year(self) -> None:
        """Week 53 only exists in long ISO years."""
        with pytest.raises(RangeError) as exc_info:
            iso_to_ordinal(2021, 53, 1)
        assert exc_info.value.field == "week"

    def test_invalid_weekday(self) -> None:
        """ISO weekday must be 1-7."""
        with pytest.raises(RangeError) as exc_info:
            iso_to_ordinal(2021, 1, 8)
        assert exc_info.value.field == "weekday"
        assert exc_info.value.value == 8

    def test_invalid_year(self) -> None:
        """ISO year must be 1-9999."""
        with pytest.raises(RangeError) as exc_info:
            iso_to_ordinal(0, 1, 1)
        assert exc_info.value.field == "year"
