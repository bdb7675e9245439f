"""Tests for formatting module."""

from __future__ import annotations

import pytest

from kalends import Date, DateTime, Time
from kalends.errors import ParseError, RangeError
from kalends.format import ctime, format_iso8601, parse_iso8601, strftime, strptime


class TestFormatISO8601:
    """Tests for format_iso8601 function."""

    def test_format_date(self) -> None:
        """Format Date to ISO 8601."""
        assert format_iso8601(Date(2024, 1, 15)) == "2024-01-15"

    def test_format_early_year(self) -> None:
        """Years below 1000 are zero-padded."""
        assert format_iso8601(Date(33, 3, 3)) == "0033-03-03"

    def test_format_time(self) -> None:
        """Format Time with and without microseconds."""
        assert format_iso8601(Time(14, 30, 45)) == "14:30:45"
        assert format_iso8601(Time(14, 30, 45, 123_456)) == "14:30:45.123456"

    def test_format_datetime(self) -> None:
        """Format DateTime with the default and a custom separator."""
        dt = DateTime(2024, 1, 15, 14, 30, 45)
        assert format_iso8601(dt) == "2024-01-15T14:30:45"
        assert format_iso8601(dt, sep=" ") == "2024-01-15 14:30:45"

    def test_format_unsupported_type(self) -> None:
        """Other types are rejected."""
        with pytest.raises(TypeError):
            format_iso8601("2024-01-15")  # type: ignore[call-overload]


class TestParseISO8601:
    """Tests for parse_iso8601 type detection."""

    def test_detects_date(self) -> None:
        """Ten characters with dashes is a Date."""
        assert parse_iso8601("2024-01-15") == Date(2024, 1, 15)

    def test_detects_time(self) -> None:
        """Colon-separated clock values are Times."""
        assert parse_iso8601("14:30:45") == Time(14, 30, 45)
        assert parse_iso8601("14") == Time(14)

    def test_detects_datetime(self) -> None:
        """A T or space after the date part is a DateTime."""
        assert parse_iso8601("2024-01-15T14:30:45") == DateTime(2024, 1, 15, 14, 30, 45)
        assert parse_iso8601("2024-01-15 14:30") == DateTime(2024, 1, 15, 14, 30)

    @pytest.mark.parametrize("text", ["", "not a date", "2024-01", "2024-01-15T14:30:45Z"])
    def test_malformed(self, text: str) -> None:
        """Unrecognized strings are ParseErrors."""
        with pytest.raises(ParseError):
            parse_iso8601(text)


class TestStrftime:
    """Tests for strftime directives."""

    DT = DateTime(2021, 8, 31, 15, 59, 55, 123_456)

    @pytest.mark.parametrize(
        "directive, expected",
        [
            ("%a", "Tue"),
            ("%A", "Tuesday"),
            ("%w", "2"),
            ("%d", "31"),
            ("%b", "Aug"),
            ("%B", "August"),
            ("%m", "08"),
            ("%y", "21"),
            ("%Y", "2021"),
            ("%H", "15"),
            ("%I", "03"),
            ("%p", "PM"),
            ("%M", "59"),
            ("%S", "55"),
            ("%f", "123456"),
            ("%z", ""),
            ("%Z", ""),
            ("%j", "243"),
            ("%U", "35"),
            ("%W", "35"),
            ("%c", "Tue Aug 31 15:59:55 2021"),
            ("%x", "08/31/21"),
            ("%X", "15:59:55"),
            ("%%", "%"),
        ],
    )
    def test_directive(self, directive: str, expected: str) -> None:
        """Each directive renders one field."""
        assert strftime(self.DT, directive) == expected

    def test_literal_text(self) -> None:
        """Text between directives is copied through."""
        assert strftime(self.DT, "on %Y-%m-%d at %H:%M") == "on 2021-08-31 at 15:59"

    def test_twelve_hour_clock(self) -> None:
        """Hours 0 and 12 both render as 12."""
        assert strftime(Time(0, 0), "%I %p") == "12 AM"
        assert strftime(Time(12, 0), "%I %p") == "12 PM"
        assert strftime(Time(11, 0), "%I %p") == "11 AM"
        assert strftime(Time(23, 0), "%I %p") == "11 PM"

    def test_week_numbers_at_year_start(self) -> None:
        """Days before the first Sunday or Monday are in week 00."""
        friday = Date(2021, 1, 1)
        assert strftime(friday, "%U %W") == "00 00"
        assert strftime(Date(2021, 1, 3), "%U %W") == "01 00"
        assert strftime(Date(2021, 1, 4), "%U %W") == "01 01"

    def test_sunday_is_weekday_zero(self) -> None:
        """%w counts from Sunday."""
        assert strftime(Date(2021, 1, 3), "%w %a") == "0 Sun"
        assert strftime(Date(2021, 1, 9), "%w %A") == "6 Saturday"

    def test_all_weekday_and_month_names(self) -> None:
        """Names are spelled out in English."""
        week = [Date(2024, 1, day) for day in range(1, 8)]
        assert [strftime(d, "%A") for d in week] == [
            "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
        ]
        months = [Date(2024, month, 1) for month in range(1, 13)]
        assert [strftime(d, "%B") for d in months] == [
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ]

    def test_unsupported_directive(self) -> None:
        """Unknown directives are ParseErrors."""
        with pytest.raises(ParseError):
            strftime(self.DT, "%Q")

    def test_trailing_percent(self) -> None:
        """A lone trailing % is a ParseError."""
        with pytest.raises(ParseError):
            strftime(self.DT, "100%")

    def test_unsupported_type(self) -> None:
        """Non-calendar values are TypeErrors."""
        with pytest.raises(TypeError):
            strftime(42, "%Y")  # type: ignore[arg-type]


class TestCtime:
    """Tests for ctime()."""

    def test_single_digit_day(self) -> None:
        """The day of month is space-padded."""
        assert ctime(DateTime(2021, 1, 1)) == "Fri Jan  1 00:00:00 2021"

    def test_double_digit_day(self) -> None:
        """Two-digit days fill the field."""
        assert ctime(DateTime(2021, 8, 31, 15, 59, 55)) == "Tue Aug 31 15:59:55 2021"

    def test_matches_percent_c(self) -> None:
        """ctime() and %c agree."""
        dt = DateTime(2024, 2, 29, 6, 7, 8)
        assert ctime(dt) == strftime(dt, "%c")


class TestStrptime:
    """Tests for strptime parsing."""

    def test_date_only(self) -> None:
        """Missing time fields default to zero."""
        assert strptime("2024-01-15", "%Y-%m-%d") == DateTime(2024, 1, 15)

    def test_full(self) -> None:
        """Every supported directive."""
        assert strptime("2021/08/31 15:59:55.123456", "%Y/%m/%d %H:%M:%S.%f") == DateTime(
            2021, 8, 31, 15, 59, 55, 123_456
        )

    def test_literal_percent(self) -> None:
        """%% matches a literal percent sign."""
        assert strptime("20210831%", "%Y%m%d%%") == DateTime(2021, 8, 31)

    def test_regex_metacharacters_are_literal(self) -> None:
        """Literal text is matched verbatim."""
        assert strptime("2021.08.31 (12)", "%Y.%m.%d (%H)") == DateTime(2021, 8, 31, 12)
        with pytest.raises(ParseError):
            strptime("2021x08x31", "%Y.%m.%d")

    def test_requires_date_fields(self) -> None:
        """Year, month and day are mandatory."""
        with pytest.raises(ParseError, match="requires year, month, and day"):
            strptime("14:30:45", "%H:%M:%S")
        with pytest.raises(ParseError):
            strptime("2024-01", "%Y-%m")

    @pytest.mark.parametrize(
        "text, fmt",
        [
            ("2024-01-15 extra", "%Y-%m-%d"),
            ("x2024-01-15", "%Y-%m-%d"),
            ("2024-1-15", "%Y-%m-%d"),
            ("24-01-15", "%Y-%m-%d"),
            ("2024-01-15 14:30:45.123", "%Y-%m-%d %H:%M:%S.%f"),
        ],
    )
    def test_whole_string_must_match(self, text: str, fmt: str) -> None:
        """Partial matches and wrong widths are ParseErrors."""
        with pytest.raises(ParseError):
            strptime(text, fmt)

    def test_unsupported_directive(self) -> None:
        """Directives outside the numeric set are ParseErrors."""
        with pytest.raises(ParseError):
            strptime("Tue 2021-08-31", "%a %Y-%m-%d")
        with pytest.raises(ParseError):
            strptime("2021-08-31%", "%Y-%m-%d%")

    def test_repeated_directive(self) -> None:
        """A directive used twice is a ParseError."""
        with pytest.raises(ParseError):
            strptime("2021 2021-08-31", "%Y %Y-%m-%d")

    def test_out_of_range(self) -> None:
        """Well-formed but impossible values are RangeErrors."""
        with pytest.raises(RangeError):
            strptime("2021-02-29", "%Y-%m-%d")
        with pytest.raises(RangeError):
            strptime("2021-01-01 24:00", "%Y-%m-%d %H:%M")

    @pytest.mark.parametrize(
        "fmt",
        [
            "%Y-%m-%d %H:%M:%S.%f",
            "%Y%m%d%H%M%S%f",
            "%d/%m/%Y %H:%M:%S.%f",
            "%%%Y|%m|%d|%H|%M|%S|%f",
        ],
    )
    def test_round_trip(self, fmt: str) -> None:
        """strptime inverts strftime for the numeric directives."""
        for dt in [DateTime.min(), DateTime.max(), DateTime(2024, 2, 29, 6, 7, 8, 9)]:
            assert strptime(strftime(dt, fmt), fmt) == dt
