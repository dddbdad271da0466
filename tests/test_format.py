"""Tests for ISO 8601 formatting and parsing."""

from __future__ import annotations

import pytest

from chronofield import (
    LocalDate,
    LocalDateTime,
    LocalTime,
    OffsetDateTime,
    Year,
    YearMonth,
    ZoneOffset,
)
from chronofield.errors import FieldOutOfRangeError, InvalidDateError, ParseError
from chronofield.format import (
    format_fraction,
    format_iso8601,
    format_year,
    parse_iso8601,
    parse_local_date,
    parse_local_date_time,
    parse_local_time,
    parse_offset_date_time,
    parse_year,
    parse_year_month,
    parse_zone_offset,
)


class TestFormatHelpers:
    """Tests for year and fraction formatting."""

    @pytest.mark.parametrize(
        ("year", "expected"),
        [
            (2024, "2024"),
            (44, "0044"),
            (0, "0000"),
            (-1, "-0001"),
            (-9999, "-9999"),
            (10_000, "10000"),
            (-10_000, "-10000"),
        ],
    )
    def test_format_year(self, year: int, expected: str) -> None:
        assert format_year(year) == expected

    @pytest.mark.parametrize(
        ("nanos", "expected"),
        [
            (0, ""),
            (100_000_000, ".100"),
            (120_000_000, ".120"),
            (123_400_000, ".123400"),
            (123_456_000, ".123456"),
            (123_456_700, ".123456700"),
            (1, ".000000001"),
        ],
    )
    def test_format_fraction(self, nanos: int, expected: str) -> None:
        assert format_fraction(nanos) == expected


class TestParseDate:
    """Tests for date and year-month parsing."""

    def test_date(self) -> None:
        assert parse_local_date("2024-03-15") == LocalDate(2024, 3, 15)
        assert parse_local_date("-0044-03-15") == LocalDate(-44, 3, 15)
        assert parse_local_date("+12345-01-01") == LocalDate(12345, 1, 1)

    def test_plus_sign_only_for_wide_years(self) -> None:
        with pytest.raises(ParseError):
            parse_local_date("+2024-01-01")
        with pytest.raises(ParseError):
            parse_year("+2024")
        assert parse_year("+10000") == Year(10000)

    def test_empty_is_zero(self) -> None:
        assert parse_local_date("") is LocalDate.zero()

    @pytest.mark.parametrize(
        "text",
        [
            "2024/03/15",
            "2024-3-15",
            "24-03-15",
            "2024-03-15T",
            " 2024-03-15",
            "2024-03-15 ",
            "２０２４-03-15",
        ],
    )
    def test_malformed(self, text: str) -> None:
        with pytest.raises(ParseError, match="expected YYYY-MM-DD"):
            parse_local_date(text)

    def test_invalid_day(self) -> None:
        with pytest.raises(InvalidDateError):
            parse_local_date("2023-02-29")

    def test_month_out_of_range(self) -> None:
        with pytest.raises(FieldOutOfRangeError, match="MonthOfYear"):
            parse_local_date("2024-13-01")

    def test_year_month(self) -> None:
        assert parse_year_month("2024-02") == YearMonth(2024, 2)
        assert parse_year_month("") is YearMonth.zero()
        with pytest.raises(ParseError, match="expected YYYY-MM"):
            parse_year_month("2024-2")

    def test_year(self) -> None:
        assert parse_year("2024") == Year(2024)
        assert parse_year("-0044") == Year(-44)
        with pytest.raises(ParseError):
            parse_year("44")


class TestParseTime:
    """Tests for time parsing."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("00:00:00", LocalTime(0, 0)),
            ("14:30:45", LocalTime(14, 30, 45)),
            ("14:30:45.1", LocalTime(14, 30, 45, 100_000_000)),
            ("14:30:45.123456789", LocalTime(14, 30, 45, 123_456_789)),
            ("23:59:59.000000001", LocalTime(23, 59, 59, 1)),
        ],
    )
    def test_valid(self, text: str, expected: LocalTime) -> None:
        assert parse_local_time(text) == expected

    def test_empty_is_zero(self) -> None:
        assert parse_local_time("") is LocalTime.zero()

    @pytest.mark.parametrize(
        "text",
        ["14:30", "14:30:45.", "14:30:45.1234567891", "1:30:45", "14-30-45"],
    )
    def test_malformed(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_local_time(text)

    def test_hour_out_of_range(self) -> None:
        with pytest.raises(FieldOutOfRangeError, match="HourOfDay"):
            parse_local_time("24:00:00")


class TestParseDateTime:
    """Tests for local date-time parsing."""

    @pytest.mark.parametrize("separator", ["T", "t", " "])
    def test_separators(self, separator: str) -> None:
        text = f"2024-03-15{separator}14:30:45"
        assert parse_local_date_time(text) == LocalDateTime(2024, 3, 15, 14, 30, 45)

    def test_empty_is_zero(self) -> None:
        assert parse_local_date_time("") is LocalDateTime.zero()

    def test_missing_time(self) -> None:
        with pytest.raises(ParseError, match="missing time"):
            parse_local_date_time("2024-03-15T")

    def test_missing_separator(self) -> None:
        with pytest.raises(ParseError):
            parse_local_date_time("2024-03-15")

    def test_bad_time(self) -> None:
        with pytest.raises(ParseError):
            parse_local_date_time("2024-03-15T14:30")


class TestParseZoneOffset:
    """Tests for offset parsing."""

    @pytest.mark.parametrize(
        ("text", "seconds"),
        [
            ("+09:00", 32400),
            ("-05:30", -19800),
            ("+0530", 19800),
            ("-053045", -19845),
            ("+05:30:45", 19845),
            ("+05", 18000),
            ("+5", 18000),
            ("-00:30", -1800),
            ("+18:00", 64800),
        ],
    )
    def test_valid(self, text: str, seconds: int) -> None:
        assert parse_zone_offset(text).total_seconds == seconds

    @pytest.mark.parametrize("text", ["Z", "z", "+00:00", "-00:00", "+00"])
    def test_utc_forms(self, text: str) -> None:
        assert parse_zone_offset(text) is ZoneOffset.utc()

    def test_empty_is_zero(self) -> None:
        assert parse_zone_offset("") is ZoneOffset.zero()

    @pytest.mark.parametrize("text", ["09:00", "+09:0", "+09:0030", "+0900:00", "UTC"])
    def test_malformed(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_zone_offset(text)

    def test_out_of_range(self) -> None:
        with pytest.raises(FieldOutOfRangeError):
            parse_zone_offset("+19:00")
        with pytest.raises(FieldOutOfRangeError):
            parse_zone_offset("+18:30")
        with pytest.raises(FieldOutOfRangeError, match="OffsetMinutes"):
            parse_zone_offset("+05:60")


class TestParseOffsetDateTime:
    """Tests for offset date-time parsing."""

    def test_utc_conversion(self) -> None:
        odt = parse_offset_date_time("2024-03-15T14:30:45+09:00")
        assert str(odt.to_utc()) == "2024-03-15T05:30:45Z"

    def test_fraction_and_negative_offset(self) -> None:
        odt = parse_offset_date_time("2024-03-15T14:30:45.5-05:00")
        assert odt.nanosecond == 500_000_000
        assert odt.offset == ZoneOffset.of(-5)
        assert str(odt) == "2024-03-15T14:30:45.500-05:00"

    def test_negative_year(self) -> None:
        odt = parse_offset_date_time("-0044-03-15T12:00:00Z")
        assert odt.year == -44
        assert odt.offset.is_utc

    def test_empty_is_zero(self) -> None:
        assert parse_offset_date_time("") is OffsetDateTime.zero()

    def test_missing_offset(self) -> None:
        with pytest.raises(ParseError, match="missing offset"):
            parse_offset_date_time("2024-03-15T14:30:45")


class TestParseIso8601:
    """Tests for type detection."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("2024-03-15T14:30:45+09:00", OffsetDateTime),
            ("2024-03-15T14:30:45Z", OffsetDateTime),
            ("2024-03-15 14:30:45", LocalDateTime),
            ("2024-03-15", LocalDate),
            ("-0044-03-15", LocalDate),
            ("2024-03", YearMonth),
            ("14:30:45.5", LocalTime),
            ("+09:00", ZoneOffset),
            ("Z", ZoneOffset),
            ("2024", Year),
            ("+0530", ZoneOffset),
            ("-0530", Year),
            ("+12345", Year),
        ],
    )
    def test_detects_type(self, text: str, expected: type) -> None:
        assert type(parse_iso8601(text)) is expected

    def test_empty_rejected(self) -> None:
        with pytest.raises(ParseError, match="empty string"):
            parse_iso8601("")

    def test_unrecognized(self) -> None:
        with pytest.raises(ParseError, match="cannot determine ISO 8601 form"):
            parse_iso8601("next tuesday")


class TestFormatIso8601:
    """Tests for format_iso8601."""

    def test_dispatch(self) -> None:
        assert format_iso8601(Year(2024)) == "2024"
        assert format_iso8601(YearMonth(2024, 3)) == "2024-03"
        assert format_iso8601(LocalTime(14, 30, 45, 100_000_000)) == "14:30:45.100"
        assert format_iso8601(ZoneOffset.utc()) == "Z"

    def test_zero_values(self) -> None:
        assert format_iso8601(LocalDate.zero()) == ""
        assert format_iso8601(OffsetDateTime.zero()) == ""

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError, match="got str"):
            format_iso8601("2024-03-15")  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "value",
        [
            LocalDate(-1, 1, 1),
            LocalTime(0, 0, 0, 1),
            LocalDateTime(9999, 12, 31, 23, 59, 59, 999_999_999),
            ZoneOffset(-45),
            OffsetDateTime(2024, 2, 29, 12, offset=ZoneOffset.of(-3, -30)),
            YearMonth(-12345, 6),
        ],
    )
    def test_parse_inverts_format(self, value: object) -> None:
        assert type(value).from_iso_format(format_iso8601(value)) == value
