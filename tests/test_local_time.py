"""Tests for the LocalTime class."""

from __future__ import annotations

import datetime

import pytest

from chronofield import Field, LocalDate, LocalDateTime, LocalTime, TemporalValue
from chronofield.errors import (
    FieldOutOfRangeError,
    OverflowError,
    UnsupportedFieldError,
)


class TestLocalTimeConstruction:
    """Tests for LocalTime construction and validation."""

    def test_components(self) -> None:
        t = LocalTime(14, 30, 45, 123_456_789)
        assert t.hour == 14
        assert t.minute == 30
        assert t.second == 45
        assert t.nanosecond == 123_456_789
        assert t.microsecond == 123_456
        assert t.millisecond == 123

    def test_defaults(self) -> None:
        assert LocalTime() == LocalTime.midnight()
        assert LocalTime(9) == LocalTime(9, 0, 0, 0)

    def test_of_equals_constructor(self) -> None:
        assert LocalTime.of(9, 30) == LocalTime(9, 30)

    @pytest.mark.parametrize(
        ("args", "field_name"),
        [
            ((24,), "HourOfDay"),
            ((0, 60), "MinuteOfHour"),
            ((0, 0, 60), "SecondOfMinute"),
            ((0, 0, 0, 1_000_000_000), "NanoOfSecond"),
            ((-1,), "HourOfDay"),
        ],
    )
    def test_out_of_range(self, args: tuple[int, ...], field_name: str) -> None:
        with pytest.raises(FieldOutOfRangeError, match=field_name):
            LocalTime(*args)

    def test_rejects_non_int(self) -> None:
        with pytest.raises(TypeError):
            LocalTime(9.5)  # type: ignore[arg-type]

    def test_of_nano_of_day(self) -> None:
        assert LocalTime.of_nano_of_day(0) == LocalTime.MIN
        assert LocalTime.of_nano_of_day(86_399_999_999_999) == LocalTime.MAX
        with pytest.raises(FieldOutOfRangeError, match="NanoOfDay"):
            LocalTime.of_nano_of_day(86_400_000_000_000)

    def test_of_second_of_day(self) -> None:
        assert LocalTime.of_second_of_day(3661) == LocalTime(1, 1, 1)
        with pytest.raises(FieldOutOfRangeError, match="SecondOfDay"):
            LocalTime.of_second_of_day(86_400)

    def test_named_times(self) -> None:
        assert LocalTime.midnight() == LocalTime(0, 0)
        assert LocalTime.noon() == LocalTime(12, 0)
        assert LocalTime.MAX == LocalTime(23, 59, 59, 999_999_999)

    def test_now(self) -> None:
        now = LocalTime.now()
        assert not now.is_zero()
        assert now.nanosecond % 1000 == 0


class TestLocalTimeText:
    """Tests for LocalTime ISO text."""

    def test_fraction_aligned_to_millis(self) -> None:
        assert str(LocalTime(14, 30, 45, 100_000_000)) == "14:30:45.100"

    def test_full_nanosecond_fraction(self) -> None:
        assert str(LocalTime(14, 30, 45, 123_456_789)) == "14:30:45.123456789"

    def test_micro_fraction(self) -> None:
        assert str(LocalTime(14, 30, 45, 123_400_000)) == "14:30:45.123400"

    def test_whole_seconds(self) -> None:
        assert str(LocalTime(9, 5)) == "09:05:00"

    def test_repr(self) -> None:
        assert repr(LocalTime(14, 30)) == "LocalTime(14, 30, 0, 0)"
        assert repr(LocalTime.zero()) == "LocalTime.zero()"

    def test_from_iso_format(self) -> None:
        assert LocalTime.from_iso_format("14:30:45.1") == LocalTime(
            14, 30, 45, 100_000_000
        )


class TestLocalTimeArithmetic:
    """Tests for wrap-around arithmetic."""

    def test_plus_hours_wraps(self) -> None:
        assert LocalTime(23, 0).plus_hours(25) == LocalTime(0, 0)
        assert LocalTime(1, 0).plus_hours(-2) == LocalTime(23, 0)
        assert LocalTime(1, 0).minus_hours(2) == LocalTime(23, 0)

    def test_plus_minutes_wraps(self) -> None:
        assert LocalTime(23, 59).plus_minutes(2) == LocalTime(0, 1)
        assert LocalTime(0, 0).minus_minutes(1) == LocalTime(23, 59)

    def test_plus_seconds_keeps_nanos(self) -> None:
        t = LocalTime(23, 59, 59, 500)
        assert t.plus_seconds(1) == LocalTime(0, 0, 0, 500)
        assert LocalTime(0, 0, 0).minus_seconds(1) == LocalTime(23, 59, 59)

    def test_plus_nanos_wraps(self) -> None:
        assert LocalTime(23, 59, 59, 999_999_999).plus_nanos(1) == LocalTime(0, 0)
        assert LocalTime(0, 0).minus_nanos(1) == LocalTime.MAX

    def test_whole_days_are_identity(self) -> None:
        t = LocalTime(14, 30, 45, 7)
        assert t.plus_hours(48) == t
        assert t.plus_minutes(-1440) == t
        assert t.plus_seconds(86_400 * 3) == t
        assert t.plus_nanos(86_400_000_000_000) == t

    def test_huge_amounts(self) -> None:
        t = LocalTime(12, 0)
        assert t.plus_hours((1 << 63) - 1) == LocalTime(19, 0)
        assert t.plus_nanos(-(1 << 63)) == t.minus_nanos(1 << 63)

    @pytest.mark.parametrize(
        "method",
        ["plus_hours", "plus_minutes", "plus_seconds", "plus_nanos", "minus_hours"],
    )
    def test_amount_must_be_int(self, method: str) -> None:
        with pytest.raises(TypeError, match="must be an integer, got float"):
            getattr(LocalTime(10, 0), method)(1.5)


class TestLocalTimeReplacement:
    """Tests for with_* and with_field."""

    def test_with_components(self) -> None:
        t = LocalTime(14, 30, 45, 9)
        assert t.with_hour(1) == LocalTime(1, 30, 45, 9)
        assert t.with_minute(0) == LocalTime(14, 0, 45, 9)
        assert t.with_second(0) == LocalTime(14, 30, 0, 9)
        assert t.with_nano(0) == LocalTime(14, 30, 45)

    def test_with_hour_out_of_range(self) -> None:
        with pytest.raises(FieldOutOfRangeError):
            LocalTime(14, 30).with_hour(24)

    @pytest.mark.parametrize(
        ("field", "value", "expected"),
        [
            (Field.NANO_OF_SECOND, 5, LocalTime(14, 30, 45, 5)),
            (Field.MICRO_OF_SECOND, 5, LocalTime(14, 30, 45, 5_000)),
            (Field.MILLI_OF_SECOND, 5, LocalTime(14, 30, 45, 5_000_000)),
            (Field.SECOND_OF_MINUTE, 0, LocalTime(14, 30, 0, 123)),
            (Field.SECOND_OF_DAY, 0, LocalTime(0, 0, 0, 123)),
            (Field.MINUTE_OF_HOUR, 59, LocalTime(14, 59, 45, 123)),
            (Field.MINUTE_OF_DAY, 61, LocalTime(1, 1, 45, 123)),
            (Field.HOUR_OF_AMPM, 0, LocalTime(12, 30, 45, 123)),
            (Field.CLOCK_HOUR_OF_AMPM, 12, LocalTime(12, 30, 45, 123)),
            (Field.CLOCK_HOUR_OF_AMPM, 3, LocalTime(15, 30, 45, 123)),
            (Field.HOUR_OF_DAY, 8, LocalTime(8, 30, 45, 123)),
            (Field.CLOCK_HOUR_OF_DAY, 24, LocalTime(0, 30, 45, 123)),
            (Field.AMPM_OF_DAY, 0, LocalTime(2, 30, 45, 123)),
            (Field.AMPM_OF_DAY, 1, LocalTime(14, 30, 45, 123)),
            (Field.NANO_OF_DAY, 1, LocalTime(0, 0, 0, 1)),
            (Field.MICRO_OF_DAY, 1, LocalTime(0, 0, 0, 1_000)),
            (Field.MILLI_OF_DAY, 1, LocalTime(0, 0, 0, 1_000_000)),
        ],
    )
    def test_with_field(self, field: Field, value: int, expected: LocalTime) -> None:
        assert LocalTime(14, 30, 45, 123).with_field(field, value) == expected

    def test_with_field_unsupported_before_range(self) -> None:
        with pytest.raises(UnsupportedFieldError, match="DayOfMonth"):
            LocalTime(9, 0).with_field(Field.DAY_OF_MONTH, 1000)

    def test_with_field_out_of_range(self) -> None:
        with pytest.raises(FieldOutOfRangeError, match="ClockHourOfAmPm"):
            LocalTime(9, 0).with_field(Field.CLOCK_HOUR_OF_AMPM, 0)


class TestLocalTimeFields:
    """Tests for get_field on LocalTime."""

    @pytest.mark.parametrize(
        ("field", "expected"),
        [
            (Field.NANO_OF_SECOND, 123_456_789),
            (Field.MICRO_OF_SECOND, 123_456),
            (Field.MILLI_OF_SECOND, 123),
            (Field.SECOND_OF_MINUTE, 45),
            (Field.SECOND_OF_DAY, 52_245),
            (Field.MINUTE_OF_HOUR, 30),
            (Field.MINUTE_OF_DAY, 870),
            (Field.HOUR_OF_AMPM, 2),
            (Field.CLOCK_HOUR_OF_AMPM, 2),
            (Field.HOUR_OF_DAY, 14),
            (Field.CLOCK_HOUR_OF_DAY, 14),
            (Field.AMPM_OF_DAY, 1),
            (Field.NANO_OF_DAY, 52_245_123_456_789),
        ],
    )
    def test_get_field(self, field: Field, expected: int) -> None:
        t = LocalTime(14, 30, 45, 123_456_789)
        assert t.get_field(field) == TemporalValue(expected)

    def test_clock_hours_at_midnight_and_noon(self) -> None:
        midnight = LocalTime.midnight()
        assert midnight.get_field(Field.CLOCK_HOUR_OF_DAY) == TemporalValue(24)
        assert midnight.get_field(Field.CLOCK_HOUR_OF_AMPM) == TemporalValue(12)
        noon = LocalTime.noon()
        assert noon.get_field(Field.CLOCK_HOUR_OF_AMPM) == TemporalValue(12)
        assert noon.get_field(Field.AMPM_OF_DAY) == TemporalValue(1)

    def test_date_fields_unsupported(self) -> None:
        t = LocalTime(9, 0)
        assert t.get_field(Field.DAY_OF_MONTH).is_unsupported
        assert not t.is_supported_field(Field.YEAR)
        assert t.is_supported_field(Field.NANO_OF_DAY)


class TestLocalTimeZero:
    """Tests for the unset LocalTime."""

    def test_zero_is_not_midnight(self) -> None:
        zero = LocalTime.zero()
        assert zero.is_zero()
        assert zero != LocalTime.midnight()
        assert not zero
        assert LocalTime.midnight()

    def test_zero_sorts_first(self) -> None:
        assert LocalTime.zero() < LocalTime.midnight()
        assert LocalTime.zero().compare_to(LocalTime.MIN) == -1

    def test_zero_passes_through(self) -> None:
        zero = LocalTime.zero()
        assert zero.plus_hours(1) is zero
        assert zero.plus_nanos(1) is zero
        assert zero.with_hour(3) is zero
        assert zero.with_field(Field.HOUR_OF_DAY, 3) is zero
        assert zero.get_field(Field.HOUR_OF_DAY).is_unsupported

    def test_zero_text(self) -> None:
        assert LocalTime.zero().to_iso_format() == ""

    def test_hash_distinguishes_zero(self) -> None:
        assert len({LocalTime.zero(), LocalTime.midnight()}) == 2


class TestLocalTimeConversion:
    """Tests for conversion to and from the standard library."""

    def test_to_time_truncates(self) -> None:
        t = LocalTime(14, 30, 45, 123_456_789)
        assert t.to_time() == datetime.time(14, 30, 45, 123_456)

    def test_from_time(self) -> None:
        t = datetime.time(14, 30, 45, 123_456)
        assert LocalTime.from_time(t) == LocalTime(14, 30, 45, 123_456_000)

    def test_from_time_ignores_tzinfo(self) -> None:
        t = datetime.time(9, 0, tzinfo=datetime.timezone.utc)
        assert LocalTime.from_time(t) == LocalTime(9, 0)

    def test_zero_to_time(self) -> None:
        with pytest.raises(OverflowError):
            LocalTime.zero().to_time()

    def test_at_date(self) -> None:
        dt = LocalTime(9, 30).at_date(LocalDate(2024, 3, 15))
        assert dt == LocalDateTime(2024, 3, 15, 9, 30)
        assert LocalTime(9, 30).at_date(LocalDate.zero()).is_zero()


class TestLocalTimeComparison:
    """Tests for LocalTime ordering."""

    def test_ordering(self) -> None:
        a = LocalTime(9, 0)
        b = LocalTime(9, 0, 0, 1)
        assert a < b
        assert a.is_before(b)
        assert b.is_after(a)
        assert a.compare_to(LocalTime(9, 0)) == 0
        assert max(a, b) is b
