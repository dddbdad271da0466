"""Tests for fluent mutation chains."""

from __future__ import annotations

import logging

import pytest

from chronofield import (
    Field,
    LocalDate,
    LocalDateChain,
    LocalDateTime,
    LocalTime,
    OffsetDateTime,
    OffsetDateTimeChain,
    TemporalValue,
    YearMonth,
    ZoneOffset,
)
from chronofield.errors import (
    FieldOutOfRangeError,
    InvalidDateError,
    OverflowError,
    UnsupportedFieldError,
)


class TestChainLatching:
    """Tests for first-error latching."""

    def test_success(self) -> None:
        value, error = LocalDate(2024, 1, 31).chain().plus_months(1).get_result()
        assert value == LocalDate(2024, 2, 29)
        assert error is None

    def test_first_error_latches(self) -> None:
        chain = (
            LocalDate(2024, 1, 31)
            .chain()
            .plus_months(1)
            .with_day_of_month(30)
            .plus_days(1)
        )
        assert isinstance(chain.get_error(), InvalidDateError)
        assert chain.value == LocalDate(2024, 2, 29)

    def test_error_annotated_with_failing_step(self) -> None:
        chain = LocalDate(2024, 1, 31).chain().plus_months(1).with_day_of_month(30)
        assert str(chain.get_error()) == (
            "invalid date 'February 30' at LocalDate/with_day_of_month"
        )

    def test_later_steps_skipped(self) -> None:
        chain = LocalDate.MAX.chain().plus_days(1).with_year(2000).minus_days(1)
        assert isinstance(chain.get_error(), OverflowError)
        assert str(chain.get_error()) == "arithmetic overflow at LocalDate/plus_days"
        assert chain.value == LocalDate.MAX

    def test_chain_is_immutable(self) -> None:
        start = LocalDate(2024, 3, 15).chain()
        start.plus_days(1)
        assert start.value == LocalDate(2024, 3, 15)

    def test_type_errors_propagate(self) -> None:
        with pytest.raises(TypeError):
            LocalDate(2024, 3, 15).chain().plus_days("1")  # type: ignore[arg-type]

    def test_latch_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="chronofield.chain"):
            LocalDate(2024, 2, 1).chain().with_day_of_month(30)
        assert any("chain latched" in r.getMessage() for r in caplog.records)
        assert all(r.levelno == logging.DEBUG for r in caplog.records)


class TestChainTerminals:
    """Tests for the terminal operations."""

    def test_must_get_returns_value(self) -> None:
        assert LocalDate(2024, 3, 15).chain().plus_days(1).must_get() == LocalDate(
            2024, 3, 16
        )

    def test_must_get_raises_latched_error(self) -> None:
        chain = LocalDate(2024, 3, 15).chain().with_month(13)
        with pytest.raises(FieldOutOfRangeError, match="at LocalDate/with_month"):
            chain.must_get()

    def test_get_or_else(self) -> None:
        fallback = LocalDate.EPOCH
        ok = LocalDate(2024, 3, 15).chain().plus_days(1)
        bad = LocalDate(2024, 3, 15).chain().with_month(13)
        assert ok.get_or_else(fallback) == LocalDate(2024, 3, 16)
        assert bad.get_or_else(fallback) is fallback

    def test_get_or_else_get(self) -> None:
        bad = LocalDate(2024, 3, 15).chain().with_month(13)
        assert bad.get_or_else_get(LocalDate.today) == LocalDate.today()
        ok = LocalDate(2024, 3, 15).chain()
        assert ok.get_or_else_get(LocalDate.today) == LocalDate(2024, 3, 15)

    def test_repr(self) -> None:
        assert repr(LocalDate(2024, 3, 15).chain()) == (
            "LocalDateChain(LocalDate(2024, 3, 15))"
        )
        bad = LocalDate(2024, 3, 15).chain().with_month(13)
        assert repr(bad).startswith("LocalDateChain(LocalDate(2024, 3, 15), error=")


class TestChainArgumentTypes:
    """Tests for argument type errors inside a chain."""

    def test_float_amount_raises_immediately(self) -> None:
        with pytest.raises(TypeError, match="days must be an integer"):
            LocalDate(2024, 1, 1).chain().plus_days(0.5)

    def test_wrong_type_is_not_latched(self) -> None:
        chain = LocalDate(2024, 1, 1).chain()
        with pytest.raises(TypeError):
            chain.with_month("x")  # type: ignore[arg-type]
        assert chain.get_error() is None


class TestChainZero:
    """Tests for chains over unset values."""

    def test_zero_passes_through(self) -> None:
        chain = LocalDate.zero().chain().plus_days(1).with_day_of_month(40)
        assert chain.is_zero()
        assert chain.get_error() is None
        assert chain.must_get() is LocalDate.zero()

    def test_becoming_zero_stops_steps(self) -> None:
        chain = (
            OffsetDateTime(2024, 3, 15, offset=ZoneOffset.utc())
            .chain()
            .with_offset_same_local(ZoneOffset.zero())
            .plus_days(1)
        )
        assert chain.is_zero()
        assert chain.get_error() is None

    def test_latched_error_is_not_zero(self) -> None:
        chain = LocalDateChain(LocalDate.zero(), OverflowError())
        assert not chain.is_zero()
        assert chain.value.is_zero()


class TestTypedChains:
    """Tests for each chain type."""

    def test_local_date_chain(self) -> None:
        chain = LocalDate(2024, 3, 15).chain()
        assert isinstance(chain, LocalDateChain)
        result = (
            chain.plus_years(1)
            .minus_months(2)
            .plus_weeks(1)
            .with_field(Field.DAY_OF_WEEK, 1)
            .must_get()
        )
        assert result == LocalDate(2025, 1, 20)

    def test_local_date_chain_unsupported_field(self) -> None:
        chain = LocalDate(2024, 3, 15).chain().with_field(Field.HOUR_OF_DAY, 1)
        assert isinstance(chain.get_error(), UnsupportedFieldError)

    def test_local_time_chain(self) -> None:
        result = (
            LocalTime(23, 0)
            .chain()
            .plus_hours(2)
            .with_minute(15)
            .with_field(Field.AMPM_OF_DAY, 1)
            .must_get()
        )
        assert result == LocalTime(13, 15)

    def test_local_time_chain_latches(self) -> None:
        chain = LocalTime(9, 0).chain().with_second(60).plus_hours(1)
        assert isinstance(chain.get_error(), FieldOutOfRangeError)
        assert chain.value == LocalTime(9, 0)

    def test_local_date_time_chain(self) -> None:
        result = (
            LocalDateTime(2024, 12, 31, 23)
            .chain()
            .plus_hours(2)
            .with_day_of_month(31)
            .must_get()
        )
        assert result == LocalDateTime(2025, 1, 31, 1)

    def test_offset_date_time_chain(self) -> None:
        chain = OffsetDateTime(2024, 3, 15, 14, offset=ZoneOffset.of_hours(9)).chain()
        assert isinstance(chain, OffsetDateTimeChain)
        result = chain.with_offset_same_instant(ZoneOffset.utc()).plus_minutes(30)
        assert str(result.must_get()) == "2024-03-15T05:30:00Z"

    def test_offset_date_time_chain_invalid_temporal_value(self) -> None:
        chain = (
            OffsetDateTime(2024, 3, 15, offset=ZoneOffset.utc())
            .chain()
            .with_field(Field.YEAR, TemporalValue.unsupported())
        )
        assert isinstance(chain.get_error(), UnsupportedFieldError)

    def test_year_month_chain(self) -> None:
        chain = YearMonth(2024, 11).chain().plus_months(3).with_year(2030)
        assert chain.must_get() == YearMonth(2030, 2)
        bad = YearMonth(2024, 11).chain().with_month(0)
        assert isinstance(bad.get_error(), FieldOutOfRangeError)
        assert "at YearMonth/with_month" in str(bad.get_error())
