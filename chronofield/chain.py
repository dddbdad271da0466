"""Fluent chains of fallible mutations.

A chain wraps a value and applies mutations one after another. The first
mutation that raises a ChronoError latches the error: later steps are
skipped, and the error is reported by the terminal operations instead of
being raised mid-expression.

Only ChronoError is latched. A TypeError from an argument of the wrong type
(a float day count, a string month) is a caller bug and propagates at once.

Examples:
    >>> from chronofield import LocalDate
    >>> c = LocalDate(2024, 1, 31).chain().plus_months(1).with_day_of_month(30)
    >>> print(c.get_error())
    invalid date 'February 30' at LocalDate/with_day_of_month
    >>> c.value
    LocalDate(2024, 2, 29)

    >>> LocalDate(2024, 1, 31).chain().plus_months(1).plus_days(1).must_get()
    LocalDate(2024, 3, 1)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, ClassVar, Generic, Protocol, TypeVar

from chronofield.errors import ChronoError

if TYPE_CHECKING:
    from typing import Self

    from chronofield.core.local_date import LocalDate
    from chronofield.core.local_date_time import LocalDateTime
    from chronofield.core.local_time import LocalTime
    from chronofield.core.offset_date_time import OffsetDateTime
    from chronofield.core.year_month import YearMonth
    from chronofield.core.zone_offset import ZoneOffset
    from chronofield.units.field import Field
    from chronofield.units.temporal_value import TemporalValue

logger = logging.getLogger(__name__)


class _Zeroable(Protocol):
    def is_zero(self) -> bool: ...


T = TypeVar("T", bound=_Zeroable)


class Chain(Generic[T]):
    """An immutable (value, error) pair with latching mutation steps."""

    __slots__ = ("_value", "_error")

    _type_name: ClassVar[str] = ""

    def __init__(self, value: T, error: ChronoError | None = None) -> None:
        self._value = value
        self._error = error

    def _step(self, func_name: str, op: Callable[[T], T]) -> Self:
        """Apply op unless an error is latched or the value is unset."""
        if self._error is not None or self._value.is_zero():
            return self
        try:
            value = op(self._value)
        except ChronoError as e:
            e.annotate(self._type_name, func_name)
            logger.debug("chain latched %s", e)
            return type(self)(self._value, e)
        return type(self)(value)

    @property
    def value(self) -> T:
        """The current value, regardless of any latched error."""
        return self._value

    def is_zero(self) -> bool:
        """True when no error is latched and the value is unset."""
        return self._error is None and self._value.is_zero()

    def get_error(self) -> ChronoError | None:
        return self._error

    def get_result(self) -> tuple[T, ChronoError | None]:
        """Return the value and the latched error (None on success)."""
        return self._value, self._error

    def must_get(self) -> T:
        """Return the value, raising the latched error if there is one."""
        if self._error is not None:
            raise self._error
        return self._value

    def get_or_else(self, fallback: T) -> T:
        """Return the value, or fallback if an error is latched."""
        if self._error is not None:
            return fallback
        return self._value

    def get_or_else_get(self, factory: Callable[[], T]) -> T:
        """Return the value, or the result of factory if an error is latched."""
        if self._error is not None:
            return factory()
        return self._value

    def __repr__(self) -> str:
        if self._error is not None:
            return f"{type(self).__name__}({self._value!r}, error={self._error!r})"
        return f"{type(self).__name__}({self._value!r})"


class LocalDateChain(Chain["LocalDate"]):
    """Chain of LocalDate mutations."""

    __slots__ = ()

    _type_name = "LocalDate"

    def plus_days(self, days: int) -> LocalDateChain:
        return self._step("plus_days", lambda d: d.plus_days(days))

    def minus_days(self, days: int) -> LocalDateChain:
        return self._step("minus_days", lambda d: d.minus_days(days))

    def plus_weeks(self, weeks: int) -> LocalDateChain:
        return self._step("plus_weeks", lambda d: d.plus_weeks(weeks))

    def minus_weeks(self, weeks: int) -> LocalDateChain:
        return self._step("minus_weeks", lambda d: d.minus_weeks(weeks))

    def plus_months(self, months: int) -> LocalDateChain:
        return self._step("plus_months", lambda d: d.plus_months(months))

    def minus_months(self, months: int) -> LocalDateChain:
        return self._step("minus_months", lambda d: d.minus_months(months))

    def plus_years(self, years: int) -> LocalDateChain:
        return self._step("plus_years", lambda d: d.plus_years(years))

    def minus_years(self, years: int) -> LocalDateChain:
        return self._step("minus_years", lambda d: d.minus_years(years))

    def with_day_of_month(self, day: int) -> LocalDateChain:
        return self._step("with_day_of_month", lambda d: d.with_day_of_month(day))

    def with_day_of_year(self, day_of_year: int) -> LocalDateChain:
        return self._step("with_day_of_year", lambda d: d.with_day_of_year(day_of_year))

    def with_month(self, month: int) -> LocalDateChain:
        return self._step("with_month", lambda d: d.with_month(month))

    def with_year(self, year: int) -> LocalDateChain:
        return self._step("with_year", lambda d: d.with_year(year))

    def with_field(self, field: Field, value: int | TemporalValue) -> LocalDateChain:
        return self._step("with_field", lambda d: d.with_field(field, value))


class LocalTimeChain(Chain["LocalTime"]):
    """Chain of LocalTime mutations."""

    __slots__ = ()

    _type_name = "LocalTime"

    def plus_hours(self, hours: int) -> LocalTimeChain:
        return self._step("plus_hours", lambda t: t.plus_hours(hours))

    def minus_hours(self, hours: int) -> LocalTimeChain:
        return self._step("minus_hours", lambda t: t.minus_hours(hours))

    def plus_minutes(self, minutes: int) -> LocalTimeChain:
        return self._step("plus_minutes", lambda t: t.plus_minutes(minutes))

    def minus_minutes(self, minutes: int) -> LocalTimeChain:
        return self._step("minus_minutes", lambda t: t.minus_minutes(minutes))

    def plus_seconds(self, seconds: int) -> LocalTimeChain:
        return self._step("plus_seconds", lambda t: t.plus_seconds(seconds))

    def minus_seconds(self, seconds: int) -> LocalTimeChain:
        return self._step("minus_seconds", lambda t: t.minus_seconds(seconds))

    def plus_nanos(self, nanos: int) -> LocalTimeChain:
        return self._step("plus_nanos", lambda t: t.plus_nanos(nanos))

    def minus_nanos(self, nanos: int) -> LocalTimeChain:
        return self._step("minus_nanos", lambda t: t.minus_nanos(nanos))

    def with_hour(self, hour: int) -> LocalTimeChain:
        return self._step("with_hour", lambda t: t.with_hour(hour))

    def with_minute(self, minute: int) -> LocalTimeChain:
        return self._step("with_minute", lambda t: t.with_minute(minute))

    def with_second(self, second: int) -> LocalTimeChain:
        return self._step("with_second", lambda t: t.with_second(second))

    def with_nano(self, nanosecond: int) -> LocalTimeChain:
        return self._step("with_nano", lambda t: t.with_nano(nanosecond))

    def with_field(self, field: Field, value: int | TemporalValue) -> LocalTimeChain:
        return self._step("with_field", lambda t: t.with_field(field, value))


class LocalDateTimeChain(Chain["LocalDateTime"]):
    """Chain of LocalDateTime mutations."""

    __slots__ = ()

    _type_name = "LocalDateTime"

    def plus_years(self, years: int) -> LocalDateTimeChain:
        return self._step("plus_years", lambda dt: dt.plus_years(years))

    def minus_years(self, years: int) -> LocalDateTimeChain:
        return self._step("minus_years", lambda dt: dt.minus_years(years))

    def plus_months(self, months: int) -> LocalDateTimeChain:
        return self._step("plus_months", lambda dt: dt.plus_months(months))

    def minus_months(self, months: int) -> LocalDateTimeChain:
        return self._step("minus_months", lambda dt: dt.minus_months(months))

    def plus_weeks(self, weeks: int) -> LocalDateTimeChain:
        return self._step("plus_weeks", lambda dt: dt.plus_weeks(weeks))

    def minus_weeks(self, weeks: int) -> LocalDateTimeChain:
        return self._step("minus_weeks", lambda dt: dt.minus_weeks(weeks))

    def plus_days(self, days: int) -> LocalDateTimeChain:
        return self._step("plus_days", lambda dt: dt.plus_days(days))

    def minus_days(self, days: int) -> LocalDateTimeChain:
        return self._step("minus_days", lambda dt: dt.minus_days(days))

    def plus_hours(self, hours: int) -> LocalDateTimeChain:
        return self._step("plus_hours", lambda dt: dt.plus_hours(hours))

    def minus_hours(self, hours: int) -> LocalDateTimeChain:
        return self._step("minus_hours", lambda dt: dt.minus_hours(hours))

    def plus_minutes(self, minutes: int) -> LocalDateTimeChain:
        return self._step("plus_minutes", lambda dt: dt.plus_minutes(minutes))

    def minus_minutes(self, minutes: int) -> LocalDateTimeChain:
        return self._step("minus_minutes", lambda dt: dt.minus_minutes(minutes))

    def plus_seconds(self, seconds: int) -> LocalDateTimeChain:
        return self._step("plus_seconds", lambda dt: dt.plus_seconds(seconds))

    def minus_seconds(self, seconds: int) -> LocalDateTimeChain:
        return self._step("minus_seconds", lambda dt: dt.minus_seconds(seconds))

    def plus_nanos(self, nanos: int) -> LocalDateTimeChain:
        return self._step("plus_nanos", lambda dt: dt.plus_nanos(nanos))

    def minus_nanos(self, nanos: int) -> LocalDateTimeChain:
        return self._step("minus_nanos", lambda dt: dt.minus_nanos(nanos))

    def with_year(self, year: int) -> LocalDateTimeChain:
        return self._step("with_year", lambda dt: dt.with_year(year))

    def with_month(self, month: int) -> LocalDateTimeChain:
        return self._step("with_month", lambda dt: dt.with_month(month))

    def with_day_of_month(self, day: int) -> LocalDateTimeChain:
        return self._step("with_day_of_month", lambda dt: dt.with_day_of_month(day))

    def with_day_of_year(self, day_of_year: int) -> LocalDateTimeChain:
        return self._step(
            "with_day_of_year", lambda dt: dt.with_day_of_year(day_of_year)
        )

    def with_hour(self, hour: int) -> LocalDateTimeChain:
        return self._step("with_hour", lambda dt: dt.with_hour(hour))

    def with_minute(self, minute: int) -> LocalDateTimeChain:
        return self._step("with_minute", lambda dt: dt.with_minute(minute))

    def with_second(self, second: int) -> LocalDateTimeChain:
        return self._step("with_second", lambda dt: dt.with_second(second))

    def with_nano(self, nanosecond: int) -> LocalDateTimeChain:
        return self._step("with_nano", lambda dt: dt.with_nano(nanosecond))

    def with_field(
        self, field: Field, value: int | TemporalValue
    ) -> LocalDateTimeChain:
        return self._step("with_field", lambda dt: dt.with_field(field, value))


class OffsetDateTimeChain(Chain["OffsetDateTime"]):
    """Chain of OffsetDateTime mutations."""

    __slots__ = ()

    _type_name = "OffsetDateTime"

    def plus_years(self, years: int) -> OffsetDateTimeChain:
        return self._step("plus_years", lambda o: o.plus_years(years))

    def minus_years(self, years: int) -> OffsetDateTimeChain:
        return self._step("minus_years", lambda o: o.minus_years(years))

    def plus_months(self, months: int) -> OffsetDateTimeChain:
        return self._step("plus_months", lambda o: o.plus_months(months))

    def minus_months(self, months: int) -> OffsetDateTimeChain:
        return self._step("minus_months", lambda o: o.minus_months(months))

    def plus_weeks(self, weeks: int) -> OffsetDateTimeChain:
        return self._step("plus_weeks", lambda o: o.plus_weeks(weeks))

    def minus_weeks(self, weeks: int) -> OffsetDateTimeChain:
        return self._step("minus_weeks", lambda o: o.minus_weeks(weeks))

    def plus_days(self, days: int) -> OffsetDateTimeChain:
        return self._step("plus_days", lambda o: o.plus_days(days))

    def minus_days(self, days: int) -> OffsetDateTimeChain:
        return self._step("minus_days", lambda o: o.minus_days(days))

    def plus_hours(self, hours: int) -> OffsetDateTimeChain:
        return self._step("plus_hours", lambda o: o.plus_hours(hours))

    def minus_hours(self, hours: int) -> OffsetDateTimeChain:
        return self._step("minus_hours", lambda o: o.minus_hours(hours))

    def plus_minutes(self, minutes: int) -> OffsetDateTimeChain:
        return self._step("plus_minutes", lambda o: o.plus_minutes(minutes))

    def minus_minutes(self, minutes: int) -> OffsetDateTimeChain:
        return self._step("minus_minutes", lambda o: o.minus_minutes(minutes))

    def plus_seconds(self, seconds: int) -> OffsetDateTimeChain:
        return self._step("plus_seconds", lambda o: o.plus_seconds(seconds))

    def minus_seconds(self, seconds: int) -> OffsetDateTimeChain:
        return self._step("minus_seconds", lambda o: o.minus_seconds(seconds))

    def plus_nanos(self, nanos: int) -> OffsetDateTimeChain:
        return self._step("plus_nanos", lambda o: o.plus_nanos(nanos))

    def minus_nanos(self, nanos: int) -> OffsetDateTimeChain:
        return self._step("minus_nanos", lambda o: o.minus_nanos(nanos))

    def with_year(self, year: int) -> OffsetDateTimeChain:
        return self._step("with_year", lambda o: o.with_year(year))

    def with_month(self, month: int) -> OffsetDateTimeChain:
        return self._step("with_month", lambda o: o.with_month(month))

    def with_day_of_month(self, day: int) -> OffsetDateTimeChain:
        return self._step("with_day_of_month", lambda o: o.with_day_of_month(day))

    def with_day_of_year(self, day_of_year: int) -> OffsetDateTimeChain:
        return self._step("with_day_of_year", lambda o: o.with_day_of_year(day_of_year))

    def with_hour(self, hour: int) -> OffsetDateTimeChain:
        return self._step("with_hour", lambda o: o.with_hour(hour))

    def with_minute(self, minute: int) -> OffsetDateTimeChain:
        return self._step("with_minute", lambda o: o.with_minute(minute))

    def with_second(self, second: int) -> OffsetDateTimeChain:
        return self._step("with_second", lambda o: o.with_second(second))

    def with_nano(self, nanosecond: int) -> OffsetDateTimeChain:
        return self._step("with_nano", lambda o: o.with_nano(nanosecond))

    def with_offset_same_local(self, offset: ZoneOffset) -> OffsetDateTimeChain:
        return self._step(
            "with_offset_same_local", lambda o: o.with_offset_same_local(offset)
        )

    def with_offset_same_instant(self, offset: ZoneOffset) -> OffsetDateTimeChain:
        return self._step(
            "with_offset_same_instant", lambda o: o.with_offset_same_instant(offset)
        )

    def with_field(
        self, field: Field, value: int | TemporalValue
    ) -> OffsetDateTimeChain:
        return self._step("with_field", lambda o: o.with_field(field, value))


class YearMonthChain(Chain["YearMonth"]):
    """Chain of YearMonth mutations."""

    __slots__ = ()

    _type_name = "YearMonth"

    def plus_months(self, months: int) -> YearMonthChain:
        return self._step("plus_months", lambda ym: ym.plus_months(months))

    def minus_months(self, months: int) -> YearMonthChain:
        return self._step("minus_months", lambda ym: ym.minus_months(months))

    def plus_years(self, years: int) -> YearMonthChain:
        return self._step("plus_years", lambda ym: ym.plus_years(years))

    def minus_years(self, years: int) -> YearMonthChain:
        return self._step("minus_years", lambda ym: ym.minus_years(years))

    def with_month(self, month: int) -> YearMonthChain:
        return self._step("with_month", lambda ym: ym.with_month(month))

    def with_year(self, year: int) -> YearMonthChain:
        return self._step("with_year", lambda ym: ym.with_year(year))

    def with_field(self, field: Field, value: int | TemporalValue) -> YearMonthChain:
        return self._step("with_field", lambda ym: ym.with_field(field, value))


__all__ = [
    "Chain",
    "LocalDateChain",
    "LocalTimeChain",
    "LocalDateTimeChain",
    "OffsetDateTimeChain",
    "YearMonthChain",
]
