"""LocalDate class representing a calendar date.

This module provides the LocalDate class for representing dates in the
proleptic Gregorian calendar, without a time of day or offset.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, ClassVar

from chronofield._internal.arith import compare_keys, multiply_exact
from chronofield._internal.calendar import (
    day_of_week_of,
    days_in_year,
    first_day_of_year,
    from_epoch_day,
    is_leap_year,
    month_length,
    to_epoch_day,
    year_day_to_month_day,
)
from chronofield._internal.constants import (
    MAX_EPOCH_DAY,
    MAX_YEAR,
    MIN_EPOCH_DAY,
    MIN_YEAR,
)
from chronofield._internal.validation import (
    require_int,
    validate_date,
    validate_year_day,
)
from chronofield.errors import OverflowError, UnsupportedFieldError
from chronofield.units.day_of_week import DayOfWeek
from chronofield.units.era import Era
from chronofield.units.field import Field
from chronofield.units.month import Month
from chronofield.units.temporal_value import TemporalValue, field_argument

if TYPE_CHECKING:
    from chronofield.chain import LocalDateChain
    from chronofield.core.local_date_time import LocalDateTime
    from chronofield.core.local_time import LocalTime
    from chronofield.core.year_month import YearMonth


class LocalDate:
    """A date without a time-zone in the ISO-8601 calendar system.

    LocalDate represents a (year, month, day-of-month) triple such as
    2024-03-15. The calendar is proleptic Gregorian: the Gregorian leap-year
    rules are extended indefinitely into the past, and year 0 is 1 BCE.
    Years range from -999999999 to 999999999.

    ``LocalDate.zero()`` is a distinguished "unset" value. It is not equal
    to any real date, sorts before all of them, is falsy, answers
    Unsupported to every field query and passes through arithmetic
    unchanged.

    Attributes:
        year: The proleptic year.
        month: The month as a Month enum (an int in 1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = LocalDate(2024, 3, 15)
        >>> d.day_of_week
        <DayOfWeek.FRIDAY: 5>
        >>> d.day_of_year
        75
        >>> d.to_epoch_day()
        19797

        >>> str(LocalDate(2024, 1, 31).plus_months(1))
        '2024-02-29'
    """

    __slots__ = ("_year", "_month", "_day")

    MIN: ClassVar[LocalDate]
    MAX: ClassVar[LocalDate]
    EPOCH: ClassVar[LocalDate]
    _zero_instance: ClassVar[LocalDate | None] = None

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a LocalDate from year, month and day.

        Args:
            year: The proleptic year (-999999999 to 999999999).
            month: The month (1-12), an int or Month.
            day: The day of month (1 to the length of the month).

        Raises:
            FieldOutOfRangeError: If a component is outside its field range.
            InvalidDateError: If the day does not exist in that month.

        Examples:
            >>> LocalDate(2024, 2, 29)
            LocalDate(2024, 2, 29)

            >>> LocalDate(2023, 2, 29)
            Traceback (most recent call last):
            ...
            chronofield.errors.InvalidDateError: invalid date 'February 29' as '2023' is not a leap year
        """
        require_int(year, "year")
        require_int(month, "month")
        require_int(day, "day")
        validate_date(year, month, day)
        self._year: int = year
        self._month: int = int(month)
        self._day: int = day

    @classmethod
    def _of_unchecked(cls, year: int, month: int, day: int) -> LocalDate:
        """Create a LocalDate from components known to be valid."""
        instance = object.__new__(cls)
        instance._year = year
        instance._month = month
        instance._day = day
        return instance

    @classmethod
    def of(cls, year: int, month: int, day: int) -> LocalDate:
        """Create a LocalDate; equivalent to the constructor."""
        return cls(year, month, day)

    @classmethod
    def zero(cls) -> LocalDate:
        """Return the unset LocalDate."""
        if cls._zero_instance is None:
            cls._zero_instance = cls._of_unchecked(0, 0, 0)
        return cls._zero_instance

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> LocalDate:
        """Create a LocalDate from a year and day-of-year.

        Args:
            year: The proleptic year.
            day_of_year: The day of year (1-365, or 366 in leap years).

        Raises:
            FieldOutOfRangeError: If a component is outside its field range.
            InvalidDateError: If day_of_year is 366 in a non-leap year.

        Examples:
            >>> LocalDate.of_year_day(2024, 60)
            LocalDate(2024, 2, 29)
        """
        require_int(year, "year")
        require_int(day_of_year, "day_of_year")
        validate_year_day(year, day_of_year)
        month, day = year_day_to_month_day(year, day_of_year)
        return cls._of_unchecked(year, month, day)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> LocalDate:
        """Create a LocalDate from the number of days since 1970-01-01.

        Raises:
            FieldOutOfRangeError: If epoch_day is outside the supported range.

        Examples:
            >>> LocalDate.of_epoch_day(0)
            LocalDate(1970, 1, 1)
            >>> LocalDate.of_epoch_day(-1)
            LocalDate(1969, 12, 31)
        """
        require_int(epoch_day, "epoch_day")
        Field.EPOCH_DAY.check_valid_value(epoch_day)
        return cls._of_unchecked(*from_epoch_day(epoch_day))

    @classmethod
    def today(cls) -> LocalDate:
        """Return the current local date."""
        return cls.from_date(_datetime.date.today())

    @classmethod
    def from_date(cls, d: _datetime.date) -> LocalDate:
        """Create a LocalDate from a standard library date (or datetime)."""
        return cls._of_unchecked(d.year, d.month, d.day)

    @classmethod
    def from_iso_format(cls, s: str) -> LocalDate:
        """Parse a date in ``YYYY-MM-DD`` form.

        Args:
            s: The text to parse. The empty string yields the zero value.

        Raises:
            ParseError: If the text is not a date.
            InvalidDateError: If the components do not form a date.

        Examples:
            >>> LocalDate.from_iso_format("2024-03-15")
            LocalDate(2024, 3, 15)
            >>> LocalDate.from_iso_format("-0044-03-15")
            LocalDate(-44, 3, 15)
        """
        from chronofield.format.iso8601 import parse_local_date

        return parse_local_date(s)

    # Properties

    @property
    def year(self) -> int:
        """Return the proleptic year."""
        return self._year

    @property
    def month(self) -> Month:
        """Return the month of year."""
        return Month(self._month)

    @property
    def day(self) -> int:
        """Return the day of month."""
        return self._day

    @property
    def day_of_month(self) -> int:
        return self._day

    @property
    def day_of_week(self) -> DayOfWeek:
        """Return the ISO day of week, Monday=1 through Sunday=7.

        Examples:
            >>> LocalDate(1970, 1, 1).day_of_week
            <DayOfWeek.THURSDAY: 4>
        """
        return DayOfWeek(day_of_week_of(self.to_epoch_day()))

    @property
    def day_of_year(self) -> int:
        """Return the day of year (1-366)."""
        return first_day_of_year(self._month, is_leap_year(self._year)) + self._day - 1

    @property
    def era(self) -> Era:
        """Return the era: CE for year >= 1, BCE otherwise."""
        return Era.of_year(self._year)

    @property
    def year_of_era(self) -> int:
        """Return the year within the era; year 0 is 1 BCE."""
        return self._year if self._year >= 1 else 1 - self._year

    @property
    def proleptic_month(self) -> int:
        """Return the months since year 0, month 1."""
        return self._year * 12 + (self._month - 1)

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    def length_of_month(self) -> int:
        return month_length(self._month, is_leap_year(self._year))

    def length_of_year(self) -> int:
        return days_in_year(self._year)

    def to_epoch_day(self) -> int:
        """Return the number of days since 1970-01-01.

        Examples:
            >>> LocalDate(2024, 3, 15).to_epoch_day()
            19797
        """
        return to_epoch_day(self._year, self._month, self._day)

    # Field protocol

    def is_zero(self) -> bool:
        return self._month == 0

    def is_supported_field(self, field: Field) -> bool:
        return not self.is_zero() and field.is_date_based

    def get_field(self, field: Field) -> TemporalValue:
        """Return the value of a date-based field.

        Examples:
            >>> LocalDate(2024, 3, 15).get_field(Field.ALIGNED_WEEK_OF_MONTH)
            TemporalValue(3)
            >>> LocalDate(2024, 3, 15).get_field(Field.HOUR_OF_DAY)
            TemporalValue.unsupported()
        """
        if self.is_zero() or not field.is_date_based:
            return TemporalValue.unsupported()
        return TemporalValue(_DATE_GETTERS[field](self))

    # Arithmetic

    def plus_days(self, days: int) -> LocalDate:
        """Return a copy with days added.

        Raises:
            OverflowError: If the result is outside the supported range.
        """
        require_int(days, "days")
        if days == 0 or self.is_zero():
            return self
        epoch_day = self.to_epoch_day() + days
        if not (MIN_EPOCH_DAY <= epoch_day <= MAX_EPOCH_DAY):
            raise OverflowError()
        return LocalDate._of_unchecked(*from_epoch_day(epoch_day))

    def minus_days(self, days: int) -> LocalDate:
        return self.plus_days(-days)

    def plus_weeks(self, weeks: int) -> LocalDate:
        """Return a copy with weeks added.

        Raises:
            OverflowError: If 7 * weeks leaves 64 bits or the result is
                outside the supported range.
        """
        require_int(weeks, "weeks")
        return self.plus_days(multiply_exact(weeks, 7))

    def minus_weeks(self, weeks: int) -> LocalDate:
        return self.plus_weeks(-weeks)

    def plus_months(self, months: int) -> LocalDate:
        """Return a copy with months added.

        The day of month is clipped to the last valid day of the target
        month, so 2024-01-31 plus one month is 2024-02-29. The clipping
        applies to the result only; 2024-01-31 plus two months is
        2024-03-31.

        Raises:
            OverflowError: If the result is outside the supported years.
        """
        require_int(months, "months")
        if months == 0 or self.is_zero():
            return self
        from chronofield.core.year_month import YearMonth

        target = YearMonth._of_unchecked(self._year, self._month).plus_months(months)
        return self._resolve_previous_valid(target.year, int(target.month), self._day)

    def minus_months(self, months: int) -> LocalDate:
        return self.plus_months(-months)

    def plus_years(self, years: int) -> LocalDate:
        """Return a copy with years added, clipping February 29.

        Raises:
            OverflowError: If the result is outside the supported years.
        """
        require_int(years, "years")
        if years == 0 or self.is_zero():
            return self
        year = self._year + years
        if not (MIN_YEAR <= year <= MAX_YEAR):
            raise OverflowError()
        return self._resolve_previous_valid(year, self._month, self._day)

    def minus_years(self, years: int) -> LocalDate:
        return self.plus_years(-years)

    @staticmethod
    def _resolve_previous_valid(year: int, month: int, day: int) -> LocalDate:
        day = min(day, month_length(month, is_leap_year(year)))
        return LocalDate._of_unchecked(year, month, day)

    # Replacement

    def with_day_of_month(self, day: int) -> LocalDate:
        """Return a copy with the day of month replaced.

        Raises:
            FieldOutOfRangeError: If day is outside 1-31.
            InvalidDateError: If the day does not exist in this month.
        """
        if self.is_zero() or day == self._day:
            return self
        return LocalDate(self._year, self._month, day)

    def with_day_of_year(self, day_of_year: int) -> LocalDate:
        """Return a copy with the day of year replaced."""
        if self.is_zero():
            return self
        return LocalDate.of_year_day(self._year, day_of_year)

    def with_month(self, month: int) -> LocalDate:
        """Return a copy with the month replaced, clipping the day.

        Raises:
            FieldOutOfRangeError: If month is outside 1-12.
        """
        require_int(month, "month")
        Field.MONTH_OF_YEAR.check_valid_value(month)
        if self.is_zero():
            return self
        return self._resolve_previous_valid(self._year, int(month), self._day)

    def with_year(self, year: int) -> LocalDate:
        """Return a copy with the year replaced, clipping February 29.

        Raises:
            FieldOutOfRangeError: If year is outside the supported range.
        """
        require_int(year, "year")
        Field.YEAR.check_valid_value(year)
        if self.is_zero():
            return self
        return self._resolve_previous_valid(year, self._month, self._day)

    def with_field(self, field: Field, value: int | TemporalValue) -> LocalDate:
        """Return a copy with one date-based field replaced.

        Day-of-week and aligned fields move the date by the difference
        from the current value; the era flips the year to ``1 - year``.

        Args:
            field: A date-based field.
            value: The new value, an int or a valid TemporalValue.

        Raises:
            UnsupportedFieldError: If field is not date-based.
            FieldOutOfRangeError: If value is outside the field's range.
            InvalidDateError: If the replacement produces no real date.
            OverflowError: If the result is outside the supported range.

        Examples:
            >>> LocalDate(2024, 3, 15).with_field(Field.DAY_OF_WEEK, 1)
            LocalDate(2024, 3, 11)
            >>> LocalDate(2024, 3, 15).with_field(Field.ERA, 0)
            LocalDate(-2023, 3, 15)
        """
        if not field.is_date_based:
            raise UnsupportedFieldError(field, "LocalDate")
        v = field.check_valid_value(field_argument(value))
        if self.is_zero():
            return self
        if field is Field.DAY_OF_WEEK:
            return self.plus_days(v - self.day_of_week)
        if field is Field.ALIGNED_DAY_OF_WEEK_IN_MONTH:
            return self.plus_days(v - _aligned_day_of_week(self._day))
        if field is Field.ALIGNED_DAY_OF_WEEK_IN_YEAR:
            return self.plus_days(v - _aligned_day_of_week(self.day_of_year))
        if field is Field.DAY_OF_MONTH:
            return self.with_day_of_month(v)
        if field is Field.DAY_OF_YEAR:
            return self.with_day_of_year(v)
        if field is Field.EPOCH_DAY:
            return LocalDate.of_epoch_day(v)
        if field is Field.ALIGNED_WEEK_OF_MONTH:
            return self.plus_weeks(v - _aligned_week(self._day))
        if field is Field.ALIGNED_WEEK_OF_YEAR:
            return self.plus_weeks(v - _aligned_week(self.day_of_year))
        if field is Field.MONTH_OF_YEAR:
            return self.with_month(v)
        if field is Field.PROLEPTIC_MONTH:
            return self.plus_months(v - self.proleptic_month)
        if field is Field.YEAR_OF_ERA:
            return self.with_year(v if self._year >= 1 else 1 - v)
        if field is Field.YEAR:
            return self.with_year(v)
        # ERA
        if v == self.era:
            return self
        return self.with_year(1 - self._year)

    # Conversion

    def at_time(self, time: LocalTime) -> LocalDateTime:
        """Combine this date with a time to create a LocalDateTime."""
        from chronofield.core.local_date_time import LocalDateTime

        return LocalDateTime.of(self, time)

    def at_start_of_day(self) -> LocalDateTime:
        from chronofield.core.local_time import LocalTime

        return self.at_time(LocalTime.midnight())

    def to_year_month(self) -> YearMonth:
        from chronofield.core.year_month import YearMonth

        if self.is_zero():
            return YearMonth.zero()
        return YearMonth._of_unchecked(self._year, self._month)

    def to_date(self) -> _datetime.date:
        """Convert to a standard library date.

        Raises:
            OverflowError: If the year is outside 1-9999.
        """
        if self.is_zero() or not (_datetime.MINYEAR <= self._year <= _datetime.MAXYEAR):
            raise OverflowError(f"{self!r} has no datetime.date equivalent")
        return _datetime.date(self._year, self._month, self._day)

    def chain(self) -> LocalDateChain:
        """Return a chain for composing several fallible mutations."""
        from chronofield.chain import LocalDateChain

        return LocalDateChain(self)

    # Comparison

    def _key(self) -> tuple[int, int, int, int]:
        # Zero sorts before every real date
        return (0 if self.is_zero() else 1, self._year, self._month, self._day)

    def compare_to(self, other: LocalDate) -> int:
        """Return -1, 0 or 1 as this date is before, equal to or after other."""
        return compare_keys(self._key(), other._key())

    def is_before(self, other: LocalDate) -> bool:
        return self.compare_to(other) < 0

    def is_after(self, other: LocalDate) -> bool:
        return self.compare_to(other) > 0

    # Formatting

    def to_iso_format(self) -> str:
        """Return the date as ``YYYY-MM-DD``, or the empty string if unset.

        Examples:
            >>> LocalDate(2024, 3, 15).to_iso_format()
            '2024-03-15'
            >>> LocalDate(-1, 1, 1).to_iso_format()
            '-0001-01-01'
        """
        if self.is_zero():
            return ""
        from chronofield.format.iso8601 import format_year

        return f"{format_year(self._year)}-{self._month:02d}-{self._day:02d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return (
            self._year == other._year
            and self._month == other._month
            and self._day == other._day
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash((self._year, self._month, self._day))

    def __repr__(self) -> str:
        if self.is_zero():
            return "LocalDate.zero()"
        return f"LocalDate({self._year}, {self._month}, {self._day})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """The unset date is falsy; every real date is truthy."""
        return not self.is_zero()


def _aligned_day_of_week(day_count: int) -> int:
    return (day_count - 1) % 7 + 1


def _aligned_week(day_count: int) -> int:
    return (day_count - 1) // 7 + 1


_DATE_GETTERS = {
    Field.DAY_OF_WEEK: lambda d: int(d.day_of_week),
    Field.ALIGNED_DAY_OF_WEEK_IN_MONTH: lambda d: _aligned_day_of_week(d.day),
    Field.ALIGNED_DAY_OF_WEEK_IN_YEAR: lambda d: _aligned_day_of_week(d.day_of_year),
    Field.DAY_OF_MONTH: lambda d: d.day,
    Field.DAY_OF_YEAR: lambda d: d.day_of_year,
    Field.EPOCH_DAY: lambda d: d.to_epoch_day(),
    Field.ALIGNED_WEEK_OF_MONTH: lambda d: _aligned_week(d.day),
    Field.ALIGNED_WEEK_OF_YEAR: lambda d: _aligned_week(d.day_of_year),
    Field.MONTH_OF_YEAR: lambda d: int(d.month),
    Field.PROLEPTIC_MONTH: lambda d: d.proleptic_month,
    Field.YEAR_OF_ERA: lambda d: d.year_of_era,
    Field.YEAR: lambda d: d.year,
    Field.ERA: lambda d: int(d.era),
}

LocalDate.MIN = LocalDate._of_unchecked(MIN_YEAR, 1, 1)
LocalDate.MAX = LocalDate._of_unchecked(MAX_YEAR, 12, 31)
LocalDate.EPOCH = LocalDate._of_unchecked(1970, 1, 1)


__all__ = ["LocalDate"]
