"""LocalDateTime class combining a date and a time of day.

This module provides the LocalDateTime class, a LocalDate paired with a
LocalTime and no offset. Time arithmetic carries whole days into the date.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, ClassVar

from chronofield._internal.arith import compare_keys, floor_div, floor_mod
from chronofield._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
)
from chronofield._internal.validation import require_int
from chronofield.core.local_date import LocalDate
from chronofield.core.local_time import LocalTime
from chronofield.errors import OverflowError, UnsupportedFieldError
from chronofield.units.day_of_week import DayOfWeek
from chronofield.units.field import Field
from chronofield.units.month import Month
from chronofield.units.temporal_value import TemporalValue

if TYPE_CHECKING:
    from chronofield.chain import LocalDateTimeChain
    from chronofield.core.offset_date_time import OffsetDateTime
    from chronofield.core.zone_offset import ZoneOffset


class LocalDateTime:
    """A date and time without an offset, such as 2024-03-15T14:30:45.

    Field queries route to whichever of the date or time supports the
    field. Adding hours, minutes, seconds or nanoseconds rolls the date
    forward or back when the time passes midnight.

    Examples:
        >>> dt = LocalDateTime(2024, 12, 31, 23, 30)
        >>> str(dt.plus_hours(1))
        '2025-01-01T00:30:00'
        >>> str(dt.minus_minutes(24 * 60))
        '2024-12-30T23:30:00'
    """

    __slots__ = ("_date", "_time")

    MIN: ClassVar[LocalDateTime]
    MAX: ClassVar[LocalDateTime]
    _zero_instance: ClassVar[LocalDateTime | None] = None

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a LocalDateTime from its components.

        Raises:
            FieldOutOfRangeError: If a component is outside its range.
            InvalidDateError: If the date does not exist.
        """
        self._date: LocalDate = LocalDate(year, month, day)
        self._time: LocalTime = LocalTime(hour, minute, second, nanosecond)

    @classmethod
    def _of_unchecked(cls, date: LocalDate, time: LocalTime) -> LocalDateTime:
        instance = object.__new__(cls)
        instance._date = date
        instance._time = time
        return instance

    @classmethod
    def of(cls, date: LocalDate, time: LocalTime) -> LocalDateTime:
        """Combine a date and a time.

        If either component is unset the result is the zero value.

        Examples:
            >>> LocalDateTime.of(LocalDate(2024, 3, 15), LocalTime(9, 0))
            LocalDateTime(2024, 3, 15, 9, 0, 0, 0)
            >>> LocalDateTime.of(LocalDate(2024, 3, 15), LocalTime.zero()).is_zero()
            True
        """
        if date.is_zero() or time.is_zero():
            return cls.zero()
        return cls._of_unchecked(date, time)

    @classmethod
    def zero(cls) -> LocalDateTime:
        """Return the unset LocalDateTime."""
        if cls._zero_instance is None:
            cls._zero_instance = cls._of_unchecked(LocalDate.zero(), LocalTime.zero())
        return cls._zero_instance

    @classmethod
    def now(cls) -> LocalDateTime:
        return cls.from_datetime(_datetime.datetime.now())

    @classmethod
    def of_epoch_second(
        cls, epoch_second: int, nanosecond: int, offset: ZoneOffset
    ) -> LocalDateTime:
        """Create the local date-time at an instant, seen from an offset.

        Args:
            epoch_second: Seconds since 1970-01-01T00:00:00Z.
            nanosecond: Nanosecond of second (0-999999999).
            offset: The offset the local date-time is observed at.

        Raises:
            FieldOutOfRangeError: If nanosecond is out of range or the
                resulting date is outside the supported range.

        Examples:
            >>> from chronofield.core.zone_offset import ZoneOffset
            >>> LocalDateTime.of_epoch_second(0, 0, ZoneOffset.of_hours(9))
            LocalDateTime(1970, 1, 1, 9, 0, 0, 0)
        """
        require_int(epoch_second, "epoch_second")
        require_int(nanosecond, "nanosecond")
        Field.NANO_OF_SECOND.check_valid_value(nanosecond)
        local_second = epoch_second + offset.total_seconds
        epoch_day = floor_div(local_second, SECONDS_PER_DAY)
        second_of_day = floor_mod(local_second, SECONDS_PER_DAY)
        date = LocalDate.of_epoch_day(epoch_day)
        time = LocalTime._from_nanos(second_of_day * NANOS_PER_SECOND + nanosecond)
        return cls._of_unchecked(date, time)

    @classmethod
    def from_datetime(cls, dt: _datetime.datetime) -> LocalDateTime:
        """Create from a standard library datetime, ignoring any tzinfo."""
        return cls._of_unchecked(
            LocalDate.from_date(dt),
            LocalTime.from_time(dt.time()),
        )

    @classmethod
    def from_iso_format(cls, s: str) -> LocalDateTime:
        """Parse ``YYYY-MM-DDTHH:MM:SS[.f]``; ``t`` or a space also separate.

        Examples:
            >>> LocalDateTime.from_iso_format("2024-03-15 14:30:45")
            LocalDateTime(2024, 3, 15, 14, 30, 45, 0)
        """
        from chronofield.format.iso8601 import parse_local_date_time

        return parse_local_date_time(s)

    # Properties

    @property
    def date(self) -> LocalDate:
        return self._date

    @property
    def time(self) -> LocalTime:
        return self._time

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> Month:
        return self._date.month

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def day_of_week(self) -> DayOfWeek:
        return self._date.day_of_week

    @property
    def day_of_year(self) -> int:
        return self._date.day_of_year

    @property
    def is_leap_year(self) -> bool:
        return self._date.is_leap_year

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def millisecond(self) -> int:
        return self._time.millisecond

    @property
    def microsecond(self) -> int:
        return self._time.microsecond

    @property
    def nanosecond(self) -> int:
        return self._time.nanosecond

    # Field protocol

    def is_zero(self) -> bool:
        return self._date.is_zero()

    def is_supported_field(self, field: Field) -> bool:
        return self._date.is_supported_field(field) or self._time.is_supported_field(
            field
        )

    def get_field(self, field: Field) -> TemporalValue:
        if self.is_zero():
            return TemporalValue.unsupported()
        if field.is_time_based:
            return self._time.get_field(field)
        return self._date.get_field(field)

    # Date arithmetic

    def _with(self, date: LocalDate, time: LocalTime) -> LocalDateTime:
        if date is self._date and time is self._time:
            return self
        return LocalDateTime._of_unchecked(date, time)

    def plus_years(self, years: int) -> LocalDateTime:
        return self._with(self._date.plus_years(years), self._time)

    def minus_years(self, years: int) -> LocalDateTime:
        return self._with(self._date.minus_years(years), self._time)

    def plus_months(self, months: int) -> LocalDateTime:
        return self._with(self._date.plus_months(months), self._time)

    def minus_months(self, months: int) -> LocalDateTime:
        return self._with(self._date.minus_months(months), self._time)

    def plus_weeks(self, weeks: int) -> LocalDateTime:
        return self._with(self._date.plus_weeks(weeks), self._time)

    def minus_weeks(self, weeks: int) -> LocalDateTime:
        return self._with(self._date.minus_weeks(weeks), self._time)

    def plus_days(self, days: int) -> LocalDateTime:
        return self._with(self._date.plus_days(days), self._time)

    def minus_days(self, days: int) -> LocalDateTime:
        return self._with(self._date.minus_days(days), self._time)

    # Time arithmetic

    def _plus_with_overflow(
        self, hours: int, minutes: int, seconds: int, nanos: int, sign: int
    ) -> LocalDateTime:
        """Add a time amount, carrying whole days into the date.

        Raises:
            OverflowError: If the resulting date is outside the supported range.
        """
        for amount, name in (
            (hours, "hours"),
            (minutes, "minutes"),
            (seconds, "seconds"),
            (nanos, "nanos"),
        ):
            require_int(amount, name)
        if self.is_zero() or hours == minutes == seconds == nanos == 0:
            return self
        total = sign * (
            hours * NANOS_PER_HOUR
            + minutes * NANOS_PER_MINUTE
            + seconds * NANOS_PER_SECOND
            + nanos
        )
        total += self._time.to_nano_of_day()
        days = floor_div(total, NANOS_PER_DAY)
        nano_of_day = floor_mod(total, NANOS_PER_DAY)
        date = self._date.plus_days(days)
        if nano_of_day == self._time.to_nano_of_day():
            time = self._time
        else:
            time = LocalTime._from_nanos(nano_of_day)
        return self._with(date, time)

    def plus_hours(self, hours: int) -> LocalDateTime:
        return self._plus_with_overflow(hours, 0, 0, 0, 1)

    def minus_hours(self, hours: int) -> LocalDateTime:
        return self._plus_with_overflow(hours, 0, 0, 0, -1)

    def plus_minutes(self, minutes: int) -> LocalDateTime:
        return self._plus_with_overflow(0, minutes, 0, 0, 1)

    def minus_minutes(self, minutes: int) -> LocalDateTime:
        return self._plus_with_overflow(0, minutes, 0, 0, -1)

    def plus_seconds(self, seconds: int) -> LocalDateTime:
        return self._plus_with_overflow(0, 0, seconds, 0, 1)

    def minus_seconds(self, seconds: int) -> LocalDateTime:
        return self._plus_with_overflow(0, 0, seconds, 0, -1)

    def plus_nanos(self, nanos: int) -> LocalDateTime:
        return self._plus_with_overflow(0, 0, 0, nanos, 1)

    def minus_nanos(self, nanos: int) -> LocalDateTime:
        return self._plus_with_overflow(0, 0, 0, nanos, -1)

    # Replacement

    def with_year(self, year: int) -> LocalDateTime:
        return self._with(self._date.with_year(year), self._time)

    def with_month(self, month: int) -> LocalDateTime:
        return self._with(self._date.with_month(month), self._time)

    def with_day_of_month(self, day: int) -> LocalDateTime:
        return self._with(self._date.with_day_of_month(day), self._time)

    def with_day_of_year(self, day_of_year: int) -> LocalDateTime:
        return self._with(self._date.with_day_of_year(day_of_year), self._time)

    def with_hour(self, hour: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_hour(hour))

    def with_minute(self, minute: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_minute(minute))

    def with_second(self, second: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_second(second))

    def with_nano(self, nanosecond: int) -> LocalDateTime:
        return self._with(self._date, self._time.with_nano(nanosecond))

    def with_date(self, date: LocalDate) -> LocalDateTime:
        return LocalDateTime.of(date, self._time)

    def with_time(self, time: LocalTime) -> LocalDateTime:
        return LocalDateTime.of(self._date, time)

    def with_field(self, field: Field, value: int | TemporalValue) -> LocalDateTime:
        """Return a copy with one field replaced.

        Time-based fields go to the time, date-based fields to the date.

        Raises:
            UnsupportedFieldError: For INSTANT_SECONDS and OFFSET_SECONDS.
            FieldOutOfRangeError: If value is outside the field's range.
        """
        if field.is_time_based:
            return self._with(self._date, self._time.with_field(field, value))
        if field.is_date_based:
            return self._with(self._date.with_field(field, value), self._time)
        raise UnsupportedFieldError(field, "LocalDateTime")

    # Conversion

    def to_epoch_second(self, offset: ZoneOffset) -> int:
        """Return seconds since the epoch for this local date-time at offset.

        Examples:
            >>> from chronofield.core.zone_offset import ZoneOffset
            >>> LocalDateTime(1970, 1, 1, 9).to_epoch_second(ZoneOffset.of_hours(9))
            0
        """
        if self.is_zero():
            return 0
        return (
            self._date.to_epoch_day() * SECONDS_PER_DAY
            + self._time.to_second_of_day()
            - offset.total_seconds
        )

    def at_offset(self, offset: ZoneOffset) -> OffsetDateTime:
        from chronofield.core.offset_date_time import OffsetDateTime

        return OffsetDateTime.of(self, offset)

    def to_datetime(self) -> _datetime.datetime:
        """Convert to a naive standard library datetime, truncating to micros.

        Raises:
            OverflowError: If unset or the year is outside 1-9999.
        """
        if self.is_zero():
            raise OverflowError("LocalDateTime.zero() has no datetime equivalent")
        d = self._date.to_date()
        return _datetime.datetime(
            d.year,
            d.month,
            d.day,
            self.hour,
            self.minute,
            self.second,
            self.nanosecond // NANOS_PER_MICROSECOND,
        )

    def chain(self) -> LocalDateTimeChain:
        """Return a chain for composing several fallible mutations."""
        from chronofield.chain import LocalDateTimeChain

        return LocalDateTimeChain(self)

    # Comparison

    def _key(self) -> tuple[int, ...]:
        return self._date._key() + self._time._key()

    def compare_to(self, other: LocalDateTime) -> int:
        return compare_keys(self._key(), other._key())

    def is_before(self, other: LocalDateTime) -> bool:
        return self.compare_to(other) < 0

    def is_after(self, other: LocalDateTime) -> bool:
        return self.compare_to(other) > 0

    # Formatting

    def to_iso_format(self) -> str:
        """Return ``YYYY-MM-DDTHH:MM:SS[.fff]``, or empty if unset."""
        if self.is_zero():
            return ""
        return f"{self._date.to_iso_format()}T{self._time.to_iso_format()}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._date == other._date and self._time == other._time

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash((self._date, self._time))

    def __repr__(self) -> str:
        if self.is_zero():
            return "LocalDateTime.zero()"
        return (
            f"LocalDateTime({self.year}, {int(self.month)}, {self.day}, "
            f"{self.hour}, {self.minute}, {self.second}, {self.nanosecond})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        return not self.is_zero()


LocalDateTime.MIN = LocalDateTime._of_unchecked(LocalDate.MIN, LocalTime.MIN)
LocalDateTime.MAX = LocalDateTime._of_unchecked(LocalDate.MAX, LocalTime.MAX)


__all__ = ["LocalDateTime"]
