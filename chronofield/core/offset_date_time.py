"""OffsetDateTime class: a local date-time at a fixed offset from UTC.

An OffsetDateTime identifies an instant on the time-line. Two values with
different offsets can denote the same instant; ``is_equal`` compares
instants while ``==`` compares all components.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, ClassVar

from chronofield._internal.arith import compare_keys
from chronofield._internal.constants import NANOS_PER_MICROSECOND
from chronofield.core.local_date import LocalDate
from chronofield.core.local_date_time import LocalDateTime
from chronofield.core.local_time import LocalTime
from chronofield.core.zone_offset import ZoneOffset
from chronofield.errors import OverflowError
from chronofield.units.day_of_week import DayOfWeek
from chronofield.units.field import Field
from chronofield.units.month import Month
from chronofield.units.temporal_value import TemporalValue, field_argument

if TYPE_CHECKING:
    from chronofield.chain import OffsetDateTimeChain


class OffsetDateTime:
    """A date-time with an offset from UTC, such as 2024-03-15T14:30:45+09:00.

    Examples:
        >>> nine = ZoneOffset.of_hours(9)
        >>> odt = OffsetDateTime(2024, 3, 15, 14, 30, 45, offset=nine)
        >>> str(odt.to_utc())
        '2024-03-15T05:30:45Z'
        >>> odt.is_equal(odt.to_utc())
        True
        >>> odt == odt.to_utc()
        False
    """

    __slots__ = ("_date_time", "_offset")

    MIN: ClassVar[OffsetDateTime]
    MAX: ClassVar[OffsetDateTime]
    _zero_instance: ClassVar[OffsetDateTime | None] = None

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        *,
        offset: ZoneOffset,
    ) -> None:
        """Create an OffsetDateTime from its components.

        Raises:
            FieldOutOfRangeError: If a component is outside its range.
            InvalidDateError: If the date does not exist.
            TypeError: If offset is not a ZoneOffset.
        """
        if not isinstance(offset, ZoneOffset):
            raise TypeError(f"offset must be ZoneOffset, got {type(offset).__name__}")
        self._date_time: LocalDateTime = LocalDateTime(
            year, month, day, hour, minute, second, nanosecond
        )
        self._offset: ZoneOffset = offset

    @classmethod
    def _of_unchecked(
        cls, date_time: LocalDateTime, offset: ZoneOffset
    ) -> OffsetDateTime:
        instance = object.__new__(cls)
        instance._date_time = date_time
        instance._offset = offset
        return instance

    @classmethod
    def of(cls, date_time: LocalDateTime, offset: ZoneOffset) -> OffsetDateTime:
        """Combine a local date-time with an offset.

        If either is unset the result is the zero value.
        """
        if date_time.is_zero() or offset.is_zero():
            return cls.zero()
        return cls._of_unchecked(date_time, offset)

    @classmethod
    def zero(cls) -> OffsetDateTime:
        """Return the unset OffsetDateTime."""
        if cls._zero_instance is None:
            cls._zero_instance = cls._of_unchecked(
                LocalDateTime.zero(), ZoneOffset.zero()
            )
        return cls._zero_instance

    @classmethod
    def now(cls) -> OffsetDateTime:
        """Return the current date-time at the system's local offset."""
        return cls.from_datetime(_datetime.datetime.now().astimezone())

    @classmethod
    def now_utc(cls) -> OffsetDateTime:
        return cls.from_datetime(_datetime.datetime.now(_datetime.timezone.utc))

    @classmethod
    def of_epoch_second(
        cls, epoch_second: int, nanosecond: int, offset: ZoneOffset
    ) -> OffsetDateTime:
        """Create the OffsetDateTime for an instant, seen from an offset.

        Examples:
            >>> str(OffsetDateTime.of_epoch_second(0, 0, ZoneOffset.utc()))
            '1970-01-01T00:00:00Z'
        """
        date_time = LocalDateTime.of_epoch_second(epoch_second, nanosecond, offset)
        return cls.of(date_time, offset)

    @classmethod
    def from_datetime(cls, dt: _datetime.datetime) -> OffsetDateTime:
        """Create from a standard library datetime.

        A naive datetime is read as UTC.
        """
        if dt.tzinfo is None or dt.utcoffset() is None:
            offset = ZoneOffset.utc()
        else:
            offset = ZoneOffset.from_timezone(dt.tzinfo, dt)
        return cls._of_unchecked(LocalDateTime.from_datetime(dt), offset)

    @classmethod
    def from_iso_format(cls, s: str) -> OffsetDateTime:
        """Parse ``<date-time><offset>``, e.g. ``2024-03-15T14:30:45+09:00``."""
        from chronofield.format.iso8601 import parse_offset_date_time

        return parse_offset_date_time(s)

    # Properties

    @property
    def local_date_time(self) -> LocalDateTime:
        return self._date_time

    @property
    def date(self) -> LocalDate:
        return self._date_time.date

    @property
    def time(self) -> LocalTime:
        return self._date_time.time

    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    @property
    def year(self) -> int:
        return self._date_time.year

    @property
    def month(self) -> Month:
        return self._date_time.month

    @property
    def day(self) -> int:
        return self._date_time.day

    @property
    def day_of_week(self) -> DayOfWeek:
        return self._date_time.day_of_week

    @property
    def day_of_year(self) -> int:
        return self._date_time.day_of_year

    @property
    def is_leap_year(self) -> bool:
        return self._date_time.is_leap_year

    @property
    def hour(self) -> int:
        return self._date_time.hour

    @property
    def minute(self) -> int:
        return self._date_time.minute

    @property
    def second(self) -> int:
        return self._date_time.second

    @property
    def millisecond(self) -> int:
        return self._date_time.millisecond

    @property
    def microsecond(self) -> int:
        return self._date_time.microsecond

    @property
    def nanosecond(self) -> int:
        return self._date_time.nanosecond

    @property
    def instant(self) -> tuple[int, int]:
        """Return the ``(epoch_second, nanosecond)`` pair, independent of offset."""
        return (self.to_epoch_second(), self.nanosecond)

    def to_epoch_second(self) -> int:
        """Return seconds since 1970-01-01T00:00:00Z (0 for the zero value)."""
        return self._date_time.to_epoch_second(self._offset)

    # Field protocol

    def is_zero(self) -> bool:
        return self._date_time.is_zero()

    def is_supported_field(self, field: Field) -> bool:
        if self.is_zero():
            return False
        return (
            field is Field.INSTANT_SECONDS
            or self._offset.is_supported_field(field)
            or self._date_time.is_supported_field(field)
        )

    def get_field(self, field: Field) -> TemporalValue:
        """Return a field value.

        Examples:
            >>> odt = OffsetDateTime(1970, 1, 1, 9, offset=ZoneOffset.of_hours(9))
            >>> odt.get_field(Field.INSTANT_SECONDS)
            TemporalValue(0)
            >>> odt.get_field(Field.OFFSET_SECONDS)
            TemporalValue(32400)
        """
        if self.is_zero():
            return TemporalValue.unsupported()
        if field is Field.INSTANT_SECONDS:
            return TemporalValue.of(self.to_epoch_second())
        if field is Field.OFFSET_SECONDS:
            return self._offset.get_field(field)
        return self._date_time.get_field(field)

    # Offset changes

    def with_offset_same_local(self, offset: ZoneOffset) -> OffsetDateTime:
        """Return a copy at a different offset with the same local date-time.

        The result denotes a different instant unless the offsets match.
        """
        if self.is_zero() or offset == self._offset:
            return self
        return OffsetDateTime.of(self._date_time, offset)

    def with_offset_same_instant(self, offset: ZoneOffset) -> OffsetDateTime:
        """Return a copy at a different offset denoting the same instant.

        Raises:
            OverflowError: If the adjusted local date-time leaves the
                supported range.

        Examples:
            >>> odt = OffsetDateTime(2024, 3, 15, 14, 30, offset=ZoneOffset.of_hours(9))
            >>> str(odt.with_offset_same_instant(ZoneOffset.of_hours(-5)))
            '2024-03-15T00:30:00-05:00'
        """
        if self.is_zero() or offset == self._offset:
            return self
        if offset.is_zero():
            return OffsetDateTime.zero()
        difference = offset.total_seconds - self._offset.total_seconds
        date_time = self._date_time.plus_seconds(difference)
        return OffsetDateTime._of_unchecked(date_time, offset)

    def to_utc(self) -> OffsetDateTime:
        return self.with_offset_same_instant(ZoneOffset.utc())

    # Arithmetic

    def _with(self, date_time: LocalDateTime) -> OffsetDateTime:
        if date_time is self._date_time:
            return self
        return OffsetDateTime._of_unchecked(date_time, self._offset)

    def plus_years(self, years: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_years(years))

    def minus_years(self, years: int) -> OffsetDateTime:
        return self._with(self._date_time.minus_years(years))

    def plus_months(self, months: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_months(months))

    def minus_months(self, months: int) -> OffsetDateTime:
        return self._with(self._date_time.minus_months(months))

    def plus_weeks(self, weeks: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_weeks(weeks))

    def minus_weeks(self, weeks: int) -> OffsetDateTime:
        return self._with(self._date_time.minus_weeks(weeks))

    def plus_days(self, days: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_days(days))

    def minus_days(self, days: int) -> OffsetDateTime:
        return self._with(self._date_time.minus_days(days))

    def plus_hours(self, hours: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_hours(hours))

    def minus_hours(self, hours: int) -> OffsetDateTime:
        return self._with(self._date_time.minus_hours(hours))

    def plus_minutes(self, minutes: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_minutes(minutes))

    def minus_minutes(self, minutes: int) -> OffsetDateTime:
        return self._with(self._date_time.minus_minutes(minutes))

    def plus_seconds(self, seconds: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_seconds(seconds))

    def minus_seconds(self, seconds: int) -> OffsetDateTime:
        return self._with(self._date_time.minus_seconds(seconds))

    def plus_nanos(self, nanos: int) -> OffsetDateTime:
        return self._with(self._date_time.plus_nanos(nanos))

    def minus_nanos(self, nanos: int) -> OffsetDateTime:
        return self._with(self._date_time.minus_nanos(nanos))

    # Replacement

    def with_year(self, year: int) -> OffsetDateTime:
        return self._with(self._date_time.with_year(year))

    def with_month(self, month: int) -> OffsetDateTime:
        return self._with(self._date_time.with_month(month))

    def with_day_of_month(self, day: int) -> OffsetDateTime:
        return self._with(self._date_time.with_day_of_month(day))

    def with_day_of_year(self, day_of_year: int) -> OffsetDateTime:
        return self._with(self._date_time.with_day_of_year(day_of_year))

    def with_hour(self, hour: int) -> OffsetDateTime:
        return self._with(self._date_time.with_hour(hour))

    def with_minute(self, minute: int) -> OffsetDateTime:
        return self._with(self._date_time.with_minute(minute))

    def with_second(self, second: int) -> OffsetDateTime:
        return self._with(self._date_time.with_second(second))

    def with_nano(self, nanosecond: int) -> OffsetDateTime:
        return self._with(self._date_time.with_nano(nanosecond))

    def with_field(self, field: Field, value: int | TemporalValue) -> OffsetDateTime:
        """Return a copy with one field replaced.

        INSTANT_SECONDS moves to that epoch second keeping the nanosecond
        and offset; OFFSET_SECONDS replaces the offset keeping the local
        date-time. Every other field goes to the local date-time.

        Raises:
            FieldOutOfRangeError: If value is outside the field's range or
                the instant leaves the supported range.

        Examples:
            >>> odt = OffsetDateTime(2024, 1, 1, offset=ZoneOffset.utc())
            >>> str(odt.with_field(Field.OFFSET_SECONDS, 3600))
            '2024-01-01T00:00:00+01:00'
        """
        if field is Field.INSTANT_SECONDS:
            v = field.check_valid_value(field_argument(value))
            if self.is_zero():
                return self
            return OffsetDateTime.of_epoch_second(v, self.nanosecond, self._offset)
        if field is Field.OFFSET_SECONDS:
            v = field.check_valid_value(field_argument(value))
            if self.is_zero():
                return self
            return self.with_offset_same_local(ZoneOffset(v))
        return self._with(self._date_time.with_field(field, value))

    # Conversion

    def to_datetime(self) -> _datetime.datetime:
        """Convert to an aware standard library datetime, truncating to micros.

        Raises:
            OverflowError: If unset or the year is outside 1-9999.
        """
        if self.is_zero():
            raise OverflowError("OffsetDateTime.zero() has no datetime equivalent")
        d = self.date.to_date()
        return _datetime.datetime(
            d.year,
            d.month,
            d.day,
            self.hour,
            self.minute,
            self.second,
            self.nanosecond // NANOS_PER_MICROSECOND,
            tzinfo=self._offset.to_timezone(),
        )

    def chain(self) -> OffsetDateTimeChain:
        """Return a chain for composing several fallible mutations."""
        from chronofield.chain import OffsetDateTimeChain

        return OffsetDateTimeChain(self)

    # Comparison

    def _instant_key(self) -> tuple[int, int, int]:
        if self.is_zero():
            return (0, 0, 0)
        return (1, self.to_epoch_second(), self.nanosecond)

    def _key(self) -> tuple[int, ...]:
        return self._instant_key() + self._date_time._key()

    def compare_to(self, other: OffsetDateTime) -> int:
        """Order by instant, then by local date-time.

        Two values at the same instant with different offsets are not
        equal under this ordering, but ``is_equal`` reports them equal.
        """
        return compare_keys(self._key(), other._key())

    def is_equal(self, other: OffsetDateTime) -> bool:
        """Return True if both denote the same instant."""
        return self._instant_key() == other._instant_key()

    def is_before(self, other: OffsetDateTime) -> bool:
        return self._instant_key() < other._instant_key()

    def is_after(self, other: OffsetDateTime) -> bool:
        return self._instant_key() > other._instant_key()

    # Formatting

    def to_iso_format(self) -> str:
        """Return ``<date-time><offset>``, or empty if unset."""
        if self.is_zero():
            return ""
        return f"{self._date_time.to_iso_format()}{self._offset.to_iso_format()}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._date_time == other._date_time and self._offset == other._offset

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash((self._date_time, self._offset))

    def __repr__(self) -> str:
        if self.is_zero():
            return "OffsetDateTime.zero()"
        return f"OffsetDateTime.of({self._date_time!r}, {self._offset!r})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        return not self.is_zero()


OffsetDateTime.MIN = OffsetDateTime._of_unchecked(LocalDateTime.MIN, ZoneOffset.MAX)
OffsetDateTime.MAX = OffsetDateTime._of_unchecked(LocalDateTime.MAX, ZoneOffset.MIN)


__all__ = ["OffsetDateTime"]
