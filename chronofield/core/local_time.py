"""LocalTime class representing a time of day.

This module provides the LocalTime class for representing a wall-clock time
with nanosecond precision, without a date or offset.
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, ClassVar

from chronofield._internal.arith import compare_keys
from chronofield._internal.constants import (
    HOURS_PER_DAY,
    MINUTES_PER_DAY,
    MINUTES_PER_HOUR,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    SECONDS_PER_MINUTE,
)
from chronofield._internal.validation import require_int, validate_fields
from chronofield.errors import OverflowError, UnsupportedFieldError
from chronofield.units.field import Field
from chronofield.units.temporal_value import TemporalValue, field_argument

if TYPE_CHECKING:
    from chronofield.chain import LocalTimeChain
    from chronofield.core.local_date import LocalDate
    from chronofield.core.local_date_time import LocalDateTime


class LocalTime:
    """A time of day without a date or offset, such as 14:30:45.123.

    LocalTime is stored as nanoseconds since midnight. Arithmetic wraps
    around midnight: adding 25 hours to 23:00 gives 00:00. The zero value
    ``LocalTime.zero()`` is distinct from midnight.

    Attributes:
        hour: Hour of day (0-23).
        minute: Minute of hour (0-59).
        second: Second of minute (0-59).
        nanosecond: Nanosecond of second (0-999999999).

    Examples:
        >>> t = LocalTime(14, 30, 45, 100_000_000)
        >>> str(t)
        '14:30:45.100'
        >>> t.plus_hours(12).hour
        2

        >>> LocalTime.zero() == LocalTime.midnight()
        False
    """

    __slots__ = ("_nanos",)

    MIN: ClassVar[LocalTime]
    MAX: ClassVar[LocalTime]
    _zero_instance: ClassVar[LocalTime | None] = None

    @validate_fields(
        hour=Field.HOUR_OF_DAY,
        minute=Field.MINUTE_OF_HOUR,
        second=Field.SECOND_OF_MINUTE,
        nanosecond=Field.NANO_OF_SECOND,
    )
    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a LocalTime from its components.

        Args:
            hour: Hour of day (0-23).
            minute: Minute of hour (0-59).
            second: Second of minute (0-59).
            nanosecond: Nanosecond of second (0-999999999).

        Raises:
            FieldOutOfRangeError: If a component is outside its range.

        Examples:
            >>> LocalTime(14, 30)
            LocalTime(14, 30, 0, 0)
            >>> LocalTime(24, 0)
            Traceback (most recent call last):
            ...
            chronofield.errors.FieldOutOfRangeError: invalid value of HourOfDay (valid range 0 - 23): 24
        """
        self._nanos: int | None = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )

    @classmethod
    def _from_nanos(cls, nanos: int) -> LocalTime:
        """Create a LocalTime from a nano-of-day known to be in range."""
        instance = object.__new__(cls)
        instance._nanos = nanos
        return instance

    @classmethod
    def of(
        cls, hour: int = 0, minute: int = 0, second: int = 0, nanosecond: int = 0
    ) -> LocalTime:
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> LocalTime:
        """Create a LocalTime from nanoseconds since midnight.

        Raises:
            FieldOutOfRangeError: If nano_of_day is outside one day.
        """
        require_int(nano_of_day, "nano_of_day")
        return cls._from_nanos(Field.NANO_OF_DAY.check_valid_value(nano_of_day))

    @classmethod
    def of_second_of_day(cls, second_of_day: int) -> LocalTime:
        """Create a LocalTime from seconds since midnight.

        Raises:
            FieldOutOfRangeError: If second_of_day is outside 0-86399.
        """
        require_int(second_of_day, "second_of_day")
        Field.SECOND_OF_DAY.check_valid_value(second_of_day)
        return cls._from_nanos(second_of_day * NANOS_PER_SECOND)

    @classmethod
    def zero(cls) -> LocalTime:
        """Return the unset LocalTime."""
        if cls._zero_instance is None:
            instance = object.__new__(cls)
            instance._nanos = None
            cls._zero_instance = instance
        return cls._zero_instance

    @classmethod
    def midnight(cls) -> LocalTime:
        return cls._from_nanos(0)

    @classmethod
    def noon(cls) -> LocalTime:
        return cls._from_nanos(12 * NANOS_PER_HOUR)

    @classmethod
    def now(cls) -> LocalTime:
        """Return the current local wall-clock time, to the microsecond."""
        return cls.from_time(_datetime.datetime.now().time())

    @classmethod
    def from_time(cls, t: _datetime.time) -> LocalTime:
        """Create a LocalTime from a standard library time.

        Any tzinfo on the input is ignored.
        """
        return cls(t.hour, t.minute, t.second, t.microsecond * NANOS_PER_MICROSECOND)

    @classmethod
    def from_iso_format(cls, s: str) -> LocalTime:
        """Parse ``HH:MM:SS[.fffffffff]``.

        Examples:
            >>> LocalTime.from_iso_format("14:30:45.1")
            LocalTime(14, 30, 45, 100000000)
        """
        from chronofield.format.iso8601 import parse_local_time

        return parse_local_time(s)

    # Properties

    @property
    def hour(self) -> int:
        return self._nano_of_day() // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._nano_of_day() // NANOS_PER_MINUTE) % MINUTES_PER_HOUR

    @property
    def second(self) -> int:
        return (self._nano_of_day() // NANOS_PER_SECOND) % SECONDS_PER_MINUTE

    @property
    def nanosecond(self) -> int:
        return self._nano_of_day() % NANOS_PER_SECOND

    @property
    def microsecond(self) -> int:
        """Return the microsecond of second, truncated."""
        return self.nanosecond // NANOS_PER_MICROSECOND

    @property
    def millisecond(self) -> int:
        """Return the millisecond of second, truncated."""
        return self.nanosecond // NANOS_PER_MILLISECOND

    def _nano_of_day(self) -> int:
        return self._nanos or 0

    def to_nano_of_day(self) -> int:
        """Return nanoseconds since midnight (0 for the zero value)."""
        return self._nano_of_day()

    def to_second_of_day(self) -> int:
        return self._nano_of_day() // NANOS_PER_SECOND

    # Field protocol

    def is_zero(self) -> bool:
        return self._nanos is None

    def is_supported_field(self, field: Field) -> bool:
        return not self.is_zero() and field.is_time_based

    def get_field(self, field: Field) -> TemporalValue:
        """Return the value of a time-based field.

        Examples:
            >>> LocalTime(0, 15).get_field(Field.CLOCK_HOUR_OF_DAY)
            TemporalValue(24)
            >>> LocalTime(13, 0).get_field(Field.CLOCK_HOUR_OF_AMPM)
            TemporalValue(1)
        """
        if self.is_zero() or not field.is_time_based:
            return TemporalValue.unsupported()
        return TemporalValue(_TIME_GETTERS[field](self))

    # Arithmetic

    def plus_hours(self, hours: int) -> LocalTime:
        """Return a copy with hours added, wrapping around midnight."""
        require_int(hours, "hours")
        if hours == 0 or self.is_zero():
            return self
        new_hour = (hours % HOURS_PER_DAY + self.hour + HOURS_PER_DAY) % HOURS_PER_DAY
        return self._with_hour_unchecked(new_hour)

    def minus_hours(self, hours: int) -> LocalTime:
        return self.plus_hours(-(hours % HOURS_PER_DAY))

    def plus_minutes(self, minutes: int) -> LocalTime:
        """Return a copy with minutes added, wrapping around midnight."""
        require_int(minutes, "minutes")
        if minutes == 0 or self.is_zero():
            return self
        mofd = self.hour * MINUTES_PER_HOUR + self.minute
        new_mofd = (minutes % MINUTES_PER_DAY + mofd) % MINUTES_PER_DAY
        if mofd == new_mofd:
            return self
        nanos = self._nano_of_day() + (new_mofd - mofd) * NANOS_PER_MINUTE
        return LocalTime._from_nanos(nanos)

    def minus_minutes(self, minutes: int) -> LocalTime:
        return self.plus_minutes(-(minutes % MINUTES_PER_DAY))

    def plus_seconds(self, seconds: int) -> LocalTime:
        """Return a copy with seconds added, wrapping around midnight."""
        require_int(seconds, "seconds")
        if seconds == 0 or self.is_zero():
            return self
        sofd = self.to_second_of_day()
        new_sofd = (seconds % SECONDS_PER_DAY + sofd) % SECONDS_PER_DAY
        if sofd == new_sofd:
            return self
        return LocalTime._from_nanos(new_sofd * NANOS_PER_SECOND + self.nanosecond)

    def minus_seconds(self, seconds: int) -> LocalTime:
        return self.plus_seconds(-(seconds % SECONDS_PER_DAY))

    def plus_nanos(self, nanos: int) -> LocalTime:
        """Return a copy with nanoseconds added, wrapping around midnight.

        Examples:
            >>> str(LocalTime(23, 59, 59, 999_999_999).plus_nanos(1))
            '00:00:00'
        """
        require_int(nanos, "nanos")
        if nanos == 0 or self.is_zero():
            return self
        nofd = self._nano_of_day()
        new_nofd = (nanos % NANOS_PER_DAY + nofd + NANOS_PER_DAY) % NANOS_PER_DAY
        if nofd == new_nofd:
            return self
        return LocalTime._from_nanos(new_nofd)

    def minus_nanos(self, nanos: int) -> LocalTime:
        return self.plus_nanos(-(nanos % NANOS_PER_DAY))

    # Replacement

    def _with_hour_unchecked(self, hour: int) -> LocalTime:
        nanos = self._nano_of_day() % NANOS_PER_HOUR + hour * NANOS_PER_HOUR
        return LocalTime._from_nanos(nanos)

    def with_hour(self, hour: int) -> LocalTime:
        """Return a copy with the hour replaced.

        Raises:
            FieldOutOfRangeError: If hour is outside 0-23.
        """
        require_int(hour, "hour")
        Field.HOUR_OF_DAY.check_valid_value(hour)
        if self.is_zero():
            return self
        return self._with_hour_unchecked(hour)

    def with_minute(self, minute: int) -> LocalTime:
        require_int(minute, "minute")
        Field.MINUTE_OF_HOUR.check_valid_value(minute)
        if self.is_zero():
            return self
        return LocalTime(self.hour, minute, self.second, self.nanosecond)

    def with_second(self, second: int) -> LocalTime:
        require_int(second, "second")
        Field.SECOND_OF_MINUTE.check_valid_value(second)
        if self.is_zero():
            return self
        return LocalTime(self.hour, self.minute, second, self.nanosecond)

    def with_nano(self, nanosecond: int) -> LocalTime:
        require_int(nanosecond, "nanosecond")
        Field.NANO_OF_SECOND.check_valid_value(nanosecond)
        if self.is_zero():
            return self
        return LocalTime(self.hour, self.minute, self.second, nanosecond)

    def with_field(self, field: Field, value: int | TemporalValue) -> LocalTime:
        """Return a copy with one time-based field replaced.

        Sub-second fields replace the fraction at their scale, the of-day
        fields replace the whole time, and the AM/PM family moves the hour
        while keeping the other components.

        Raises:
            UnsupportedFieldError: If field is not time-based.
            FieldOutOfRangeError: If value is outside the field's range.

        Examples:
            >>> LocalTime(9, 15).with_field(Field.AMPM_OF_DAY, 1)
            LocalTime(21, 15, 0, 0)
            >>> LocalTime(9, 15).with_field(Field.CLOCK_HOUR_OF_DAY, 24)
            LocalTime(0, 15, 0, 0)
        """
        if not field.is_time_based:
            raise UnsupportedFieldError(field, "LocalTime")
        v = field.check_valid_value(field_argument(value))
        if self.is_zero():
            return self
        hour = self.hour
        if field is Field.NANO_OF_DAY:
            return LocalTime._from_nanos(v)
        if field is Field.MICRO_OF_DAY:
            return LocalTime._from_nanos(v * NANOS_PER_MICROSECOND)
        if field is Field.MILLI_OF_DAY:
            return LocalTime._from_nanos(v * NANOS_PER_MILLISECOND)
        if field is Field.NANO_OF_SECOND:
            return self.with_nano(v)
        if field is Field.MICRO_OF_SECOND:
            return self.with_nano(v * NANOS_PER_MICROSECOND)
        if field is Field.MILLI_OF_SECOND:
            return self.with_nano(v * NANOS_PER_MILLISECOND)
        if field is Field.SECOND_OF_MINUTE:
            return self.with_second(v)
        if field is Field.SECOND_OF_DAY:
            return self.plus_seconds(v - self.to_second_of_day())
        if field is Field.MINUTE_OF_HOUR:
            return self.with_minute(v)
        if field is Field.MINUTE_OF_DAY:
            return self.plus_minutes(v - (hour * MINUTES_PER_HOUR + self.minute))
        if field is Field.HOUR_OF_AMPM:
            return self.plus_hours(v - hour % 12)
        if field is Field.CLOCK_HOUR_OF_AMPM:
            return self.plus_hours((0 if v == 12 else v) - hour % 12)
        if field is Field.HOUR_OF_DAY:
            return self.with_hour(v)
        if field is Field.CLOCK_HOUR_OF_DAY:
            return self.with_hour(0 if v == 24 else v)
        # AMPM_OF_DAY
        return self.plus_hours((v - hour // 12) * 12)

    # Conversion

    def at_date(self, date: LocalDate) -> LocalDateTime:
        """Combine this time with a date to create a LocalDateTime."""
        from chronofield.core.local_date_time import LocalDateTime

        return LocalDateTime.of(date, self)

    def to_time(self) -> _datetime.time:
        """Convert to a standard library time, truncating to microseconds.

        Raises:
            OverflowError: If this is the zero value.
        """
        if self.is_zero():
            raise OverflowError("LocalTime.zero() has no datetime.time equivalent")
        return _datetime.time(self.hour, self.minute, self.second, self.microsecond)

    def chain(self) -> LocalTimeChain:
        """Return a chain for composing several fallible mutations."""
        from chronofield.chain import LocalTimeChain

        return LocalTimeChain(self)

    # Comparison

    def _key(self) -> tuple[int, int]:
        # Zero sorts before midnight
        return (0, 0) if self._nanos is None else (1, self._nanos)

    def compare_to(self, other: LocalTime) -> int:
        return compare_keys(self._key(), other._key())

    def is_before(self, other: LocalTime) -> bool:
        return self.compare_to(other) < 0

    def is_after(self, other: LocalTime) -> bool:
        return self.compare_to(other) > 0

    # Formatting

    def to_iso_format(self) -> str:
        """Return ``HH:MM:SS`` with the fraction aligned to 3, 6 or 9 digits.

        Examples:
            >>> LocalTime(14, 30, 45, 123_400_000).to_iso_format()
            '14:30:45.123400'
            >>> LocalTime(14, 30, 45, 1).to_iso_format()
            '14:30:45.000000001'
        """
        if self.is_zero():
            return ""
        from chronofield.format.iso8601 import format_fraction

        return (
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
            f"{format_fraction(self.nanosecond)}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        if self.is_zero():
            return "LocalTime.zero()"
        return (
            f"LocalTime({self.hour}, {self.minute}, {self.second}, {self.nanosecond})"
        )

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """The unset time is falsy; midnight is truthy."""
        return not self.is_zero()


_TIME_GETTERS = {
    Field.NANO_OF_SECOND: lambda t: t.nanosecond,
    Field.NANO_OF_DAY: lambda t: t.to_nano_of_day(),
    Field.MICRO_OF_SECOND: lambda t: t.nanosecond // NANOS_PER_MICROSECOND,
    Field.MICRO_OF_DAY: lambda t: t.to_nano_of_day() // NANOS_PER_MICROSECOND,
    Field.MILLI_OF_SECOND: lambda t: t.nanosecond // NANOS_PER_MILLISECOND,
    Field.MILLI_OF_DAY: lambda t: t.to_nano_of_day() // NANOS_PER_MILLISECOND,
    Field.SECOND_OF_MINUTE: lambda t: t.second,
    Field.SECOND_OF_DAY: lambda t: t.to_second_of_day(),
    Field.MINUTE_OF_HOUR: lambda t: t.minute,
    Field.MINUTE_OF_DAY: lambda t: t.hour * MINUTES_PER_HOUR + t.minute,
    Field.HOUR_OF_AMPM: lambda t: t.hour % 12,
    Field.CLOCK_HOUR_OF_AMPM: lambda t: t.hour % 12 or 12,
    Field.HOUR_OF_DAY: lambda t: t.hour,
    Field.CLOCK_HOUR_OF_DAY: lambda t: t.hour or 24,
    Field.AMPM_OF_DAY: lambda t: t.hour // 12,
}

LocalTime.MIN = LocalTime._from_nanos(0)
LocalTime.MAX = LocalTime._from_nanos(NANOS_PER_DAY - 1)


__all__ = ["LocalTime"]
