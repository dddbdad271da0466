"""ZoneOffset class representing a fixed offset from UTC.

This module provides the ZoneOffset class, a signed number of seconds
between -18:00 and +18:00. There is no time-zone rule database: an offset
never changes with the date.
"""

from __future__ import annotations

import datetime as _datetime
from typing import ClassVar

from chronofield._internal.arith import compare_keys
from chronofield._internal.constants import (
    MAX_OFFSET_SECONDS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from chronofield._internal.validation import require_int
from chronofield.errors import FieldOutOfRangeError, OverflowError
from chronofield.units.field import Field, ValueRange
from chronofield.units.temporal_value import TemporalValue

_HOURS_RANGE = ValueRange(-18, 18)
_MINUTES_RANGE = ValueRange(-59, 59)
_SECONDS_RANGE = ValueRange(-59, 59)


class ZoneOffset:
    """A fixed offset from UTC, such as +09:00 or -05:30.

    Offsets are stored as total seconds and range from -18:00 to +18:00.
    ``ZoneOffset.utc()`` is the zero offset; ``ZoneOffset.zero()`` is the
    unset value and is not equal to UTC.

    Examples:
        >>> str(ZoneOffset.of_hours(9))
        '+09:00'
        >>> str(ZoneOffset.utc())
        'Z'
        >>> ZoneOffset.of(-5, -30).total_seconds
        -19800
    """

    __slots__ = ("_seconds",)

    MIN: ClassVar[ZoneOffset]
    MAX: ClassVar[ZoneOffset]
    _utc_instance: ClassVar[ZoneOffset | None] = None
    _zero_instance: ClassVar[ZoneOffset | None] = None

    def __init__(self, total_seconds: int) -> None:
        """Create a ZoneOffset from total seconds.

        Args:
            total_seconds: Seconds east of UTC (-64800 to 64800).

        Raises:
            FieldOutOfRangeError: If total_seconds is outside +/-18 hours.
        """
        require_int(total_seconds, "total_seconds")
        self._seconds: int | None = Field.OFFSET_SECONDS.check_valid_value(
            total_seconds
        )

    @classmethod
    def _of_unchecked(cls, total_seconds: int | None) -> ZoneOffset:
        instance = object.__new__(cls)
        instance._seconds = total_seconds
        return instance

    @classmethod
    def of(cls, hours: int, minutes: int = 0, seconds: int = 0) -> ZoneOffset:
        """Create a ZoneOffset from hours, minutes and seconds.

        All non-zero components must carry the same sign, so -05:30 is
        ``of(-5, -30)``.

        Args:
            hours: Offset hours (-18 to 18).
            minutes: Offset minutes (-59 to 59).
            seconds: Offset seconds (-59 to 59).

        Raises:
            FieldOutOfRangeError: If a component is out of range, the signs
                disagree, or the total exceeds 18 hours.

        Examples:
            >>> ZoneOffset.of(5, 30, 0).total_seconds
            19800
            >>> ZoneOffset.of(5, -30)
            Traceback (most recent call last):
            ...
            chronofield.errors.FieldOutOfRangeError: invalid value of OffsetMinutes (valid range 0 - 59): -30
        """
        require_int(hours, "hours")
        require_int(minutes, "minutes")
        require_int(seconds, "seconds")
        _HOURS_RANGE.check("OffsetHours", hours)
        if hours > 0:
            ValueRange(0, 59).check("OffsetMinutes", minutes)
            ValueRange(0, 59).check("OffsetSeconds", seconds)
        elif hours < 0:
            ValueRange(-59, 0).check("OffsetMinutes", minutes)
            ValueRange(-59, 0).check("OffsetSeconds", seconds)
        else:
            _MINUTES_RANGE.check("OffsetMinutes", minutes)
            _SECONDS_RANGE.check("OffsetSeconds", seconds)
            if (minutes > 0 and seconds < 0) or (minutes < 0 and seconds > 0):
                raise FieldOutOfRangeError("OffsetSeconds", seconds, _SECONDS_RANGE)
        total = hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
        return cls(total)

    @classmethod
    def of_hours(cls, hours: int) -> ZoneOffset:
        return cls.of(hours)

    @classmethod
    def of_hours_minutes(cls, hours: int, minutes: int) -> ZoneOffset:
        return cls.of(hours, minutes)

    @classmethod
    def of_total_seconds(cls, total_seconds: int) -> ZoneOffset:
        return cls(total_seconds)

    @classmethod
    def utc(cls) -> ZoneOffset:
        """Return the UTC offset singleton."""
        if cls._utc_instance is None:
            cls._utc_instance = cls._of_unchecked(0)
        return cls._utc_instance

    @classmethod
    def zero(cls) -> ZoneOffset:
        """Return the unset offset. It is not UTC."""
        if cls._zero_instance is None:
            cls._zero_instance = cls._of_unchecked(None)
        return cls._zero_instance

    @classmethod
    def from_timezone(
        cls, tz: _datetime.tzinfo, dt: _datetime.datetime | None = None
    ) -> ZoneOffset:
        """Create a ZoneOffset from a tzinfo's UTC offset.

        Sub-second parts of the offset are dropped.

        Raises:
            FieldOutOfRangeError: If the offset exceeds 18 hours.
        """
        delta = tz.utcoffset(dt)
        if delta is None:
            return cls.utc()
        return cls(int(delta.total_seconds()))

    @classmethod
    def from_iso_format(cls, s: str) -> ZoneOffset:
        """Parse ``Z``, ``+HH``, ``+HHMM``, ``+HH:MM`` or ``+HH:MM:SS``.

        Examples:
            >>> ZoneOffset.from_iso_format("+0530").total_seconds
            19800
        """
        from chronofield.format.iso8601 import parse_zone_offset

        return parse_zone_offset(s)

    @property
    def total_seconds(self) -> int:
        return self._seconds or 0

    @property
    def hours(self) -> int:
        """Return the hours component, carrying the offset's sign."""
        return _truncate(self.total_seconds, SECONDS_PER_HOUR)

    @property
    def minutes(self) -> int:
        """Return the minutes component, carrying the offset's sign."""
        total = self.total_seconds
        return _sign(total) * ((abs(total) // SECONDS_PER_MINUTE) % 60)

    @property
    def seconds(self) -> int:
        """Return the seconds component, carrying the offset's sign."""
        total = self.total_seconds
        return _sign(total) * (abs(total) % SECONDS_PER_MINUTE)

    @property
    def is_utc(self) -> bool:
        return self._seconds == 0

    def is_zero(self) -> bool:
        return self._seconds is None

    def is_supported_field(self, field: Field) -> bool:
        return not self.is_zero() and field is Field.OFFSET_SECONDS

    def get_field(self, field: Field) -> TemporalValue:
        if self.is_zero() or field is not Field.OFFSET_SECONDS:
            return TemporalValue.unsupported()
        return TemporalValue(self.total_seconds)

    def to_timezone(self) -> _datetime.timezone:
        """Convert to a standard library ``datetime.timezone``.

        Raises:
            OverflowError: If this is the zero value.
        """
        if self.is_zero():
            raise OverflowError("ZoneOffset.zero() has no datetime.timezone equivalent")
        if self.is_utc:
            return _datetime.timezone.utc
        return _datetime.timezone(_datetime.timedelta(seconds=self.total_seconds))

    def compare_to(self, other: ZoneOffset) -> int:
        return compare_keys(self._key(), other._key())

    def _key(self) -> tuple[int, int]:
        return (0, 0) if self._seconds is None else (1, self._seconds)

    def to_iso_format(self) -> str:
        """Return ``Z``, ``+HH:MM`` or ``+HH:MM:SS``; empty if unset.

        Examples:
            >>> ZoneOffset(3723).to_iso_format()
            '+01:02:03'
            >>> ZoneOffset(-9000).to_iso_format()
            '-02:30'
        """
        if self._seconds is None:
            return ""
        if self._seconds == 0:
            return "Z"
        sign = "-" if self._seconds < 0 else "+"
        absolute = abs(self._seconds)
        hh = absolute // SECONDS_PER_HOUR
        mm = (absolute // SECONDS_PER_MINUTE) % 60
        ss = absolute % SECONDS_PER_MINUTE
        if ss:
            return f"{sign}{hh:02d}:{mm:02d}:{ss:02d}"
        return f"{sign}{hh:02d}:{mm:02d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._seconds == other._seconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        if self._seconds is None:
            return "ZoneOffset.zero()"
        if self._seconds == 0:
            return "ZoneOffset.utc()"
        return f"ZoneOffset({self._seconds})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """The unset offset is falsy; UTC is truthy."""
        return self._seconds is not None


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _truncate(value: int, divisor: int) -> int:
    """Divide rounding towards zero."""
    return _sign(value) * (abs(value) // divisor)


ZoneOffset.MIN = ZoneOffset._of_unchecked(-MAX_OFFSET_SECONDS)
ZoneOffset.MAX = ZoneOffset._of_unchecked(MAX_OFFSET_SECONDS)


__all__ = ["ZoneOffset"]
