"""The closed catalog of date and time fields.

A field is a named, integer-valued component of a temporal value with a
documented valid range, for example ``Field.MONTH_OF_YEAR`` (1-12) or
``Field.NANO_OF_DAY`` (0-86399999999999).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chronofield._internal.arith import INT64_MAX, INT64_MIN
from chronofield._internal.constants import (
    MAX_EPOCH_DAY,
    MAX_OFFSET_SECONDS,
    MAX_YEAR,
    MIN_EPOCH_DAY,
    MIN_YEAR,
    NANOS_PER_DAY,
)
from chronofield.errors import FieldOutOfRangeError


@dataclass(frozen=True)
class ValueRange:
    """An inclusive range of valid values.

    Examples:
        >>> r = ValueRange(1, 12)
        >>> r.is_valid(12)
        True
        >>> r.is_valid(13)
        False
    """

    minimum: int
    maximum: int

    def is_valid(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum

    def check(self, name: Field | str, value: int) -> int:
        """Return value unchanged, or raise FieldOutOfRangeError naming it."""
        if not self.is_valid(value):
            raise FieldOutOfRangeError(name, value, self)
        return value

    def __str__(self) -> str:
        return f"{self.minimum} - {self.maximum}"


class Field(Enum):
    """Date and time fields, in the order of the ISO chronology.

    Time-based fields are derivable from the nano-of-day; date-based fields
    from the epoch day. INSTANT_SECONDS and OFFSET_SECONDS are neither.

    Examples:
        >>> Field.DAY_OF_MONTH.is_date_based
        True
        >>> Field.HOUR_OF_DAY.range
        ValueRange(minimum=0, maximum=23)
        >>> str(Field.NANO_OF_SECOND)
        'NanoOfSecond'
    """

    NANO_OF_SECOND = 1
    NANO_OF_DAY = 2
    MICRO_OF_SECOND = 3
    MICRO_OF_DAY = 4
    MILLI_OF_SECOND = 5
    MILLI_OF_DAY = 6
    SECOND_OF_MINUTE = 7
    SECOND_OF_DAY = 8
    MINUTE_OF_HOUR = 9
    MINUTE_OF_DAY = 10
    HOUR_OF_AMPM = 11
    CLOCK_HOUR_OF_AMPM = 12
    HOUR_OF_DAY = 13
    CLOCK_HOUR_OF_DAY = 14
    AMPM_OF_DAY = 15
    DAY_OF_WEEK = 16
    ALIGNED_DAY_OF_WEEK_IN_MONTH = 17
    ALIGNED_DAY_OF_WEEK_IN_YEAR = 18
    DAY_OF_MONTH = 19
    DAY_OF_YEAR = 20
    EPOCH_DAY = 21
    ALIGNED_WEEK_OF_MONTH = 22
    ALIGNED_WEEK_OF_YEAR = 23
    MONTH_OF_YEAR = 24
    PROLEPTIC_MONTH = 25
    YEAR_OF_ERA = 26
    YEAR = 27
    ERA = 28
    INSTANT_SECONDS = 29
    OFFSET_SECONDS = 30

    @classmethod
    def all_fields(cls) -> list[Field]:
        """Return every field in declaration order."""
        return list(cls)

    @property
    def is_time_based(self) -> bool:
        return Field.NANO_OF_SECOND.value <= self.value <= Field.AMPM_OF_DAY.value

    @property
    def is_date_based(self) -> bool:
        return Field.DAY_OF_WEEK.value <= self.value <= Field.ERA.value

    @property
    def range(self) -> ValueRange:
        """Return the documented range of valid values for this field."""
        return _RANGES[self]

    def is_valid_value(self, value: int) -> bool:
        return _RANGES[self].is_valid(value)

    def check_valid_value(self, value: int) -> int:
        """Check that value is within this field's range.

        Args:
            value: The candidate value.

        Returns:
            The value, unchanged.

        Raises:
            FieldOutOfRangeError: If the value is outside the range.

        Examples:
            >>> Field.MONTH_OF_YEAR.check_valid_value(12)
            12
        """
        return _RANGES[self].check(self, value)

    @property
    def display_name(self) -> str:
        """Return the CamelCase name, e.g. ``ClockHourOfAmPm``."""
        return _DISPLAY_NAMES.get(self) or "".join(
            part.capitalize() for part in self.name.split("_")
        )

    @property
    def java_name(self) -> str:
        """Return the equivalent java.time constant, e.g. ``ChronoField.YEAR``."""
        return f"ChronoField.{self.name}"

    def __str__(self) -> str:
        return self.display_name


_DISPLAY_NAMES: dict[Field, str] = {
    Field.HOUR_OF_AMPM: "HourOfAmPm",
    Field.CLOCK_HOUR_OF_AMPM: "ClockHourOfAmPm",
    Field.AMPM_OF_DAY: "AmPmOfDay",
}

_RANGES: dict[Field, ValueRange] = {
    Field.NANO_OF_SECOND: ValueRange(0, 999_999_999),
    Field.NANO_OF_DAY: ValueRange(0, NANOS_PER_DAY - 1),
    Field.MICRO_OF_SECOND: ValueRange(0, 999_999),
    Field.MICRO_OF_DAY: ValueRange(0, NANOS_PER_DAY // 1_000 - 1),
    Field.MILLI_OF_SECOND: ValueRange(0, 999),
    Field.MILLI_OF_DAY: ValueRange(0, NANOS_PER_DAY // 1_000_000 - 1),
    Field.SECOND_OF_MINUTE: ValueRange(0, 59),
    Field.SECOND_OF_DAY: ValueRange(0, 86_399),
    Field.MINUTE_OF_HOUR: ValueRange(0, 59),
    Field.MINUTE_OF_DAY: ValueRange(0, 1_439),
    Field.HOUR_OF_AMPM: ValueRange(0, 11),
    Field.CLOCK_HOUR_OF_AMPM: ValueRange(1, 12),
    Field.HOUR_OF_DAY: ValueRange(0, 23),
    Field.CLOCK_HOUR_OF_DAY: ValueRange(1, 24),
    Field.AMPM_OF_DAY: ValueRange(0, 1),
    Field.DAY_OF_WEEK: ValueRange(1, 7),
    Field.ALIGNED_DAY_OF_WEEK_IN_MONTH: ValueRange(1, 7),
    Field.ALIGNED_DAY_OF_WEEK_IN_YEAR: ValueRange(1, 7),
    Field.DAY_OF_MONTH: ValueRange(1, 31),
    Field.DAY_OF_YEAR: ValueRange(1, 366),
    Field.EPOCH_DAY: ValueRange(MIN_EPOCH_DAY, MAX_EPOCH_DAY),
    Field.ALIGNED_WEEK_OF_MONTH: ValueRange(1, 5),
    Field.ALIGNED_WEEK_OF_YEAR: ValueRange(1, 53),
    Field.MONTH_OF_YEAR: ValueRange(1, 12),
    Field.PROLEPTIC_MONTH: ValueRange(MIN_YEAR * 12, MAX_YEAR * 12 + 11),
    Field.YEAR_OF_ERA: ValueRange(1, MAX_YEAR + 1),
    Field.YEAR: ValueRange(MIN_YEAR, MAX_YEAR),
    Field.ERA: ValueRange(0, 1),
    Field.INSTANT_SECONDS: ValueRange(INT64_MIN, INT64_MAX),
    Field.OFFSET_SECONDS: ValueRange(-MAX_OFFSET_SECONDS, MAX_OFFSET_SECONDS),
}


__all__ = ["Field", "ValueRange"]
