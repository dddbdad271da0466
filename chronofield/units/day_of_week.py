"""Day-of-week enumeration."""

from __future__ import annotations

from enum import IntEnum

from chronofield.units.field import Field


class DayOfWeek(IntEnum):
    """A day of the week following ISO-8601, Monday=1 through Sunday=7.

    Examples:
        >>> DayOfWeek.SUNDAY.plus(1)
        <DayOfWeek.MONDAY: 1>
        >>> str(DayOfWeek.FRIDAY)
        'Friday'
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, day_of_week: int) -> DayOfWeek:
        """Return the DayOfWeek for a number in 1-7.

        Raises:
            FieldOutOfRangeError: If day_of_week is outside 1-7.
        """
        return cls(Field.DAY_OF_WEEK.check_valid_value(day_of_week))

    def plus(self, days: int) -> DayOfWeek:
        """Return the day a number of days later, wrapping around."""
        return DayOfWeek((self.value - 1 + days) % 7 + 1)

    def minus(self, days: int) -> DayOfWeek:
        return self.plus(-(days % 7))

    @property
    def is_weekend(self) -> bool:
        return self >= DayOfWeek.SATURDAY

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.display_name


__all__ = ["DayOfWeek"]
