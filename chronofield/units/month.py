"""Month-of-year enumeration."""

from __future__ import annotations

from enum import IntEnum

from chronofield._internal.calendar import first_day_of_year, month_length
from chronofield.units.field import Field


class Month(IntEnum):
    """A month of the year, January=1 through December=12.

    Month is an IntEnum, so it can be passed anywhere a month number is
    accepted and compares equal to that number.

    Examples:
        >>> Month.FEBRUARY.length(leap=True)
        29
        >>> Month.MARCH.first_day_of_year(leap=False)
        60
        >>> str(Month.DECEMBER.plus(1))
        'January'
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, month: int) -> Month:
        """Return the Month for a number in 1-12.

        Raises:
            FieldOutOfRangeError: If month is outside 1-12.
        """
        return cls(Field.MONTH_OF_YEAR.check_valid_value(month))

    def length(self, leap: bool) -> int:
        """Return the number of days in this month."""
        return month_length(self.value, leap)

    def min_length(self) -> int:
        return month_length(self.value, False)

    def max_length(self) -> int:
        return month_length(self.value, True)

    def first_day_of_year(self, leap: bool) -> int:
        """Return the day-of-year (1-based) this month starts on."""
        return first_day_of_year(self.value, leap)

    def plus(self, months: int) -> Month:
        """Return the month a number of months later, wrapping around."""
        return Month((self.value - 1 + months) % 12 + 1)

    def minus(self, months: int) -> Month:
        return self.plus(-(months % 12))

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.display_name


__all__ = ["Month"]
