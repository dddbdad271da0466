"""Year value type."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chronofield._internal.calendar import days_in_year, is_leap_year
from chronofield._internal.validation import require_int
from chronofield.units.era import Era
from chronofield.units.field import Field
from chronofield.units.temporal_value import TemporalValue

if TYPE_CHECKING:
    from chronofield.core.local_date import LocalDate
    from chronofield.core.year_month import YearMonth

_YEAR_FIELDS = frozenset({Field.YEAR, Field.YEAR_OF_ERA, Field.ERA})


class Year:
    """A proleptic year, such as 2024 or -44.

    Year 0 is 1 BCE. The supported range is -999999999 to 999999999.

    Examples:
        >>> Year(2024).is_leap_year
        True
        >>> str(Year(-44))
        '-0044'
        >>> str(Year(12345))
        '12345'
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        """Create a Year.

        Raises:
            FieldOutOfRangeError: If value is outside the supported range.
        """
        require_int(value, "year")
        self._value: int = Field.YEAR.check_valid_value(value)

    @classmethod
    def of(cls, value: int) -> Year:
        return cls(value)

    @classmethod
    def from_iso_format(cls, s: str) -> Year:
        """Parse a year such as ``2024``, ``-0044`` or ``+12345``."""
        from chronofield.format.iso8601 import parse_year

        return parse_year(s)

    @property
    def value(self) -> int:
        return self._value

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self._value)

    def length(self) -> int:
        """Return the number of days in this year (365 or 366)."""
        return days_in_year(self._value)

    def at_month(self, month: int) -> YearMonth:
        from chronofield.core.year_month import YearMonth

        return YearMonth(self._value, month)

    def at_day(self, day_of_year: int) -> LocalDate:
        from chronofield.core.local_date import LocalDate

        return LocalDate.of_year_day(self._value, day_of_year)

    def is_zero(self) -> bool:
        """Years have no unset state; year 0 is 1 BCE."""
        return False

    def is_supported_field(self, field: Field) -> bool:
        return field in _YEAR_FIELDS

    def get_field(self, field: Field) -> TemporalValue:
        if field is Field.YEAR:
            return TemporalValue(self._value)
        if field is Field.YEAR_OF_ERA:
            return TemporalValue(self._value if self._value >= 1 else 1 - self._value)
        if field is Field.ERA:
            return TemporalValue(int(Era.of_year(self._value)))
        return TemporalValue.unsupported()

    def to_iso_format(self) -> str:
        from chronofield.format.iso8601 import format_year

        return format_year(self._value)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Year({self._value})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["Year"]
