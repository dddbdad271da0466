"""YearMonth value type.

YearMonth is the intermediate used for month arithmetic: adding months
goes through the proleptic month count, then splits back into
(year, month) with floor division.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from chronofield._internal.arith import compare_keys, floor_div, floor_mod
from chronofield._internal.calendar import days_in_year, is_leap_year, month_length
from chronofield._internal.constants import MAX_YEAR, MIN_YEAR
from chronofield._internal.validation import require_int, validate_fields
from chronofield.errors import OverflowError, UnsupportedFieldError
from chronofield.units.era import Era
from chronofield.units.field import Field
from chronofield.units.month import Month
from chronofield.units.temporal_value import TemporalValue, field_argument

if TYPE_CHECKING:
    from chronofield.chain import YearMonthChain
    from chronofield.core.local_date import LocalDate

_YEAR_MONTH_FIELDS = frozenset(
    {
        Field.MONTH_OF_YEAR,
        Field.PROLEPTIC_MONTH,
        Field.YEAR_OF_ERA,
        Field.YEAR,
        Field.ERA,
    }
)


class YearMonth:
    """A year and month, such as 2024-02.

    Examples:
        >>> ym = YearMonth(2024, 2)
        >>> ym.length_of_month()
        29
        >>> str(ym.plus_months(11))
        '2025-01'
    """

    __slots__ = ("_year", "_month")

    _zero_instance: ClassVar[YearMonth | None] = None

    @validate_fields(year=Field.YEAR, month=Field.MONTH_OF_YEAR)
    def __init__(self, year: int, month: int) -> None:
        """Create a YearMonth.

        Raises:
            FieldOutOfRangeError: If year or month is out of range.
        """
        self._year: int = year
        self._month: int = int(month)

    @classmethod
    def _of_unchecked(cls, year: int, month: int) -> YearMonth:
        instance = object.__new__(cls)
        instance._year = year
        instance._month = month
        return instance

    @classmethod
    def of(cls, year: int, month: int) -> YearMonth:
        return cls(year, month)

    @classmethod
    def zero(cls) -> YearMonth:
        """Return the unset YearMonth."""
        if cls._zero_instance is None:
            cls._zero_instance = cls._of_unchecked(0, 0)
        return cls._zero_instance

    @classmethod
    def from_iso_format(cls, s: str) -> YearMonth:
        """Parse ``YYYY-MM``."""
        from chronofield.format.iso8601 import parse_year_month

        return parse_year_month(s)

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> Month:
        return Month(self._month)

    @property
    def proleptic_month(self) -> int:
        return self._year * 12 + (self._month - 1)

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    def length_of_month(self) -> int:
        return month_length(self._month, is_leap_year(self._year))

    def length_of_year(self) -> int:
        return days_in_year(self._year)

    def at_day(self, day: int) -> LocalDate:
        from chronofield.core.local_date import LocalDate

        return LocalDate(self._year, self._month, day)

    def at_end_of_month(self) -> LocalDate:
        from chronofield.core.local_date import LocalDate

        return LocalDate._of_unchecked(self._year, self._month, self.length_of_month())

    def is_zero(self) -> bool:
        return self._month == 0

    def is_supported_field(self, field: Field) -> bool:
        return not self.is_zero() and field in _YEAR_MONTH_FIELDS

    def get_field(self, field: Field) -> TemporalValue:
        if self.is_zero():
            return TemporalValue.unsupported()
        if field is Field.MONTH_OF_YEAR:
            return TemporalValue(self._month)
        if field is Field.PROLEPTIC_MONTH:
            return TemporalValue(self.proleptic_month)
        if field is Field.YEAR_OF_ERA:
            return TemporalValue(self._year if self._year >= 1 else 1 - self._year)
        if field is Field.YEAR:
            return TemporalValue(self._year)
        if field is Field.ERA:
            return TemporalValue(int(Era.of_year(self._year)))
        return TemporalValue.unsupported()

    def plus_months(self, months: int) -> YearMonth:
        """Return a copy with months added.

        Raises:
            OverflowError: If the result is outside the supported years.
        """
        require_int(months, "months")
        if months == 0 or self.is_zero():
            return self
        calc_month = self.proleptic_month + months
        new_year = floor_div(calc_month, 12)
        if not (MIN_YEAR <= new_year <= MAX_YEAR):
            raise OverflowError()
        return YearMonth._of_unchecked(new_year, floor_mod(calc_month, 12) + 1)

    def minus_months(self, months: int) -> YearMonth:
        return self.plus_months(-months)

    def plus_years(self, years: int) -> YearMonth:
        """Return a copy with years added.

        Raises:
            OverflowError: If the result is outside the supported years.
        """
        require_int(years, "years")
        if years == 0 or self.is_zero():
            return self
        new_year = self._year + years
        if not (MIN_YEAR <= new_year <= MAX_YEAR):
            raise OverflowError()
        return YearMonth._of_unchecked(new_year, self._month)

    def minus_years(self, years: int) -> YearMonth:
        return self.plus_years(-years)

    def with_month(self, month: int) -> YearMonth:
        return self.with_field(Field.MONTH_OF_YEAR, month)

    def with_year(self, year: int) -> YearMonth:
        return self.with_field(Field.YEAR, year)

    def with_field(self, field: Field, value: int | TemporalValue) -> YearMonth:
        """Return a copy with one field replaced.

        Raises:
            UnsupportedFieldError: If field is not a year or month field.
            FieldOutOfRangeError: If value is outside the field's range.
        """
        if field not in _YEAR_MONTH_FIELDS:
            raise UnsupportedFieldError(field, "YearMonth")
        v = field.check_valid_value(field_argument(value))
        if self.is_zero():
            return self
        if field is Field.PROLEPTIC_MONTH:
            return self.plus_months(v - self.proleptic_month)
        if field is Field.MONTH_OF_YEAR:
            return YearMonth(self._year, v)
        if field is Field.YEAR:
            return YearMonth(v, self._month)
        if field is Field.YEAR_OF_ERA:
            return YearMonth(v if self._year >= 1 else 1 - v, self._month)
        # ERA
        if v == int(Era.of_year(self._year)):
            return self
        return YearMonth(1 - self._year, self._month)

    def chain(self) -> YearMonthChain:
        from chronofield.chain import YearMonthChain

        return YearMonthChain(self)

    def compare_to(self, other: YearMonth) -> int:
        return compare_keys(self._key(), other._key())

    def is_before(self, other: YearMonth) -> bool:
        return self.compare_to(other) < 0

    def is_after(self, other: YearMonth) -> bool:
        return self.compare_to(other) > 0

    def _key(self) -> tuple[int, int, int]:
        # Zero sorts before every real value
        return (0 if self.is_zero() else 1, self._year, self._month)

    def to_iso_format(self) -> str:
        if self.is_zero():
            return ""
        from chronofield.format.iso8601 import format_year

        return f"{format_year(self._year)}-{self._month:02d}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._year == other._year and self._month == other._month

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash((self._year, self._month))

    def __repr__(self) -> str:
        if self.is_zero():
            return "YearMonth.zero()"
        return f"YearMonth({self._year}, {self._month})"

    def __str__(self) -> str:
        return self.to_iso_format()

    def __bool__(self) -> bool:
        """The unset YearMonth is falsy."""
        return not self.is_zero()


__all__ = ["YearMonth"]
