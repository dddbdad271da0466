"""Validation utilities for Chronofield.

This module provides the field-range decorator and the date checks used by
constructors.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, ParamSpec, TypeVar

from chronofield._internal.calendar import is_leap_year, month_length
from chronofield.errors import InvalidDateError
from chronofield.units.field import Field

P = ParamSpec("P")
T = TypeVar("T")

_MONTH_NAMES = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def validate_fields(**fields: Field) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator checking named parameters against field ranges.

    Parameters that are omitted or None are skipped. Values must be
    integers; anything else raises TypeError.

    Args:
        **fields: Mapping of parameter names to the field bounding them.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_fields(hour=Field.HOUR_OF_DAY)
        ... def set_hour(hour: int) -> int:
        ...     return hour

        >>> set_hour(24)
        Traceback (most recent call last):
        ...
        chronofield.errors.FieldOutOfRangeError: invalid value of HourOfDay (valid range 0 - 23): 24
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind_partial(*args, **kwargs)
            for param_name, field in fields.items():
                value = bound.arguments.get(param_name)
                if value is None:
                    continue
                require_int(value, param_name)
                field.check_valid_value(value)
            return func(*args, **kwargs)

        return wrapper

    return decorator


def require_int(value: object, name: str) -> int:
    """Return value if it is an int (bool excluded), else raise TypeError."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def validate_date(year: int, month: int, day: int) -> None:
    """Validate that (year, month, day) is a real date.

    Raises:
        FieldOutOfRangeError: If a component is outside its field range.
        InvalidDateError: If the day does not exist in that month.
    """
    Field.YEAR.check_valid_value(year)
    Field.MONTH_OF_YEAR.check_valid_value(month)
    Field.DAY_OF_MONTH.check_valid_value(day)
    if day > month_length(month, is_leap_year(year)):
        if day == 29:
            raise InvalidDateError(
                f"invalid date 'February 29' as '{year}' is not a leap year"
            )
        raise InvalidDateError(f"invalid date '{_MONTH_NAMES[month]} {day}'")


def validate_year_day(year: int, day_of_year: int) -> None:
    """Validate that day_of_year exists in year.

    Raises:
        FieldOutOfRangeError: If a component is outside its field range.
        InvalidDateError: If day_of_year is 366 in a non-leap year.
    """
    Field.YEAR.check_valid_value(year)
    Field.DAY_OF_YEAR.check_valid_value(day_of_year)
    if day_of_year == 366 and not is_leap_year(year):
        raise InvalidDateError(
            f"invalid date 'DayOfYear 366' as '{year}' is not a leap year"
        )


__all__ = [
    "validate_fields",
    "require_int",
    "validate_date",
    "validate_year_day",
]
