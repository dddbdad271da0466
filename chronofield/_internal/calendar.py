"""Calendar kernel for Chronofield.

Proleptic Gregorian arithmetic: leap years, month lengths, day-of-year,
day-of-week and conversion between (year, month, day) and the epoch day,
the signed count of days since 1970-01-01.

All divisions here are floor divisions.

This module is not part of the public API.
"""

from __future__ import annotations

from chronofield._internal.arith import floor_div, floor_mod
from chronofield._internal.constants import (
    DAYS_0000_TO_1970,
    DAYS_IN_MONTH,
    DAYS_PER_CYCLE,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative; year 0 is 1 BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(-4)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def month_length(month: int, leap: bool) -> int:
    """Return the length of a month (1-12) in a leap or common year."""
    if month == 2 and leap:
        return 29
    return DAYS_IN_MONTH[month]


def _first_days(leap: bool) -> tuple[int, ...]:
    firsts = [0, 1]
    for month in range(1, 12):
        firsts.append(firsts[-1] + month_length(month, leap))
    return tuple(firsts)


# 1-based day-of-year of the first day of each month; index 0 unused
_FIRST_DAY_COMMON: tuple[int, ...] = _first_days(False)
_FIRST_DAY_LEAP: tuple[int, ...] = _first_days(True)


def first_day_of_year(month: int, leap: bool) -> int:
    """Return the day-of-year of the first day of a month.

    Examples:
        >>> first_day_of_year(3, False)
        60
        >>> first_day_of_year(3, True)
        61
    """
    return (_FIRST_DAY_LEAP if leap else _FIRST_DAY_COMMON)[month]


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month of a given year."""
    return month_length(month, is_leap_year(year))


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert a valid (year, month, day) to days since 1970-01-01.

    Args:
        year: Proleptic year.
        month: Month (1-12).
        day: Day of month, already validated against the month length.

    Returns:
        The epoch day; negative before 1970.

    Examples:
        >>> to_epoch_day(1970, 1, 1)
        0
        >>> to_epoch_day(2024, 3, 15)
        19797
        >>> to_epoch_day(1969, 12, 31)
        -1
    """
    total = 365 * year
    if year >= 0:
        total += (year + 3) // 4 - (year + 99) // 100 + (year + 399) // 400
    else:
        total -= (-year) // 4 - (-year) // 100 + (-year) // 400
    total += (367 * month - 362) // 12
    total += day - 1
    if month > 2:
        total -= 1
        if not is_leap_year(year):
            total -= 1
    return total - DAYS_0000_TO_1970


def from_epoch_day(epoch_day: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to (year, month, day).

    The computation shifts the origin to 0000-03-01 so the leap day falls
    at the end of the shifted year, removes whole 400-year cycles for
    negative inputs, estimates the year and refines it by one.

    Examples:
        >>> from_epoch_day(0)
        (1970, 1, 1)
        >>> from_epoch_day(19797)
        (2024, 3, 15)
        >>> from_epoch_day(-719528)
        (0, 1, 1)
    """
    zero_day = epoch_day + DAYS_0000_TO_1970 - 60  # 0000-03-01 is day 0
    adjust = 0
    if zero_day < 0:
        adjust_cycles = floor_div(zero_day, DAYS_PER_CYCLE)
        adjust = adjust_cycles * 400
        zero_day -= adjust_cycles * DAYS_PER_CYCLE

    year_est = (400 * zero_day + 591) // DAYS_PER_CYCLE
    doy_est = zero_day - _days_before_march_year(year_est)
    if doy_est < 0:
        year_est -= 1
        doy_est = zero_day - _days_before_march_year(year_est)
    year_est += adjust

    # March-based month index: 0 = March ... 11 = February
    march_month0 = (doy_est * 5 + 2) // 153
    month = (march_month0 + 2) % 12 + 1
    day = doy_est - (march_month0 * 306 + 5) // 10 + 1
    year_est += march_month0 // 10
    return year_est, month, day


def _days_before_march_year(year: int) -> int:
    return 365 * year + year // 4 - year // 100 + year // 400


def year_day_to_month_day(year: int, day_of_year: int) -> tuple[int, int]:
    """Locate (month, day) for a day-of-year already known to be valid.

    Examples:
        >>> year_day_to_month_day(2024, 60)
        (2, 29)
        >>> year_day_to_month_day(2023, 60)
        (3, 1)
    """
    leap = is_leap_year(year)
    month = (day_of_year - 1) // 31 + 1
    month_end = first_day_of_year(month, leap) + month_length(month, leap) - 1
    if day_of_year > month_end:
        month += 1
    return month, day_of_year - first_day_of_year(month, leap) + 1


def day_of_week_of(epoch_day: int) -> int:
    """Return the ISO day-of-week (Monday=1) of an epoch day.

    Epoch day 0, 1970-01-01, was a Thursday.

    Examples:
        >>> day_of_week_of(0)
        4
    """
    return floor_mod(epoch_day + 3, 7) + 1


__all__ = [
    "is_leap_year",
    "month_length",
    "first_day_of_year",
    "days_in_month",
    "days_in_year",
    "to_epoch_day",
    "from_epoch_day",
    "year_day_to_month_day",
    "day_of_week_of",
]
