"""Internal constants for Chronofield.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

MINUTES_PER_HOUR: int = 60
MINUTES_PER_DAY: int = 24 * MINUTES_PER_HOUR  # 1_440
HOURS_PER_DAY: int = 24

# Year limits; year * 12 + 11 stays far inside 64 bits
MIN_YEAR: int = -999_999_999
MAX_YEAR: int = 999_999_999

# Epoch days of MIN_YEAR-01-01 and MAX_YEAR-12-31
MIN_EPOCH_DAY: int = -365_243_219_162
MAX_EPOCH_DAY: int = 365_241_780_471

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Proleptic Gregorian cycle
DAYS_PER_CYCLE: int = 146_097  # days in 400 years
DAYS_0000_TO_1970: int = DAYS_PER_CYCLE * 5 - (30 * 365 + 7)  # 719_528

# Zone offset limits (in seconds)
MAX_OFFSET_SECONDS: int = 18 * SECONDS_PER_HOUR  # 64_800


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MINUTES_PER_HOUR",
    "MINUTES_PER_DAY",
    "HOURS_PER_DAY",
    "MIN_YEAR",
    "MAX_YEAR",
    "MIN_EPOCH_DAY",
    "MAX_EPOCH_DAY",
    "DAYS_IN_MONTH",
    "DAYS_PER_CYCLE",
    "DAYS_0000_TO_1970",
    "MAX_OFFSET_SECONDS",
]
