"""Core temporal types.

This module provides the fundamental temporal types:
    - Year: Proleptic year
    - YearMonth: Month of a specific year
    - LocalDate: Calendar date in the proleptic Gregorian calendar
    - LocalTime: Time of day with nanosecond precision
    - LocalDateTime: Combined date and time without offset
    - ZoneOffset: Fixed offset from UTC
    - OffsetDateTime: Local date-time with a fixed offset, an instant
"""

from __future__ import annotations

from chronofield.core.local_date import LocalDate
from chronofield.core.local_date_time import LocalDateTime
from chronofield.core.local_time import LocalTime
from chronofield.core.offset_date_time import OffsetDateTime
from chronofield.core.year import Year
from chronofield.core.year_month import YearMonth
from chronofield.core.zone_offset import ZoneOffset

__all__: list[str] = [
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "OffsetDateTime",
    "Year",
    "YearMonth",
    "ZoneOffset",
]
