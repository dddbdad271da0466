"""Chronofield: immutable date and time values in the ISO-8601 calendar.

Chronofield models dates, times, fixed UTC offsets and their combinations as
immutable values with nanosecond precision, a field-based access protocol,
and a canonical ISO 8601 text form. Every type except Year has a zero value
meaning "unset".

Core Types:
    Year: Proleptic year
    YearMonth: Month of a specific year
    LocalDate: Calendar date (year, month, day)
    LocalTime: Time of day (hour, minute, second, nanosecond)
    LocalDateTime: Combined date and time without offset
    ZoneOffset: Fixed offset from UTC
    OffsetDateTime: Local date-time with an offset

Units:
    Field: Named, range-checked temporal fields
    ValueRange: Inclusive range of a field
    TemporalValue: Result of a field query
    Era, Month, DayOfWeek: Enumerations

Format Functions:
    parse_iso8601: Parse ISO 8601 text, detecting the value type
    format_iso8601: Format any value as ISO 8601 text

Exceptions:
    ChronoError: Base exception
    FieldOutOfRangeError: Field value outside its valid range
    InvalidDateError: Components that do not form a real date
    UnsupportedFieldError: Field not supported by the value's type
    OverflowError: Result outside the supported range
    ParseError: Failed to parse text

Example:
    >>> from chronofield import LocalDate
    >>> d = LocalDate(2024, 1, 31).plus_months(1)
    >>> d
    LocalDate(2024, 2, 29)
    >>> d.chain().with_day_of_month(30).get_error() is not None
    True
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Chain
from chronofield.chain import (
    Chain,
    LocalDateChain,
    LocalDateTimeChain,
    LocalTimeChain,
    OffsetDateTimeChain,
    YearMonthChain,
)

# Core types
from chronofield.core.local_date import LocalDate
from chronofield.core.local_date_time import LocalDateTime
from chronofield.core.local_time import LocalTime
from chronofield.core.offset_date_time import OffsetDateTime
from chronofield.core.year import Year
from chronofield.core.year_month import YearMonth
from chronofield.core.zone_offset import ZoneOffset

# Exceptions
from chronofield.errors import (
    ChronoError,
    FieldOutOfRangeError,
    InvalidDateError,
    OverflowError,
    ParseError,
    UnsupportedFieldError,
)

# Format functions
from chronofield.format import format_iso8601, parse_iso8601

# Units
from chronofield.units.day_of_week import DayOfWeek
from chronofield.units.era import Era
from chronofield.units.field import Field, ValueRange
from chronofield.units.month import Month
from chronofield.units.temporal_value import TemporalAccessor, TemporalValue

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Year",
    "YearMonth",
    "LocalDate",
    "LocalTime",
    "LocalDateTime",
    "ZoneOffset",
    "OffsetDateTime",
    # Chain
    "Chain",
    "LocalDateChain",
    "LocalTimeChain",
    "LocalDateTimeChain",
    "OffsetDateTimeChain",
    "YearMonthChain",
    # Units
    "Field",
    "ValueRange",
    "TemporalValue",
    "TemporalAccessor",
    "Era",
    "Month",
    "DayOfWeek",
    # Exceptions
    "ChronoError",
    "FieldOutOfRangeError",
    "InvalidDateError",
    "UnsupportedFieldError",
    "OverflowError",
    "ParseError",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
]
