"""Temporal formatting and parsing.

This module provides functions for converting chronofield values to and
from ISO 8601 text.

Functions:
    parse_iso8601: Parse text, detecting the value type.
    format_iso8601: Format any chronofield value.
    parse_local_date, parse_local_time, parse_local_date_time,
    parse_offset_date_time, parse_zone_offset, parse_year_month,
    parse_year: Parse text as one specific type.

Examples:
    >>> from chronofield.format import parse_iso8601
    >>> parse_iso8601("2024-03-15").day_of_year
    75
"""

from __future__ import annotations

from chronofield.format.iso8601 import (
    TemporalType,
    format_fraction,
    format_iso8601,
    format_year,
    parse_iso8601,
    parse_local_date,
    parse_local_date_time,
    parse_local_time,
    parse_offset_date_time,
    parse_year,
    parse_year_month,
    parse_zone_offset,
)

__all__: list[str] = [
    "TemporalType",
    # Auto-detecting
    "parse_iso8601",
    "format_iso8601",
    # Per type
    "parse_year",
    "parse_year_month",
    "parse_local_date",
    "parse_local_time",
    "parse_local_date_time",
    "parse_zone_offset",
    "parse_offset_date_time",
    # Components
    "format_year",
    "format_fraction",
]
