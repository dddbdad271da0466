"""Field catalog and supporting enumerations.

This module provides:
    - Field: the closed set of 30 date and time fields
    - ValueRange: the valid range of a field
    - TemporalValue: tri-state field query result
    - TemporalAccessor: the field query protocol
    - Era, Month, DayOfWeek
"""

from __future__ import annotations

from chronofield.units.day_of_week import DayOfWeek
from chronofield.units.era import Era
from chronofield.units.field import Field, ValueRange
from chronofield.units.month import Month
from chronofield.units.temporal_value import TemporalAccessor, TemporalValue

__all__: list[str] = [
    "DayOfWeek",
    "Era",
    "Field",
    "Month",
    "TemporalAccessor",
    "TemporalValue",
    "ValueRange",
]
