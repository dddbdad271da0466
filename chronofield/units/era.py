"""Era enumeration for BCE/CE designation.

This module provides the Era enum for distinguishing between
Before Common Era (BCE) and Common Era (CE) dates.
"""

from __future__ import annotations

from enum import IntEnum


class Era(IntEnum):
    """Historical era designation, valued as the ERA field.

    Year 0 exists (astronomical convention) and is considered BCE; its
    year-of-era is 1.

    Examples:
        >>> Era.CE.is_before_common_era
        False
        >>> int(Era.BCE)
        0
    """

    BCE = 0  # Before Common Era
    CE = 1  # Common Era

    @classmethod
    def of_year(cls, year: int) -> Era:
        """Return the era a proleptic year falls in."""
        return cls.CE if year >= 1 else cls.BCE

    @property
    def is_before_common_era(self) -> bool:
        """Return True if this era is Before Common Era."""
        return self == Era.BCE

    def __str__(self) -> str:
        return self.name


__all__ = ["Era"]
