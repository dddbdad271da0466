"""SQL driver value hooks.

Database drivers hand back column values as ``None``, text, bytes, or the
standard library's ``datetime`` objects. ``from_sql`` turns any of those into
a chronofield value, and ``to_sql`` produces a driver-neutral parameter: the
ISO 8601 text, or ``None`` (SQL ``NULL``) for the zero value.

Examples:
    >>> import datetime
    >>> from chronofield import LocalDate
    >>> from chronofield.convert.sql import from_sql, to_sql

    >>> from_sql(LocalDate, datetime.date(2024, 3, 15))
    LocalDate(2024, 3, 15)
    >>> from_sql(LocalDate, None)
    LocalDate.zero()
    >>> to_sql(LocalDate.zero()) is None
    True
"""

from __future__ import annotations

import datetime as _datetime
from typing import TYPE_CHECKING, Any, TypeVar

from chronofield.convert.text import (
    require_temporal_type,
    temporal_types,
    unmarshal_text,
)

if TYPE_CHECKING:
    from chronofield.format.iso8601 import TemporalType

T = TypeVar("T")


def to_sql(value: TemporalType) -> str | None:
    """Return the SQL parameter for value: ISO 8601 text, or None if zero.

    Raises:
        TypeError: If value is not a chronofield value.
    """
    if type(value) not in temporal_types().values():
        raise TypeError(f"expected a chronofield value, got {type(value).__name__}")
    if value.is_zero():
        return None
    return value.to_iso_format()


def _from_native(cls: type, src: Any) -> Any:
    """Convert a datetime-module object to cls, or return None if unmatched."""
    # Import here to avoid circular imports
    from chronofield.core.local_date import LocalDate
    from chronofield.core.local_date_time import LocalDateTime
    from chronofield.core.local_time import LocalTime
    from chronofield.core.offset_date_time import OffsetDateTime
    from chronofield.core.year import Year
    from chronofield.core.year_month import YearMonth
    from chronofield.core.zone_offset import ZoneOffset

    # datetime is a subclass of date, so it is checked first
    if isinstance(src, _datetime.datetime):
        if cls is OffsetDateTime:
            return OffsetDateTime.from_datetime(src)
        if cls is LocalDateTime:
            return LocalDateTime.from_datetime(src)
        if cls is LocalDate:
            return LocalDate.from_date(src.date())
        if cls is LocalTime:
            return LocalTime.from_time(src.time())
        return None
    if isinstance(src, _datetime.date):
        if cls is LocalDate:
            return LocalDate.from_date(src)
        if cls is YearMonth:
            return YearMonth(src.year, src.month)
        return None
    if isinstance(src, _datetime.time) and cls is LocalTime:
        return LocalTime.from_time(src)
    if isinstance(src, _datetime.timezone) and cls is ZoneOffset:
        return ZoneOffset.from_timezone(src)
    if isinstance(src, int) and not isinstance(src, bool) and cls is Year:
        return Year(src)
    return None


def from_sql(cls: type[T], src: Any) -> T:
    """Create a cls value from a database column value.

    Args:
        cls: The chronofield type to create.
        src: ``None`` (gives the zero value), ISO 8601 ``str`` or ``bytes``,
            or the matching ``datetime`` object. ``Year`` also accepts ``int``.

    Raises:
        TypeError: If cls is not a chronofield type, or src is of a type
            that cannot be converted to cls.
        ParseError: If text src is malformed.
    """
    require_temporal_type(cls)
    if src is None:
        return unmarshal_text(cls, "")
    if isinstance(src, (str, bytes, bytearray)):
        return unmarshal_text(cls, src)
    result = _from_native(cls, src)
    if result is None:
        raise TypeError(
            f"cannot convert {type(src).__name__} to {cls.__name__}"
        )
    return result


__all__ = [
    "to_sql",
    "from_sql",
]
