"""Text adapter hooks.

Every chronofield value has one canonical text form, its ISO 8601
representation. The zero value marshals to the empty string and the empty
string (or empty bytes) unmarshals to the zero value.

Examples:
    >>> from chronofield import LocalDate
    >>> from chronofield.convert.text import marshal_text, unmarshal_text

    >>> marshal_text(LocalDate(2024, 3, 15))
    '2024-03-15'
    >>> unmarshal_text(LocalDate, b"")
    LocalDate.zero()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from chronofield.errors import ParseError

if TYPE_CHECKING:
    from chronofield.format.iso8601 import TemporalType

T = TypeVar("T")


def temporal_types() -> dict[str, type]:
    """Return the chronofield value types keyed by class name."""
    # Import here to avoid circular imports
    from chronofield.core.local_date import LocalDate
    from chronofield.core.local_date_time import LocalDateTime
    from chronofield.core.local_time import LocalTime
    from chronofield.core.offset_date_time import OffsetDateTime
    from chronofield.core.year import Year
    from chronofield.core.year_month import YearMonth
    from chronofield.core.zone_offset import ZoneOffset

    return {
        cls.__name__: cls
        for cls in (
            Year,
            YearMonth,
            LocalDate,
            LocalTime,
            LocalDateTime,
            ZoneOffset,
            OffsetDateTime,
        )
    }


def require_temporal_type(cls: type) -> None:
    """Raise TypeError unless cls is a chronofield value type."""
    if cls not in temporal_types().values():
        raise TypeError(f"expected a chronofield type, got {cls!r}")


def marshal_text(value: TemporalType) -> str:
    """Return the ISO 8601 text of value; the zero value gives ``""``.

    Raises:
        TypeError: If value is not a chronofield value.
    """
    from chronofield.format.iso8601 import format_iso8601

    return format_iso8601(value)


def unmarshal_text(cls: type[T], data: str | bytes) -> T:
    """Parse text produced by ``marshal_text`` back into a cls value.

    Args:
        cls: The chronofield type to create.
        data: ISO 8601 text, as str or ASCII bytes.

    Raises:
        TypeError: If cls is not a chronofield type.
        ParseError: If the text is malformed or not ASCII.
        FieldOutOfRangeError: If a parsed component is out of range.
        InvalidDateError: If a parsed date does not exist.

    Examples:
        >>> from chronofield import LocalTime
        >>> unmarshal_text(LocalTime, "14:30:45.100")
        LocalTime(14, 30, 45, 100000000)
    """
    require_temporal_type(cls)
    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode("ascii")
        except UnicodeDecodeError as e:
            raise ParseError("text must be ASCII", repr(data)) from e
    if not isinstance(data, str):
        raise TypeError(f"expected str or bytes, got {type(data).__name__}")
    return cls.from_iso_format(data)  # type: ignore[attr-defined]


__all__ = [
    "temporal_types",
    "require_temporal_type",
    "marshal_text",
    "unmarshal_text",
]
