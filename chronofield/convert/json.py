"""JSON serialization and deserialization for chronofield values.

Two encodings are provided.

The plain encoding maps a value to its ISO 8601 string, and the zero value
to ``null``:

    "2024-03-15"
    "14:30:45.100"
    null

The tagged encoding carries the type name for polymorphic decoding:

    {"_type": "LocalDate", "value": "2024-03-15"}
    {"_type": "OffsetDateTime", "value": "2024-03-15T14:30:45+09:00"}

Examples:
    >>> from chronofield import LocalDate, OffsetDateTime
    >>> from chronofield.convert.json import dumps, loads, to_json, from_json

    >>> dumps({"due": LocalDate(2024, 3, 15), "done": LocalDate.zero()})
    '{"due": "2024-03-15", "done": null}'

    >>> loads('"2024-03-15"', LocalDate)
    LocalDate(2024, 3, 15)

    >>> from_json(to_json(LocalDate(2024, 3, 15)))
    LocalDate(2024, 3, 15)
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TypeVar

from chronofield.convert.text import require_temporal_type, temporal_types
from chronofield.errors import ParseError

if TYPE_CHECKING:
    from chronofield.format.iso8601 import TemporalType

T = TypeVar("T")


def to_json_value(value: TemporalType) -> str | None:
    """Return the JSON value for a chronofield value: a string, or None if zero.

    Raises:
        TypeError: If value is not a chronofield value.

    Examples:
        >>> from chronofield import LocalTime
        >>> to_json_value(LocalTime(9, 0))
        '09:00:00'
        >>> to_json_value(LocalTime.zero()) is None
        True
    """
    if type(value) not in temporal_types().values():
        raise TypeError(f"expected a chronofield value, got {type(value).__name__}")
    if value.is_zero():
        return None
    return value.to_iso_format()


def from_json_value(cls: type[T], data: Any) -> T:
    """Create a cls value from a decoded JSON value.

    ``None`` and ``""`` give the zero value.

    Raises:
        TypeError: If cls is not a chronofield type.
        ParseError: If data is not a string, or cls has no zero value and
            data is empty.
    """
    require_temporal_type(cls)
    if data is None:
        data = ""
    if not isinstance(data, str):
        raise ParseError(
            f"expected JSON string or null, got {type(data).__name__}", repr(data)
        )
    return cls.from_iso_format(data)  # type: ignore[attr-defined]


class TemporalEncoder(json.JSONEncoder):
    """JSONEncoder that writes chronofield values in the plain encoding."""

    def default(self, o: Any) -> Any:
        if type(o) in temporal_types().values():
            return to_json_value(o)
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """``json.dumps`` with chronofield values encoded as ISO 8601 strings."""
    kwargs.setdefault("cls", TemporalEncoder)
    return json.dumps(obj, **kwargs)


def loads(s: str | bytes, cls: type[T]) -> T:
    """Decode a JSON document holding one string or null into a cls value.

    Raises:
        ParseError: If the document is not valid JSON or not a string/null.
    """
    try:
        data = json.loads(s)
    except json.JSONDecodeError as e:
        text = s if isinstance(s, str) else repr(s)
        raise ParseError(f"invalid JSON: {e.msg}", text) from e
    return from_json_value(cls, data)


def to_json(value: TemporalType) -> dict[str, Any]:
    """Convert a chronofield value to a tagged JSON-serializable dict.

    Raises:
        TypeError: If value is not a chronofield value.

    Examples:
        >>> from chronofield import ZoneOffset
        >>> to_json(ZoneOffset.of_hours(-5))
        {'_type': 'ZoneOffset', 'value': '-05:00'}
    """
    name = type(value).__name__
    if temporal_types().get(name) is not type(value):
        raise TypeError(f"expected a chronofield value, got {name}")
    return {
        "_type": name,
        "value": value.to_iso_format(),
    }


def from_json(data: dict[str, Any]) -> TemporalType:
    """Create a chronofield value from a tagged JSON dict.

    Raises:
        ParseError: If the data is missing required fields or is malformed.
        TypeError: If ``_type`` is not a chronofield type name.

    Examples:
        >>> from_json({"_type": "YearMonth", "value": "2024-02"})
        YearMonth(2024, 2)
    """
    if not isinstance(data, dict):
        raise ParseError(f"expected dict, got {type(data).__name__}")

    type_name = data.get("_type")
    if not type_name:
        raise ParseError("missing '_type' field in JSON data")

    cls = temporal_types().get(type_name)
    if cls is None:
        raise TypeError(f"unknown temporal type: {type_name!r}")

    value = data.get("value")
    if not isinstance(value, str):
        raise ParseError(f"missing 'value' field for {type_name}")
    return cls.from_iso_format(value)  # type: ignore[attr-defined]


__all__ = [
    "to_json_value",
    "from_json_value",
    "TemporalEncoder",
    "dumps",
    "loads",
    "to_json",
    "from_json",
]
