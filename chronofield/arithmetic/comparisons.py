"""Comparison helpers for chronofield values.

Every chronofield type is totally ordered, with its zero value sorting before
every other value. These functions give explicit names to that ordering and
refuse to compare values of different types.

Comparison Rules:
    - LocalDate, YearMonth, Year: chronological ordering
    - LocalTime: earlier/later in day
    - LocalDateTime: date first, then time
    - ZoneOffset: by total seconds
    - OffsetDateTime: by instant, then by local date-time

Examples:
    >>> from chronofield import LocalDate
    >>> a, b = LocalDate(2024, 1, 15), LocalDate(2024, 1, 16)
    >>> compare(a, b)
    -1
    >>> max_value(a, b, LocalDate.zero())
    LocalDate(2024, 1, 16)
"""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")


def _require_same_type(op: str, left: Any, right: Any) -> None:
    from chronofield.convert.text import temporal_types

    if type(left) not in temporal_types().values():
        raise TypeError(f"expected a chronofield value, got {type(left).__name__}")
    if type(left) is not type(right):
        raise TypeError(
            f"{op!r} not supported between instances of {type(left).__name__!r} "
            f"and {type(right).__name__!r}"
        )


def compare(left: T, right: T) -> int:
    """Return -1, 0 or 1 as left sorts before, with, or after right.

    Raises:
        TypeError: If the values are not chronofield values of the same type.

    Examples:
        >>> from chronofield import LocalTime
        >>> compare(LocalTime(9, 0), LocalTime(9, 0))
        0
        >>> compare(LocalTime(10, 0), LocalTime.zero())
        1
    """
    _require_same_type("compare", left, right)
    if left < right:  # type: ignore[operator]
        return -1
    if right < left:  # type: ignore[operator]
        return 1
    return 0


def min_value(first: T, *rest: T) -> T:
    """Return the earliest of the given values; ties keep the first.

    Raises:
        TypeError: If the values are not all chronofield values of one type.
    """
    result = first
    for value in rest:
        if compare(value, result) < 0:
            result = value
    return result


def max_value(first: T, *rest: T) -> T:
    """Return the latest of the given values; ties keep the first.

    Raises:
        TypeError: If the values are not all chronofield values of one type.
    """
    result = first
    for value in rest:
        if compare(value, result) > 0:
            result = value
    return result


def clamp(value: T, low: T, high: T) -> T:
    """Restrict value to the closed interval [low, high].

    Raises:
        TypeError: If the values are not chronofield values of one type.
        ValueError: If low sorts after high.

    Examples:
        >>> from chronofield import LocalDate
        >>> low, high = LocalDate(2024, 1, 1), LocalDate(2024, 3, 31)
        >>> clamp(LocalDate(2024, 5, 1), low, high)
        LocalDate(2024, 3, 31)
    """
    if compare(low, high) > 0:
        raise ValueError(f"clamp bounds out of order: {low!r} > {high!r}")
    _require_same_type("clamp", value, low)
    if compare(value, low) < 0:
        return low
    if compare(value, high) > 0:
        return high
    return value


__all__ = [
    "compare",
    "min_value",
    "max_value",
    "clamp",
]
