"""Integer helpers with floor and 64-bit semantics.

Python's ``//`` and ``%`` already floor, but the calendar code names the
operation it relies on, and the exact helpers keep results inside the
signed 64-bit range that field values are defined over.
"""

from __future__ import annotations

from chronofield.errors import OverflowError

INT64_MIN: int = -(1 << 63)
INT64_MAX: int = (1 << 63) - 1


def floor_div(x: int, y: int) -> int:
    """Divide rounding towards negative infinity.

    Examples:
        >>> floor_div(-1, 7)
        -1
        >>> floor_div(7, 7)
        1
    """
    return x // y


def floor_mod(x: int, y: int) -> int:
    """Remainder with the sign of the divisor.

    Examples:
        >>> floor_mod(-1, 7)
        6
    """
    return x % y


def in_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def compare_keys(a: tuple[int, ...], b: tuple[int, ...]) -> int:
    """Three-way comparison of sort keys: -1, 0 or 1."""
    return (a > b) - (a < b)


def add_exact(x: int, y: int) -> int:
    """Add two integers, raising OverflowError outside the int64 range."""
    result = x + y
    if not in_int64(result):
        raise OverflowError()
    return result


def multiply_exact(x: int, y: int) -> int:
    """Multiply two integers, raising OverflowError outside the int64 range."""
    result = x * y
    if not in_int64(result):
        raise OverflowError()
    return result


__all__ = [
    "INT64_MIN",
    "INT64_MAX",
    "floor_div",
    "floor_mod",
    "in_int64",
    "compare_keys",
    "add_exact",
    "multiply_exact",
]
