"""Chronofield exception hierarchy.

All Chronofield-specific exceptions inherit from ChronoError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chronofield.units.field import Field, ValueRange


class ChronoError(Exception):
    """Base exception for all Chronofield errors.

    Errors latched by a chain are annotated with the type and method that
    failed; the annotation is appended to the message as ``at Type/method``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.type_name = ""
        self.func_name = ""

    def annotate(self, type_name: str, func_name: str) -> None:
        """Record where the error surfaced. Only the first call sticks."""
        if self.type_name:
            return
        self.type_name = type_name
        self.func_name = func_name

    def __str__(self) -> str:
        if self.type_name:
            return f"{self.message} at {self.type_name}/{self.func_name}"
        return self.message


class FieldOutOfRangeError(ChronoError):
    """A scalar is outside the valid range of a field.

    Examples:
        - MonthOfYear value 13
        - HourOfDay value 24
        - Offset hours of 19
    """

    def __init__(self, field: Field | str, value: int, value_range: ValueRange) -> None:
        self.field = field
        self.value = value
        self.value_range = value_range
        super().__init__(
            f"invalid value of {field} (valid range "
            f"{value_range.minimum} - {value_range.maximum}): {value}"
        )


class InvalidDateError(ChronoError):
    """Date components are individually valid but do not form a date.

    Examples:
        - February 29 in a non-leap year
        - April 31
        - Day-of-year 366 in a non-leap year
    """

    pass


class UnsupportedFieldError(ChronoError):
    """A field was queried or replaced on a type that does not carry it."""

    def __init__(
        self, field: Field | None = None, type_name: str | None = None
    ) -> None:
        self.field = field
        self.component = type_name
        if field is None:
            message = "unsupported field"
        elif type_name:
            message = f"unsupported field {field} for {type_name}"
        else:
            message = f"unsupported field {field}"
        super().__init__(message)


class OverflowError(ChronoError):
    """Arithmetic operation exceeded representable range.

    Examples:
        - Adding days past year 999999999
        - Multiplying a week count beyond 64 bits
    """

    def __init__(self, message: str = "arithmetic overflow") -> None:
        super().__init__(message)


class ParseError(ChronoError):
    """Failed to parse a string representation.

    Examples:
        - Wrong separator ("2024/03/15")
        - Fractional seconds with more than 9 digits
        - Trailing garbage after a zone offset
    """

    def __init__(self, reason: str, text: str = "") -> None:
        self.reason = reason
        self.text = text
        super().__init__(f"parse user input failed: {reason}: {text!r}")


__all__ = [
    "ChronoError",
    "FieldOutOfRangeError",
    "InvalidDateError",
    "UnsupportedFieldError",
    "OverflowError",
    "ParseError",
]
