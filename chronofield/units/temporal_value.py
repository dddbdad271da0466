"""Field query results and the protocol every temporal value follows.

This module provides TemporalValue, the tri-state result of a field query,
and TemporalAccessor, the structural protocol shared by LocalDate,
LocalTime, LocalDateTime, OffsetDateTime, ZoneOffset, Year and YearMonth.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

from chronofield._internal.arith import in_int64
from chronofield.errors import OverflowError, UnsupportedFieldError

if TYPE_CHECKING:
    from chronofield.units.field import Field

_VALID = 0
_UNSUPPORTED = 1
_OVERFLOW = 2


class TemporalValue:
    """The value of a field query: valid, unsupported or overflowed.

    Examples:
        >>> v = TemporalValue.of(42)
        >>> v.is_valid, v.value
        (True, 42)

        >>> TemporalValue.unsupported().is_unsupported
        True

        >>> TemporalValue.of(1 << 63).is_overflow
        True
    """

    __slots__ = ("_value", "_state")

    _unsupported_instance: ClassVar[TemporalValue | None] = None
    _overflow_instance: ClassVar[TemporalValue | None] = None

    def __init__(self, value: int) -> None:
        """Create a valid value. Use ``of`` to get overflow detection."""
        self._value: int = value
        self._state: int = _VALID

    @classmethod
    def _with_state(cls, state: int) -> TemporalValue:
        instance = object.__new__(cls)
        instance._value = 0
        instance._state = state
        return instance

    @classmethod
    def of(cls, value: int) -> TemporalValue:
        """Wrap an integer, yielding the overflow state outside 64 bits."""
        if not in_int64(value):
            return cls.overflow()
        return cls(value)

    @classmethod
    def unsupported(cls) -> TemporalValue:
        if cls._unsupported_instance is None:
            cls._unsupported_instance = cls._with_state(_UNSUPPORTED)
        return cls._unsupported_instance

    @classmethod
    def overflow(cls) -> TemporalValue:
        if cls._overflow_instance is None:
            cls._overflow_instance = cls._with_state(_OVERFLOW)
        return cls._overflow_instance

    @property
    def is_valid(self) -> bool:
        return self._state == _VALID

    @property
    def is_unsupported(self) -> bool:
        return self._state == _UNSUPPORTED

    @property
    def is_overflow(self) -> bool:
        return self._state == _OVERFLOW

    @property
    def value(self) -> int:
        """Return the wrapped integer.

        Raises:
            UnsupportedFieldError: If the query was for an unsupported field.
            OverflowError: If the value did not fit in 64 bits.
        """
        if self._state == _UNSUPPORTED:
            raise UnsupportedFieldError()
        if self._state == _OVERFLOW:
            raise OverflowError("field value does not fit in 64 bits")
        return self._value

    def value_or(self, default: int) -> int:
        """Return the wrapped integer, or default when not valid."""
        return self._value if self._state == _VALID else default

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TemporalValue):
            return NotImplemented
        return self._state == other._state and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._state, self._value))

    def __repr__(self) -> str:
        if self._state == _UNSUPPORTED:
            return "TemporalValue.unsupported()"
        if self._state == _OVERFLOW:
            return "TemporalValue.overflow()"
        return f"TemporalValue({self._value})"


@runtime_checkable
class TemporalAccessor(Protocol):
    """Read access to the fields of a temporal value."""

    def is_zero(self) -> bool: ...

    def is_supported_field(self, field: Field) -> bool: ...

    def get_field(self, field: Field) -> TemporalValue: ...


def field_argument(value: int | TemporalValue) -> int:
    """Unwrap the value argument of a ``with_field`` call."""
    if isinstance(value, TemporalValue):
        return value.value
    return value


__all__ = ["TemporalValue", "TemporalAccessor", "field_argument"]
