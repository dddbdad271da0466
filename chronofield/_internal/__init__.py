"""Internal utilities for Chronofield.

This module contains private implementation details:
    - constants: unit conversions and limits
    - calendar: the proleptic Gregorian kernel
    - arith: floor and exact 64-bit integer arithmetic
    - validation: field-range decorator and date checks

Submodules are imported directly; this package re-exports nothing so the
kernel can be loaded before the field catalog.

Note: This module is not part of the public API.
"""

from __future__ import annotations

__all__: list[str] = []
