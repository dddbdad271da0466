"""Function-based operations over chronofield values.

Comparison Operations (from chronofield.arithmetic.comparisons):
    - compare: Return -1, 0, or 1 for comparison
    - min_value, max_value: Find extremes
    - clamp: Constrain value to range
"""

from __future__ import annotations

from chronofield.arithmetic.comparisons import clamp, compare, max_value, min_value

__all__: list[str] = [
    "compare",
    "min_value",
    "max_value",
    "clamp",
]
