"""Conversion between chronofield values and external representations.

Submodules:
    text: Canonical text (ISO 8601) marshalling.
    json: JSON values, a ``json.JSONEncoder``, and tagged dicts.
    sql: Database driver values.

Examples:
    >>> from chronofield import LocalDate
    >>> from chronofield.convert import to_json, from_json
    >>> from_json(to_json(LocalDate(2024, 3, 15)))
    LocalDate(2024, 3, 15)
"""

from __future__ import annotations

from chronofield.convert.json import (
    TemporalEncoder,
    dumps,
    from_json,
    from_json_value,
    loads,
    to_json,
    to_json_value,
)
from chronofield.convert.sql import from_sql, to_sql
from chronofield.convert.text import marshal_text, unmarshal_text

__all__: list[str] = [
    # Text
    "marshal_text",
    "unmarshal_text",
    # JSON
    "to_json_value",
    "from_json_value",
    "TemporalEncoder",
    "dumps",
    "loads",
    "to_json",
    "from_json",
    # SQL
    "to_sql",
    "from_sql",
]
