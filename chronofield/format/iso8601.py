"""ISO 8601 formatting and parsing.

This module converts chronofield values to and from their ISO 8601 text.
Parsing is strict: fixed widths, ASCII digits only and no surrounding
whitespace. The empty string parses to the zero value of every type that
has one.

Supported forms:

Years:
    - YYYY, -YYYY (4 digits, zero padded, for -9999 to 9999)
    - +YYYYY, -YYYYY (more digits outside that range)

Dates and year-months:
    - YYYY-MM-DD
    - YYYY-MM

Times:
    - HH:MM:SS
    - HH:MM:SS.f (fractional seconds, 1-9 digits)

DateTimes:
    - YYYY-MM-DDTHH:MM:SS[.f] (``t`` or a single space also separate)

Offsets:
    - Z, z
    - +H, +HH, +HHMM, +HHMMSS, +HH:MM, +HH:MM:SS (and the ``-`` forms)

Fractional seconds are emitted in groups of three digits, so 100
milliseconds is written ``.100`` and never ``.1``.

Examples:
    >>> from chronofield import LocalTime
    >>> from chronofield.format import parse_iso8601, format_iso8601

    >>> parse_iso8601("2024-03-15T14:30:45+09:00").to_utc().to_iso_format()
    '2024-03-15T05:30:45Z'

    >>> format_iso8601(LocalTime(14, 30, 45, 100_000_000))
    '14:30:45.100'
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Union

from chronofield._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
)
from chronofield.errors import ParseError

if TYPE_CHECKING:
    from chronofield.core.local_date import LocalDate
    from chronofield.core.local_date_time import LocalDateTime
    from chronofield.core.local_time import LocalTime
    from chronofield.core.offset_date_time import OffsetDateTime
    from chronofield.core.year import Year
    from chronofield.core.year_month import YearMonth
    from chronofield.core.zone_offset import ZoneOffset

# Type alias for every value the codec understands
TemporalType = Union[
    "Year",
    "YearMonth",
    "LocalDate",
    "LocalTime",
    "LocalDateTime",
    "ZoneOffset",
    "OffsetDateTime",
]

# A leading "+" is only written for years beyond 9999
_YEAR = r"(-?[0-9]{4,}|\+[0-9]{5,})"
_TIME = r"([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]{1,9}))?"

_YEAR_PATTERN = re.compile(_YEAR)
_YEAR_MONTH_PATTERN = re.compile(rf"{_YEAR}-([0-9]{{2}})")
_DATE_PATTERN = re.compile(rf"{_YEAR}-([0-9]{{2}})-([0-9]{{2}})")
_TIME_PATTERN = re.compile(_TIME)

# Colon use must be consistent: +HHMMSS or +HH:MM:SS, never +HH:MMSS
_OFFSET_PATTERN = re.compile(r"([+-])([0-9]{2})(?:(:?)([0-9]{2})(?:\3([0-9]{2}))?)?")
_OFFSET_SHORT_PATTERN = re.compile(r"([+-])([0-9])")

# The date-time separator follows the day of month: YYYY-MM-DD[Tt ]
_DATE_TIME_SEPARATOR = re.compile(r"-[0-9]{2}-[0-9]{2}([Tt ])")


def format_year(year: int) -> str:
    """Format a year, zero padded to 4 digits within -9999 to 9999.

    Examples:
        >>> format_year(44)
        '0044'
        >>> format_year(-44)
        '-0044'
        >>> format_year(123456)
        '123456'
    """
    if 0 <= year <= 9999:
        return f"{year:04d}"
    if -9999 <= year < 0:
        return f"-{-year:04d}"
    return str(year)


def format_fraction(nanosecond: int) -> str:
    """Format a nanosecond-of-second as a fraction aligned to 3-digit groups.

    Returns the empty string when nanosecond is zero; otherwise a period
    followed by 3, 6 or 9 digits, whichever is the fewest that loses nothing.

    Examples:
        >>> format_fraction(0)
        ''
        >>> format_fraction(100_000_000)
        '.100'
        >>> format_fraction(123_400_000)
        '.123400'
        >>> format_fraction(1)
        '.000000001'
    """
    if nanosecond == 0:
        return ""
    if nanosecond % NANOS_PER_MILLISECOND == 0:
        return f".{nanosecond // NANOS_PER_MILLISECOND:03d}"
    if nanosecond % NANOS_PER_MICROSECOND == 0:
        return f".{nanosecond // NANOS_PER_MICROSECOND:06d}"
    return f".{nanosecond:09d}"


def _fraction_to_nanos(fraction: str | None) -> int:
    # Pad to 9 digits for nanoseconds: ".1" is 100_000_000
    if not fraction:
        return 0
    return int(fraction.ljust(9, "0"))


def parse_year(s: str) -> Year:
    """Parse a year such as ``2024``, ``-0044`` or ``+12345``.

    Raises:
        ParseError: If the text is not a year.
        FieldOutOfRangeError: If the year is outside the supported range.

    Examples:
        >>> parse_year("-0044")
        Year(-44)
    """
    from chronofield.core.year import Year

    match = _YEAR_PATTERN.fullmatch(s)
    if not match:
        raise ParseError("expected a year of at least 4 digits", s)
    return Year(int(match.group(1)))


def parse_year_month(s: str) -> YearMonth:
    """Parse ``YYYY-MM``.

    Raises:
        ParseError: If the text is not a year-month.
        FieldOutOfRangeError: If the year or month is out of range.

    Examples:
        >>> parse_year_month("2024-02")
        YearMonth(2024, 2)
        >>> parse_year_month("")
        YearMonth.zero()
    """
    from chronofield.core.year_month import YearMonth

    if s == "":
        return YearMonth.zero()
    match = _YEAR_MONTH_PATTERN.fullmatch(s)
    if not match:
        raise ParseError("expected YYYY-MM", s)
    return YearMonth(int(match.group(1)), int(match.group(2)))


def parse_local_date(s: str) -> LocalDate:
    """Parse ``YYYY-MM-DD``.

    Raises:
        ParseError: If the text is not a date.
        FieldOutOfRangeError: If a component is out of range.
        InvalidDateError: If the components do not form a real date.

    Examples:
        >>> parse_local_date("2024-02-29")
        LocalDate(2024, 2, 29)
        >>> parse_local_date("2024/02/29")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        chronofield.errors.ParseError: parse user input failed: expected YYYY-MM-DD: '2024/02/29'
    """
    from chronofield.core.local_date import LocalDate

    if s == "":
        return LocalDate.zero()
    match = _DATE_PATTERN.fullmatch(s)
    if not match:
        raise ParseError("expected YYYY-MM-DD", s)
    year, month, day = (int(g) for g in match.groups())
    return LocalDate(year, month, day)


def parse_local_time(s: str) -> LocalTime:
    """Parse ``HH:MM:SS`` with an optional 1-9 digit fraction.

    Raises:
        ParseError: If the text is not a time.
        FieldOutOfRangeError: If a component is out of range.

    Examples:
        >>> parse_local_time("14:30:45.1")
        LocalTime(14, 30, 45, 100000000)
        >>> parse_local_time("14:30:45.1234567891")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        chronofield.errors.ParseError: parse user input failed: expected HH:MM:SS[.fffffffff]: ...
    """
    from chronofield.core.local_time import LocalTime

    if s == "":
        return LocalTime.zero()
    match = _TIME_PATTERN.fullmatch(s)
    if not match:
        raise ParseError("expected HH:MM:SS[.fffffffff]", s)
    hour, minute, second, fraction = match.groups()
    return LocalTime(int(hour), int(minute), int(second), _fraction_to_nanos(fraction))


def _split_date_time(s: str) -> tuple[str, str]:
    match = _DATE_TIME_SEPARATOR.search(s)
    if not match:
        raise ParseError("expected 'T', 't' or ' ' between date and time", s)
    sep = match.start(1)
    if sep + 1 == len(s):
        raise ParseError("missing time after separator", s)
    return s[:sep], s[sep + 1 :]


def parse_local_date_time(s: str) -> LocalDateTime:
    """Parse ``<date>T<time>``; ``t`` and a single space also separate.

    Raises:
        ParseError: If the text is not a date-time.
        FieldOutOfRangeError: If a component is out of range.
        InvalidDateError: If the date does not exist.

    Examples:
        >>> parse_local_date_time("2024-03-15t14:30:45")
        LocalDateTime(2024, 3, 15, 14, 30, 45, 0)
    """
    from chronofield.core.local_date_time import LocalDateTime

    if s == "":
        return LocalDateTime.zero()
    date_text, time_text = _split_date_time(s)
    return LocalDateTime.of(parse_local_date(date_text), parse_local_time(time_text))


def parse_zone_offset(s: str) -> ZoneOffset:
    """Parse an offset: ``Z``, ``+H``, ``+HH``, ``+HHMM``, ``+HHMMSS``,
    ``+HH:MM`` or ``+HH:MM:SS``.

    Raises:
        ParseError: If the text is not an offset.
        FieldOutOfRangeError: If a component is out of range.

    Examples:
        >>> parse_zone_offset("z")
        ZoneOffset.utc()
        >>> parse_zone_offset("-0530").total_seconds
        -19800
        >>> parse_zone_offset("+5").total_seconds
        18000
    """
    from chronofield.core.zone_offset import ZoneOffset

    if s == "":
        return ZoneOffset.zero()
    if s in ("Z", "z"):
        return ZoneOffset.utc()
    short = _OFFSET_SHORT_PATTERN.fullmatch(s)
    if short:
        sign = -1 if short.group(1) == "-" else 1
        return ZoneOffset.of(sign * int(short.group(2)))
    match = _OFFSET_PATTERN.fullmatch(s)
    if not match:
        raise ParseError("expected Z or +HH[:MM[:SS]]", s)
    sign = -1 if match.group(1) == "-" else 1
    hours = int(match.group(2))
    minutes = int(match.group(4) or 0)
    seconds = int(match.group(5) or 0)
    offset = ZoneOffset.of(sign * hours, sign * minutes, sign * seconds)
    if offset.is_utc:
        return ZoneOffset.utc()
    return offset


def _find_offset(s: str, start: int) -> int:
    """Return the index where the offset begins, scanning from the end."""
    for i in range(len(s) - 1, start, -1):
        if s[i] in "+-Zz":
            return i
    raise ParseError("missing offset", s)


def parse_offset_date_time(s: str) -> OffsetDateTime:
    """Parse ``<date-time><offset>``.

    The offset is found by scanning back from the end of the text for
    ``+``, ``-``, ``Z`` or ``z``.

    Raises:
        ParseError: If the text is not an offset date-time.
        FieldOutOfRangeError: If a component is out of range.
        InvalidDateError: If the date does not exist.

    Examples:
        >>> str(parse_offset_date_time("2024-03-15T14:30:45.5-05:00"))
        '2024-03-15T14:30:45.500-05:00'
    """
    from chronofield.core.offset_date_time import OffsetDateTime

    if s == "":
        return OffsetDateTime.zero()
    date_text, rest = _split_date_time(s)
    split = _find_offset(rest, 0)
    date_time = parse_local_date_time(f"{date_text}T{rest[:split]}")
    return OffsetDateTime.of(date_time, parse_zone_offset(rest[split:]))


def _has_offset(time_text: str) -> bool:
    return any(c in "+-Zz" for c in time_text)


def parse_iso8601(s: str) -> TemporalType:
    """Parse ISO 8601 text, detecting which type it denotes.

    Detection rules:
        - date, separator and time, with an offset -> OffsetDateTime
        - date, separator and time -> LocalDateTime
        - ``Z``/``z`` or a signed ``HH:MM[:SS]`` -> ZoneOffset
        - contains ':' -> LocalTime
        - YYYY-MM-DD -> LocalDate
        - YYYY-MM -> YearMonth
        - digits only, optionally signed -> Year
        - any other text starting with ``+`` or ``-`` -> ZoneOffset

    A compact ``+0530`` is therefore an offset, while ``-0530`` is the
    year -530; use ``parse_zone_offset`` for negative compact offsets.

    Raises:
        ParseError: If the text matches none of the forms.

    Examples:
        >>> parse_iso8601("2024-03-15")
        LocalDate(2024, 3, 15)
        >>> parse_iso8601("14:30:45")
        LocalTime(14, 30, 45, 0)
        >>> parse_iso8601("2024-03")
        YearMonth(2024, 3)
        >>> parse_iso8601("+09:00")
        ZoneOffset(32400)
    """
    if s == "":
        raise ParseError("empty string", s)
    separator = _DATE_TIME_SEPARATOR.search(s)
    if separator:
        if _has_offset(s[separator.start(1) + 1 :]):
            return parse_offset_date_time(s)
        return parse_local_date_time(s)
    if s in ("Z", "z") or (s[0] in "+-" and ":" in s):
        return parse_zone_offset(s)
    if ":" in s:
        return parse_local_time(s)
    if _DATE_PATTERN.fullmatch(s):
        return parse_local_date(s)
    if _YEAR_MONTH_PATTERN.fullmatch(s):
        return parse_year_month(s)
    if _YEAR_PATTERN.fullmatch(s):
        return parse_year(s)
    if s[0] in "+-":
        return parse_zone_offset(s)
    raise ParseError(
        "cannot determine ISO 8601 form; expected date, time, date-time, "
        "offset date-time, year-month, year or offset",
        s,
    )


def format_iso8601(value: TemporalType) -> str:
    """Format a chronofield value as ISO 8601 text.

    Zero values format as the empty string.

    Raises:
        TypeError: If value is not a chronofield value.

    Examples:
        >>> from chronofield import LocalDate
        >>> format_iso8601(LocalDate(2024, 3, 15))
        '2024-03-15'
    """
    # Import here to avoid circular imports
    from chronofield.core.local_date import LocalDate
    from chronofield.core.local_date_time import LocalDateTime
    from chronofield.core.local_time import LocalTime
    from chronofield.core.offset_date_time import OffsetDateTime
    from chronofield.core.year import Year
    from chronofield.core.year_month import YearMonth
    from chronofield.core.zone_offset import ZoneOffset

    types = (
        Year,
        YearMonth,
        LocalDate,
        LocalTime,
        LocalDateTime,
        ZoneOffset,
        OffsetDateTime,
    )
    if isinstance(value, types):
        return value.to_iso_format()
    raise TypeError(
        "expected Year, YearMonth, LocalDate, LocalTime, LocalDateTime, "
        f"ZoneOffset or OffsetDateTime, got {type(value).__name__}"
    )


__all__ = [
    "TemporalType",
    "format_year",
    "format_fraction",
    "parse_year",
    "parse_year_month",
    "parse_local_date",
    "parse_local_time",
    "parse_local_date_time",
    "parse_zone_offset",
    "parse_offset_date_time",
    "parse_iso8601",
    "format_iso8601",
]
