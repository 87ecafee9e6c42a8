"""ISO 8601 formatting and parsing.

This module provides functions for converting temporal objects to and from
ISO 8601 string representations.

Functions:
    parse_iso8601: Parse an ISO 8601 string into a temporal object.
    format_iso8601: Format a temporal object as an ISO 8601 string.

Supported formats:

Dates:
    - YYYY-MM-DD (extended format)
    - -YYYY-MM-DD (negative years)

Times:
    - HH:MM, HH:MM:SS, HH:MM:SS.f (fractional seconds, 1-9 digits)
    - HHMMSS[.f]

Date-times:
    - YYYY-MM-DDTHH:MM:SS[.f]                        -> LocalDateTime
    - YYYY-MM-DDTHH:MM:SS[.f]Z / +HH:MM / -HH:MM     -> OffsetDateTime
    - YYYY-MM-DDTHH:MM:SS[.f][+HH:MM][Region/City]   -> ZonedDateTime

Fractions are written with the minimal number of digits, and not at all
when zero. Years before 0 are written with a leading minus sign.

Examples:
    >>> parse_iso8601("2024-01-15")
    LocalDate(2024, 1, 15)

    >>> parse_iso8601("2024-01-15T14:30:45Z")
    OffsetDateTime(LocalDateTime(2024, 1, 15, 14, 30, 45), ZoneOffset(Z))
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Union

from calendrical.errors import ParseError

if TYPE_CHECKING:
    from calendrical.core.date import LocalDate
    from calendrical.core.datetime import LocalDateTime
    from calendrical.core.offset_datetime import OffsetDateTime
    from calendrical.core.time import LocalTime
    from calendrical.core.zoned_datetime import ZonedDateTime
    from calendrical.units.zone_database import ZoneDatabase

TemporalType = Union[
    "LocalDate", "LocalTime", "LocalDateTime", "OffsetDateTime", "ZonedDateTime"
]

_DATE_TIME_SEPARATOR = re.compile(r"[Tt ]")
_OFFSET_SUFFIX = re.compile(r"(?:[Zz]|[+-]\d{2}(?::?\d{2}(?::?\d{2})?)?)$")


def parse_iso8601(s: str, database: ZoneDatabase | None = None) -> TemporalType:
    """Parse an ISO 8601 string into a temporal object.

    Automatically detects whether the string represents a date, time,
    date-time, offset date-time or zoned date-time.

    Args:
        s: The ISO 8601 string to parse.
        database: Zone database used to validate a bracketed zone id.

    Raises:
        ParseError: If the string is not valid ISO 8601 format.
        ValidationError: If the parsed components are invalid.
        TimezoneError: If an offset or zone is invalid.

    Detection rules:
        - Ends with '[zone]' -> ZonedDateTime
        - Has a 'T' (or space) separator -> LocalDateTime, or
          OffsetDateTime when the time carries an offset suffix
        - Has ':' but no '-' -> LocalTime
        - Compact HHMMSS -> LocalTime
        - Otherwise -> LocalDate
    """
    # Import here to avoid circular imports
    from calendrical.core.date import LocalDate
    from calendrical.core.datetime import LocalDateTime
    from calendrical.core.offset_datetime import OffsetDateTime
    from calendrical.core.time import LocalTime
    from calendrical.core.zoned_datetime import ZonedDateTime

    if not isinstance(s, str):
        raise ParseError(f"Expected string, got {type(s).__name__}")
    s = s.strip()
    if not s:
        raise ParseError("empty string")

    if s.endswith("]"):
        return ZonedDateTime.parse(s, database)

    parts = _DATE_TIME_SEPARATOR.split(s, maxsplit=1)
    if len(parts) == 2:
        if _OFFSET_SUFFIX.search(parts[1]):
            return OffsetDateTime.parse(s)
        return LocalDateTime.parse(s)

    has_date_sep = "-" in s
    if ":" in s and not has_date_sep:
        return LocalTime.parse(s)

    # Compact time format: 6 digits possibly with fraction
    if len(s) >= 6 and s[:6].isdigit() and (len(s) == 6 or s[6] == "."):
        return LocalTime.parse(s)

    if has_date_sep:
        return LocalDate.parse(s)

    raise ParseError(
        f"cannot determine ISO 8601 format for: {s!r}. "
        "Expected date (YYYY-MM-DD), time (HH:MM:SS), or datetime (YYYY-MM-DDTHH:MM:SS)"
    )


def format_iso8601(value: object) -> str:
    """Format a temporal object as an ISO 8601 string.

    Delegates to the value's `to_iso_format()`. Duration and Period are
    written in their ISO 8601 duration forms ('PT1H30M', 'P1Y2M3D').

    Raises:
        TypeError: If the value has no ISO 8601 form.

    Examples:
        >>> from calendrical import LocalDate, LocalTime, Duration
        >>> format_iso8601(LocalDate.of(2024, 1, 15))
        '2024-01-15'
        >>> format_iso8601(LocalTime.of(14, 30, 45, 500_000_000))
        '14:30:45.5'
        >>> format_iso8601(Duration.of_minutes(90))
        'PT1H30M'
    """
    # Import here to avoid circular imports
    from calendrical.core.duration import Duration
    from calendrical.core.period import Period

    if isinstance(value, (Duration, Period)):
        return str(value)
    to_iso = getattr(value, "to_iso_format", None)
    if to_iso is None:
        raise TypeError(f"cannot format {type(value).__name__} as ISO 8601")
    return to_iso()


__all__ = ["parse_iso8601", "format_iso8601"]
