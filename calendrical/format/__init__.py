"""Temporal formatting and parsing.

This module provides functions for converting temporal objects to and from
ISO 8601 string representations.

Functions:
    parse_iso8601: Parse ISO 8601 date/time/date-time string.
    format_iso8601: Format temporal object as ISO 8601 string.

Examples:
    >>> from calendrical import LocalDateTime
    >>> from calendrical.format import parse_iso8601, format_iso8601

    >>> dt = parse_iso8601("2024-01-15T14:30:45Z")
    >>> dt.year
    2024

    >>> format_iso8601(LocalDateTime.of(2024, 1, 15, 14, 30, 45))
    '2024-01-15T14:30:45'
"""

from __future__ import annotations

from calendrical.format.iso8601 import format_iso8601, parse_iso8601

__all__: list[str] = [
    "parse_iso8601",
    "format_iso8601",
]
