"""Calendrical exception hierarchy.

All Calendrical-specific exceptions inherit from CalendricalError.

Two failure policies exist in the library. Operations documented as
*rejecting* raise one of the exceptions below. Operations documented as
*clamping* or *saturating* never raise; they substitute the nearest
valid value instead.
"""

from __future__ import annotations


class CalendricalError(Exception):
    """Base exception for all Calendrical errors."""

    pass


class ValidationError(CalendricalError):
    """Invalid field value.

    Raised when a constructor or field setter is given a value that does
    not form a valid temporal value. The offending field name and the
    rejected value are available as attributes.

    Attributes:
        field: Name of the rejected field (e.g. "day"), or None.
        value: The rejected value, or None.

    Examples:
        - Month value outside 1-12
        - Day value outside valid range for month
        - Hour value outside 0-23
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: object = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class ParseError(CalendricalError):
    """Failed to parse string representation.

    Raised when a string cannot be parsed as a temporal value.

    Examples:
        - Invalid ISO 8601 format
        - Malformed date string
        - Missing required components
    """

    pass


class OverflowError(CalendricalError):
    """Arithmetic operation exceeded representable range.

    Raised by the rejecting operations when a result cannot be
    represented.

    Examples:
        - plus_years moving the year past 9999
        - Duration.of_days with more days than fit in 64-bit seconds
        - Instant arithmetic past the representable instant range
    """

    pass


class TimezoneError(CalendricalError):
    """Invalid offset or unknown zone.

    Examples:
        - Offset outside -18h to +18h
        - Malformed offset string
        - Zone id unknown to the zone database
    """

    pass


class UnsupportedUnitError(CalendricalError):
    """A ChronoUnit has no meaning for the given temporal type.

    Examples:
        - ChronoUnit.MONTHS added to an Instant (no calendar context)
        - ChronoUnit.HOURS added to a LocalDate
    """

    def __init__(self, unit: object, temporal_type: type) -> None:
        super().__init__(
            f"{unit} not supported for {temporal_type.__name__}.add_to"
        )
        self.unit = unit
        self.temporal_type = temporal_type


__all__ = [
    "CalendricalError",
    "ValidationError",
    "ParseError",
    "OverflowError",
    "TimezoneError",
    "UnsupportedUnitError",
]
