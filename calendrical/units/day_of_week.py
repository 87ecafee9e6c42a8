"""DayOfWeek enumeration for the days of the week.

This module provides the DayOfWeek enum, Monday = 1 through Sunday = 7,
and the mapping to and from the civil-calendar primitive's weekday
numbering (Monday = 0 through Sunday = 6).
"""

from __future__ import annotations

from enum import IntEnum

from calendrical._internal.constants import DAYS_PER_WEEK
from calendrical.errors import ValidationError


class DayOfWeek(IntEnum):
    """A day of the week following ISO-8601 (Monday = 1, Sunday = 7).

    Examples:
        >>> DayOfWeek.of(1)
        <DayOfWeek.MONDAY: 1>

        >>> DayOfWeek.FRIDAY.plus(3)
        <DayOfWeek.MONDAY: 1>

        >>> DayOfWeek.MONDAY.minus(1)
        <DayOfWeek.SUNDAY: 7>
    """

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def of(cls, value: int) -> DayOfWeek:
        """Return the DayOfWeek for an ISO day number.

        Raises:
            ValidationError: If value is not in 1-7.
        """
        if not isinstance(value, int) or not (1 <= value <= 7):
            raise ValidationError(
                f"day-of-week must be between 1 and 7, got {value}",
                field="day_of_week",
                value=value,
            )
        return cls(value)

    @classmethod
    def from_primitive(cls, weekday: int) -> DayOfWeek:
        """Map the civil primitive's weekday (Monday=0..Sunday=6).

        The mapping is total over 0-6 and the inverse of to_primitive().

        Raises:
            ValidationError: If weekday is not in 0-6.
        """
        if not isinstance(weekday, int) or not (0 <= weekday <= 6):
            raise ValidationError(
                f"primitive weekday must be between 0 and 6, got {weekday}",
                field="weekday",
                value=weekday,
            )
        return cls(weekday + 1)

    def to_primitive(self) -> int:
        """Return the civil primitive's weekday number (Monday=0..Sunday=6)."""
        return self.value - 1

    def plus(self, days: int) -> DayOfWeek:
        """Return the day `days` after this one, wrapping around the week."""
        return DayOfWeek((self.value - 1 + days) % DAYS_PER_WEEK + 1)

    def minus(self, days: int) -> DayOfWeek:
        """Return the day `days` before this one, wrapping around the week."""
        return self.plus(-days)

    def __str__(self) -> str:
        return self.name


__all__ = ["DayOfWeek"]
