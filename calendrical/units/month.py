"""Month enumeration for the months of the year.

This module provides the Month enum, January = 1 through December = 12.
"""

from __future__ import annotations

from enum import IntEnum

from calendrical._internal.calendar import days_before_month
from calendrical._internal.constants import DAYS_IN_MONTH, MONTHS_PER_YEAR
from calendrical.errors import ValidationError


class Month(IntEnum):
    """A month of the year.

    Month values are the ISO numbers 1 (January) to 12 (December), so
    `Month.MARCH.value == 3` and months order the way the calendar does.

    Examples:
        >>> Month.of(2)
        <Month.FEBRUARY: 2>

        >>> Month.NOVEMBER.plus(2)
        <Month.JANUARY: 1>

        >>> Month.FEBRUARY.length(leap_year=True)
        29
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, value: int) -> Month:
        """Return the Month for an ISO month number.

        Raises:
            ValidationError: If value is not in 1-12.
        """
        if not isinstance(value, int) or not (1 <= value <= 12):
            raise ValidationError(
                f"month must be between 1 and 12, got {value}",
                field="month",
                value=value,
            )
        return cls(value)

    def length(self, leap_year: bool) -> int:
        """Return the number of days in this month.

        Args:
            leap_year: Whether the month is in a leap year.
        """
        if self is Month.FEBRUARY and leap_year:
            return 29
        return DAYS_IN_MONTH[self.value]

    def min_length(self) -> int:
        """Return the shortest length of this month (28 for February)."""
        return self.length(False)

    def max_length(self) -> int:
        """Return the longest length of this month (29 for February)."""
        return self.length(True)

    def first_day_of_year(self, leap_year: bool) -> int:
        """Return the day-of-year of the first day of this month.

        Examples:
            >>> Month.MARCH.first_day_of_year(leap_year=False)
            60
            >>> Month.MARCH.first_day_of_year(leap_year=True)
            61
        """
        # 2000 stands in for any leap year, 2001 for any common year
        return days_before_month(2000 if leap_year else 2001, self.value) + 1

    def plus(self, months: int) -> Month:
        """Return the month `months` after this one, wrapping around the year."""
        return Month((self.value - 1 + months) % MONTHS_PER_YEAR + 1)

    def minus(self, months: int) -> Month:
        """Return the month `months` before this one, wrapping around the year."""
        return self.plus(-months)

    def __str__(self) -> str:
        return self.name


__all__ = ["Month"]
