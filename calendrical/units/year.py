"""Year: a proleptic-Gregorian year such as 2024."""

from __future__ import annotations

from typing import TYPE_CHECKING

from calendrical._internal.calendar import days_in_year, is_leap_year
from calendrical._internal.constants import MAX_YEAR, MIN_YEAR
from calendrical._internal.validation import validate_field, validate_year
from calendrical.core.temporal import Temporal
from calendrical.errors import OverflowError

if TYPE_CHECKING:
    from calendrical.clock import Clock
    from calendrical.core.date import LocalDate
    from calendrical.units.year_month import YearMonth


class Year(Temporal):
    """A year in the proleptic Gregorian calendar, -9999 to 9999.

    Examples:
        >>> Year.of(2024).is_leap()
        True
        >>> Year.of(2023).at_day(60)
        LocalDate(2023, 3, 1)
    """

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        """Raises ValidationError if value is outside -9999..9999."""
        validate_year(value)
        self._value = value

    @classmethod
    def of(cls, value: int) -> Year:
        return cls(value)

    @classmethod
    def now(cls, clock: Clock | None = None) -> Year:
        """Return the current year according to a clock (UTC by default)."""
        from calendrical.core.date import LocalDate

        return cls(LocalDate.now(clock).year)

    @property
    def value(self) -> int:
        return self._value

    def is_leap(self) -> bool:
        return is_leap_year(self._value)

    def length(self) -> int:
        """Return 366 for leap years, otherwise 365."""
        return days_in_year(self._value)

    def plus(self, years: int) -> Year:
        """Add years.

        Raises:
            OverflowError: If the result is outside -9999..9999.
        """
        new_value = self._value + years
        if new_value < MIN_YEAR or new_value > MAX_YEAR:
            raise OverflowError(
                f"year {new_value} is outside the supported range {MIN_YEAR}..{MAX_YEAR}"
            )
        return Year(new_value)

    def minus(self, years: int) -> Year:
        return self.plus(-years)

    def at_day(self, day_of_year: int) -> LocalDate:
        """Return the date at a 1-based day of this year.

        Raises:
            ValidationError: If day_of_year is outside 1..length().
        """
        from calendrical.core.date import LocalDate

        validate_field("day_of_year", day_of_year, 1, self.length())
        return LocalDate.of_year_day(self._value, day_of_year)

    def at_month_day(self, month: int, day: int) -> LocalDate:
        """Return the date at a month and day of this year.

        Raises:
            ValidationError: If the day does not exist in this year.
        """
        from calendrical.core.date import LocalDate

        return LocalDate(self._value, month, day)

    def at_month(self, month: int) -> YearMonth:
        """Return the YearMonth for a month of this year."""
        from calendrical.units.year_month import YearMonth

        return YearMonth.of(self._value, month)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Year):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Year({self._value})"

    def __str__(self) -> str:
        return str(self._value)


__all__ = ["Year"]
