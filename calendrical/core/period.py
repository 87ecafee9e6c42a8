"""Period class representing calendar-based amounts of time.

This module provides the Period class for calendar amounts (years,
months, days) that vary in real length depending on where they are
applied, as opposed to the exact time spans of Duration.
"""

from __future__ import annotations

from calendrical._internal.constants import DAYS_PER_WEEK, MONTHS_PER_YEAR


class Period:
    """A calendar-based amount of years, months and days.

    Each component is independently signed and stored as given: no
    normalization happens across fields, so `Period.of_months(14)`
    stays 14 months rather than becoming 1 year and 2 months. Weeks
    are not stored; `Period.of_weeks(2)` is 14 days.

    Sign queries look at each component separately. A period is
    "negative" if *any* component is negative and "positive" if any
    component is positive, so `Period.of(1, -1, 0)` is both.

    Attributes:
        years: Number of years (can be negative).
        months: Number of months (can be negative).
        days: Number of days (can be negative).

    Examples:
        >>> p = Period.of(1, 2, 3)
        >>> p.total_months()
        14
        >>> str(p)
        'P1Y2M3D'

        >>> from calendrical import LocalDate
        >>> LocalDate.of(2024, 1, 31) + Period.of_months(1)  # Clamps to Feb 29
        LocalDate(2024, 2, 29)
    """

    __slots__ = ("_years", "_months", "_days")

    ZERO: Period

    def __init__(self, years: int = 0, months: int = 0, days: int = 0) -> None:
        """Create a Period from component parts.

        All parameters can be positive, negative, or zero.

        Examples:
            >>> Period(years=1, months=6)
            Period(years=1, months=6, days=0)
        """
        self._years = years
        self._months = months
        self._days = days

    @classmethod
    def of(cls, years: int, months: int, days: int) -> Period:
        """Create a Period from years, months and days."""
        return cls(years, months, days)

    @classmethod
    def of_years(cls, years: int) -> Period:
        """Create a Period of a given number of years.

        Examples:
            >>> Period.of_years(2)
            Period(years=2, months=0, days=0)
        """
        return cls(years=years)

    @classmethod
    def of_months(cls, months: int) -> Period:
        """Create a Period of a given number of months."""
        return cls(months=months)

    @classmethod
    def of_weeks(cls, weeks: int) -> Period:
        """Create a Period of a given number of weeks, stored as days.

        Examples:
            >>> Period.of_weeks(2)
            Period(years=0, months=0, days=14)
        """
        return cls(days=weeks * DAYS_PER_WEEK)

    @classmethod
    def of_days(cls, days: int) -> Period:
        """Create a Period of a given number of days."""
        return cls(days=days)

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._months

    @property
    def days(self) -> int:
        return self._days

    def total_months(self) -> int:
        """Return years * 12 + months. Days do not contribute.

        Examples:
            >>> Period.of(1, 6, 40).total_months()
            18
        """
        return self._years * MONTHS_PER_YEAR + self._months

    def is_zero(self) -> bool:
        """Return True if every component is zero."""
        return self._years == 0 and self._months == 0 and self._days == 0

    def is_negative(self) -> bool:
        """Return True if any component is negative."""
        return self._years < 0 or self._months < 0 or self._days < 0

    def is_positive(self) -> bool:
        """Return True if any component is positive."""
        return self._years > 0 or self._months > 0 or self._days > 0

    # --- Component-wise arithmetic ---

    def plus(self, other: Period) -> Period:
        return Period(
            self._years + other._years,
            self._months + other._months,
            self._days + other._days,
        )

    def minus(self, other: Period) -> Period:
        return Period(
            self._years - other._years,
            self._months - other._months,
            self._days - other._days,
        )

    def plus_years(self, years: int) -> Period:
        return Period(self._years + years, self._months, self._days)

    def plus_months(self, months: int) -> Period:
        return Period(self._years, self._months + months, self._days)

    def plus_days(self, days: int) -> Period:
        return Period(self._years, self._months, self._days + days)

    def minus_years(self, years: int) -> Period:
        return self.plus_years(-years)

    def minus_months(self, months: int) -> Period:
        return self.plus_months(-months)

    def minus_days(self, days: int) -> Period:
        return self.plus_days(-days)

    def multiplied_by(self, scalar: int) -> Period:
        """Multiply each component by an integer scalar.

        Examples:
            >>> Period.of(1, 2, 3).multiplied_by(2)
            Period(years=2, months=4, days=6)
        """
        return Period(self._years * scalar, self._months * scalar, self._days * scalar)

    def negated(self) -> Period:
        return Period(-self._years, -self._months, -self._days)

    def __add__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Period:
        if not isinstance(other, Period):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other: object) -> Period:
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.multiplied_by(other)

    def __rmul__(self, other: object) -> Period:
        return self.__mul__(other)

    def __neg__(self) -> Period:
        return self.negated()

    def __pos__(self) -> Period:
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return (
            self._years == other._years
            and self._months == other._months
            and self._days == other._days
        )

    def __hash__(self) -> int:
        return hash((self._years, self._months, self._days))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __repr__(self) -> str:
        return f"Period(years={self._years}, months={self._months}, days={self._days})"

    def __str__(self) -> str:
        """Return the ISO-8601 form, e.g. 'P1Y2M3D', or 'P0D' for zero."""
        if self.is_zero():
            return "P0D"
        parts = ["P"]
        if self._years:
            parts.append(f"{self._years}Y")
        if self._months:
            parts.append(f"{self._months}M")
        if self._days:
            parts.append(f"{self._days}D")
        return "".join(parts)


Period.ZERO = Period()


__all__ = ["Period"]
