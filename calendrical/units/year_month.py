"""YearMonth: a year and month without a day, such as 2020-05."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from calendrical._internal.calendar import days_in_month, days_in_year, is_leap_year
from calendrical._internal.constants import MAX_YEAR, MIN_YEAR, MONTHS_PER_YEAR
from calendrical._internal.validation import validate_field, validate_year
from calendrical.core.temporal import Temporal
from calendrical.errors import OverflowError, ParseError
from calendrical.units.month import Month

if TYPE_CHECKING:
    from calendrical.clock import Clock
    from calendrical.core.date import LocalDate

_YEAR_MONTH_PATTERN = re.compile(r"^([+-]?\d{4,})-(\d{2})$")


class YearMonth(Temporal):
    """A month of a specific year.

    Month arithmetic decomposes the total month count with floor
    division, so the month is always 1-12 whatever the sign.

    Examples:
        >>> ym = YearMonth.of(2020, 5)
        >>> str(ym)
        '2020-05'
        >>> ym.plus_months(-5)
        YearMonth(2019, 12)
        >>> ym.at_day(31)
        LocalDate(2020, 5, 31)
    """

    __slots__ = ("_year", "_month")

    def __init__(self, year: int, month: int) -> None:
        """Raises ValidationError if the year or month is out of range."""
        validate_year(year)
        self._year = year
        self._month = Month.of(month)

    @classmethod
    def of(cls, year: int, month: int) -> YearMonth:
        return cls(year, month)

    @classmethod
    def now(cls, clock: Clock | None = None) -> YearMonth:
        """Return the current year-month according to a clock (UTC by default)."""
        from calendrical.core.date import LocalDate

        today = LocalDate.now(clock)
        return cls(today.year, today.month_value)

    @classmethod
    def parse(cls, s: str) -> YearMonth:
        """Parse 'YYYY-MM'.

        Raises:
            ParseError: If the text is malformed.
            ValidationError: If the month is out of range.
        """
        if not isinstance(s, str):
            raise ParseError(f"Expected string, got {type(s).__name__}")
        match = _YEAR_MONTH_PATTERN.match(s.strip())
        if not match:
            raise ParseError(f"Invalid year-month format: {s!r}. Expected YYYY-MM")
        return cls(int(match.group(1)), int(match.group(2)))

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> Month:
        return self._month

    @property
    def month_value(self) -> int:
        return self._month.value

    def is_leap_year(self) -> bool:
        return is_leap_year(self._year)

    def length_of_month(self) -> int:
        return days_in_month(self._year, self._month.value)

    def length_of_year(self) -> int:
        return days_in_year(self._year)

    def plus_months(self, months: int) -> YearMonth:
        """Add months.

        Raises:
            OverflowError: If the result is outside years -9999..9999.
        """
        total = self._year * MONTHS_PER_YEAR + (self._month.value - 1) + months
        new_year, month_index = divmod(total, MONTHS_PER_YEAR)
        _check_year(new_year)
        return YearMonth(new_year, month_index + 1)

    def minus_months(self, months: int) -> YearMonth:
        return self.plus_months(-months)

    def plus_years(self, years: int) -> YearMonth:
        """Add years.

        Raises:
            OverflowError: If the result is outside years -9999..9999.
        """
        new_year = self._year + years
        _check_year(new_year)
        return YearMonth(new_year, self._month.value)

    def minus_years(self, years: int) -> YearMonth:
        return self.plus_years(-years)

    def with_month(self, month: int) -> YearMonth:
        return YearMonth(self._year, month)

    def with_year(self, year: int) -> YearMonth:
        return YearMonth(year, self._month.value)

    def at_day(self, day: int) -> LocalDate:
        """Return the date at a day of this month.

        Raises:
            ValidationError: If the day does not exist in this month.
        """
        from calendrical.core.date import LocalDate

        validate_field("day", day, 1, self.length_of_month())
        return LocalDate(self._year, self._month.value, day)

    def first_day_of_month(self) -> LocalDate:
        return self.at_day(1)

    def last_day_of_month(self) -> LocalDate:
        return self.at_day(self.length_of_month())

    def to_iso_format(self) -> str:
        from calendrical.core.date import format_year

        return f"{format_year(self._year)}-{self._month.value:02d}"

    def _key(self) -> tuple[int, int]:
        return (self._year, self._month.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, YearMonth):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"YearMonth({self._year}, {self._month.value})"

    def __str__(self) -> str:
        return self.to_iso_format()


def _check_year(year: int) -> None:
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OverflowError(
            f"year {year} is outside the supported range {MIN_YEAR}..{MAX_YEAR}"
        )


__all__ = ["YearMonth"]
