"""MonthDay: a month and day without a year, such as --12-03."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from calendrical._internal.calendar import is_leap_year
from calendrical._internal.validation import validate_field
from calendrical.core.temporal import Temporal
from calendrical.errors import ParseError
from calendrical.units.month import Month

if TYPE_CHECKING:
    from calendrical.core.date import LocalDate

_MONTH_DAY_PATTERN = re.compile(r"^--(\d{2})-(\d{2})$")


class MonthDay(Temporal):
    """A day of a month that is valid in *some* year.

    February 29 is accepted; February 30 is not.

    Examples:
        >>> md = MonthDay.of(2, 29)
        >>> md.is_valid_year(2023)
        False
        >>> md.at_year(2023)
        LocalDate(2023, 2, 28)
        >>> str(md)
        '--02-29'
    """

    __slots__ = ("_month", "_day")

    def __init__(self, month: int, day: int) -> None:
        """Raises ValidationError if the day exists in no year of the month."""
        self._month = Month.of(month)
        validate_field("day", day, 1, self._month.max_length())
        self._day = day

    @classmethod
    def of(cls, month: int, day: int) -> MonthDay:
        return cls(month, day)

    @classmethod
    def parse(cls, s: str) -> MonthDay:
        """Parse '--MM-DD'.

        Raises:
            ParseError: If the text is malformed.
            ValidationError: If the month or day is out of range.
        """
        if not isinstance(s, str):
            raise ParseError(f"Expected string, got {type(s).__name__}")
        match = _MONTH_DAY_PATTERN.match(s.strip())
        if not match:
            raise ParseError(f"Invalid month-day format: {s!r}. Expected --MM-DD")
        return cls(int(match.group(1)), int(match.group(2)))

    @property
    def month(self) -> Month:
        return self._month

    @property
    def month_value(self) -> int:
        return self._month.value

    @property
    def day_of_month(self) -> int:
        return self._day

    def is_valid_year(self, year: int) -> bool:
        """Return True if this month-day exists in the given year."""
        return self._day <= self._month.length(is_leap_year(year))

    def at_year(self, year: int) -> LocalDate:
        """Combine with a year, clamping February 29 to February 28.

        Raises:
            ValidationError: If the year is out of range.
        """
        from calendrical.core.date import LocalDate

        day = min(self._day, self._month.length(is_leap_year(year)))
        return LocalDate(year, self._month.value, day)

    def to_iso_format(self) -> str:
        return f"--{self._month.value:02d}-{self._day:02d}"

    def _key(self) -> tuple[int, int]:
        return (self._month.value, self._day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"MonthDay({self._month.value}, {self._day})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["MonthDay"]
