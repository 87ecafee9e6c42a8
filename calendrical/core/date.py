"""LocalDate class representing a calendar date without a time zone.

This module provides the LocalDate class for dates in the proleptic
Gregorian calendar, years -9999 to 9999.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar

from calendrical._internal.calendar import (
    MAX_EPOCH_DAY,
    MIN_EPOCH_DAY,
    days_in_month,
    days_in_year,
    epoch_day_to_ymd,
    is_leap_year,
    month_day_from_day_of_year,
    weekday_from_epoch_day,
    ymd_to_epoch_day,
)
from calendrical._internal.constants import MAX_YEAR, MIN_YEAR, MONTHS_PER_YEAR
from calendrical._internal.validation import (
    validate_day,
    validate_field,
    validate_month,
    validate_year,
)
from calendrical.arithmetic.period_ops import add_period, subtract_period
from calendrical.core.period import Period
from calendrical.core.temporal import DateLike, Temporal
from calendrical.errors import OverflowError, ParseError
from calendrical.units.day_of_week import DayOfWeek

if TYPE_CHECKING:
    from calendrical.clock import Clock
    from calendrical.core.datetime import LocalDateTime
    from calendrical.core.time import LocalTime

_DATE_PATTERN = re.compile(r"^([+-]?\d{4,})-(\d{2})-(\d{2})$")


def format_year(year: int) -> str:
    """Format a year with at least four digits and a sign when negative."""
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"


class LocalDate(Temporal, DateLike):
    """A date without a time zone, such as 2024-01-15.

    Internal representation is the number of days since 1970-01-01
    (the epoch day), which makes day arithmetic and comparisons cheap.

    Failure policy:
        - Construction and the `with_*` setters reject invalid dates
          with ValidationError.
        - `plus_months`/`plus_years` clamp the day of month to the
          target month (Jan 31 + 1 month is Feb 28 or 29) and raise
          OverflowError only if the target year leaves -9999..9999.
        - `plus_days`/`plus_weeks` saturate at LocalDate.MIN/MAX.

    Examples:
        >>> d = LocalDate.of(2024, 1, 15)
        >>> d.year, d.month_value, d.day_of_month
        (2024, 1, 15)

        >>> LocalDate.of(2020, 1, 31).plus_months(1)
        LocalDate(2020, 2, 29)

        >>> LocalDate.of(2024, 2, 30)
        Traceback (most recent call last):
        ...
        ValidationError: day must be between 1 and 29 for 2024-02, got 30
    """

    __slots__ = ("_days",)

    MIN: ClassVar[LocalDate]
    MAX: ClassVar[LocalDate]
    EPOCH: ClassVar[LocalDate]

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a LocalDate from year, month, and day.

        Raises:
            ValidationError: If any component is out of range.
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._days = ymd_to_epoch_day(year, int(month), day)

    @classmethod
    def _from_days(cls, days: int) -> LocalDate:
        """Create a LocalDate from an epoch day without validation."""
        instance = object.__new__(cls)
        instance._days = days
        return instance

    @classmethod
    def of(cls, year: int, month: int, day: int) -> LocalDate:
        """Create a LocalDate; `month` may be an int or a Month.

        Raises:
            ValidationError: If the date is invalid.
        """
        return cls(year, month, day)

    @classmethod
    def of_epoch_day(cls, epoch_day: int) -> LocalDate:
        """Create a LocalDate from the number of days since 1970-01-01.

        Raises:
            ValidationError: If the day is outside the supported range.

        Examples:
            >>> LocalDate.of_epoch_day(0)
            LocalDate(1970, 1, 1)
            >>> LocalDate.of_epoch_day(-1)
            LocalDate(1969, 12, 31)
        """
        validate_field("epoch_day", epoch_day, MIN_EPOCH_DAY, MAX_EPOCH_DAY)
        return cls._from_days(epoch_day)

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> LocalDate:
        """Create a LocalDate from a year and a 1-based day of the year.

        Raises:
            ValidationError: If the year or day of year is out of range.

        Examples:
            >>> LocalDate.of_year_day(2024, 60)
            LocalDate(2024, 2, 29)
        """
        validate_year(year)
        validate_field("day_of_year", day_of_year, 1, days_in_year(year))
        month, day = month_day_from_day_of_year(year, day_of_year)
        return cls(year, month, day)

    @classmethod
    def now(cls, clock: Clock | None = None) -> LocalDate:
        """Return the current date according to a clock.

        Args:
            clock: The clock to read; defaults to the system clock in UTC.
        """
        from calendrical.core.datetime import LocalDateTime

        return LocalDateTime.now(clock).to_local_date()

    @classmethod
    def parse(cls, s: str) -> LocalDate:
        """Parse a date from ISO 8601 format (YYYY-MM-DD).

        Negative years carry a leading minus sign.

        Raises:
            ParseError: If the string is not valid ISO 8601 format.
            ValidationError: If the date components are invalid.

        Examples:
            >>> LocalDate.parse("2024-01-15")
            LocalDate(2024, 1, 15)
            >>> LocalDate.parse("-0044-03-15")
            LocalDate(-44, 3, 15)
        """
        if not isinstance(s, str):
            raise ParseError(f"Expected string, got {type(s).__name__}")
        match = _DATE_PATTERN.match(s)
        if not match:
            raise ParseError(
                f"Invalid ISO 8601 date format: {s!r}. Expected YYYY-MM-DD"
            )
        return cls(int(match.group(1)), int(match.group(2)), int(match.group(3)))

    # --- Fields ---

    @property
    def year(self) -> int:
        year, _, _ = epoch_day_to_ymd(self._days)
        return year

    @property
    def month_value(self) -> int:
        _, month, _ = epoch_day_to_ymd(self._days)
        return month

    @property
    def day_of_month(self) -> int:
        _, _, day = epoch_day_to_ymd(self._days)
        return day

    @property
    def day_of_week(self) -> DayOfWeek:
        """Return the day of the week.

        Examples:
            >>> LocalDate.of(2021, 3, 14).day_of_week
            <DayOfWeek.SUNDAY: 7>
        """
        return DayOfWeek.from_primitive(weekday_from_epoch_day(self._days))

    def to_epoch_day(self) -> int:
        """Return the number of days since 1970-01-01."""
        return self._days

    # --- Arithmetic ---

    def plus_days(self, days: int) -> LocalDate:
        """Add days.

        Saturates at LocalDate.MIN / LocalDate.MAX; never raises.
        """
        return LocalDate._from_days(
            max(MIN_EPOCH_DAY, min(MAX_EPOCH_DAY, self._days + days))
        )

    def plus_months(self, months: int) -> LocalDate:
        """Add months, clamping the day to the length of the target month.

        Raises:
            OverflowError: If the target year is outside -9999..9999.

        Examples:
            >>> LocalDate.of(2019, 1, 31).plus_months(1)
            LocalDate(2019, 2, 28)
            >>> LocalDate.of(2020, 3, 31).minus_months(13)
            LocalDate(2019, 2, 28)
        """
        if months == 0:
            return self
        year, month, day = epoch_day_to_ymd(self._days)
        total = year * MONTHS_PER_YEAR + (month - 1) + months
        new_year, month_index = divmod(total, MONTHS_PER_YEAR)
        _check_year(new_year)
        new_month = month_index + 1
        new_day = min(day, days_in_month(new_year, new_month))
        return LocalDate._from_days(ymd_to_epoch_day(new_year, new_month, new_day))

    def plus_years(self, years: int) -> LocalDate:
        """Add years, clamping February 29 to February 28 in common years.

        Raises:
            OverflowError: If the target year is outside -9999..9999.

        Examples:
            >>> LocalDate.of(2020, 2, 29).plus_years(1)
            LocalDate(2021, 2, 28)
        """
        if years == 0:
            return self
        year, month, day = epoch_day_to_ymd(self._days)
        new_year = year + years
        _check_year(new_year)
        if month == 2 and day == 29 and not is_leap_year(new_year):
            day = 28
        return LocalDate._from_days(ymd_to_epoch_day(new_year, month, day))

    def plus_period(self, period: Period) -> LocalDate:
        """Add a Period: its total months (clamping), then its days."""
        return add_period(self, period)

    def minus_period(self, period: Period) -> LocalDate:
        return subtract_period(self, period)

    # --- Field setters (rejecting) ---

    def with_year(self, year: int) -> LocalDate:
        """Return a copy with the year replaced.

        Raises:
            ValidationError: If the result is invalid (Feb 29 in a common year).
        """
        _, month, day = epoch_day_to_ymd(self._days)
        return LocalDate(year, month, day)

    def with_month(self, month: int) -> LocalDate:
        """Return a copy with the month replaced.

        Raises:
            ValidationError: If the month is out of range or the day does
                not exist in it. The day is never clamped.
        """
        year, _, day = epoch_day_to_ymd(self._days)
        return LocalDate(year, month, day)

    def with_day_of_month(self, day: int) -> LocalDate:
        """Return a copy with the day of month replaced.

        Raises:
            ValidationError: If the day does not exist in this month.

        Examples:
            >>> LocalDate.of(2024, 4, 15).with_day_of_month(31)
            Traceback (most recent call last):
            ...
            ValidationError: day must be between 1 and 30 for 2024-04, got 31
        """
        year, month, _ = epoch_day_to_ymd(self._days)
        return LocalDate(year, month, day)

    def with_day_of_year(self, day_of_year: int) -> LocalDate:
        """Return the date with the same year at the given day of year.

        Raises:
            ValidationError: If day_of_year is outside this year's length.
        """
        return LocalDate.of_year_day(self.year, day_of_year)

    # --- Combination ---

    def at_time(self, time: LocalTime) -> LocalDateTime:
        """Combine this date with a time."""
        from calendrical.core.datetime import LocalDateTime

        return LocalDateTime.of_date_time(self, time)

    def at_start_of_day(self) -> LocalDateTime:
        """Return midnight at the start of this date."""
        from calendrical.core.time import LocalTime

        return self.at_time(LocalTime.MIDNIGHT)

    def to_iso_format(self) -> str:
        """Return the date in ISO 8601 format (YYYY-MM-DD).

        Examples:
            >>> LocalDate.of(-44, 3, 15).to_iso_format()
            '-0044-03-15'
        """
        year, month, day = epoch_day_to_ymd(self._days)
        return f"{format_year(year)}-{month:02d}-{day:02d}"

    # --- Operators ---

    def __add__(self, other: object) -> LocalDate:
        if isinstance(other, Period):
            return self.plus_period(other)
        return NotImplemented

    def __sub__(self, other: object) -> LocalDate:
        if isinstance(other, Period):
            return self.minus_period(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days == other._days

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days < other._days

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days <= other._days

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days > other._days

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDate):
            return NotImplemented
        return self._days >= other._days

    def __hash__(self) -> int:
        return hash(self._days)

    def __repr__(self) -> str:
        year, month, day = epoch_day_to_ymd(self._days)
        return f"LocalDate({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_format()


def _check_year(year: int) -> None:
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OverflowError(
            f"year {year} is outside the supported range {MIN_YEAR}..{MAX_YEAR}"
        )


LocalDate.MIN = LocalDate._from_days(MIN_EPOCH_DAY)
LocalDate.MAX = LocalDate._from_days(MAX_EPOCH_DAY)
LocalDate.EPOCH = LocalDate._from_days(0)


__all__ = ["LocalDate"]
