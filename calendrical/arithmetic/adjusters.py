"""Date adjusters: month/year boundaries and day-of-week navigation.

These are free functions over any DateLike value (LocalDate,
LocalDateTime, OffsetDateTime, ZonedDateTime). The time part of a
date-time, where there is one, is left unchanged.

Examples:
    >>> from calendrical import LocalDate, DayOfWeek
    >>> sunday = LocalDate.of(2021, 3, 14)
    >>> next_weekday(sunday, DayOfWeek.MONDAY)
    LocalDate(2021, 3, 15)
    >>> next_or_same_weekday(sunday, DayOfWeek.SUNDAY)
    LocalDate(2021, 3, 14)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from calendrical._internal.constants import DAYS_PER_WEEK

if TYPE_CHECKING:
    from calendrical.core.temporal import DateLike
    from calendrical.units.day_of_week import DayOfWeek

D = TypeVar("D", bound="DateLike")


def first_day_of_month(date: D) -> D:
    return date.with_day_of_month(1)


def last_day_of_month(date: D) -> D:
    return date.with_day_of_month(date.length_of_month)


def first_day_of_next_month(date: D) -> D:
    """Return the first day of the following month.

    Raises:
        OverflowError: If the next month is past the supported range.
    """
    return date.plus_months(1).with_day_of_month(1)


def first_day_of_year(date: D) -> D:
    return date.with_day_of_year(1)


def first_day_of_next_year(date: D) -> D:
    """Return January 1 of the following year.

    Raises:
        OverflowError: If the next year is past the supported range.
    """
    return date.plus_years(1).with_day_of_year(1)


def last_day_of_year(date: D) -> D:
    return date.with_day_of_year(date.length_of_year)


def last_day_of_month_year(date: D, year: int, month: int) -> D:
    """Return the last day of the given year and month.

    Any time part of the value is preserved.

    Raises:
        ValidationError: If year or month is out of range.
    """
    moved = date.with_day_of_month(1).with_year(year).with_month(month)
    return last_day_of_month(moved)


def first_in_month(date: D, day_of_week: DayOfWeek) -> D:
    """Return the first date in the same month falling on day_of_week."""
    first = first_day_of_month(date)
    delta = (day_of_week.value - first.day_of_week.value) % DAYS_PER_WEEK
    return first.plus_days(delta)


def last_in_month(date: D, day_of_week: DayOfWeek) -> D:
    """Return the last date in the same month falling on day_of_week."""
    last = last_day_of_month(date)
    delta = (last.day_of_week.value - day_of_week.value) % DAYS_PER_WEEK
    return last.plus_days(-delta)


def next_weekday(date: D, day_of_week: DayOfWeek) -> D:
    """Move forward 1-7 days to day_of_week; never returns the same date."""
    delta = (day_of_week.value - date.day_of_week.value) % DAYS_PER_WEEK
    return date.plus_days(delta or DAYS_PER_WEEK)


def next_or_same_weekday(date: D, day_of_week: DayOfWeek) -> D:
    """Move forward 0-6 days to day_of_week."""
    delta = (day_of_week.value - date.day_of_week.value) % DAYS_PER_WEEK
    return date.plus_days(delta)


def previous_weekday(date: D, day_of_week: DayOfWeek) -> D:
    """Move backward 1-7 days to day_of_week; never returns the same date."""
    delta = (date.day_of_week.value - day_of_week.value) % DAYS_PER_WEEK
    return date.plus_days(-(delta or DAYS_PER_WEEK))


def previous_or_same_weekday(date: D, day_of_week: DayOfWeek) -> D:
    """Move backward 0-6 days to day_of_week."""
    delta = (date.day_of_week.value - day_of_week.value) % DAYS_PER_WEEK
    return date.plus_days(-delta)


__all__ = [
    "first_day_of_month",
    "last_day_of_month",
    "first_day_of_next_month",
    "first_day_of_year",
    "first_day_of_next_year",
    "last_day_of_year",
    "last_day_of_month_year",
    "first_in_month",
    "last_in_month",
    "next_weekday",
    "next_or_same_weekday",
    "previous_weekday",
    "previous_or_same_weekday",
]
