"""Calendar utilities for Calendrical.

This module is the civil-calendar primitive the value types are built
on: leap year logic, month lengths, ordinal and epoch-day conversions
and the weekday of an epoch day.

Epoch day 0 = 1970-01-01 (the Unix epoch).
Ordinal 1 = 0001-01-01 (proleptic Gregorian, astronomical year numbering).

This module is not part of the public API.
"""

from __future__ import annotations

from calendrical._internal.constants import (
    DAYS_IN_MONTH,
    EPOCH_ORDINAL,
    MAX_YEAR,
    MIN_YEAR,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be negative for BCE).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def days_before_month(year: int, month: int) -> int:
    """Return the number of days in the year before the first of the month."""
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based ordinal of a date within its year.

    Examples:
        >>> day_of_year(2020, 2, 29)
        60
        >>> day_of_year(2023, 12, 31)
        365
    """
    return days_before_month(year, month) + day


def month_day_from_day_of_year(year: int, doy: int) -> tuple[int, int]:
    """Convert a day-of-year to (month, day).

    Args:
        year: The year (for leap year calculation).
        doy: Day of year (1-365, or 1-366 in a leap year).

    Returns:
        Tuple of (month, day).

    Raises:
        ValueError: If doy is outside the year.
    """
    if doy < 1 or doy > days_in_year(year):
        raise ValueError(
            f"day of year must be 1-{days_in_year(year)} for {year}, got {doy}"
        )
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1.
    The ordinal for 0000-12-31 (last day of year 0 / 1 BCE) is 0.
    """
    # Floor division makes this valid for year <= 0 as well
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Works for ordinals <= 0 as well: divmod floors, so the remainder
    inside the 400-year cycle is always non-negative.

    Examples:
        >>> ordinal_to_ymd(1)
        (1, 1, 1)
        >>> ordinal_to_ymd(0)
        (0, 12, 31)
    """
    n = ordinal - 1

    # 400-year cycles: each has 146097 days
    n400, n = divmod(n, 146097)
    # 100-year cycles within the 400: each has 36524 days (except last)
    n100, n = divmod(n, 36524)
    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)
    # Years within the 4-year cycle
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year at the end of a cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = month_day_from_day_of_year(year, n + 1)
    return (year, month, day)


def ymd_to_epoch_day(year: int, month: int, day: int) -> int:
    """Convert year, month, day to days since 1970-01-01.

    Examples:
        >>> ymd_to_epoch_day(1970, 1, 1)
        0
        >>> ymd_to_epoch_day(1969, 12, 31)
        -1
    """
    return ymd_to_ordinal(year, month, day) - EPOCH_ORDINAL


def epoch_day_to_ymd(epoch_day: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to year, month, day."""
    return ordinal_to_ymd(epoch_day + EPOCH_ORDINAL)


def weekday_from_epoch_day(epoch_day: int) -> int:
    """Return the weekday of an epoch day (Monday=0, Sunday=6).

    1970-01-01 was a Thursday (3 in the Monday=0 system).

    Examples:
        >>> weekday_from_epoch_day(0)
        3
        >>> weekday_from_epoch_day(4)  # 1970-01-05
        0
    """
    return (epoch_day + 3) % 7


MIN_EPOCH_DAY: int = ymd_to_epoch_day(MIN_YEAR, 1, 1)
MAX_EPOCH_DAY: int = ymd_to_epoch_day(MAX_YEAR, 12, 31)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_before_month",
    "day_of_year",
    "month_day_from_day_of_year",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "ymd_to_epoch_day",
    "epoch_day_to_ymd",
    "weekday_from_epoch_day",
    "MIN_EPOCH_DAY",
    "MAX_EPOCH_DAY",
]
