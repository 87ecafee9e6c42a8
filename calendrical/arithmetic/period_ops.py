"""Period arithmetic for date-bearing temporal types.

A Period is applied as its total months first, then its days:

    1. plus_months(period.total_months()), clamping the day of month
    2. plus_days(period.days)

Clamping behavior:
    When the month step lands on an invalid day (e.g., Jan 31 + 1 month),
    the day is clamped to the last valid day of the target month.

Examples:
    LocalDate(2024, 1, 31) + Period.of_months(1) -> LocalDate(2024, 2, 29)
    LocalDate(2023, 1, 31) + Period.of_months(1) -> LocalDate(2023, 2, 28)
    LocalDate(2024, 2, 29) + Period.of_years(1)  -> LocalDate(2025, 2, 28)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from calendrical.core.period import Period
    from calendrical.core.temporal import DateLike

D = TypeVar("D", bound="DateLike")


def add_period(date: D, period: Period) -> D:
    """Add a Period to any DateLike value, clamping the day if necessary.

    Any time part of the value is preserved.

    Raises:
        OverflowError: If the month step leaves the supported year range.

    Examples:
        >>> from calendrical import LocalDate, Period
        >>> add_period(LocalDate.of(2024, 1, 31), Period.of(0, 1, 1))
        LocalDate(2024, 3, 1)
    """
    result = date
    total_months = period.total_months()
    if total_months != 0:
        result = result.plus_months(total_months)
    if period.days != 0:
        result = result.plus_days(period.days)
    return result


def subtract_period(date: D, period: Period) -> D:
    """Subtract a Period; equivalent to adding the negated period.

    Examples:
        >>> from calendrical import LocalDate, Period
        >>> subtract_period(LocalDate.of(2024, 3, 31), Period.of_months(1))
        LocalDate(2024, 2, 29)
    """
    return add_period(date, period.negated())


__all__ = ["add_period", "subtract_period"]
