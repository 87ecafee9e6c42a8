"""Calendar arithmetic expressed as free functions.

The methods on the core classes delegate here; these functions work on
any DateLike value, so LocalDate and the date-time types share one
implementation.

Adjusters (from calendrical.arithmetic.adjusters):
    - first_day_of_month, last_day_of_month, first_day_of_next_month
    - first_day_of_year, first_day_of_next_year, last_day_of_year
    - last_day_of_month_year
    - first_in_month, last_in_month
    - next_weekday, next_or_same_weekday
    - previous_weekday, previous_or_same_weekday

Period Operations (from calendrical.arithmetic.period_ops):
    - add_period: Add a Period with end-of-month clamping
    - subtract_period: Subtract a Period
"""

from __future__ import annotations

from calendrical.arithmetic.adjusters import (
    first_day_of_month,
    first_day_of_next_month,
    first_day_of_next_year,
    first_day_of_year,
    first_in_month,
    last_day_of_month,
    last_day_of_month_year,
    last_day_of_year,
    last_in_month,
    next_or_same_weekday,
    next_weekday,
    previous_or_same_weekday,
    previous_weekday,
)
from calendrical.arithmetic.period_ops import add_period, subtract_period

__all__ = [
    # Adjusters
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
    # Period operations
    "add_period",
    "subtract_period",
]
