"""Validation utilities for Calendrical.

This module provides the validators behind the rejecting policy:
constructors and field setters call these and let the resulting
ValidationError propagate to the caller.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from calendrical._internal.constants import MIN_YEAR, MAX_YEAR
from calendrical.errors import ValidationError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    This decorator validates named parameters against specified (min, max)
    ranges, raising ValidationError if any value is out of range.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(hour=(0, 23), minute=(0, 59))
        ... def make_time(hour: int, minute: int) -> None:
        ...     pass

        >>> make_time(24, 0)  # Raises ValidationError
        Traceback (most recent call last):
        ...
        ValidationError: hour must be between 0 and 23, got 24
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()
            for param_name, (min_val, max_val) in limits.items():
                if param_name in bound.arguments:
                    validate_field(
                        param_name, bound.arguments[param_name], min_val, max_val
                    )
            return func(*args, **kwargs)

        return wrapper

    return decorator


def validate_field(name: str, value: int, min_val: int, max_val: int) -> None:
    """Validate that a single named field lies in [min_val, max_val].

    Raises:
        ValidationError: If value is outside the range.
    """
    if value < min_val or value > max_val:
        raise ValidationError(
            f"{name} must be between {min_val} and {max_val}, got {value}",
            field=name,
            value=value,
        )


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Raises:
        ValidationError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    validate_field("year", year, MIN_YEAR, MAX_YEAR)


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        ValidationError: If month is outside 1-12.
    """
    validate_field("month", month, 1, 12)


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Raises:
        ValidationError: If day is invalid for the month.
    """
    from calendrical._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}",
            field="day",
            value=day,
        )


__all__ = [
    "validate_range",
    "validate_field",
    "validate_year",
    "validate_month",
    "validate_day",
]
