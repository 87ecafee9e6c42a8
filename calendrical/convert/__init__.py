"""Temporal conversion utilities.

This module provides the arithmetic that maps local date-time fields
onto the UTC epoch timeline:
    - to_epoch_nanos: (epoch_day, nano_of_day, offset) -> epoch nanoseconds
    - from_epoch_nanos: epoch nanoseconds + offset -> (epoch_day, nano_of_day)
    - split_epoch_nanos: epoch nanoseconds -> (epoch_second, nano_of_second)

Examples:
    >>> from calendrical.convert import to_epoch_nanos, from_epoch_nanos
    >>> from_epoch_nanos(to_epoch_nanos(19737, 0))
    (19737, 0)
"""

from __future__ import annotations

from calendrical.convert.epoch import (
    MAX_EPOCH_NANOS,
    MAX_INSTANT_NANOS,
    MIN_EPOCH_NANOS,
    MIN_INSTANT_NANOS,
    from_epoch_nanos,
    split_epoch_nanos,
    to_epoch_nanos,
)

__all__ = [
    "MIN_EPOCH_NANOS",
    "MAX_EPOCH_NANOS",
    "MIN_INSTANT_NANOS",
    "MAX_INSTANT_NANOS",
    "to_epoch_nanos",
    "from_epoch_nanos",
    "split_epoch_nanos",
]
