"""Conversions between local date-time fields and the epoch timeline.

A local date-time is represented here as an (epoch_day, nano_of_day)
pair. Together with a UTC offset in seconds it identifies a single
nanosecond on the UTC timeline.

Examples:
    >>> to_epoch_nanos(0, 0, 3600)  # 1970-01-01T00:00+01:00
    -3600000000000
    >>> from_epoch_nanos(-1, 0)  # one nanosecond before the epoch, UTC
    (-1, 86399999999999)
"""

from __future__ import annotations

from calendrical._internal.calendar import MAX_EPOCH_DAY, MIN_EPOCH_DAY
from calendrical._internal.constants import (
    MAX_OFFSET_SECONDS,
    NANOS_PER_DAY,
    NANOS_PER_SECOND,
)

# Range of the UTC timeline covered by a LocalDateTime read as UTC.
MIN_EPOCH_NANOS: int = MIN_EPOCH_DAY * NANOS_PER_DAY
MAX_EPOCH_NANOS: int = MAX_EPOCH_DAY * NANOS_PER_DAY + NANOS_PER_DAY - 1

# Range of an Instant: every instant in it has a LocalDateTime at every offset.
MIN_INSTANT_NANOS: int = MIN_EPOCH_NANOS + MAX_OFFSET_SECONDS * NANOS_PER_SECOND
MAX_INSTANT_NANOS: int = MAX_EPOCH_NANOS - MAX_OFFSET_SECONDS * NANOS_PER_SECOND


def to_epoch_nanos(epoch_day: int, nano_of_day: int, offset_seconds: int = 0) -> int:
    """Return nanoseconds since 1970-01-01T00:00:00Z for local fields at an offset.

    Args:
        epoch_day: Days since 1970-01-01 of the local date.
        nano_of_day: Nanoseconds since local midnight.
        offset_seconds: The UTC offset of the local fields.
    """
    return epoch_day * NANOS_PER_DAY + nano_of_day - offset_seconds * NANOS_PER_SECOND


def from_epoch_nanos(epoch_nanos: int, offset_seconds: int = 0) -> tuple[int, int]:
    """Split an epoch-nanosecond count into local (epoch_day, nano_of_day).

    Floor division is used, so instants before the epoch map to the
    previous day with a non-negative nano-of-day.
    """
    local = epoch_nanos + offset_seconds * NANOS_PER_SECOND
    return divmod(local, NANOS_PER_DAY)


def split_epoch_nanos(epoch_nanos: int) -> tuple[int, int]:
    """Split epoch nanoseconds into (epoch_second, nano_of_second), flooring.

    Examples:
        >>> split_epoch_nanos(-1)
        (-1, 999999999)
    """
    return divmod(epoch_nanos, NANOS_PER_SECOND)


__all__ = [
    "MIN_EPOCH_NANOS",
    "MAX_EPOCH_NANOS",
    "MIN_INSTANT_NANOS",
    "MAX_INSTANT_NANOS",
    "to_epoch_nanos",
    "from_epoch_nanos",
    "split_epoch_nanos",
]
