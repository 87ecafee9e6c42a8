"""ChronoUnit: unit-polymorphic arithmetic over the temporal types.

`ChronoUnit.add_to(temporal, amount)` dispatches to the matching
per-type method, and `ChronoUnit.between(start, end)` counts whole
units on the epoch timeline.

Months and years have no fixed length. For `duration()` and `between()`
they are approximated as 30 and 365 days respectively; this is a
simple flat approximation, not calendar-aware counting.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

from calendrical._internal.constants import (
    APPROX_DAYS_PER_MONTH,
    APPROX_DAYS_PER_YEAR,
    DAYS_PER_WEEK,
    NANOS_PER_DAY,
    NANOS_PER_HALF_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from calendrical.errors import UnsupportedUnitError

if TYPE_CHECKING:
    from calendrical.core.duration import Duration
    from calendrical.core.temporal import TemporalInstant

T = TypeVar("T")


class ChronoUnit(Enum):
    """A standard unit of time.

    The value of each member is its length in nanoseconds (approximate
    for MONTHS and YEARS).

    Examples:
        >>> from calendrical import Instant
        >>> start, end = Instant.of_epoch_second(0), Instant.of_epoch_second(3661)
        >>> ChronoUnit.SECONDS.between(start, end)
        3661
        >>> ChronoUnit.HOURS.between(start, end)
        1
        >>> ChronoUnit.DAYS.between(start, end)
        0
    """

    NANOS = 1
    MILLIS = NANOS_PER_MILLISECOND
    SECONDS = NANOS_PER_SECOND
    MINUTES = NANOS_PER_MINUTE
    HOURS = NANOS_PER_HOUR
    HALF_DAYS = NANOS_PER_HALF_DAY
    DAYS = NANOS_PER_DAY
    WEEKS = DAYS_PER_WEEK * NANOS_PER_DAY
    MONTHS = APPROX_DAYS_PER_MONTH * NANOS_PER_DAY
    YEARS = APPROX_DAYS_PER_YEAR * NANOS_PER_DAY

    def is_time_based(self) -> bool:
        """Return True for NANOS through HALF_DAYS."""
        return self.value < NANOS_PER_DAY

    def is_date_based(self) -> bool:
        """Return True for DAYS through YEARS."""
        return self.value >= NANOS_PER_DAY

    def duration(self) -> Duration:
        """Return the (approximate, for MONTHS and YEARS) length of this unit."""
        from calendrical.core.duration import Duration

        return Duration.of_nanos(self.value)

    def add_to(self, temporal: T, amount: int) -> T:
        """Add `amount` of this unit to a temporal value.

        Supported combinations:
            - LocalTime: NANOS through HALF_DAYS (wrapping)
            - LocalDate: DAYS through YEARS
            - LocalDateTime, OffsetDateTime, ZonedDateTime: every unit
            - Instant: NANOS through HALF_DAYS

        Raises:
            UnsupportedUnitError: If the unit has no meaning for the type,
                e.g. MONTHS on an Instant or HOURS on a LocalDate.
        """
        adder = _find_adder(self, temporal)
        if adder is None:
            raise UnsupportedUnitError(self, type(temporal))
        method_name, factor = adder
        return getattr(temporal, method_name)(amount * factor)

    def between(
        self, start_inclusive: TemporalInstant, end_exclusive: TemporalInstant
    ) -> int:
        """Return the whole units from start to end, truncated toward zero.

        Negative when end is before start. MONTHS and YEARS divide by 30
        and 365 days.
        """
        diff = end_exclusive.epoch_nanoseconds() - start_inclusive.epoch_nanoseconds()
        whole = abs(diff) // self.value
        return -whole if diff < 0 else whole

    def __str__(self) -> str:
        return self.name


# unit -> (method name, multiplier) on DateLike / TimeLike values
_DATE_ADDERS: dict[ChronoUnit, tuple[str, int]] = {
    ChronoUnit.DAYS: ("plus_days", 1),
    ChronoUnit.WEEKS: ("plus_weeks", 1),
    ChronoUnit.MONTHS: ("plus_months", 1),
    ChronoUnit.YEARS: ("plus_years", 1),
}

_TIME_ADDERS: dict[ChronoUnit, tuple[str, int]] = {
    ChronoUnit.NANOS: ("plus_nanoseconds", 1),
    ChronoUnit.MILLIS: ("plus_milliseconds", 1),
    ChronoUnit.SECONDS: ("plus_seconds", 1),
    ChronoUnit.MINUTES: ("plus_minutes", 1),
    ChronoUnit.HOURS: ("plus_hours", 1),
    ChronoUnit.HALF_DAYS: ("plus_hours", 12),
}

_INSTANT_ADDERS: dict[ChronoUnit, tuple[str, int]] = {
    ChronoUnit.NANOS: ("plus_nanos", 1),
    ChronoUnit.MILLIS: ("plus_millis", 1),
    ChronoUnit.SECONDS: ("plus_seconds", 1),
    ChronoUnit.MINUTES: ("plus_seconds", 60),
    ChronoUnit.HOURS: ("plus_seconds", 3_600),
    ChronoUnit.HALF_DAYS: ("plus_seconds", 43_200),
}


def _find_adder(unit: ChronoUnit, temporal: object) -> tuple[str, int] | None:
    from calendrical.core.instant import Instant
    from calendrical.core.temporal import DateLike, TimeLike

    if isinstance(temporal, Instant):
        return _INSTANT_ADDERS.get(unit)
    if isinstance(temporal, DateLike) and unit in _DATE_ADDERS:
        return _DATE_ADDERS[unit]
    if isinstance(temporal, TimeLike) and unit in _TIME_ADDERS:
        return _TIME_ADDERS[unit]
    return None


__all__ = ["ChronoUnit"]
