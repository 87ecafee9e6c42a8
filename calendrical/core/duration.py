"""Duration class representing an exact, time-based span.

This module provides the Duration class: a signed count of seconds plus
a sub-second nanosecond adjustment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from calendrical._internal.constants import (
    I64_MAX,
    I64_MIN,
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from calendrical.errors import OverflowError

if TYPE_CHECKING:
    from calendrical.core.temporal import TemporalInstant

_MIN_TOTAL_NANOS = I64_MIN * NANOS_PER_SECOND - (NANOS_PER_SECOND - 1)
_MAX_TOTAL_NANOS = I64_MAX * NANOS_PER_SECOND + (NANOS_PER_SECOND - 1)


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division truncating toward zero (divisor > 0)."""
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def _clamp_total(total_nanos: int) -> int:
    return max(_MIN_TOTAL_NANOS, min(_MAX_TOTAL_NANOS, total_nanos))


class Duration:
    """An exact span of time with nanosecond precision.

    Duration stores a whole number of seconds and a nanosecond
    adjustment that always carries the same sign as the seconds (both
    non-negative or both non-positive). The seconds component fits a
    signed 64-bit integer.

    Failure policy:
        - Constructors (`of_*`) reject values that do not fit and raise
          OverflowError.
        - Arithmetic (`plus`, `minus`, `plus_*`, `minus_*`, `negated`,
          `abs`) saturates at Duration.MIN / Duration.MAX and never
          raises. Saturated values stay put under further arithmetic in
          the same direction.

    Examples:
        >>> d = Duration.of_seconds(90)
        >>> d.to_minutes()
        1

        >>> Duration.of_minutes(-90).to_hours()  # truncates toward zero
        -1

        >>> Duration.MAX.plus_days(1) == Duration.MAX
        True
    """

    __slots__ = ("_seconds", "_nanos")

    ZERO: Duration
    MIN: Duration
    MAX: Duration

    def __init__(self, seconds: int = 0, nanos: int = 0) -> None:
        """Create a Duration from seconds and a nanosecond adjustment.

        The two parts are combined and normalized, so
        `Duration(1, -500_000_000)` is half a second.

        Raises:
            OverflowError: If the total does not fit the representable range.
        """
        total = seconds * NANOS_PER_SECOND + nanos
        if total < _MIN_TOTAL_NANOS or total > _MAX_TOTAL_NANOS:
            raise OverflowError(
                f"duration of {total} nanoseconds exceeds the 64-bit seconds range"
            )
        self._seconds, self._nanos = _split(total)

    @classmethod
    def _from_total_nanos(cls, total_nanos: int) -> Duration:
        """Create a Duration from total nanoseconds, saturating at MIN/MAX."""
        instance = object.__new__(cls)
        instance._seconds, instance._nanos = _split(_clamp_total(total_nanos))
        return instance

    @classmethod
    def of_days(cls, days: int) -> Duration:
        """Create a Duration of standard 24-hour days.

        Raises:
            OverflowError: If the result does not fit.

        Examples:
            >>> Duration.of_days(2).to_hours()
            48
        """
        return cls(nanos=days * NANOS_PER_DAY)

    @classmethod
    def of_hours(cls, hours: int) -> Duration:
        """Create a Duration from a number of hours."""
        return cls(nanos=hours * NANOS_PER_HOUR)

    @classmethod
    def of_minutes(cls, minutes: int) -> Duration:
        """Create a Duration from a number of minutes."""
        return cls(nanos=minutes * NANOS_PER_MINUTE)

    @classmethod
    def of_seconds(cls, seconds: int, nano_adjustment: int = 0) -> Duration:
        """Create a Duration from seconds and an optional nanosecond adjustment.

        Examples:
            >>> Duration.of_seconds(3, -1).nano
            999999999
            >>> Duration.of_seconds(-3).seconds
            -3
        """
        return cls(seconds, nano_adjustment)

    @classmethod
    def of_millis(cls, millis: int) -> Duration:
        """Create a Duration from a number of milliseconds."""
        return cls(nanos=millis * NANOS_PER_MILLISECOND)

    @classmethod
    def of_nanos(cls, nanos: int) -> Duration:
        """Create a Duration from a number of nanoseconds."""
        return cls(nanos=nanos)

    @classmethod
    def between(
        cls, start_inclusive: TemporalInstant, end_exclusive: TemporalInstant
    ) -> Duration:
        """Return the exact duration from start to end.

        Both arguments must expose `epoch_nanoseconds()`. The result is
        negative when end is before start, and saturates if the span
        does not fit.

        Examples:
            >>> from calendrical import Instant
            >>> Duration.between(Instant.of_epoch_second(0), Instant.of_epoch_second(61))
            Duration(seconds=61, nanos=0)
        """
        diff = end_exclusive.epoch_nanoseconds() - start_inclusive.epoch_nanoseconds()
        return cls._from_total_nanos(diff)

    @property
    def seconds(self) -> int:
        """Return the whole seconds (same sign as the duration)."""
        return self._seconds

    @property
    def nano(self) -> int:
        """Return the nanosecond adjustment (same sign as the duration)."""
        return self._nanos

    def _total_nanos(self) -> int:
        return self._seconds * NANOS_PER_SECOND + self._nanos

    # --- Conversions to whole units (truncate toward zero) ---

    def to_days(self) -> int:
        """Return the whole number of days, truncated toward zero."""
        return _trunc_div(self._total_nanos(), NANOS_PER_DAY)

    def to_hours(self) -> int:
        """Return the whole number of hours, truncated toward zero.

        Examples:
            >>> Duration.of_seconds(-(3 * 3600 + 59 * 60 + 59)).to_hours()
            -3
        """
        return _trunc_div(self._total_nanos(), NANOS_PER_HOUR)

    def to_minutes(self) -> int:
        """Return the whole number of minutes, truncated toward zero."""
        return _trunc_div(self._total_nanos(), NANOS_PER_MINUTE)

    def to_seconds(self) -> int:
        """Return the whole number of seconds, truncated toward zero."""
        return self._seconds

    def to_millis(self) -> int:
        """Return the whole number of milliseconds, clamped to 64 bits."""
        millis = _trunc_div(self._total_nanos(), NANOS_PER_MILLISECOND)
        return max(I64_MIN, min(I64_MAX, millis))

    def to_nanos(self) -> int:
        """Return the exact total number of nanoseconds."""
        return self._total_nanos()

    # --- Sign checks ---

    def is_negative(self) -> bool:
        """Return True if the duration is shorter than zero."""
        return self._seconds < 0 or self._nanos < 0

    def is_zero(self) -> bool:
        """Return True if the duration is exactly zero."""
        return self._seconds == 0 and self._nanos == 0

    def is_positive(self) -> bool:
        """Return True if the duration is longer than zero."""
        return self._seconds > 0 or self._nanos > 0

    # --- Saturating arithmetic ---

    def plus(self, other: Duration) -> Duration:
        """Return the sum of two durations, saturating at MIN/MAX."""
        return Duration._from_total_nanos(self._total_nanos() + other._total_nanos())

    def minus(self, other: Duration) -> Duration:
        """Return the difference of two durations, saturating at MIN/MAX."""
        return Duration._from_total_nanos(self._total_nanos() - other._total_nanos())

    def _plus_nanos_total(self, nanos: int) -> Duration:
        return Duration._from_total_nanos(self._total_nanos() + nanos)

    def plus_days(self, days: int) -> Duration:
        """Add standard 24-hour days, saturating at MIN/MAX."""
        return self._plus_nanos_total(days * NANOS_PER_DAY)

    def minus_days(self, days: int) -> Duration:
        return self.plus_days(-days)

    def plus_hours(self, hours: int) -> Duration:
        """Add hours, saturating at MIN/MAX."""
        return self._plus_nanos_total(hours * NANOS_PER_HOUR)

    def minus_hours(self, hours: int) -> Duration:
        return self.plus_hours(-hours)

    def plus_minutes(self, minutes: int) -> Duration:
        """Add minutes, saturating at MIN/MAX."""
        return self._plus_nanos_total(minutes * NANOS_PER_MINUTE)

    def minus_minutes(self, minutes: int) -> Duration:
        return self.plus_minutes(-minutes)

    def plus_seconds(self, seconds: int) -> Duration:
        """Add seconds, saturating at MIN/MAX."""
        return self._plus_nanos_total(seconds * NANOS_PER_SECOND)

    def minus_seconds(self, seconds: int) -> Duration:
        return self.plus_seconds(-seconds)

    def plus_millis(self, millis: int) -> Duration:
        """Add milliseconds, saturating at MIN/MAX."""
        return self._plus_nanos_total(millis * NANOS_PER_MILLISECOND)

    def minus_millis(self, millis: int) -> Duration:
        return self.plus_millis(-millis)

    def plus_nanos(self, nanos: int) -> Duration:
        """Add nanoseconds, saturating at MIN/MAX."""
        return self._plus_nanos_total(nanos)

    def minus_nanos(self, nanos: int) -> Duration:
        return self.plus_nanos(-nanos)

    def negated(self) -> Duration:
        """Return the duration with the opposite sign, saturating.

        Negating MIN yields MAX, since -MIN is not representable.
        """
        return Duration._from_total_nanos(-self._total_nanos())

    def abs(self) -> Duration:
        """Return the absolute value, saturating.

        `Duration.MIN.abs()` is `Duration.MAX`, never a negative value.
        """
        if self.is_negative():
            return self.negated()
        return self

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus(other)

    def __neg__(self) -> Duration:
        return self.negated()

    def __abs__(self) -> Duration:
        return self.abs()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._seconds == other._seconds and self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._total_nanos() < other._total_nanos()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._total_nanos() <= other._total_nanos()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._total_nanos() > other._total_nanos()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._total_nanos() >= other._total_nanos()

    def __hash__(self) -> int:
        return hash((self._seconds, self._nanos))

    def __repr__(self) -> str:
        return f"Duration(seconds={self._seconds}, nanos={self._nanos})"

    def __str__(self) -> str:
        """Return the ISO-8601 representation, e.g. 'PT1H30M' or 'PT-0.5S'."""
        if self.is_zero():
            return "PT0S"

        sign = "-" if self.is_negative() else ""
        hours, rem = divmod(abs(self._seconds), SECONDS_PER_HOUR)
        minutes, secs = divmod(rem, SECONDS_PER_MINUTE)
        nanos = abs(self._nanos)

        parts = ["PT"]
        if hours:
            parts.append(f"{sign}{hours}H")
        if minutes:
            parts.append(f"{sign}{minutes}M")
        if secs or nanos:
            parts.append(f"{sign}{secs}")
            if nanos:
                parts.append("." + f"{nanos:09d}".rstrip("0"))
            parts.append("S")
        return "".join(parts)

    def __bool__(self) -> bool:
        """Return True if this is a non-zero duration."""
        return not self.is_zero()


def _split(total_nanos: int) -> tuple[int, int]:
    """Split total nanoseconds into sign-consistent (seconds, nanos)."""
    seconds = _trunc_div(total_nanos, NANOS_PER_SECOND)
    return seconds, total_nanos - seconds * NANOS_PER_SECOND


Duration.ZERO = Duration()
Duration.MIN = Duration._from_total_nanos(_MIN_TOTAL_NANOS)
Duration.MAX = Duration._from_total_nanos(_MAX_TOTAL_NANOS)


__all__ = ["Duration"]
