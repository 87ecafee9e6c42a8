"""LocalTime class representing a time of day.

This module provides the LocalTime class for time-of-day values with
nanosecond precision and wraparound arithmetic.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar

from calendrical._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from calendrical._internal.validation import validate_field, validate_range
from calendrical.core.temporal import Temporal, TimeLike
from calendrical.errors import ParseError

if TYPE_CHECKING:
    from calendrical.clock import Clock
    from calendrical.core.date import LocalDate
    from calendrical.core.datetime import LocalDateTime

_EXTENDED_PATTERN = re.compile(r"^(\d{2}):(\d{2})(?::(\d{2})(?:\.(\d{1,9}))?)?$")
_COMPACT_PATTERN = re.compile(r"^(\d{2})(\d{2})(\d{2})(?:\.(\d{1,9}))?$")


def parse_fraction(frac_str: str) -> int:
    """Convert the digits after the decimal point into nanoseconds.

    Examples:
        >>> parse_fraction("5")
        500000000
        >>> parse_fraction("123456789")
        123456789
    """
    return int(frac_str.ljust(9, "0"))


class LocalTime(Temporal, TimeLike):
    """A time of day without a date or zone, such as 10:15:30.

    The internal representation is the number of nanoseconds since
    midnight, 0 <= n < 86,400 * 10^9, in a single `_nanos` slot.

    Failure policy:
        - Construction and the `with_*` setters reject out-of-range
          fields with ValidationError.
        - `plus_*`/`minus_*` never fail. They wrap around midnight and
          never carry into a date: 23:00 plus 2 hours is 01:00.

    Examples:
        >>> LocalTime.of(23, 0).plus_hours(2)
        LocalTime(1, 0, 0)

        >>> LocalTime.MIDNIGHT.minus_nanoseconds(1)
        LocalTime(23, 59, 59, 999999999)

        >>> t = LocalTime.of(12, 0, 0, 123_456_789)
        >>> t.millisecond
        123
    """

    __slots__ = ("_nanos",)

    MIN: ClassVar[LocalTime]
    MAX: ClassVar[LocalTime]
    MIDNIGHT: ClassVar[LocalTime]
    NOON: ClassVar[LocalTime]

    @validate_range(hour=(0, 23), minute=(0, 59), second=(0, 59), nanosecond=(0, 999_999_999))
    def __init__(
        self, hour: int = 0, minute: int = 0, second: int = 0, nanosecond: int = 0
    ) -> None:
        """Create a LocalTime from component parts.

        Raises:
            ValidationError: If any component is out of range.
        """
        self._nanos: int = (
            hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )

    @classmethod
    def _from_nanos(cls, nanos: int) -> LocalTime:
        """Create a LocalTime from nanoseconds since midnight without validation."""
        instance = object.__new__(cls)
        instance._nanos = nanos
        return instance

    @classmethod
    def of(
        cls, hour: int, minute: int = 0, second: int = 0, nanosecond: int = 0
    ) -> LocalTime:
        """Create a LocalTime from hour, minute, second and nanosecond.

        Raises:
            ValidationError: If any component is out of range.
        """
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def of_nano_of_day(cls, nano_of_day: int) -> LocalTime:
        """Create a LocalTime from nanoseconds since midnight.

        Raises:
            ValidationError: If nano_of_day is negative or a full day or more.
        """
        validate_field("nano_of_day", nano_of_day, 0, NANOS_PER_DAY - 1)
        return cls._from_nanos(nano_of_day)

    @classmethod
    def now(cls, clock: Clock | None = None) -> LocalTime:
        """Return the current time of day according to a clock.

        Args:
            clock: The clock to read; defaults to the system clock in UTC.
        """
        from calendrical.core.datetime import LocalDateTime

        return LocalDateTime.now(clock).to_local_time()

    @classmethod
    def parse(cls, s: str) -> LocalTime:
        """Parse an ISO 8601 time string.

        Supported formats:
            - HH:MM
            - HH:MM:SS
            - HH:MM:SS.fffffffff (1-9 fraction digits)
            - HHMMSS[.fffffffff]

        Raises:
            ParseError: If the string is not a valid ISO 8601 time.
            ValidationError: If a component is out of range.

        Examples:
            >>> LocalTime.parse("14:30:45.5")
            LocalTime(14, 30, 45, 500000000)
        """
        if not isinstance(s, str):
            raise ParseError(f"Expected string, got {type(s).__name__}")
        s = s.strip()
        if not s:
            raise ParseError("empty time string")

        match = _EXTENDED_PATTERN.match(s) or _COMPACT_PATTERN.match(s)
        if not match:
            raise ParseError(f"invalid ISO 8601 time format: {s!r}")

        hour_str, minute_str, second_str, frac_str = match.groups()
        return cls(
            int(hour_str),
            int(minute_str),
            int(second_str) if second_str else 0,
            parse_fraction(frac_str) if frac_str else 0,
        )

    # --- Fields ---

    @property
    def hour(self) -> int:
        return self._nanos // NANOS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._nanos % NANOS_PER_HOUR) // NANOS_PER_MINUTE

    @property
    def second(self) -> int:
        return (self._nanos % NANOS_PER_MINUTE) // NANOS_PER_SECOND

    @property
    def nanosecond(self) -> int:
        return self._nanos % NANOS_PER_SECOND

    @property
    def nano_of_day(self) -> int:
        return self._nanos

    def to_second_of_day(self) -> int:
        """Return the whole seconds elapsed since midnight."""
        return self._nanos // NANOS_PER_SECOND

    # --- Arithmetic (wrapping) ---

    def plus_nanoseconds(self, nanos: int) -> LocalTime:
        """Add nanoseconds, wrapping around midnight. Never raises."""
        if nanos == 0:
            return self
        return LocalTime._from_nanos((self._nanos + nanos) % NANOS_PER_DAY)

    # --- Field setters (rejecting) ---

    def with_hour(self, hour: int) -> LocalTime:
        """Return a copy with the hour replaced.

        Raises:
            ValidationError: If hour is outside 0-23.
        """
        return LocalTime(hour, self.minute, self.second, self.nanosecond)

    def with_minute(self, minute: int) -> LocalTime:
        return LocalTime(self.hour, minute, self.second, self.nanosecond)

    def with_second(self, second: int) -> LocalTime:
        return LocalTime(self.hour, self.minute, second, self.nanosecond)

    def with_nanosecond(self, nanosecond: int) -> LocalTime:
        return LocalTime(self.hour, self.minute, self.second, nanosecond)

    def at_date(self, date: LocalDate) -> LocalDateTime:
        """Combine this time with a date."""
        from calendrical.core.datetime import LocalDateTime

        return LocalDateTime.of_date_time(date, self)

    def to_iso_format(self, *, precision: str = "auto") -> str:
        """Return the time as an ISO 8601 string.

        Args:
            precision: Subsecond precision to include:
                - "auto": Include subseconds only if non-zero, minimal digits
                - "seconds": No subseconds (HH:MM:SS)
                - "millis": Always 3 decimal places
                - "nanos": Always 9 decimal places

        Examples:
            >>> LocalTime.of(14, 30, 45).to_iso_format()
            '14:30:45'
            >>> LocalTime.of(14, 30, 45, 123_000_000).to_iso_format()
            '14:30:45.123'
        """
        base = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        nanos = self.nanosecond

        if precision == "seconds":
            return base
        elif precision == "millis":
            return f"{base}.{nanos // 1_000_000:03d}"
        elif precision == "nanos":
            return f"{base}.{nanos:09d}"
        else:  # auto
            if nanos == 0:
                return base
            return f"{base}.{f'{nanos:09d}'.rstrip('0')}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalTime):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        if self.nanosecond:
            return (
                f"LocalTime({self.hour}, {self.minute}, {self.second}, "
                f"{self.nanosecond})"
            )
        return f"LocalTime({self.hour}, {self.minute}, {self.second})"

    def __str__(self) -> str:
        return self.to_iso_format()


LocalTime.MIN = LocalTime._from_nanos(0)
LocalTime.MAX = LocalTime._from_nanos(NANOS_PER_DAY - 1)
LocalTime.MIDNIGHT = LocalTime.MIN
LocalTime.NOON = LocalTime._from_nanos(12 * NANOS_PER_HOUR)


__all__ = ["LocalTime"]
