"""Instant class representing a point on the UTC timeline.

This module provides the Instant class: a signed count of nanoseconds
since 1970-01-01T00:00:00Z. The range is the UTC LocalDateTime range
(years -9999 to 9999) narrowed by 18 hours at each end, so every
Instant has a local date-time at every offset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from calendrical._internal.constants import (
    NANOS_PER_HOUR,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from calendrical.convert.epoch import (
    MAX_INSTANT_NANOS,
    MIN_INSTANT_NANOS,
    split_epoch_nanos,
)
from calendrical.core.duration import Duration
from calendrical.core.temporal import Temporal, TemporalInstant
from calendrical.errors import OverflowError, ParseError

if TYPE_CHECKING:
    from calendrical.clock import Clock
    from calendrical.core.offset_datetime import OffsetDateTime
    from calendrical.core.zoned_datetime import ZonedDateTime
    from calendrical.units.zone_database import ZoneDatabase
    from calendrical.units.zone_id import ZoneId
    from calendrical.units.zone_offset import ZoneOffset


class Instant(Temporal, TemporalInstant):
    """An instantaneous point on the UTC timeline, with nanosecond precision.

    Instant arithmetic is checked: any result outside Instant.MIN to
    Instant.MAX raises OverflowError instead of saturating.

    Only time-based units apply to an Instant. Days, weeks, months and
    years have no meaning without a calendar and are rejected by
    ChronoUnit.add_to.

    Examples:
        >>> Instant.of_epoch_second(3661).epoch_second
        3661

        >>> str(Instant.of_epoch_milli(1500))
        '1970-01-01T00:00:01.5Z'

        >>> Instant.EPOCH.minus_nanos(1).epoch_seconds()
        -1
    """

    __slots__ = ("_nanos",)

    EPOCH: ClassVar[Instant]
    MIN: ClassVar[Instant]
    MAX: ClassVar[Instant]

    def __init__(self, epoch_nanos: int = 0) -> None:
        """Create an Instant from nanoseconds since the epoch.

        Raises:
            OverflowError: If the value is outside Instant.MIN to Instant.MAX.
        """
        if epoch_nanos < MIN_INSTANT_NANOS or epoch_nanos > MAX_INSTANT_NANOS:
            raise OverflowError(
                f"instant {epoch_nanos}ns since the epoch is outside the supported range"
            )
        self._nanos = epoch_nanos

    @classmethod
    def _from_epoch_nanos(cls, epoch_nanos: int) -> Instant:
        return cls(epoch_nanos)

    @classmethod
    def of_epoch_second(cls, epoch_second: int, nano_adjustment: int = 0) -> Instant:
        """Create an Instant from epoch seconds and a nanosecond adjustment.

        Raises:
            OverflowError: If the result is outside the supported range.
        """
        return cls(epoch_second * NANOS_PER_SECOND + nano_adjustment)

    @classmethod
    def of_epoch_milli(cls, epoch_milli: int) -> Instant:
        """Create an Instant from epoch milliseconds."""
        return cls(epoch_milli * NANOS_PER_MILLISECOND)

    @classmethod
    def now(cls, clock: Clock | None = None) -> Instant:
        """Return the current instant.

        The system clock maps a monotonic reading onto the wall clock
        anchored at first use, so successive readings never go backwards.

        Args:
            clock: The clock to read; defaults to the system UTC clock.
        """
        from calendrical.clock import Clock

        if clock is None:
            clock = Clock.system_utc()
        return clock.instant()

    @classmethod
    def parse(cls, s: str) -> Instant:
        """Parse an ISO 8601 instant such as '2024-01-15T10:00:00Z'.

        Any offset is accepted and applied.

        Raises:
            ParseError: If the text is malformed.
        """
        from calendrical.core.offset_datetime import OffsetDateTime

        if not isinstance(s, str):
            raise ParseError(f"Expected string, got {type(s).__name__}")
        return OffsetDateTime.parse(s).to_instant()

    @property
    def epoch_second(self) -> int:
        """Return the whole seconds since the epoch (floored)."""
        return split_epoch_nanos(self._nanos)[0]

    @property
    def nano(self) -> int:
        """Return the nanosecond of the second, always 0-999,999,999."""
        return split_epoch_nanos(self._nanos)[1]

    def epoch_nanoseconds(self) -> int:
        return self._nanos

    def to_epoch_milli(self) -> int:
        return self.epoch_milliseconds()

    # --- Checked arithmetic ---

    def _plus_total(self, nanos: int) -> Instant:
        if nanos == 0:
            return self
        return Instant(self._nanos + nanos)

    def plus(self, duration: Duration) -> Instant:
        """Add a Duration.

        Raises:
            OverflowError: If the result is outside the supported range.
        """
        return self._plus_total(duration.to_nanos())

    def minus(self, duration: Duration) -> Instant:
        return self._plus_total(-duration.to_nanos())

    def plus_seconds(self, seconds: int) -> Instant:
        return self._plus_total(seconds * NANOS_PER_SECOND)

    def minus_seconds(self, seconds: int) -> Instant:
        return self._plus_total(-seconds * NANOS_PER_SECOND)

    def plus_millis(self, millis: int) -> Instant:
        return self._plus_total(millis * NANOS_PER_MILLISECOND)

    def minus_millis(self, millis: int) -> Instant:
        return self._plus_total(-millis * NANOS_PER_MILLISECOND)

    def plus_nanos(self, nanos: int) -> Instant:
        return self._plus_total(nanos)

    def minus_nanos(self, nanos: int) -> Instant:
        return self._plus_total(-nanos)

    def plus_minutes(self, minutes: int) -> Instant:
        return self._plus_total(minutes * NANOS_PER_MINUTE)

    def plus_hours(self, hours: int) -> Instant:
        return self._plus_total(hours * NANOS_PER_HOUR)

    # --- Conversion ---

    def at_offset(self, offset: ZoneOffset) -> OffsetDateTime:
        """Return this instant as an OffsetDateTime at the given offset."""
        from calendrical.core.datetime import LocalDateTime
        from calendrical.core.offset_datetime import OffsetDateTime

        ldt = LocalDateTime._from_epoch_nanos(self._nanos, offset.total_seconds)
        return OffsetDateTime.of(ldt, offset)

    def at_zone(
        self, zone: ZoneId, database: ZoneDatabase | None = None
    ) -> ZonedDateTime:
        """Return this instant as a ZonedDateTime, using the zone's current offset."""
        from calendrical.core.datetime import LocalDateTime
        from calendrical.core.zoned_datetime import ZonedDateTime

        offset = zone.resolve(database)
        ldt = LocalDateTime._from_epoch_nanos(self._nanos, offset.total_seconds)
        return ZonedDateTime.of(ldt, zone, database)

    def to_iso_format(self) -> str:
        """Return the UTC ISO 8601 form, e.g. '2024-01-15T10:00:00Z'."""
        from calendrical.units.zone_offset import ZoneOffset

        return self.at_offset(ZoneOffset.UTC).to_iso_format()

    # --- Operators ---

    def __add__(self, other: object) -> Instant:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Instant | Duration:
        if isinstance(other, Instant):
            return Duration.between(other, self)
        if isinstance(other, Duration):
            return self.minus(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos == other._nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        return f"Instant({self._nanos})"

    def __str__(self) -> str:
        return self.to_iso_format()


Instant.EPOCH = Instant(0)
Instant.MIN = Instant(MIN_INSTANT_NANOS)
Instant.MAX = Instant(MAX_INSTANT_NANOS)


__all__ = ["Instant"]
