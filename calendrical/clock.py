"""Clocks: injectable sources of the current instant and zone.

Every `now()` factory in the library takes an optional Clock. Production
code uses the system clock; tests pass `Clock.fixed(...)` to make "now"
deterministic.

The system clock reads `time.monotonic_ns()` and maps it onto the wall
clock through an anchor pair (wall-clock nanoseconds, monotonic
nanoseconds) taken once, at first use. Readings from the system clock
therefore never go backwards, even if the wall clock is adjusted.
"""

from __future__ import annotations

import functools
import logging
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from calendrical._internal.constants import I64_MAX, I64_MIN
from calendrical.core.instant import Instant
from calendrical.units.zone_id import ZoneId

if TYPE_CHECKING:
    from calendrical.units.zone_database import ZoneDatabase
    from calendrical.units.zone_offset import ZoneOffset

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=1)
def _wallclock_anchor() -> tuple[int, int]:
    """Return the (wall-clock ns, monotonic ns) pair taken at first use."""
    anchor = (time.time_ns(), time.monotonic_ns())
    logger.debug("Anchored monotonic clock at wall-clock %dns", anchor[0])
    return anchor


class Clock(ABC):
    """A source of the current instant, paired with a zone.

    Examples:
        >>> fixed = Clock.fixed(Instant.of_epoch_second(60), ZoneId.UTC)
        >>> fixed.millis()
        60000
        >>> fixed.with_zone(ZoneId.of("Europe/Paris")).instant() == fixed.instant()
        True
    """

    __slots__ = ("_zone", "_database")

    def __init__(self, zone: ZoneId, database: ZoneDatabase | None = None) -> None:
        self._zone = zone
        self._database = database

    @staticmethod
    def fixed(
        instant: Instant, zone: ZoneId, database: ZoneDatabase | None = None
    ) -> FixedClock:
        """Return a clock that always reports the same instant."""
        return FixedClock(instant, zone, database)

    @staticmethod
    def system(zone: ZoneId, database: ZoneDatabase | None = None) -> SystemClock:
        """Return the system clock in the given zone."""
        return SystemClock(zone, database)

    @staticmethod
    def system_utc() -> SystemClock:
        return SystemClock(ZoneId.UTC)

    @staticmethod
    def system_default_zone() -> SystemClock:
        """Return the system clock in the default zone, which is UTC."""
        return SystemClock(ZoneId.UTC)

    @abstractmethod
    def instant(self) -> Instant:
        """Return the current instant."""

    @abstractmethod
    def with_zone(self, zone: ZoneId) -> Clock:
        """Return a clock of the same kind in another zone."""

    @property
    def zone(self) -> ZoneId:
        return self._zone

    @property
    def database(self) -> ZoneDatabase | None:
        """Return the zone database used to resolve this clock's zone, if injected."""
        return self._database

    def offset(self) -> ZoneOffset:
        """Resolve the current offset of this clock's zone.

        Raises:
            TimezoneError: If the zone database does not know the zone.
        """
        return self._zone.resolve(self._database)

    def millis(self) -> int:
        """Return the current epoch milliseconds, clamped to 64 bits."""
        return max(I64_MIN, min(I64_MAX, self.instant().epoch_milliseconds()))


class FixedClock(Clock):
    """A clock frozen at one instant."""

    __slots__ = ("_instant",)

    def __init__(
        self, instant: Instant, zone: ZoneId, database: ZoneDatabase | None = None
    ) -> None:
        super().__init__(zone, database)
        self._instant = instant

    def instant(self) -> Instant:
        return self._instant

    def with_zone(self, zone: ZoneId) -> FixedClock:
        return FixedClock(self._instant, zone, self._database)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedClock):
            return NotImplemented
        return self._instant == other._instant and self._zone == other._zone

    def __hash__(self) -> int:
        return hash((self._instant, self._zone))

    def __repr__(self) -> str:
        return f"FixedClock({self._instant!r}, {self._zone!r})"


class SystemClock(Clock):
    """The system clock, read through the monotonic-to-wall-clock anchor."""

    __slots__ = ()

    def instant(self) -> Instant:
        wall_anchor, mono_anchor = _wallclock_anchor()
        return Instant._from_epoch_nanos(
            wall_anchor + (time.monotonic_ns() - mono_anchor)
        )

    def with_zone(self, zone: ZoneId) -> SystemClock:
        return SystemClock(zone, self._database)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SystemClock):
            return NotImplemented
        return self._zone == other._zone

    def __hash__(self) -> int:
        return hash(("system", self._zone))

    def __repr__(self) -> str:
        return f"SystemClock({self._zone!r})"


__all__ = ["Clock", "FixedClock", "SystemClock"]
