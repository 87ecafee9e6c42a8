"""ZonedDateTime: a local date-time in a named time zone."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from calendrical.core.datetime import LocalDateTime, _AttachedDateTime
from calendrical.errors import ParseError
from calendrical.units.zone_database import default_zone_database
from calendrical.units.zone_id import ZoneId

if TYPE_CHECKING:
    from calendrical.clock import Clock
    from calendrical.core.offset_datetime import OffsetDateTime
    from calendrical.units.zone_database import ZoneDatabase
    from calendrical.units.zone_offset import ZoneOffset

_ZONED_PATTERN = re.compile(
    r"^(.+?)(Z|z|[+-]\d{2}(?::?\d{2}(?::?\d{2})?)?)?\[([^\]]+)\]$"
)


class ZonedDateTime(_AttachedDateTime):
    """A date-time in a named zone, such as 2024-01-15T10:15:30+01:00[Europe/Paris].

    A ZonedDateTime holds a local date-time and a ZoneId. The UTC offset
    is not stored: it is resolved lazily, whenever it is needed, through
    the zone database the value was created with. Only the zone's
    current offset is known; DST transitions are not modelled, and
    arithmetic never re-resolves anything beyond that lookup.

    Equality and hashing use the (local date-time, zone) pair.

    Examples:
        >>> from calendrical.units.zone_database import FixedZoneDatabase
        >>> from calendrical import ZoneOffset
        >>> db = FixedZoneDatabase({"Asia/Tokyo": ZoneOffset.of_hours(9)})
        >>> zdt = ZonedDateTime.of(
        ...     LocalDateTime.of(2024, 1, 15, 9), ZoneId.of("Asia/Tokyo", db), db
        ... )
        >>> str(zdt)
        '2024-01-15T09:00:00+09:00[Asia/Tokyo]'
    """

    __slots__ = ("_ldt", "_zone", "_database")

    def __init__(
        self,
        ldt: LocalDateTime,
        zone: ZoneId,
        database: ZoneDatabase | None = None,
    ) -> None:
        self._ldt = ldt
        self._zone = zone
        self._database = database

    @classmethod
    def of(
        cls,
        ldt: LocalDateTime,
        zone: ZoneId,
        database: ZoneDatabase | None = None,
    ) -> ZonedDateTime:
        """Combine a local date-time and a zone.

        Args:
            ldt: The local date-time.
            zone: The zone.
            database: Zone database used to resolve the offset; defaults
                to the standard library backed database.
        """
        return cls(ldt, zone, database)

    @classmethod
    def now_utc(cls) -> ZonedDateTime:
        """Return the current date-time in the UTC zone."""
        from calendrical.clock import Clock

        return cls.now(Clock.system_utc())

    @classmethod
    def now(cls, clock: Clock | None = None) -> ZonedDateTime:
        """Return the current date-time in the clock's zone."""
        from calendrical.clock import Clock

        if clock is None:
            clock = Clock.system_default_zone()
        return clock.instant().at_zone(clock.zone, clock.database)

    @classmethod
    def parse(cls, s: str, database: ZoneDatabase | None = None) -> ZonedDateTime:
        """Parse text like '2024-01-15T10:15:30+01:00[Europe/Paris]'.

        The bracketed zone is authoritative; a written offset is accepted
        but not checked against the zone.

        Raises:
            ParseError: If the text is malformed.
            TimezoneError: If the zone is unknown.
        """
        if not isinstance(s, str):
            raise ParseError(f"Expected string, got {type(s).__name__}")
        match = _ZONED_PATTERN.match(s.strip())
        if not match:
            raise ParseError(f"Invalid ISO 8601 zoned date-time format: {s!r}")
        ldt_str, _, zone_str = match.groups()
        return cls(
            LocalDateTime.parse(ldt_str), ZoneId.of(zone_str, database), database
        )

    @property
    def zone(self) -> ZoneId:
        return self._zone

    @property
    def database(self) -> ZoneDatabase:
        """Return the zone database this value resolves its offset with."""
        if self._database is None:
            return default_zone_database()
        return self._database

    @property
    def offset(self) -> ZoneOffset:
        """Resolve the zone's offset.

        Raises:
            TimezoneError: If the database does not know the zone.
        """
        return self._zone.resolve(self.database)

    def _with_local(self, ldt: LocalDateTime) -> ZonedDateTime:
        return ZonedDateTime(ldt, self._zone, self._database)

    def _offset_seconds(self) -> int:
        return self.offset.total_seconds

    def to_offset_date_time(self) -> OffsetDateTime:
        """Return the local date-time at the resolved offset."""
        from calendrical.core.offset_datetime import OffsetDateTime

        return OffsetDateTime.of(self._ldt, self.offset)

    def with_zone_same_local(self, zone: ZoneId) -> ZonedDateTime:
        """Keep the local date-time and replace the zone."""
        return ZonedDateTime(self._ldt, zone, self._database)

    def with_zone_same_instant(self, zone: ZoneId) -> ZonedDateTime:
        """Keep the instant and re-express it in another zone."""
        if zone == self._zone:
            return self
        target = zone.resolve(self.database)
        ldt = LocalDateTime._from_epoch_nanos(
            self.epoch_nanoseconds(), target.total_seconds
        )
        return ZonedDateTime(ldt, zone, self._database)

    def to_iso_format(self) -> str:
        return f"{self._ldt.to_iso_format()}{self.offset}[{self._zone}]"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._ldt == other._ldt and self._zone == other._zone

    def _key(self) -> tuple[int, LocalDateTime, str]:
        return (self.epoch_nanoseconds(), self._ldt, self._zone.id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ZonedDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash((self._ldt, self._zone))

    def __repr__(self) -> str:
        return f"ZonedDateTime({self._ldt!r}, {self._zone!r})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["ZonedDateTime"]
