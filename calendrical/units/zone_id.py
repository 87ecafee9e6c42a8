"""ZoneId: a named time zone such as "Europe/Paris"."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from calendrical.errors import TimezoneError
from calendrical.units.zone_database import UTC_ZONE_NAME, default_zone_database

if TYPE_CHECKING:
    from calendrical.units.zone_database import ZoneDatabase
    from calendrical.units.zone_offset import ZoneOffset


class ZoneId:
    """An opaque time-zone name, or the UTC sentinel.

    A ZoneId is only a name. Resolution to a numeric offset is deferred
    to a ZoneDatabase at the point of use.

    Examples:
        >>> ZoneId.of("UTC") == ZoneId.UTC
        True
        >>> ZoneId.try_of("Invalid/Time_Zone") is None
        True
    """

    __slots__ = ("_id",)

    UTC: ClassVar[ZoneId]

    def __init__(self, zone_id: str) -> None:
        """Create a ZoneId without consulting a zone database.

        Prefer `ZoneId.of`, which checks the name is known.
        """
        if not isinstance(zone_id, str) or not zone_id:
            raise TimezoneError(f"zone id must be a non-empty string, got {zone_id!r}")
        self._id = zone_id

    @classmethod
    def of(cls, zone_id: str, database: ZoneDatabase | None = None) -> ZoneId:
        """Return the ZoneId for a name known to the zone database.

        Args:
            zone_id: The zone name, e.g. "America/New_York".
            database: Zone database to check against; defaults to the
                standard library backed database.

        Raises:
            TimezoneError: If the name is unknown.
        """
        if zone_id == UTC_ZONE_NAME:
            return cls.UTC
        db = database if database is not None else default_zone_database()
        if not isinstance(zone_id, str) or not db.is_valid(zone_id):
            raise TimezoneError(f"Unknown time zone: {zone_id!r}")
        return cls(zone_id)

    @classmethod
    def try_of(
        cls, zone_id: str, database: ZoneDatabase | None = None
    ) -> ZoneId | None:
        """Like `of`, but return None for an unknown name instead of raising."""
        try:
            return cls.of(zone_id, database)
        except TimezoneError:
            return None

    @property
    def id(self) -> str:
        """Return the zone name."""
        return self._id

    @property
    def is_utc(self) -> bool:
        return self._id == UTC_ZONE_NAME

    def resolve(self, database: ZoneDatabase | None = None) -> ZoneOffset:
        """Resolve the current UTC offset of this zone.

        Raises:
            TimezoneError: If the database does not know the zone.
        """
        db = database if database is not None else default_zone_database()
        return db.offset_of(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneId):
            return NotImplemented
        return self._id == other._id

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZoneId):
            return NotImplemented
        return self._id < other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"ZoneId({self._id!r})"

    def __str__(self) -> str:
        return self._id


ZoneId.UTC = ZoneId(UTC_ZONE_NAME)


__all__ = ["ZoneId"]
