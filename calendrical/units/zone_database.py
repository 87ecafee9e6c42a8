"""Zone databases resolving zone names to UTC offsets.

A zone database is a read-only collaborator with two operations:
`is_valid(name)` and `offset_of(zone_id)`. ZoneId validation and
ZonedDateTime offset resolution go through one, so tests can inject a
FixedZoneDatabase instead of loading real time-zone rules.

Only the *current* offset of a zone is reported; historical and future
transitions (DST rules) are not modelled.
"""

from __future__ import annotations

import datetime
import functools
import logging
import zoneinfo
from typing import TYPE_CHECKING, Mapping, Protocol, runtime_checkable

from calendrical.errors import TimezoneError
from calendrical.units.zone_offset import ZoneOffset

if TYPE_CHECKING:
    from calendrical.units.zone_id import ZoneId

logger = logging.getLogger(__name__)

UTC_ZONE_NAME = "UTC"


@runtime_checkable
class ZoneDatabase(Protocol):
    """Resolves zone names to whole-second UTC offsets."""

    def is_valid(self, name: str) -> bool:
        """Return True if the database knows the zone name."""
        ...

    def offset_of(self, zone_id: ZoneId) -> ZoneOffset:
        """Return the current UTC offset of a zone.

        Raises:
            TimezoneError: If the zone is unknown.
        """
        ...


class ZoneInfoDatabase:
    """Zone database backed by the standard library `zoneinfo` module.

    Examples:
        >>> db = ZoneInfoDatabase()
        >>> db.is_valid("Europe/Paris")
        True
        >>> db.is_valid("Invalid/Time_Zone")
        False
    """

    def is_valid(self, name: str) -> bool:
        if name == UTC_ZONE_NAME:
            return True
        try:
            self._load(name)
        except TimezoneError:
            return False
        return True

    def offset_of(self, zone_id: ZoneId) -> ZoneOffset:
        name = zone_id.id
        if name == UTC_ZONE_NAME:
            return ZoneOffset.UTC

        tz = self._load(name)
        delta = datetime.datetime.now(tz).utcoffset()
        seconds = int(delta.total_seconds()) if delta is not None else 0
        logger.debug("Resolved zone %s to offset %ss", name, seconds)
        return ZoneOffset.of_total_seconds(seconds)

    @staticmethod
    def _load(name: str) -> zoneinfo.ZoneInfo:
        try:
            return zoneinfo.ZoneInfo(name)
        except (zoneinfo.ZoneInfoNotFoundError, ValueError, OSError) as e:
            logger.debug("Zone lookup failed for %r: %s", name, e)
            raise TimezoneError(f"Unknown time zone: {name!r}") from e

    def __repr__(self) -> str:
        return "ZoneInfoDatabase()"


class FixedZoneDatabase:
    """Zone database mapping names to fixed offsets.

    "UTC" is always known and maps to ZoneOffset.UTC unless overridden.

    Args:
        offsets: Mapping from zone name to its offset.

    Examples:
        >>> db = FixedZoneDatabase({"Asia/Tokyo": ZoneOffset.of_hours(9)})
        >>> db.is_valid("Asia/Tokyo")
        True
    """

    def __init__(self, offsets: Mapping[str, ZoneOffset] | None = None) -> None:
        self._offsets: dict[str, ZoneOffset] = {UTC_ZONE_NAME: ZoneOffset.UTC}
        if offsets:
            self._offsets.update(offsets)

    def is_valid(self, name: str) -> bool:
        return name in self._offsets

    def offset_of(self, zone_id: ZoneId) -> ZoneOffset:
        try:
            return self._offsets[zone_id.id]
        except KeyError:
            logger.debug("Zone lookup failed for %r", zone_id.id)
            raise TimezoneError(f"Unknown time zone: {zone_id.id!r}") from None

    def __repr__(self) -> str:
        return f"FixedZoneDatabase({self._offsets!r})"


@functools.lru_cache(maxsize=None)
def default_zone_database() -> ZoneDatabase:
    """Return the shared ZoneInfoDatabase used when none is injected."""
    return ZoneInfoDatabase()


__all__ = [
    "ZoneDatabase",
    "ZoneInfoDatabase",
    "FixedZoneDatabase",
    "default_zone_database",
]
