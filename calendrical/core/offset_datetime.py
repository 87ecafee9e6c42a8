"""OffsetDateTime: a local date-time with a fixed offset from UTC."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from calendrical.core.datetime import LocalDateTime, _AttachedDateTime
from calendrical.errors import ParseError
from calendrical.units.zone_offset import ZoneOffset

if TYPE_CHECKING:
    from calendrical.clock import Clock
    from calendrical.core.zoned_datetime import ZonedDateTime
    from calendrical.units.zone_database import ZoneDatabase
    from calendrical.units.zone_id import ZoneId

_OFFSET_DATE_TIME_PATTERN = re.compile(
    r"^(.+?)(Z|z|[+-]\d{2}(?::?\d{2}(?::?\d{2})?)?)$"
)


class OffsetDateTime(_AttachedDateTime):
    """A date-time with an offset from UTC, such as 2024-01-15T10:15:30+01:00.

    Arithmetic runs on the local date-time and keeps the offset as is.
    Equality and hashing use the (local date-time, offset) pair, so two
    values for the same instant at different offsets are not equal;
    use `is_equal` to compare instants. Ordering is by instant, then by
    local date-time.

    Examples:
        >>> odt = OffsetDateTime.of(LocalDateTime.of(2024, 1, 15, 10), ZoneOffset.of_hours(1))
        >>> str(odt)
        '2024-01-15T10:00:00+01:00'
        >>> odt.epoch_seconds()
        1705309200
    """

    __slots__ = ("_ldt", "_offset")

    def __init__(self, ldt: LocalDateTime, offset: ZoneOffset) -> None:
        self._ldt = ldt
        self._offset = offset

    @classmethod
    def of(cls, ldt: LocalDateTime, offset: ZoneOffset) -> OffsetDateTime:
        """Combine a local date-time and an offset."""
        return cls(ldt, offset)

    @classmethod
    def now_utc(cls) -> OffsetDateTime:
        """Return the current date-time in UTC from the system clock."""
        from calendrical.clock import Clock

        return cls.now(Clock.system_utc())

    @classmethod
    def now(cls, clock: Clock | None = None) -> OffsetDateTime:
        """Return the current date-time at the offset of the clock's zone.

        Args:
            clock: The clock to read; defaults to the system clock in UTC.
        """
        from calendrical.clock import Clock

        if clock is None:
            clock = Clock.system_default_zone()
        return clock.instant().at_offset(clock.offset())

    @classmethod
    def parse(cls, s: str) -> OffsetDateTime:
        """Parse an ISO 8601 date-time with offset, e.g. '2024-01-15T10:15:30+01:00'.

        Raises:
            ParseError: If the text is malformed.
            ValidationError: If a field is out of range.
            TimezoneError: If the offset is out of range.
        """
        if not isinstance(s, str):
            raise ParseError(f"Expected string, got {type(s).__name__}")
        match = _OFFSET_DATE_TIME_PATTERN.match(s.strip())
        if not match:
            raise ParseError(f"Invalid ISO 8601 offset date-time format: {s!r}")
        ldt_str, offset_str = match.groups()
        return cls(LocalDateTime.parse(ldt_str), ZoneOffset.parse(offset_str))

    @property
    def offset(self) -> ZoneOffset:
        return self._offset

    def _with_local(self, ldt: LocalDateTime) -> OffsetDateTime:
        return OffsetDateTime(ldt, self._offset)

    def _offset_seconds(self) -> int:
        return self._offset.total_seconds

    def with_offset_same_local(self, offset: ZoneOffset) -> OffsetDateTime:
        """Keep the local date-time and replace the offset (changes the instant)."""
        return OffsetDateTime(self._ldt, offset)

    def with_offset_same_instant(self, offset: ZoneOffset) -> OffsetDateTime:
        """Keep the instant and re-express it at another offset.

        Examples:
            >>> odt = OffsetDateTime.parse("2024-01-15T10:00:00+01:00")
            >>> str(odt.with_offset_same_instant(ZoneOffset.UTC))
            '2024-01-15T09:00:00Z'
        """
        if offset == self._offset:
            return self
        ldt = LocalDateTime._from_epoch_nanos(
            self.epoch_nanoseconds(), offset.total_seconds
        )
        return OffsetDateTime(ldt, offset)

    def at_zone_same_instant(
        self, zone: ZoneId, database: ZoneDatabase | None = None
    ) -> ZonedDateTime:
        """Return the same instant as a ZonedDateTime in the given zone."""
        return self.to_instant().at_zone(zone, database)

    def to_iso_format(self) -> str:
        return f"{self._ldt.to_iso_format()}{self._offset}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._ldt == other._ldt and self._offset == other._offset

    def _key(self) -> tuple[int, LocalDateTime]:
        return (self.epoch_nanoseconds(), self._ldt)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, OffsetDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash((self._ldt, self._offset))

    def __repr__(self) -> str:
        return f"OffsetDateTime({self._ldt!r}, {self._offset!r})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["OffsetDateTime"]
