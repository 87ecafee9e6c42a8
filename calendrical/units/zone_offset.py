"""ZoneOffset: a fixed offset from UTC in whole seconds.

This module provides the ZoneOffset class used by OffsetDateTime and
resolved from ZoneId through a zone database.
"""

from __future__ import annotations

import re
from typing import ClassVar

from calendrical._internal.constants import (
    MAX_OFFSET_SECONDS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from calendrical.errors import TimezoneError

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{2})(?::?(\d{2})(?::?(\d{2}))?)?$")


class ZoneOffset:
    """A time-zone offset from UTC, such as +02:00.

    The offset is stored in whole seconds, positive east of UTC, and is
    limited to -18:00 to +18:00.

    Examples:
        >>> ZoneOffset.of_hours(2)
        ZoneOffset(+02:00)

        >>> ZoneOffset.of_hours_minutes(-5, -30).total_seconds
        -19800

        >>> str(ZoneOffset.UTC)
        'Z'
    """

    __slots__ = ("_total_seconds",)

    UTC: ClassVar[ZoneOffset]
    MIN: ClassVar[ZoneOffset]
    MAX: ClassVar[ZoneOffset]

    def __init__(self, total_seconds: int) -> None:
        """Create a ZoneOffset from a total number of seconds.

        Raises:
            TimezoneError: If the offset is not an integer or is outside +/-18h.
        """
        if not isinstance(total_seconds, int):
            raise TimezoneError(
                f"offset seconds must be an integer, got {type(total_seconds).__name__}"
            )
        if abs(total_seconds) > MAX_OFFSET_SECONDS:
            raise TimezoneError(
                f"offset {total_seconds}s is outside valid range "
                f"[-{MAX_OFFSET_SECONDS}, {MAX_OFFSET_SECONDS}]"
            )
        self._total_seconds = total_seconds

    @classmethod
    def of_total_seconds(cls, total_seconds: int) -> ZoneOffset:
        """Create a ZoneOffset from a total number of seconds."""
        if total_seconds == 0:
            return cls.UTC
        return cls(total_seconds)

    @classmethod
    def of_hours(cls, hours: int) -> ZoneOffset:
        """Create a ZoneOffset of whole hours.

        Raises:
            TimezoneError: If the offset is outside +/-18h.
        """
        return cls.of_hours_minutes_seconds(hours, 0, 0)

    @classmethod
    def of_hours_minutes(cls, hours: int, minutes: int) -> ZoneOffset:
        """Create a ZoneOffset from hours and minutes.

        Both components must carry the same sign (or be zero), so
        -05:30 is `of_hours_minutes(-5, -30)`.

        Raises:
            TimezoneError: If the components are out of range or their signs differ.
        """
        return cls.of_hours_minutes_seconds(hours, minutes, 0)

    @classmethod
    def of_hours_minutes_seconds(
        cls, hours: int, minutes: int, seconds: int
    ) -> ZoneOffset:
        """Create a ZoneOffset from hours, minutes and seconds.

        Raises:
            TimezoneError: If a component is out of range, the signs of
                the components differ, or the total exceeds +/-18h.
        """
        if not -18 <= hours <= 18:
            raise TimezoneError(f"offset hours must be -18 to 18, got {hours}")
        if not -59 <= minutes <= 59:
            raise TimezoneError(f"offset minutes must be -59 to 59, got {minutes}")
        if not -59 <= seconds <= 59:
            raise TimezoneError(f"offset seconds must be -59 to 59, got {seconds}")

        signs = {(c > 0) - (c < 0) for c in (hours, minutes, seconds)} - {0}
        if len(signs) > 1:
            raise TimezoneError(
                f"offset components must share a sign, got "
                f"{hours}h {minutes}m {seconds}s"
            )

        return cls.of_total_seconds(
            hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
        )

    @classmethod
    def parse(cls, s: str) -> ZoneOffset:
        """Parse an offset string.

        Supported formats:
            - "Z" or "z": UTC
            - "+HH", "+HH:MM", "+HHMM", "+HH:MM:SS", "+HHMMSS" (or "-")

        Raises:
            TimezoneError: If the string cannot be parsed or is out of range.

        Examples:
            >>> ZoneOffset.parse("+05:30").total_seconds
            19800
            >>> ZoneOffset.parse("Z") is ZoneOffset.UTC
            True
        """
        if not isinstance(s, str):
            raise TimezoneError(f"Expected string, got {type(s).__name__}")

        s = s.strip()
        if s in ("Z", "z"):
            return cls.UTC

        match = _OFFSET_PATTERN.match(s)
        if not match:
            raise TimezoneError(f"Cannot parse offset string: {s!r}")

        sign_str, hours_str, minutes_str, seconds_str = match.groups()
        hours = int(hours_str)
        minutes = int(minutes_str) if minutes_str else 0
        seconds = int(seconds_str) if seconds_str else 0

        if minutes > 59 or seconds > 59:
            raise TimezoneError(f"Offset minutes or seconds out of range: {s!r}")

        total = hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds
        if total > MAX_OFFSET_SECONDS:
            raise TimezoneError(f"Offset out of range: {s!r}")
        return cls.of_total_seconds(-total if sign_str == "-" else total)

    @property
    def total_seconds(self) -> int:
        """Return the offset in seconds, positive east of UTC."""
        return self._total_seconds

    @property
    def is_utc(self) -> bool:
        return self._total_seconds == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds == other._total_seconds

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds < other._total_seconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds <= other._total_seconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds > other._total_seconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ZoneOffset):
            return NotImplemented
        return self._total_seconds >= other._total_seconds

    def __hash__(self) -> int:
        return hash(self._total_seconds)

    def __repr__(self) -> str:
        return f"ZoneOffset({self})"

    def __str__(self) -> str:
        """Return 'Z' for UTC, otherwise '+HH:MM' or '+HH:MM:SS'."""
        if self._total_seconds == 0:
            return "Z"

        sign = "+" if self._total_seconds > 0 else "-"
        hours, rem = divmod(abs(self._total_seconds), SECONDS_PER_HOUR)
        minutes, seconds = divmod(rem, SECONDS_PER_MINUTE)
        if seconds:
            return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
        return f"{sign}{hours:02d}:{minutes:02d}"


ZoneOffset.UTC = ZoneOffset(0)
ZoneOffset.MIN = ZoneOffset(-MAX_OFFSET_SECONDS)
ZoneOffset.MAX = ZoneOffset(MAX_OFFSET_SECONDS)


__all__ = ["ZoneOffset"]
