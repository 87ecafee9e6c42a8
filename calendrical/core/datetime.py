"""LocalDateTime class combining a date and a time of day.

This module provides the LocalDateTime class, the (LocalDate, LocalTime)
pair, and the private base class shared by the offset- and zone-tagged
date-time types.
"""

from __future__ import annotations

import re
from abc import abstractmethod
from typing import TYPE_CHECKING, ClassVar, TypeVar

from calendrical._internal.constants import NANOS_PER_DAY, NANOS_PER_SECOND
from calendrical._internal.validation import validate_field
from calendrical.arithmetic.period_ops import add_period, subtract_period
from calendrical.convert.epoch import (
    MAX_EPOCH_NANOS,
    MIN_EPOCH_NANOS,
    from_epoch_nanos,
    to_epoch_nanos,
)
from calendrical.core.date import LocalDate
from calendrical.core.duration import Duration
from calendrical.core.period import Period
from calendrical.core.temporal import DateLike, Temporal, TemporalInstant, TimeLike
from calendrical.core.time import LocalTime
from calendrical.errors import OverflowError, ParseError

if TYPE_CHECKING:
    from calendrical.clock import Clock
    from calendrical.core.instant import Instant
    from calendrical.core.offset_datetime import OffsetDateTime
    from calendrical.core.zoned_datetime import ZonedDateTime
    from calendrical.units.day_of_week import DayOfWeek
    from calendrical.units.zone_database import ZoneDatabase
    from calendrical.units.zone_id import ZoneId
    from calendrical.units.zone_offset import ZoneOffset

W = TypeVar("W", bound="_AttachedDateTime")

_SEPARATOR = re.compile(r"[Tt ]")


class LocalDateTime(Temporal, TemporalInstant, DateLike, TimeLike):
    """A date-time without a time zone, such as 2024-01-15T10:15:30.

    LocalDateTime is a (LocalDate, LocalTime) pair; the invariants of
    each component hold independently.

    Arithmetic dispatch:
        - Days and weeks move along the timeline and saturate at
          LocalDateTime.MIN / MAX.
        - Months and years apply the date rules (day-of-month clamping,
          OverflowError past year 9999) and hold the time fixed.
        - Hours, minutes, seconds, milliseconds and nanoseconds carry
          across midnight into the date, and saturate at MIN / MAX.

    As a TemporalInstant, a LocalDateTime is read as a UTC date-time.

    Examples:
        >>> ldt = LocalDateTime.of(2024, 12, 31, 23, 0)
        >>> ldt.plus_hours(2)
        LocalDateTime(2025, 1, 1, 1, 0, 0)

        >>> LocalDateTime.of(2020, 1, 31, 8, 30).plus_months(1)
        LocalDateTime(2020, 2, 29, 8, 30, 0)
    """

    __slots__ = ("_date", "_time")

    MIN: ClassVar[LocalDateTime]
    MAX: ClassVar[LocalDateTime]

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> None:
        """Create a LocalDateTime from its fields.

        Raises:
            ValidationError: If any field is out of range.
        """
        self._date = LocalDate(year, month, day)
        self._time = LocalTime(hour, minute, second, nanosecond)

    @classmethod
    def _of(cls, date: LocalDate, time: LocalTime) -> LocalDateTime:
        instance = object.__new__(cls)
        instance._date = date
        instance._time = time
        return instance

    @classmethod
    def _from_local_nanos(cls, local_nanos: int) -> LocalDateTime:
        """Create from nanoseconds since 1970-01-01T00:00 local, saturating."""
        clamped = max(MIN_EPOCH_NANOS, min(MAX_EPOCH_NANOS, local_nanos))
        epoch_day, nano_of_day = divmod(clamped, NANOS_PER_DAY)
        return cls._of(LocalDate._from_days(epoch_day), LocalTime._from_nanos(nano_of_day))

    @classmethod
    def of(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
    ) -> LocalDateTime:
        """Create a LocalDateTime from its fields."""
        return cls(year, month, day, hour, minute, second, nanosecond)

    @classmethod
    def of_date_time(cls, date: LocalDate, time: LocalTime) -> LocalDateTime:
        """Combine a LocalDate and a LocalTime."""
        return cls._of(date, time)

    @classmethod
    def of_epoch_second(
        cls, epoch_second: int, nano_of_second: int, offset: ZoneOffset
    ) -> LocalDateTime:
        """Return the local date-time at an offset for an epoch second.

        Raises:
            ValidationError: If nano_of_second is outside 0-999,999,999.
            OverflowError: If the result is outside the supported range.

        Examples:
            >>> from calendrical import ZoneOffset
            >>> LocalDateTime.of_epoch_second(0, 0, ZoneOffset.of_hours(2))
            LocalDateTime(1970, 1, 1, 2, 0, 0)
        """
        validate_field("nano_of_second", nano_of_second, 0, NANOS_PER_SECOND - 1)
        epoch_nanos = epoch_second * NANOS_PER_SECOND + nano_of_second
        return cls._from_epoch_nanos(epoch_nanos, offset.total_seconds)

    @classmethod
    def _from_epoch_nanos(cls, epoch_nanos: int, offset_seconds: int) -> LocalDateTime:
        local_nanos = epoch_nanos + offset_seconds * NANOS_PER_SECOND
        if local_nanos < MIN_EPOCH_NANOS or local_nanos > MAX_EPOCH_NANOS:
            raise OverflowError(
                f"local date-time {local_nanos}ns since the epoch is outside the supported range"
            )
        epoch_day, nano_of_day = from_epoch_nanos(epoch_nanos, offset_seconds)
        return cls._of(LocalDate._from_days(epoch_day), LocalTime._from_nanos(nano_of_day))

    @classmethod
    def now(cls, clock: Clock | None = None) -> LocalDateTime:
        """Return the current date-time according to a clock.

        The clock's instant is converted using its zone's current offset.

        Args:
            clock: The clock to read; defaults to the system clock in UTC.
        """
        from calendrical.clock import Clock

        if clock is None:
            clock = Clock.system_default_zone()
        return cls._from_epoch_nanos(
            clock.instant().epoch_nanoseconds(), clock.offset().total_seconds
        )

    @classmethod
    def parse(cls, s: str) -> LocalDateTime:
        """Parse an ISO 8601 date-time, e.g. '2024-01-15T10:15:30.5'.

        Raises:
            ParseError: If the text is malformed.
            ValidationError: If a field is out of range.
        """
        if not isinstance(s, str):
            raise ParseError(f"Expected string, got {type(s).__name__}")
        parts = _SEPARATOR.split(s.strip(), maxsplit=1)
        if len(parts) != 2:
            raise ParseError(
                f"Invalid ISO 8601 date-time format: {s!r}. "
                "Expected YYYY-MM-DDTHH:MM[:SS[.fffffffff]]"
            )
        return cls._of(LocalDate.parse(parts[0]), LocalTime.parse(parts[1]))

    # --- Components ---

    def to_local_date(self) -> LocalDate:
        return self._date

    def to_local_time(self) -> LocalTime:
        return self._time

    def _local_nanos(self) -> int:
        return to_epoch_nanos(self._date.to_epoch_day(), self._time.nano_of_day)

    def epoch_nanoseconds(self) -> int:
        """Return epoch nanoseconds reading this date-time as UTC."""
        return self._local_nanos()

    # --- DateLike ---

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month_value(self) -> int:
        return self._date.month_value

    @property
    def day_of_month(self) -> int:
        return self._date.day_of_month

    @property
    def day_of_week(self) -> DayOfWeek:
        return self._date.day_of_week

    def plus_days(self, days: int) -> LocalDateTime:
        """Add days, holding the time. Saturates at MIN/MAX."""
        return self.plus_nanoseconds(days * NANOS_PER_DAY)

    def plus_months(self, months: int) -> LocalDateTime:
        """Add months to the date with day clamping, holding the time.

        Raises:
            OverflowError: If the target year is outside -9999..9999.
        """
        return LocalDateTime._of(self._date.plus_months(months), self._time)

    def plus_years(self, years: int) -> LocalDateTime:
        """Add years to the date (Feb 29 clamps to Feb 28), holding the time.

        Raises:
            OverflowError: If the target year is outside -9999..9999.
        """
        return LocalDateTime._of(self._date.plus_years(years), self._time)

    def with_year(self, year: int) -> LocalDateTime:
        return LocalDateTime._of(self._date.with_year(year), self._time)

    def with_month(self, month: int) -> LocalDateTime:
        return LocalDateTime._of(self._date.with_month(month), self._time)

    def with_day_of_month(self, day: int) -> LocalDateTime:
        return LocalDateTime._of(self._date.with_day_of_month(day), self._time)

    def with_day_of_year(self, day_of_year: int) -> LocalDateTime:
        return LocalDateTime._of(self._date.with_day_of_year(day_of_year), self._time)

    def plus_period(self, period: Period) -> LocalDateTime:
        """Add a Period to the date part, holding the time."""
        return add_period(self, period)

    def minus_period(self, period: Period) -> LocalDateTime:
        return subtract_period(self, period)

    # --- TimeLike ---

    @property
    def hour(self) -> int:
        return self._time.hour

    @property
    def minute(self) -> int:
        return self._time.minute

    @property
    def second(self) -> int:
        return self._time.second

    @property
    def nanosecond(self) -> int:
        return self._time.nanosecond

    def plus_nanoseconds(self, nanos: int) -> LocalDateTime:
        """Add nanoseconds, carrying across midnight into the date.

        Saturates at LocalDateTime.MIN / MAX; never raises.

        Examples:
            >>> LocalDateTime.of(2024, 1, 1).minus_nanoseconds(1)
            LocalDateTime(2023, 12, 31, 23, 59, 59, 999999999)
        """
        if nanos == 0:
            return self
        return LocalDateTime._from_local_nanos(self._local_nanos() + nanos)

    def with_hour(self, hour: int) -> LocalDateTime:
        return LocalDateTime._of(self._date, self._time.with_hour(hour))

    def with_minute(self, minute: int) -> LocalDateTime:
        return LocalDateTime._of(self._date, self._time.with_minute(minute))

    def with_second(self, second: int) -> LocalDateTime:
        return LocalDateTime._of(self._date, self._time.with_second(second))

    def with_nanosecond(self, nanosecond: int) -> LocalDateTime:
        return LocalDateTime._of(self._date, self._time.with_nanosecond(nanosecond))

    # --- Attaching an offset or zone ---

    def at_offset(self, offset: ZoneOffset) -> OffsetDateTime:
        """Attach a fixed offset to this local date-time."""
        from calendrical.core.offset_datetime import OffsetDateTime

        return OffsetDateTime.of(self, offset)

    def at_zone(
        self, zone: ZoneId, database: ZoneDatabase | None = None
    ) -> ZonedDateTime:
        """Attach a zone; its offset is resolved lazily from the database."""
        from calendrical.core.zoned_datetime import ZonedDateTime

        return ZonedDateTime.of(self, zone, database)

    def to_iso_format(self) -> str:
        """Return 'YYYY-MM-DDTHH:MM:SS[.fffffffff]'."""
        return f"{self._date.to_iso_format()}T{self._time.to_iso_format()}"

    # --- Operators ---

    def __add__(self, other: object) -> LocalDateTime:
        if isinstance(other, Period):
            return self.plus_period(other)
        if isinstance(other, Duration):
            return self.plus_nanoseconds(other.to_nanos())
        return NotImplemented

    def __sub__(self, other: object) -> LocalDateTime | Duration:
        """Subtract a Period or Duration, or return the Duration between two values.

        Examples:
            >>> LocalDateTime.of(2024, 1, 2) - LocalDateTime.of(2024, 1, 1)
            Duration(seconds=86400, nanos=0)
        """
        if isinstance(other, LocalDateTime):
            return Duration.between(other, self)
        if isinstance(other, Period):
            return self.minus_period(other)
        if isinstance(other, Duration):
            return self.plus_nanoseconds(-other.to_nanos())
        return NotImplemented

    def _key(self) -> tuple[int, int]:
        return (self._date.to_epoch_day(), self._time.nano_of_day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LocalDateTime):
            return NotImplemented
        return self._key() >= other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        fields = [
            self.year,
            self.month_value,
            self.day_of_month,
            self.hour,
            self.minute,
            self.second,
        ]
        if self.nanosecond:
            fields.append(self.nanosecond)
        return f"LocalDateTime({', '.join(str(f) for f in fields)})"

    def __str__(self) -> str:
        return self.to_iso_format()


LocalDateTime.MIN = LocalDateTime._of(LocalDate.MIN, LocalTime.MIN)
LocalDateTime.MAX = LocalDateTime._of(LocalDate.MAX, LocalTime.MAX)


class _AttachedDateTime(Temporal, TemporalInstant, DateLike, TimeLike):
    """A LocalDateTime tagged with an offset or a zone.

    Arithmetic runs on the local date-time and reattaches the unchanged
    tag; the offset is never recomputed. Comparison helpers
    (`is_before`, `is_after`, `is_equal`) compare instants.
    """

    __slots__ = ()

    _ldt: LocalDateTime

    @abstractmethod
    def _with_local(self: W, ldt: LocalDateTime) -> W:
        """Return a copy holding a different local date-time."""

    @abstractmethod
    def _offset_seconds(self) -> int:
        """Return the UTC offset applied to the local date-time."""

    def to_local_date_time(self) -> LocalDateTime:
        return self._ldt

    def to_local_date(self) -> LocalDate:
        return self._ldt.to_local_date()

    def to_local_time(self) -> LocalTime:
        return self._ldt.to_local_time()

    def epoch_nanoseconds(self) -> int:
        return self._ldt.epoch_nanoseconds() - self._offset_seconds() * NANOS_PER_SECOND

    def to_instant(self) -> Instant:
        """Return the instant on the UTC timeline.

        Raises:
            OverflowError: If the value lies within 18 hours of the ends
                of the LocalDateTime range, outside Instant.MIN..MAX.
        """
        from calendrical.core.instant import Instant

        return Instant._from_epoch_nanos(self.epoch_nanoseconds())

    def is_before(self, other: _AttachedDateTime) -> bool:
        """Return True if this instant is strictly before other's instant."""
        return self.epoch_nanoseconds() < other.epoch_nanoseconds()

    def is_after(self, other: _AttachedDateTime) -> bool:
        """Return True if this instant is strictly after other's instant."""
        return self.epoch_nanoseconds() > other.epoch_nanoseconds()

    def is_equal(self, other: _AttachedDateTime) -> bool:
        """Return True if both denote the same instant, whatever their offsets."""
        return self.epoch_nanoseconds() == other.epoch_nanoseconds()

    # --- DateLike ---

    @property
    def year(self) -> int:
        return self._ldt.year

    @property
    def month_value(self) -> int:
        return self._ldt.month_value

    @property
    def day_of_month(self) -> int:
        return self._ldt.day_of_month

    @property
    def day_of_week(self) -> DayOfWeek:
        return self._ldt.day_of_week

    def plus_days(self: W, days: int) -> W:
        return self._with_local(self._ldt.plus_days(days))

    def plus_months(self: W, months: int) -> W:
        return self._with_local(self._ldt.plus_months(months))

    def plus_years(self: W, years: int) -> W:
        return self._with_local(self._ldt.plus_years(years))

    def with_year(self: W, year: int) -> W:
        return self._with_local(self._ldt.with_year(year))

    def with_month(self: W, month: int) -> W:
        return self._with_local(self._ldt.with_month(month))

    def with_day_of_month(self: W, day: int) -> W:
        return self._with_local(self._ldt.with_day_of_month(day))

    def with_day_of_year(self: W, day_of_year: int) -> W:
        return self._with_local(self._ldt.with_day_of_year(day_of_year))

    def plus_period(self: W, period: Period) -> W:
        return self._with_local(self._ldt.plus_period(period))

    def minus_period(self: W, period: Period) -> W:
        return self._with_local(self._ldt.minus_period(period))

    # --- TimeLike ---

    @property
    def hour(self) -> int:
        return self._ldt.hour

    @property
    def minute(self) -> int:
        return self._ldt.minute

    @property
    def second(self) -> int:
        return self._ldt.second

    @property
    def nanosecond(self) -> int:
        return self._ldt.nanosecond

    def plus_nanoseconds(self: W, nanos: int) -> W:
        return self._with_local(self._ldt.plus_nanoseconds(nanos))

    def with_hour(self: W, hour: int) -> W:
        return self._with_local(self._ldt.with_hour(hour))

    def with_minute(self: W, minute: int) -> W:
        return self._with_local(self._ldt.with_minute(minute))

    def with_second(self: W, second: int) -> W:
        return self._with_local(self._ldt.with_second(second))

    def with_nanosecond(self: W, nanosecond: int) -> W:
        return self._with_local(self._ldt.with_nanosecond(nanosecond))

    def __add__(self: W, other: object) -> W:
        if isinstance(other, (Period, Duration)):
            return self._with_local(self._ldt + other)
        return NotImplemented

    def __sub__(self, other: object) -> _AttachedDateTime | Duration:
        if isinstance(other, _AttachedDateTime):
            return Duration.between(other, self)
        if isinstance(other, (Period, Duration)):
            return self._with_local(self._ldt - other)
        return NotImplemented


__all__ = ["LocalDateTime"]
