"""Capability interfaces shared by the temporal value types.

Concrete types implement a small set of abstract members and inherit
the derived behaviour:

    Temporal         ordering helpers and unit-polymorphic arithmetic
    TemporalInstant  epoch seconds / milliseconds from epoch nanoseconds
    DateLike         calendar queries, week arithmetic, date adjusters
    TimeLike         time-of-day queries and per-unit arithmetic

Composite types (LocalDateTime, OffsetDateTime, ZonedDateTime) implement
both DateLike and TimeLike by delegating to their date and time parts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TypeVar

from calendrical._internal.calendar import (
    day_of_year,
    days_in_month,
    days_in_year,
    is_leap_year,
    weekday_from_epoch_day,
    ymd_to_epoch_day,
)
from calendrical._internal.constants import (
    DAYS_PER_WEEK,
    NANOS_PER_HOUR,
    NANOS_PER_MILLISECOND,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from calendrical._internal.validation import validate_field
from calendrical.arithmetic import adjusters
from calendrical.units.day_of_week import DayOfWeek
from calendrical.units.month import Month

if TYPE_CHECKING:
    from calendrical.units.chrono_unit import ChronoUnit

T = TypeVar("T")
D = TypeVar("D", bound="DateLike")
Tm = TypeVar("Tm", bound="TimeLike")


class Temporal(ABC):
    """A value on a timeline that can be ordered and shifted by units."""

    __slots__ = ()

    def is_before(self: T, other: T) -> bool:
        """Return True if this value is strictly before other."""
        return self < other  # type: ignore[operator]

    def is_after(self: T, other: T) -> bool:
        """Return True if this value is strictly after other."""
        return self > other  # type: ignore[operator]

    def is_on_or_before(self: T, other: T) -> bool:
        return not self.is_after(other)  # type: ignore[attr-defined]

    def is_on_or_after(self: T, other: T) -> bool:
        return not self.is_before(other)  # type: ignore[attr-defined]

    def plus_unit(self: T, amount: int, unit: ChronoUnit) -> T:
        """Add an amount of a ChronoUnit.

        Equivalent to `unit.add_to(self, amount)`.

        Raises:
            UnsupportedUnitError: If the unit has no meaning for this type.
        """
        return unit.add_to(self, amount)

    def minus_unit(self: T, amount: int, unit: ChronoUnit) -> T:
        """Subtract an amount of a ChronoUnit."""
        return unit.add_to(self, -amount)


class TemporalInstant(ABC):
    """A value that identifies a point on the UTC timeline.

    Seconds and milliseconds are floor-divided from nanoseconds, so an
    instant half a second before the epoch has epoch_seconds() == -1.
    """

    __slots__ = ()

    @abstractmethod
    def epoch_nanoseconds(self) -> int:
        """Return the nanoseconds elapsed since 1970-01-01T00:00:00Z."""

    def epoch_seconds(self) -> int:
        """Return the seconds elapsed since 1970-01-01T00:00:00Z."""
        return self.epoch_nanoseconds() // NANOS_PER_SECOND

    def epoch_milliseconds(self) -> int:
        """Return the milliseconds elapsed since 1970-01-01T00:00:00Z."""
        return self.epoch_nanoseconds() // NANOS_PER_MILLISECOND


class DateLike(ABC):
    """Calendar-date capability.

    Implementors provide the year/month/day fields, day/month/year
    addition and the four field setters. Everything else (queries,
    week arithmetic, `minus_*`, adjusters) is derived.

    Arithmetic clamps, setters reject:
        `plus_months`/`plus_years` clamp the day of month to the target
        month's length. `with_*` setters raise ValidationError when the
        resulting date is invalid.
    """

    __slots__ = ()

    # --- Abstract members ---

    @property
    @abstractmethod
    def year(self) -> int:
        """Return the proleptic year."""

    @property
    @abstractmethod
    def month_value(self) -> int:
        """Return the month number, 1-12."""

    @property
    @abstractmethod
    def day_of_month(self) -> int:
        """Return the day of the month, 1-31."""

    @abstractmethod
    def plus_days(self: D, days: int) -> D:
        """Add days; saturates at the representable range."""

    @abstractmethod
    def plus_months(self: D, months: int) -> D:
        """Add months, clamping the day to the target month's length."""

    @abstractmethod
    def plus_years(self: D, years: int) -> D:
        """Add years, clamping February 29 to February 28 when needed."""

    @abstractmethod
    def with_year(self: D, year: int) -> D:
        """Replace the year; raises ValidationError if the date is invalid."""

    @abstractmethod
    def with_month(self: D, month: int) -> D:
        """Replace the month; raises ValidationError if the date is invalid."""

    @abstractmethod
    def with_day_of_month(self: D, day: int) -> D:
        """Replace the day of month; raises ValidationError if invalid."""

    @abstractmethod
    def with_day_of_year(self: D, day_of_year: int) -> D:
        """Replace the day of year; raises ValidationError if invalid."""

    # --- Derived queries ---

    @property
    def month(self) -> Month:
        """Return the month as a Month enum."""
        return Month(self.month_value)

    @property
    def day_of_year(self) -> int:
        """Return the 1-based day of the year."""
        return day_of_year(self.year, self.month_value, self.day_of_month)

    @property
    def day_of_week(self) -> DayOfWeek:
        """Return the day of the week."""
        epoch_day = ymd_to_epoch_day(self.year, self.month_value, self.day_of_month)
        return DayOfWeek.from_primitive(weekday_from_epoch_day(epoch_day))

    @property
    def length_of_month(self) -> int:
        return days_in_month(self.year, self.month_value)

    @property
    def length_of_year(self) -> int:
        return days_in_year(self.year)

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    # --- Derived arithmetic ---

    def plus_weeks(self: D, weeks: int) -> D:
        """Add weeks; saturates like plus_days."""
        return self.plus_days(weeks * DAYS_PER_WEEK)

    def minus_days(self: D, days: int) -> D:
        return self.plus_days(-days)

    def minus_weeks(self: D, weeks: int) -> D:
        return self.plus_weeks(-weeks)

    def minus_months(self: D, months: int) -> D:
        """Subtract months; exactly `plus_months(-months)`."""
        return self.plus_months(-months)

    def minus_years(self: D, years: int) -> D:
        """Subtract years; exactly `plus_years(-years)`."""
        return self.plus_years(-years)

    # --- Adjusters ---

    def first_day_of_month(self: D) -> D:
        return adjusters.first_day_of_month(self)

    def last_day_of_month(self: D) -> D:
        return adjusters.last_day_of_month(self)

    def first_day_of_next_month(self: D) -> D:
        return adjusters.first_day_of_next_month(self)

    def first_day_of_year(self: D) -> D:
        return adjusters.first_day_of_year(self)

    def first_day_of_next_year(self: D) -> D:
        return adjusters.first_day_of_next_year(self)

    def last_day_of_year(self: D) -> D:
        return adjusters.last_day_of_year(self)

    def last_day_of_month_year(self: D, year: int, month: int) -> D:
        """Return the last day of the given year and month."""
        return adjusters.last_day_of_month_year(self, year, month)

    def first_in_month(self: D, day_of_week: DayOfWeek) -> D:
        """Return the first occurrence of day_of_week in this month."""
        return adjusters.first_in_month(self, day_of_week)

    def last_in_month(self: D, day_of_week: DayOfWeek) -> D:
        """Return the last occurrence of day_of_week in this month."""
        return adjusters.last_in_month(self, day_of_week)

    def next(self: D, day_of_week: DayOfWeek) -> D:
        """Return the next day_of_week strictly after this date (1-7 days ahead)."""
        return adjusters.next_weekday(self, day_of_week)

    def next_or_same(self: D, day_of_week: DayOfWeek) -> D:
        """Return this date if it falls on day_of_week, else the next one."""
        return adjusters.next_or_same_weekday(self, day_of_week)

    def previous(self: D, day_of_week: DayOfWeek) -> D:
        """Return the previous day_of_week strictly before this date."""
        return adjusters.previous_weekday(self, day_of_week)

    def previous_or_same(self: D, day_of_week: DayOfWeek) -> D:
        """Return this date if it falls on day_of_week, else the previous one."""
        return adjusters.previous_or_same_weekday(self, day_of_week)


class TimeLike(ABC):
    """Time-of-day capability.

    Implementors provide the four fields, nanosecond addition and the
    four setters. How an addition crosses midnight is up to the
    implementor: LocalTime wraps, date-times carry into the date.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def hour(self) -> int:
        """Return the hour, 0-23."""

    @property
    @abstractmethod
    def minute(self) -> int:
        """Return the minute, 0-59."""

    @property
    @abstractmethod
    def second(self) -> int:
        """Return the second, 0-59."""

    @property
    @abstractmethod
    def nanosecond(self) -> int:
        """Return the nanosecond of the second, 0-999,999,999."""

    @abstractmethod
    def plus_nanoseconds(self: Tm, nanos: int) -> Tm:
        """Add nanoseconds."""

    @abstractmethod
    def with_hour(self: Tm, hour: int) -> Tm:
        """Replace the hour; raises ValidationError if out of range."""

    @abstractmethod
    def with_minute(self: Tm, minute: int) -> Tm:
        """Replace the minute; raises ValidationError if out of range."""

    @abstractmethod
    def with_second(self: Tm, second: int) -> Tm:
        """Replace the second; raises ValidationError if out of range."""

    @abstractmethod
    def with_nanosecond(self: Tm, nanosecond: int) -> Tm:
        """Replace the nanosecond; raises ValidationError if out of range."""

    @property
    def millisecond(self) -> int:
        """Return the millisecond of the second, 0-999."""
        return self.nanosecond // NANOS_PER_MILLISECOND

    @property
    def nano_of_day(self) -> int:
        """Return the nanoseconds elapsed since midnight."""
        return (
            self.hour * NANOS_PER_HOUR
            + self.minute * NANOS_PER_MINUTE
            + self.second * NANOS_PER_SECOND
            + self.nanosecond
        )

    def with_millisecond(self: Tm, millisecond: int) -> Tm:
        """Replace the sub-second part with whole milliseconds.

        Raises:
            ValidationError: If millisecond is outside 0-999.
        """
        validate_field("millisecond", millisecond, 0, 999)
        return self.with_nanosecond(millisecond * NANOS_PER_MILLISECOND)

    def plus_hours(self: Tm, hours: int) -> Tm:
        return self.plus_nanoseconds(hours * NANOS_PER_HOUR)

    def plus_minutes(self: Tm, minutes: int) -> Tm:
        return self.plus_nanoseconds(minutes * NANOS_PER_MINUTE)

    def plus_seconds(self: Tm, seconds: int) -> Tm:
        return self.plus_nanoseconds(seconds * NANOS_PER_SECOND)

    def plus_milliseconds(self: Tm, millis: int) -> Tm:
        return self.plus_nanoseconds(millis * NANOS_PER_MILLISECOND)

    def minus_hours(self: Tm, hours: int) -> Tm:
        return self.plus_hours(-hours)

    def minus_minutes(self: Tm, minutes: int) -> Tm:
        return self.plus_minutes(-minutes)

    def minus_seconds(self: Tm, seconds: int) -> Tm:
        return self.plus_seconds(-seconds)

    def minus_milliseconds(self: Tm, millis: int) -> Tm:
        return self.plus_milliseconds(-millis)

    def minus_nanoseconds(self: Tm, nanos: int) -> Tm:
        return self.plus_nanoseconds(-nanos)


__all__ = ["Temporal", "TemporalInstant", "DateLike", "TimeLike"]
