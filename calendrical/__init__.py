"""Calendrical: dates, times, instants and zones in the proleptic Gregorian calendar.

Calendrical provides immutable calendrical value types with nanosecond
precision, field-wise calendar arithmetic with end-of-month clamping,
and exact epoch-based instants.

Core Types:
    LocalDate: Calendar date (year, month, day)
    LocalTime: Time of day (hour, minute, second, nanosecond)
    LocalDateTime: Combined date and time without a zone
    OffsetDateTime: Date-time with a fixed UTC offset
    ZonedDateTime: Date-time in a named zone
    Instant: Point on the UTC timeline (epoch nanoseconds)
    Duration: Exact time span with nanosecond precision
    Period: Calendar-based amount (years, months, days)

Units:
    Month, DayOfWeek: Closed enumerations
    Year, YearMonth, MonthDay: Partial dates
    ChronoUnit: Standard units of time (NANOS .. YEARS)
    ZoneOffset, ZoneId: Fixed offsets and named zones

Clocks and zones:
    Clock: Source of the current instant (system or fixed)
    ZoneInfoDatabase, FixedZoneDatabase: Zone name resolution

Format Functions:
    parse_iso8601: Parse ISO 8601 date/time/datetime string
    format_iso8601: Format temporal object as ISO 8601 string

Exceptions:
    CalendricalError: Base exception
    ValidationError: Invalid field value
    ParseError: Failed to parse string
    OverflowError: Arithmetic overflow
    TimezoneError: Invalid offset or zone
    UnsupportedUnitError: Unit not supported by a temporal type

Example:
    >>> from calendrical import LocalDate, Period
    >>> LocalDate.of(2024, 1, 31).plus_months(1)
    LocalDate(2024, 2, 29)
    >>> LocalDate.of(2024, 1, 31) + Period.of_months(1)
    LocalDate(2024, 2, 29)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from calendrical.core.date import LocalDate
from calendrical.core.datetime import LocalDateTime
from calendrical.core.duration import Duration
from calendrical.core.instant import Instant
from calendrical.core.offset_datetime import OffsetDateTime
from calendrical.core.period import Period
from calendrical.core.temporal import DateLike, Temporal, TemporalInstant, TimeLike
from calendrical.core.time import LocalTime
from calendrical.core.zoned_datetime import ZonedDateTime

# Units
from calendrical.units.chrono_unit import ChronoUnit
from calendrical.units.day_of_week import DayOfWeek
from calendrical.units.month import Month
from calendrical.units.month_day import MonthDay
from calendrical.units.year import Year
from calendrical.units.year_month import YearMonth
from calendrical.units.zone_database import (
    FixedZoneDatabase,
    ZoneDatabase,
    ZoneInfoDatabase,
)
from calendrical.units.zone_id import ZoneId
from calendrical.units.zone_offset import ZoneOffset

# Clocks
from calendrical.clock import Clock, FixedClock, SystemClock

# Exceptions
from calendrical.errors import (
    CalendricalError,
    OverflowError,
    ParseError,
    TimezoneError,
    UnsupportedUnitError,
    ValidationError,
)

# Format functions
from calendrical.format import format_iso8601, parse_iso8601

__all__: list[str] = [
    "__version__",
    # Core types
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "OffsetDateTime",
    "ZonedDateTime",
    "Instant",
    "Duration",
    "Period",
    # Capabilities
    "Temporal",
    "TemporalInstant",
    "DateLike",
    "TimeLike",
    # Units
    "ChronoUnit",
    "DayOfWeek",
    "Month",
    "MonthDay",
    "Year",
    "YearMonth",
    "ZoneId",
    "ZoneOffset",
    # Zones and clocks
    "ZoneDatabase",
    "ZoneInfoDatabase",
    "FixedZoneDatabase",
    "Clock",
    "FixedClock",
    "SystemClock",
    # Exceptions
    "CalendricalError",
    "ValidationError",
    "ParseError",
    "OverflowError",
    "TimezoneError",
    "UnsupportedUnitError",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
]
