"""Temporal units, enumerations and zones.

This module provides:
    - Month: Months of the year (JANUARY = 1 .. DECEMBER = 12)
    - DayOfWeek: Days of the week (MONDAY = 1 .. SUNDAY = 7)
    - ChronoUnit: Standard units of time (NANOS .. YEARS)
    - ZoneOffset: Fixed whole-second offset from UTC
    - ZoneId: Named time zone, resolved through a zone database
    - ZoneDatabase: Protocol for zone lookup (ZoneInfoDatabase, FixedZoneDatabase)

Year, YearMonth and MonthDay live in calendrical.units.year,
calendrical.units.year_month and calendrical.units.month_day and are
exported from the top-level package.
"""

from __future__ import annotations

from calendrical.units.chrono_unit import ChronoUnit
from calendrical.units.day_of_week import DayOfWeek
from calendrical.units.month import Month
from calendrical.units.zone_database import (
    FixedZoneDatabase,
    ZoneDatabase,
    ZoneInfoDatabase,
    default_zone_database,
)
from calendrical.units.zone_id import ZoneId
from calendrical.units.zone_offset import ZoneOffset

__all__: list[str] = [
    "ChronoUnit",
    "DayOfWeek",
    "FixedZoneDatabase",
    "Month",
    "ZoneDatabase",
    "ZoneId",
    "ZoneInfoDatabase",
    "ZoneOffset",
    "default_zone_database",
]
