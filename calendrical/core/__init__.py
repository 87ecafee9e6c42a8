"""Core temporal types.

This module provides the fundamental temporal types:
    - LocalDate: Calendar date in the proleptic Gregorian calendar
    - LocalTime: Time of day with nanosecond precision
    - LocalDateTime: Combined date and time without a zone
    - OffsetDateTime: Date-time with a fixed UTC offset
    - ZonedDateTime: Date-time in a named zone
    - Instant: Point on the UTC timeline
    - Duration: Exact time-based span with nanosecond precision
    - Period: Calendar-based amount (years, months, days)
"""

from __future__ import annotations

from calendrical.core.duration import Duration
from calendrical.core.period import Period
from calendrical.core.date import LocalDate
from calendrical.core.time import LocalTime
from calendrical.core.datetime import LocalDateTime
from calendrical.core.offset_datetime import OffsetDateTime
from calendrical.core.zoned_datetime import ZonedDateTime
from calendrical.core.instant import Instant

__all__: list[str] = [
    "Duration",
    "Instant",
    "LocalDate",
    "LocalDateTime",
    "LocalTime",
    "OffsetDateTime",
    "Period",
    "ZonedDateTime",
]
