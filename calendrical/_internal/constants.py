"""Internal constants for Calendrical.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_HALF_DAY: int = 12 * NANOS_PER_HOUR
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

MILLIS_PER_SECOND: int = 1_000

DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12

# Fixed-length approximations for calendar units in ChronoUnit
APPROX_DAYS_PER_MONTH: int = 30
APPROX_DAYS_PER_YEAR: int = 365

# Year limits of the civil-calendar representation
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Signed 64-bit bounds, used for Duration seconds and clamped conversions
I64_MIN: int = -(2**63)
I64_MAX: int = 2**63 - 1

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Ordinal of 1970-01-01 where ordinal 1 = 0001-01-01
EPOCH_ORDINAL: int = 719_163

# UTC offset limits (in seconds)
MAX_OFFSET_SECONDS: int = 18 * SECONDS_PER_HOUR  # +/- 18 hours


__all__ = [
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_HALF_DAY",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "MILLIS_PER_SECOND",
    "DAYS_PER_WEEK",
    "MONTHS_PER_YEAR",
    "APPROX_DAYS_PER_MONTH",
    "APPROX_DAYS_PER_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "I64_MIN",
    "I64_MAX",
    "DAYS_IN_MONTH",
    "EPOCH_ORDINAL",
    "MAX_OFFSET_SECONDS",
]
