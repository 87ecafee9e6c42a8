"""Internal utilities for Calendrical.

This module contains private implementation details:
    - The civil-calendar primitive (leap years, month lengths, epoch days)
    - Constants and magic numbers
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from calendrical._internal.validation import (
    validate_day,
    validate_field,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "validate_day",
    "validate_field",
    "validate_month",
    "validate_range",
    "validate_year",
]
