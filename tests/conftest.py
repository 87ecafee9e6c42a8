"""Pytest configuration and fixtures for Calendrical tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add the parent directory to sys.path so calendrical can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest  # noqa: E402

from calendrical.units.zone_database import FixedZoneDatabase  # noqa: E402
from calendrical.units.zone_offset import ZoneOffset  # noqa: E402


@pytest.fixture
def zone_db() -> FixedZoneDatabase:
    """Zone database with fixed offsets for a few well-known zones."""
    return FixedZoneDatabase(
        {
            "Europe/Paris": ZoneOffset.of_hours(1),
            "Asia/Tokyo": ZoneOffset.of_hours(9),
            "America/New_York": ZoneOffset.of_hours(-5),
            "Asia/Kolkata": ZoneOffset.of_hours_minutes(5, 30),
        }
    )
