"""Tests for epoch conversion helpers."""

from __future__ import annotations

from calendrical._internal.constants import NANOS_PER_DAY
from calendrical.convert import (
    MAX_EPOCH_NANOS,
    MIN_EPOCH_NANOS,
    from_epoch_nanos,
    split_epoch_nanos,
    to_epoch_nanos,
)
from calendrical.core.datetime import LocalDateTime


class TestEpochConversion:
    """Tests for to_epoch_nanos / from_epoch_nanos."""

    def test_offset_is_subtracted(self) -> None:
        """Local midnight at +01:00 is an hour before the UTC epoch."""
        assert to_epoch_nanos(0, 0, 3600) == -3_600_000_000_000

    def test_before_epoch(self) -> None:
        """One nanosecond before the epoch is the last nanosecond of day -1."""
        assert from_epoch_nanos(-1) == (-1, NANOS_PER_DAY - 1)

    def test_round_trip(self) -> None:
        """to and from are inverse at the same offset."""
        for epoch_day, nano_of_day, offset in [(19737, 0, 0), (-5, 123, -18000), (0, 1, 3600)]:
            nanos = to_epoch_nanos(epoch_day, nano_of_day, offset)
            assert from_epoch_nanos(nanos, offset) == (epoch_day, nano_of_day)

    def test_split_floors(self) -> None:
        """split_epoch_nanos floors toward negative infinity."""
        assert split_epoch_nanos(-1) == (-1, 999_999_999)
        assert split_epoch_nanos(1_500_000_000) == (1, 500_000_000)

    def test_range_matches_local_date_time(self) -> None:
        """The epoch range is exactly LocalDateTime.MIN..MAX read as UTC."""
        assert LocalDateTime.MIN.epoch_nanoseconds() == MIN_EPOCH_NANOS
        assert LocalDateTime.MAX.epoch_nanoseconds() == MAX_EPOCH_NANOS
