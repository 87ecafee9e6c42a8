"""Tests for ChronoUnit dispatch."""

from __future__ import annotations

import pytest

from calendrical.core.date import LocalDate
from calendrical.core.datetime import LocalDateTime
from calendrical.core.duration import Duration
from calendrical.core.instant import Instant
from calendrical.core.offset_datetime import OffsetDateTime
from calendrical.core.time import LocalTime
from calendrical.errors import UnsupportedUnitError
from calendrical.units.chrono_unit import ChronoUnit
from calendrical.units.zone_offset import ZoneOffset


class TestChronoUnitProperties:
    """Tests for unit classification and durations."""

    def test_time_and_date_based(self) -> None:
        """NANOS..HALF_DAYS are time-based, DAYS..YEARS date-based."""
        time_based = [u for u in ChronoUnit if u.is_time_based()]
        date_based = [u for u in ChronoUnit if u.is_date_based()]
        assert time_based == [
            ChronoUnit.NANOS,
            ChronoUnit.MILLIS,
            ChronoUnit.SECONDS,
            ChronoUnit.MINUTES,
            ChronoUnit.HOURS,
            ChronoUnit.HALF_DAYS,
        ]
        assert date_based == [
            ChronoUnit.DAYS,
            ChronoUnit.WEEKS,
            ChronoUnit.MONTHS,
            ChronoUnit.YEARS,
        ]

    def test_duration(self) -> None:
        """Each unit has a length; months and years are approximated."""
        assert ChronoUnit.HOURS.duration() == Duration.of_hours(1)
        assert ChronoUnit.HALF_DAYS.duration() == Duration.of_hours(12)
        assert ChronoUnit.WEEKS.duration() == Duration.of_days(7)
        assert ChronoUnit.MONTHS.duration() == Duration.of_days(30)
        assert ChronoUnit.YEARS.duration() == Duration.of_days(365)

    def test_str(self) -> None:
        """str is the unit name."""
        assert str(ChronoUnit.DAYS) == "DAYS"


class TestChronoUnitBetween:
    """Tests for counting whole units."""

    def test_between_instants(self) -> None:
        """0s to 3661s is 3661 seconds, 61 minutes, 1 hour, 0 days."""
        start = Instant.of_epoch_second(0)
        end = Instant.of_epoch_second(3661)
        assert ChronoUnit.SECONDS.between(start, end) == 3661
        assert ChronoUnit.MINUTES.between(start, end) == 61
        assert ChronoUnit.HOURS.between(start, end) == 1
        assert ChronoUnit.DAYS.between(start, end) == 0

    def test_between_truncates_toward_zero(self) -> None:
        """A reversed span is negative and truncated toward zero."""
        start = Instant.of_epoch_second(0)
        end = Instant.of_epoch_second(3661)
        assert ChronoUnit.HOURS.between(end, start) == -1
        assert ChronoUnit.DAYS.between(end, start) == 0

    def test_between_date_times(self) -> None:
        """Date-times are compared on the timeline."""
        a = LocalDateTime.of(2024, 1, 1)
        b = LocalDateTime.of(2024, 3, 1)
        assert ChronoUnit.DAYS.between(a, b) == 60
        assert ChronoUnit.WEEKS.between(a, b) == 8
        assert ChronoUnit.MONTHS.between(a, b) == 2


class TestChronoUnitAddTo:
    """Tests for add_to dispatch."""

    def test_date_units_on_local_date(self) -> None:
        """Date units use the date's own arithmetic."""
        d = LocalDate.of(2024, 1, 31)
        assert ChronoUnit.DAYS.add_to(d, 1) == LocalDate.of(2024, 2, 1)
        assert ChronoUnit.WEEKS.add_to(d, 1) == LocalDate.of(2024, 2, 7)
        assert ChronoUnit.MONTHS.add_to(d, 1) == LocalDate.of(2024, 2, 29)
        assert ChronoUnit.YEARS.add_to(d, -1) == LocalDate.of(2023, 1, 31)

    def test_time_units_on_local_time(self) -> None:
        """Time units wrap on a LocalTime."""
        t = LocalTime.of(1)
        assert ChronoUnit.HALF_DAYS.add_to(t, 1) == LocalTime.of(13)
        assert ChronoUnit.HOURS.add_to(t, 23) == LocalTime.of(0)
        assert ChronoUnit.MILLIS.add_to(t, 1) == LocalTime.of(1, 0, 0, 1_000_000)

    def test_all_units_on_date_time(self) -> None:
        """Date-times accept both families."""
        ldt = LocalDateTime.of(2024, 1, 31, 23)
        assert ChronoUnit.HOURS.add_to(ldt, 2) == LocalDateTime.of(2024, 2, 1, 1)
        assert ChronoUnit.MONTHS.add_to(ldt, 1) == LocalDateTime.of(2024, 2, 29, 23)
        odt = OffsetDateTime.of(ldt, ZoneOffset.of_hours(1))
        assert ChronoUnit.DAYS.add_to(odt, 1).to_local_date_time() == LocalDateTime.of(
            2024, 2, 1, 23
        )

    def test_time_units_on_instant(self) -> None:
        """Instants accept time units only."""
        assert ChronoUnit.HALF_DAYS.add_to(Instant.EPOCH, 1) == Instant.of_epoch_second(43200)
        assert ChronoUnit.MINUTES.add_to(Instant.EPOCH, 2) == Instant.of_epoch_second(120)
        assert ChronoUnit.NANOS.add_to(Instant.EPOCH, 5) == Instant(5)

    def test_hours_on_local_date_unsupported(self) -> None:
        """A LocalDate has no hours."""
        with pytest.raises(
            UnsupportedUnitError, match="HOURS not supported for LocalDate.add_to"
        ):
            ChronoUnit.HOURS.add_to(LocalDate.of(2024, 1, 1), 1)

    def test_months_on_instant_unsupported(self) -> None:
        """An Instant has no calendar."""
        with pytest.raises(
            UnsupportedUnitError, match="MONTHS not supported for Instant.add_to"
        ):
            ChronoUnit.MONTHS.add_to(Instant.EPOCH, 1)
        with pytest.raises(UnsupportedUnitError):
            ChronoUnit.DAYS.add_to(Instant.EPOCH, 1)

    def test_days_on_local_time_unsupported(self) -> None:
        """A LocalTime has no days."""
        with pytest.raises(UnsupportedUnitError) as info:
            ChronoUnit.DAYS.add_to(LocalTime.NOON, 1)
        assert info.value.unit is ChronoUnit.DAYS
        assert info.value.temporal_type is LocalTime

    def test_plus_unit(self) -> None:
        """plus_unit/minus_unit delegate to add_to."""
        d = LocalDate.of(2024, 1, 1)
        assert d.plus_unit(1, ChronoUnit.YEARS) == LocalDate.of(2025, 1, 1)
        assert d.minus_unit(1, ChronoUnit.DAYS) == LocalDate.of(2023, 12, 31)
        assert Instant.EPOCH.plus_unit(1, ChronoUnit.SECONDS) == Instant.of_epoch_second(1)
