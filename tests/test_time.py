"""Tests for the LocalTime class."""

from __future__ import annotations

import pytest

from calendrical._internal.constants import NANOS_PER_DAY
from calendrical.core.date import LocalDate
from calendrical.core.datetime import LocalDateTime
from calendrical.core.time import LocalTime
from calendrical.errors import ParseError, ValidationError


class TestLocalTimeConstruction:
    """Tests for LocalTime construction and validation."""

    def test_basic_construction(self) -> None:
        """Fields read back as given."""
        t = LocalTime.of(14, 30, 45, 123_456_789)
        assert (t.hour, t.minute, t.second, t.nanosecond) == (14, 30, 45, 123_456_789)
        assert t.millisecond == 123

    def test_defaults(self) -> None:
        """Minute, second and nanosecond default to zero."""
        assert LocalTime.of(9) == LocalTime(9, 0, 0, 0)

    @pytest.mark.parametrize(
        ("args", "field"),
        [
            ((24,), "hour"),
            ((0, 60), "minute"),
            ((0, 0, 60), "second"),
            ((0, 0, 0, 1_000_000_000), "nanosecond"),
            ((-1,), "hour"),
        ],
    )
    def test_invalid_fields(self, args: tuple[int, ...], field: str) -> None:
        """Out-of-range fields raise ValidationError naming the field."""
        with pytest.raises(ValidationError, match=f"{field} must be between") as info:
            LocalTime.of(*args)
        assert info.value.field == field

    def test_of_nano_of_day(self) -> None:
        """of_nano_of_day accepts 0 to one nanosecond short of a day."""
        assert LocalTime.of_nano_of_day(0) == LocalTime.MIDNIGHT
        assert LocalTime.of_nano_of_day(NANOS_PER_DAY - 1) == LocalTime.MAX
        with pytest.raises(ValidationError):
            LocalTime.of_nano_of_day(NANOS_PER_DAY)

    def test_constants(self) -> None:
        """MIDNIGHT, NOON, MIN and MAX."""
        assert LocalTime.MIDNIGHT == LocalTime.MIN == LocalTime.of(0)
        assert LocalTime.NOON == LocalTime.of(12)
        assert LocalTime.MAX == LocalTime.of(23, 59, 59, 999_999_999)

    def test_nano_and_second_of_day(self) -> None:
        """nano_of_day and to_second_of_day count from midnight."""
        t = LocalTime.of(1, 0, 1, 5)
        assert t.nano_of_day == 3_601_000_000_005
        assert t.to_second_of_day() == 3601


class TestLocalTimeWrapping:
    """Tests for wraparound arithmetic."""

    def test_plus_hours_wraps(self) -> None:
        """23:00 plus 2 hours is 01:00."""
        assert LocalTime.of(23).plus_hours(2) == LocalTime.of(1)

    def test_minus_wraps(self) -> None:
        """Midnight minus one nanosecond is the last nanosecond of the day."""
        assert LocalTime.MIDNIGHT.minus_nanoseconds(1) == LocalTime.MAX
        assert LocalTime.MIDNIGHT.minus_minutes(1) == LocalTime.of(23, 59)

    def test_whole_days_are_identity(self) -> None:
        """Adding whole days leaves the time unchanged."""
        t = LocalTime.of(10, 15)
        assert t.plus_hours(48) == t
        assert t.plus_seconds(-86400) == t

    def test_plus_units(self) -> None:
        """Each unit adds its own length."""
        t = LocalTime.of(10)
        assert t.plus_minutes(90) == LocalTime.of(11, 30)
        assert t.plus_seconds(61) == LocalTime.of(10, 1, 1)
        assert t.plus_milliseconds(1500) == LocalTime.of(10, 0, 1, 500_000_000)
        assert t.minus_hours(11) == LocalTime.of(23)
        assert t.minus_seconds(1) == LocalTime.of(9, 59, 59)
        assert t.minus_milliseconds(1) == LocalTime.of(9, 59, 59, 999_000_000)


class TestLocalTimeSetters:
    """Tests for with_* setters."""

    def test_with_fields(self) -> None:
        """Each setter replaces one field."""
        t = LocalTime.of(10, 20, 30, 40)
        assert t.with_hour(1) == LocalTime.of(1, 20, 30, 40)
        assert t.with_minute(1) == LocalTime.of(10, 1, 30, 40)
        assert t.with_second(1) == LocalTime.of(10, 20, 1, 40)
        assert t.with_nanosecond(1) == LocalTime.of(10, 20, 30, 1)

    def test_with_millisecond(self) -> None:
        """with_millisecond replaces the whole sub-second part."""
        t = LocalTime.of(10, 0, 0, 999)
        assert t.with_millisecond(123).nanosecond == 123_000_000
        with pytest.raises(ValidationError, match="millisecond must be between 0 and 999"):
            t.with_millisecond(1000)

    def test_with_hour_rejects(self) -> None:
        """Setters reject out-of-range values."""
        with pytest.raises(ValidationError):
            LocalTime.of(10).with_hour(24)


class TestLocalTimeText:
    """Tests for parse and format."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("14:30", LocalTime.of(14, 30)),
            ("14:30:45", LocalTime.of(14, 30, 45)),
            ("14:30:45.5", LocalTime.of(14, 30, 45, 500_000_000)),
            ("14:30:45.123456789", LocalTime.of(14, 30, 45, 123_456_789)),
            ("143045", LocalTime.of(14, 30, 45)),
            ("143045.25", LocalTime.of(14, 30, 45, 250_000_000)),
        ],
    )
    def test_parse(self, text: str, expected: LocalTime) -> None:
        """Extended and compact forms parse."""
        assert LocalTime.parse(text) == expected

    def test_parse_malformed(self) -> None:
        """Malformed text raises ParseError."""
        for text in ("", "1:30", "14:30:45.", "noon"):
            with pytest.raises(ParseError):
                LocalTime.parse(text)

    def test_parse_out_of_range(self) -> None:
        """Hour 25 is well-formed but invalid."""
        with pytest.raises(ValidationError):
            LocalTime.parse("25:00")

    def test_iso_format_precision(self) -> None:
        """Fractions use minimal digits unless a precision is requested."""
        t = LocalTime.of(14, 30, 45, 120_000_000)
        assert t.to_iso_format() == "14:30:45.12"
        assert t.to_iso_format(precision="seconds") == "14:30:45"
        assert t.to_iso_format(precision="millis") == "14:30:45.120"
        assert t.to_iso_format(precision="nanos") == "14:30:45.120000000"
        assert LocalTime.of(14, 30).to_iso_format() == "14:30:00"

    def test_repr(self) -> None:
        """repr includes the nanosecond only when non-zero."""
        assert repr(LocalTime.of(1)) == "LocalTime(1, 0, 0)"
        assert repr(LocalTime.of(1, 2, 3, 4)) == "LocalTime(1, 2, 3, 4)"


class TestLocalTimeComparison:
    """Tests for ordering and combination."""

    def test_ordering(self) -> None:
        """Times order within the day."""
        assert LocalTime.of(9) < LocalTime.of(10)
        assert LocalTime.of(10).is_after(LocalTime.of(9, 59, 59, 999_999_999))

    def test_at_date(self) -> None:
        """at_date builds a LocalDateTime."""
        t = LocalTime.of(10, 30)
        assert t.at_date(LocalDate.of(2024, 1, 15)) == LocalDateTime.of(2024, 1, 15, 10, 30)
