"""Tests for the LocalDate class."""

from __future__ import annotations

import pytest

from calendrical.core.date import LocalDate
from calendrical.core.datetime import LocalDateTime
from calendrical.core.period import Period
from calendrical.core.time import LocalTime
from calendrical.errors import OverflowError, ParseError, ValidationError
from calendrical.units.day_of_week import DayOfWeek
from calendrical.units.month import Month


class TestLocalDateConstruction:
    """Tests for LocalDate construction and validation."""

    def test_basic_construction(self) -> None:
        """Test basic date construction."""
        d = LocalDate.of(2024, 1, 15)
        assert d.year == 2024
        assert d.month_value == 1
        assert d.month is Month.JANUARY
        assert d.day_of_month == 15

    def test_month_enum_accepted(self) -> None:
        """A Month member may be passed for the month."""
        assert LocalDate.of(2024, Month.MARCH, 1) == LocalDate.of(2024, 3, 1)

    def test_invalid_day(self) -> None:
        """Feb 30 raises ValidationError naming the field."""
        with pytest.raises(ValidationError, match="day must be between 1 and 29") as info:
            LocalDate.of(2024, 2, 30)
        assert info.value.field == "day"
        assert info.value.value == 30

    def test_invalid_month(self) -> None:
        """Month 13 raises ValidationError."""
        with pytest.raises(ValidationError, match="month must be between 1 and 12"):
            LocalDate.of(2024, 13, 1)

    def test_year_out_of_range(self) -> None:
        """Years beyond 9999 raise ValidationError."""
        with pytest.raises(ValidationError, match="year must be between"):
            LocalDate.of(10000, 1, 1)

    def test_of_epoch_day(self) -> None:
        """Epoch days map to dates on both sides of the epoch."""
        assert LocalDate.of_epoch_day(0) == LocalDate.EPOCH
        assert LocalDate.of_epoch_day(-1) == LocalDate.of(1969, 12, 31)
        assert LocalDate.of(2024, 1, 15).to_epoch_day() == 19737

    def test_of_epoch_day_out_of_range(self) -> None:
        """Epoch days outside the supported years are rejected."""
        with pytest.raises(ValidationError):
            LocalDate.of_epoch_day(LocalDate.MAX.to_epoch_day() + 1)

    def test_of_year_day(self) -> None:
        """Day 60 of a leap year is Feb 29."""
        assert LocalDate.of_year_day(2024, 60) == LocalDate.of(2024, 2, 29)
        with pytest.raises(ValidationError):
            LocalDate.of_year_day(2023, 366)

    def test_min_max(self) -> None:
        """MIN and MAX span years -9999 to 9999."""
        assert LocalDate.MIN == LocalDate.of(-9999, 1, 1)
        assert LocalDate.MAX == LocalDate.of(9999, 12, 31)


class TestLocalDateQueries:
    """Tests for derived calendar queries."""

    def test_day_of_week(self) -> None:
        """2021-03-14 was a Sunday."""
        assert LocalDate.of(2021, 3, 14).day_of_week is DayOfWeek.SUNDAY
        assert LocalDate.EPOCH.day_of_week is DayOfWeek.THURSDAY

    def test_day_of_year(self) -> None:
        """day_of_year counts from 1."""
        assert LocalDate.of(2020, 2, 29).day_of_year == 60
        assert LocalDate.of(2023, 12, 31).day_of_year == 365

    def test_lengths(self) -> None:
        """length_of_month and length_of_year follow the leap rule."""
        d = LocalDate.of(2024, 2, 10)
        assert d.length_of_month == 29
        assert d.length_of_year == 366
        assert d.is_leap_year
        assert not LocalDate.of(1900, 1, 1).is_leap_year


class TestLocalDateArithmetic:
    """Tests for clamping, saturating and rejecting arithmetic."""

    @pytest.mark.parametrize(
        ("start", "months", "expected"),
        [
            ((2019, 1, 31), 1, (2019, 2, 28)),
            ((2020, 1, 31), 1, (2020, 2, 29)),
            ((2020, 3, 31), -13, (2019, 2, 28)),
            ((2020, 5, 31), -5, (2019, 12, 31)),
            ((2024, 1, 15), 0, (2024, 1, 15)),
        ],
    )
    def test_plus_months_clamps(
        self, start: tuple[int, int, int], months: int, expected: tuple[int, int, int]
    ) -> None:
        """plus_months clamps the day to the target month."""
        assert LocalDate.of(*start).plus_months(months) == LocalDate.of(*expected)

    def test_minus_months_symmetry(self) -> None:
        """minus_months(n) is exactly plus_months(-n)."""
        d = LocalDate.of(2020, 3, 31)
        for n in (1, 13, -7):
            assert d.minus_months(n) == d.plus_months(-n)

    def test_plus_years_leap_day(self) -> None:
        """Feb 29 plus a year clamps to Feb 28."""
        d = LocalDate.of(2020, 2, 29)
        assert d.plus_years(1) == LocalDate.of(2021, 2, 28)
        assert d.plus_years(4) == LocalDate.of(2024, 2, 29)
        assert d.minus_years(1) == LocalDate.of(2019, 2, 28)

    def test_minus_years_symmetry(self) -> None:
        """minus_years(n) is exactly plus_years(-n)."""
        for d in (LocalDate.of(2020, 2, 29), LocalDate.of(2021, 7, 14)):
            for n in (0, 1, 3, 4, -1, -4, -100, 400):
                assert d.minus_years(n) == d.plus_years(-n)
                assert d.plus_years(n) == d.minus_years(-n)

    def test_plus_years_overflow(self) -> None:
        """Moving past year 9999 raises OverflowError."""
        with pytest.raises(OverflowError):
            LocalDate.of(9999, 6, 1).plus_years(1)
        with pytest.raises(OverflowError):
            LocalDate.of(9999, 12, 1).plus_months(1)

    def test_plus_days(self) -> None:
        """plus_days crosses month and year boundaries."""
        assert LocalDate.of(2024, 12, 31).plus_days(1) == LocalDate.of(2025, 1, 1)
        assert LocalDate.of(2024, 3, 1).minus_days(1) == LocalDate.of(2024, 2, 29)
        assert LocalDate.of(2024, 1, 1).plus_weeks(2) == LocalDate.of(2024, 1, 15)

    def test_plus_days_saturates(self) -> None:
        """plus_days saturates at MIN and MAX."""
        assert LocalDate.MAX.plus_days(1) == LocalDate.MAX
        assert LocalDate.MIN.minus_days(1) == LocalDate.MIN
        assert LocalDate.MAX.plus_weeks(10**9) == LocalDate.MAX

    def test_period_operators(self) -> None:
        """+ and - accept a Period."""
        d = LocalDate.of(2024, 1, 31)
        assert d + Period.of(0, 1, 1) == LocalDate.of(2024, 3, 1)
        assert d - Period.of_days(31) == LocalDate.of(2023, 12, 31)
        assert d.plus_period(Period.of_months(1)) == LocalDate.of(2024, 2, 29)
        assert d.minus_period(Period.of_years(1)) == LocalDate.of(2023, 1, 31)


class TestLocalDateSetters:
    """Tests for the rejecting with_* setters."""

    def test_with_month_rejects(self) -> None:
        """with_month never clamps the day."""
        with pytest.raises(ValidationError, match="day must be between 1 and 29"):
            LocalDate.of(2024, 1, 31).with_month(2)

    def test_with_year_rejects_leap_day(self) -> None:
        """Feb 29 moved to a common year is rejected."""
        with pytest.raises(ValidationError):
            LocalDate.of(2020, 2, 29).with_year(2021)

    def test_with_day_of_month(self) -> None:
        """with_day_of_month replaces the day or rejects it."""
        assert LocalDate.of(2024, 4, 15).with_day_of_month(30) == LocalDate.of(2024, 4, 30)
        with pytest.raises(ValidationError):
            LocalDate.of(2024, 4, 15).with_day_of_month(31)

    def test_with_day_of_year(self) -> None:
        """with_day_of_year stays in the same year."""
        assert LocalDate.of(2024, 7, 1).with_day_of_year(1) == LocalDate.of(2024, 1, 1)


class TestLocalDateAdjusters:
    """Tests for month/year boundaries and weekday navigation."""

    def test_month_boundaries(self) -> None:
        """First and last day of the month."""
        d = LocalDate.of(2024, 2, 10)
        assert d.first_day_of_month() == LocalDate.of(2024, 2, 1)
        assert d.last_day_of_month() == LocalDate.of(2024, 2, 29)
        assert LocalDate.of(2024, 12, 15).first_day_of_next_month() == LocalDate.of(2025, 1, 1)

    def test_year_boundaries(self) -> None:
        """First and last day of the year."""
        d = LocalDate.of(2024, 7, 4)
        assert d.first_day_of_year() == LocalDate.of(2024, 1, 1)
        assert d.last_day_of_year() == LocalDate.of(2024, 12, 31)
        assert d.first_day_of_next_year() == LocalDate.of(2025, 1, 1)

    def test_last_day_of_month_year(self) -> None:
        """last_day_of_month_year works from a day that does not exist in the target."""
        d = LocalDate.of(2024, 1, 31)
        assert d.last_day_of_month_year(2023, 2) == LocalDate.of(2023, 2, 28)

    def test_weekday_navigation(self) -> None:
        """next/previous from Sunday 2021-03-14."""
        sunday = LocalDate.of(2021, 3, 14)
        assert sunday.next(DayOfWeek.MONDAY) == LocalDate.of(2021, 3, 15)
        assert sunday.next(DayOfWeek.SUNDAY) == LocalDate.of(2021, 3, 21)
        assert sunday.next_or_same(DayOfWeek.SUNDAY) == sunday
        assert sunday.previous(DayOfWeek.SUNDAY) == LocalDate.of(2021, 3, 7)
        assert sunday.previous_or_same(DayOfWeek.FRIDAY) == LocalDate.of(2021, 3, 12)
        assert sunday.previous_or_same(DayOfWeek.SUNDAY) == sunday

    def test_in_month(self) -> None:
        """first_in_month and last_in_month stay in the month."""
        d = LocalDate.of(2021, 3, 14)
        assert d.first_in_month(DayOfWeek.MONDAY) == LocalDate.of(2021, 3, 1)
        assert d.last_in_month(DayOfWeek.FRIDAY) == LocalDate.of(2021, 3, 26)
        assert d.last_in_month(DayOfWeek.WEDNESDAY) == LocalDate.of(2021, 3, 31)


class TestLocalDateParsing:
    """Tests for ISO 8601 text."""

    def test_parse(self) -> None:
        """YYYY-MM-DD parses."""
        assert LocalDate.parse("2024-01-15") == LocalDate.of(2024, 1, 15)

    def test_negative_year(self) -> None:
        """Negative years carry a sign and at least four digits."""
        d = LocalDate.parse("-0044-03-15")
        assert d == LocalDate.of(-44, 3, 15)
        assert d.to_iso_format() == "-0044-03-15"

    def test_parse_malformed(self) -> None:
        """Malformed text raises ParseError."""
        with pytest.raises(ParseError):
            LocalDate.parse("2024/01/15")

    def test_parse_invalid_fields(self) -> None:
        """Well-formed text with an invalid day raises ValidationError."""
        with pytest.raises(ValidationError):
            LocalDate.parse("2023-02-29")

    def test_str_and_repr(self) -> None:
        """str is ISO 8601, repr is constructor-like."""
        d = LocalDate.of(2024, 1, 5)
        assert str(d) == "2024-01-05"
        assert repr(d) == "LocalDate(2024, 1, 5)"


class TestLocalDateComparison:
    """Tests for ordering and combination."""

    def test_ordering(self) -> None:
        """Dates order chronologically."""
        a = LocalDate.of(2024, 1, 1)
        b = LocalDate.of(2024, 1, 2)
        assert a < b
        assert a.is_before(b)
        assert b.is_after(a)
        assert a.is_on_or_before(a)
        assert a.is_on_or_after(a)

    def test_hash(self) -> None:
        """Equal dates hash equally."""
        assert hash(LocalDate.of(2024, 1, 1)) == hash(LocalDate.of_epoch_day(19723))

    def test_at_time(self) -> None:
        """Combining with a time yields a LocalDateTime."""
        d = LocalDate.of(2024, 1, 15)
        assert d.at_time(LocalTime.of(10, 30)) == LocalDateTime.of(2024, 1, 15, 10, 30)
        assert d.at_start_of_day() == LocalDateTime.of(2024, 1, 15)
