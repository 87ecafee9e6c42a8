"""Tests for the Period class and period arithmetic."""

from __future__ import annotations

import pytest

from calendrical.arithmetic import add_period, subtract_period
from calendrical.core.date import LocalDate
from calendrical.core.datetime import LocalDateTime
from calendrical.core.period import Period


class TestPeriodConstruction:
    """Tests for Period factories."""

    def test_of(self) -> None:
        """of() stores each component as given."""
        p = Period.of(1, 2, 3)
        assert (p.years, p.months, p.days) == (1, 2, 3)

    def test_no_normalization(self) -> None:
        """14 months stays 14 months."""
        p = Period.of_months(14)
        assert p.years == 0
        assert p.months == 14

    def test_of_weeks_stored_as_days(self) -> None:
        """Weeks are stored as days."""
        assert Period.of_weeks(2) == Period.of_days(14)

    def test_total_months(self) -> None:
        """total_months ignores days."""
        assert Period.of(1, 6, 40).total_months() == 18


class TestPeriodSign:
    """Tests for sign queries."""

    def test_mixed_signs(self) -> None:
        """A period with mixed signs is both negative and positive."""
        p = Period.of(1, -1, 0)
        assert p.is_negative()
        assert p.is_positive()
        assert not p.is_zero()

    def test_zero(self) -> None:
        """ZERO is neither negative nor positive."""
        assert Period.ZERO.is_zero()
        assert not Period.ZERO.is_negative()
        assert not Period.ZERO.is_positive()
        assert not Period.ZERO


class TestPeriodArithmetic:
    """Tests for component-wise arithmetic."""

    def test_plus_minus(self) -> None:
        """plus/minus work component by component."""
        a = Period.of(1, 2, 3)
        b = Period.of(0, 1, 1)
        assert a + b == Period.of(1, 3, 4)
        assert a - b == Period.of(1, 1, 2)

    def test_plus_components(self) -> None:
        """plus_years/months/days change one component."""
        p = Period.ZERO.plus_years(1).plus_months(2).plus_days(3)
        assert p == Period.of(1, 2, 3)
        assert p.minus_days(3).minus_months(2).minus_years(1) == Period.ZERO

    def test_multiplied_by(self) -> None:
        """Scalar multiplication scales each component."""
        p = Period.of(1, 2, 3)
        assert p.multiplied_by(2) == Period.of(2, 4, 6)
        assert p * 2 == Period.of(2, 4, 6)
        assert 2 * p == Period.of(2, 4, 6)

    def test_negated(self) -> None:
        """Negation flips every component."""
        assert -Period.of(1, -2, 3) == Period.of(-1, 2, -3)

    def test_hash(self) -> None:
        """Equal periods hash equally."""
        assert hash(Period.of(1, 2, 3)) == hash(Period(years=1, months=2, days=3))


class TestPeriodFormatting:
    """Tests for repr and str."""

    def test_repr(self) -> None:
        """repr shows the three components."""
        assert repr(Period.of_years(2)) == "Period(years=2, months=0, days=0)"

    @pytest.mark.parametrize(
        ("period", "expected"),
        [
            (Period.ZERO, "P0D"),
            (Period.of(1, 2, 3), "P1Y2M3D"),
            (Period.of_months(-1), "P-1M"),
            (Period.of_weeks(1), "P7D"),
        ],
    )
    def test_str(self, period: Period, expected: str) -> None:
        """str is the ISO 8601 period form."""
        assert str(period) == expected


class TestPeriodOps:
    """Tests for add_period / subtract_period."""

    def test_months_then_days(self) -> None:
        """Months are applied before days."""
        assert add_period(LocalDate.of(2024, 1, 31), Period.of(0, 1, 1)) == LocalDate.of(
            2024, 3, 1
        )

    def test_clamping(self) -> None:
        """Adding a month clamps to the end of the target month."""
        assert LocalDate.of(2023, 1, 31) + Period.of_months(1) == LocalDate.of(2023, 2, 28)
        assert LocalDate.of(2024, 2, 29) + Period.of_years(1) == LocalDate.of(2025, 2, 28)

    def test_subtract(self) -> None:
        """Subtracting adds the negated period."""
        assert subtract_period(LocalDate.of(2024, 3, 31), Period.of_months(1)) == (
            LocalDate.of(2024, 2, 29)
        )

    def test_preserves_time(self) -> None:
        """The time part of a date-time is held fixed."""
        ldt = LocalDateTime.of(2024, 1, 31, 8, 30)
        assert ldt + Period.of_months(1) == LocalDateTime.of(2024, 2, 29, 8, 30)
