"""Tests for the Duration class."""

from __future__ import annotations

import pytest

from calendrical._internal.constants import I64_MAX
from calendrical.core.duration import Duration
from calendrical.core.instant import Instant
from calendrical.errors import OverflowError


class TestDurationConstruction:
    """Tests for Duration constructors."""

    def test_of_seconds_with_negative_adjustment(self) -> None:
        """A negative nano adjustment borrows from the seconds."""
        d = Duration.of_seconds(3, -1)
        assert d.seconds == 2
        assert d.nano == 999_999_999

    def test_sign_consistency(self) -> None:
        """Seconds and nano carry the same sign."""
        d = Duration.of_millis(-1500)
        assert d.seconds == -1
        assert d.nano == -500_000_000

    def test_unit_constructors(self) -> None:
        """of_days/of_hours/of_minutes agree with each other."""
        assert Duration.of_days(1) == Duration.of_hours(24)
        assert Duration.of_hours(1) == Duration.of_minutes(60)
        assert Duration.of_minutes(1) == Duration.of_seconds(60)
        assert Duration.of_seconds(1) == Duration.of_millis(1000)
        assert Duration.of_millis(1) == Duration.of_nanos(1_000_000)

    def test_constructor_overflow(self) -> None:
        """Seconds beyond 64 bits raise OverflowError."""
        with pytest.raises(OverflowError):
            Duration(2**63)

    def test_of_days_overflow(self) -> None:
        """of_days rejects counts that do not fit."""
        with pytest.raises(OverflowError):
            Duration.of_days(2**60)

    def test_between_instants(self) -> None:
        """between() is the exact difference of two instants."""
        start = Instant.of_epoch_second(0)
        end = Instant.of_epoch_second(61)
        assert Duration.between(start, end) == Duration.of_seconds(61)
        assert Duration.between(end, start) == Duration.of_seconds(-61)


class TestDurationConversions:
    """Tests for whole-unit conversions."""

    def test_truncation_toward_zero(self) -> None:
        """-(3h 59m 59s) is -3 hours, not -4."""
        d = Duration.of_seconds(-(3 * 3600 + 59 * 60 + 59))
        assert d.to_hours() == -3
        assert d.to_minutes() == -239

    def test_to_days(self) -> None:
        """to_days truncates toward zero."""
        assert Duration.of_hours(47).to_days() == 1
        assert Duration.of_hours(-47).to_days() == -1

    def test_to_millis_clamped(self) -> None:
        """to_millis clamps to the signed 64-bit range."""
        assert Duration.MAX.to_millis() == I64_MAX

    def test_to_nanos_exact(self) -> None:
        """to_nanos is exact, even beyond 64 bits."""
        assert Duration.of_seconds(2**62).to_nanos() == 2**62 * 1_000_000_000


class TestDurationSaturation:
    """Tests for saturating arithmetic."""

    def test_plus_saturates_at_max(self) -> None:
        """Adding past MAX stays at MAX."""
        assert Duration.MAX.plus_days(1) == Duration.MAX
        assert Duration.MAX.plus(Duration.MAX) == Duration.MAX

    def test_minus_saturates_at_min(self) -> None:
        """Subtracting past MIN stays at MIN."""
        assert Duration.MIN.minus_seconds(1) == Duration.MIN

    def test_saturation_is_idempotent(self) -> None:
        """A saturated value stays put under repeated arithmetic."""
        d = Duration.MAX
        for _ in range(3):
            d = d.plus_hours(1)
        assert d == Duration.MAX

    def test_abs_of_min(self) -> None:
        """abs(MIN) is MAX, never negative."""
        assert Duration.MIN.abs() == Duration.MAX
        assert abs(Duration.MIN) == Duration.MAX
        assert not Duration.MIN.abs().is_negative()

    def test_negated(self) -> None:
        """Negation flips the sign."""
        assert Duration.of_seconds(5).negated() == Duration.of_seconds(-5)
        assert -Duration.of_millis(1) == Duration.of_millis(-1)


class TestDurationArithmetic:
    """Tests for ordinary arithmetic and operators."""

    def test_add_and_subtract(self) -> None:
        """+ and - combine durations."""
        a = Duration.of_minutes(90)
        b = Duration.of_minutes(30)
        assert a + b == Duration.of_hours(2)
        assert a - b == Duration.of_hours(1)

    def test_plus_units(self) -> None:
        """plus_* helpers add the named unit."""
        d = Duration.ZERO.plus_hours(1).plus_minutes(2).plus_seconds(3).plus_millis(4)
        assert d == Duration.of_millis(3_723_004)

    def test_sign_checks(self) -> None:
        """is_negative/is_zero/is_positive."""
        assert Duration.of_nanos(-1).is_negative()
        assert Duration.ZERO.is_zero()
        assert Duration.of_nanos(1).is_positive()
        assert not Duration.ZERO

    def test_ordering(self) -> None:
        """Durations order by length."""
        assert Duration.of_seconds(1) < Duration.of_seconds(2)
        assert Duration.of_millis(-1) < Duration.ZERO
        assert Duration.MIN < Duration.MAX

    def test_hash(self) -> None:
        """Equal durations hash equally."""
        assert hash(Duration.of_minutes(1)) == hash(Duration.of_seconds(60))

    def test_add_non_duration(self) -> None:
        """Adding a non-Duration raises TypeError."""
        with pytest.raises(TypeError):
            Duration.ZERO + 1  # type: ignore[operator]


class TestDurationFormatting:
    """Tests for repr and ISO 8601 str."""

    def test_repr(self) -> None:
        """repr shows seconds and nanos."""
        assert repr(Duration.of_millis(1500)) == "Duration(seconds=1, nanos=500000000)"

    @pytest.mark.parametrize(
        ("duration", "expected"),
        [
            (Duration.ZERO, "PT0S"),
            (Duration.of_minutes(90), "PT1H30M"),
            (Duration.of_millis(-500), "PT-0.5S"),
            (Duration.of_seconds(3661, 1), "PT1H1M1.000000001S"),
            (Duration.of_hours(-2), "PT-2H"),
        ],
    )
    def test_str(self, duration: Duration, expected: str) -> None:
        """str is the ISO 8601 duration form."""
        assert str(duration) == expected
