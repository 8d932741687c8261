"""Tests for Duration class.

These tests verify the Duration implementation, including construction,
range checking, arithmetic, comparison, and string formatting.
"""

from __future__ import annotations

import pytest

from picotime import Duration, DurationFormat, OutOfRangeError, format_duration
from picotime._internal.constants import INT128_MAX, INT128_MIN


class TestDurationConstruction:
    """Tests for Duration construction."""

    def test_default_construction_is_zero(self) -> None:
        """Default Duration() creates a zero duration."""
        d = Duration()
        assert d.count() == 0
        assert d.is_zero
        assert d == Duration.zero()

    def test_construction_sums_components(self) -> None:
        """All keyword components are added together."""
        d = Duration(
            days=1,
            hours=1,
            minutes=1,
            seconds=1,
            milliseconds=1,
            microseconds=1,
            nanoseconds=1,
            picoseconds=1,
        )
        assert d.count() == (
            86_400_000_000_000_000
            + 3_600_000_000_000_000
            + 60_000_000_000_000
            + 1_000_000_000_000
            + 1_000_000_000
            + 1_000_000
            + 1_000
            + 1
        )

    def test_negative_components(self) -> None:
        """Components may be negative and mix signs."""
        d = Duration(seconds=1, milliseconds=-1)
        assert d.count() == 999_000_000_000
        assert Duration(days=-5).is_negative

    @pytest.mark.parametrize(
        ("factory", "picos"),
        [
            (Duration.from_days, 86_400_000_000_000_000),
            (Duration.from_hours, 3_600_000_000_000_000),
            (Duration.from_minutes, 60_000_000_000_000),
            (Duration.from_seconds, 1_000_000_000_000),
            (Duration.from_milliseconds, 1_000_000_000),
            (Duration.from_microseconds, 1_000_000),
            (Duration.from_nanoseconds, 1_000),
            (Duration.from_picoseconds, 1),
        ],
    )
    def test_unit_factories(self, factory, picos: int) -> None:
        """Each from_<unit> factory scales by the unit's length."""
        assert factory(1).count() == picos
        assert factory(-3).count() == -3 * picos

    def test_float_input_truncates_toward_zero(self) -> None:
        """Floating-point input is truncated to whole picoseconds."""
        assert Duration.from_seconds(1.5).count() == 1_500_000_000_000
        assert Duration.from_picoseconds(2.9).count() == 2
        assert Duration.from_picoseconds(-2.9).count() == -2
        assert Duration.from_days(1.5).total_seconds == 129600.0

    def test_float_nan_is_rejected(self) -> None:
        """NaN has no tick count."""
        with pytest.raises(ValueError):
            Duration.from_seconds(float("nan"))

    def test_float_infinity_is_rejected(self) -> None:
        """Infinity has no tick count."""
        with pytest.raises(OverflowError):
            Duration.from_seconds(float("inf"))

    def test_float_beyond_range(self) -> None:
        """A finite float outside the 128-bit tick range is out of range."""
        with pytest.raises(OutOfRangeError):
            Duration.from_seconds(1e30)

    def test_min_max_resolution(self) -> None:
        """Extreme values and resolution."""
        assert Duration.min().count() == INT128_MIN
        assert Duration.max().count() == INT128_MAX
        assert Duration.resolution().count() == 1

    def test_out_of_range_picoseconds(self) -> None:
        """Tick counts outside the 128-bit range are rejected."""
        with pytest.raises(OutOfRangeError):
            Duration.from_picoseconds(INT128_MAX + 1)
        with pytest.raises(OutOfRangeError):
            Duration(picoseconds=INT128_MIN - 1)


class TestDurationProperties:
    """Tests for Duration accessors."""

    def test_total_seconds(self) -> None:
        """total_seconds is a float approximation."""
        assert Duration(days=1, hours=1).total_seconds == 90000.0
        assert Duration(milliseconds=-500).total_seconds == -0.5

    def test_sign_predicates(self) -> None:
        """is_negative and is_zero."""
        assert Duration(picoseconds=-1).is_negative
        assert not Duration(picoseconds=1).is_negative
        assert not Duration().is_negative

    def test_bool(self) -> None:
        """Only the zero duration is falsy."""
        assert not Duration()
        assert Duration(picoseconds=1)

    def test_repr(self) -> None:
        """repr shows the tick count."""
        assert repr(Duration(seconds=1)) == "Duration(picoseconds=1000000000000)"


class TestDurationArithmetic:
    """Tests for Duration arithmetic operations."""

    def test_add_and_subtract(self) -> None:
        """Addition and subtraction are exact."""
        a = Duration(seconds=1)
        b = Duration(milliseconds=500)
        assert (a + b).count() == 1_500_000_000_000
        assert (a - b).count() == 500_000_000_000

    def test_sum(self) -> None:
        """sum() works starting from integer zero."""
        total = sum([Duration(seconds=1), Duration(seconds=2)])
        assert total == Duration(seconds=3)

    def test_radd_accepts_only_integer_zero(self) -> None:
        """Only the int 0 that sum() starts from is absorbed."""
        d = Duration(seconds=1)
        assert 0 + d is d
        with pytest.raises(TypeError):
            0.0 + d  # type: ignore[operator]
        with pytest.raises(TypeError):
            False + d  # type: ignore[operator]
        with pytest.raises(TypeError):
            1 + d  # type: ignore[operator]

    def test_add_non_duration(self) -> None:
        """Adding a number is unsupported."""
        with pytest.raises(TypeError):
            Duration(seconds=1) + 1  # type: ignore[operator]

    def test_group_laws(self) -> None:
        """(a + d) - d == a and a - a == zero."""
        a = Duration(days=3, picoseconds=7)
        d = Duration(hours=-5, nanoseconds=11)
        assert (a + d) - d == a
        assert a - a == Duration()

    def test_multiply(self) -> None:
        """Integer and float scaling."""
        d = Duration(seconds=30)
        assert d * 3 == Duration(seconds=90)
        assert 3 * d == Duration(seconds=90)
        assert d * 0.5 == Duration(seconds=15)
        assert Duration(picoseconds=3) * 0.5 == Duration(picoseconds=1)

    def test_multiply_then_divide(self) -> None:
        """n * d / n == d for nonzero n."""
        d = Duration(hours=1, picoseconds=-3)
        for n in (1, 2, 7, -13, 1000):
            assert (d * n) / n == d

    def test_divide_truncates_toward_zero(self) -> None:
        """Division rounds toward zero for both signs."""
        assert (Duration(picoseconds=7) / 2).count() == 3
        assert (Duration(picoseconds=-7) / 2).count() == -3
        assert (Duration(picoseconds=7) / -2).count() == -3
        assert (Duration(picoseconds=-7) / -2).count() == 3

    def test_divide_by_float(self) -> None:
        """Float division operates on the float tick count."""
        assert Duration(seconds=1) / 2.0 == Duration(milliseconds=500)

    def test_modulo_sign_follows_dividend(self) -> None:
        """Remainder takes the sign of the dividend."""
        two = Duration(picoseconds=2)
        assert (Duration(picoseconds=7) % two).count() == 1
        assert (Duration(picoseconds=-7) % two).count() == -1
        assert (Duration(picoseconds=7) % -two).count() == 1
        assert (Duration(picoseconds=-7) % 2).count() == -1

    def test_division_identity(self) -> None:
        """a == (a / n) * n + a % n."""
        for ticks in (-17, -1, 0, 5, 123_456_789):
            a = Duration(picoseconds=ticks)
            for n in (1, 3, -4):
                assert (a / n) * n + a % n == a

    def test_zero_divisor(self) -> None:
        """Division or modulo by zero raises ZeroDivisionError."""
        d = Duration(seconds=1)
        with pytest.raises(ZeroDivisionError):
            d / 0
        with pytest.raises(ZeroDivisionError):
            d / 0.0
        with pytest.raises(ZeroDivisionError):
            d % Duration()
        with pytest.raises(ZeroDivisionError):
            d % 0

    def test_unary_operators(self) -> None:
        """Negation, unary plus, and abs."""
        d = Duration(seconds=-123)
        assert (-d).count() == 123_000_000_000_000
        assert +d is d
        assert abs(d) == Duration(seconds=123)
        assert abs(-d) == -d

    def test_increment_decrement(self) -> None:
        """Step by one tick."""
        assert Duration().increment() == Duration.resolution()
        assert Duration().decrement() == -Duration.resolution()

    def test_overflow(self) -> None:
        """Results beyond the 128-bit range raise OutOfRangeError."""
        with pytest.raises(OutOfRangeError):
            Duration.max() + Duration.resolution()
        with pytest.raises(OutOfRangeError):
            Duration.min() - Duration.resolution()
        with pytest.raises(OutOfRangeError):
            Duration.max().increment()
        with pytest.raises(OutOfRangeError):
            -Duration.min()
        with pytest.raises(OutOfRangeError):
            Duration.max() * 2


class TestDurationComparison:
    """Tests for Duration comparison operations."""

    def test_ordering(self) -> None:
        """Durations are totally ordered by tick count."""
        a = Duration(seconds=-1)
        b = Duration()
        c = Duration(picoseconds=1)
        assert a < b < c
        assert c > b > a
        assert a <= a and a >= a
        assert a != b

    def test_equality_with_other_types(self) -> None:
        """Durations never equal plain numbers."""
        assert Duration() != 0
        with pytest.raises(TypeError):
            Duration() < 0  # type: ignore[operator]

    def test_hash(self) -> None:
        """Equal durations hash alike."""
        assert hash(Duration(seconds=1)) == hash(Duration(milliseconds=1000))
        assert len({Duration(seconds=1), Duration(milliseconds=1000)}) == 1


class TestDurationFormat:
    """Tests for human-readable duration strings."""

    @pytest.mark.parametrize(
        ("duration", "expected"),
        [
            (Duration(), "0ps"),
            (Duration(picoseconds=123), "123ps"),
            (Duration(picoseconds=1230), "1.23ns"),
            (Duration(nanoseconds=12_345), "12.345us"),
            (Duration(milliseconds=-999), "-999ms"),
            (Duration(minutes=12, seconds=34), "12m34s"),
            (
                Duration(days=1, hours=23, minutes=4, seconds=56, milliseconds=789),
                "1d23h4m56.789s",
            ),
            (-Duration(hours=1) - Duration(picoseconds=1), "-1h0m0.000000000001s"),
            (Duration(minutes=-3), "-3m0s"),
        ],
    )
    def test_str(self, duration: Duration, expected: str) -> None:
        """str() uses the coarsest fitting units."""
        assert str(duration) == expected

    def test_show_sign(self) -> None:
        """show_sign prefixes non-negative durations with '+'."""
        options = DurationFormat(show_sign=True)
        assert format_duration(Duration(seconds=10), options) == "+10s"
        assert format_duration(Duration(), options) == "+0ps"
        assert format_duration(Duration(seconds=-10), options) == "-10s"

    def test_show_decimal_point(self) -> None:
        """show_decimal_point forces a fractional part."""
        options = DurationFormat(show_decimal_point=True)
        assert format_duration(Duration(seconds=-10), options) == "-10.0s"
        assert format_duration(Duration(seconds=10.5), options) == "10.5s"

    def test_extremes_format(self) -> None:
        """The widest durations still format."""
        assert str(Duration.min()).startswith("-")
        assert str(Duration.max()).endswith("s")
