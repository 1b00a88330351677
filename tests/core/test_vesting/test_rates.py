"""Tests for src/core/vesting/rates.py: half-life / percentage <-> decay rate."""

import pytest

from src.core.vesting.errors import InvalidParameter
from src.core.vesting.math import LN2_WAD, WAD
from src.core.vesting.rates import (
    SECONDS_PER_DAY,
    half_life_from_rate,
    rate_from_half_life,
    rate_from_half_life_days,
    rate_from_per_second_percentage,
)


class TestRateFromHalfLife:
    def test_one_day(self):
        # ln(2) / 86400 = 8.022536812036...e-6 per second
        assert rate_from_half_life(86_400) == 8_022_536_812_036

    def test_one_second(self):
        assert rate_from_half_life(1) == LN2_WAD

    def test_days_helper(self):
        assert rate_from_half_life_days(1) == rate_from_half_life(SECONDS_PER_DAY)
        assert rate_from_half_life_days(30) == rate_from_half_life(30 * SECONDS_PER_DAY)

    @pytest.mark.parametrize("bad", [0, -1, -86_400])
    def test_non_positive_rejected(self, bad):
        with pytest.raises(InvalidParameter):
            rate_from_half_life(bad)

    @pytest.mark.parametrize("bad", [1.5, "86400", True, None])
    def test_non_int_rejected(self, bad):
        with pytest.raises(InvalidParameter):
            rate_from_half_life(bad)

    def test_too_long_rejected(self):
        with pytest.raises(InvalidParameter):
            rate_from_half_life(10**18)

    def test_invalid_parameter_is_value_error(self):
        with pytest.raises(ValueError):
            rate_from_half_life(0)


class TestHalfLifeFromRate:
    @pytest.mark.parametrize("h", [1, 60, 86_400, 30 * 86_400, 365 * 86_400])
    def test_round_trip(self, h):
        assert half_life_from_rate(rate_from_half_life(h)) == h

    def test_one_percent_rate(self):
        # ln(2) / 0.01 = 69.31 s
        assert half_life_from_rate(10**16) == 69

    @pytest.mark.parametrize("bad", [0, -5])
    def test_non_positive_rejected(self, bad):
        with pytest.raises(InvalidParameter):
            half_life_from_rate(bad)


class TestRateFromPerSecondPercentage:
    def test_one_percent(self):
        # -ln(0.99) = 0.010050335853501441...
        assert abs(rate_from_per_second_percentage(10**16) - 10_050_335_853_501_441) <= 2

    def test_half(self):
        assert rate_from_per_second_percentage(WAD // 2) == LN2_WAD

    def test_exceeds_naive_percentage(self):
        # -ln(1 - p) > p for all p in (0, 1)
        for p in (10**12, 10**15, 10**17, 9 * 10**17):
            assert rate_from_per_second_percentage(p) > p

    def test_tiny_percentage(self):
        # -ln(1 - 1e-12) = 1e-12 + 5e-25
        assert abs(rate_from_per_second_percentage(10**6) - 10**6) <= 1

    @pytest.mark.parametrize("bad", [0, WAD, WAD + 1, -1])
    def test_out_of_range_rejected(self, bad):
        with pytest.raises(InvalidParameter):
            rate_from_per_second_percentage(bad)

    def test_float_rejected(self):
        with pytest.raises(InvalidParameter):
            rate_from_per_second_percentage(0.01)  # type: ignore[arg-type]
