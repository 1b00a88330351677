"""Property tests for the vesting curve: neutrality, conservation, monotonicity, merging.

Uses Hypothesis to fuzz rates, amounts, timestamps and deposit/claim sequences.
"""

from __future__ import annotations

import importlib.util

import pytest

if importlib.util.find_spec("hypothesis") is None:  # pragma: no cover
    pytest.skip("hypothesis not installed", allow_module_level=True)

import hypothesis.strategies as st
from hypothesis import given, settings

from src.core.vesting import (
    claim,
    claimable_at,
    deposit,
    half_life_from_rate,
    rate_from_half_life,
    remaining_at,
    total_vested_at,
    vested_at,
)
from src.core.vesting.invariants import check_at
from src.core.vesting.math import decay_amount, elapsed_exponent_wad
from src.core.vesting.state import new_bucket

# half-lives between ~7 seconds and ~2 years
rates = st.integers(min_value=10**10, max_value=10**17)
amounts = st.integers(min_value=0, max_value=10**24)
deltas = st.integers(min_value=0, max_value=10**7)


def seeded(rate: int, amount: int):
    return new_bucket(rate, initial_deposit=amount, t=0)


# ---------------------------------------------------------------------------
# Deposit-neutrality
# ---------------------------------------------------------------------------

class TestDepositNeutrality:
    @given(rate=rates, a0=amounts, a1=amounts, dt1=deltas, dt2=deltas)
    @settings(max_examples=300, deadline=2000)
    def test_past_and_present_unaffected(self, rate, a0, a1, dt1, dt2):
        before = seeded(rate, a0)
        t1 = dt1
        t2 = dt1 + dt2
        claimable_t2 = claimable_at(before, t2)
        total_vested_t2 = total_vested_at(before, t2)

        after = deposit(before, a1, t2)

        # At the deposit instant nothing already vested moves.
        assert claimable_at(after, t2) == claimable_t2
        assert total_vested_at(after, t2) == total_vested_t2
        # Vesting before the deposit instant is bounded by what had vested at it.
        assert vested_at(before, t1) <= total_vested_at(after, t2)

    @given(rate=rates, a0=amounts, a1=amounts, dt=deltas, later=deltas)
    @settings(max_examples=300, deadline=2000)
    def test_claimable_never_drops_after_deposit(self, rate, a0, a1, dt, later):
        before = seeded(rate, a0)
        after = deposit(before, a1, dt)
        assert claimable_at(after, dt + later) >= claimable_at(before, dt)


# ---------------------------------------------------------------------------
# Claim-neutrality
# ---------------------------------------------------------------------------

class TestClaimNeutrality:
    @given(rate=rates, a0=amounts, dt=deltas, later=deltas, data=st.data())
    @settings(max_examples=300, deadline=2000)
    def test_remaining_trajectory_unchanged(self, rate, a0, dt, later, data):
        b = seeded(rate, a0)
        amount = data.draw(st.integers(min_value=0, max_value=claimable_at(b, dt)))
        claimed = claim(b, amount, dt)
        assert remaining_at(claimed, dt + later) == remaining_at(b, dt + later)
        assert claimable_at(claimed, dt + later) == claimable_at(b, dt + later) - amount


# ---------------------------------------------------------------------------
# Conservation over random operation sequences
# ---------------------------------------------------------------------------

ops = st.lists(
    st.tuples(
        st.sampled_from(["deposit", "claim", "claim_all"]),
        st.integers(min_value=0, max_value=10**6),  # time step
        st.integers(min_value=0, max_value=10**22),  # amount
    ),
    min_size=1,
    max_size=30,
)


class TestConservation:
    @given(rate=rates, seq=ops)
    @settings(max_examples=200, deadline=5000)
    def test_exact_at_every_step(self, rate, seq):
        b = new_bucket(rate)
        t = 0
        for kind, step_dt, amount in seq:
            t += step_dt
            if kind == "deposit":
                b = deposit(b, amount, t)
            elif kind == "claim":
                b = claim(b, min(amount, claimable_at(b, t)), t)
            else:
                b = claim(b, claimable_at(b, t), t)
            assert check_at(b, t) == []
            assert b.total_claimed <= b.total_deposited


# ---------------------------------------------------------------------------
# Monotonicity
# ---------------------------------------------------------------------------

class TestMonotonicity:
    @given(rate=rates, a0=amounts, dt1=deltas, dt2=deltas)
    @settings(max_examples=300, deadline=2000)
    def test_remaining_non_increasing(self, rate, a0, dt1, dt2):
        b = seeded(rate, a0)
        assert remaining_at(b, dt1 + dt2) <= remaining_at(b, dt1) <= a0

    @given(rate=rates, a0=amounts, dt1=deltas, dt2=deltas)
    @settings(max_examples=300, deadline=2000)
    def test_claimable_non_decreasing(self, rate, a0, dt1, dt2):
        b = seeded(rate, a0)
        assert claimable_at(b, dt1) <= claimable_at(b, dt1 + dt2)


# ---------------------------------------------------------------------------
# Merge equivalence
# ---------------------------------------------------------------------------

class TestMergeEquivalence:
    @given(rate=rates, a0=amounts, a1=amounts, dt=deltas, later=deltas)
    @settings(max_examples=300, deadline=2000)
    def test_merged_curve_matches_separate_curves(self, rate, a0, a1, dt, later):
        merged = deposit(seeded(rate, a0), a1, dt)
        t = dt + later
        separate = (
            decay_amount(a0, elapsed_exponent_wad(rate, t))
            + decay_amount(a1, elapsed_exponent_wad(rate, later))
        )
        # Each floor may drop one unit; the snapshot floors once more.
        assert abs(remaining_at(merged, t) - separate) <= 2


# ---------------------------------------------------------------------------
# Half-life round trip
# ---------------------------------------------------------------------------

class TestHalfLifeRoundTrip:
    @given(h=st.integers(min_value=1, max_value=10**8))
    @settings(max_examples=500, deadline=2000)
    def test_round_trip(self, h):
        assert half_life_from_rate(rate_from_half_life(h)) == h

    @given(h=st.integers(min_value=2, max_value=10**6))
    @settings(max_examples=100, deadline=2000)
    def test_half_remains_after_one_half_life(self, h):
        amount = 10**18
        b = seeded(rate_from_half_life(h), amount)
        # rate is floored, so the curve decays at most a hair slower than ideal
        assert abs(remaining_at(b, h) - amount // 2) <= amount // 10**9
