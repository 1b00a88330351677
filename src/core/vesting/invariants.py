"""Invariant checkers for the vesting bucket.

Each function returns True when the invariant holds. ``check_all()`` returns
the list of violated invariant IDs for a bucket (empty = all pass);
``check_at()`` adds the time-dependent identities evaluated at ``t``.
"""

from __future__ import annotations

from typing import Callable

from .curve import claimable_at, remaining_at
from .types import VestingBucket


def inv_rate_positive(s: VestingBucket) -> bool:
    return s.decay_rate_wad > 0


def inv_principal_nonneg(s: VestingBucket) -> bool:
    return s.principal_at_anchor >= 0


def inv_claimed_le_deposited(s: VestingBucket) -> bool:
    return s.total_claimed <= s.total_deposited


def inv_claimed_since_anchor_le_total(s: VestingBucket) -> bool:
    return 0 <= s.claimed_since_anchor <= s.total_claimed


def inv_principal_le_deposited(s: VestingBucket) -> bool:
    return s.principal_at_anchor <= s.total_deposited


def inv_conservation_at_anchor(s: VestingBucket) -> bool:
    return s.total_deposited == (
        s.total_claimed + s.principal_at_anchor + s.carried_claimable - s.claimed_since_anchor
    )


# ---------------------------------------------------------------------------
# Registry + check_all
# ---------------------------------------------------------------------------

INVARIANT_REGISTRY: dict[str, Callable[[VestingBucket], bool]] = {
    "inv_rate_positive": inv_rate_positive,
    "inv_principal_nonneg": inv_principal_nonneg,
    "inv_claimed_le_deposited": inv_claimed_le_deposited,
    "inv_claimed_since_anchor_le_total": inv_claimed_since_anchor_le_total,
    "inv_principal_le_deposited": inv_principal_le_deposited,
    "inv_conservation_at_anchor": inv_conservation_at_anchor,
}


def check_all(state: VestingBucket) -> list[str]:
    """Return list of violated invariant IDs (empty = all pass)."""
    return [
        inv_id
        for inv_id, check_fn in INVARIANT_REGISTRY.items()
        if not check_fn(state)
    ]


def check_at(state: VestingBucket, t: int) -> list[str]:
    """``check_all()`` plus the identities that depend on the query time.

    Only meaningful for ``t`` at or after the latest claim against the anchor;
    earlier instants see claims that had not happened yet.
    """
    violations = check_all(state)
    remaining = remaining_at(state, t)
    if not 0 <= remaining <= state.principal_at_anchor:
        violations.append("inv_remaining_bounded")
    if state.total_deposited != state.total_claimed + remaining + claimable_at(state, t):
        violations.append("inv_conservation")
    return violations
