"""Vesting curve engine: queries and mutations over a ``VestingBucket``.

The still-vesting balance follows ``P(t) = P0 * e^(-lambda * (t - t0))``.

``deposit`` snapshots the current remainder and adds the new amount on top
before restarting the clock. Since same-rate decays sum
(``A*e^-x + B*e^-x = (A+B)*e^-x``), one ``(principal, anchor)`` pair tracks an
unbounded deposit history exactly.

``claim`` never touches the curve; it only moves the claimed/claimable split.

Claimable amounts survive a deposit: the unclaimed vested amount at the moment
of deposit is carried forward in ``carried_claimable``, so

    claimable(t) = carried_claimable + vested_since_anchor(t) - claimed_since_anchor

and ``total_deposited == total_claimed + remaining(t) + claimable(t)`` holds
exactly at every ``t >= anchor_time``.

Every function takes the caller's current time explicitly.
"""

from __future__ import annotations

from dataclasses import replace

from .errors import InsufficientClaimable, InvalidParameter
from .math import decay_amount, elapsed_exponent_wad
from .types import VestingBucket


def _require_amount(amount: object) -> int:
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise InvalidParameter(f"amount must be an int, got {type(amount).__name__}")
    if amount < 0:
        raise InvalidParameter(f"amount must be non-negative: {amount}")
    return amount


def _elapsed(bucket: VestingBucket, t: object) -> int:
    if not isinstance(t, int) or isinstance(t, bool):
        raise InvalidParameter(f"t must be an int, got {type(t).__name__}")
    if t < bucket.anchor_time:
        raise InvalidParameter(f"t={t} is before anchor_time={bucket.anchor_time}")
    return t - bucket.anchor_time


# -- Queries -----------------------------------------------------------------

def remaining_at(bucket: VestingBucket, t: int) -> int:
    """Amount still vesting at ``t`` (floored; equals ``principal_at_anchor`` at the anchor)."""
    dt = _elapsed(bucket, t)
    return decay_amount(
        bucket.principal_at_anchor,
        elapsed_exponent_wad(bucket.decay_rate_wad, dt),
    )


def vested_at(bucket: VestingBucket, t: int) -> int:
    """Amount unlocked since the last anchor reset."""
    return bucket.principal_at_anchor - remaining_at(bucket, t)


def _claimable_raw(bucket: VestingBucket, t: int) -> int:
    # Negative only when t precedes claims already recorded against this anchor.
    return bucket.carried_claimable + vested_at(bucket, t) - bucket.claimed_since_anchor


def claimable_at(bucket: VestingBucket, t: int) -> int:
    return max(0, _claimable_raw(bucket, t))


def total_vested_at(bucket: VestingBucket, t: int) -> int:
    """Total vested since inception, claimed or not."""
    return bucket.total_deposited - remaining_at(bucket, t)


def unclaimed_total(bucket: VestingBucket) -> int:
    """Deposited but not yet claimed (still vesting + claimable)."""
    return bucket.total_deposited - bucket.total_claimed


# -- Mutations ---------------------------------------------------------------

def deposit(bucket: VestingBucket, amount: int, t: int) -> VestingBucket:
    """Snapshot the remainder at ``t``, add ``amount`` and re-anchor at ``t``.

    Raises:
        InvalidParameter: negative amount, ``t < anchor_time``, or ``t`` earlier
            than claims already made against the current anchor.
    """
    amount = _require_amount(amount)
    p_now = remaining_at(bucket, t)
    carried = _claimable_raw(bucket, t)
    if carried < 0:
        raise InvalidParameter(f"t={t} precedes claims already recorded")
    return replace(
        bucket,
        principal_at_anchor=p_now + amount,
        anchor_time=t,
        carried_claimable=carried,
        claimed_since_anchor=0,
        total_deposited=bucket.total_deposited + amount,
    )


def claim(bucket: VestingBucket, amount: int, t: int) -> VestingBucket:
    """Claim ``amount`` at ``t`` without moving the curve.

    Raises:
        InvalidParameter: negative amount or ``t < anchor_time``.
        InsufficientClaimable: ``amount > claimable_at(bucket, t)``.
    """
    amount = _require_amount(amount)
    available = claimable_at(bucket, t)
    if amount > available:
        raise InsufficientClaimable(amount, available)
    return replace(
        bucket,
        total_claimed=bucket.total_claimed + amount,
        claimed_since_anchor=bucket.claimed_since_anchor + amount,
    )


def claim_all(bucket: VestingBucket, t: int) -> tuple[VestingBucket, int]:
    """Claim everything claimable at ``t``; returns ``(new_bucket, claimed)``."""
    amount = claimable_at(bucket, t)
    if amount == 0:
        return bucket, 0
    return claim(bucket, amount, t), amount
