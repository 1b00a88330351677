"""
Core vesting algorithms
"""

from .vesting import (
    InsufficientClaimable,
    InvalidParameter,
    TokenStream,
    VestingBucket,
    claim,
    claim_all,
    claimable_at,
    deposit,
    half_life_from_rate,
    rate_from_half_life,
    rate_from_per_second_percentage,
    remaining_at,
    vested_at,
)
from .vesting import step as vesting_step

__all__ = [
    "VestingBucket",
    "TokenStream",
    "rate_from_half_life",
    "half_life_from_rate",
    "rate_from_per_second_percentage",
    "remaining_at",
    "vested_at",
    "claimable_at",
    "deposit",
    "claim",
    "claim_all",
    "vesting_step",
    "InvalidParameter",
    "InsufficientClaimable",
]
