"""`vesting`: exponentially decaying reward bucket.

- deterministic, integer-only arithmetic (amounts in base units, rates in WAD),
- immutable state (frozen dataclasses),
- deposit-neutral and claim-neutral mutations,
- fail-closed guards and invariant checks.

Public API:
- rate derivation: `rate_from_half_life`, `half_life_from_rate`,
  `rate_from_per_second_percentage`, `rate_from_half_life_days`
- queries: `remaining_at`, `vested_at`, `claimable_at`, `total_vested_at`, `unclaimed_total`
- mutations: `deposit`, `claim`, `claim_all`
- engine: `step(bucket, params) -> StepResult`, `step_or_raise`
- shell: `TokenStream`, `ManualClock`, `SystemClock`, `load_config`
"""

from .clock import ManualClock, SystemClock
from .config import VestingConfig, bucket_from_config, load_config
from .curve import (
    claim,
    claim_all,
    claimable_at,
    deposit,
    remaining_at,
    total_vested_at,
    unclaimed_total,
    vested_at,
)
from .engine import step, step_or_raise
from .errors import InsufficientClaimable, InvalidParameter, VestingError, VestingInvariantError
from .math import WAD
from .rates import (
    SECONDS_PER_DAY,
    half_life_from_rate,
    rate_from_half_life,
    rate_from_half_life_days,
    rate_from_per_second_percentage,
)
from .state import bucket_from_dict, bucket_to_dict, new_bucket, new_bucket_from_half_life
from .stream import TokenStream
from .types import Action, ActionParams, Effect, Event, StepResult, VestingBucket

__all__ = [
    "WAD",
    "SECONDS_PER_DAY",
    "rate_from_half_life",
    "half_life_from_rate",
    "rate_from_half_life_days",
    "rate_from_per_second_percentage",
    "remaining_at",
    "vested_at",
    "claimable_at",
    "total_vested_at",
    "unclaimed_total",
    "deposit",
    "claim",
    "claim_all",
    "new_bucket",
    "new_bucket_from_half_life",
    "bucket_to_dict",
    "bucket_from_dict",
    "step",
    "step_or_raise",
    "Action",
    "ActionParams",
    "Effect",
    "Event",
    "StepResult",
    "VestingBucket",
    "TokenStream",
    "ManualClock",
    "SystemClock",
    "VestingConfig",
    "load_config",
    "bucket_from_config",
    "VestingError",
    "InvalidParameter",
    "InsufficientClaimable",
    "VestingInvariantError",
]
