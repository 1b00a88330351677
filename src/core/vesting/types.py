"""Data types for the vesting curve engine.

All types are frozen dataclasses (immutable); mutations build a new bucket.

Units/conventions:
- amounts are integer token base units,
- timestamps are integer seconds supplied by the caller,
- ``decay_rate_wad`` is lambda per second scaled by 1e18.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique

from .errors import InvalidParameter


@unique
class Action(Enum):
    DEPOSIT = "deposit"
    CLAIM = "claim"
    CLAIM_ALL = "claim_all"


@unique
class Event(Enum):
    DEPOSITED = "Deposited"
    CLAIMED = "Claimed"


@dataclass(frozen=True)
class VestingBucket:
    """State of one reward stream's exponentially vesting bucket."""

    decay_rate_wad: int

    # Curve anchor: amount still vesting as of anchor_time.
    principal_at_anchor: int = 0
    anchor_time: int = 0

    # Lifetime bookkeeping
    total_deposited: int = 0
    total_claimed: int = 0

    # Per-anchor bookkeeping (reset on every deposit)
    claimed_since_anchor: int = 0
    carried_claimable: int = 0

    def __post_init__(self) -> None:
        for name, v in (
            ("decay_rate_wad", self.decay_rate_wad),
            ("principal_at_anchor", self.principal_at_anchor),
            ("anchor_time", self.anchor_time),
            ("total_deposited", self.total_deposited),
            ("total_claimed", self.total_claimed),
            ("claimed_since_anchor", self.claimed_since_anchor),
            ("carried_claimable", self.carried_claimable),
        ):
            if not isinstance(v, int) or isinstance(v, bool):
                raise InvalidParameter(f"{name} must be an int, got {type(v).__name__}")
            if v < 0:
                raise InvalidParameter(f"{name} must be non-negative: {v}")
        if self.decay_rate_wad == 0:
            raise InvalidParameter("decay_rate_wad must be positive")
        if self.total_claimed > self.total_deposited:
            raise InvalidParameter("total_claimed must be <= total_deposited")


@dataclass(frozen=True)
class ActionParams:
    """Parameters for an action. ``amount`` is unused by CLAIM_ALL."""

    action: Action
    now: int
    amount: int = 0


@dataclass(frozen=True)
class Effect:
    """Post-state observables emitted after a successful step."""

    event: Event
    amount: int = 0
    remaining_after: int = 0
    claimable_after: int = 0
    total_deposited_after: int = 0
    total_claimed_after: int = 0


@dataclass(frozen=True)
class StepResult:
    accepted: bool
    state: VestingBucket | None = None
    effect: Effect | None = None
    rejection: str | None = None
