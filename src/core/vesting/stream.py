"""Clock-bound token stream over a single vesting bucket.

``TokenStream`` is the stateful shell around the pure curve functions: it owns
one bucket, reads "now" from an injected clock and serializes mutations with a
lock so that ``deposit``/``claim`` never interleave on the same bucket.
"""

from __future__ import annotations

import logging
import threading

from . import curve
from .clock import Clock, SystemClock
from .rates import rate_from_half_life
from .state import new_bucket
from .types import VestingBucket

logger = logging.getLogger(__name__)


class TokenStream:
    def __init__(self, decay_rate_wad: int, clock: Clock | None = None) -> None:
        """
        Args:
            decay_rate_wad: lambda per second scaled by 1e18.
            clock: source of the current timestamp (defaults to wall clock).
        """
        self._clock = clock if clock is not None else SystemClock()
        self._lock = threading.Lock()
        self._bucket = new_bucket(decay_rate_wad, t=self._clock.now())

        logger.debug(
            "TokenStream created: decay_rate_wad=%d anchor_time=%d",
            decay_rate_wad, self._bucket.anchor_time,
        )

    @classmethod
    def from_half_life(cls, half_life_seconds: int, clock: Clock | None = None) -> TokenStream:
        return cls(rate_from_half_life(half_life_seconds), clock=clock)

    @classmethod
    def from_bucket(cls, bucket: VestingBucket, clock: Clock | None = None) -> TokenStream:
        """Resume a stream from a stored bucket snapshot."""
        stream = cls(bucket.decay_rate_wad, clock=clock)
        stream._bucket = bucket
        return stream

    # -- Mutations -------------------------------------------------------------

    def deposit(self, amount: int) -> None:
        with self._lock:
            t = self._clock.now()
            self._bucket = curve.deposit(self._bucket, amount, t)
            logger.debug(
                "deposit amount=%d t=%d principal_at_anchor=%d",
                amount, t, self._bucket.principal_at_anchor,
            )

    def claim(self, amount: int) -> None:
        """Claim ``amount``; raises InsufficientClaimable without changing state."""
        with self._lock:
            t = self._clock.now()
            self._bucket = curve.claim(self._bucket, amount, t)
            logger.debug("claim amount=%d t=%d total_claimed=%d", amount, t, self._bucket.total_claimed)

    def claim_all(self) -> int:
        """Claim everything currently claimable; returns the claimed amount."""
        with self._lock:
            t = self._clock.now()
            self._bucket, amount = curve.claim_all(self._bucket, t)
            logger.debug("claim_all amount=%d t=%d", amount, t)
            return amount

    # -- Queries ---------------------------------------------------------------

    def snapshot(self) -> VestingBucket:
        return self._bucket

    def balance_still_vesting(self) -> int:
        return curve.remaining_at(self._bucket, self._clock.now())

    def balance_claimable(self) -> int:
        return curve.claimable_at(self._bucket, self._clock.now())

    def total_vested(self) -> int:
        return curve.total_vested_at(self._bucket, self._clock.now())

    @property
    def total_claimed(self) -> int:
        return self._bucket.total_claimed

    def unclaimed_total(self) -> int:
        return curve.unclaimed_total(self._bucket)
