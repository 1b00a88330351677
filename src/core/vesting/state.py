"""Bucket construction and serialization.

Round-trip property (tested): ``bucket_from_dict(bucket_to_dict(b)) == b``.
"""

from __future__ import annotations

from typing import Any, Mapping

from .curve import deposit
from .errors import InvalidParameter
from .rates import rate_from_half_life
from .types import VestingBucket

# Auto-derived from VestingBucket field definitions (single source of truth).
STATE_VAR_NAMES: tuple[str, ...] = tuple(VestingBucket.__dataclass_fields__)


def new_bucket(decay_rate_wad: int, *, initial_deposit: int = 0, t: int = 0) -> VestingBucket:
    """Empty bucket anchored at ``t``, optionally seeded with ``initial_deposit``."""
    bucket = VestingBucket(decay_rate_wad=decay_rate_wad, anchor_time=t)
    if initial_deposit:
        bucket = deposit(bucket, initial_deposit, t)
    return bucket


def new_bucket_from_half_life(
    half_life_seconds: int, *, initial_deposit: int = 0, t: int = 0,
) -> VestingBucket:
    return new_bucket(
        rate_from_half_life(half_life_seconds), initial_deposit=initial_deposit, t=t,
    )


def bucket_to_dict(bucket: VestingBucket) -> dict[str, int]:
    """Serialize a VestingBucket to a plain dict of ints."""
    return {name: getattr(bucket, name) for name in STATE_VAR_NAMES}


def bucket_from_dict(d: Mapping[str, Any]) -> VestingBucket:
    """Deserialize a dict to a VestingBucket. Raises KeyError on missing fields."""
    kwargs: dict[str, int] = {}
    for name in STATE_VAR_NAMES:
        val = d[name]
        if isinstance(val, bool) or not isinstance(val, int):
            raise InvalidParameter(f"state var {name!r} must be int, got {type(val).__name__}")
        kwargs[name] = int(val)  # normalize int subclasses
    return VestingBucket(**kwargs)
