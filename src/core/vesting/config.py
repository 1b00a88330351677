"""Bucket configuration: YAML file plus environment overrides.

Example YAML::

    half_life_seconds: 2592000   # 30 days
    initial_deposit: 0
    start_time: 0

``decay_rate_wad`` may be given instead of (or in addition to) the half-life;
when set it wins.

Environment overrides (applied after the file):
- ``VESTING_HALF_LIFE_SECONDS``
- ``VESTING_DECAY_RATE_WAD``
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import InvalidParameter
from .rates import rate_from_half_life
from .state import new_bucket
from .types import VestingBucket

MAX_HALF_LIFE_SECONDS: int = 100 * 365 * 86_400
MAX_DECAY_RATE_WAD: int = 10**18


@dataclass(frozen=True)
class VestingConfig:
    half_life_seconds: int = 30 * 86_400
    decay_rate_wad: int | None = None
    initial_deposit: int = 0
    start_time: int = 0

    def __post_init__(self) -> None:
        for name, v in (
            ("half_life_seconds", self.half_life_seconds),
            ("initial_deposit", self.initial_deposit),
            ("start_time", self.start_time),
        ):
            if not isinstance(v, int) or isinstance(v, bool):
                raise InvalidParameter(f"{name} must be an int")
            if v < 0:
                raise InvalidParameter(f"{name} must be non-negative: {v}")
        if self.half_life_seconds == 0:
            raise InvalidParameter("half_life_seconds must be positive")
        if self.decay_rate_wad is not None:
            if not isinstance(self.decay_rate_wad, int) or isinstance(self.decay_rate_wad, bool):
                raise InvalidParameter("decay_rate_wad must be an int")
            if self.decay_rate_wad <= 0:
                raise InvalidParameter(f"decay_rate_wad must be positive: {self.decay_rate_wad}")

    def effective_rate_wad(self) -> int:
        if self.decay_rate_wad is not None:
            return self.decay_rate_wad
        return rate_from_half_life(self.half_life_seconds)


_CONFIG_KEYS = frozenset(f.name for f in fields(VestingConfig))


def _env_int(name: str, *, lo: int, hi: int) -> int | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        v = int(raw.strip())
    except ValueError as exc:
        raise InvalidParameter(f"{name} must be an integer: {raw!r}") from exc
    if v < lo or v > hi:
        raise InvalidParameter(f"{name} must be in [{lo}, {hi}]: {v}")
    return v


def config_from_mapping(obj: Mapping[str, Any]) -> VestingConfig:
    unknown = set(obj) - _CONFIG_KEYS
    if unknown:
        raise InvalidParameter(f"unknown config keys: {', '.join(sorted(unknown))}")
    return VestingConfig(**dict(obj))


def apply_env_overrides(cfg: VestingConfig) -> VestingConfig:
    half_life = _env_int("VESTING_HALF_LIFE_SECONDS", lo=1, hi=MAX_HALF_LIFE_SECONDS)
    if half_life is not None:
        cfg = replace(cfg, half_life_seconds=half_life)
    rate = _env_int("VESTING_DECAY_RATE_WAD", lo=1, hi=MAX_DECAY_RATE_WAD)
    if rate is not None:
        cfg = replace(cfg, decay_rate_wad=rate)
    return cfg


def load_config(path: str | Path | None = None) -> VestingConfig:
    """Load a config from YAML (if given), then apply environment overrides."""
    cfg = VestingConfig()
    if path is not None:
        obj = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        if obj is None:
            obj = {}
        if not isinstance(obj, Mapping):
            raise InvalidParameter("config YAML must be a mapping")
        cfg = config_from_mapping(obj)
    return apply_env_overrides(cfg)


def bucket_from_config(cfg: VestingConfig) -> VestingBucket:
    return new_bucket(
        cfg.effective_rate_wad(),
        initial_deposit=cfg.initial_deposit,
        t=cfg.start_time,
    )
