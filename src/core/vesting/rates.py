"""Rate derivation: half-life and per-second percentage <-> decay constant.

The canonical decay constant is ``decay_rate_wad``: lambda per second scaled by
1e18. These helpers are pure and never look at a clock.
"""

from __future__ import annotations

from .errors import InvalidParameter
from .math import LN2_E36, WAD, neg_ln_wad

SECONDS_PER_DAY: int = 86_400

_WAD_TO_E36: int = 10**18


def _require_positive_int(name: str, value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidParameter(f"{name} must be an int, got {type(value).__name__}")
    if value <= 0:
        raise InvalidParameter(f"{name} must be positive: {value}")
    return value


def rate_from_half_life(half_life_seconds: int) -> int:
    """``ln(2) / half_life`` as a WAD rate.

    Raises InvalidParameter for a non-positive half-life, or one so long that
    the rate rounds to zero at WAD precision.
    """
    h = _require_positive_int("half_life_seconds", half_life_seconds)
    rate = LN2_E36 // (h * _WAD_TO_E36)
    if rate <= 0:
        raise InvalidParameter(f"half_life_seconds too large for WAD precision: {h}")
    return rate


def half_life_from_rate(decay_rate_wad: int) -> int:
    """``ln(2) / lambda`` in whole seconds (floored)."""
    rate = _require_positive_int("decay_rate_wad", decay_rate_wad)
    return LN2_E36 // (rate * _WAD_TO_E36)


def rate_from_half_life_days(days: int) -> int:
    return rate_from_half_life(_require_positive_int("days", days) * SECONDS_PER_DAY)


def rate_from_per_second_percentage(p_wad: int) -> int:
    """Exact multiplicative form: losing fraction ``p`` per second gives ``-ln(1 - p)``.

    ``p_wad`` is the fraction scaled by 1e18 (1% per second -> ``10**16``) and
    must lie strictly inside ``(0, WAD)``.
    """
    if not isinstance(p_wad, int) or isinstance(p_wad, bool):
        raise InvalidParameter(f"p_wad must be an int, got {type(p_wad).__name__}")
    if not (0 < p_wad < WAD):
        raise InvalidParameter(f"p_wad must be in (0, {WAD}): {p_wad}")
    rate = neg_ln_wad(WAD - p_wad)
    if rate <= 0:
        raise InvalidParameter(f"p_wad too small for WAD precision: {p_wad}")
    return rate
