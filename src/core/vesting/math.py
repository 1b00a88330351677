"""Fixed-point exponential/logarithm evaluation for the vesting engine.

Every function is stateless and operates on plain Python ints.

Conventions:
- ``*_wad`` values are scaled by ``WAD`` (1e18).
- internal evaluation runs at 1e36 (``_E36``) so that flooring to whole token
  units is the only rounding a caller can observe.
- all divisions use ``//`` (floor). Decayed amounts therefore round DOWN, and
  the vested complement rounds UP.

Range reduction: ``x = k*ln2 + r`` with ``0 <= r < ln2``, so
``e^-x = e^-r / 2^k``. ``e^r`` comes from a Taylor series whose terms vanish
after ~30 steps for ``r < ln2``.
"""

from __future__ import annotations

WAD: int = 10**18
_E36: int = 10**36
_WAD_TO_E36: int = 10**18

# floor(ln(2) * 1e36)
LN2_E36: int = 693147180559945309417232121458176568
LN2_WAD: int = LN2_E36 // _WAD_TO_E36


def _require_int(name: str, value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


# -- Exponential -------------------------------------------------------------

def _exp_e36(r36: int) -> int:
    """``floor``-accumulated ``e^r * 1e36`` for ``0 <= r36 < LN2_E36``."""
    total = _E36
    term = _E36
    n = 1
    while True:
        term = (term * r36) // (_E36 * n)
        if term == 0:
            return total
        total += term
        n += 1


def _reduce(x_wad: int) -> tuple[int, int]:
    """Split ``x`` into ``(k, r36)`` with ``x = k*ln2 + r``."""
    k, r36 = divmod(x_wad * _WAD_TO_E36, LN2_E36)
    return k, r36


def decay_amount(amount: int, x_wad: int) -> int:
    """``floor(amount * e^-x)`` for non-negative ``amount`` and ``x_wad``.

    Saturates to exactly 0 once ``2^k`` exceeds ``amount``; very large
    exponents never raise.
    """
    _require_int("amount", amount)
    _require_int("x_wad", x_wad)
    if amount < 0:
        raise ValueError(f"amount must be non-negative: {amount}")
    if x_wad < 0:
        raise ValueError(f"x_wad must be non-negative: {x_wad}")
    if amount == 0:
        return 0
    if x_wad == 0:
        return amount

    k, r36 = _reduce(x_wad)
    # e^-x <= 2^-k and amount < 2^bit_length, so the product is below one unit.
    if k >= amount.bit_length():
        return 0
    mantissa = (_E36 * _E36) // _exp_e36(r36)
    return ((amount * mantissa) >> k) // _E36


def exp_neg_wad(x_wad: int) -> int:
    """``e^-x`` as a WAD factor in ``[0, WAD]``."""
    return decay_amount(WAD, x_wad)


# -- Logarithm ---------------------------------------------------------------

def neg_ln_wad(y_wad: int) -> int:
    """``-ln(y)`` scaled by WAD for ``0 < y <= 1`` (``0 < y_wad <= WAD``).

    Normalizes ``y * 2^k`` into ``[1, 2)`` and evaluates
    ``ln(m) = 2*atanh((m-1)/(m+1))``; ``z <= 1/3`` keeps the series short.
    The result never goes below the true value, so it is never negative.
    """
    _require_int("y_wad", y_wad)
    if not (0 < y_wad <= WAD):
        raise ValueError(f"y_wad must be in (0, {WAD}]: {y_wad}")

    m36 = y_wad * _WAD_TO_E36
    k = 0
    while m36 < _E36:
        m36 <<= 1
        k += 1

    z36 = ((m36 - _E36) * _E36) // (m36 + _E36)
    z2 = (z36 * z36) // _E36
    series = z36
    term = z36
    n = 1
    while True:
        term = (term * z2) // _E36
        if term == 0:
            break
        series += term // (2 * n + 1)
        n += 1

    result36 = k * LN2_E36 - 2 * series
    return max(0, result36 // _WAD_TO_E36)


# -- Curve helpers -----------------------------------------------------------

def elapsed_exponent_wad(decay_rate_wad: int, elapsed: int) -> int:
    """Decay exponent ``lambda * dt`` in WAD units."""
    return decay_rate_wad * elapsed
