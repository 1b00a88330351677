"""Dispatch-table engine for the vesting bucket.

``step(bucket, params)`` is the single entry point. It:

1. Validates parameter domains.
2. Dispatches to the curve operation for the action.
3. Checks all invariants on the post-state.
4. Returns a ``StepResult`` (accepted or rejected with reason).

A rejected step never produces a state: the input bucket is the state.
"""

from __future__ import annotations

from typing import Callable

from .curve import claim, claim_all, claimable_at, deposit, remaining_at
from .errors import InsufficientClaimable, InvalidParameter, VestingInvariantError
from .invariants import check_all
from .types import Action, ActionParams, Effect, Event, StepResult, VestingBucket

UpdateFn = Callable[[VestingBucket, ActionParams], tuple[VestingBucket, int]]


def _apply_deposit(bucket: VestingBucket, params: ActionParams) -> tuple[VestingBucket, int]:
    return deposit(bucket, params.amount, params.now), params.amount


def _apply_claim(bucket: VestingBucket, params: ActionParams) -> tuple[VestingBucket, int]:
    return claim(bucket, params.amount, params.now), params.amount


def _apply_claim_all(bucket: VestingBucket, params: ActionParams) -> tuple[VestingBucket, int]:
    return claim_all(bucket, params.now)


_DISPATCH: dict[Action, tuple[UpdateFn, Event]] = {
    Action.DEPOSIT: (_apply_deposit, Event.DEPOSITED),
    Action.CLAIM: (_apply_claim, Event.CLAIMED),
    Action.CLAIM_ALL: (_apply_claim_all, Event.CLAIMED),
}

# -- Parameter domain bounds -------------------------------------------------

MAX_AMOUNT: int = 2**128 - 1
MAX_TIMESTAMP: int = 2**64 - 1

# Per-action bounds: list of (field_name, min_val, max_val).
_PARAM_BOUNDS: dict[Action, list[tuple[str, int, int]]] = {
    Action.DEPOSIT: [
        ("now", 0, MAX_TIMESTAMP),
        ("amount", 0, MAX_AMOUNT),
    ],
    Action.CLAIM: [
        ("now", 0, MAX_TIMESTAMP),
        ("amount", 0, MAX_AMOUNT),
    ],
    Action.CLAIM_ALL: [
        ("now", 0, MAX_TIMESTAMP),
    ],
}


def _validate_params(params: ActionParams) -> str | None:
    """Check parameter domain bounds. Returns rejection reason or None."""
    for field, lo, hi in _PARAM_BOUNDS.get(params.action, []):
        val = getattr(params, field)
        if not isinstance(val, int) or isinstance(val, bool):
            return f"param_domain:{field}"
        if val < lo or val > hi:
            return f"param_domain:{field}"
    return None


def step(bucket: VestingBucket, params: ActionParams) -> StepResult:
    """Execute one action against the given bucket.

    Returns ``StepResult`` with ``accepted=True`` on success,
    or ``accepted=False`` with a ``rejection`` reason string.
    """
    entry = _DISPATCH.get(params.action)
    if entry is None:
        return StepResult(accepted=False, rejection=f"unknown_action:{params.action}")

    domain_err = _validate_params(params)
    if domain_err is not None:
        return StepResult(accepted=False, rejection=domain_err)

    update_fn, event = entry
    try:
        new_bucket, amount = update_fn(bucket, params)
    except InsufficientClaimable:
        return StepResult(accepted=False, rejection="insufficient_claimable")
    except InvalidParameter:
        return StepResult(accepted=False, rejection="invalid_parameter")

    # principal and claims are bounded by the deposited total.
    if new_bucket.total_deposited > MAX_AMOUNT:
        return StepResult(accepted=False, rejection="overflow:total_deposited")

    violations = check_all(new_bucket)
    if violations:
        return StepResult(
            accepted=False,
            rejection=f"invariant:{','.join(violations)}",
        )

    effect = Effect(
        event=event,
        amount=amount,
        remaining_after=remaining_at(new_bucket, params.now),
        claimable_after=claimable_at(new_bucket, params.now),
        total_deposited_after=new_bucket.total_deposited,
        total_claimed_after=new_bucket.total_claimed,
    )
    return StepResult(accepted=True, state=new_bucket, effect=effect)


def step_or_raise(bucket: VestingBucket, params: ActionParams) -> StepResult:
    """Like ``step()`` but raises on rejection instead of returning a result.

    Raises:
        InvalidParameter: Parameter outside its domain, deposited total above
            ``MAX_AMOUNT``, or timestamp before the anchor.
        InsufficientClaimable: Claim exceeds the claimable amount.
        VestingInvariantError: Post-state violates one or more invariants.
    """
    result = step(bucket, params)
    if result.accepted:
        return result

    reason = result.rejection or ""
    if reason == "insufficient_claimable":
        raise InsufficientClaimable(params.amount, claimable_at(bucket, params.now))
    if reason.startswith("invariant:"):
        violations = reason.removeprefix("invariant:").split(",")
        raise VestingInvariantError(violations)
    raise InvalidParameter(reason)
