"""Exception types for the vesting curve engine.

Pure functions in ``curve.py`` and ``rates.py`` raise these directly.
``step()`` in ``engine.py`` converts them into rejected ``StepResult`` values;
``step_or_raise()`` raises them again for callers that prefer exceptions.
"""

from __future__ import annotations


class VestingError(Exception):
    """Base class for all vesting engine errors."""


class InvalidParameter(VestingError, ValueError):
    """Raised for malformed or out-of-domain input (negative amounts, bad rates, past timestamps)."""


class InsufficientClaimable(VestingError):
    """Raised when a claim exceeds the amount currently claimable."""

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(f"claim of {requested} exceeds claimable {available}")


class VestingInvariantError(VestingError):
    """Raised when a post-state violates one or more invariants."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(f"invariant violations: {', '.join(violations)}")
