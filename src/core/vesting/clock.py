"""Clock sources for callers that bind a bucket to "now".

The curve engine never reads a clock; ``TokenStream`` takes one of these.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Protocol

from .errors import InvalidParameter


class Clock(Protocol):
    def now(self) -> int: ...


class SystemClock:
    """Wall-clock seconds since the epoch, truncated to an int."""

    def now(self) -> int:
        return int(time.time())


@dataclass
class ManualClock:
    """Deterministic clock for simulations and tests."""

    t: int = 0

    def now(self) -> int:
        return self.t

    def wait(self, secs: int) -> None:
        if secs < 0:
            raise InvalidParameter(f"secs must be non-negative: {secs}")
        self.t += secs

    def reset(self, ts: int = 0) -> None:
        if ts < 0:
            raise InvalidParameter(f"ts must be non-negative: {ts}")
        self.t = ts
