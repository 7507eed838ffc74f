"""Per-run record of every suspension: what was yielded and how the run resumed."""

from __future__ import annotations

import time
import uuid
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Outcome(Enum):
    """How a suspended computation was resumed."""

    PENDING = "pending"
    RESUMED = "resumed"  # advance() with the settled result
    FAILED = "failed"  # fail() with the error


@dataclass
class Suspension:
    """One yield, from conversion of the yielded value until the computation resumes.

    Attributes:
        index: Position of this yield within the run, starting at 0.
        kind: YieldKind value of the yielded object.
        outcome: PENDING while waiting, then RESUMED or FAILED.
        error: The error thrown into the computation when FAILED.
    """

    index: int
    kind: str
    started_at: float = field(default_factory=time.monotonic)
    ended_at: float | None = None
    outcome: Outcome = Outcome.PENDING
    error: BaseException | None = None

    @property
    def duration_ms(self) -> float | None:
        if self.ended_at is None:
            return None
        return (self.ended_at - self.started_at) * 1000

    def resumed(self) -> None:
        self._settle(Outcome.RESUMED)

    def failed(self, error: BaseException) -> None:
        self.error = error
        self._settle(Outcome.FAILED)

    def _settle(self, outcome: Outcome) -> None:
        self.ended_at = time.monotonic()
        self.outcome = outcome


@dataclass
class Context:
    """Execution context for a run.

    Attributes:
        run_id: Unique identifier for this run.
        runner_name: Name of the Runner driving the computation.
        metadata: User-defined metadata dict. Tracers can read/write freely.
        suspensions: Every yield of the run, in order.
    """

    run_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    runner_name: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    suspensions: list[Suspension] = field(default_factory=list)

    def suspend(self, kind: str) -> Suspension:
        """Open a record for the computation's next yield."""
        suspension = Suspension(index=len(self.suspensions), kind=kind)
        self.suspensions.append(suspension)
        return suspension

    @property
    def current(self) -> Suspension | None:
        return self.suspensions[-1] if self.suspensions else None

    @property
    def suspended_ms(self) -> float:
        """Time the computation spent waiting on settled yields, in milliseconds."""
        return sum(s.duration_ms or 0.0 for s in self.suspensions)

    @property
    def failed_suspensions(self) -> list[Suspension]:
        return [s for s in self.suspensions if s.outcome is Outcome.FAILED]

    def kinds(self) -> Counter[str]:
        """How many times each kind of value was yielded."""
        return Counter(s.kind for s in self.suspensions)

    def summary(self) -> dict[str, Any]:
        """Return a summary dict suitable for logging."""
        return {
            "run_id": self.run_id,
            "runner": self.runner_name,
            "suspended_ms": round(self.suspended_ms, 2),
            "kinds": dict(self.kinds()),
            "suspensions": [
                {
                    "kind": s.kind,
                    "outcome": s.outcome.value,
                    "duration_ms": None if s.duration_ms is None else round(s.duration_ms, 2),
                    "error": None if s.error is None else repr(s.error),
                }
                for s in self.suspensions
            ],
        }
