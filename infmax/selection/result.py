from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import FrozenSet, Tuple

import pandas as pd


@dataclass(frozen=True)
class IterationRecord:
    """One accepted seed."""

    round: int
    node: int
    marginal_gain: float
    cumulative_spread: float
    elapsed_seconds: float
    evaluations: int

    def __str__(self) -> str:
        return (
            f"Seed {self.round}: Node {self.node} | Spread: {self.cumulative_spread:.2f} "
            f"| Time: {self.elapsed_seconds:.2f}s"
        )


@dataclass(frozen=True)
class RunResult:
    algorithm: str
    seeds: FrozenSet[int] = frozenset()
    history: Tuple[IterationRecord, ...] = field(default_factory=tuple)
    total_seconds: float = 0.0
    total_evaluations: int = 0

    @property
    def seed_order(self) -> Tuple[int, ...]:
        return tuple(h.node for h in self.history)

    @property
    def final_spread(self) -> float:
        return self.history[-1].cumulative_spread if self.history else 0.0

    def estimated_speedup(self, n_nodes: int) -> float:
        """
        (k * n) / total_evaluations.

        Uses naive greedy's theoretical k * n cost rather than a measured
        greedy run, so it is an approximation of the real ratio.
        """
        if self.total_evaluations == 0:
            return 0.0
        return len(self.history) * n_nodes / self.total_evaluations

    def to_frame(self) -> pd.DataFrame:
        columns = [
            "round",
            "node",
            "marginal_gain",
            "cumulative_spread",
            "elapsed_seconds",
            "evaluations",
        ]
        frame = pd.DataFrame([asdict(h) for h in self.history], columns=columns)
        frame.insert(0, "algorithm", self.algorithm)
        return frame
