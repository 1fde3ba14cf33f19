"""
Seed Selection
==============
Greedy influence maximization strategies sharing one ``run`` contract.

- NaiveGreedyMaximizer: full rescan per round, Theta(k * n) oracle calls
- CELFMaximizer: lazy forward evaluation over a staleness-tagged max-heap
- RunResult / IterationRecord: per-run seed order, gains and costs
"""

from typing import Dict, Type

from infmax.errors import InvalidArgumentError
from infmax.selection.base import Maximizer, validate_arguments
from infmax.selection.celf import CELFMaximizer
from infmax.selection.greedy import NaiveGreedyMaximizer
from infmax.selection.result import IterationRecord, RunResult

MAXIMIZERS: Dict[str, Type[Maximizer]] = {
    "greedy": NaiveGreedyMaximizer,
    "celf": CELFMaximizer,
}


def get_maximizer(name: str, seed: int | None = None) -> Maximizer:
    try:
        return MAXIMIZERS[name](seed=seed)
    except KeyError as exc:
        raise InvalidArgumentError(f"Unknown algorithm: {name}") from exc


__all__ = [
    "MAXIMIZERS",
    "Maximizer",
    "validate_arguments",
    "get_maximizer",
    "CELFMaximizer",
    "NaiveGreedyMaximizer",
    "IterationRecord",
    "RunResult",
]
