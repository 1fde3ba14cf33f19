from __future__ import annotations

import logging
import time
from typing import List, Set

from infmax.diffusion.estimator import InfluenceEstimator
from infmax.errors import InvalidArgumentError, UnsealedGraphError
from infmax.graph.influence_graph import InfluenceGraph
from infmax.selection.result import IterationRecord, RunResult


class Maximizer:
    """
    Shared driver for seed selectors.

    Subclasses implement ``_select``, which appends to ``history`` and
    ``seeds``. Arguments are validated before any simulation runs, and a
    failed run returns nothing.
    """

    name = "base"

    def __init__(self, estimator: InfluenceEstimator | None = None, seed: int | None = None) -> None:
        self.estimator = estimator if estimator is not None else InfluenceEstimator(seed)
        self.state = "idle"

    def run(self, graph: InfluenceGraph, k: int, num_simulations: int) -> RunResult:
        validate_arguments(graph, k, num_simulations)

        self.state = "running"
        self.estimator.reset()
        seeds: List[int] = []
        history: List[IterationRecord] = []
        start = time.perf_counter()
        try:
            if k > 0:
                logging.info(
                    "%s: k=%d, model=%s, n=%d, simulations=%d",
                    self.name, k, graph.model.value, graph.node_count, num_simulations,
                )
                self._select(graph, k, num_simulations, seeds, history)
        except Exception:
            self.state = "idle"
            raise
        total = time.perf_counter() - start
        self.state = "completed"

        result = RunResult(
            algorithm=self.name,
            seeds=frozenset(seeds),
            history=tuple(history),
            total_seconds=total,
            total_evaluations=self.estimator.evaluations,
        )
        if k > 0:
            logging.info(
                "%s total: %.2fs, %d evaluations", self.name, total, result.total_evaluations
            )
        return result

    select = run

    def _select(
        self,
        graph: InfluenceGraph,
        k: int,
        num_simulations: int,
        seeds: List[int],
        history: List[IterationRecord],
    ) -> None:
        raise NotImplementedError


def validate_arguments(graph: InfluenceGraph, k: int, num_simulations: int) -> None:
    if num_simulations <= 0:
        raise InvalidArgumentError(f"num_simulations must be positive, got {num_simulations}")
    if k < 0:
        raise InvalidArgumentError(f"k must be non-negative, got {k}")
    if k > graph.node_count:
        raise InvalidArgumentError(f"k={k} exceeds node count {graph.node_count}")
    if not graph.is_sealed:
        raise UnsealedGraphError("Graph weights are not sealed; call seal_weights() first")


def with_node(seeds: Set[int] | List[int], node: int) -> Set[int]:
    extended = set(seeds)
    extended.add(node)
    return extended
