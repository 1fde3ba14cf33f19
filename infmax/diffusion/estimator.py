from __future__ import annotations

from typing import Iterable

import numpy as np

from infmax.diffusion.simulator import get_simulator
from infmax.errors import InvalidArgumentError, UnsealedGraphError
from infmax.graph.influence_graph import InfluenceGraph


class InfluenceEstimator:
    """
    Monte-Carlo spread oracle.

    ``evaluations`` grows by exactly one per ``estimate`` call, whatever the
    number of simulations, and is the cost measure used to compare selectors.
    ``simulations_run`` counts individual cascades.

    Every call draws from its own child stream of the estimator's
    SeedSequence, so a fixed seed and call order reproduce the same numbers.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._sequence = np.random.SeedSequence(seed)
        self.evaluations = 0
        self.simulations_run = 0

    def reset(self) -> None:
        self.evaluations = 0
        self.simulations_run = 0

    def estimate(
        self, graph: InfluenceGraph, seeds: Iterable[int], num_simulations: int
    ) -> float:
        if num_simulations <= 0:
            raise InvalidArgumentError(f"num_simulations must be positive, got {num_simulations}")
        if not graph.is_sealed:
            raise UnsealedGraphError("Graph weights are not sealed; call seal_weights() first")

        self.evaluations += 1
        seeds = set(seeds)
        if not seeds:
            return 0.0

        simulator = get_simulator(graph.model)
        rng = np.random.default_rng(self._sequence.spawn(1)[0])
        total = 0
        for _ in range(num_simulations):
            total += len(simulator.run_once(graph, seeds, rng))
        self.simulations_run += num_simulations
        return total / num_simulations
