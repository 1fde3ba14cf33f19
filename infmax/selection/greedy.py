from __future__ import annotations

import logging
import time
from typing import List

from infmax.graph.influence_graph import InfluenceGraph
from infmax.selection.base import Maximizer, with_node
from infmax.selection.result import IterationRecord


class NaiveGreedyMaximizer(Maximizer):
    """
    Baseline hill climbing: every round rescans all unselected nodes.

    Each candidate costs up to two oracle calls (sigma(S + v) and sigma(S),
    the latter skipped while S is empty) and each accepted seed one more for
    the cumulative spread, so a run stays within 2 * k * n evaluations.
    """

    name = "greedy"

    def _select(
        self,
        graph: InfluenceGraph,
        k: int,
        num_simulations: int,
        seeds: List[int],
        history: List[IterationRecord],
    ) -> None:
        estimate = self.estimator.estimate
        nodes = graph.nodes

        for i in range(k):
            round_start = time.perf_counter()
            selected = set(seeds)
            best_node = None
            best_gain = float("-inf")

            for v in nodes:
                if v in selected:
                    continue
                gain = estimate(graph, with_node(selected, v), num_simulations)
                if selected:
                    gain -= estimate(graph, selected, num_simulations)
                if gain > best_gain:
                    best_gain = gain
                    best_node = v

            seeds.append(best_node)
            spread = estimate(graph, seeds, num_simulations)
            record = IterationRecord(
                round=i + 1,
                node=best_node,
                marginal_gain=best_gain,
                cumulative_spread=spread,
                elapsed_seconds=time.perf_counter() - round_start,
                evaluations=self.estimator.evaluations,
            )
            history.append(record)
            logging.info("%s", record)
