"""
Cost-Effective Lazy Forward selection (Leskovec et al., 2007).

Spread is submodular, so a marginal gain computed against a smaller seed set
bounds the gain against any superset. Cached gains live in a max-heap tagged
with the round they were computed in; only the top entry is ever refreshed,
and a top entry that is already current is accepted without further work.
"""

from __future__ import annotations

import heapq
import logging
import time
from dataclasses import dataclass
from typing import List, Tuple

from infmax.graph.influence_graph import InfluenceGraph
from infmax.selection.base import Maximizer, with_node
from infmax.selection.result import IterationRecord


@dataclass(frozen=True)
class CELFEntry:
    node: int
    gain: float
    round: int

    def key(self) -> Tuple[float, int, int]:
        # heapq is a min-heap: negate the gain, ties go to the lower node id.
        return (-self.gain, self.node, self.round)


class CELFMaximizer(Maximizer):
    name = "celf"

    def _select(
        self,
        graph: InfluenceGraph,
        k: int,
        num_simulations: int,
        seeds: List[int],
        history: List[IterationRecord],
    ) -> None:
        estimate = self.estimator.estimate
        round_start = time.perf_counter()

        heap: List[Tuple[float, int, int]] = []
        for v in graph.nodes:
            gain = estimate(graph, {v}, num_simulations)
            heapq.heappush(heap, CELFEntry(v, gain, 0).key())

        spread = 0.0
        current_round = 0
        recomputed = 0
        while len(seeds) < k:
            neg_gain, node, tagged_round = heapq.heappop(heap)
            entry = CELFEntry(node, -neg_gain, tagged_round)

            if entry.round == current_round:
                seeds.append(entry.node)
                spread = estimate(graph, seeds, num_simulations)
                record = IterationRecord(
                    round=current_round + 1,
                    node=entry.node,
                    marginal_gain=entry.gain,
                    cumulative_spread=spread,
                    elapsed_seconds=time.perf_counter() - round_start,
                    evaluations=self.estimator.evaluations,
                )
                history.append(record)
                logging.info("%s | Evals: %d | Recomputed: %d", record, record.evaluations, recomputed)
                current_round += 1
                recomputed = 0
                round_start = time.perf_counter()
            else:
                gain = estimate(graph, with_node(seeds, entry.node), num_simulations) - spread
                logging.debug(
                    "Stale entry for node %d (round %d): %.3f -> %.3f",
                    entry.node, entry.round, entry.gain, gain,
                )
                heapq.heappush(heap, CELFEntry(entry.node, gain, current_round).key())
                recomputed += 1
