"""
Influence Graph
===============
Directed graph with per-edge activation weights.

The graph is built incrementally with ``add_edge`` and then sealed once with
``seal_weights``, which derives edge weights for the chosen diffusion model:

- IC: w(u -> v) = 1 / indegree(v)
- LT: per target v, independent uniform draws over its predecessor entries,
  each divided by (sum_of_draws * lt_normalization)

Multi-edges are kept as inserted because they count towards indegree and the
LT normalization sum.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterable, List, Set, Tuple

import networkx as nx
import numpy as np

from infmax.errors import InvalidArgumentError

LT_NORMALIZATION = 1.1


class DiffusionModel(str, Enum):
    IC = "IC"
    LT = "LT"

    @classmethod
    def parse(cls, value: "DiffusionModel | str") -> "DiffusionModel":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidArgumentError(f"Unsupported diffusion model: {value!r}") from exc


class InfluenceGraph:
    """Directed influence graph with forward and reverse adjacency views."""

    def __init__(self) -> None:
        self._nodes: Set[int] = set()
        self._forward: Dict[int, List[int]] = {}
        self._reverse: Dict[int, List[int]] = {}
        self._weights: Dict[Tuple[int, int], float] = {}
        self._edge_count = 0
        self._model: DiffusionModel | None = None

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[int, int]]) -> "InfluenceGraph":
        graph = cls()
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    @classmethod
    def from_networkx(cls, g: nx.Graph) -> "InfluenceGraph":
        """Build from a networkx graph; undirected edges are inserted in both directions."""
        graph = cls()
        for u, v in g.edges():
            graph.add_edge(int(u), int(v))
            if not g.is_directed():
                graph.add_edge(int(v), int(u))
        for node in g.nodes():
            graph._nodes.add(int(node))
        return graph

    def add_edge(self, u: int, v: int) -> None:
        self._forward.setdefault(u, []).append(v)
        self._reverse.setdefault(v, []).append(u)
        self._nodes.add(u)
        self._nodes.add(v)
        self._edge_count += 1
        # New edges carry no weight until the graph is sealed again.
        self._model = None

    def seal_weights(
        self,
        model: DiffusionModel | str,
        seed: int | np.random.Generator | None = None,
        lt_normalization: float = LT_NORMALIZATION,
    ) -> None:
        """
        Compute edge weights for ``model``.

        Must be called exactly once after every edge has been added. A second
        call recomputes and overwrites all weights.

        Args:
            model: "IC" or "LT" (or a DiffusionModel).
            seed: Integer seed or Generator used for LT weight draws.
            lt_normalization: Divisor scale for LT weights (default 1.1).
        """
        model = DiffusionModel.parse(model)
        if lt_normalization <= 0:
            raise InvalidArgumentError("lt_normalization must be positive")
        if self._model is not None:
            logging.warning("Graph already sealed for %s; overwriting weights", self._model.value)

        rng = seed if isinstance(seed, np.random.Generator) else np.random.default_rng(seed)
        weights: Dict[Tuple[int, int], float] = {}
        for v in sorted(self._nodes):
            preds = self._reverse.get(v, [])
            if not preds:
                continue
            if model is DiffusionModel.IC:
                w = 1.0 / len(preds)
                for u in preds:
                    weights[(u, v)] = w
            else:
                draws = rng.random(len(preds))
                denom = float(draws.sum()) * lt_normalization
                # Parallel edges share one key, so their shares add up.
                for u, draw in zip(preds, draws):
                    weights[(u, v)] = weights.get((u, v), 0.0) + float(draw) / denom

        self._weights = weights
        self._model = model

    @property
    def nodes(self) -> List[int]:
        """Node ids in ascending order."""
        return sorted(self._nodes)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    @property
    def model(self) -> DiffusionModel | None:
        return self._model

    @property
    def is_sealed(self) -> bool:
        return self._model is not None

    def successors(self, v: int) -> Tuple[int, ...]:
        return tuple(self._forward.get(v, ()))

    def predecessors(self, v: int) -> Tuple[int, ...]:
        return tuple(self._reverse.get(v, ()))

    def distinct_predecessors(self, v: int) -> Tuple[int, ...]:
        """Predecessors of v in first-insertion order, parallel edges collapsed."""
        return tuple(dict.fromkeys(self._reverse.get(v, ())))

    def weight(self, u: int, v: int) -> float:
        return self._weights.get((u, v), 0.0)

    def in_weight(self, v: int) -> float:
        return sum(self.weight(u, v) for u in self.distinct_predecessors(v))

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __repr__(self) -> str:
        model = self._model.value if self._model else "unsealed"
        return f"InfluenceGraph(nodes={self.node_count}, edges={self.edge_count}, model={model})"
