from __future__ import annotations

from typing import List, Tuple

import networkx as nx
import numpy as np

from infmax.config import GraphConfig
from infmax.errors import InvalidArgumentError
from infmax.graph.influence_graph import LT_NORMALIZATION, DiffusionModel, InfluenceGraph

SMALL_GRAPH_EDGES: List[Tuple[int, int]] = [
    (0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (3, 5),
    (4, 6), (5, 6), (1, 7), (2, 7), (7, 8), (8, 9),
]


def _draw_seed(rng: np.random.Generator) -> int:
    return int(rng.integers(0, 2**31 - 1))


def barabasi_albert(
    rng: np.random.Generator,
    n: int,
    m: int,
    model: DiffusionModel | str = "IC",
    lt_normalization: float = LT_NORMALIZATION,
) -> InfluenceGraph:
    """Preferential-attachment graph; every undirected edge becomes two directed edges."""
    if m < 1 or m >= n:
        raise InvalidArgumentError(f"Barabasi-Albert requires 1 <= m < n, got m={m}, n={n}")
    g = nx.barabasi_albert_graph(n, m, seed=_draw_seed(rng))
    graph = InfluenceGraph.from_networkx(g)
    graph.seal_weights(model, rng, lt_normalization)
    return graph


def watts_strogatz(
    rng: np.random.Generator,
    n: int,
    k: int,
    p: float,
    model: DiffusionModel | str = "IC",
    lt_normalization: float = LT_NORMALIZATION,
) -> InfluenceGraph:
    """Ring lattice with rewiring probability ``p``, inserted in both directions."""
    if k < 2 or k >= n:
        raise InvalidArgumentError(f"Watts-Strogatz requires 2 <= k < n, got k={k}, n={n}")
    g = nx.watts_strogatz_graph(n, k, p, seed=_draw_seed(rng))
    graph = InfluenceGraph.from_networkx(g)
    graph.seal_weights(model, rng, lt_normalization)
    return graph


def erdos_renyi(
    rng: np.random.Generator,
    n: int,
    p: float,
    model: DiffusionModel | str = "IC",
    lt_normalization: float = LT_NORMALIZATION,
) -> InfluenceGraph:
    """Directed uniform-random graph: each ordered pair (i, j), i != j, kept with probability p."""
    if not 0.0 <= p <= 1.0:
        raise InvalidArgumentError(f"Edge probability must lie in [0, 1], got {p}")
    g = nx.gnp_random_graph(n, p, seed=_draw_seed(rng), directed=True)
    graph = InfluenceGraph.from_networkx(g)
    graph.seal_weights(model, rng, lt_normalization)
    return graph


def small_graph(
    model: DiffusionModel | str = "IC", seed: int = 42, lt_normalization: float = LT_NORMALIZATION
) -> InfluenceGraph:
    """Fixed 10-node example graph, one directed edge per listed pair."""
    graph = InfluenceGraph.from_edges(SMALL_GRAPH_EDGES)
    graph.seal_weights(model, seed, lt_normalization)
    return graph


def build_graph(cfg: GraphConfig, rng: np.random.Generator) -> InfluenceGraph:
    if cfg.kind == "barabasi_albert":
        return barabasi_albert(rng, cfg.n, cfg.m, cfg.model, cfg.lt_normalization)
    if cfg.kind == "watts_strogatz":
        return watts_strogatz(rng, cfg.n, cfg.k_neighbors, cfg.p, cfg.model, cfg.lt_normalization)
    if cfg.kind == "erdos_renyi":
        return erdos_renyi(rng, cfg.n, cfg.p, cfg.model, cfg.lt_normalization)
    return small_graph(cfg.model, _draw_seed(rng), cfg.lt_normalization)
