import numpy as np
import pytest

from infmax.config import GraphConfig
from infmax.errors import InvalidArgumentError
from infmax.graph.generators import (
    barabasi_albert,
    build_graph,
    erdos_renyi,
    small_graph,
    watts_strogatz,
)


def test_barabasi_albert_is_symmetric_and_sealed():
    n, m = 50, 2
    graph = barabasi_albert(np.random.default_rng(1), n, m, "IC")
    assert graph.node_count == n
    assert graph.edge_count == 2 * m * (n - m)
    assert graph.is_sealed
    for v in graph.nodes:
        assert sorted(graph.successors(v)) == sorted(graph.predecessors(v))


def test_watts_strogatz_edge_count():
    graph = watts_strogatz(np.random.default_rng(2), 40, 4, 0.3, "LT")
    assert graph.node_count == 40
    assert graph.edge_count == 40 * 4
    assert graph.model.value == "LT"


def test_erdos_renyi_keeps_isolated_nodes():
    graph = erdos_renyi(np.random.default_rng(3), 30, 0.0, "IC")
    assert graph.node_count == 30
    assert graph.edge_count == 0


def test_small_graph_shape():
    graph = small_graph("IC")
    assert graph.node_count == 10
    assert graph.edge_count == 12


def test_generators_reproducible():
    a = barabasi_albert(np.random.default_rng(9), 40, 3, "LT")
    b = barabasi_albert(np.random.default_rng(9), 40, 3, "LT")
    for v in a.nodes:
        assert a.successors(v) == b.successors(v)
        for u in a.predecessors(v):
            assert a.weight(u, v) == b.weight(u, v)


def test_invalid_parameters_rejected():
    with pytest.raises(InvalidArgumentError):
        barabasi_albert(np.random.default_rng(0), 5, 5)
    with pytest.raises(InvalidArgumentError):
        erdos_renyi(np.random.default_rng(0), 5, 1.5)


def test_build_graph_from_config():
    cfg = GraphConfig(kind="watts_strogatz", n=30, k_neighbors=4, p=0.1, model="IC")
    graph = build_graph(cfg, np.random.default_rng(0))
    assert graph.node_count == 30


def test_build_graph_forwards_lt_normalization():
    cfg = GraphConfig(kind="small", model="LT", lt_normalization=4.0)
    graph = build_graph(cfg, np.random.default_rng(0))
    assert graph.in_weight(3) == pytest.approx(0.25)
    assert graph.in_weight(6) == pytest.approx(0.25)


def test_random_generators_forward_lt_normalization():
    rng = np.random.default_rng(4)
    for graph in (
        barabasi_albert(rng, 30, 2, "LT", lt_normalization=2.0),
        watts_strogatz(rng, 30, 4, 0.2, "LT", lt_normalization=2.0),
    ):
        for v in graph.nodes:
            if graph.predecessors(v):
                assert graph.in_weight(v) == pytest.approx(0.5)
