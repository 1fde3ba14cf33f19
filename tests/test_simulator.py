import numpy as np
import pytest

from infmax.diffusion import IndependentCascadeSimulator, LinearThresholdSimulator, run_once
from infmax.errors import UnsealedGraphError
from infmax.graph import InfluenceGraph
from infmax.graph.generators import erdos_renyi, small_graph


def test_certain_edge_always_fires():
    graph = InfluenceGraph.from_edges([(0, 1)])
    graph.seal_weights("IC")
    rng = np.random.default_rng(0)
    for _ in range(200):
        assert run_once(graph, {0}, rng) == {0, 1}


def test_ic_does_not_flow_backwards():
    graph = InfluenceGraph.from_edges([(0, 1)])
    graph.seal_weights("IC")
    assert run_once(graph, {1}, np.random.default_rng(0)) == {1}


def test_ic_activates_certain_successors():
    graph = small_graph("IC")
    rng = np.random.default_rng(3)
    for _ in range(50):
        active = IndependentCascadeSimulator().run_once(graph, {0}, rng)
        assert {0, 1, 2} <= active


def test_fixed_rng_reproduces_activation_sets():
    graph = erdos_renyi(np.random.default_rng(42), 60, 0.08, "IC")
    rng_a = np.random.default_rng(11)
    rng_b = np.random.default_rng(11)
    first = [run_once(graph, {0, 5}, rng_a) for _ in range(20)]
    again = [run_once(graph, {0, 5}, rng_b) for _ in range(20)]
    assert first == again


def test_lt_seeds_always_active():
    graph = small_graph("LT")
    rng = np.random.default_rng(5)
    for _ in range(50):
        active = LinearThresholdSimulator().run_once(graph, {3, 8}, rng)
        assert {3, 8} <= active


def test_lt_sink_seed_stays_alone():
    graph = InfluenceGraph.from_edges([(0, 1), (1, 2)])
    graph.seal_weights("LT", seed=0)
    assert run_once(graph, {2}, np.random.default_rng(0)) == {2}


def test_lt_activation_rate_tracks_weight():
    # Single in-edge: weight 1 / 1.1, so activation probability is the same.
    graph = InfluenceGraph.from_edges([(0, 1)])
    graph.seal_weights("LT", seed=0)
    rng = np.random.default_rng(8)
    hits = sum(1 in run_once(graph, {0}, rng) for _ in range(4000))
    assert hits / 4000 == pytest.approx(1 / 1.1, abs=0.03)


def test_ic_activation_rate_tracks_weight():
    graph = InfluenceGraph.from_edges([(0, 2), (1, 2)])
    graph.seal_weights("IC")
    rng = np.random.default_rng(9)
    hits = sum(2 in run_once(graph, {0}, rng) for _ in range(4000))
    assert hits / 4000 == pytest.approx(0.5, abs=0.03)


def test_unsealed_graph_rejected():
    graph = InfluenceGraph.from_edges([(0, 1)])
    with pytest.raises(UnsealedGraphError):
        run_once(graph, {0}, np.random.default_rng(0))


def test_lt_multi_edges_never_make_activation_certain():
    graph = InfluenceGraph.from_edges([(0, 2), (0, 2), (1, 2)])
    graph.seal_weights("LT", seed=3)
    rng = np.random.default_rng(12)
    hits = sum(2 in run_once(graph, {0, 1}, rng) for _ in range(4000))
    assert hits < 4000
    assert hits / 4000 == pytest.approx(1 / 1.1, abs=0.03)
