"""
Cascade Simulation
==================
Single stochastic realizations of a diffusion process on a sealed graph.

Independent Cascade (IC):
    Nodes activated in round t get exactly one chance to activate each
    successor that was inactive at the start of round t+1, succeeding with
    probability w(u, v).

Linear Threshold (LT):
    Each node draws one threshold in [0, 1) per run. An inactive node
    activates once the summed weight of its active predecessors reaches its
    threshold.

Both processes stop at the first round with no new activations.
"""

from __future__ import annotations

from typing import Dict, Iterable, Set

import numpy as np

from infmax.errors import UnsealedGraphError
from infmax.graph.influence_graph import DiffusionModel, InfluenceGraph


class DiffusionSimulator:
    """Base class for one-run cascade simulators."""

    model: DiffusionModel

    def run_once(
        self, graph: InfluenceGraph, seeds: Iterable[int], rng: np.random.Generator
    ) -> Set[int]:
        raise NotImplementedError


class IndependentCascadeSimulator(DiffusionSimulator):
    model = DiffusionModel.IC

    def run_once(
        self, graph: InfluenceGraph, seeds: Iterable[int], rng: np.random.Generator
    ) -> Set[int]:
        active: Set[int] = set(seeds)
        frontier = sorted(active)
        weight = graph.weight

        while frontier:
            newly_active: Set[int] = set()
            for u in frontier:
                targets = [v for v in graph.successors(u) if v not in active]
                if not targets:
                    continue
                draws = rng.random(len(targets))
                for v, draw in zip(targets, draws):
                    if draw < weight(u, v):
                        newly_active.add(v)
            active |= newly_active
            frontier = sorted(newly_active)

        return active


class LinearThresholdSimulator(DiffusionSimulator):
    model = DiffusionModel.LT

    def run_once(
        self, graph: InfluenceGraph, seeds: Iterable[int], rng: np.random.Generator
    ) -> Set[int]:
        nodes = graph.nodes
        thresholds: Dict[int, float] = dict(zip(nodes, rng.random(len(nodes)).tolist()))
        active: Set[int] = set(seeds)
        weight = graph.weight

        changed = True
        while changed:
            newly_active: Set[int] = set()
            for v in nodes:
                if v in active:
                    continue
                influence = 0.0
                for u in graph.distinct_predecessors(v):
                    if u in active:
                        influence += weight(u, v)
                if influence >= thresholds[v]:
                    newly_active.add(v)
            active |= newly_active
            changed = bool(newly_active)

        return active


_SIMULATORS: Dict[DiffusionModel, DiffusionSimulator] = {
    DiffusionModel.IC: IndependentCascadeSimulator(),
    DiffusionModel.LT: LinearThresholdSimulator(),
}


def get_simulator(model: DiffusionModel | str) -> DiffusionSimulator:
    return _SIMULATORS[DiffusionModel.parse(model)]


def run_once(
    graph: InfluenceGraph, seeds: Iterable[int], rng: np.random.Generator
) -> Set[int]:
    """Simulate one cascade using the model the graph was sealed with."""
    if graph.model is None:
        raise UnsealedGraphError("Graph weights are not sealed; call seal_weights() first")
    return get_simulator(graph.model).run_once(graph, seeds, rng)
