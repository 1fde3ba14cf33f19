"""
Influence Graphs
================
Directed, weighted graphs consumed by the diffusion simulators.

- InfluenceGraph: adjacency + reverse adjacency + sealed edge weights
- DiffusionModel: IC / LT tag used when sealing weights
- generators: preferential-attachment, small-world and uniform-random builders
"""

from infmax.graph.influence_graph import (
    LT_NORMALIZATION,
    DiffusionModel,
    InfluenceGraph,
)

__all__ = [
    "LT_NORMALIZATION",
    "DiffusionModel",
    "InfluenceGraph",
]
