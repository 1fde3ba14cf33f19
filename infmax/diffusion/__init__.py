"""
Diffusion Models
================
Stochastic cascade simulation and Monte-Carlo spread estimation.

- IndependentCascadeSimulator: one attempt per edge from newly active nodes
- LinearThresholdSimulator: per-node thresholds against summed in-weight
- InfluenceEstimator: sample-mean spread with an oracle-call counter
"""

from infmax.diffusion.simulator import (
    DiffusionSimulator,
    IndependentCascadeSimulator,
    LinearThresholdSimulator,
    get_simulator,
    run_once,
)

from infmax.diffusion.estimator import InfluenceEstimator

__all__ = [
    "DiffusionSimulator",
    "IndependentCascadeSimulator",
    "LinearThresholdSimulator",
    "get_simulator",
    "run_once",
    "InfluenceEstimator",
]
