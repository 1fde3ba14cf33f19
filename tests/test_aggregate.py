import pandas as pd
import pytest

from infmax.analysis.aggregate import aggregate_histories
from infmax.config import RunConfig
from infmax.io.metadata import build_run_metadata
from infmax.selection import IterationRecord, RunResult


def _frame(spreads, evaluations):
    history = tuple(
        IterationRecord(i + 1, i, 1.0, spread, 0.1, evals)
        for i, (spread, evals) in enumerate(zip(spreads, evaluations))
    )
    return RunResult("celf", frozenset(range(len(history))), history, 0.2, evaluations[-1]).to_frame()


def test_aggregate_histories():
    runs = [("a", _frame([2.0, 3.0], [10, 14])), ("b", _frame([4.0, 5.0], [12, 16]))]
    per_round, summary = aggregate_histories(runs)
    last = per_round[per_round["round"] == 2].iloc[0]
    assert last["cumulative_spread_mean"] == pytest.approx(4.0)
    assert last["evaluations_ci95"] > 0
    assert summary["algorithm"].tolist() == ["celf"]
    assert summary["final_spread_mean"].iloc[0] == pytest.approx(4.0)
    assert summary["total_evaluations_mean"].iloc[0] == pytest.approx(15.0)


def test_aggregate_skips_empty_runs():
    per_round, summary = aggregate_histories([("empty", RunResult("greedy").to_frame())])
    assert per_round.empty
    assert summary.empty


def test_run_metadata_fields():
    meta = build_run_metadata(RunConfig())
    assert meta["seed"] == "42"
    assert meta["algorithm"] == "celf"
    assert "numpy_version" in meta
    assert "infmax_version" in meta
    assert all(isinstance(v, str) for v in meta.values())
