import dataclasses

import pytest

from infmax.selection import IterationRecord, RunResult


def _result():
    history = (
        IterationRecord(1, 4, 3.5, 3.5, 0.1, 20),
        IterationRecord(2, 7, 1.25, 4.75, 0.05, 24),
    )
    return RunResult("celf", frozenset({4, 7}), history, 0.15, 24)


def test_run_result_views():
    result = _result()
    assert result.seed_order == (4, 7)
    assert result.final_spread == 4.75
    assert result.estimated_speedup(20) == pytest.approx(2 * 20 / 24)


def test_run_result_frame():
    frame = _result().to_frame()
    assert list(frame.columns) == [
        "algorithm",
        "round",
        "node",
        "marginal_gain",
        "cumulative_spread",
        "elapsed_seconds",
        "evaluations",
    ]
    assert frame["node"].tolist() == [4, 7]
    assert (frame["algorithm"] == "celf").all()


def test_run_result_is_frozen():
    result = _result()
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.total_evaluations = 0


def test_empty_result():
    result = RunResult("greedy")
    assert result.final_spread == 0.0
    assert result.estimated_speedup(10) == 0.0
    assert result.to_frame().empty
