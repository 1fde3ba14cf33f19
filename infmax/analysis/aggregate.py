from __future__ import annotations

from typing import Iterable, List, Tuple

import numpy as np
import pandas as pd

HISTORY_METRICS = ["marginal_gain", "cumulative_spread", "evaluations", "elapsed_seconds"]
SUMMARY_METRICS = ["final_spread", "total_evaluations", "runtime"]


def _mean_std(frame: pd.DataFrame, keys: List[str], cols: List[str]) -> pd.DataFrame:
    table = frame.groupby(keys)[cols].agg(["mean", "std"]).reset_index()
    table.columns = [f"{col}_{stat}" if stat else col for col, stat in table.columns]
    return table


def _final_rows(runs: List[Tuple[str, pd.DataFrame]]) -> pd.DataFrame:
    rows = []
    for run_name, frame in runs:
        for algorithm, subset in frame.groupby("algorithm", sort=True):
            last = subset.sort_values("round").iloc[-1]
            rows.append(
                {
                    "run": run_name,
                    "algorithm": algorithm,
                    "k": int(last["round"]),
                    "final_spread": float(last["cumulative_spread"]),
                    "total_evaluations": int(last["evaluations"]),
                    "runtime": float(subset["elapsed_seconds"].sum()),
                }
            )
    return pd.DataFrame(rows, columns=["run", "algorithm", "k", *SUMMARY_METRICS])


def aggregate_histories(
    runs: Iterable[Tuple[str, pd.DataFrame]],
    metric_cols: List[str] | None = None,
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Combine per-round histories of several runs.

    Each frame is a ``RunResult.to_frame()`` output. Returns the per
    (algorithm, round) mean/std/ci95 table and a per-algorithm summary of the
    final round of every run.
    """
    runs = [(name, frame) for name, frame in runs if not frame.empty]
    metric_cols = metric_cols or HISTORY_METRICS
    if not runs:
        return pd.DataFrame(), pd.DataFrame()

    combined = pd.concat([frame.assign(run=name) for name, frame in runs], ignore_index=True)
    per_round = _mean_std(combined, ["algorithm", "round"], metric_cols)

    # Normal-approximation half width over the number of contributing runs.
    scale = 1.96 / max(np.sqrt(combined["run"].nunique()), 1.0)
    for col in metric_cols:
        per_round[f"{col}_ci95"] = per_round[f"{col}_std"].fillna(0.0) * scale

    summary = _mean_std(_final_rows(runs), ["algorithm"], SUMMARY_METRICS)
    return per_round, summary
