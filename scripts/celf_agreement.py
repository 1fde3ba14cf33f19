"""
CELF / Greedy Agreement
=======================
Repeats greedy and CELF on freshly generated graphs and tests whether their
final spreads differ beyond Monte-Carlo noise (paired t-test), alongside the
seed-set overlap and the oracle-call ratio.
"""

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
import pandas as pd
from scipy import stats

sys.path.insert(0, str(Path(__file__).parent.parent))

from infmax.cli import compare_once
from infmax.config import load_config
from infmax.io.logging import setup_logging


def jaccard(a, b):
    if not a and not b:
        return 1.0
    return len(a & b) / len(a | b)


def run_agreement(config_path, seeds):
    rows = []
    for seed in seeds:
        cfg = load_config(config_path)
        cfg.seed = seed
        greedy, celf, n_nodes = compare_once(cfg)
        rows.append({
            "seed": seed,
            "greedy_spread": greedy.final_spread,
            "celf_spread": celf.final_spread,
            "greedy_evaluations": greedy.total_evaluations,
            "celf_evaluations": celf.total_evaluations,
            "seed_jaccard": jaccard(greedy.seeds, celf.seeds),
            "celf_speedup_estimate": celf.estimated_speedup(n_nodes),
        })
    return pd.DataFrame(rows)


def summarize(frame):
    diff = frame["greedy_spread"] - frame["celf_spread"]
    if len(frame) > 1 and diff.std() > 0:
        t_stat, p_val = stats.ttest_rel(frame["greedy_spread"], frame["celf_spread"])
    else:
        t_stat, p_val = 0.0, 1.0
    return {
        "runs": len(frame),
        "mean_spread_diff": float(diff.mean()),
        "max_abs_spread_diff": float(diff.abs().max()),
        "t_statistic": float(t_stat),
        "p_value": float(p_val),
        "mean_seed_jaccard": float(frame["seed_jaccard"].mean()),
        "mean_evaluation_ratio": float(
            np.mean(frame["greedy_evaluations"] / frame["celf_evaluations"])
        ),
    }


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", default="configs/default.yaml")
    parser.add_argument("--seeds", nargs="+", type=int, default=list(range(10)))
    parser.add_argument("--out", default="validation_results")
    args = parser.parse_args()

    setup_logging(logging.WARNING)
    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)

    frame = run_agreement(args.config, args.seeds)
    frame.to_csv(out_dir / "celf_agreement.csv", index=False)
    summary = summarize(frame)

    print("\n" + "=" * 60)
    print("CELF vs GREEDY AGREEMENT")
    print("=" * 60)
    for key, value in summary.items():
        print(f"  {key}: {value:.4f}" if isinstance(value, float) else f"  {key}: {value}")
    sig = "differ" if summary["p_value"] < 0.05 else "agree"
    print(f"\nSpreads {sig} at the 5% level.")


if __name__ == "__main__":
    main()
