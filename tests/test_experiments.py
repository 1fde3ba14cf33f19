from pathlib import Path

from infmax.config import ExperimentsConfig
from infmax.experiments.runner import run_all, run_comparison
from infmax.rng import RNGManager


def _tiny():
    return ExperimentsConfig(
        scaling_sizes=[20, 30],
        scaling_k=2,
        scaling_simulations=20,
        comparison_ks=[2, 3],
        comparison_n=25,
        comparison_simulations=20,
        spread_k=3,
        spread_n=25,
        spread_simulations=20,
        network_n=25,
        network_k=2,
        network_simulations=20,
        ws_k_neighbors=4,
        er_p=0.1,
    )


def test_comparison_celf_is_cheaper():
    frame = run_comparison(_tiny(), RNGManager(1))
    for k, group in frame.groupby("k"):
        evals = dict(zip(group["algorithm"], group["evaluations"]))
        assert evals["CELF"] < evals["Greedy"]


def test_run_all_writes_tables(tmp_path: Path):
    run_all(_tiny(), 42, tmp_path)
    for name in (
        "exp1_scaling.csv",
        "exp2_comparison.csv",
        "exp3_spread_IC.csv",
        "exp3_spread_LT.csv",
        "exp4_network_types.csv",
    ):
        assert (tmp_path / name).exists()
