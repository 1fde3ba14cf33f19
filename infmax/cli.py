from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Tuple

import pandas as pd

from infmax.analysis.aggregate import aggregate_histories
from infmax.config import RunConfig, dump_config, load_config
from infmax.experiments.runner import run_all
from infmax.graph.generators import build_graph
from infmax.io.logging import setup_logging
from infmax.io.metadata import build_run_metadata
from infmax.rng import RNGManager
from infmax.selection import CELFMaximizer, NaiveGreedyMaximizer, RunResult, get_maximizer


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="infmax", description="Greedy / CELF influence maximization")
    parser.add_argument("--log-level", default="INFO")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Select seeds with one algorithm")
    run.add_argument("--config", required=True, help="Path to config YAML")
    run.add_argument("--algorithm", choices=["greedy", "celf"], default=None)
    run.add_argument("--k", type=int, default=None)
    run.add_argument("--simulations", type=int, default=None)
    run.add_argument("--model", choices=["IC", "LT"], default=None)
    run.add_argument("--seed", type=int, default=None)
    run.add_argument("--out", required=True, help="Output directory")

    compare = sub.add_parser("compare", help="Run greedy and CELF on the same graph")
    compare.add_argument("--config", required=True, help="Path to config YAML")
    compare.add_argument("--k", type=int, default=None)
    compare.add_argument("--simulations", type=int, default=None)
    compare.add_argument("--model", choices=["IC", "LT"], default=None)
    compare.add_argument("--seed", type=int, default=None)
    compare.add_argument("--out", required=True)

    sweep = sub.add_parser("sweep", help="Compare greedy and CELF across seeds")
    sweep.add_argument("--config", required=True)
    sweep.add_argument("--seeds", nargs="+", type=int, required=True)
    sweep.add_argument("--out", required=True)

    experiments = sub.add_parser("experiments", help="Run the benchmark experiments")
    experiments.add_argument("--config", required=True)
    experiments.add_argument("--out", required=True)

    return parser.parse_args(argv)


def override_config(cfg: RunConfig, args: argparse.Namespace) -> None:
    if getattr(args, "algorithm", None) is not None:
        cfg.selection.algorithm = args.algorithm
    if getattr(args, "k", None) is not None:
        cfg.selection.k = args.k
    if getattr(args, "simulations", None) is not None:
        cfg.estimator.num_simulations = args.simulations
    if getattr(args, "model", None) is not None:
        cfg.graph.model = args.model
    if getattr(args, "seed", None) is not None:
        cfg.seed = args.seed


def prepare_output(cfg: RunConfig, out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    dump_config(cfg, out_dir / "config_resolved.yaml")
    if cfg.output.save_metadata:
        with (out_dir / "run_metadata.json").open("w") as f:
            json.dump(build_run_metadata(cfg), f, indent=2)


def write_result(result: RunResult, n_nodes: int, out_dir: Path, save_history: bool) -> None:
    if save_history:
        result.to_frame().to_csv(out_dir / f"{result.algorithm}_history.csv", index=False)
    summary = {
        "algorithm": result.algorithm,
        "seeds": list(result.seed_order),
        "final_spread": result.final_spread,
        "total_seconds": result.total_seconds,
        "total_evaluations": result.total_evaluations,
        "estimated_speedup": result.estimated_speedup(n_nodes),
    }
    with (out_dir / f"{result.algorithm}_summary.json").open("w") as f:
        json.dump(summary, f, indent=2)


def compare_once(cfg: RunConfig) -> Tuple[RunResult, RunResult, int]:
    rng_manager = RNGManager(cfg.seed)
    graph = build_graph(cfg.graph, rng_manager.spawn())
    k, sims = cfg.selection.k, cfg.estimator.num_simulations
    greedy = NaiveGreedyMaximizer(seed=rng_manager.spawn_seed()).run(graph, k, sims)
    celf = CELFMaximizer(seed=rng_manager.spawn_seed()).run(graph, k, sims)
    logging.info(
        "Greedy: spread=%.2f evals=%d | CELF: spread=%.2f evals=%d",
        greedy.final_spread, greedy.total_evaluations, celf.final_spread, celf.total_evaluations,
    )
    return greedy, celf, graph.node_count


def run_single(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    override_config(cfg, args)
    out_dir = Path(args.out)
    prepare_output(cfg, out_dir)

    rng_manager = RNGManager(cfg.seed)
    graph = build_graph(cfg.graph, rng_manager.spawn())
    logging.info("Built %r", graph)
    maximizer = get_maximizer(cfg.selection.algorithm, seed=rng_manager.spawn_seed())
    result = maximizer.run(graph, cfg.selection.k, cfg.estimator.num_simulations)
    write_result(result, graph.node_count, out_dir, cfg.output.save_history)


def run_compare(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    override_config(cfg, args)
    out_dir = Path(args.out)
    prepare_output(cfg, out_dir)

    greedy, celf, n_nodes = compare_once(cfg)
    for result in (greedy, celf):
        write_result(result, n_nodes, out_dir, cfg.output.save_history)


def run_sweep(args: argparse.Namespace) -> None:
    base_out = Path(args.out)
    base_out.mkdir(parents=True, exist_ok=True)
    frames = []
    for seed in args.seeds:
        cfg = load_config(args.config)
        cfg.seed = seed
        run_name = f"{Path(args.config).stem}_seed_{seed}"
        out_dir = base_out / run_name
        prepare_output(cfg, out_dir)
        logging.info("Running %s", run_name)
        greedy, celf, n_nodes = compare_once(cfg)
        for result in (greedy, celf):
            write_result(result, n_nodes, out_dir, cfg.output.save_history)
        frames.append((run_name, pd.concat([greedy.to_frame(), celf.to_frame()], ignore_index=True)))

    if frames:
        agg, summary = aggregate_histories(frames)
        agg.to_csv(base_out / "aggregate_history.csv", index=False)
        summary.to_csv(base_out / "aggregate_summary.csv", index=False)


def run_experiments(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    out_dir = Path(args.out)
    prepare_output(cfg, out_dir)
    run_all(cfg.experiments, cfg.seed, out_dir)


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level.upper())
    if args.command == "run":
        run_single(args)
    elif args.command == "compare":
        run_compare(args)
    elif args.command == "sweep":
        run_sweep(args)
    elif args.command == "experiments":
        run_experiments(args)


if __name__ == "__main__":
    main()
