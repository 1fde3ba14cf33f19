from __future__ import annotations

import platform
import subprocess
import sys
from importlib import metadata
from typing import Dict

from infmax.config import RunConfig

TRACKED_PACKAGES = ("numpy", "pandas", "networkx", "pydantic", "infmax-celf")


def package_versions() -> Dict[str, str]:
    versions = {}
    for name in TRACKED_PACKAGES:
        key = name.split("-")[0] + "_version"
        try:
            versions[key] = metadata.version(name)
        except metadata.PackageNotFoundError:
            versions[key] = "unknown"
    return versions


def git_commit() -> str:
    try:
        out = subprocess.run(
            ["git", "rev-parse", "HEAD"], capture_output=True, text=True, check=True
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.stdout.strip() or "unknown"


def build_run_metadata(cfg: RunConfig) -> Dict[str, str]:
    """Interpreter, library versions and run identity written next to each run."""
    return {
        "python_version": platform.python_version(),
        "platform": platform.platform(),
        "executable": sys.executable,
        **package_versions(),
        "git_commit": git_commit(),
        "seed": str(cfg.seed),
        "graph": f"{cfg.graph.kind}(n={cfg.graph.n})",
        "model": cfg.graph.model,
        "algorithm": cfg.selection.algorithm,
        "k": str(cfg.selection.k),
        "num_simulations": str(cfg.estimator.num_simulations),
    }
