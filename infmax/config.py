from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Literal, Set

import yaml
from pydantic import BaseModel, Field, ValidationError


class GraphConfig(BaseModel):
    kind: Literal["barabasi_albert", "watts_strogatz", "erdos_renyi", "small"] = "barabasi_albert"
    n: int = Field(200, ge=2)
    m: int = 3
    k_neighbors: int = 6
    p: float = Field(0.05, ge=0.0, le=1.0)
    model: Literal["IC", "LT"] = "IC"
    lt_normalization: float = Field(1.1, gt=0.0)


class EstimatorConfig(BaseModel):
    num_simulations: int = Field(500, gt=0)


class SelectionConfig(BaseModel):
    algorithm: Literal["greedy", "celf"] = "celf"
    k: int = Field(10, ge=0)


class ExperimentsConfig(BaseModel):
    scaling_sizes: List[int] = [50, 100, 200, 500]
    scaling_k: int = 10
    scaling_simulations: int = 500
    comparison_ks: List[int] = [5, 10, 15, 20]
    comparison_n: int = 200
    comparison_simulations: int = 300
    spread_k: int = 30
    spread_n: int = 200
    spread_simulations: int = 500
    network_n: int = 100
    network_k: int = 15
    network_simulations: int = 500
    ba_m: int = 3
    ws_k_neighbors: int = 6
    ws_p: float = 0.3
    er_p: float = 0.05


class OutputConfig(BaseModel):
    save_history: bool = True
    save_metadata: bool = True


class RunConfig(BaseModel):
    seed: int = 42
    graph: GraphConfig = GraphConfig()
    estimator: EstimatorConfig = EstimatorConfig()
    selection: SelectionConfig = SelectionConfig()
    experiments: ExperimentsConfig = ExperimentsConfig()
    output: OutputConfig = OutputConfig()


class ConfigError(Exception):
    pass


def deep_merge(base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay ``update`` on ``base``; nested mappings merge, other values replace."""
    return {
        **base,
        **{
            key: deep_merge(base[key], value)
            if isinstance(value, dict) and isinstance(base.get(key), dict)
            else value
            for key, value in update.items()
        },
    }


def _read_layers(path: Path, seen: Set[Path]) -> Dict[str, Any]:
    """Read ``path`` and fold in its ``base:`` chain, nearest file winning."""
    path = path.resolve()
    if path in seen:
        raise ConfigError(f"Circular base reference at {path}")
    seen.add(path)
    try:
        layer = yaml.safe_load(path.read_text()) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    if not isinstance(layer, dict):
        raise ConfigError(f"{path} must contain a mapping")
    parent = layer.pop("base", None)
    if parent is None:
        return layer
    return deep_merge(_read_layers(path.parent / parent, seen), layer)


def load_config(path: str | Path) -> RunConfig:
    data = _read_layers(Path(path), set())
    try:
        return RunConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def dump_config(cfg: RunConfig, path: str | Path) -> None:
    path = Path(path)
    path.write_text(yaml.safe_dump(cfg.model_dump(), sort_keys=False))
