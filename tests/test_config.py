from pathlib import Path

import pytest

from infmax.config import ConfigError, RunConfig, dump_config, load_config

CONFIGS = Path(__file__).resolve().parent.parent / "configs"


def test_load_config():
    cfg = load_config(CONFIGS / "default.yaml")
    assert cfg.seed == 42
    assert cfg.graph.kind == "barabasi_albert"
    assert cfg.estimator.num_simulations == 500
    assert cfg.selection.algorithm == "celf"


def test_base_config_is_merged():
    cfg = load_config(CONFIGS / "small_ic.yaml")
    assert cfg.graph.kind == "small"
    assert cfg.graph.m == 3
    assert cfg.selection.k == 3
    assert cfg.estimator.num_simulations == 500


def test_invalid_config_raises(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("graph:\n  model: SIR\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_non_positive_simulations_rejected(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("estimator:\n  num_simulations: 0\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_dump_round_trip(tmp_path: Path):
    cfg = RunConfig()
    cfg.selection.k = 7
    dump_config(cfg, tmp_path / "cfg.yaml")
    assert load_config(tmp_path / "cfg.yaml").selection.k == 7


def test_base_chain_is_merged(tmp_path: Path):
    (tmp_path / "root.yaml").write_text("seed: 1\ngraph:\n  n: 50\n  model: LT\n")
    (tmp_path / "mid.yaml").write_text("base: root.yaml\ngraph:\n  n: 60\n")
    (tmp_path / "leaf.yaml").write_text("base: mid.yaml\nselection:\n  k: 4\n")
    cfg = load_config(tmp_path / "leaf.yaml")
    assert cfg.seed == 1
    assert cfg.graph.n == 60
    assert cfg.graph.model == "LT"
    assert cfg.selection.k == 4


def test_circular_base_rejected(tmp_path: Path):
    (tmp_path / "a.yaml").write_text("base: b.yaml\n")
    (tmp_path / "b.yaml").write_text("base: a.yaml\n")
    with pytest.raises(ConfigError):
        load_config(tmp_path / "a.yaml")


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.yaml")
