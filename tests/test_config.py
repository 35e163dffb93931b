from __future__ import annotations

import logging
import textwrap
from pathlib import Path

import pytest

from neon_dash.config import GameConfig, load_config
from neon_dash.errors import ConfigError


def test_defaults_match_reference_tuning():
    cfg = load_config(env={})
    assert cfg == GameConfig()
    assert cfg.gravity == 0.6
    assert cfg.jump_impulse == -10
    assert cfg.run_speed == 5
    assert (cfg.min_spawn_ticks, cfg.max_spawn_ticks) == (60, 120)
    assert (cfg.spawn_x, cfg.prune_margin) == (1200, -100)


def test_yaml_sections_are_flattened(tmp_path: Path):
    fp = tmp_path / "tuning.yaml"
    fp.write_text(
        textwrap.dedent(
            """
            physics:
              gravity: 0.8
              jump_impulse: -12
            obstacles:
              min_spawn_ticks: 40
              max_spawn_ticks: 90
            score_divisor: 5
            """
        ),
        encoding="utf-8",
    )
    cfg = load_config(fp, env={})
    assert cfg.gravity == 0.8
    assert cfg.jump_impulse == -12.0
    assert isinstance(cfg.jump_impulse, float)
    assert (cfg.min_spawn_ticks, cfg.max_spawn_ticks) == (40, 90)
    assert cfg.score_divisor == 5


def test_env_overrides_file(tmp_path: Path):
    fp = tmp_path / "tuning.yaml"
    fp.write_text("run_speed: 6\n", encoding="utf-8")
    env = {"NEON_DASH_CONFIG": str(fp), "NEON_DASH_RUN_SPEED": "7.5", "NEON_DASH_MAX_SPAWN_TICKS": "150"}
    cfg = load_config(env=env)
    assert cfg.run_speed == 7.5
    assert cfg.max_spawn_ticks == 150


def test_unknown_keys_are_ignored_with_warning(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    fp = tmp_path / "tuning.yaml"
    fp.write_text("lanes: 3\ngravity: 0.5\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        cfg = load_config(fp, env={})
    assert cfg.gravity == 0.5
    assert any("lanes" in r.message for r in caplog.records)


@pytest.mark.parametrize(
    "overrides",
    [
        {"gravity": 0},
        {"jump_impulse": 3},
        {"run_speed": -1},
        {"min_spawn_ticks": 90, "max_spawn_ticks": 60},
        {"spike_height": 0},
        {"score_divisor": 0},
        {"gravity": float("nan")},
        {"run_speed": float("inf")},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ConfigError):
        GameConfig(**overrides).validate()


def test_bad_env_value_raises():
    with pytest.raises(ConfigError):
        load_config(env={"NEON_DASH_GRAVITY": "heavy"})


def test_malformed_yaml_raises(tmp_path: Path):
    fp = tmp_path / "broken.yaml"
    fp.write_text("physics: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(fp, env={})


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yaml", env={})


@pytest.mark.parametrize(
    "content",
    ["min_spawn_ticks: 60.7\n", "gravity: .nan\n", "run_speed: .inf\n", "score_divisor: true\n"],
)
def test_yaml_values_that_would_corrupt_tuning_are_rejected(tmp_path: Path, content: str):
    fp = tmp_path / "tuning.yaml"
    fp.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(fp, env={})


def test_whole_float_accepted_for_tick_counts(tmp_path: Path):
    fp = tmp_path / "tuning.yaml"
    fp.write_text("min_spawn_ticks: 40.0\n", encoding="utf-8")
    cfg = load_config(fp, env={})
    assert cfg.min_spawn_ticks == 40
    assert isinstance(cfg.min_spawn_ticks, int)
