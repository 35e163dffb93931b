from __future__ import annotations

import json
from pathlib import Path

import pytest

from neon_dash.engine.obstacles import ObstacleKind
from neon_dash.engine.rng import RNG
from neon_dash.engine.session import SessionController
from neon_dash.errors import PersistenceError
from neon_dash.persistence import JsonHighScoreStore, MemoryHighScoreStore, data_dir, high_score_path


def test_missing_file_reads_as_absent(tmp_path: Path):
    store = JsonHighScoreStore(tmp_path / "highscore.json")
    assert store.load_high_score() is None


def test_save_then_reload_in_new_instance(tmp_path: Path):
    path = tmp_path / "nested" / "highscore.json"
    JsonHighScoreStore(path).save_high_score(321)

    assert JsonHighScoreStore(path).load_high_score() == 321
    with path.open("r", encoding="utf-8") as f:
        assert json.load(f) == {"version": 1, "high_score": 321}
    assert not path.with_suffix(".json.tmp").exists()


@pytest.mark.parametrize(
    "content",
    ["{ not valid JSON", json.dumps({"high_score": "12"}), json.dumps({"high_score": -4}), json.dumps([1, 2])],
)
def test_corrupt_content_reads_as_absent(tmp_path: Path, content: str):
    path = tmp_path / "highscore.json"
    path.write_text(content, encoding="utf-8")
    assert JsonHighScoreStore(path).load_high_score() is None


def test_undecodable_bytes_read_as_absent(tmp_path: Path):
    path = tmp_path / "highscore.json"
    path.write_bytes(b"\x80\x81\x82")
    assert JsonHighScoreStore(path).load_high_score() is None
    session = SessionController(JsonHighScoreStore(path), rng=RNG(0))
    assert session.high_score == 0


def test_write_failure_raises_persistence_error(tmp_path: Path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", encoding="utf-8")
    store = JsonHighScoreStore(blocker / "highscore.json")
    with pytest.raises(PersistenceError):
        store.save_high_score(5)


def test_high_score_survives_restart(tmp_path: Path):
    path = tmp_path / "highscore.json"
    first = SessionController(JsonHighScoreStore(path), rng=RNG(1))
    first.start()
    first.generator.place(ObstacleKind.SPIKE, 80 + 5 * 40)
    while first.running:
        first.tick()
    assert first.high_score == 40

    second = SessionController(JsonHighScoreStore(path), rng=RNG(1))
    assert second.high_score == 40


def test_memory_store_records_writes():
    store = MemoryHighScoreStore(initial=3)
    store.save_high_score(9)
    assert store.load_high_score() == 9
    assert store.writes == [9]


def test_data_dir_env_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    target = tmp_path / "data"
    monkeypatch.setenv("NEON_DASH_DATA_DIR", str(target))
    assert data_dir() == target.resolve()
    assert target.is_dir()
    assert high_score_path() == target.resolve() / "highscore.json"
