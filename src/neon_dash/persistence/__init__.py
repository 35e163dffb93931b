"""
High score persistence.

The session controller only depends on the HighScoreStore protocol; the JSON
file store is the default backend for the desktop app.
"""
from .paths import data_dir, high_score_path
from .store import HighScoreStore, JsonHighScoreStore, MemoryHighScoreStore

__all__ = [
    "HighScoreStore",
    "JsonHighScoreStore",
    "MemoryHighScoreStore",
    "data_dir",
    "high_score_path",
]
