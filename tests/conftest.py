import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


class ScriptedRandom:
    """Random source returning pre-set values; falls back to the last one."""

    def __init__(self, randoms=(0.9,), randints=(60,)) -> None:
        self._randoms = list(randoms)
        self._randints = list(randints)
        self.randint_calls = []

    def random(self) -> float:
        return self._randoms.pop(0) if len(self._randoms) > 1 else self._randoms[0]

    def randint(self, a: int, b: int) -> int:
        self.randint_calls.append((a, b))
        return self._randints.pop(0) if len(self._randints) > 1 else self._randints[0]


@pytest.fixture
def scripted_random():
    return ScriptedRandom
