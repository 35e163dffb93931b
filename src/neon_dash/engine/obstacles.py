from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..config import GameConfig
from ..errors import InvariantViolation
from .rng import RNG, RandomSource

logger = logging.getLogger(__name__)


class ObstacleKind(str, Enum):
    BLOCK = "block"
    SPIKE = "spike"


@dataclass
class Obstacle:
    id: int
    position_x: float
    width: float
    height: float
    kind: ObstacleKind

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvariantViolation(
                f"Obstacle {self.id} has non-positive size {self.width}x{self.height}"
            )

    @property
    def right_edge(self) -> float:
        return self.position_x + self.width


class ObstacleGenerator:
    """Owns the active obstacles: moves them, prunes them and spawns new ones.

    Spawning runs on a countdown redrawn uniformly from
    [min_spawn_ticks, max_spawn_ticks] after every spawn. reset() zeroes the
    countdown so the first step after a reset always spawns.
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[RandomSource] = None) -> None:
        self.config = config or GameConfig()
        self._rng: RandomSource = rng if rng is not None else RNG()
        self._obstacles: List[Obstacle] = []
        self._next_id = 0
        self._countdown = 0
        self.reset()

    def reset(self) -> None:
        self._obstacles = []
        self._next_id = 0
        self._countdown = 0

    @property
    def countdown(self) -> int:
        return self._countdown

    def obstacles(self) -> Sequence[Obstacle]:
        """Active obstacles in spawn order. Callers must treat them as read-only."""
        return tuple(self._obstacles)

    def dimensions(self, kind: ObstacleKind) -> Tuple[float, float]:
        if kind is ObstacleKind.BLOCK:
            return self.config.block_width, self.config.block_height
        return self.config.spike_width, self.config.spike_height

    def step(self, speed: float) -> Optional[Obstacle]:
        """Advance one tick. Returns the obstacle spawned this tick, if any."""
        for obs in self._obstacles:
            obs.position_x -= speed

        margin = self.config.prune_margin
        kept = [obs for obs in self._obstacles if obs.right_edge > margin]
        if len(kept) != len(self._obstacles):
            logger.debug("Pruned %d obstacle(s)", len(self._obstacles) - len(kept))
        self._obstacles = kept

        self._countdown -= 1
        if self._countdown > 0:
            return None
        spawned = self._spawn()
        self._countdown = self._rng.randint(self.config.min_spawn_ticks, self.config.max_spawn_ticks)
        logger.debug("Next spawn in %d ticks", self._countdown)
        return spawned

    def place(self, kind: ObstacleKind, position_x: float) -> Obstacle:
        """Insert an obstacle at an explicit x (scripted scenarios)."""
        width, height = self.dimensions(kind)
        obs = Obstacle(id=self._take_id(), position_x=position_x, width=width, height=height, kind=kind)
        self._obstacles.append(obs)
        return obs

    def _spawn(self) -> Obstacle:
        kind = ObstacleKind.BLOCK if self._rng.random() > 0.5 else ObstacleKind.SPIKE
        obs = self.place(kind, self.config.spawn_x)
        logger.debug("Spawned %s #%d at x=%.1f", kind.value, obs.id, obs.position_x)
        return obs

    def _take_id(self) -> int:
        oid = self._next_id
        self._next_id += 1
        return oid
