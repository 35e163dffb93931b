from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..config import GameConfig
from .obstacles import Obstacle


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box in the world frame (y grows downward, ground at y = 0)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


def player_box(vertical_offset: float, config: GameConfig) -> Rect:
    """Box of the player sprite. Used by both the renderer and the detector."""
    size = config.player_size
    return Rect(config.player_x, vertical_offset - size, size, size)


def obstacle_box(obstacle: Obstacle) -> Rect:
    """Obstacles stand on the ground line."""
    return Rect(obstacle.position_x, -obstacle.height, obstacle.width, obstacle.height)


def intersects(a: Rect, b: Rect) -> bool:
    """Strict AABB test; boxes that only share an edge do not intersect."""
    return a.x < b.right and a.right > b.x and a.y < b.bottom and a.bottom > b.y


def first_overlap(player: Rect, obstacles: Iterable[Obstacle]) -> Optional[Obstacle]:
    for obs in obstacles:
        if intersects(player, obstacle_box(obs)):
            return obs
    return None


def overlaps(player: Rect, obstacles: Iterable[Obstacle]) -> bool:
    """True if the player box hits any obstacle, checked in spawn order."""
    return first_overlap(player, obstacles) is not None
