from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .collision import Rect
from .obstacles import ObstacleKind


@dataclass(frozen=True)
class ObstacleView:
    id: int
    position_x: float
    width: float
    height: float
    kind: ObstacleKind


@dataclass(frozen=True)
class RenderFrame:
    """Read-only snapshot handed to the renderer after each tick.

    score/high_score are raw tick counts; the display_* fields are in distance
    units (ticks // score_divisor).
    """

    state: str
    vertical_offset: float
    is_airborne: bool
    player: Rect
    obstacles: Tuple[ObstacleView, ...]
    score: int
    high_score: int
    display_score: int
    display_high_score: int
