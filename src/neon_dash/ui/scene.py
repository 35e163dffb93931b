from __future__ import annotations

import logging
from typing import Tuple

from ..engine.collision import Rect, obstacle_box
from ..engine.frame import RenderFrame
from ..engine.obstacles import ObstacleKind

logger = logging.getLogger(__name__)

try:
    import arcade
except Exception:  # pragma: no cover - optional in tests
    arcade = None  # type: ignore

# Screen y of the ground line, measured from the bottom of the window.
GROUND_PX = 80

BACKGROUND = (15, 23, 42)
NEON_BLUE = (0, 243, 255)
NEON_PINK = (255, 0, 255)
NEON_GREEN = (0, 255, 159)
NEON_PURPLE = (188, 19, 254)
GRID = (79, 79, 79, 46)

LRBT = Tuple[float, float, float, float]


def to_screen(box: Rect, ground_px: float = GROUND_PX) -> LRBT:
    """Map a world box (y down, ground at 0) to Arcade's (left, right, bottom, top)."""
    return box.x, box.right, ground_px - box.bottom, ground_px - box.y


class WorldRenderer:
    """Draws the ground, the player and the obstacles of a RenderFrame.

    Sprite placement goes through to_screen() on the very boxes the collision
    detector uses, so what is drawn is what is hit-tested.
    """

    def __init__(self, ground_px: float = GROUND_PX, grid_px: int = 64) -> None:
        self.ground_px = ground_px
        self.grid_px = grid_px

    def draw(self, frame: RenderFrame, window_width: int, window_height: int) -> None:  # pragma: no cover - visual
        if arcade is None:
            logger.debug("Arcade not available; WorldRenderer.draw() is a no-op.")
            return
        for x in range(0, window_width, self.grid_px):
            arcade.draw_line(x, 0, x, window_height, GRID, 1)
        for y in range(0, window_height, self.grid_px):
            arcade.draw_line(0, y, window_width, y, GRID, 1)
        arcade.draw_line(0, self.ground_px, window_width, self.ground_px, NEON_BLUE, 2)

        for obs in frame.obstacles:
            left, right, bottom, top = to_screen(obstacle_box(obs), self.ground_px)
            if right < 0 or left > window_width:
                continue
            if obs.kind is ObstacleKind.SPIKE:
                arcade.draw_triangle_filled(left, bottom, right, bottom, (left + right) / 2, top, NEON_PURPLE)
            else:
                arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, NEON_GREEN)

        left, right, bottom, top = to_screen(frame.player, self.ground_px)
        arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, (0, 0, 0))
        arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, NEON_PINK, 2)
        inset = 8
        arcade.draw_lrbt_rectangle_filled(left + inset, right - inset, bottom + inset, top - inset, (255, 0, 255, 128))
