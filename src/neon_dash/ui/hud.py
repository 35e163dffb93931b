from __future__ import annotations

import logging
from typing import Any, Dict

from ..engine.frame import RenderFrame

logger = logging.getLogger(__name__)

# Arcade is optional for testing environments; we guard imports.
try:
    import arcade
except Exception:  # pragma: no cover - not relevant in headless tests
    arcade = None  # type: ignore

TITLE = "NEON DASH"
START_PROMPT = "Press SPACE or TAP to Start"
GAME_OVER = "GAME OVER"
RETRY_PROMPT = "Press SPACE or TAP to try again"

WHITE = (255, 255, 255)
GREY = (156, 163, 175)
NEON_BLUE = (0, 243, 255)
NEON_PURPLE = (188, 19, 254)
RED = (239, 68, 68)


def format_distance(value: int) -> str:
    return f"{value:05d} m"


def format_high_score(value: int) -> str:
    return f"HI: {value:05d}"


class HUD:
    """
    Score board plus the start and game-over overlays.

    get_display_data() exposes the text for logic tests; draw() renders it with
    Arcade when available.
    """

    def get_display_data(self, frame: RenderFrame) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "distance": format_distance(frame.display_score),
            "high_score": format_high_score(frame.display_high_score),
            "overlay": None,
        }
        if frame.state == "idle":
            data["overlay"] = {"title": TITLE, "prompt": START_PROMPT}
        elif frame.state == "ended":
            data["overlay"] = {
                "title": GAME_OVER,
                "score": f"Score: {frame.display_score}",
                "prompt": RETRY_PROMPT,
            }
        return data

    def draw(self, frame: RenderFrame, window_width: int, window_height: int) -> None:  # pragma: no cover - visual
        if arcade is None:
            logger.debug("Arcade not available; HUD draw() is a no-op in this environment.")
            return

        data = self.get_display_data(frame)
        right = window_width - 16
        arcade.draw_text(data["distance"], right, window_height - 40, WHITE, 22, anchor_x="right", bold=True)
        arcade.draw_text(data["high_score"], right, window_height - 62, GREY, 12, anchor_x="right")

        overlay = data["overlay"]
        if overlay is None:
            return
        arcade.draw_lrbt_rectangle_filled(0, window_width, 0, window_height, (0, 0, 0, 170))
        cx = window_width / 2
        cy = window_height / 2
        if frame.state == "idle":
            arcade.draw_text(overlay["title"], cx, cy + 30, NEON_BLUE, 48, anchor_x="center", bold=True)
            arcade.draw_text(overlay["prompt"], cx, cy - 20, WHITE, 18, anchor_x="center")
        else:
            arcade.draw_text(overlay["title"], cx, cy + 40, RED, 36, anchor_x="center", bold=True)
            arcade.draw_text(overlay["score"], cx, cy, WHITE, 22, anchor_x="center")
            arcade.draw_text(overlay["prompt"], cx, cy - 40, NEON_PURPLE, 16, anchor_x="center")
