from .hud import HUD, format_distance, format_high_score
from .scene import WorldRenderer, to_screen

__all__ = ["HUD", "WorldRenderer", "format_distance", "format_high_score", "to_screen"]
