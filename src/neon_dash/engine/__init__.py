"""
Pure game logic: physics, obstacles, collision and the session state machine.

Nothing in this package imports Arcade, so it runs headless and in tests.
"""
from .collision import Rect, intersects, obstacle_box, overlaps, player_box
from .events import SessionEvent
from .frame import ObstacleView, RenderFrame
from .loop import FrameLoop, FrameScheduler, LoopConfig
from .obstacles import Obstacle, ObstacleGenerator, ObstacleKind
from .physics import PhysicsBody, PlayerState
from .rng import RNG, RandomSource
from .session import SessionController, SessionState

__all__ = [
    "FrameLoop",
    "FrameScheduler",
    "LoopConfig",
    "Obstacle",
    "ObstacleGenerator",
    "ObstacleKind",
    "ObstacleView",
    "PhysicsBody",
    "PlayerState",
    "RNG",
    "RandomSource",
    "Rect",
    "RenderFrame",
    "SessionController",
    "SessionEvent",
    "SessionState",
    "intersects",
    "obstacle_box",
    "overlaps",
    "player_box",
]
