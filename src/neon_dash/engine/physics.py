from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..config import GameConfig

logger = logging.getLogger(__name__)


@dataclass
class PlayerState:
    """Vertical state of the runner.

    vertical_offset is 0 on the ground and negative while airborne.
    """

    vertical_offset: float = 0.0
    vertical_velocity: float = 0.0
    is_airborne: bool = False


class PhysicsBody:
    """Single-axis integrator under constant gravity with a hard ground floor."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.state = PlayerState()

    def reset(self) -> None:
        self.state = PlayerState()

    def step(self) -> None:
        """Advance one tick.

        Position integrates the current velocity first. Landing clamps the offset
        to exactly 0 and skips gravity for that tick; otherwise gravity feeds the
        next tick's velocity.
        """
        s = self.state
        s.vertical_offset += s.vertical_velocity
        if self.land_if_at_or_below_ground():
            return
        s.vertical_velocity += self.config.gravity
        s.is_airborne = True

    def land_if_at_or_below_ground(self) -> bool:
        """Clamp to the ground if the offset reached or passed it. Returns True on contact."""
        s = self.state
        if s.vertical_offset < 0:
            return False
        if s.is_airborne:
            logger.debug("Landed with velocity %.2f", s.vertical_velocity)
        s.vertical_offset = 0.0
        s.is_airborne = False
        return True

    def jump(self) -> bool:
        """Apply the jump impulse if grounded. Returns False (no-op) while airborne."""
        s = self.state
        if s.is_airborne:
            return False
        s.vertical_velocity = self.config.jump_impulse
        s.is_airborne = True
        return True
