from __future__ import annotations

import logging
from typing import Optional

from .engine.session import SessionController

logger = logging.getLogger(__name__)


class Autopilot:
    """Headless player: jumps once the nearest obstacle ahead is within reach.

    With the default tuning a jump clears the tallest obstacle when it is
    issued 30-60 units before the obstacle's left edge meets the player.
    """

    def __init__(self, session: SessionController, reach: float = 50.0) -> None:
        self.session = session
        self.reach = reach
        self.jumps = 0

    def gap_to_next(self) -> Optional[float]:
        player = self.session.frame().player
        ahead = [o for o in self.session.generator.obstacles() if o.right_edge > player.x]
        if not ahead:
            return None
        return min(o.position_x for o in ahead) - player.right

    def __call__(self) -> None:
        if not self.session.running:
            return
        gap = self.gap_to_next()
        if gap is not None and 0 < gap <= self.reach and self.session.jump():
            self.jumps += 1
            logger.debug("Autopilot jump #%d (gap=%.1f)", self.jumps, gap)
