from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, List, Optional

from ..config import GameConfig
from ..errors import PersistenceError
from ..persistence.store import HighScoreStore
from .collision import first_overlap, player_box
from .events import SessionEvent
from .frame import ObstacleView, RenderFrame
from .loop import FrameScheduler
from .obstacles import ObstacleGenerator
from .physics import PhysicsBody
from .rng import RandomSource

logger = logging.getLogger(__name__)

Listener = Callable[[SessionEvent, "SessionController"], None]


class SessionState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class SessionController:
    """Owns the canonical game state and the Idle -> Running -> Ended cycle.

    While Running, exactly one tick is pending on the frame scheduler at a
    time. Each tick runs physics, then obstacles, then collision; a clean tick
    adds one to the score and requests the next frame, a collision ends the
    session. Leaving Running always cancels the pending frame so a stale tick
    can never touch a freshly reset session.

    The high score is loaded once here and written back only when a finished
    session beats it.
    """

    def __init__(
        self,
        store: HighScoreStore,
        config: Optional[GameConfig] = None,
        rng: Optional[RandomSource] = None,
        scheduler: Optional[FrameScheduler] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.store = store
        self.scheduler = scheduler or FrameScheduler()
        self.body = PhysicsBody(self.config)
        self.generator = ObstacleGenerator(self.config, rng)
        self.state: SessionState = SessionState.IDLE
        self.score: int = 0
        self.high_score: int = self._load_high_score()
        self._pending: Optional[int] = None
        self._listeners: List[Listener] = []
        logger.info("Session ready (high_score=%d)", self.high_score)

    # --- Listeners ---
    def add_listener(self, listener: Listener) -> None:
        """Subscribe to session events (start, tick, end, new high score)."""
        self._listeners.append(listener)

    def _emit(self, event: SessionEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception as ex:  # listeners must not break the tick loop
                logger.exception("Listener errored on %s: %s", event, ex)

    # --- Commands ---
    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    def start(self) -> bool:
        """Begin a new round from Idle or Ended. Ignored while Running."""
        if self.running:
            logger.debug("start() ignored; session already running")
            return False
        self._cancel_pending()
        self.score = 0
        self.body.reset()
        self.generator.reset()
        self.state = SessionState.RUNNING
        self._request_tick()
        logger.info("Session started")
        self._emit(SessionEvent.STARTED)
        return True

    def jump(self) -> bool:
        if not self.running:
            logger.debug("jump() ignored in state %s", self.state.value)
            return False
        return self.body.jump()

    def abandon(self) -> None:
        """Leave Running without a collision (e.g., window closed). High score untouched."""
        if not self.running:
            return
        self._cancel_pending()
        self.state = SessionState.IDLE
        logger.info("Session abandoned at score=%d", self.score)
        self._emit(SessionEvent.ABANDONED)

    # --- Tick pipeline ---
    def tick(self) -> bool:
        """Run one simulation step. Returns True if the player collided."""
        if not self.running:
            logger.debug("tick() ignored in state %s", self.state.value)
            return False

        self.body.step()
        self.generator.step(self.config.run_speed)
        box = player_box(self.body.state.vertical_offset, self.config)
        hit = first_overlap(box, self.generator.obstacles())
        if hit is not None:
            logger.debug("Collision with %s #%d at x=%.1f", hit.kind.value, hit.id, hit.position_x)
            self._end()
            return True

        self.score += 1
        self._emit(SessionEvent.TICKED)
        self._request_tick()
        return False

    def _on_frame(self) -> None:
        self._pending = None
        self.tick()

    def _request_tick(self) -> None:
        if self._pending is None and self.running:
            self._pending = self.scheduler.request_frame(self._on_frame)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self.scheduler.cancel_frame(self._pending)
            self._pending = None

    def _end(self) -> None:
        self._cancel_pending()
        self.state = SessionState.ENDED
        logger.info("Session ended (score=%d, high_score=%d)", self.score, self.high_score)
        if self.score > self.high_score:
            self.high_score = self.score
            self._save_high_score(self.score)
            self._emit(SessionEvent.HIGH_SCORE)
        self._emit(SessionEvent.ENDED)

    # --- Persistence ---
    def _load_high_score(self) -> int:
        value = self.store.load_high_score()
        return int(value) if value is not None and value > 0 else 0

    def _save_high_score(self, score: int) -> None:
        try:
            self.store.save_high_score(score)
        except PersistenceError as exc:
            logger.error("High score not persisted: %s", exc)

    # --- Rendering ---
    def display_value(self, ticks: int) -> int:
        return ticks // self.config.score_divisor

    def frame(self) -> RenderFrame:
        s = self.body.state
        return RenderFrame(
            state=self.state.value,
            vertical_offset=s.vertical_offset,
            is_airborne=s.is_airborne,
            player=player_box(s.vertical_offset, self.config),
            obstacles=tuple(
                ObstacleView(o.id, o.position_x, o.width, o.height, o.kind)
                for o in self.generator.obstacles()
            ),
            score=self.score,
            high_score=self.high_score,
            display_score=self.display_value(self.score),
            display_high_score=self.display_value(self.high_score),
        )
