from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .autopilot import Autopilot
from .config import GameConfig, load_config
from .engine.loop import FrameLoop, FrameScheduler, LoopConfig
from .engine.rng import RNG
from .engine.session import SessionController, SessionState
from .input.router import InputRouter
from .persistence import HighScoreStore, JsonHighScoreStore, high_score_path

logger = logging.getLogger(__name__)

WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Neon Dash"

# Safety bound for CI/headless runs when no max_steps is given
HEADLESS_DEFAULT_STEPS = 600


def _arcade_available() -> bool:
    try:
        import arcade  # noqa: F401
        return True
    except Exception:
        return False


def build_session(
    config: Optional[GameConfig] = None,
    seed: Optional[int] = None,
    store: Optional[HighScoreStore] = None,
    scheduler: Optional[FrameScheduler] = None,
) -> SessionController:
    """Wire a SessionController with its default collaborators."""
    return SessionController(
        store=store if store is not None else JsonHighScoreStore(high_score_path()),
        config=config or GameConfig(),
        rng=RNG(seed),
        scheduler=scheduler or FrameScheduler(),
    )


def run_gui(
    max_steps: Optional[int] = None,
    tick_rate: float = 60.0,
    seed: Optional[int] = None,
    config_path: Optional[Path] = None,
) -> int:
    """Open the Arcade window if available, otherwise fall back to headless.

    Returns:
        Process exit code (0 on success).
    """
    if not _arcade_available():
        logger.warning("Arcade not available; falling back to headless mode")
        return run_headless(max_steps=max_steps, tick_rate=tick_rate, seed=seed, config_path=config_path)

    import arcade

    from .ui.hud import HUD
    from .ui.scene import BACKGROUND, WorldRenderer

    session = build_session(load_config(config_path), seed=seed)
    key_names = {arcade.key.SPACE: "SPACE", arcade.key.UP: "UP", arcade.key.ESCAPE: "ESCAPE"}

    class GameWindow(arcade.Window):
        def __init__(self) -> None:
            update_rate = 1.0 / tick_rate if tick_rate and tick_rate > 0 else 1.0 / 60.0
            super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, title=WINDOW_TITLE, update_rate=update_rate)
            self.background_color = BACKGROUND
            self.session = session
            self.router = InputRouter(session, on_quit=self.close)
            self.world = WorldRenderer()
            self.hud = HUD()
            self.frames = 0

        def on_draw(self):
            self.clear()
            frame = self.session.frame()
            self.world.draw(frame, self.width, self.height)
            self.hud.draw(frame, self.width, self.height)

        def on_update(self, delta_time: float):
            # One display refresh: run whatever tick the session has pending
            self.session.scheduler.pump()
            self.frames += 1
            if max_steps is not None and self.frames >= max_steps:
                self.session.abandon()
                self.close()

        def on_key_press(self, symbol: int, modifiers: int):
            name = key_names.get(symbol)
            if name is not None:
                self.router.key_press(name)

        def on_key_release(self, symbol: int, modifiers: int):
            name = key_names.get(symbol)
            if name is not None:
                self.router.key_release(name)

        def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
            self.router.touch()

    window = GameWindow()
    try:
        logger.info("Launching Arcade window")
        arcade.run()
        logger.info("Arcade loop finished")
        return 0
    except Exception:
        logger.exception("Unhandled exception in GUI loop; exiting with code 1")
        return 1
    finally:
        session.abandon()
        try:
            window.close()
        except Exception:
            logger.debug("Window already closed")


def run_headless(
    max_steps: Optional[int] = None,
    tick_rate: float = 0.0,
    seed: Optional[int] = None,
    config_path: Optional[Path] = None,
    store: Optional[HighScoreStore] = None,
) -> int:
    """Play one round in the console with the autopilot.

    The round ends on the first collision or after max_steps frames.
    """
    if max_steps is None:
        max_steps = HEADLESS_DEFAULT_STEPS

    print("Neon Dash (headless)")

    scheduler = FrameScheduler()
    session = build_session(load_config(config_path), seed=seed, store=store, scheduler=scheduler)
    pilot = Autopilot(session)
    loop = FrameLoop(scheduler, LoopConfig(tick_rate=tick_rate, max_steps=max_steps))
    session.start()
    try:
        loop.run(on_frame=pilot, until=lambda: not session.running)
    except KeyboardInterrupt:
        session.abandon()
        print("Interrupted by user")
        return 130
    except Exception:
        logger.exception("Unhandled exception in headless loop")
        return 1

    outcome = "crashed" if session.state is SessionState.ENDED else "survived"
    session.abandon()
    print(
        f"Run complete ({outcome}, ticks={session.score}, "
        f"distance={session.display_value(session.score)} m, "
        f"best={session.display_value(session.high_score)} m, jumps={pilot.jumps})"
    )
    return 0


def run_auto(**kwargs) -> int:
    """Run GUI if available and not explicitly overridden, else headless.

    Honors NEON_DASH_HEADLESS=1 to force headless.
    """
    if os.getenv("NEON_DASH_HEADLESS") == "1":
        return run_headless(**kwargs)
    return run_gui(**kwargs)
