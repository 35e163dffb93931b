from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)

FrameCallback = Callable[[], None]


class FrameScheduler:
    """Display-refresh style callback queue.

    request_frame() queues a callback for the next pump(); cancel_frame() drops
    it. A pump only runs callbacks that were requested before it started, so a
    callback that requests another frame waits for the following pump.
    """

    def __init__(self) -> None:
        self._pending: Dict[int, FrameCallback] = {}
        self._next_handle = 1
        self._frames = 0

    @property
    def frames(self) -> int:
        return self._frames

    def has_pending(self) -> bool:
        return bool(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        if self._pending.pop(handle, None) is not None:
            logger.debug("Cancelled frame handle %d", handle)

    def pump(self) -> int:
        """Run one frame. Returns how many callbacks ran."""
        self._frames += 1
        due = list(self._pending.items())
        self._pending.clear()
        ran = 0
        for _, callback in due:
            callback()
            ran += 1
        return ran


@dataclass
class LoopConfig:
    """Configuration for the headless frame loop.

    Attributes:
        tick_rate: Target frames per second. If 0 or None, pumps as fast as possible.
        max_steps: If provided and > 0, the loop stops after this many frames.
    """

    tick_rate: float = 60.0
    max_steps: Optional[int] = None


class FrameLoop:
    """Blocking, headless stand-in for a display refresh loop.

    Each iteration pumps the scheduler once and then calls on_frame (used by the
    headless runner to feed input). The loop stops when stop() is called, when
    max_steps is reached, or when until() returns True.
    """

    def __init__(self, scheduler: FrameScheduler, config: Optional[LoopConfig] = None) -> None:
        self.scheduler = scheduler
        self.config = config or LoopConfig()
        self._running = False
        self._step = 0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def step(self) -> int:
        return self._step

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        logger.info("FrameLoop stopped at step=%s", self._step)

    def run(
        self,
        on_frame: Optional[FrameCallback] = None,
        until: Optional[Callable[[], bool]] = None,
    ) -> int:
        """Run until stopped. Returns the number of frames pumped."""
        self._running = True
        self._step = 0
        target_dt = 0.0
        if self.config.tick_rate and self.config.tick_rate > 0:
            target_dt = 1.0 / float(self.config.tick_rate)
        logger.info("FrameLoop started (tick_rate=%s, max_steps=%s)", self.config.tick_rate, self.config.max_steps)

        while self._running:
            started = time.perf_counter()
            self.scheduler.pump()
            self._step += 1
            if on_frame is not None:
                on_frame()

            if until is not None and until():
                self.stop()
            elif self.config.max_steps is not None and self._step >= self.config.max_steps:
                self.stop()

            if target_dt > 0 and self._running:
                remaining = target_dt - (time.perf_counter() - started)
                if remaining > 0:
                    time.sleep(remaining)

        logger.info("Loop complete (steps=%d)", self._step)
        return self._step
