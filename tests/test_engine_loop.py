from __future__ import annotations

from neon_dash.engine.loop import FrameLoop, FrameScheduler, LoopConfig


def test_pump_runs_only_frames_requested_before_it():
    scheduler = FrameScheduler()
    calls = []

    def again():
        calls.append(scheduler.frames)
        scheduler.request_frame(again)

    scheduler.request_frame(again)
    assert scheduler.pump() == 1
    assert scheduler.pump() == 1
    assert calls == [1, 2]


def test_cancelled_frame_never_runs():
    scheduler = FrameScheduler()
    calls = []
    handle = scheduler.request_frame(lambda: calls.append("stale"))
    scheduler.cancel_frame(handle)
    scheduler.cancel_frame(handle)  # cancelling twice is harmless
    assert scheduler.pump() == 0
    assert calls == []
    assert not scheduler.has_pending()


def test_handles_are_unique():
    scheduler = FrameScheduler()
    a = scheduler.request_frame(lambda: None)
    b = scheduler.request_frame(lambda: None)
    assert a != b
    scheduler.cancel_frame(a)
    assert scheduler.pump() == 1


def test_loop_runs_exact_steps():
    loop = FrameLoop(FrameScheduler(), LoopConfig(tick_rate=0, max_steps=5))
    assert loop.run() == 5
    assert loop.step == 5
    assert loop.running is False


def test_loop_stops_on_condition_and_calls_on_frame():
    seen = []
    loop = FrameLoop(FrameScheduler(), LoopConfig(tick_rate=0, max_steps=100))
    loop.run(on_frame=lambda: seen.append(loop.step), until=lambda: len(seen) >= 3)
    assert seen == [1, 2, 3]
    assert loop.step == 3
