from __future__ import annotations

import pytest

from neon_dash.config import GameConfig
from neon_dash.engine.physics import PhysicsBody


def test_grounded_body_stays_on_ground():
    body = PhysicsBody()
    for _ in range(100):
        body.step()
        assert body.state.vertical_offset == 0
        assert body.state.is_airborne is False


def test_ground_clamp_after_landing_without_jumps():
    body = PhysicsBody()
    body.jump()
    landed_at = None
    for i in range(200):
        body.step()
        assert body.state.vertical_offset <= 0
        if landed_at is None and not body.state.is_airborne:
            landed_at = i
        if landed_at is not None:
            assert body.state.vertical_offset == 0
    assert landed_at is not None


def test_jump_applies_impulse_once():
    cfg = GameConfig()
    body = PhysicsBody(cfg)
    assert body.jump() is True
    assert body.state.vertical_velocity == cfg.jump_impulse
    assert body.state.is_airborne is True

    body.step()
    velocity = body.state.vertical_velocity
    assert body.jump() is False
    assert body.state.vertical_velocity == velocity


def test_double_jump_before_any_step_is_ignored():
    body = PhysicsBody()
    body.jump()
    before = body.state.vertical_velocity
    body.jump()
    assert body.state.vertical_velocity == before


def test_first_airborne_tick_moves_by_impulse_then_gravity():
    cfg = GameConfig()
    body = PhysicsBody(cfg)
    body.jump()
    body.step()
    assert body.state.vertical_offset == pytest.approx(cfg.jump_impulse)
    assert body.state.vertical_velocity == pytest.approx(cfg.jump_impulse + cfg.gravity)


def test_jump_trajectory_is_symmetric():
    cfg = GameConfig()
    body = PhysicsBody(cfg)
    body.jump()
    launch_speed = abs(body.state.vertical_velocity)
    apex = 0.0
    ticks = 0
    while True:
        body.step()
        ticks += 1
        apex = min(apex, body.state.vertical_offset)
        if not body.state.is_airborne:
            break
        assert ticks < 1000
    landing_speed = abs(body.state.vertical_velocity)
    assert body.state.vertical_offset == 0
    assert abs(landing_speed - launch_speed) <= cfg.gravity + 1e-9
    # 35 ticks in the air with the default tuning; apex at tick 17
    assert ticks == 35
    assert apex == pytest.approx(-88.4, abs=0.05)


def test_land_if_at_or_below_ground_reports_contact():
    body = PhysicsBody()
    body.state.vertical_offset = 3.0
    body.state.is_airborne = True
    assert body.land_if_at_or_below_ground() is True
    assert body.state.vertical_offset == 0
    assert body.state.is_airborne is False

    body.state.vertical_offset = -1.0
    assert body.land_if_at_or_below_ground() is False
    assert body.state.vertical_offset == -1.0


def test_jump_allowed_again_after_landing():
    body = PhysicsBody()
    body.jump()
    while True:
        body.step()
        if not body.state.is_airborne:
            break
    assert body.jump() is True


def test_reset_zeroes_state():
    body = PhysicsBody()
    body.jump()
    body.step()
    body.reset()
    assert body.state.vertical_offset == 0
    assert body.state.vertical_velocity == 0
    assert body.state.is_airborne is False
