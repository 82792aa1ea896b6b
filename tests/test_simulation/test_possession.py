"""Tests for shooting and passing."""

import pytest

from kickabout.simulation.core.entities import RosterPlayer
from kickabout.simulation.core.events import EventType
from kickabout.simulation.core.input import InputEdges
from kickabout.simulation.core.vec2 import Vec2
from kickabout.simulation.systems.possession import (
    advance_charge,
    handle_actions,
    pass_ball,
    release_charge,
    shoot,
    shot_speed,
    start_charge,
)


PRESS = InputEdges(shoot_pressed=True)
RELEASE = InputEdges(shoot_released=True)


class TestShotSpeed:
    """Release speed is 5 + max(0.1, level) * 10."""

    def test_minimum_power(self):
        assert shot_speed(0.0) == pytest.approx(6.0)

    def test_half_power(self):
        assert shot_speed(0.5) == pytest.approx(10.0)

    def test_full_power(self):
        assert shot_speed(1.0) == pytest.approx(15.0)


class TestCharge:
    """Wind-up state machine."""

    def test_press_with_ball_starts_charging(self, state):
        handle_actions(state, PRESS)

        assert state.charge.charging
        assert state.charge.level == 0

    def test_press_without_ball_is_ignored(self, state):
        state.player.has_ball = False

        handle_actions(state, PRESS)

        assert not state.charge.charging

    def test_level_climbs_and_caps(self, state):
        start_charge(state)
        for _ in range(10):
            advance_charge(state)
        assert state.charge.level == pytest.approx(0.2)

        for _ in range(100):
            advance_charge(state)
        assert state.charge.level == 1.0

    def test_level_does_not_climb_when_idle(self, state):
        advance_charge(state)
        assert state.charge.level == 0

    def test_full_charge_shot_toward_goal_centre(self, state):
        start_charge(state)
        for _ in range(50):
            advance_charge(state)

        handle_actions(state, RELEASE)

        velocity = state.ball.velocity
        assert velocity.length() == pytest.approx(15.0)
        # Player at (150, 300), goal centre at (740, 300)
        assert velocity.x == pytest.approx(15.0)
        assert velocity.y == pytest.approx(0.0)
        assert not state.player.has_ball
        assert not state.charge.charging
        assert state.charge.level == 0

    def test_angled_shot_aims_at_goal_centre(self, state):
        state.player.pos = Vec2(440, 400)
        start_charge(state)

        handle_actions(state, RELEASE)

        expected = (state.goal.center - state.player.pos).normalized() * 6
        assert state.ball.velocity.x == pytest.approx(expected.x)
        assert state.ball.velocity.y == pytest.approx(expected.y)

    def test_tap_shoots_at_minimum_power(self, state):
        handle_actions(state, InputEdges(shoot_pressed=True, shoot_released=True))

        assert state.ball.velocity.length() == pytest.approx(6.0)
        assert not state.player.has_ball

    def test_release_then_press_strikes_charged_shot(self, state):
        start_charge(state)
        for _ in range(50):
            advance_charge(state)

        handle_actions(state, InputEdges(shoot_pressed=True, shoot_released=True, release_first=True))

        assert state.ball.velocity.length() == pytest.approx(15.0)
        assert not state.player.has_ball
        assert not state.charge.charging

    def test_release_after_losing_ball_cancels(self, state, bus):
        start_charge(state)
        state.player.has_ball = False
        state.ball.velocity = Vec2(3, 0)

        struck = release_charge(state, bus)

        assert not struck
        assert not state.charge.charging
        assert state.ball.velocity == Vec2(3, 0)
        assert len(bus.get_events_by_type(EventType.CHARGE_CANCEL)) == 1

    def test_release_without_charge_is_ignored(self, state):
        assert not release_charge(state)
        assert state.player.has_ball

    def test_shot_from_aiming_point_drops_ball(self, state):
        state.player.pos = state.goal.center

        velocity = shoot(state, 1.0)

        assert velocity == Vec2(0, 0)
        assert not state.player.has_ball

    def test_shot_event_carries_power(self, state, bus):
        start_charge(state, bus)
        state.charge.level = 0.5
        release_charge(state, bus)

        shots = bus.get_events_by_type(EventType.SHOT)
        assert len(shots) == 1
        assert shots[0].data["level"] == 0.5
        assert shots[0].data["speed"] == pytest.approx(10.0)


class TestPass:
    """Passing to the nearest teammate."""

    def test_pass_to_nearest_teammate(self, state):
        # Teammates at (200, 150) and (250, 350); the second is closer
        handle_actions(state, InputEdges(pass_pressed=True))

        assert state.ball.velocity.x == pytest.approx(20.0)
        assert state.ball.velocity.y == pytest.approx(10.0)
        assert not state.player.has_ball

    def test_pass_without_teammates_is_ignored(self, empty_state):
        assert not pass_ball(empty_state)
        assert empty_state.player.has_ball
        assert empty_state.ball.velocity == Vec2(0, 0)

    def test_pass_without_ball_is_ignored(self, state):
        state.player.has_ball = False

        assert not pass_ball(state)
        assert state.ball.velocity == Vec2(0, 0)

    def test_pass_emits_event(self, state, bus):
        state.teammates = [RosterPlayer(Vec2(300, 300))]

        pass_ball(state, bus)

        passes = bus.get_events_by_type(EventType.PASS)
        assert len(passes) == 1
        assert passes[0].data["target"] == {"x": 300, "y": 300}
