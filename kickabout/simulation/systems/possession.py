"""Possession and shooting system.

Power shot state machine:

    Idle (holding) --shoot pressed--> Charging --shoot released--> Released

The charge level climbs while the shoot key is held; release speed is
``5 + max(0.1, level) * 10`` toward the centre of the goal. Passing plays
the ball toward the nearest teammate with a one-off impulse.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.events import EventBus, EventType
from ..core.input import InputEdges
from ..core.state import SimulationState
from ..core.vec2 import Vec2
from .movement import nearest

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

CHARGE_RATE = 0.02          # Level gained per frame while charging
MAX_CHARGE = 1.0

SHOT_BASE_SPEED = 5.0
SHOT_POWER_SPEED = 10.0     # Added at full charge
MIN_SHOT_POWER = 0.1        # An instant tap still shoots with this power

PASS_IMPULSE_FACTOR = 0.2   # Ball velocity = factor * offset to teammate


def shot_speed(level: float) -> float:
    """Release speed for a given charge level."""
    return SHOT_BASE_SPEED + max(MIN_SHOT_POWER, level) * SHOT_POWER_SPEED


# =============================================================================
# Actions
# =============================================================================

def handle_actions(
    state: SimulationState,
    edges: InputEdges,
    bus: Optional[EventBus] = None,
) -> SimulationState:
    """Apply this frame's shoot/pass edges.

    A press and a release in the same frame wind up and shoot immediately
    at minimum power, unless the release came first, in which case the
    running charge is struck and the press starts a new wind-up.
    """
    if edges.shoot_released and edges.release_first:
        release_charge(state, bus)
    if edges.shoot_pressed:
        start_charge(state, bus)
    if edges.shoot_released and not edges.release_first:
        release_charge(state, bus)
    if edges.pass_pressed:
        pass_ball(state, bus)
    return state


def start_charge(state: SimulationState, bus: Optional[EventBus] = None) -> bool:
    """Begin winding up a shot. No-op without the ball."""
    if not state.player.has_ball:
        return False

    state.charge.charging = True
    state.charge.level = 0.0

    if bus:
        bus.emit_simple(
            EventType.CHARGE_START,
            state.clock.tick_count,
            state.clock.current_time,
            description="Winding up a shot",
        )
    return True


def release_charge(state: SimulationState, bus: Optional[EventBus] = None) -> bool:
    """Release a charging shot.

    Returns True if the ball was struck. If the ball was lost during the
    wind-up the charge is simply cancelled.
    """
    charge = state.charge
    if not charge.charging:
        return False

    level = charge.level
    charge.charging = False
    charge.level = 0.0

    if not state.player.has_ball:
        logger.debug("Charge cancelled, ball no longer held")
        if bus:
            bus.emit_simple(
                EventType.CHARGE_CANCEL,
                state.clock.tick_count,
                state.clock.current_time,
                description="Shot cancelled, ball lost during wind-up",
            )
        return False

    shoot(state, level, bus)
    return True


def shoot(state: SimulationState, level: float, bus: Optional[EventBus] = None) -> Vec2:
    """Strike the ball toward the goal centre. Returns the ball velocity."""
    player = state.player
    speed = shot_speed(level)

    # Standing exactly on the aiming point gives no direction: the ball drops.
    direction = player.pos.direction_to(state.goal.center)
    velocity = direction * speed

    state.ball.velocity = velocity
    player.has_ball = False

    logger.debug("Shot at power %.2f speed %.1f", level, speed)
    if bus:
        bus.emit_simple(
            EventType.SHOT,
            state.clock.tick_count,
            state.clock.current_time,
            description=f"Shot at {level:.0%} power ({speed:.1f}/frame)",
            level=level,
            speed=speed,
        )
    return velocity


def pass_ball(state: SimulationState, bus: Optional[EventBus] = None) -> bool:
    """Play the ball toward the nearest teammate.

    No-op without the ball or without teammates.
    """
    player = state.player
    if not player.has_ball:
        return False

    target = nearest(player.pos, state.teammates)
    if target is None:
        return False

    state.ball.velocity = (target.pos - player.pos) * PASS_IMPULSE_FACTOR
    player.has_ball = False

    logger.debug("Pass toward %s", target.pos)
    if bus:
        bus.emit_simple(
            EventType.PASS,
            state.clock.tick_count,
            state.clock.current_time,
            description=f"Pass toward {target.pos}",
            target=target.pos.to_dict(),
        )
    return True


def advance_charge(state: SimulationState) -> SimulationState:
    """Charge meter step: climb while charging, capped at full power."""
    charge = state.charge
    if charge.charging:
        charge.level = min(MAX_CHARGE, charge.level + CHARGE_RATE)
    charge.level = max(0.0, min(MAX_CHARGE, charge.level))
    return state
