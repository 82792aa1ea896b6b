"""Ball physics for a free ball.

Each frame a loose ball moves by its velocity and loses 2% of it to
friction. Goal and touchline checks run in that order; either one resets
the play. A slow ball close to the player is picked up.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.events import EventBus, EventType
from ..core.state import SimulationState, reset_play
from ..core.vec2 import Vec2

logger = logging.getLogger(__name__)


BALL_FRICTION = 0.98
PICKUP_RADIUS = 25.0


def advance_ball(state: SimulationState, bus: Optional[EventBus] = None) -> SimulationState:
    """Integrate a free ball and resolve goal, out-of-bounds and pickup.

    Does nothing while the player holds the ball.
    """
    if state.player.has_ball:
        return state

    ball = state.ball
    ball.pos = ball.pos + ball.velocity
    ball.velocity = ball.velocity * BALL_FRICTION

    if state.goal.contains(ball.pos):
        state.score.home += 1
        logger.info("Goal! Score now %s", state.score.format())
        if bus:
            bus.emit_simple(
                EventType.GOAL,
                state.clock.tick_count,
                state.clock.current_time,
                description=f"Goal! {state.score.format()}",
                position=ball.pos.to_dict(),
                home=state.score.home,
                away=state.score.away,
            )
        reset_play(state, bus, reason="goal")
        return state

    if not state.pitch.is_in_bounds(ball.pos):
        logger.debug("Ball out of bounds at %s", ball.pos)
        if bus:
            bus.emit_simple(
                EventType.OUT_OF_BOUNDS,
                state.clock.tick_count,
                state.clock.current_time,
                description=f"Ball out of play at {ball.pos}",
                position=ball.pos.to_dict(),
            )
        reset_play(state, bus, reason="out of bounds")
        return state

    if ball.is_slow and ball.pos.distance_to(state.player.pos) < PICKUP_RADIUS:
        state.player.has_ball = True
        ball.velocity = Vec2.zero()
        if bus:
            bus.emit_simple(
                EventType.PICKUP,
                state.clock.tick_count,
                state.clock.current_time,
                description=f"Player collects the ball ({state.pitch.describe_position(ball.pos)})",
                position=ball.pos.to_dict(),
            )

    return state
