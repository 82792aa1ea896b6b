"""Scripted AI for opponents and teammates.

Both updates are pure: they take the player's position and the current
roster and return a new roster, leaving the input untouched.

Opponents chase the player directly. Teammates ease toward an open spot
ahead of the player, one lane per teammate.
"""

from __future__ import annotations

from dataclasses import replace

from ..core.entities import RosterPlayer
from ..core.field import Field
from ..core.state import SimulationState
from ..core.vec2 import Vec2


# =============================================================================
# Constants
# =============================================================================

CHASE_SPEED = 1.5
CHASE_STOP_DISTANCE = 30.0      # Closer than this -> brake instead of chase
CHASE_BRAKE = 0.5

SUPPORT_GAIN = 0.02             # Proportional gain toward the open spot
SUPPORT_LEAD_X = 100.0          # Open spot sits this far ahead of the player
SUPPORT_STAGGER_X = 50.0        # ...plus this much per teammate index


def advance_opponents(
    player_pos: Vec2,
    opponents: list[RosterPlayer],
    pitch: Field,
) -> list[RosterPlayer]:
    """Move each opponent one frame toward the player."""
    bounds = pitch.player_bounds
    updated = []

    for opponent in opponents:
        delta = player_pos - opponent.pos
        distance = delta.length()

        if distance > CHASE_STOP_DISTANCE:
            velocity = delta.normalized() * CHASE_SPEED
        else:
            velocity = opponent.velocity * CHASE_BRAKE

        updated.append(replace(
            opponent,
            pos=bounds.clamp(opponent.pos + velocity),
            velocity=velocity,
        ))

    return updated


def open_position(player_pos: Vec2, index: int, pitch: Field) -> Vec2:
    """Where teammate ``index`` tries to get open."""
    return Vec2(
        player_pos.x + SUPPORT_LEAD_X + index * SUPPORT_STAGGER_X,
        pitch.height / 4 * (index + 1),
    )


def advance_teammates(
    player_pos: Vec2,
    teammates: list[RosterPlayer],
    pitch: Field,
) -> list[RosterPlayer]:
    """Ease each teammate one frame toward its open position."""
    bounds = pitch.teammate_bounds
    updated = []

    for index, teammate in enumerate(teammates):
        target = open_position(player_pos, index, pitch)
        velocity = (target - teammate.pos) * SUPPORT_GAIN

        updated.append(replace(
            teammate,
            pos=bounds.clamp(teammate.pos + velocity),
            velocity=velocity,
        ))

    return updated


def advance_ai(state: SimulationState) -> SimulationState:
    """AI step: replace both rosters with their next-frame versions."""
    player_pos = state.player.pos
    state.opponents = advance_opponents(player_pos, state.opponents, state.pitch)
    state.teammates = advance_teammates(player_pos, state.teammates, state.pitch)
    return state
