"""Player movement system.

Handles:
- Steering toward the pointer target (with dead zone and friction)
- Sprint and stamina drain/regeneration
- Dodge impulse and its cooldown
- Position integration, field clamping and carrying the ball
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from ..core.entities import Player, RosterPlayer
from ..core.events import EventBus, EventType
from ..core.input import InputEdges, InputIntent
from ..core.state import SimulationState
from ..core.vec2 import Vec2

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

DEAD_ZONE = 20.0            # Pointer closer than this -> no steering
COAST_FRICTION = 0.8        # Velocity multiplier while not steering

STAMINA_DRAIN = 1.0         # Per frame while sprinting
STAMINA_REGEN = STAMINA_DRAIN / 2   # Per frame while not sprinting

DODGE_IMPULSE = 6.0         # Added speed away from nearest opponent
DODGE_RANDOM_SPREAD = 8.0   # Random dodge components in [-spread/2, spread/2)
DODGE_COOLDOWN_FRAMES = 60


# =============================================================================
# Movement
# =============================================================================

def advance_player(
    state: SimulationState,
    intent: InputIntent,
    edges: InputEdges,
    rng: Optional[random.Random] = None,
    bus: Optional[EventBus] = None,
) -> SimulationState:
    """Advance the controlled player by one frame.

    Order within the frame: steering or coasting, stamina, dodge, position
    integration, clamping, then the held ball follows the player.
    """
    player = state.player

    steering = _steer(player, intent)
    if not steering:
        player.velocity = player.velocity * COAST_FRICTION

    _update_stamina(player, intent, steering)

    if player.dodge_cooldown > 0:
        player.dodge_cooldown -= 1

    if edges.dodge_pressed and player.dodge_cooldown <= 0:
        impulse = dodge_impulse(player.pos, state.opponents, rng or random.Random())
        player.velocity = player.velocity + impulse
        player.dodge_cooldown = DODGE_COOLDOWN_FRAMES

        logger.debug("Dodge impulse %s at frame %d", impulse, state.clock.tick_count)
        if bus:
            bus.emit_simple(
                EventType.DODGE,
                state.clock.tick_count,
                state.clock.current_time,
                description=f"Dodge {impulse}",
                impulse=impulse.to_dict(),
            )

    player.pos = state.pitch.player_bounds.clamp(player.pos + player.velocity)

    if player.has_ball:
        state.ball.pos = player.carry_point

    return state


def _steer(player: Player, intent: InputIntent) -> bool:
    """Point velocity at the target. Returns False inside the dead zone."""
    if intent.pointer is None:
        return False

    delta = intent.pointer - player.pos
    distance = delta.length()
    if distance <= DEAD_ZONE:
        return False

    sprinting = intent.sprint and player.stamina > 0
    speed = player.sprint_speed if sprinting else player.speed

    player.velocity = delta.normalized() * speed
    player.facing = 1 if delta.x > 0 else -1
    return True


def _update_stamina(player: Player, intent: InputIntent, steering: bool) -> None:
    if intent.sprint and steering:
        player.stamina -= STAMINA_DRAIN
    elif not intent.sprint:
        player.stamina += STAMINA_REGEN

    player.stamina = max(0.0, min(player.max_stamina, player.stamina))


def nearest(origin: Vec2, roster: list[RosterPlayer]) -> Optional[RosterPlayer]:
    """Closest roster member to a point; ties go to the earliest entry."""
    if not roster:
        return None
    return min(roster, key=lambda member: origin.distance_to(member.pos))


def dodge_impulse(
    pos: Vec2,
    opponents: list[RosterPlayer],
    rng: random.Random,
) -> Vec2:
    """Velocity to add for a dodge.

    Away from the nearest opponent when there is one; a random nudge when
    the roster is empty. An opponent standing exactly on the player gives
    no direction, so no impulse.
    """
    threat = nearest(pos, opponents)
    if threat is None:
        return Vec2(
            (rng.random() - 0.5) * DODGE_RANDOM_SPREAD,
            (rng.random() - 0.5) * DODGE_RANDOM_SPREAD,
        )

    return (pos - threat.pos).normalized() * DODGE_IMPULSE
