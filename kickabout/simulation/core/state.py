"""SimulationState - the single owned value every system reads and writes.

There is no module-level game state. The orchestrator owns one
``SimulationState`` and passes it explicitly to each system, which makes
every frame reproducible in tests without a display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from .clock import Clock
from .entities import (
    BALL_CARRY_OFFSET,
    Ball,
    Player,
    RosterPlayer,
    Score,
    ShotCharge,
    ShotClock,
    default_opponents,
    default_teammates,
)
from .events import EventBus, EventType
from .field import DEFAULT_FIELD_HEIGHT, DEFAULT_FIELD_WIDTH, Field, Goal
from .vec2 import Vec2

logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    """Complete simulation state for one session.

    Attributes:
        pitch: Playing area extents
        goal: Scoring rectangle
        player: The human-controlled player
        ball: The ball
        opponents: Scripted defenders (fixed roster)
        teammates: Scripted attackers (fixed roster)
        score: Home/away counters
        charge: Power-shot wind-up
        shot_clock: Possession countdown (never counted down)
        clock: Frame counter
        running: Session has been started and not stopped
    """
    pitch: Field = field(default_factory=Field)
    goal: Goal = field(default_factory=Goal)
    player: Player = field(default_factory=Player)
    ball: Ball = field(default_factory=Ball)
    opponents: list[RosterPlayer] = field(default_factory=list)
    teammates: list[RosterPlayer] = field(default_factory=list)
    score: Score = field(default_factory=Score)
    charge: ShotCharge = field(default_factory=ShotCharge)
    shot_clock: ShotClock = field(default_factory=ShotClock)
    clock: Clock = field(default_factory=Clock)
    running: bool = False

    @classmethod
    def create(
        cls,
        width: float = DEFAULT_FIELD_WIDTH,
        height: float = DEFAULT_FIELD_HEIGHT,
    ) -> SimulationState:
        """Fresh state for a field of the given size (roster not yet built)."""
        pitch = Field(width, height)
        state = cls(pitch=pitch, goal=Goal.for_field(width, height))
        state.player.pos = pitch.kickoff_spot
        state.ball.pos = state.player.carry_point
        return state

    def to_dict(self) -> dict[str, Any]:
        """Serialisable snapshot for renderers and the API."""
        return {
            "frame": self.clock.tick_count,
            "time": self.clock.current_time,
            "running": self.running,
            "field": self.pitch.to_dict(),
            "goal": self.goal.to_dict(),
            "player": self.player.to_dict(),
            "ball": self.ball.to_dict(),
            "opponents": [o.to_dict() for o in self.opponents],
            "teammates": [t.to_dict() for t in self.teammates],
            "score": self.score.to_dict(),
            "charge": self.charge.to_dict(),
            "shot_clock": self.shot_clock.to_dict(),
        }


# =============================================================================
# Lifecycle operations
# =============================================================================

def init_roster(state: SimulationState) -> None:
    """Create the fixed roster and place the goal for the current field."""
    state.opponents = default_opponents()
    state.teammates = default_teammates()
    state.goal = Goal.for_field(state.pitch.width, state.pitch.height)


def reset_play(
    state: SimulationState,
    bus: Optional[EventBus] = None,
    reason: str = "",
) -> None:
    """Return player and ball to the kick-off spot.

    Score, opponents and teammates are untouched. Player velocity is kept,
    matching a restart where the player is simply re-spotted.
    """
    player = state.player
    player.pos = state.pitch.kickoff_spot
    player.has_ball = True

    ball = state.ball
    ball.pos = Vec2(player.pos.x + BALL_CARRY_OFFSET, player.pos.y)
    ball.velocity = Vec2.zero()

    state.shot_clock.reset()

    logger.debug("Play reset (%s) at frame %d", reason or "start", state.clock.tick_count)
    if bus:
        bus.emit_simple(
            EventType.PLAY_RESET,
            state.clock.tick_count,
            state.clock.current_time,
            description=f"Play reset{f' after {reason}' if reason else ''}",
            reason=reason,
        )


def resize_field(
    state: SimulationState,
    width: float,
    height: float,
    bus: Optional[EventBus] = None,
) -> None:
    """Change the field extents and re-place the goal."""
    state.pitch = Field(width, height)
    state.goal = Goal.for_field(width, height)

    logger.info("Field resized to %.0fx%.0f", width, height)
    if bus:
        bus.emit_simple(
            EventType.RESIZE,
            state.clock.tick_count,
            state.clock.current_time,
            description=f"Field resized to {width:.0f}x{height:.0f}",
            width=width,
            height=height,
        )
