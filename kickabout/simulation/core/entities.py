"""Core entities - Player, Ball, roster members and scoreboard records.

Entities are pure data containers. Behavior is implemented in systems.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .vec2 import Vec2


# =============================================================================
# Constants
# =============================================================================

PLAYER_SPEED = 2.0
PLAYER_SPRINT_SPEED = 4.0
MAX_STAMINA = 100.0

BALL_CARRY_OFFSET = 15.0    # Lateral offset of a held ball, signed by facing

SHOT_CLOCK_SECONDS = 30.0


# =============================================================================
# Enums
# =============================================================================

class Role(str, Enum):
    """Scripted roster role."""
    DEFENDER = "defender"
    ATTACKER = "attacker"


# =============================================================================
# Player
# =============================================================================

@dataclass
class Player:
    """The human-controlled player.

    Attributes:
        pos: Current position on field
        velocity: Per-frame displacement
        speed: Base steering speed
        sprint_speed: Steering speed while sprinting with stamina left
        stamina: Sprint reserve, 0..max_stamina
        has_ball: Whether the player currently holds the ball
        dodge_cooldown: Frames until the next dodge is allowed
        facing: +1 facing right, -1 facing left
    """
    pos: Vec2 = field(default_factory=Vec2.zero)
    velocity: Vec2 = field(default_factory=Vec2.zero)
    speed: float = PLAYER_SPEED
    sprint_speed: float = PLAYER_SPRINT_SPEED
    stamina: float = MAX_STAMINA
    max_stamina: float = MAX_STAMINA
    has_ball: bool = True
    dodge_cooldown: int = 0
    facing: int = 1

    @property
    def carry_point(self) -> Vec2:
        """Where a held ball sits relative to the player."""
        return Vec2(self.pos.x + self.facing * BALL_CARRY_OFFSET, self.pos.y)

    def to_dict(self) -> dict[str, Any]:
        return {
            "pos": self.pos.to_dict(),
            "velocity": self.velocity.to_dict(),
            "speed": self.speed,
            "sprint_speed": self.sprint_speed,
            "stamina": self.stamina,
            "max_stamina": self.max_stamina,
            "has_ball": self.has_ball,
            "dodge_cooldown": self.dodge_cooldown,
            "facing": self.facing,
        }


# =============================================================================
# Roster (opponents and teammates)
# =============================================================================

@dataclass(frozen=True)
class RosterPlayer:
    """A scripted opponent or teammate.

    Immutable: the AI system returns replacements each frame rather than
    mutating members in place.
    """
    pos: Vec2
    velocity: Vec2 = field(default_factory=Vec2.zero)
    role: Role = Role.DEFENDER

    def to_dict(self) -> dict[str, Any]:
        return {
            "pos": self.pos.to_dict(),
            "velocity": self.velocity.to_dict(),
            "role": self.role.value,
        }


def default_opponents() -> list[RosterPlayer]:
    """Starting defenders."""
    return [
        RosterPlayer(Vec2(300, 200), role=Role.DEFENDER),
        RosterPlayer(Vec2(400, 300), role=Role.DEFENDER),
        RosterPlayer(Vec2(500, 250), role=Role.DEFENDER),
    ]


def default_teammates() -> list[RosterPlayer]:
    """Starting attacking teammates."""
    return [
        RosterPlayer(Vec2(200, 150), role=Role.ATTACKER),
        RosterPlayer(Vec2(250, 350), role=Role.ATTACKER),
    ]


# =============================================================================
# Ball
# =============================================================================

@dataclass
class Ball:
    """The ball.

    While the player holds it, position follows the carry point and the
    velocity is ignored.
    """
    pos: Vec2 = field(default_factory=Vec2.zero)
    velocity: Vec2 = field(default_factory=Vec2.zero)
    in_play: bool = True

    @property
    def is_slow(self) -> bool:
        """Both velocity components below 1 (ball has come to rest)."""
        return abs(self.velocity.x) < 1 and abs(self.velocity.y) < 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "pos": self.pos.to_dict(),
            "velocity": self.velocity.to_dict(),
            "in_play": self.in_play,
        }

    def __repr__(self) -> str:
        return f"Ball({self.pos}, v={self.velocity})"


# =============================================================================
# Scoreboard records
# =============================================================================

@dataclass
class Score:
    home: int = 0
    away: int = 0

    def format(self) -> str:
        return f"HOME {self.home} - {self.away} AWAY"

    def to_dict(self) -> dict[str, int]:
        return {"home": self.home, "away": self.away}


@dataclass
class ShotCharge:
    """Wind-up state of a power shot.

    Attributes:
        charging: Shoot key held with the ball
        level: Normalized power, 0..1
    """
    charging: bool = False
    level: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {"charging": self.charging, "level": self.level}


@dataclass
class ShotClock:
    """Possession countdown.

    Only reset on a play reset; nothing counts it down.
    """
    remaining: float = SHOT_CLOCK_SECONDS
    active: bool = False

    def reset(self) -> None:
        self.remaining = SHOT_CLOCK_SECONDS
        self.active = False

    def to_dict(self) -> dict[str, Any]:
        return {"remaining": self.remaining, "active": self.active}
