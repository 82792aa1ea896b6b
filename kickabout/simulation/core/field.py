"""Field geometry and coordinate system.

Single, unified coordinate system used throughout the simulation.
All measurements in field pixels, origin at the top-left corner.
"""

from __future__ import annotations

from dataclasses import dataclass

from .vec2 import Vec2


# =============================================================================
# Field Dimensions
# =============================================================================

DEFAULT_FIELD_WIDTH = 800.0
DEFAULT_FIELD_HEIGHT = 600.0

# Clamp margins
EDGE_MARGIN = 20.0              # Player and opponents, every side
TEAMMATE_RIGHT_MARGIN = 100.0   # Teammates stay clear of the goal mouth

# Goal placement (relative to the right touchline / vertical centre)
GOAL_WIDTH = 80.0
GOAL_HEIGHT = 120.0
GOAL_INSET = 100.0              # Goal left edge = width - GOAL_INSET

# Kick-off spot
KICKOFF_X = 150.0


# =============================================================================
# Rectangles
# =============================================================================

@dataclass(frozen=True)
class Bounds:
    """Inclusive axis-aligned rectangle used for clamping."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def clamp(self, pos: Vec2) -> Vec2:
        return pos.clamped_to(self.min_x, self.min_y, self.max_x, self.max_y)

    def contains(self, pos: Vec2) -> bool:
        return (
            self.min_x <= pos.x <= self.max_x and
            self.min_y <= pos.y <= self.max_y
        )


@dataclass
class Goal:
    """The scoring goal: an axis-aligned rectangle.

    Attributes:
        x: Left edge
        y: Top edge
        width: Horizontal extent
        height: Vertical extent
    """
    x: float = DEFAULT_FIELD_WIDTH - GOAL_INSET
    y: float = DEFAULT_FIELD_HEIGHT / 2 - GOAL_HEIGHT / 2
    width: float = GOAL_WIDTH
    height: float = GOAL_HEIGHT

    @property
    def center(self) -> Vec2:
        """Centre of the goal mouth (shot aiming point)."""
        return Vec2(self.x + self.width / 2, self.y + self.height / 2)

    def contains(self, pos: Vec2) -> bool:
        """Check if a point is inside the goal (edges count)."""
        return (
            self.x <= pos.x <= self.x + self.width and
            self.y <= pos.y <= self.y + self.height
        )

    @classmethod
    def for_field(cls, width: float, height: float) -> Goal:
        """Goal positioned for a field of the given size."""
        return cls(
            x=width - GOAL_INSET,
            y=height / 2 - GOAL_HEIGHT / 2,
            width=GOAL_WIDTH,
            height=GOAL_HEIGHT,
        )

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


# =============================================================================
# Field
# =============================================================================

@dataclass
class Field:
    """Playing area extents.

    The ball is in bounds anywhere on [0, width] x [0, height]. Players are
    kept further inside by the clamp rectangles below; teammates use a wider
    right margin than everyone else.
    """
    width: float = DEFAULT_FIELD_WIDTH
    height: float = DEFAULT_FIELD_HEIGHT

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Field dimensions must be positive, got {self.width}x{self.height}"
            )

    @property
    def center(self) -> Vec2:
        return Vec2(self.width / 2, self.height / 2)

    @property
    def kickoff_spot(self) -> Vec2:
        """Where the player restarts after a play reset."""
        return Vec2(KICKOFF_X, self.height / 2)

    @property
    def player_bounds(self) -> Bounds:
        """Clamp rectangle for the player and opponents."""
        return Bounds(
            EDGE_MARGIN,
            EDGE_MARGIN,
            self.width - EDGE_MARGIN,
            self.height - EDGE_MARGIN,
        )

    @property
    def teammate_bounds(self) -> Bounds:
        """Clamp rectangle for teammates."""
        return Bounds(
            EDGE_MARGIN,
            EDGE_MARGIN,
            self.width - TEAMMATE_RIGHT_MARGIN,
            self.height - EDGE_MARGIN,
        )

    def is_in_bounds(self, pos: Vec2) -> bool:
        """Check if a ball position is on the field."""
        return 0 <= pos.x <= self.width and 0 <= pos.y <= self.height

    def describe_position(self, pos: Vec2) -> str:
        """Human-readable description of a field position."""
        third = self.width / 3
        if pos.x < third:
            zone = "defensive third"
        elif pos.x < 2 * third:
            zone = "middle third"
        else:
            zone = "attacking third"

        if pos.y < self.height / 3:
            side = "top flank"
        elif pos.y > 2 * self.height / 3:
            side = "bottom flank"
        else:
            side = "centre"

        return f"{zone}, {side}"

    def to_dict(self) -> dict[str, float]:
        return {"width": self.width, "height": self.height}
