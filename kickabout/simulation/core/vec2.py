"""2D Vector implementation for simulation.

All positions and velocities in the simulation use Vec2.
Units are field pixels; one frame is the unit of time.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec2:
    """Immutable 2D vector.

    Coordinate system:
        Origin (0, 0) = Top-left corner of the field
        +X = Right (toward the goal)
        +Y = Down the screen
    """
    x: float = 0.0
    y: float = 0.0

    # =========================================================================
    # Arithmetic Operations
    # =========================================================================

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    # =========================================================================
    # Vector Operations
    # =========================================================================

    def length(self) -> float:
        """Magnitude of vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def normalized(self) -> Vec2:
        """Unit vector in same direction.

        A zero-length vector normalizes to zero so callers never divide by
        zero when two entities share a position.
        """
        length = self.length()
        if length == 0:
            return Vec2(0, 0)
        return Vec2(self.x / length, self.y / length)

    def distance_to(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return (other - self).length()

    def direction_to(self, other: Vec2) -> Vec2:
        """Unit vector pointing from this point toward another."""
        return (other - self).normalized()

    # =========================================================================
    # Utility
    # =========================================================================

    def clamped_to(self, min_x: float, min_y: float, max_x: float, max_y: float) -> Vec2:
        """Return point clamped component-wise to a rectangle."""
        return Vec2(
            max(min_x, min(max_x, self.x)),
            max(min_y, min(max_y, self.y)),
        )

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    def __repr__(self) -> str:
        return f"Vec2({self.x:.2f}, {self.y:.2f})"

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f})"

    # =========================================================================
    # Class Methods
    # =========================================================================

    @classmethod
    def zero(cls) -> Vec2:
        """Zero vector."""
        return cls(0, 0)
