"""Core layer - foundational types and utilities."""

from .vec2 import Vec2
from .field import (
    DEFAULT_FIELD_WIDTH,
    DEFAULT_FIELD_HEIGHT,
    Bounds,
    Field,
    Goal,
)
from .entities import (
    Ball,
    Player,
    Role,
    RosterPlayer,
    Score,
    ShotCharge,
    ShotClock,
)
from .clock import Clock
from .events import Event, EventType, EventBus
from .input import Button, InputEdges, InputIntent, InputTracker
from .state import SimulationState, init_roster, reset_play, resize_field

__all__ = [
    "Vec2",
    "DEFAULT_FIELD_WIDTH",
    "DEFAULT_FIELD_HEIGHT",
    "Bounds",
    "Field",
    "Goal",
    "Ball",
    "Player",
    "Role",
    "RosterPlayer",
    "Score",
    "ShotCharge",
    "ShotClock",
    "Clock",
    "Event",
    "EventType",
    "EventBus",
    "Button",
    "InputEdges",
    "InputIntent",
    "InputTracker",
    "SimulationState",
    "init_roster",
    "reset_play",
    "resize_field",
]
