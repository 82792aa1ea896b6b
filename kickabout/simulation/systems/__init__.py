"""Simulation systems - movement, possession, ball physics, AI."""

from .movement import advance_player, dodge_impulse, nearest
from .possession import (
    advance_charge,
    handle_actions,
    pass_ball,
    release_charge,
    shoot,
    shot_speed,
    start_charge,
)
from .ball_physics import advance_ball
from .ai import advance_ai, advance_opponents, advance_teammates, open_position

__all__ = [
    "advance_player",
    "dodge_impulse",
    "nearest",
    "advance_charge",
    "handle_actions",
    "pass_ball",
    "release_charge",
    "shoot",
    "shot_speed",
    "start_charge",
    "advance_ball",
    "advance_ai",
    "advance_opponents",
    "advance_teammates",
    "open_position",
]
