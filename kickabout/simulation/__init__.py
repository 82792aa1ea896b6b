"""Simulation engine - one human player, scripted roster, one ball, one goal.

Design:
- Single owned SimulationState passed explicitly to every system
- Fixed per-frame system order, in-place updates
- Edge-triggered input consumed once per frame
"""

from .core.input import Button, InputEdges, InputIntent, InputTracker
from .core.state import SimulationState
from .orchestrator import FrameResult, Orchestrator, advance_frame

__version__ = "0.1.0"

__all__ = [
    "Button",
    "InputEdges",
    "InputIntent",
    "InputTracker",
    "SimulationState",
    "FrameResult",
    "Orchestrator",
    "advance_frame",
]
