"""Orchestrator - Main frame loop for the simulation.

The orchestrator owns the session state and runs every system once per
frame in a fixed order:

    1. Movement     - steer the player, stamina, dodge, carry the ball
    2. Actions      - shoot wind-up/release and passing
    3. Ball physics - free ball flight, goal, out of bounds, pickup
    4. AI           - opponents chase, teammates get open
    5. Charge meter - power level climbs while charging

Rendering and HUD updates happen outside, after ``advance`` returns.
Each step sees the in-place changes made by the steps before it.

Usage:
    orch = Orchestrator(seed=7)
    orch.start_session()
    result = orch.advance(InputIntent(pointer=Vec2(400, 300)))
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .core.events import Event, EventBus, EventType
from .core.field import DEFAULT_FIELD_HEIGHT, DEFAULT_FIELD_WIDTH
from .core.input import InputEdges, InputIntent, InputTracker
from .core.state import SimulationState, init_roster, reset_play, resize_field
from .systems.ai import advance_ai
from .systems.ball_physics import advance_ball
from .systems.movement import advance_player
from .systems.possession import advance_charge, handle_actions

logger = logging.getLogger(__name__)


# =============================================================================
# Pure frame step
# =============================================================================

def advance_frame(
    state: SimulationState,
    intent: InputIntent,
    edges: InputEdges,
    rng: Optional[random.Random] = None,
    bus: Optional[EventBus] = None,
) -> SimulationState:
    """Run one frame of the simulation on ``state``.

    The edges are consumed here and must not be passed to another frame.
    """
    state.clock.tick()

    advance_player(state, intent, edges, rng, bus)
    handle_actions(state, edges, bus)
    advance_ball(state, bus)
    advance_ai(state)
    advance_charge(state)

    return state


# =============================================================================
# Frame result
# =============================================================================

@dataclass
class FrameResult:
    """What happened during one frame.

    Attributes:
        frame: Frame number after the step
        edges: Input edges consumed this frame
        events: Events emitted while the frame ran
    """
    frame: int
    edges: InputEdges
    events: List[Event] = field(default_factory=list)

    @property
    def scored(self) -> bool:
        return any(e.type == EventType.GOAL for e in self.events)

    def format_summary(self) -> str:
        if not self.events:
            return f"Frame {self.frame}"
        return f"Frame {self.frame}: " + ", ".join(e.type.value for e in self.events)


# =============================================================================
# Orchestrator
# =============================================================================

class Orchestrator:
    """Owns a simulation session and runs the frame loop.

    Edges can be supplied per frame, read from an ``InputTracker``, or left
    to the orchestrator, which derives them from the previous intent.
    """

    def __init__(
        self,
        width: float = DEFAULT_FIELD_WIDTH,
        height: float = DEFAULT_FIELD_HEIGHT,
        seed: Optional[int] = None,
        event_bus: Optional[EventBus] = None,
    ):
        self.event_bus = event_bus or EventBus()
        self.rng = random.Random(seed)
        self.state = SimulationState.create(width, height)

        self._last_intent = InputIntent()
        self._frame_events: List[Event] = []
        self.event_bus.subscribe_all(self._frame_events.append)

    # =========================================================================
    # Session control
    # =========================================================================

    @property
    def running(self) -> bool:
        return self.state.running

    def start_session(self) -> SimulationState:
        """Build the roster, reset play and start the loop."""
        pitch = self.state.pitch
        self.state = SimulationState.create(pitch.width, pitch.height)
        self._last_intent = InputIntent()

        init_roster(self.state)
        reset_play(self.state)
        self.state.running = True

        logger.info(
            "Session started on %.0fx%.0f field with %d opponents, %d teammates",
            pitch.width,
            pitch.height,
            len(self.state.opponents),
            len(self.state.teammates),
        )
        self.event_bus.emit_simple(
            EventType.SESSION_START,
            self.state.clock.tick_count,
            self.state.clock.current_time,
            description="Kick-off",
        )
        return self.state

    def stop(self) -> None:
        """Clear the running flag; ``run`` returns after the current frame."""
        if not self.state.running:
            return
        self.state.running = False
        logger.info("Session stopped at frame %d (%s)", self.state.clock.tick_count, self.state.score.format())
        self.event_bus.emit_simple(
            EventType.SESSION_STOP,
            self.state.clock.tick_count,
            self.state.clock.current_time,
            description=f"Final: {self.state.score.format()}",
        )

    def resize(self, width: float, height: float) -> None:
        """Resize the field; the goal moves with the right touchline."""
        resize_field(self.state, width, height, self.event_bus)

    # =========================================================================
    # Frame loop
    # =========================================================================

    def advance(
        self,
        intent: Optional[InputIntent] = None,
        edges: Optional[InputEdges] = None,
    ) -> FrameResult:
        """Run a single frame.

        Args:
            intent: Current input levels; None means no input
            edges: One-shot transitions; derived from the previous intent if None
        """
        if not self.state.running:
            raise RuntimeError("Must call start_session() before advance()")

        intent = intent or InputIntent()
        if edges is None:
            edges = InputEdges.between(self._last_intent, intent)
        self._last_intent = intent

        self._frame_events.clear()
        advance_frame(self.state, intent, edges, self.rng, self.event_bus)

        result = FrameResult(
            frame=self.state.clock.tick_count,
            edges=edges,
            events=list(self._frame_events),
        )
        if result.events:
            logger.debug(result.format_summary())
        return result

    def advance_from(self, tracker: InputTracker) -> FrameResult:
        """Run a frame using (and clearing) the tracker's latched input."""
        intent, edges = tracker.snapshot()
        return self.advance(intent, edges)

    def run(
        self,
        frames: int,
        intents: Optional[Iterable[InputIntent]] = None,
    ) -> List[FrameResult]:
        """Run up to ``frames`` frames, stopping early if the session stops.

        ``intents`` supplies one intent per frame; when it runs out (or is
        omitted) the remaining frames get no input.
        """
        source = iter(intents) if intents is not None else iter(())
        results = []
        for _ in range(frames):
            if not self.state.running:
                break
            results.append(self.advance(next(source, None)))
        return results
