"""Event system for simulation state changes.

Events are emitted by systems and can be subscribed to by other systems
or logging infrastructure.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional


class EventType(str, Enum):
    """Types of events that can occur during simulation."""

    # =========================================================================
    # Session Lifecycle
    # =========================================================================
    SESSION_START = "session_start"
    SESSION_STOP = "session_stop"
    PLAY_RESET = "play_reset"
    RESIZE = "resize"

    # =========================================================================
    # Ball
    # =========================================================================
    GOAL = "goal"
    OUT_OF_BOUNDS = "out_of_bounds"
    PICKUP = "pickup"

    # =========================================================================
    # Player Actions
    # =========================================================================
    PASS = "pass"
    CHARGE_START = "charge_start"
    CHARGE_CANCEL = "charge_cancel"
    SHOT = "shot"
    DODGE = "dodge"


@dataclass
class Event:
    """An event that occurred during simulation.

    Attributes:
        type: The type of event
        tick: Frame on which the event occurred
        time: Time in seconds when event occurred
        data: Additional event-specific data
        description: Human-readable description
    """
    type: EventType
    tick: int
    time: float
    data: dict[str, Any] = field(default_factory=dict)
    description: str = ""

    def __str__(self) -> str:
        """Readable event string for logging."""
        parts = [f"[{self.time:.2f}s]", f"{self.type.value}"]

        if self.description:
            parts.append(f"- {self.description}")

        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "tick": self.tick,
            "time": self.time,
            "description": self.description,
            "data": dict(self.data),
        }


# Type alias for event handlers
EventHandler = Callable[[Event], None]


class EventBus:
    """Pub/sub event bus for simulation events.

    Usage:
        bus = EventBus()
        bus.subscribe(EventType.GOAL, on_goal)
        bus.subscribe_all(session_log.handle)
        bus.emit(Event(type=EventType.GOAL, tick=12, time=0.2))
    """

    def __init__(self) -> None:
        self._handlers: dict[EventType, list[EventHandler]] = defaultdict(list)
        self._global_handlers: list[EventHandler] = []
        self._history: list[Event] = []

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Subscribe to a specific event type."""
        self._handlers[event_type].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        """Subscribe to all events."""
        self._global_handlers.append(handler)

    def emit(self, event: Event) -> None:
        """Emit an event to all subscribers."""
        self._history.append(event)

        for handler in self._handlers[event.type]:
            handler(event)

        for handler in self._global_handlers:
            handler(event)

    def emit_simple(
        self,
        event_type: EventType,
        tick: int,
        time: float,
        description: str = "",
        **data: Any,
    ) -> Event:
        """Convenience method to emit an event with less boilerplate."""
        event = Event(
            type=event_type,
            tick=tick,
            time=time,
            description=description,
            data=data,
        )
        self.emit(event)
        return event

    def get_events_by_type(self, event_type: EventType) -> list[Event]:
        """Get all events of a specific type from history."""
        return [e for e in self._history if e.type == event_type]
