"""Input intent and edge detection.

Raw device state (pointer position, which keys are held) is captured as an
``InputIntent``. One-shot actions are driven by ``InputEdges``: the rising
and falling transitions observed since the previous frame. Each frame
consumes exactly one ``InputEdges`` snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .vec2 import Vec2


class Button(str, Enum):
    """Buttons the input layer can report."""
    SPRINT = "sprint"
    SHOOT = "shoot"
    PASS = "pass"
    DODGE = "dodge"


@dataclass(frozen=True)
class InputIntent:
    """What the user is holding/pointing at this frame.

    A missing pointer means "no steering target": the player coasts.
    """
    pointer: Optional[Vec2] = None
    sprint: bool = False
    shoot_held: bool = False
    pass_held: bool = False
    dodge_held: bool = False

    def is_held(self, button: Button) -> bool:
        return {
            Button.SPRINT: self.sprint,
            Button.SHOOT: self.shoot_held,
            Button.PASS: self.pass_held,
            Button.DODGE: self.dodge_held,
        }[button]


@dataclass(frozen=True)
class InputEdges:
    """One-shot transitions for a single frame.

    ``release_first`` is set when shoot was released and then pressed again
    since the last frame: the held charge is struck before a new wind-up.
    """
    shoot_pressed: bool = False
    shoot_released: bool = False
    pass_pressed: bool = False
    dodge_pressed: bool = False
    release_first: bool = False

    @classmethod
    def between(cls, previous: InputIntent, current: InputIntent) -> InputEdges:
        """Edges implied by two consecutive level snapshots."""
        return cls(
            shoot_pressed=current.shoot_held and not previous.shoot_held,
            shoot_released=previous.shoot_held and not current.shoot_held,
            pass_pressed=current.pass_held and not previous.pass_held,
            dodge_pressed=current.dodge_held and not previous.dodge_held,
        )

    @property
    def any(self) -> bool:
        return self.shoot_pressed or self.shoot_released or self.pass_pressed or self.dodge_pressed


@dataclass
class InputTracker:
    """Collects device events between frames.

    Input handlers call ``press``/``release``/``move_pointer`` whenever the
    device reports something. The frame loop calls ``snapshot`` once per
    frame, which returns the current levels plus every edge latched since
    the last snapshot and then clears the latches. A press and release that
    both happen between two frames therefore still produce both edges.
    """
    pointer: Optional[Vec2] = None
    _held: set[Button] = field(default_factory=set)
    _pressed: set[Button] = field(default_factory=set)
    _released: set[Button] = field(default_factory=set)
    _released_before_press: set[Button] = field(default_factory=set)

    def move_pointer(self, x: float, y: float) -> None:
        self.pointer = Vec2(x, y)

    def clear_pointer(self) -> None:
        self.pointer = None

    def press(self, button: Button) -> None:
        # Key auto-repeat sends repeated downs while held; only the first counts.
        if button in self._held:
            return
        self._held.add(button)
        self._pressed.add(button)

    def release(self, button: Button) -> None:
        if button not in self._held:
            return
        self._held.discard(button)
        if button not in self._pressed:
            self._released_before_press.add(button)
        self._released.add(button)

    def toggle(self, button: Button) -> None:
        """Press if released, release if held (for devices without key-up)."""
        if button in self._held:
            self.release(button)
        else:
            self.press(button)

    def tap(self, button: Button) -> None:
        """Press and release within the same frame."""
        self.press(button)
        self.release(button)

    def is_held(self, button: Button) -> bool:
        return button in self._held

    def snapshot(self) -> tuple[InputIntent, InputEdges]:
        """Read current levels and latched edges, then clear the latches."""
        intent = InputIntent(
            pointer=self.pointer,
            sprint=Button.SPRINT in self._held,
            shoot_held=Button.SHOOT in self._held,
            pass_held=Button.PASS in self._held,
            dodge_held=Button.DODGE in self._held,
        )
        edges = InputEdges(
            shoot_pressed=Button.SHOOT in self._pressed,
            shoot_released=Button.SHOOT in self._released,
            pass_pressed=Button.PASS in self._pressed,
            dodge_pressed=Button.DODGE in self._pressed,
            release_first=(
                Button.SHOOT in self._pressed and Button.SHOOT in self._released_before_press
            ),
        )
        self._pressed.clear()
        self._released.clear()
        self._released_before_press.clear()
        return intent, edges
