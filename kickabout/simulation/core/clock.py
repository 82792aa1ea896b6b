"""Simulation clock and time management.

Provides consistent frame counting across all systems.
"""

from __future__ import annotations

from dataclasses import dataclass


FRAMES_PER_SECOND = 60


@dataclass
class Clock:
    """Counts simulation frames.

    The simulation advances in discrete frames scheduled by the display
    refresh cycle. Each frame is nominally 1/60 s; the physics itself is
    expressed per frame and never reads elapsed seconds.

    Attributes:
        tick_rate: Seconds per frame
        current_time: Elapsed time in seconds
        tick_count: Number of frames elapsed
    """
    tick_rate: float = 1.0 / FRAMES_PER_SECOND
    current_time: float = 0.0
    tick_count: int = 0

    def tick(self) -> int:
        """Advance time by one frame.

        Returns:
            The new frame number
        """
        self.current_time += self.tick_rate
        self.tick_count += 1
        return self.tick_count

    def __repr__(self) -> str:
        return f"Clock(time={self.current_time:.3f}s, frame={self.tick_count})"
