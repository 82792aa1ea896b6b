"""In-memory session log for accumulating simulation events."""

from dataclasses import dataclass, field
from typing import Optional

from kickabout.simulation.core.entities import Score
from kickabout.simulation.core.events import Event, EventBus, EventType


@dataclass
class LogEntry:
    """Single entry in the session log."""

    frame: int
    time: float
    event_type: str
    description: str
    home_score: int
    away_score: int
    is_scoring_play: bool = False

    def format(self) -> str:
        marker = "[GOAL] " if self.is_scoring_play else ""
        return f"{self.time:6.2f}s | {marker}{self.description}"


@dataclass
class ScoringPlay:
    """Record of a goal."""

    frame: int
    time: float
    shot_power: Optional[float]
    home_score_after: int
    away_score_after: int


@dataclass
class SessionStats:
    """Accumulated counts for one session."""

    shots: int = 0
    passes: int = 0
    dodges: int = 0
    pickups: int = 0
    goals: int = 0
    out_of_bounds: int = 0

    @property
    def conversion_rate(self) -> float:
        if self.shots == 0:
            return 0.0
        return self.goals / self.shots


class SessionLog:
    """
    In-memory accumulator for simulation events.

    Subscribes to an EventBus and keeps a running score from GOAL events.
    Noisy per-wind-up events (charge start) are counted but not logged.
    """

    QUIET_EVENTS = {EventType.CHARGE_START, EventType.RESIZE}

    def __init__(self, bus: Optional[EventBus] = None) -> None:
        self.entries: list[LogEntry] = []
        self.scoring_plays: list[ScoringPlay] = []
        self.stats = SessionStats()
        self.score = Score()
        self._last_shot_power: Optional[float] = None

        if bus is not None:
            self.attach(bus)

    def attach(self, bus: EventBus) -> None:
        """Subscribe to every event on the bus."""
        bus.subscribe_all(self.handle)

    def handle(self, event: Event) -> None:
        """Record one event."""
        if event.type == EventType.SESSION_START:
            self.entries = []
            self.scoring_plays = []
            self.stats = SessionStats()
            self.score = Score()
            self._last_shot_power = None
        elif event.type == EventType.SHOT:
            self.stats.shots += 1
            self._last_shot_power = event.data.get("level")
        elif event.type == EventType.PASS:
            self.stats.passes += 1
            self._last_shot_power = None
        elif event.type == EventType.DODGE:
            self.stats.dodges += 1
        elif event.type == EventType.PICKUP:
            self.stats.pickups += 1
        elif event.type == EventType.OUT_OF_BOUNDS:
            self.stats.out_of_bounds += 1
        elif event.type == EventType.GOAL:
            self.stats.goals += 1
            self.score = Score(
                home=event.data.get("home", self.score.home + 1),
                away=event.data.get("away", self.score.away),
            )
            self.scoring_plays.append(ScoringPlay(
                frame=event.tick,
                time=event.time,
                shot_power=self._last_shot_power,
                home_score_after=self.score.home,
                away_score_after=self.score.away,
            ))

        if event.type in self.QUIET_EVENTS:
            return

        self.entries.append(LogEntry(
            frame=event.tick,
            time=event.time,
            event_type=event.type.value,
            description=event.description or event.type.value,
            home_score=self.score.home,
            away_score=self.score.away,
            is_scoring_play=event.type == EventType.GOAL,
        ))

    def recent(self, n: int = 10) -> list[LogEntry]:
        return self.entries[-n:]

    def format_summary(self) -> str:
        """Plain-text session summary."""
        lines = [
            self.score.format(),
            f"Shots: {self.stats.shots}  Goals: {self.stats.goals}  "
            f"Conversion: {self.stats.conversion_rate:.0%}",
            f"Passes: {self.stats.passes}  Dodges: {self.stats.dodges}  "
            f"Pickups: {self.stats.pickups}  Out of play: {self.stats.out_of_bounds}",
        ]
        for play in self.scoring_plays:
            power = f" at {play.shot_power:.0%} power" if play.shot_power is not None else ""
            lines.append(
                f"  GOAL {play.time:.2f}s (frame {play.frame}){power} -> "
                f"{play.home_score_after}-{play.away_score_after}"
            )
        return "\n".join(lines)
