"""Heads-up display: score, stamina, power meter and shot clock."""

import math

from rich.text import Text
from textual.reactive import reactive
from textual.widgets import Static

from kickabout.simulation.core.state import SimulationState

METER_WIDTH = 20


def format_meter(level: float, width: int = METER_WIDTH) -> str:
    """Bar like ``[#####-----]`` for a 0..1 level."""
    level = max(0.0, min(1.0, level))
    filled = round(level * width)
    return "[" + "#" * filled + "-" * (width - filled) + "]"


class Hud(Static):
    """Displays score, stamina and (while winding up) the power meter."""

    home_score: reactive[int] = reactive(0)
    away_score: reactive[int] = reactive(0)
    stamina: reactive[float] = reactive(100.0)
    max_stamina: reactive[float] = reactive(100.0)
    charging: reactive[bool] = reactive(False)
    charge_level: reactive[float] = reactive(0.0)
    sprinting: reactive[bool] = reactive(False)
    shot_clock_active: reactive[bool] = reactive(False)
    shot_clock: reactive[float] = reactive(30.0)

    def update_state(self, state: SimulationState, sprinting: bool = False) -> None:
        """Copy the values the HUD shows out of the state."""
        self.home_score = state.score.home
        self.away_score = state.score.away
        self.stamina = state.player.stamina
        self.max_stamina = state.player.max_stamina
        self.charging = state.charge.charging
        self.charge_level = state.charge.level
        self.sprinting = sprinting
        self.shot_clock_active = state.shot_clock.active
        self.shot_clock = state.shot_clock.remaining

    def render(self) -> Text:
        text = Text()
        text.append(f"HOME {self.home_score} - {self.away_score} AWAY", style="bold")

        stamina_pct = 100 * self.stamina / self.max_stamina if self.max_stamina else 0
        text.append("   ")
        text.append(f"STAMINA: {round(stamina_pct)}%", style="bold #2e7d32" if stamina_pct > 25 else "bold red")
        if self.sprinting:
            text.append(" (sprint)", style="#666666")

        if self.shot_clock_active:
            text.append("   ")
            text.append(f"SHOT CLOCK: {math.ceil(self.shot_clock)}", style="bold yellow")

        if self.charging:
            text.append("\n")
            text.append("POWER ", style="bold")
            text.append(format_meter(self.charge_level), style="bold yellow")
        return text
