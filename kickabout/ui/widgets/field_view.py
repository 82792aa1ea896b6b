"""Rich-styled pitch visualization widget."""

from typing import Optional

from rich.text import Text
from textual import events
from textual.widgets import Static

from kickabout.simulation.core.field import Field
from kickabout.simulation.core.state import SimulationState
from kickabout.simulation.core.vec2 import Vec2
from kickabout.ui.constants import (
    BALL_GLYPH,
    BALL_STYLE,
    FIELD_COLUMNS,
    FIELD_ROWS,
    GOAL_GLYPH,
    GOAL_STYLE,
    GRASS_GLYPH,
    GRASS_STYLE,
    HALFWAY_GLYPH,
    LINE_STYLE,
    OPPONENT_GLYPH,
    OPPONENT_STYLE,
    PLAYER_GLYPH,
    PLAYER_STYLE,
    TEAMMATE_GLYPH,
    TEAMMATE_STYLE,
)
from kickabout.ui.messages import PointerLeftMessage, PointerMovedMessage


def field_to_cell(pos: Vec2, pitch: Field, columns: int = FIELD_COLUMNS, rows: int = FIELD_ROWS) -> tuple[int, int]:
    """Map a field position to a (column, row) cell, clamped to the grid."""
    col = int(pos.x * columns / pitch.width)
    row = int(pos.y * rows / pitch.height)
    return max(0, min(columns - 1, col)), max(0, min(rows - 1, row))


def cell_to_field(col: int, row: int, pitch: Field, columns: int = FIELD_COLUMNS, rows: int = FIELD_ROWS) -> Vec2:
    """Centre of a grid cell in field coordinates."""
    return Vec2(
        (col + 0.5) * pitch.width / columns,
        (row + 0.5) * pitch.height / rows,
    )


def render_pitch(state: SimulationState, columns: int = FIELD_COLUMNS, rows: int = FIELD_ROWS) -> Text:
    """Paint the current state onto a character grid.

    Later layers overwrite earlier ones: lines, goal, teammates, opponents,
    ball, player.
    """
    pitch = state.pitch
    glyphs = [[GRASS_GLYPH] * columns for _ in range(rows)]
    styles = [[GRASS_STYLE] * columns for _ in range(rows)]

    def paint(pos: Vec2, glyph: str, style: str) -> None:
        col, row = field_to_cell(pos, pitch, columns, rows)
        glyphs[row][col] = glyph
        styles[row][col] = style

    halfway_col, _ = field_to_cell(pitch.center, pitch, columns, rows)
    for row in range(rows):
        glyphs[row][halfway_col] = HALFWAY_GLYPH
        styles[row][halfway_col] = LINE_STYLE

    goal = state.goal
    left, top = field_to_cell(Vec2(goal.x, goal.y), pitch, columns, rows)
    right, bottom = field_to_cell(Vec2(goal.x + goal.width, goal.y + goal.height), pitch, columns, rows)
    for row in range(top, bottom + 1):
        for col in range(left, right + 1):
            glyphs[row][col] = GOAL_GLYPH
            styles[row][col] = GOAL_STYLE

    for teammate in state.teammates:
        paint(teammate.pos, TEAMMATE_GLYPH, TEAMMATE_STYLE)
    for opponent in state.opponents:
        paint(opponent.pos, OPPONENT_GLYPH, OPPONENT_STYLE)

    paint(state.ball.pos, BALL_GLYPH, BALL_STYLE)
    paint(state.player.pos, PLAYER_GLYPH, PLAYER_STYLE)

    text = Text()
    for row in range(rows):
        for col in range(columns):
            text.append(glyphs[row][col], style=styles[row][col])
        if row < rows - 1:
            text.append("\n")
    return text


class FieldView(Static):
    """
    Top-down pitch view.

    Features:
    - Green pitch with halfway line and red goal
    - Player, teammates, opponents and ball as coloured glyphs
    - Mouse movement over the pitch becomes the steering target
    """

    DEFAULT_CSS = f"""
    FieldView {{
        width: {FIELD_COLUMNS};
        height: {FIELD_ROWS};
    }}
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._state: Optional[SimulationState] = None

    def update_state(self, state: SimulationState) -> None:
        """Show a new frame."""
        self._state = state
        self.refresh()

    def render(self) -> Text:
        if self._state is None:
            return Text("Waiting for kick-off...")
        return render_pitch(self._state)

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self._state is None:
            return
        target = cell_to_field(event.x, event.y, self._state.pitch)
        self.post_message(PointerMovedMessage(target.x, target.y))

    def on_leave(self, event: events.Leave) -> None:
        self.post_message(PointerLeftMessage())
