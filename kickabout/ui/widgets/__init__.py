"""TUI widgets."""

from kickabout.ui.widgets.field_view import FieldView
from kickabout.ui.widgets.hud import Hud
from kickabout.ui.widgets.play_log import PlayLog

__all__ = [
    "FieldView",
    "Hud",
    "PlayLog",
]
