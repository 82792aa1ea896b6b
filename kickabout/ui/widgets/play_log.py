"""Recent-events log widget."""

from rich.text import Text
from textual.widgets import Static

from kickabout.logging import LogEntry
from kickabout.ui.constants import LOG_LINES


class PlayLog(Static):
    """Shows the last few session log entries, goals highlighted."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._entries: list[LogEntry] = []

    def update_entries(self, entries: list[LogEntry]) -> None:
        recent = entries[-LOG_LINES:]
        if recent == self._entries:
            return
        self._entries = list(recent)
        self.refresh()

    def render(self) -> Text:
        text = Text()
        for i, entry in enumerate(self._entries):
            style = "bold yellow" if entry.is_scoring_play else "#999999"
            text.append(entry.format(), style=style)
            if i < len(self._entries) - 1:
                text.append("\n")
        return text
