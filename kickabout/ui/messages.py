"""Custom Textual messages for UI updates."""

from textual.message import Message


class PointerMovedMessage(Message):
    """Posted when the mouse moves over the field, in field coordinates."""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        super().__init__()


class PointerLeftMessage(Message):
    """Posted when the mouse leaves the field."""
