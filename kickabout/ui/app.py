"""Main Kickabout TUI application."""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header

from kickabout.logging import SessionLog
from kickabout.simulation import Button, InputTracker, Orchestrator
from kickabout.simulation.core.field import DEFAULT_FIELD_HEIGHT, DEFAULT_FIELD_WIDTH
from kickabout.ui.constants import FRAME_RATE
from kickabout.ui.messages import PointerLeftMessage, PointerMovedMessage
from kickabout.ui.widgets import FieldView, Hud, PlayLog

logger = logging.getLogger(__name__)


class KickaboutApp(App):
    """Textual front-end: renders each frame and feeds input to the loop.

    Terminals report key presses but not releases, so held actions are
    toggles: ``space`` starts a wind-up and a second ``space`` shoots, ``s``
    switches sprint on and off.
    """

    TITLE = "Kickabout"
    SUB_TITLE = "2D Football"

    DEFAULT_CSS = """
    #pitch-column {
        align: center top;
    }
    Hud {
        height: 2;
    }
    PlayLog {
        height: 6;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True, priority=True),
        Binding("space", "toggle_shot", "Wind up / Shoot", show=True),
        Binding("p", "pass_ball", "Pass", show=True),
        Binding("d", "dodge", "Dodge", show=True),
        Binding("s", "toggle_sprint", "Sprint", show=True),
        Binding("r", "restart", "Restart", show=True),
    ]

    def __init__(
        self,
        width: float = DEFAULT_FIELD_WIDTH,
        height: float = DEFAULT_FIELD_HEIGHT,
        seed: Optional[int] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.orchestrator = Orchestrator(width=width, height=height, seed=seed)
        self.session_log = SessionLog(self.orchestrator.event_bus)
        self.tracker = InputTracker()

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="pitch-column"):
            yield Hud()
            yield FieldView()
            yield PlayLog()
        yield Footer()

    def on_mount(self) -> None:
        """Kick off and start the frame timer."""
        self.orchestrator.start_session()
        self._render_frame()
        self.set_interval(1 / FRAME_RATE, self._tick)

    # =========================================================================
    # Frame loop
    # =========================================================================

    def _tick(self) -> None:
        if not self.orchestrator.running:
            return
        self.orchestrator.advance_from(self.tracker)
        self._render_frame()

    def _render_frame(self) -> None:
        state = self.orchestrator.state
        self.query_one(FieldView).update_state(state)
        self.query_one(Hud).update_state(state, sprinting=self.tracker.is_held(Button.SPRINT))
        self.query_one(PlayLog).update_entries(self.session_log.entries)

    # =========================================================================
    # Input
    # =========================================================================

    def on_pointer_moved_message(self, message: PointerMovedMessage) -> None:
        self.tracker.move_pointer(message.x, message.y)

    def on_pointer_left_message(self, message: PointerLeftMessage) -> None:
        self.tracker.clear_pointer()

    def action_toggle_shot(self) -> None:
        self.tracker.toggle(Button.SHOOT)

    def action_pass_ball(self) -> None:
        self.tracker.tap(Button.PASS)

    def action_dodge(self) -> None:
        self.tracker.tap(Button.DODGE)

    def action_toggle_sprint(self) -> None:
        self.tracker.toggle(Button.SPRINT)

    def action_restart(self) -> None:
        self.tracker = InputTracker()
        self.orchestrator.start_session()
        self.notify("New session", timeout=2)

    def on_unmount(self) -> None:
        self.orchestrator.stop()
        logger.info("Session summary:\n%s", self.session_log.format_summary())


def run_app(
    width: float = DEFAULT_FIELD_WIDTH,
    height: float = DEFAULT_FIELD_HEIGHT,
    seed: Optional[int] = None,
) -> None:
    """Run the Kickabout TUI application."""
    app = KickaboutApp(width=width, height=height, seed=seed)
    app.run()
