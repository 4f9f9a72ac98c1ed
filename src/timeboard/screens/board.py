"""Board screen — the time face on top, notes below. Drives the display tick."""

from __future__ import annotations

import logging

from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Button, Footer, Input

from timeboard.board import NoteBoard
from timeboard.drag import DragControl
from timeboard.screens.base import BOARD_BINDINGS, EDIT_BINDINGS
from timeboard.screens.countdown import CountdownRequest, CountdownSetupScreen
from timeboard.screens.note_card import NoteCard
from timeboard.screens.time_face import TimeFace
from timeboard.segments import SegmentEditor
from timeboard.timekeeper import Mode, TimeKeeper, ValidationError

logger = logging.getLogger(__name__)

_EDIT_ACTIONS = {"rotate", "adjust", "finish_editing"}


class BoardScreen(Screen[None]):
    """Clock/countdown plus note board."""

    BINDINGS = BOARD_BINDINGS + EDIT_BINDINGS

    DEFAULT_CSS = """
    BoardScreen {
        align: center top;
    }
    BoardScreen #notes {
        height: 1fr;
        margin-top: 1;
        align: center top;
    }
    """

    def __init__(
        self,
        keeper: TimeKeeper,
        board: NoteBoard,
        time_size: DragControl,
        *,
        tick_interval: float = 0.25,
        cell_px: float = 16,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.keeper = keeper
        self.editor = SegmentEditor(keeper)
        self.board = board
        self.time_size = time_size
        self.tick_interval = tick_interval
        self.cell_px = cell_px
        self._expiry_announced = False
        self._last_request: CountdownRequest | None = None

    def compose(self) -> ComposeResult:
        with Vertical(classes="screen-frame"):
            yield TimeFace(self.time_size, cell_px=self.cell_px, id="time-face")
            with VerticalScroll(id="notes"):
                for note in self.board.notes:
                    yield NoteCard(self.board, note, cell_px=self.cell_px)
        yield Footer()

    def on_mount(self) -> None:
        self.set_interval(self.tick_interval, self.refresh_time)
        self.refresh_time()

    def refresh_time(self) -> None:
        """Re-derive the display from the real clock (called every tick)."""
        display = self.keeper.derive_display()
        try:
            self.query_one(TimeFace).show(display, self.keeper.mode, self.editor.selected)
        except NoMatches:
            return

        if self.keeper.mode is Mode.COUNTDOWN and self.keeper.expired:
            if not self._expiry_announced:
                self._expiry_announced = True
                self.notify("Countdown finished", severity="warning")
        else:
            self._expiry_announced = False

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        if action in _EDIT_ACTIONS:
            return self.editor.editing
        return True

    # -- time ----------------------------------------------------------------

    def action_toggle_mode(self) -> None:
        self.keeper.toggle_mode()
        self.refresh_time()
        self.notify(f"{self.keeper.mode.value.capitalize()} mode")

    def action_edit_time(self) -> None:
        self.editor.enter_editing()
        self._editing_changed()

    def on_time_face_segment_clicked(self, event: TimeFace.SegmentClicked) -> None:
        self.editor.select(event.segment)
        self._editing_changed()

    def _editing_changed(self) -> None:
        self.set_focus(None)
        self.refresh_bindings()
        self.refresh_time()

    def action_finish_editing(self) -> None:
        self.editor.exit_editing()
        self.refresh_bindings()
        self.refresh_time()

    def action_rotate(self, direction: int) -> None:
        self.editor.rotate(direction)
        self.refresh_time()

    def action_adjust(self, delta: int) -> None:
        self.editor.adjust(delta)
        self.refresh_time()

    def action_reset_size(self) -> None:
        self.query_one(TimeFace).apply_size(self.time_size.reset())

    def action_countdown_setup(self) -> None:
        last = self._last_request
        by_end = last.by_end_time if last else self.keeper.countdown.by_end_time
        self.app.push_screen(
            CountdownSetupScreen(
                by_end_time=by_end,
                end_time=last.text if last and last.by_end_time else "",
                duration=last.text if last and not last.by_end_time else "",
            ),
            self._on_countdown_request,
        )

    def _on_countdown_request(self, request: CountdownRequest | None) -> None:
        if request is None:
            return
        try:
            self.keeper.set_countdown_from_user_input(request.by_end_time, request.text)
        except ValidationError as exc:
            logger.info("Countdown input rejected: %s", exc)
            self.notify(str(exc), severity="error")
            return
        self._last_request = request
        self.keeper.set_mode(Mode.COUNTDOWN)
        self.refresh_time()

    # -- notes ---------------------------------------------------------------

    async def action_new_note(self) -> None:
        await self._add_note()

    async def on_key(self, event: events.Key) -> None:
        """Typing with no field focused starts a new note with that character."""
        if not event.is_printable or self.editor.editing:
            return
        if isinstance(self.focused, (Input, Button)) or event.key in self.active_bindings:
            return
        event.stop()
        event.prevent_default()
        await self._add_note(event.character)

    async def _add_note(self, text: str | None = None) -> None:
        note = self.board.add(text=text)
        card = NoteCard(self.board, note, cell_px=self.cell_px)
        await self.query_one("#notes", VerticalScroll).mount(card)
        card.focus_text()

    async def on_note_card_delete_requested(self, event: NoteCard.DeleteRequested) -> None:
        self.board.remove(event.card.note)
        await event.card.remove()

    def action_quit(self) -> None:
        self.app.exit()
