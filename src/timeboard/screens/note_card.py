"""Note card — editable text, a font-size slider, and a delete button."""

from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Input, Static

from timeboard.board import DEFAULT_NOTE_TEXT, Note, NoteBoard
from timeboard.screens.base import cells_to_px
from timeboard.units import UnitValue

# Terminal width (in vw) per unit of note size magnitude
NOTE_CARD_SCALE = 10

KNOB = "●"
TRACK_DONE = "━"
TRACK_LEFT = "─"


class SizeSlider(Widget):
    """Horizontal slider bound to a note's size control. Drag the track to resize."""

    DEFAULT_CSS = """
    SizeSlider {
        height: 1;
        width: 1fr;
        color: $accent;
    }
    SizeSlider.resizing {
        color: $warning;
    }
    """

    class Resized(Message):
        def __init__(self, slider: SizeSlider, value: UnitValue) -> None:
            super().__init__()
            self.slider = slider
            self.value = value

    def __init__(self, note: Note, cell_px: float = 16, **kwargs) -> None:
        super().__init__(**kwargs)
        self.note = note
        self.cell_px = cell_px

    def render(self) -> str:
        value = self.note.size.value
        label = f" {value.format():>7}"
        track = max(2, self.size.width - len(label))
        knob_at = round(value.progress * (track - 1))
        bar = TRACK_DONE * knob_at + KNOB + TRACK_LEFT * (track - knob_at - 1)
        return bar + label

    def _rendered_px(self, value: UnitValue) -> float:
        viewport_px, _ = cells_to_px(self.app.size.width, 0, self.cell_px)
        return value.magnitude / 100 * viewport_px

    def on_mouse_down(self, event: events.MouseDown) -> None:
        if event.button != 1:
            return
        control = self.note.size
        track_px, _ = cells_to_px(self.size.width or 1, 0, self.cell_px)
        started = control.begin(
            cells_to_px(event.screen_x, event.screen_y, self.cell_px),
            extent=track_px,
            rendered_size=self._rendered_px(control.value),
        )
        if started:
            self.capture_mouse()
            self.add_class("resizing")
            event.stop()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if not self.note.size.active:
            return
        value = self.note.size.update(cells_to_px(event.screen_x, event.screen_y, self.cell_px))
        self.refresh()
        self.post_message(self.Resized(self, value))
        event.stop()

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if not self.note.size.active:
            return
        self._finish_drag()
        event.stop()

    def on_mouse_release(self, event: events.MouseRelease) -> None:
        self._finish_drag()

    def _finish_drag(self) -> None:
        self.note.size.end()
        self.remove_class("resizing")
        if self.app.mouse_captured is self:
            self.release_mouse()


class NoteCard(Vertical):
    """One note on the board."""

    DEFAULT_CSS = """
    NoteCard {
        height: auto;
        border: round $surface-lighten-2;
        padding: 0 1;
        margin-bottom: 1;
    }
    NoteCard.default Input {
        color: $text-muted;
    }
    NoteCard .note-controls {
        height: 1;
    }
    NoteCard .note-delete {
        min-width: 8;
        height: 1;
        border: none;
        margin-left: 1;
    }
    """

    class DeleteRequested(Message):
        """User asked to delete this note."""

        def __init__(self, card: NoteCard) -> None:
            super().__init__()
            self.card = card

    def __init__(self, board: NoteBoard, note: Note, cell_px: float = 16, **kwargs) -> None:
        super().__init__(**kwargs)
        self.board = board
        self.note = note
        self.cell_px = cell_px

    def compose(self) -> ComposeResult:
        text = "" if self.note.is_default else self.note.text
        yield Input(value=text, placeholder=DEFAULT_NOTE_TEXT, classes="note-text")
        with Horizontal(classes="note-controls"):
            yield SizeSlider(self.note, cell_px=self.cell_px)
            yield Button("Delete", classes="note-delete", variant="error")

    def on_mount(self) -> None:
        self.set_class(self.note.is_default, "default")
        self.apply_size(self.note.size.value)

    def apply_size(self, value: UnitValue) -> None:
        self.styles.width = f"{min(100.0, value.magnitude * NOTE_CARD_SCALE):.2f}vw"

    def focus_text(self) -> None:
        self.query_one(Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        self.board.set_text(self.note, event.value)
        self.set_class(self.note.is_default, "default")

    def on_size_slider_resized(self, event: SizeSlider.Resized) -> None:
        self.apply_size(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.has_class("note-delete"):
            event.stop()
            self.post_message(self.DeleteRequested(self))
