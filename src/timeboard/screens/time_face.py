"""Time face — big digits plus a drag-to-resize area.

Terminals cannot scale glyphs, so the time display's size value is applied
as the face's width: a 16vw display spans 64% of the terminal.
"""

from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Digits, Static

from timeboard.drag import DragControl
from timeboard.screens.base import cells_to_px
from timeboard.timekeeper import Mode, Segment, TimeDisplay
from timeboard.units import UnitValue

# Terminal width (in vw) per unit of time display magnitude
TIME_FACE_SCALE = 4

_SEGMENT_LABELS = {
    Segment.HOURS: "hours",
    Segment.MINUTES: "minutes",
    Segment.MERIDIEM: "AM/PM",
    Segment.SECONDS: "seconds",
}

# Left to right across the digits; each field takes about a third of the width
_DIGIT_SEGMENTS = (Segment.HOURS, Segment.MINUTES, Segment.SECONDS)


def segment_at(fraction: float) -> Segment:
    """Which digit field sits at ``fraction`` (0..1) of the digits' width."""
    index = int(min(max(fraction, 0.0), 0.999) * len(_DIGIT_SEGMENTS))
    return _DIGIT_SEGMENTS[index]


class TimeFace(Vertical):
    """Live clock/countdown digits.

    Drag vertically to resize, click a field to edit it, double-click to reset.
    """

    DEFAULT_CSS = """
    TimeFace {
        height: auto;
        padding: 0 1;
        border: round $accent;
        align: center top;
    }
    TimeFace.resizing {
        border: round $warning;
    }
    TimeFace .time-row {
        width: 100%;
        height: auto;
        align: center middle;
    }
    TimeFace #time-digits {
        width: auto;
    }
    TimeFace #meridiem {
        width: 4;
        padding: 1 0 0 1;
    }
    TimeFace #time-status {
        width: 100%;
        content-align: center middle;
        color: $text-muted;
    }
    """

    class SegmentClicked(Message):
        """A time field was clicked."""

        def __init__(self, segment: Segment) -> None:
            super().__init__()
            self.segment = segment

    def __init__(self, control: DragControl, cell_px: float = 16, **kwargs) -> None:
        super().__init__(**kwargs)
        self.control = control
        self.cell_px = cell_px
        self._dragged = False

    def compose(self) -> ComposeResult:
        with Horizontal(classes="time-row"):
            yield Digits("12:00:00", id="time-digits")
            yield Static("AM", id="meridiem")
        yield Static("drag to resize", id="time-status")

    def on_mount(self) -> None:
        self.apply_size(self.control.value)

    def apply_size(self, value: UnitValue) -> None:
        self.styles.width = f"{min(100.0, value.magnitude * TIME_FACE_SCALE):.2f}vw"

    def show(self, display: TimeDisplay, mode: Mode, selected: Segment | None = None) -> None:
        """Paint the segments and a status line describing mode and selection."""
        self.query_one("#time-digits", Digits).update(
            f"{display.hours}:{display.minutes}{display.seconds}"
        )
        label = "LEFT" if mode is Mode.COUNTDOWN else display.meridiem
        self.query_one("#meridiem", Static).update(label)

        if selected is not None:
            status = f"editing {_SEGMENT_LABELS[selected]}  ←/→ select  ↑/↓ change  enter done"
        elif self.control.active:
            status = f"size {self.control.value.format()}"
        else:
            status = "drag to resize"
        self.query_one("#time-status", Static).update(status)

    def on_mouse_down(self, event: events.MouseDown) -> None:
        if event.button != 1:
            return
        height_px = (self.size.height or 1) * self.cell_px
        started = self.control.begin(
            cells_to_px(event.screen_x, event.screen_y, self.cell_px),
            extent=height_px,
            rendered_size=height_px,
        )
        if started:
            self._dragged = False
            self.capture_mouse()
            self.add_class("resizing")
            event.stop()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if not self.control.active:
            return
        position = cells_to_px(event.screen_x, event.screen_y, self.cell_px)
        if position != self.control.session.anchor:
            self._dragged = True
        self.apply_size(self.control.update(position))
        event.stop()

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if not self.control.active:
            return
        self._finish_drag()
        event.stop()

    def on_mouse_release(self, event: events.MouseRelease) -> None:
        # Capture lost without a mouse-up; keep the last size.
        self._finish_drag()

    def on_click(self, event: events.Click) -> None:
        if event.chain == 2:
            self.apply_size(self.control.reset())
            return
        if self._dragged:
            return
        segment = self._segment_under(event)
        if segment is not None:
            self.post_message(self.SegmentClicked(segment))

    def _segment_under(self, event: events.Click) -> Segment | None:
        if event.widget is None:
            return None
        if event.widget.id == "meridiem":
            return Segment.MERIDIEM
        if event.widget.id == "time-digits":
            region = event.widget.region
            return segment_at((event.screen_x - region.x) / (region.width or 1))
        return None

    def _finish_drag(self) -> None:
        self.control.end()
        self.remove_class("resizing")
        if self.app.mouse_captured is self:
            self.release_mouse()
