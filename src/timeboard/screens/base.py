"""Shared bindings and pointer helpers for timeboard screens."""

from __future__ import annotations

from textual.binding import Binding


BOARD_BINDINGS = [
    Binding("m", "toggle_mode", "Clock/Countdown", key_display="m"),
    Binding("e", "edit_time", "Edit time", key_display="e"),
    Binding("c", "countdown_setup", "Countdown", key_display="c"),
    Binding("n", "new_note", "New note", key_display="n"),
    Binding("r", "reset_size", "Reset size", key_display="r"),
    Binding("q", "quit", "Quit", key_display="q"),
    Binding("ctrl+c", "quit", "Quit", key_display="^c", priority=True),
]

# Active only while a time segment is being edited
EDIT_BINDINGS = [
    Binding("left", "rotate(-1)", "Prev segment", show=False),
    Binding("right", "rotate(1)", "Next segment", show=False),
    Binding("up", "adjust(1)", "Increase", show=False),
    Binding("down", "adjust(-1)", "Decrease", show=False),
    Binding("enter", "finish_editing", "Done", show=False),
    Binding("escape", "finish_editing", "Done", show=False),
]

MODAL_BINDINGS = [
    Binding("escape", "cancel", "Cancel"),
    Binding("ctrl+c", "cancel", "Cancel", priority=True),
]


def cells_to_px(x: float, y: float, cell_px: float) -> tuple[float, float]:
    """Terminal cell coordinates in font px. A cell is about half as wide as it is tall."""
    return x * cell_px / 2, y * cell_px
