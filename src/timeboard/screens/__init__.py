"""TUI screens and widgets — Board, Countdown setup, time face, note cards."""

from timeboard.screens.board import BoardScreen
from timeboard.screens.countdown import CountdownRequest, CountdownSetupScreen
from timeboard.screens.note_card import NoteCard, SizeSlider
from timeboard.screens.time_face import TimeFace

__all__ = [
    "BoardScreen",
    "CountdownRequest",
    "CountdownSetupScreen",
    "NoteCard",
    "SizeSlider",
    "TimeFace",
]
