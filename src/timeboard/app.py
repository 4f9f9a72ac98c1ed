"""Textual TUI app: live clock/countdown with a note board.

Layout:
┌─────────────────────────────────────────────┐
│        ╭──────────────────────────╮         │
│        │   12:34:56  PM           │         │
│        │      drag to resize      │         │
│        ╰──────────────────────────╯         │
│  ╭───────────────────────────╮              │
│  │ Buy milk                  │              │
│  │ ━━━●──────────────  4.2vw │ [Delete]     │
│  ╰───────────────────────────╯              │
├─────────────────────────────────────────────┤
│  m Clock/Countdown  e Edit  c Countdown  n  │
└─────────────────────────────────────────────┘
"""

from __future__ import annotations

import logging
from typing import Any

from textual.app import App

from timeboard.board import NoteBoard
from timeboard.config import DEFAULTS, load_config
from timeboard.drag import DragControl
from timeboard.screens.board import BoardScreen
from timeboard.timekeeper import Mode, TimeKeeper
from timeboard.units import ParseError, parse

logger = logging.getLogger(__name__)


def build_time_size(cfg: dict[str, Any]) -> DragControl:
    """Size control for the time display, from config (falls back to the default size)."""
    lo, hi = float(cfg["time_size_min"]), float(cfg["time_size_max"])
    try:
        value = parse(cfg["time_size"], lo, hi)
    except ParseError as exc:
        logger.warning("Bad time_size in config (%s); using default", exc)
        value = parse(DEFAULTS["time_size"]["value"], lo, hi)
    return DragControl(value, axis="y", min_rendered_size=float(cfg["min_font_px"]))


def build_board(cfg: dict[str, Any]) -> NoteBoard:
    return NoteBoard(
        size_min=float(cfg["note_size_min"]),
        size_max=float(cfg["note_size_max"]),
        initial_progress=float(cfg["note_initial_progress"]),
        min_rendered_size=float(cfg["min_font_px"]),
    )


class TimeboardApp(App[None]):
    """Main timeboard TUI application."""

    TITLE = "timeboard"

    CSS = """
    Screen {
        background: $background;
    }
    .screen-frame {
        width: 100%;
        height: 1fr;
        align: center top;
    }
    """

    def __init__(
        self,
        cfg: dict[str, Any] | None = None,
        keeper: TimeKeeper | None = None,
    ) -> None:
        super().__init__()
        self.cfg = cfg if cfg is not None else load_config()
        if keeper is None:
            keeper = TimeKeeper()
            keeper.state.countdown.by_end_time = bool(self.cfg["countdown_by_end_time"])
        self.keeper = keeper
        self.time_size = build_time_size(self.cfg)
        self.board = build_board(self.cfg)
        self.board.add()

    def start_countdown(self, by_end_time: bool, text: str) -> None:
        """Configure the countdown before the app runs; raises ValidationError."""
        self.keeper.set_countdown_from_user_input(by_end_time, text)
        self.keeper.set_mode(Mode.COUNTDOWN)

    def on_mount(self) -> None:
        logger.info("timeboard started in %s mode", self.keeper.mode.value)
        self.push_screen(
            BoardScreen(
                self.keeper,
                self.board,
                self.time_size,
                tick_interval=float(self.cfg["tick_interval"]),
                cell_px=float(self.cfg["cell_px"]),
            )
        )
