"""Selecting and nudging individual time segments with the keyboard.

In clock mode an edit moves the user's offset against the system clock, so
the clock keeps ticking at normal speed from the edited time. In countdown
mode an edit adds or removes time from whatever is left.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from timeboard.timekeeper import (
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    Mode,
    Segment,
    TimeKeeper,
    from_ms,
    to_ms,
)

logger = logging.getLogger(__name__)

SEGMENT_ORDER: tuple[Segment, ...] = (
    Segment.HOURS,
    Segment.MINUTES,
    Segment.MERIDIEM,
    Segment.SECONDS,
)

_CLOCK_STEPS = {
    Segment.HOURS: timedelta(hours=1),
    Segment.MINUTES: timedelta(minutes=1),
    Segment.SECONDS: timedelta(seconds=1),
    Segment.MERIDIEM: timedelta(hours=12),
}

_COUNTDOWN_STEPS_MS = {
    Segment.HOURS: MS_PER_HOUR,
    Segment.MINUTES: MS_PER_MINUTE,
    Segment.SECONDS: MS_PER_SECOND,
}


class SegmentEditor:
    def __init__(self, keeper: TimeKeeper) -> None:
        self.keeper = keeper

    @property
    def editing(self) -> bool:
        return self.keeper.state.editing

    @property
    def selected(self) -> Segment | None:
        return self.keeper.state.edit_target

    def enter_editing(self) -> None:
        state = self.keeper.state
        state.editing = True
        if state.edit_target is None:
            state.edit_target = Segment.HOURS

    def exit_editing(self) -> None:
        state = self.keeper.state
        state.editing = False
        state.edit_target = None

    def select(self, segment: Segment | str) -> None:
        """Start editing with ``segment`` selected (e.g. the user clicked it)."""
        self.enter_editing()
        self.keeper.state.edit_target = Segment(segment)

    def rotate(self, direction: int) -> Segment | None:
        """Move the selection one step forward (+1) or back (-1), wrapping."""
        state = self.keeper.state
        if not state.editing:
            logger.debug("rotate ignored: not editing")
            return None
        current = state.edit_target or Segment.HOURS
        step = 1 if direction > 0 else -1
        idx = (SEGMENT_ORDER.index(current) + step) % len(SEGMENT_ORDER)
        state.edit_target = SEGMENT_ORDER[idx]
        return state.edit_target

    def adjust(self, delta: int) -> None:
        """Nudge the selected segment by ``delta`` (+1 or -1)."""
        segment = self.selected
        if not self.editing or segment is None:
            logger.debug("adjust ignored: nothing selected")
            return
        step = 1 if delta > 0 else -1

        if self.keeper.mode is Mode.COUNTDOWN:
            unit = _COUNTDOWN_STEPS_MS.get(segment)
            if unit is None:
                logger.debug("adjust ignored: %s has no meaning in countdown", segment.value)
                return
            remaining = self.keeper.remaining_ms() + step * unit
            self.keeper.reseed_countdown(max(0, remaining))
            return

        desired = from_ms(self.keeper.now()) + step * _CLOCK_STEPS[segment]
        self.keeper.set_offset(to_ms(desired))
