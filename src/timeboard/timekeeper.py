"""Clock and countdown state, and the segments the display shows.

The displayed time is never accumulated tick by tick. Every call to
``now()`` re-reads the real clock and adds the user's offset, so a slow or
irregular tick can delay a repaint but never makes the clock drift.
"""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, NamedTuple

from timeboard.units import ParseError

logger = logging.getLogger(__name__)

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

# Countdown mode keeps the meridiem slot so the layout does not shift
COUNTDOWN_PLACEHOLDER = " "

_MINUTES_RE = re.compile(r"^[0-9]+$")
_DURATION_RE = re.compile(r"^([0-9]+):([0-9]+)(?::([0-9]+))?$")
_TIME_OF_DAY_RE = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")


class ValidationError(ValueError):
    """User-supplied countdown input was rejected; nothing was changed."""


class Mode(str, Enum):
    CLOCK = "clock"
    COUNTDOWN = "countdown"


class Segment(str, Enum):
    HOURS = "hours"
    MINUTES = "minutes"
    MERIDIEM = "meridiem"
    SECONDS = "seconds"


@dataclass
class CountdownState:
    by_end_time: bool = True
    end_timestamp: int | None = None
    duration_ms: int = 0
    started_at: int | None = None


@dataclass
class TimeState:
    mode: Mode = Mode.CLOCK
    offset_ms: int = 0
    editing: bool = False
    edit_target: Segment | None = None
    countdown: CountdownState = field(default_factory=CountdownState)


class TimeDisplay(NamedTuple):
    """Zero-padded segment strings ready to paint."""

    hours: str
    minutes: str
    seconds: str  # colon-prefixed, e.g. ":07"
    meridiem: str

    def __str__(self) -> str:
        return f"{self.hours}:{self.minutes}{self.seconds} {self.meridiem}".rstrip()


def system_clock_ms() -> int:
    return int(time.time() * 1000)


def to_ms(moment: datetime) -> int:
    return int(round(moment.timestamp() * 1000))


def from_ms(ms: int) -> datetime:
    """Local wall-clock datetime for an epoch timestamp in ms."""
    return datetime.fromtimestamp(ms / 1000)


def parse_duration(text: str) -> int:
    """Parse a countdown duration into milliseconds.

    ``"90"`` is 90 minutes; otherwise ``H:MM`` or ``H:MM:SS`` with minutes
    and seconds in 0–59.
    """
    s = (text or "").strip()
    if not s:
        raise ParseError("Duration is empty")
    if _MINUTES_RE.match(s):
        return int(s) * MS_PER_MINUTE

    match = _DURATION_RE.match(s)
    if not match:
        raise ParseError(f"Duration must be minutes, H:MM or H:MM:SS, got {text!r}")
    hours = int(match.group(1))
    minutes = int(match.group(2))
    seconds = int(match.group(3) or 0)
    if minutes > 59 or seconds > 59:
        raise ParseError(f"Minutes and seconds must be 0-59, got {text!r}")
    return ((hours * 60 + minutes) * 60 + seconds) * MS_PER_SECOND


def parse_time_of_day(text: str) -> tuple[int, int]:
    """Parse a 24-hour ``HH:MM`` string into (hour, minute)."""
    match = _TIME_OF_DAY_RE.match((text or "").strip())
    if not match:
        raise ParseError(f"End time must look like HH:MM, got {text!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ParseError(f"End time out of range: {text!r}")
    return hour, minute


def split_ms(ms: int) -> tuple[int, int, int]:
    """Floor a millisecond span into (hours, minutes, seconds); hours are unbounded."""
    total = max(0, ms) // MS_PER_SECOND
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return hours, minutes, seconds


class TimeKeeper:
    """Owns the TimeState and answers "what should the display show now?"."""

    def __init__(
        self,
        state: TimeState | None = None,
        clock: Callable[[], int] = system_clock_ms,
    ) -> None:
        self.state = state if state is not None else TimeState()
        self._clock = clock

    @property
    def countdown(self) -> CountdownState:
        return self.state.countdown

    @property
    def mode(self) -> Mode:
        return self.state.mode

    def now(self) -> int:
        """Adjusted wall-clock time in epoch ms."""
        return self._clock() + self.state.offset_ms

    def set_offset(self, target_ms: int) -> None:
        """Make ``now()`` read ``target_ms`` at this instant; time keeps running from there."""
        self.state.offset_ms = int(target_ms) - self._clock()
        logger.debug("Clock offset set to %d ms", self.state.offset_ms)

    def reset_offset(self) -> None:
        self.state.offset_ms = 0

    def set_mode(self, mode: Mode | str) -> TimeDisplay:
        self.state.mode = Mode(mode)
        logger.debug("Mode -> %s", self.state.mode.value)
        return self.derive_display()

    def toggle_mode(self) -> TimeDisplay:
        target = Mode.CLOCK if self.state.mode is Mode.COUNTDOWN else Mode.COUNTDOWN
        return self.set_mode(target)

    # -- countdown -----------------------------------------------------------

    def remaining_ms(self) -> int:
        """Countdown time left, never negative."""
        cd = self.state.countdown
        now = self.now()
        if cd.by_end_time:
            if cd.end_timestamp is None:
                return 0
            remaining = cd.end_timestamp - now
        else:
            started = cd.started_at if cd.started_at is not None else now
            remaining = started + cd.duration_ms - now
        return max(0, remaining)

    @property
    def expired(self) -> bool:
        """True once a configured countdown has run down to zero."""
        cd = self.state.countdown
        configured = cd.end_timestamp is not None if cd.by_end_time else cd.started_at is not None
        return configured and self.remaining_ms() == 0

    def set_countdown_from_user_input(self, by_end_time: bool, text: str) -> None:
        """Configure the countdown from an ``HH:MM`` end time or a duration string.

        Raises ValidationError on malformed input, leaving the previous
        countdown configuration untouched.
        """
        cd = self.state.countdown
        if by_end_time:
            try:
                hour, minute = parse_time_of_day(text)
            except ParseError as exc:
                raise ValidationError(str(exc)) from exc
            now = self.now()
            target = from_ms(now).replace(hour=hour, minute=minute, second=0, microsecond=0)
            if to_ms(target) <= now:
                target += timedelta(days=1)
            cd.by_end_time = True
            cd.end_timestamp = to_ms(target)
            cd.started_at = None
            logger.info("Countdown to %s", target.isoformat(timespec="minutes"))
        else:
            try:
                duration = parse_duration(text)
            except ParseError as exc:
                raise ValidationError(str(exc)) from exc
            cd.by_end_time = False
            cd.duration_ms = duration
            cd.started_at = self.now()
            logger.info("Countdown of %d ms started", duration)

    def reseed_countdown(self, remaining: int) -> None:
        """Restart the active countdown so that ``remaining`` ms are left from now."""
        cd = self.state.countdown
        remaining = max(0, int(remaining))
        if cd.by_end_time:
            cd.end_timestamp = self.now() + remaining
            cd.started_at = None
        else:
            cd.duration_ms = remaining
            cd.started_at = self.now()

    # -- display -------------------------------------------------------------

    def derive_display(self) -> TimeDisplay:
        if self.state.mode is Mode.CLOCK:
            moment = from_ms(self.now())
            meridiem = "PM" if moment.hour >= 12 else "AM"
            hour = moment.hour % 12 or 12
            return TimeDisplay(
                f"{hour:02d}",
                f"{moment.minute:02d}",
                f":{moment.second:02d}",
                meridiem,
            )

        hours, minutes, seconds = split_ms(self.remaining_ms())
        return TimeDisplay(
            f"{hours:02d}",
            f"{minutes:02d}",
            f":{seconds:02d}",
            COUNTDOWN_PLACEHOLDER,
        )
