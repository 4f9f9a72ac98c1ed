"""Scalar magnitudes tagged with a CSS-style unit and a clamped range.

A UnitValue like ``16vw`` sizes the time display; each note carries its own
with a narrower range. Values are immutable: every change produces a new one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

_NUMBER_UNIT_RE = re.compile(r"^(-?\d*\.?\d+)([a-z%]*)$", re.IGNORECASE)

# Decimal places kept when formatting or scaling a magnitude
PRECISION = 4


class ParseError(ValueError):
    """Text could not be read as a magnitude, duration or time of day."""


@dataclass(frozen=True)
class UnitValue:
    magnitude: float
    unit: str = ""
    min: float = float("-inf")
    max: float = float("inf")

    def clamp(self, value: float) -> UnitValue:
        """Return a copy holding ``value`` constrained to [min, max]."""
        return replace(self, magnitude=max(self.min, min(self.max, value)))

    def format(self) -> str:
        """Render as magnitude + unit, e.g. ``24.5vw``."""
        text = f"{self.magnitude:.{PRECISION}f}".rstrip("0").rstrip(".")
        if text in ("-0", ""):
            text = "0"
        return f"{text}{self.unit}"

    @property
    def progress(self) -> float:
        """Position of the magnitude inside its range as a 0.0–1.0 fraction."""
        span = self.max - self.min
        if span <= 0 or span == float("inf"):
            return 0.0
        return (self.magnitude - self.min) / span

    def from_progress(self, fraction: float) -> UnitValue:
        """Return the value sitting at ``fraction`` of the way through the range."""
        fraction = max(0.0, min(1.0, fraction))
        return self.clamp(self.min + (self.max - self.min) * fraction)

    def __str__(self) -> str:
        return self.format()


def parse(
    text: str,
    min: float = float("-inf"),
    max: float = float("inf"),
) -> UnitValue:
    """Read ``"16vw"``-style text into a UnitValue clamped to [min, max].

    Raises ParseError when the text has no leading number.
    """
    match = _NUMBER_UNIT_RE.match(str(text).strip())
    if not match:
        raise ParseError(f"Not a sizing value: {text!r}")
    value = UnitValue(magnitude=float(match.group(1)), unit=match.group(2), min=min, max=max)
    return value.clamp(value.magnitude)
