"""Pointer-drag scaling of a UnitValue.

A DragControl governs exactly one UnitValue (the time display, or one note).
Pointer-down opens a DragSession anchored at the pointer; every pointer move
rescales the baseline magnitude by how far the pointer travelled relative to
the element's rendered extent at drag start. Pointer-up and pointer-cancel
both close the session and keep the last computed value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, NamedTuple

from timeboard.units import PRECISION, UnitValue

logger = logging.getLogger(__name__)

# Smallest rendered size (font px) a drag may produce
MIN_RENDERED_SIZE = 10.0
# Target extents are never allowed to collapse below this
MIN_EXTENT = 6.0

Axis = Literal["x", "y"]


class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class DragSession:
    anchor: Point
    baseline: UnitValue
    base_extent: float
    base_rendered_size: float
    active: bool = True


class DragControl:
    """Turns a one-dimensional pointer displacement into a proportional rescale."""

    def __init__(
        self,
        value: UnitValue,
        *,
        axis: Axis = "y",
        min_rendered_size: float = MIN_RENDERED_SIZE,
        min_extent: float = MIN_EXTENT,
    ) -> None:
        self._value = value
        self._original = value
        self.axis = axis
        self.min_rendered_size = min_rendered_size
        self.min_extent = min_extent
        self.session: DragSession | None = None

    @property
    def value(self) -> UnitValue:
        return self._value

    @property
    def active(self) -> bool:
        return self.session is not None and self.session.active

    def _coord(self, position: Point | tuple[float, float]) -> float:
        return position[0] if self.axis == "x" else position[1]

    def begin(
        self,
        position: Point | tuple[float, float],
        extent: float,
        value: UnitValue | None = None,
        rendered_size: float | None = None,
    ) -> bool:
        """Open a session at ``position``. Returns False if one is already active."""
        if self.active:
            logger.debug("Drag already active on %s control; ignoring begin", self.axis)
            return False
        self.session = DragSession(
            anchor=Point(*position),
            baseline=value if value is not None else self._value,
            base_extent=float(extent),
            base_rendered_size=float(rendered_size if rendered_size is not None else extent),
        )
        return True

    def update(self, position: Point | tuple[float, float]) -> UnitValue:
        """Rescale from the session baseline for the pointer now at ``position``."""
        session = self.session
        if session is None or not session.active:
            return self._value

        delta = self._coord(position) - self._coord(session.anchor)
        target = max(self.min_extent, session.base_extent + delta)
        k = target / max(1.0, session.base_extent)

        base_size = session.base_rendered_size or 1.0
        if base_size * k < self.min_rendered_size:
            k = self.min_rendered_size / base_size

        magnitude = round(session.baseline.magnitude * k, PRECISION)
        self._value = session.baseline.clamp(magnitude)
        return self._value

    def end(self) -> None:
        """Close the session. Safe to call when nothing is active."""
        if self.session is None:
            return
        logger.debug("Drag ended at %s", self._value.format())
        self.session = None

    cancel = end

    def reset(self) -> UnitValue:
        """Return to the value this control was created with."""
        self._value = self._original
        return self._value

    def restore(self, magnitude: float) -> UnitValue:
        """Apply a saved magnitude, clamped; the reset baseline is unchanged."""
        self._value = self._value.clamp(float(magnitude))
        return self._value
