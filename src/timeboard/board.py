"""Note board: an ordered list of notes, each sized by its own slider.

Notes start as a placeholder until the user types something. Every note owns
a DragControl over its font size, so dragging one slider never touches
another note.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from timeboard.drag import DragControl
from timeboard.units import UnitValue

logger = logging.getLogger(__name__)

DEFAULT_NOTE_TEXT = "New notes like $x^2 + y^2 \\leq 1$ will go here"

NOTE_SIZE_MIN = 3.0
NOTE_SIZE_MAX = 9.0
NOTE_SIZE_UNIT = "vw"
INITIAL_PROGRESS = 0.2


@dataclass
class Note:
    size: DragControl
    text: str = DEFAULT_NOTE_TEXT
    is_default: bool = True

    @property
    def size_value(self) -> UnitValue:
        return self.size.value


@dataclass
class NoteBoard:
    size_min: float = NOTE_SIZE_MIN
    size_max: float = NOTE_SIZE_MAX
    initial_progress: float = INITIAL_PROGRESS
    min_rendered_size: float = 10.0
    _notes: list[Note] = field(default_factory=list)

    @property
    def notes(self) -> list[Note]:
        return list(self._notes)

    def __len__(self) -> int:
        return len(self._notes)

    def _size_control(self, progress: float) -> DragControl:
        bounds = UnitValue(self.size_min, NOTE_SIZE_UNIT, self.size_min, self.size_max)
        return DragControl(
            bounds.from_progress(progress),
            axis="x",
            min_rendered_size=self.min_rendered_size,
        )

    def add(self, text: str | None = None, progress: float | None = None) -> Note:
        """Append a note; without text it shows the placeholder."""
        if progress is None:
            progress = self.initial_progress
        note = Note(size=self._size_control(progress))
        if text is not None and text.strip():
            note.text = text
            note.is_default = False
        self._notes.append(note)
        logger.debug("Note added (%d on board)", len(self._notes))
        return note

    def remove(self, note: Note) -> None:
        note.size.end()
        self._notes.remove(note)
        logger.debug("Note removed (%d on board)", len(self._notes))

    def set_text(self, note: Note, text: str) -> None:
        """Update note text; blank text falls back to the placeholder."""
        if text.strip():
            note.text = text
            note.is_default = False
        else:
            note.text = DEFAULT_NOTE_TEXT
            note.is_default = True

    def restore(
        self,
        time_size: DragControl | None = None,
        saved_time_size: float | None = None,
        saved_notes: Iterable[dict[str, Any]] = (),
    ) -> None:
        """Re-create a previously saved board.

        ``saved_notes`` holds ``{"text": ..., "size": ...}`` entries where size
        is a magnitude in the note unit. Entries that cannot be read are
        skipped.
        """
        if time_size is not None and saved_time_size is not None:
            time_size.restore(saved_time_size)
        for entry in saved_notes:
            try:
                text = str(entry.get("text", ""))
                size = float(entry["size"])
            except (AttributeError, KeyError, TypeError, ValueError) as exc:
                logger.warning("Skipping unreadable saved note %r: %s", entry, exc)
                continue
            note = self.add(text=text)
            note.size.restore(size)
