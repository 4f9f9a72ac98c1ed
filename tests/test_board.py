"""Tests for the note board."""

import pytest

from timeboard.board import DEFAULT_NOTE_TEXT, NoteBoard
from timeboard.drag import DragControl
from timeboard.units import UnitValue


class TestNotes:
    def test_new_note_is_placeholder(self):
        board = NoteBoard()
        note = board.add()
        assert note.is_default
        assert note.text == DEFAULT_NOTE_TEXT

    def test_initial_size_from_progress(self):
        board = NoteBoard()
        note = board.add()
        assert note.size_value.magnitude == pytest.approx(4.2)
        assert note.size_value.unit == "vw"
        assert (note.size_value.min, note.size_value.max) == (3, 9)

    def test_explicit_progress(self):
        note = NoteBoard().add(progress=1.0)
        assert note.size_value.magnitude == 9

    def test_note_with_text(self):
        note = NoteBoard().add(text="Buy milk")
        assert not note.is_default
        assert note.text == "Buy milk"

    def test_slider_is_horizontal(self):
        assert NoteBoard().add().size.axis == "x"

    def test_set_text_and_blank(self):
        board = NoteBoard()
        note = board.add()
        board.set_text(note, "hello")
        assert note.text == "hello"
        assert not note.is_default
        board.set_text(note, "   ")
        assert note.is_default
        assert note.text == DEFAULT_NOTE_TEXT

    def test_insertion_order(self):
        board = NoteBoard()
        a, b = board.add(text="a"), board.add(text="b")
        assert board.notes == [a, b]
        assert len(board) == 2

    def test_remove_ends_drag(self):
        board = NoteBoard()
        note = board.add()
        note.size.begin((0, 0), extent=50, rendered_size=100)
        board.remove(note)
        assert not note.size.active
        assert len(board) == 0

    def test_each_note_has_own_control(self):
        board = NoteBoard()
        a, b = board.add(), board.add()
        a.size.begin((0, 0), extent=50, rendered_size=100)
        a.size.update((50, 0))
        a.size.end()
        assert a.size_value.magnitude == pytest.approx(8.4)
        assert b.size_value.magnitude == pytest.approx(4.2)

    def test_custom_bounds(self):
        note = NoteBoard(size_min=2, size_max=4, initial_progress=0.5).add()
        assert note.size_value.magnitude == 3


class TestRestore:
    def test_restores_time_size_and_notes(self):
        board = NoteBoard()
        time_size = DragControl(UnitValue(16, "vw", 8, 25))
        board.restore(
            time_size,
            saved_time_size=20,
            saved_notes=[{"text": "one", "size": 5}, {"text": "two", "size": 100}],
        )
        assert time_size.value.magnitude == 20
        assert [n.text for n in board.notes] == ["one", "two"]
        assert [n.size_value.magnitude for n in board.notes] == [5, 9]

    def test_skips_unreadable_entries(self):
        board = NoteBoard()
        board.restore(saved_notes=[{"text": "no size"}, "junk", {"text": "ok", "size": "6"}])
        assert [n.text for n in board.notes] == ["ok"]

    def test_blank_saved_text_is_placeholder(self):
        board = NoteBoard()
        board.restore(saved_notes=[{"text": "", "size": 4}])
        assert board.notes[0].is_default

    def test_reset_after_restore_uses_initial(self):
        board = NoteBoard()
        board.restore(saved_notes=[{"text": "x", "size": 8}])
        assert board.notes[0].size.reset().magnitude == pytest.approx(4.2)
