"""Tests for the mounted board app (drag, typing, segment clicks)."""

import asyncio
from datetime import datetime

import pytest

pytest.importorskip("textual")

from textual import events
from textual.widgets import Digits, Input

from timeboard.app import TimeboardApp
from timeboard.config import DEFAULTS
from timeboard.screens.time_face import TimeFace, segment_at
from timeboard.timekeeper import Segment, TimeKeeper, to_ms

SIZE = (120, 40)


def _app() -> TimeboardApp:
    cfg = {key: entry["value"] for key, entry in DEFAULTS.items()}
    now = to_ms(datetime(2026, 1, 15, 9, 0))
    return TimeboardApp(cfg=cfg, keeper=TimeKeeper(clock=lambda: now))


def _mouse(event_class, widget, screen_y: int, screen_x: int = 10):
    return event_class(widget, 1, 1, 0, 0, 1, False, False, False, screen_x=screen_x, screen_y=screen_y)


def test_time_face_drag_up_shrinks_and_down_grows() -> None:
    async def scenario() -> None:
        app = _app()
        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            face = app.screen.query_one(TimeFace)
            start_width = face.size.width

            face.on_mouse_down(_mouse(events.MouseDown, face, 10))
            face.on_mouse_move(_mouse(events.MouseMove, face, 10))
            assert face.control.value.magnitude == 16

            face.on_mouse_move(_mouse(events.MouseMove, face, 9))
            shrunk = face.control.value.magnitude
            face.on_mouse_up(_mouse(events.MouseUp, face, 9))
            await pilot.pause()

            assert 8 <= shrunk < 16
            assert face.size.width < start_width
            assert not face.control.active
            assert app.mouse_captured is None

            face.on_mouse_down(_mouse(events.MouseDown, face, 10))
            face.on_mouse_move(_mouse(events.MouseMove, face, 11))
            face.on_mouse_up(_mouse(events.MouseUp, face, 11))
            assert face.control.value.magnitude > shrunk

    asyncio.run(scenario())


def test_time_face_double_click_resets() -> None:
    async def scenario() -> None:
        app = _app()
        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            face = app.screen.query_one(TimeFace)
            face.on_mouse_down(_mouse(events.MouseDown, face, 10))
            face.on_mouse_move(_mouse(events.MouseMove, face, 8))
            face.on_mouse_up(_mouse(events.MouseUp, face, 8))
            assert face.control.value.magnitude != 16

            face.on_click(events.Click(face, 1, 1, 0, 0, 1, False, False, False, chain=2))
            assert face.control.value.magnitude == 16

    asyncio.run(scenario())


def test_typing_with_nothing_focused_starts_a_note() -> None:
    async def scenario() -> None:
        app = _app()
        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            screen = app.screen
            screen.set_focus(None)
            await pilot.pause()

            await pilot.press("x")
            await pilot.pause()

            assert len(app.board) == 2
            note = app.board.notes[-1]
            assert note.text == "x"
            assert not note.is_default
            assert isinstance(screen.focused, Input)

            await pilot.press("y")
            await pilot.pause()
            assert len(app.board) == 2

    asyncio.run(scenario())


def test_bound_keys_are_not_turned_into_notes() -> None:
    async def scenario() -> None:
        app = _app()
        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            app.screen.set_focus(None)
            await pilot.pause()

            await pilot.press("n")
            await pilot.pause()
            assert len(app.board) == 2
            assert app.board.notes[-1].is_default

    asyncio.run(scenario())


def test_clicked_segment_starts_editing() -> None:
    async def scenario() -> None:
        app = _app()
        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            screen = app.screen
            face = screen.query_one(TimeFace)

            face.post_message(TimeFace.SegmentClicked(Segment.MINUTES))
            await pilot.pause()

            assert screen.editor.editing
            assert screen.editor.selected is Segment.MINUTES
            assert screen.focused is None

    asyncio.run(scenario())


def test_click_on_digits_picks_the_field_under_the_pointer() -> None:
    async def scenario() -> None:
        app = _app()
        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            face = app.screen.query_one(TimeFace)
            digits = face.query_one(Digits)
            region = digits.region
            clicked = []
            face.post_message = clicked.append

            last_column = region.x + region.width - 1
            face.on_click(events.Click(
                digits, 0, 0, 0, 0, 1, False, False, False,
                screen_x=last_column, screen_y=region.y,
            ))
            del face.post_message  # restore so app shutdown can deliver messages

            assert [m.segment for m in clicked] == [Segment.SECONDS]

    asyncio.run(scenario())


class TestSegmentAt:
    def test_thirds(self):
        assert segment_at(0.0) is Segment.HOURS
        assert segment_at(0.5) is Segment.MINUTES
        assert segment_at(0.9) is Segment.SECONDS

    def test_out_of_range_is_clamped(self):
        assert segment_at(-1) is Segment.HOURS
        assert segment_at(1.0) is Segment.SECONDS
        assert segment_at(5) is Segment.SECONDS
