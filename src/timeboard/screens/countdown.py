"""Modal screen to configure the countdown (end time or duration)."""

from __future__ import annotations

from typing import NamedTuple

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static, Switch

from timeboard.screens.base import MODAL_BINDINGS


class CountdownRequest(NamedTuple):
    by_end_time: bool
    text: str


class CountdownSetupScreen(ModalScreen[CountdownRequest | None]):
    """Collect countdown input. Dismisses with a CountdownRequest or None if cancelled.

    Validation happens in the caller, which keeps the previous countdown on error.
    """

    BINDINGS = MODAL_BINDINGS

    DEFAULT_CSS = """
    CountdownSetupScreen {
        align: center middle;
    }
    #countdown-container {
        width: 60;
        height: auto;
        background: $surface;
        border: tall $accent;
        padding: 1 2;
    }
    #countdown-title {
        text-align: center;
        margin-bottom: 1;
    }
    #countdown-mode-row {
        height: auto;
        align: left middle;
    }
    #countdown-buttons {
        height: auto;
        margin-top: 1;
    }
    """

    def __init__(
        self,
        by_end_time: bool = True,
        end_time: str = "",
        duration: str = "",
    ) -> None:
        super().__init__()
        self._by_end_time = by_end_time
        self._end_time = end_time
        self._duration = duration

    def compose(self) -> ComposeResult:
        with Vertical(id="countdown-container"):
            yield Label("Countdown", id="countdown-title")
            with Horizontal(id="countdown-mode-row"):
                yield Switch(value=self._by_end_time, id="by-end-switch")
                yield Static("Count down to an end time", id="by-end-label")
            yield Static("End time (24h HH:MM):")
            yield Input(value=self._end_time, placeholder="17:30", id="end-input")
            yield Static("Duration (minutes, H:MM or H:MM:SS):")
            yield Input(value=self._duration, placeholder="25", id="duration-input")
            with Horizontal(id="countdown-buttons"):
                yield Button("Start", id="btn-start", variant="primary")
                yield Button("Cancel", id="btn-cancel")

    def on_mount(self) -> None:
        self._sync_inputs()

    def _sync_inputs(self) -> None:
        by_end = self.query_one("#by-end-switch", Switch).value
        self.query_one("#end-input", Input).disabled = not by_end
        self.query_one("#duration-input", Input).disabled = by_end
        self.query_one("#end-input" if by_end else "#duration-input", Input).focus()

    def on_switch_changed(self, event: Switch.Changed) -> None:
        self._sync_inputs()

    def _request(self) -> CountdownRequest:
        by_end = self.query_one("#by-end-switch", Switch).value
        field_id = "#end-input" if by_end else "#duration-input"
        return CountdownRequest(by_end, self.query_one(field_id, Input).value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.dismiss(self._request())

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-start":
            self.dismiss(self._request())
        elif event.button.id == "btn-cancel":
            self.action_cancel()

    def action_cancel(self) -> None:
        self.dismiss(None)
