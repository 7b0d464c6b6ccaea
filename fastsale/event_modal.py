"""Sales event selection modal screen."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from fastsale.event_context import EventContext
from fastsale.models import Event


class EventModal(ModalScreen[None]):
    """Pick the event the following sales belong to, or none at all."""

    CSS = """
    EventModal {
        align: center middle;
        background: $background 60%;
    }

    #event-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #event-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #event-list {
        color: white;
        margin-bottom: 1;
    }

    #event-help {
        color: #dddddd;
    }
    """

    def __init__(self, events: list[Event], context: EventContext, on_change: Callable[[], None]) -> None:
        super().__init__()
        self.events = events
        self.event_context = context
        self.on_change = on_change
        self.cursor_index = 0
        if context.current_event in events:
            self.cursor_index = events.index(context.current_event)

    def compose(self) -> ComposeResult:
        with Container(id="event-dialog"):
            yield Static("Sales Event", id="event-title")
            yield Static(id="event-list")
            yield Static("J/K/↑/↓ move, Enter select, N no event, Esc/q close", id="event-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key in {"escape", "q", "ctrl+c"}:
            self._close()
            event.stop()
            return

        if event.key in {"j", "down"}:
            self._move_cursor(1)
            event.stop()
            return

        if event.key in {"k", "up"}:
            self._move_cursor(-1)
            event.stop()
            return

        if event.key == "enter":
            if self.events:
                self.event_context.set_event(self.events[self.cursor_index])
                self._close()
            event.stop()
            return

        if event.key == "n":
            self.event_context.choose_no_event()
            self._close()
            event.stop()

    def _close(self) -> None:
        self.dismiss()
        self.on_change()

    def _move_cursor(self, delta: int) -> None:
        if not self.events:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.events)
        self._refresh_content()

    def _refresh_content(self) -> None:
        listing = self.query_one("#event-list", Static)
        if not self.events:
            listing.update("No active events")
            return

        content = Text(style="white")
        for idx, sales_event in enumerate(self.events):
            if idx > 0:
                content.append("\n")
            pointer = "➤ " if idx == self.cursor_index else "  "
            is_current = sales_event == self.event_context.current_event
            content.append(f"{pointer}{sales_event.name}", style="bold white" if is_current else "white")
            details = [part for part in (sales_event.location, sales_event.start_time.replace("T", " ")) if part]
            content.append(f"  {' · '.join(details)}", style="#dddddd")
        listing.update(content)
