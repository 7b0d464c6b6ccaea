"""Current sales event for the operator session."""

from __future__ import annotations

from fastsale.models import Event


class EventContext:
    """Tracks which event, if any, sales are attached to."""

    def __init__(self) -> None:
        self.current_event: Event | None = None
        self.user_chose_no_event = False

    @property
    def needs_selection(self) -> bool:
        """True until the operator picks an event or explicitly declines one."""
        return self.current_event is None and not self.user_chose_no_event

    @property
    def event_id(self) -> int | None:
        if self.current_event is None:
            return None
        return self.current_event.id

    def set_event(self, event: Event) -> None:
        self.current_event = event
        self.user_chose_no_event = False

    def clear_event(self) -> None:
        self.current_event = None

    def choose_no_event(self) -> None:
        self.current_event = None
        self.user_chose_no_event = True
