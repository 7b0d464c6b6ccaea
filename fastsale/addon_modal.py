"""Add-on composition modal screen."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from fastsale.composition import AddonSelection, Composition
from fastsale.models import AddonConfig, AddonItem
from fastsale.rendering import format_addon_price, format_currency, selection_hint


class AddonModal(ModalScreen[None]):
    """Centered modal to customize one product before adding it to the basket."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("ctrl+c", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "toggle_current", "Toggle"),
        ("space", "toggle_current", "Toggle"),
        ("c", "confirm", "Add to basket"),
    ]

    CSS = """
    AddonModal {
        align: center middle;
        background: $background 60%;
    }

    #addon-dialog {
        width: 72;
        height: auto;
        max-height: 90%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #addon-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #addon-body {
        margin-bottom: 1;
        color: white;
    }

    #addon-footer {
        color: white;
    }

    #addon-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)

    def __init__(self, selection: AddonSelection, on_confirm: Callable[[Composition], None]) -> None:
        super().__init__()
        self.addon_selection = selection
        self.on_confirm = on_confirm
        self.status_message = ""

    def compose(self) -> ComposeResult:
        with Container(id="addon-dialog"):
            yield Static(id="addon-title")
            yield Static(id="addon-body")
            yield Static(id="addon-footer")
            yield Static("J/K/↑/↓ move, Enter/Space toggle, +/- quantity, C add, Esc/q cancel", id="addon-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.character == "+":
            self.addon_selection.increment()
            self.status_message = ""
            self._refresh_content()
            event.stop()
            return

        if event.character == "-":
            self.addon_selection.decrement()
            self.status_message = ""
            self._refresh_content()
            event.stop()

    def action_close(self) -> None:
        self.dismiss()

    def action_move_cursor(self, delta: int) -> None:
        rows = self._rows()
        if not rows:
            return
        self.cursor_index = (self.cursor_index + delta) % len(rows)
        self._refresh_content()

    def action_toggle_current(self) -> None:
        rows = self._rows()
        if not rows:
            return
        config, item = rows[self.cursor_index]
        if not item.is_available:
            self.status_message = f"{item.name} is unavailable"
        elif not self.addon_selection.toggle(config.group_id, item.id, config.max_selection):
            self.status_message = f"{config.group.name}: at most {config.max_selection}"
        else:
            self.status_message = ""
        self._refresh_content()

    def action_confirm(self) -> None:
        composition = self.addon_selection.confirm()
        if composition is None:
            self.status_message = "Selection incomplete"
            self._refresh_content()
            return
        self.dismiss()
        self.on_confirm(composition)

    def _rows(self) -> list[tuple[AddonConfig, AddonItem]]:
        product = self.addon_selection.product
        if product is None:
            return []
        return [(config, item) for config in product.addon_configs for item in config.group.items]

    def _refresh_content(self) -> None:
        product = self.addon_selection.product
        if product is None:
            return

        title = self.query_one("#addon-title", Static)
        body = self.query_one("#addon-body", Static)
        footer = self.query_one("#addon-footer", Static)

        heading = Text(style="bold white")
        heading.append(product.name)
        heading.append(f"  {format_currency(self.addon_selection.compute_unit_price())}")
        title.update(heading)

        rows = self._rows()
        if self.cursor_index >= len(rows):
            self.cursor_index = max(0, len(rows) - 1)

        content = Text(style="white")
        current_group: int | None = None
        for idx, (config, item) in enumerate(rows):
            if config.group_id != current_group:
                if current_group is not None:
                    content.append("\n\n")
                current_group = config.group_id
                content.append(config.group.name, style="bold white")
                content.append(f"  {selection_hint(config)}  ", style="#dddddd")
                if self.addon_selection.is_group_satisfied(config):
                    content.append(" OK ", style="bold #0b1f0f on #5fbf72")
                else:
                    content.append(" Required ", style="bold #1f1600 on #e0b341")
            content.append("\n")

            pointer = "➤ " if idx == self.cursor_index else "  "
            is_checked = self.addon_selection.is_selected(config.group_id, item.id)
            checked = "[x]" if is_checked else "[ ]"
            if not item.is_available:
                style = "dim strike"
            elif is_checked:
                style = "bold white"
            elif self.addon_selection.is_group_full(config):
                style = "dim"
            else:
                style = "white"
            content.append(f"{pointer}{checked} {item.name}", style=style)
            content.append(f"  {format_addon_price(item.price)}", style="dim" if not item.is_available else "white")
        body.update(content)

        summary = Text(style="white")
        summary.append(f"Qty {self.addon_selection.quantity}   ")
        summary.append(f"Total {format_currency(self.addon_selection.compute_total())}", style="bold")
        if self.status_message:
            summary.append(f"\n{self.status_message}", style="#ffb3b3")
        footer.update(summary)
