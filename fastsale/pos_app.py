"""Main Textual app class."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from fastsale.addon_modal import AddonModal
from fastsale.composition import AddonSelection, Composition, quick_add
from fastsale.config import DEBUG_LOG_PATH
from fastsale.data import Catalog
from fastsale.event_context import EventContext
from fastsale.event_modal import EventModal
from fastsale.ledger import CartLedger
from fastsale.models import CartLineItem, Product
from fastsale.rendering import (
    badge_style,
    category_tag,
    format_addon_tags,
    format_currency,
    format_line_label,
    format_product_label,
    render_window,
)


class FastSaleApp(App):
    """A Textual point-of-sale for composing products into a basket."""

    TITLE = "FastSale"
    SUB_TITLE = "No event"

    CSS = """
    #main-layout {
        height: 1fr;
    }

    .pane {
        border: round $primary;
        padding: 1;
    }

    #basket-pane {
        width: 3fr;
    }

    #search-pane {
        width: 2fr;
        border: round $secondary;
    }

    .cursor-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #search-bar {
        height: 3;
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
    }

    #basket-totals {
        height: 1;
        margin-top: 1;
        text-style: bold;
    }

    #basket-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    input_state = reactive("normal")
    search_text = reactive("")
    selected_index = reactive(0)
    line_selected_index = reactive(None)

    BINDINGS = [
        Binding("tab", "cycle_results(1)", "Next result", priority=True),
        ("up", "cycle_results(-1)", "Previous result"),
        ("down", "cycle_results(1)", "Next result"),
        ("enter", "pick_selected", "Pick product"),
        ("backspace", "backspace_query", "Delete query char"),
        ("ctrl+c", "cancel_active_mode", "Exit active mode"),
        ("escape", "cancel_active_mode", "Exit active mode"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        catalog: Catalog,
        ledger: CartLedger | None = None,
        event_context: EventContext | None = None,
        addon_selection: AddonSelection | None = None,
        debug_log_path: str | Path = DEBUG_LOG_PATH,
    ) -> None:
        super().__init__()
        self.catalog = catalog
        self.ledger = ledger if ledger is not None else CartLedger()
        self.event_context = event_context if event_context is not None else EventContext()
        self.addon_selection = addon_selection if addon_selection is not None else AddonSelection()
        self.category_filter: int | None = None
        self.system_status = ""
        self._debug_log_path = Path(debug_log_path)
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="basket-pane", classes="pane"):
                yield Static("Basket", id="basket-title")
                yield Static("(basket is empty)", id="basket-list", classes="cursor-list")
                yield Static(id="basket-totals")
            with Vertical(id="search-pane", classes="pane"):
                yield Static(id="search-bar")
                yield Static(id="results", classes="cursor-list")

    def on_mount(self) -> None:
        self._log_debug(f"on_mount products={len(self.catalog.products)} events={len(self.catalog.events)}")
        self._refresh_all()
        if self.catalog.active_events() and self.event_context.needs_selection:
            self._open_event_selector()

    def _modal_open(self) -> bool:
        return isinstance(self.screen, (AddonModal, EventModal))

    def on_key(self, event: Key) -> None:
        if self._modal_open():
            return

        self._log_debug(
            f"on_key key={event.key!r} char={event.character!r} printable={event.is_printable} state={self.input_state!r}"
        )

        if self.input_state == "normal" and event.character in {"+", "-"}:
            self._adjust_selected_line(1 if event.character == "+" else -1)
            event.stop()
            return

        if not event.is_printable or event.character is None or len(event.character) != 1:
            return

        if self.input_state == "active":
            if not (event.character.isalnum() or event.character == " "):
                return
            self.search_text += event.character
            self.selected_index = 0
            self._refresh_search()
            event.stop()
            return

        key = event.character.lower()
        if key == "d":
            self._remove_selected_line()
            event.stop()
            return

        if key == "j":
            self._move_line_selection(1)
            event.stop()
            return

        if key == "k":
            self._move_line_selection(-1)
            event.stop()
            return

        if key == "x":
            self._clear_basket()
            event.stop()
            return

        if key == "e":
            self._open_event_selector()
            event.stop()
            return

        if key == "s":
            self._enter_search(None)
            event.stop()
            return

        if key.isdigit() and key != "0":
            categories = self.catalog.active_categories()
            idx = int(key) - 1
            if idx < len(categories):
                self._enter_search(categories[idx].id)
            event.stop()

    def _enter_search(self, category_id: int | None) -> None:
        self.category_filter = category_id
        self.input_state = "active"
        self.search_text = ""
        self.selected_index = 0
        self._refresh_search()

    def action_cancel_active_mode(self) -> None:
        if self._modal_open():
            return
        if self.input_state == "normal":
            return

        self.input_state = "normal"
        self.search_text = ""
        self.selected_index = 0
        self._refresh_search()

    def action_cycle_results(self, delta: int) -> None:
        if self._modal_open():
            return
        if self.input_state != "active":
            return

        results = self._filtered_results()
        if not results:
            self.selected_index = 0
            self._refresh_results(results)
            return
        self.selected_index = (self.selected_index + delta) % len(results)
        self._refresh_results(results)

    def action_pick_selected(self) -> None:
        if self._modal_open():
            return
        if self.input_state != "active":
            return

        results = self._filtered_results()
        if not results:
            return
        self._pick_product(results[self.selected_index])

    def action_backspace_query(self) -> None:
        if self._modal_open():
            return
        if self.input_state != "active":
            return

        if not self.search_text:
            return
        self.search_text = self.search_text[:-1]
        self.selected_index = 0
        self._refresh_search()

    def _pick_product(self, product: Product) -> None:
        if not product.has_addons:
            self._log_debug(f"quick_add product_id={product.id}")
            self._add_composition(quick_add(product))
            return

        self._log_debug(f"compose_start product_id={product.id} groups={len(product.addon_configs)}")
        self.addon_selection.start(product)
        self.push_screen(
            AddonModal(self.addon_selection, on_confirm=self._add_composition),
            callback=lambda _: self._refresh_all(),
        )

    def _add_composition(self, composition: Composition) -> None:
        line = self.ledger.add_composition(composition)
        if line is None:
            return
        self.line_selected_index = self.ledger.lines.index(line)
        self.system_status = f"Added {composition.quantity}x {composition.product.name}"
        self._log_debug(
            f"basket_add key={composition.key!r} qty={composition.quantity} line_id={line.internal_id} "
            f"line_qty={line.quantity} line_total={line.line_total}"
        )
        self._refresh_all()

    def _filtered_results(self) -> list[Product]:
        if self.category_filter is None:
            source = self.catalog.active_products()
        else:
            source = self.catalog.products_in_category(self.category_filter)
        if not self.search_text:
            return source
        q = self.search_text.lower()
        return [product for product in source if q in product.name.lower()]

    def _refresh_all(self) -> None:
        self._refresh_basket()
        self._refresh_search()

    def _selected_line(self) -> CartLineItem | None:
        lines = self.ledger.lines
        if self.line_selected_index is None:
            return None
        if not (0 <= self.line_selected_index < len(lines)):
            return None
        return lines[self.line_selected_index]

    def _move_line_selection(self, delta: int) -> None:
        if self.ledger.is_empty:
            return

        count = len(self.ledger)
        if self.line_selected_index is None:
            self.line_selected_index = 0 if delta > 0 else count - 1
        else:
            self.line_selected_index = (self.line_selected_index + delta) % count
        self._refresh_basket()

    def _adjust_selected_line(self, delta: int) -> None:
        line = self._selected_line()
        if line is None:
            return
        self.ledger.adjust_quantity(line.internal_id, delta)
        self._log_debug(f"basket_adjust line_id={line.internal_id} delta={delta} qty={line.quantity}")
        self._refresh_basket()

    def _remove_selected_line(self) -> None:
        line = self._selected_line()
        if line is None:
            return

        idx = self.line_selected_index
        self.ledger.remove(line.internal_id)
        self._log_debug(f"basket_remove line_id={line.internal_id}")

        if self.ledger.is_empty:
            self.line_selected_index = None
        else:
            self.line_selected_index = min(idx, len(self.ledger) - 1)
        self._refresh_basket()

    def _clear_basket(self) -> None:
        if self.ledger.is_empty:
            return
        self.ledger.clear()
        self.line_selected_index = None
        self.system_status = "Basket cleared"
        self._log_debug("basket_clear")
        self._refresh_all()

    def _open_event_selector(self) -> None:
        self.push_screen(EventModal(self.catalog.active_events(), self.event_context, on_change=self._on_event_changed))

    def _on_event_changed(self) -> None:
        current = self.event_context.current_event
        self.sub_title = current.name if current is not None else "No event"
        self._log_debug(f"event_selected event_id={self.event_context.event_id!r}")
        self._refresh_search()

    def _list_rows(self, widget: Static) -> int:
        height = widget.size.height
        return height if height > 0 else 8

    def _basket_entry(self, idx: int, line: CartLineItem) -> Text:
        text = Text(f"{idx + 1}. ")
        text.append_text(format_line_label(line))
        if line.addons:
            text.append("\n      ")
            text.append_text(format_addon_tags(line.addons))
        return text

    def _result_entry(self, _idx: int, product: Product) -> Text:
        return format_product_label(product, self.catalog.category(product.category_id))

    def _refresh_basket(self) -> None:
        try:
            basket_widget = self.query_one("#basket-list", Static)
            totals_widget = self.query_one("#basket-totals", Static)
        except NoMatches:
            return

        totals_widget.update(
            f"{self.ledger.total_items()} items   Total {format_currency(self.ledger.total_amount())}"
        )

        lines = self.ledger.lines
        if not lines:
            self.line_selected_index = None
            basket_widget.update("(basket is empty)")
            return

        if self.line_selected_index is not None and self.line_selected_index >= len(lines):
            self.line_selected_index = len(lines) - 1

        basket_widget.update(
            render_window(lines, self._list_rows(basket_widget), self.line_selected_index, self._basket_entry)
        )

    def _refresh_search(self) -> None:
        self._refresh_search_bar()
        if self.input_state == "normal":
            self._refresh_results([])
            return
        self._refresh_results(self._filtered_results())

    def _refresh_search_bar(self) -> None:
        try:
            bar = self.query_one("#search-bar", Static)
        except NoMatches:
            return
        if self.input_state == "normal":
            status = self.system_status or "Ready"
            bar.update(f"S search, 1-9 category, E event, X clear.\n{status}")
            return

        text = Text()
        category = self.catalog.category(self.category_filter) if self.category_filter is not None else None
        if category is not None:
            text.append(category_tag(category), style=badge_style(category.id))
        else:
            text.append("*", style="bold")
        text.append(f": {self.search_text}")
        bar.update(text)

    def _refresh_results(self, results: list[Product]) -> None:
        try:
            results_widget = self.query_one("#results", Static)
        except NoMatches:
            return
        if self.input_state == "normal":
            results_widget.update("")
            return

        if not results:
            results_widget.update("No results")
            return

        if self.selected_index >= len(results):
            self.selected_index = 0

        results_widget.update(
            render_window(results, self._list_rows(results_widget), self.selected_index, self._result_entry)
        )
