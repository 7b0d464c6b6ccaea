"""Tests for presentation helpers."""

from decimal import Decimal

from rich.text import Text

from fastsale.config import CURRENCY_SYMBOL, FREE_LABEL
from fastsale.models import CartLineItem, SelectedAddon
from fastsale.rendering import (
    format_addon_price,
    format_addon_tags,
    format_currency,
    format_line_label,
    render_window,
    selection_hint,
    window_bounds,
)


class TestCurrency:
    def test_two_decimals(self):
        assert format_currency(Decimal("10")) == f"{CURRENCY_SYMBOL} 10.00"

    def test_rounds_half_up(self):
        assert format_currency(Decimal("0.125")) == f"{CURRENCY_SYMBOL} 0.13"

    def test_thousands_separator(self):
        assert format_currency(Decimal("1234.5")) == f"{CURRENCY_SYMBOL} 1,234.50"


class TestAddonPrice:
    def test_free(self):
        assert format_addon_price(Decimal("0")) == FREE_LABEL

    def test_priced(self):
        assert format_addon_price(Decimal("2")) == f"+ {CURRENCY_SYMBOL} 2.00"


class TestSelectionHint:
    def test_required(self, single_choice_product):
        assert selection_hint(single_choice_product.addon_configs[0]) == "Choose 1 to 1"

    def test_optional(self, multi_choice_product):
        assert selection_hint(multi_choice_product.addon_configs[0]) == "Optional (max 2)"


class TestBasketLabels:
    def test_line_label(self, plain_product):
        line = CartLineItem(internal_id="x", product=plain_product, quantity=2, line_total=Decimal("12"))
        assert format_line_label(line).plain == f"2x Cola  {CURRENCY_SYMBOL} 12.00"

    def test_addon_tags(self):
        addons = [SelectedAddon(1, "Ice", Decimal("0")), SelectedAddon(2, "Lemon", Decimal("1"))]
        assert format_addon_tags(addons).plain == "[Ice] [Lemon]"


class TestWindowBounds:
    def test_short_list_fits(self):
        assert window_bounds(3, 8, 2) == (0, 3)

    def test_empty(self):
        assert window_bounds(0, 8, None) == (0, 0)

    def test_centres_selection(self):
        assert window_bounds(20, 5, 10) == (8, 13)

    def test_clamped_at_edges(self):
        assert window_bounds(20, 5, 1) == (0, 5)
        assert window_bounds(20, 5, 19) == (15, 20)

    def test_no_selection_starts_at_top(self):
        assert window_bounds(20, 5, None) == (0, 5)


class TestRenderWindow:
    def _entry(self, idx, value):
        return Text(f"{idx}:{value}")

    def test_pointer_marks_selected_entry(self):
        rendered = render_window(["a", "b"], 8, 1, self._entry).plain
        assert rendered == "  0:a\n➤ 1:b"

    def test_ellipsis_for_hidden_entries(self):
        entries = [str(n) for n in range(10)]
        rendered = render_window(entries, 3, 5, self._entry).plain.split("\n")
        assert rendered == ["⋮", "  4:4", "➤ 5:5", "  6:6", "⋮"]

    def test_no_leading_marker_at_top(self):
        entries = [str(n) for n in range(10)]
        rendered = render_window(entries, 3, None, self._entry).plain.split("\n")
        assert rendered == ["  0:0", "  1:1", "  2:2", "⋮"]
