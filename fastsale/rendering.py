"""Rendering helpers for prices, add-on groups and basket lines."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, Iterable, Sequence, TypeVar

from rich.text import Text

from fastsale.config import CURRENCY_SYMBOL, FREE_LABEL
from fastsale.models import AddonConfig, CartLineItem, Category, Product, SelectedAddon

_BADGE_STYLES = (
    "bold #0b1f0f on #5fbf72",
    "bold #ffffff on #b23a48",
    "bold #ffffff on #2f6db5",
    "bold #1f1600 on #e0b341",
    "bold #ffffff on #7a4fb5",
)
_CENTS = Decimal("0.01")
_POINTER = "➤ "

T = TypeVar("T")


def format_currency(amount: Decimal) -> str:
    """Format an amount with the configured currency symbol and two decimals."""
    quantized = amount.quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{CURRENCY_SYMBOL} {quantized:,.2f}"


def format_addon_price(price: Decimal) -> str:
    """Show free add-ons as a label rather than a zero amount."""
    if price == 0:
        return FREE_LABEL
    return f"+ {format_currency(price)}"


def selection_hint(config: AddonConfig) -> str:
    if config.min_selection > 0:
        return f"Choose {config.min_selection} to {config.max_selection}"
    return f"Optional (max {config.max_selection})"


def badge_style(category_id: int) -> str:
    """Return a consistent badge style for a category."""
    return _BADGE_STYLES[category_id % len(_BADGE_STYLES)]


def category_tag(category: Category) -> str:
    return category.name[:1].upper()


def format_product_label(product: Product, category: Category | None = None) -> Text:
    """Render a product with an optional colored category tag and its price."""
    text = Text()
    if category is not None:
        text.append(category_tag(category), style=badge_style(category.id))
        text.append(" ")
    text.append(product.name)
    text.append(f"  {format_currency(product.price)}", style="dim")
    if product.has_addons:
        text.append(" +", style="bold")
    return text


def format_addon_tags(addons: Iterable[SelectedAddon]) -> Text:
    """Render selected add-ons as compact tags."""
    text = Text()
    for idx, addon in enumerate(addons):
        if idx > 0:
            text.append(" ")
        text.append(f"[{addon.name}]", style="white")
    return text


def format_line_label(line: CartLineItem) -> Text:
    text = Text()
    text.append(f"{line.quantity}x ", style="bold")
    text.append(line.product.name)
    text.append(f"  {format_currency(line.line_total)}", style="bold")
    return text


def window_bounds(total: int, rows: int, selected: int | None) -> tuple[int, int]:
    """Slice of ``total`` entries that fits ``rows`` and keeps ``selected`` near the middle."""
    rows = max(1, rows)
    if total <= rows:
        return (0, max(0, total))
    if selected is None:
        return (0, rows)
    start = min(max(0, selected - rows // 2), total - rows)
    return (start, start + rows)


def render_window(
    entries: Sequence[T],
    rows: int,
    selected: int | None,
    render_entry: Callable[[int, T], Text],
) -> Text:
    """
    Render the visible slice of a cursor list.

    Each entry gets the cursor pointer or matching indent before
    ``render_entry(index, entry)``. Hidden entries above or below the slice
    are marked with a dim ellipsis row.
    """
    start, end = window_bounds(len(entries), rows, selected)
    text = Text()
    if start > 0:
        text.append("⋮\n", style="dim")
    for idx in range(start, end):
        if idx > start:
            text.append("\n")
        text.append(_POINTER if idx == selected else " " * len(_POINTER))
        text.append_text(render_entry(idx, entries[idx]))
    if end < len(entries):
        text.append("\n⋮", style="dim")
    return text
