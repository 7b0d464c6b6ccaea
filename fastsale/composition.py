"""Add-on selection state for composing one product before it enters the basket."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from fastsale.models import AddonConfig, Product, SelectedAddon, composition_key, unit_price_of


@dataclass(frozen=True)
class Composition:
    """A confirmed product, quantity and add-on choice ready for the ledger."""

    product: Product
    quantity: int
    addons: tuple[SelectedAddon, ...] = ()

    @property
    def key(self) -> str:
        return composition_key(self.product.id, (addon.id for addon in self.addons))

    @property
    def unit_price(self) -> Decimal:
        return unit_price_of(self.product, self.addons)

    @property
    def total(self) -> Decimal:
        return self.unit_price * self.quantity


class AddonSelection:
    """
    In-progress customization of a single product.

    Selections are kept per add-on group in insertion order. Group limits are
    enforced softly: a toggle that would break ``max_selection`` is ignored
    instead of raising, and ``min_selection`` is only checked by ``is_valid``,
    which gates ``confirm``.
    """

    def __init__(self, product: Product | None = None) -> None:
        self.product: Product | None = None
        self.quantity = 1
        self.selections: dict[int, list[int]] = {}
        if product is not None:
            self.start(product)

    def start(self, product: Product) -> None:
        """Begin composing ``product`` with a fresh quantity and no add-ons."""
        self.product = product
        self.reset()

    def reset(self) -> None:
        self.quantity = 1
        self.selections = {}

    def increment(self) -> None:
        self.quantity += 1

    def decrement(self) -> None:
        self.quantity = max(1, self.quantity - 1)

    def _config_for_group(self, group_id: int) -> AddonConfig | None:
        if self.product is None:
            return None
        for config in self.product.addon_configs:
            if config.group_id == group_id:
                return config
        return None

    def toggle(self, group_id: int, item_id: int, max_selection: int) -> bool:
        """Toggle one add-on item and report whether the selection changed."""
        config = self._config_for_group(group_id)
        if config is None:
            return False

        current = self.selections.get(group_id, [])
        if item_id in current:
            self.selections[group_id] = [selected for selected in current if selected != item_id]
            return True

        item = config.group.item(item_id)
        if item is None or not item.is_available:
            return False

        if max_selection == 1:
            self.selections[group_id] = [item_id]
            return True

        if len(current) >= max_selection:
            return False

        self.selections[group_id] = [*current, item_id]
        return True

    def is_selected(self, group_id: int, item_id: int) -> bool:
        return item_id in self.selections.get(group_id, [])

    def selected_count(self, group_id: int) -> int:
        return len(self.selections.get(group_id, []))

    def is_group_satisfied(self, config: AddonConfig) -> bool:
        return self.selected_count(config.group_id) >= config.min_selection

    def is_group_full(self, config: AddonConfig) -> bool:
        """True when further picks in a multi-choice group would be ignored."""
        return config.max_selection > 1 and self.selected_count(config.group_id) >= config.max_selection

    def selected_addons(self) -> tuple[SelectedAddon, ...]:
        """Snapshot the chosen items, ordered by group then by selection."""
        if self.product is None:
            return ()

        addons: list[SelectedAddon] = []
        for config in self.product.addon_configs:
            for item_id in self.selections.get(config.group_id, []):
                item = config.group.item(item_id)
                if item is not None:
                    addons.append(SelectedAddon.from_item(item))
        return tuple(addons)

    def compute_unit_price(self) -> Decimal:
        if self.product is None:
            return Decimal("0")
        return unit_price_of(self.product, self.selected_addons())

    def compute_total(self) -> Decimal:
        return self.compute_unit_price() * self.quantity

    def is_valid(self) -> bool:
        if self.product is None:
            return False
        return all(self.is_group_satisfied(config) for config in self.product.addon_configs)

    def confirm(self) -> Composition | None:
        """Materialize the current choice and reset, or return None while incomplete."""
        if self.product is None or not self.is_valid():
            return None

        composition = Composition(
            product=self.product,
            quantity=self.quantity,
            addons=self.selected_addons(),
        )
        self.reset()
        return composition


def quick_add(product: Product) -> Composition:
    """Composition for a product that needs no customization."""
    return Composition(product=product, quantity=1, addons=())
