"""Domain models for fastsale."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable


@dataclass(frozen=True)
class Category:
    """A product category as supplied by the catalog."""

    id: int
    name: str
    icon: str | None = None
    is_active: bool = True


@dataclass(frozen=True)
class AddonItem:
    """One concrete extra inside an add-on group."""

    id: int
    group_id: int
    name: str
    price: Decimal
    is_available: bool = True


@dataclass(frozen=True)
class AddonGroup:
    """A named set of add-on items."""

    id: int
    name: str
    items: tuple[AddonItem, ...] = ()
    description: str | None = None

    def item(self, item_id: int) -> AddonItem | None:
        for addon_item in self.items:
            if addon_item.id == item_id:
                return addon_item
        return None


@dataclass(frozen=True)
class AddonConfig:
    """Binds a product to an add-on group with selection limits."""

    id: int
    group_id: int
    min_selection: int
    max_selection: int
    order: int
    group: AddonGroup


@dataclass(frozen=True)
class Product:
    """A sellable product, read-only to the basket."""

    id: int
    category_id: int
    name: str
    price: Decimal
    stock_qty: int = 0
    is_active: bool = True
    addon_configs: tuple[AddonConfig, ...] = ()
    description: str | None = None

    @property
    def has_addons(self) -> bool:
        return bool(self.addon_configs)


@dataclass(frozen=True)
class SelectedAddon:
    """Price snapshot of a chosen add-on item."""

    id: int
    name: str
    price: Decimal

    @classmethod
    def from_item(cls, item: AddonItem) -> SelectedAddon:
        return cls(id=item.id, name=item.name, price=item.price)


@dataclass(frozen=True)
class Event:
    """A sales event a basket can be attached to."""

    id: int
    name: str
    start_time: str
    location: str | None = None
    is_active: bool = True


def composition_key(product_id: int, addon_ids: Iterable[int]) -> str:
    """Identity of a composition: product id plus sorted, unique addon ids."""
    joined = "-".join(str(addon_id) for addon_id in sorted(set(addon_ids)))
    return f"{product_id}-{joined}"


def unit_price_of(product: Product, addons: Iterable[SelectedAddon]) -> Decimal:
    """Price of one unit of a product with the given add-ons."""
    return product.price + sum((addon.price for addon in addons), Decimal("0"))


@dataclass
class CartLineItem:
    """A basket row, unique per composition key."""

    internal_id: str
    product: Product
    quantity: int
    addons: tuple[SelectedAddon, ...] = field(default_factory=tuple)
    line_total: Decimal = Decimal("0")

    @property
    def unit_price(self) -> Decimal:
        return unit_price_of(self.product, self.addons)

    @property
    def key(self) -> str:
        return composition_key(self.product.id, (addon.id for addon in self.addons))

    def recompute(self) -> None:
        """Derive line_total from quantity and current unit price."""
        self.line_total = self.unit_price * self.quantity
