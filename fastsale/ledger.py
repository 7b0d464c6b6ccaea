"""In-memory basket ledger."""

from __future__ import annotations

from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Callable, Iterable, Iterator
from uuid import uuid4

from fastsale.composition import Composition
from fastsale.models import CartLineItem, Product, SelectedAddon, composition_key, unit_price_of


def _new_line_id() -> str:
    return uuid4().hex


def _unique_addons(addons: Iterable[SelectedAddon]) -> tuple[SelectedAddon, ...]:
    """Drop repeated add-on ids, keeping the first occurrence."""
    seen: set[int] = set()
    unique: list[SelectedAddon] = []
    for addon in addons:
        if addon.id in seen:
            continue
        seen.add(addon.id)
        unique.append(addon)
    return tuple(unique)


@dataclass(frozen=True)
class BasketSnapshot:
    """Read-only copy of the basket handed to a checkout collaborator."""

    lines: tuple[CartLineItem, ...]
    total_amount: Decimal
    total_items: int
    event_id: int | None = None


class CartLedger:
    """
    The authoritative basket for one operator session.

    Lines are kept in insertion order and keyed by composition: adding a
    product with an add-on set that is already in the basket merges into the
    existing line. Every operation is total; invalid requests (unknown line,
    quantity dropping below one) leave the basket unchanged.
    """

    def __init__(self, id_factory: Callable[[], str] | None = None) -> None:
        self._lines: list[CartLineItem] = []
        self._id_factory = id_factory or _new_line_id

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[CartLineItem]:
        return iter(tuple(self._lines))

    @property
    def lines(self) -> tuple[CartLineItem, ...]:
        return tuple(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def get(self, internal_id: str) -> CartLineItem | None:
        for line in self._lines:
            if line.internal_id == internal_id:
                return line
        return None

    def find(self, key: str) -> CartLineItem | None:
        """Return the line holding the given composition key, if any."""
        for line in self._lines:
            if line.key == key:
                return line
        return None

    def add(self, product: Product, quantity: int, addons: Iterable[SelectedAddon] = ()) -> CartLineItem | None:
        """Merge a composition into the basket and return the affected line."""
        if quantity < 1:
            return None

        addons = _unique_addons(addons)
        unit_price = unit_price_of(product, addons)
        existing = self.find(composition_key(product.id, (addon.id for addon in addons)))
        if existing is not None:
            existing.quantity += quantity
            existing.line_total += unit_price * quantity
            return existing

        line = CartLineItem(
            internal_id=self._id_factory(),
            product=product,
            quantity=quantity,
            addons=addons,
            line_total=unit_price * quantity,
        )
        self._lines.append(line)
        return line

    def add_composition(self, composition: Composition) -> CartLineItem | None:
        return self.add(composition.product, composition.quantity, composition.addons)

    def remove(self, internal_id: str) -> None:
        self._lines = [line for line in self._lines if line.internal_id != internal_id]

    def adjust_quantity(self, internal_id: str, delta: int) -> None:
        """Shift a line's quantity by ``delta``; results below one are ignored."""
        line = self.get(internal_id)
        if line is None:
            return

        new_quantity = line.quantity + delta
        if new_quantity < 1:
            return

        line.quantity = new_quantity
        line.recompute()

    def clear(self) -> None:
        self._lines.clear()

    def total_amount(self) -> Decimal:
        return sum((line.line_total for line in self._lines), Decimal("0"))

    def total_items(self) -> int:
        return sum(line.quantity for line in self._lines)

    def snapshot(self, event_id: int | None = None) -> BasketSnapshot:
        return BasketSnapshot(
            lines=tuple(replace(line) for line in self._lines),
            total_amount=self.total_amount(),
            total_items=self.total_items(),
            event_id=event_id,
        )
