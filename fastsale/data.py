"""Catalog records adapted from the catalog service export."""

from __future__ import annotations

import json
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Mapping

from fastsale.constant import CATALOG_RECORDS
from fastsale.models import AddonConfig, AddonGroup, AddonItem, Category, Event, Product


class CatalogError(ValueError):
    """Raised when a catalog record cannot be turned into a domain record."""


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise CatalogError(f"{what} must be an object, got {value!r}")
    return value


def _records(record: Mapping[str, Any], name: str, optional: bool = False) -> list[Mapping[str, Any]]:
    """Return the list of nested records under ``name``; null is empty only when ``optional``."""
    raw = record.get(name, [])
    if raw is None and optional:
        return []
    if not isinstance(raw, list):
        raise CatalogError(f"{name} must be a list, got {raw!r}")
    return [_mapping(entry, f"{name} entry") for entry in raw]


def _field(record: Mapping[str, Any], name: str) -> Any:
    try:
        return record[name]
    except (KeyError, TypeError):
        raise CatalogError(f"missing field {name!r} in record {record!r}") from None


def _bool(record: Mapping[str, Any], name: str, default: bool = True) -> bool:
    raw = record.get(name, default)
    if not isinstance(raw, bool):
        raise CatalogError(f"{name} must be true or false, got {raw!r}")
    return raw


def _price(record: Mapping[str, Any], name: str = "price") -> Decimal:
    raw = _field(record, name)
    try:
        value = Decimal(str(raw))
    except InvalidOperation:
        raise CatalogError(f"invalid {name} {raw!r}") from None
    if not value.is_finite() or value < 0:
        raise CatalogError(f"{name} must be a non-negative number, got {raw!r}")
    return value


def _int(record: Mapping[str, Any], name: str, default: int | None = None) -> int:
    raw = record.get(name, default) if default is not None else _field(record, name)
    if isinstance(raw, bool):
        raise CatalogError(f"invalid {name} {raw!r}")
    if isinstance(raw, float):
        if not raw.is_integer():
            raise CatalogError(f"{name} must be a whole number, got {raw!r}")
        return int(raw)
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise CatalogError(f"invalid {name} {raw!r}") from None


def category_from_record(record: Mapping[str, Any]) -> Category:
    return Category(
        id=_int(record, "id"),
        name=str(_field(record, "name")),
        icon=record.get("icon"),
        is_active=_bool(record, "is_active"),
    )


def addon_item_from_record(record: Mapping[str, Any], group_id: int) -> AddonItem:
    return AddonItem(
        id=_int(record, "id"),
        group_id=_int(record, "group_id", default=group_id),
        name=str(_field(record, "name")),
        price=_price(record),
        is_available=_bool(record, "is_available"),
    )


def addon_group_from_record(record: Mapping[str, Any]) -> AddonGroup:
    group_id = _int(record, "id")
    return AddonGroup(
        id=group_id,
        name=str(_field(record, "name")),
        items=tuple(addon_item_from_record(item, group_id) for item in _records(record, "items")),
        description=record.get("description"),
    )


def addon_config_from_record(record: Mapping[str, Any]) -> AddonConfig:
    min_selection = _int(record, "min_selection")
    max_selection = _int(record, "max_selection")
    if min_selection < 0:
        raise CatalogError(f"min_selection must be >= 0, got {min_selection}")
    if max_selection < min_selection:
        raise CatalogError(f"max_selection ({max_selection}) must be >= min_selection ({min_selection})")

    group = addon_group_from_record(_mapping(_field(record, "group"), "group"))
    return AddonConfig(
        id=_int(record, "id"),
        group_id=_int(record, "group_id", default=group.id),
        min_selection=min_selection,
        max_selection=max_selection,
        order=_int(record, "order", default=0),
        group=group,
    )


def product_from_record(record: Mapping[str, Any]) -> Product:
    stock_qty = _int(record, "stock_qty", default=0)
    if stock_qty < 0:
        raise CatalogError(f"stock_qty must be >= 0, got {stock_qty}")

    configs = [addon_config_from_record(config) for config in _records(record, "addon_configs", optional=True)]
    configs.sort(key=lambda config: config.order)
    return Product(
        id=_int(record, "id"),
        category_id=_int(record, "category_id"),
        name=str(_field(record, "name")),
        price=_price(record),
        stock_qty=stock_qty,
        is_active=_bool(record, "is_active"),
        addon_configs=tuple(configs),
        description=record.get("description"),
    )


def event_from_record(record: Mapping[str, Any]) -> Event:
    return Event(
        id=_int(record, "id"),
        name=str(_field(record, "name")),
        start_time=str(_field(record, "start_time")),
        location=record.get("location") or None,
        is_active=_bool(record, "is_active"),
    )


@dataclass(frozen=True)
class Catalog:
    """Read-only catalog snapshot staged before composition starts."""

    categories: tuple[Category, ...] = ()
    products: tuple[Product, ...] = ()
    events: tuple[Event, ...] = ()

    def product(self, product_id: int) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def category(self, category_id: int) -> Category | None:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def active_categories(self) -> list[Category]:
        return [category for category in self.categories if category.is_active]

    def active_products(self) -> list[Product]:
        return [product for product in self.products if product.is_active]

    def products_in_category(self, category_id: int) -> list[Product]:
        return [product for product in self.active_products() if product.category_id == category_id]

    def active_events(self) -> list[Event]:
        return [event for event in self.events if event.is_active]


def catalog_from_records(records: Mapping[str, Any]) -> Catalog:
    """Build a catalog from the export's ``categories``/``products``/``events`` lists."""
    return Catalog(
        categories=tuple(category_from_record(record) for record in _records(records, "categories")),
        products=tuple(product_from_record(record) for record in _records(records, "products")),
        events=tuple(event_from_record(record) for record in _records(records, "events")),
    )


def load_catalog(path: str | Path) -> Catalog:
    """Load a catalog JSON export from disk."""
    catalog_file = Path(path)
    try:
        raw = json.loads(catalog_file.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogError(f"cannot read catalog {catalog_file}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"catalog {catalog_file} is not valid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise CatalogError(f"catalog {catalog_file} must contain a JSON object")
    return catalog_from_records(raw)


DEMO_CATALOG: Catalog = catalog_from_records(CATALOG_RECORDS)
