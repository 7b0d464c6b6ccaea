"""Tests for catalog record parsing and loading."""

import json
from decimal import Decimal

import pytest

from fastsale.data import (
    DEMO_CATALOG,
    CatalogError,
    addon_config_from_record,
    event_from_record,
    load_catalog,
    product_from_record,
)


def _config_record(config_id, order, min_selection=0, max_selection=1):
    return {
        "id": config_id,
        "group_id": config_id,
        "min_selection": min_selection,
        "max_selection": max_selection,
        "order": order,
        "group": {
            "id": config_id,
            "name": f"Group {config_id}",
            "items": [{"id": config_id * 10, "group_id": config_id, "name": "Item", "price": 1.5, "is_available": True}],
        },
    }


def _product_record(**overrides):
    record = {
        "id": 1,
        "category_id": 2,
        "name": "Burger",
        "price": "10.90",
        "stock_qty": 3,
        "is_active": True,
        "addon_configs": [],
    }
    record.update(overrides)
    return record


class TestProductFromRecord:
    def test_parses_fields(self):
        product = product_from_record(_product_record())
        assert product.id == 1
        assert product.category_id == 2
        assert product.price == Decimal("10.90")
        assert product.stock_qty == 3
        assert product.addon_configs == ()

    def test_float_price_kept_exact(self):
        product = product_from_record(_product_record(price=0.1))
        assert product.price == Decimal("0.1")

    def test_configs_sorted_by_order(self):
        product = product_from_record(_product_record(addon_configs=[_config_record(1, 5), _config_record(2, 0)]))
        assert [config.id for config in product.addon_configs] == [2, 1]

    def test_null_configs(self):
        assert product_from_record(_product_record(addon_configs=None)).addon_configs == ()

    def test_addon_item_price(self):
        product = product_from_record(_product_record(addon_configs=[_config_record(1, 0)]))
        assert product.addon_configs[0].group.items[0].price == Decimal("1.5")

    @pytest.mark.parametrize(
        "overrides",
        [{"price": "-1"}, {"price": "abc"}, {"price": "NaN"}, {"stock_qty": -2}, {"category_id": None}],
    )
    def test_rejects_invalid_values(self, overrides):
        with pytest.raises(CatalogError):
            product_from_record(_product_record(**overrides))

    def test_rejects_missing_name(self):
        record = _product_record()
        del record["name"]
        with pytest.raises(CatalogError):
            product_from_record(record)


class TestAddonConfigFromRecord:
    def test_rejects_max_below_min(self):
        with pytest.raises(CatalogError):
            addon_config_from_record(_config_record(1, 0, min_selection=2, max_selection=1))

    def test_rejects_negative_min(self):
        with pytest.raises(CatalogError):
            addon_config_from_record(_config_record(1, 0, min_selection=-1, max_selection=1))


class TestEventFromRecord:
    def test_blank_location_is_none(self):
        event = event_from_record({"id": 1, "name": "Fair", "location": "", "start_time": "2026-01-01T10:00"})
        assert event.location is None
        assert event.is_active


class TestLoadCatalog:
    def test_loads_export(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps(
                {
                    "categories": [{"id": 2, "name": "Burgers"}],
                    "products": [_product_record(), _product_record(id=2, is_active=False)],
                    "events": [],
                }
            ),
            encoding="utf-8",
        )
        catalog = load_catalog(path)
        assert [product.id for product in catalog.active_products()] == [1]
        assert catalog.product(2).is_active is False
        assert catalog.category(2).name == "Burgers"

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError):
            load_catalog(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)


class TestDemoCatalog:
    def test_filters(self):
        assert all(product.is_active for product in DEMO_CATALOG.active_products())
        assert [product.name for product in DEMO_CATALOG.products_in_category(2)] == ["Cola", "Orange Juice", "Water"]
        assert [event.name for event in DEMO_CATALOG.active_events()] == ["Summer Fair", "Rock Night"]

    def test_unknown_lookups(self):
        assert DEMO_CATALOG.product(999) is None
        assert DEMO_CATALOG.category(999) is None


class TestMalformedExports:
    @pytest.mark.parametrize(
        "payload",
        [
            {"products": None},
            {"products": ["oops"]},
            {"categories": {"id": 1}},
            {"products": [_product_record(addon_configs=[dict(_config_record(1, 0), group=None)])]},
            {"products": [_product_record(addon_configs=[dict(_config_record(1, 0), group={"id": 1, "name": "G", "items": None})])]},
            {"products": [_product_record(addon_configs=["oops"])]},
        ],
    )
    def test_shape_errors_become_catalog_errors(self, tmp_path, payload):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)


class TestStrictScalars:
    @pytest.mark.parametrize("flag", ["false", 0, 1, None])
    def test_non_boolean_flags_rejected(self, flag):
        with pytest.raises(CatalogError):
            product_from_record(_product_record(is_active=flag))

    def test_boolean_flags_kept(self):
        assert product_from_record(_product_record(is_active=False)).is_active is False

    @pytest.mark.parametrize("value", [1.5, True, False, "1.5"])
    def test_non_integer_ids_rejected(self, value):
        with pytest.raises(CatalogError):
            product_from_record(_product_record(id=value))

    def test_whole_float_accepted(self):
        assert product_from_record(_product_record(stock_qty=3.0)).stock_qty == 3

    def test_unavailable_item_flag(self):
        config = _config_record(1, 0)
        config["group"]["items"][0]["is_available"] = "no"
        with pytest.raises(CatalogError):
            addon_config_from_record(config)
