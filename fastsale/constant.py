"""Editable demo catalog, shaped like the catalog service export."""

from __future__ import annotations

from typing import Any

_SAUCES_GROUP: dict[str, Any] = {
    "id": 1,
    "name": "Sauces",
    "items": [
        {"id": 1, "group_id": 1, "name": "Ketchup", "price": "0.00", "is_available": True},
        {"id": 2, "group_id": 1, "name": "Mustard", "price": "0.00", "is_available": True},
        {"id": 3, "group_id": 1, "name": "Garlic Mayo", "price": "1.50", "is_available": True},
        {"id": 4, "group_id": 1, "name": "Barbecue", "price": "1.50", "is_available": False},
    ],
}

_EXTRAS_GROUP: dict[str, Any] = {
    "id": 2,
    "name": "Extras",
    "items": [
        {"id": 5, "group_id": 2, "name": "Bacon", "price": "4.00", "is_available": True},
        {"id": 6, "group_id": 2, "name": "Cheddar", "price": "3.00", "is_available": True},
        {"id": 7, "group_id": 2, "name": "Fried Egg", "price": "2.50", "is_available": True},
        {"id": 8, "group_id": 2, "name": "Onion Rings", "price": "3.50", "is_available": True},
    ],
}

_BREAD_GROUP: dict[str, Any] = {
    "id": 3,
    "name": "Bread",
    "items": [
        {"id": 9, "group_id": 3, "name": "Brioche", "price": "2.00", "is_available": True},
        {"id": 10, "group_id": 3, "name": "Sesame", "price": "0.00", "is_available": True},
    ],
}

_SIZE_GROUP: dict[str, Any] = {
    "id": 4,
    "name": "Size",
    "items": [
        {"id": 11, "group_id": 4, "name": "Small", "price": "0.00", "is_available": True},
        {"id": 12, "group_id": 4, "name": "Large", "price": "3.00", "is_available": True},
    ],
}

CATALOG_RECORDS: dict[str, list[dict[str, Any]]] = {
    "categories": [
        {"id": 1, "name": "Burgers", "is_active": True},
        {"id": 2, "name": "Drinks", "is_active": True},
        {"id": 3, "name": "Sides", "is_active": True},
    ],
    "products": [
        {
            "id": 1,
            "category_id": 1,
            "name": "Classic Burger",
            "price": "18.00",
            "stock_qty": 50,
            "is_active": True,
            "addon_configs": [
                {"id": 1, "group_id": 3, "min_selection": 1, "max_selection": 1, "order": 0, "group": _BREAD_GROUP},
                {"id": 2, "group_id": 2, "min_selection": 0, "max_selection": 2, "order": 1, "group": _EXTRAS_GROUP},
                {"id": 3, "group_id": 1, "min_selection": 0, "max_selection": 3, "order": 2, "group": _SAUCES_GROUP},
            ],
        },
        {
            "id": 2,
            "category_id": 1,
            "name": "Cheese Burger",
            "price": "21.00",
            "stock_qty": 40,
            "is_active": True,
            "addon_configs": [
                {"id": 4, "group_id": 3, "min_selection": 1, "max_selection": 1, "order": 0, "group": _BREAD_GROUP},
                {"id": 5, "group_id": 2, "min_selection": 0, "max_selection": 3, "order": 1, "group": _EXTRAS_GROUP},
            ],
        },
        {
            "id": 3,
            "category_id": 1,
            "name": "Veggie Burger",
            "price": "19.50",
            "stock_qty": 0,
            "is_active": False,
            "addon_configs": [],
        },
        {
            "id": 4,
            "category_id": 2,
            "name": "Cola",
            "price": "6.00",
            "stock_qty": 120,
            "is_active": True,
            "addon_configs": [],
        },
        {
            "id": 5,
            "category_id": 2,
            "name": "Orange Juice",
            "price": "8.00",
            "stock_qty": 30,
            "is_active": True,
            "addon_configs": [
                {"id": 6, "group_id": 4, "min_selection": 1, "max_selection": 1, "order": 0, "group": _SIZE_GROUP},
            ],
        },
        {
            "id": 6,
            "category_id": 2,
            "name": "Water",
            "price": "4.00",
            "stock_qty": 200,
            "is_active": True,
            "addon_configs": [],
        },
        {
            "id": 7,
            "category_id": 3,
            "name": "French Fries",
            "price": "12.00",
            "stock_qty": 80,
            "is_active": True,
            "addon_configs": [
                {"id": 7, "group_id": 4, "min_selection": 1, "max_selection": 1, "order": 0, "group": _SIZE_GROUP},
                {"id": 8, "group_id": 1, "min_selection": 0, "max_selection": 2, "order": 1, "group": _SAUCES_GROUP},
            ],
        },
    ],
    "events": [
        {"id": 1, "name": "Summer Fair", "location": "Main Square", "start_time": "2026-01-10T10:00", "is_active": True},
        {"id": 2, "name": "Rock Night", "location": "Arena", "start_time": "2026-02-14T19:00", "is_active": True},
        {"id": 3, "name": "Old Market", "location": None, "start_time": "2025-06-01T08:00", "is_active": False},
    ],
}
