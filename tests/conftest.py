from decimal import Decimal

import pytest

from fastsale.models import AddonConfig, AddonGroup, AddonItem, Product, SelectedAddon


def make_group(group_id, items):
    return AddonGroup(
        id=group_id,
        name=f"Group {group_id}",
        items=tuple(
            AddonItem(id=item_id, group_id=group_id, name=f"Item {item_id}", price=Decimal(price), is_available=available)
            for item_id, price, available in items
        ),
    )


def make_config(group, min_selection, max_selection, order=0):
    return AddonConfig(
        id=group.id * 100,
        group_id=group.id,
        min_selection=min_selection,
        max_selection=max_selection,
        order=order,
        group=group,
    )


@pytest.fixture
def plain_product():
    return Product(id=4, category_id=2, name="Cola", price=Decimal("6.00"), stock_qty=10)


@pytest.fixture
def single_choice_product():
    """Product 1 with one required single-choice group: item 9 costs 2.00, item 10 is free."""
    group = make_group(3, [(9, "2.00", True), (10, "0", True)])
    return Product(
        id=1,
        category_id=1,
        name="Burger",
        price=Decimal("10.00"),
        stock_qty=5,
        addon_configs=(make_config(group, 1, 1),),
    )


@pytest.fixture
def multi_choice_product():
    """Product with an optional group capped at two and one unavailable item."""
    group = make_group(2, [(5, "4.00", True), (6, "3.00", True), (7, "2.50", True), (8, "1.00", False)])
    return Product(
        id=2,
        category_id=1,
        name="Cheese Burger",
        price=Decimal("20.00"),
        stock_qty=5,
        addon_configs=(make_config(group, 0, 2),),
    )


@pytest.fixture
def addon_a():
    return SelectedAddon(id=5, name="Bacon", price=Decimal("4.00"))


@pytest.fixture
def addon_b():
    return SelectedAddon(id=6, name="Cheddar", price=Decimal("3.00"))


@pytest.fixture
def two_group_product():
    """Required bread choice (group 3) followed by optional sauces capped at three (group 1)."""
    bread = make_group(3, [(9, "2.00", True), (10, "0", True)])
    sauces = make_group(1, [(1, "0", True), (3, "1.50", True)])
    return Product(
        id=1,
        category_id=1,
        name="Classic Burger",
        price=Decimal("18.00"),
        stock_qty=5,
        addon_configs=(make_config(bread, 1, 1, order=0), make_config(sauces, 0, 3, order=1)),
    )
