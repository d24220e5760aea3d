import pytest

from ossuary.exceptions import InventoryError, InventoryFullError
from ossuary.inventory.inventory import MAX_INVENTORY_ITEMS, Inventory
from ossuary.items.factory import healing_potion


def test_capacity_matches_letter_labels(inventory):
    assert inventory.capacity == MAX_INVENTORY_ITEMS == 26


def test_add_beyond_capacity_is_rejected_not_truncated():
    inv = Inventory(healing_potion(0, 0) for _ in range(MAX_INVENTORY_ITEMS))
    assert inv.is_full()
    before = list(inv)

    with pytest.raises(InventoryFullError):
        inv.add(healing_potion(0, 0))

    assert list(inv) == before
    assert len(inv) == MAX_INVENTORY_ITEMS


def test_inventory_full_is_an_inventory_error():
    assert issubclass(InventoryFullError, InventoryError)


def test_remove_shifts_and_keeps_order(inventory):
    names = ["sword", "shield", "potion", "scroll"]
    for name in names:
        item = healing_potion(0, 0)
        item.name = name
        inventory.add(item)

    removed = inventory.remove(1)

    assert removed.name == "shield"
    assert inventory.names() == ["sword", "potion", "scroll"]


def test_count_is_by_identity(inventory):
    potion = healing_potion(0, 0)
    inventory.add(potion)
    inventory.add(healing_potion(0, 0))
    assert inventory.count(potion) == 1
