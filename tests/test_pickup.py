from ossuary.actions.pickup import pick_item_up, pickup
from ossuary.entities.entity import Entity
from ossuary.exceptions import InventoryFullError
from ossuary.inventory.inventory import MAX_INVENTORY_ITEMS
from ossuary.items.factory import healing_potion
from ossuary.ui import colors


def test_pickup_moves_object_from_store_to_inventory(store, inventory, log, player):
    potion = healing_potion(player.x, player.y)
    index = store.add(potion)
    store_size = len(store)

    outcome = pickup(index, store, inventory, log)

    assert outcome.picked_up
    assert outcome.name == "healing potion"
    assert outcome.inventory_index == 0
    assert len(store) == store_size - 1
    assert potion not in store
    assert len(inventory) == 1
    assert inventory.count(potion) == 1
    assert log.messages()[-1].text == "You picked up a healing potion!"
    assert log.messages()[-1].color == colors.GREEN


def test_pickup_appends_to_end_of_inventory(store, inventory, log, player):
    first = healing_potion(player.x, player.y)
    second = Entity(player.x, player.y, "?", "scroll", item=first.item)
    store.add(first)
    store.add(second)

    pickup(store.first_item_at(player.x, player.y), store, inventory, log)
    pickup(store.first_item_at(player.x, player.y), store, inventory, log)

    assert inventory.names() == ["healing potion", "scroll"]


def test_pickup_when_full_changes_nothing(store, inventory, log, player):
    for _ in range(MAX_INVENTORY_ITEMS):
        store.add(healing_potion(player.x, player.y))
        outcome = pick_item_up(store, inventory, log)
        assert outcome.picked_up
        assert len(inventory) <= MAX_INVENTORY_ITEMS

    extra = healing_potion(player.x, player.y)
    index = store.add(extra)
    store_before = list(store)
    inventory_before = list(inventory)
    messages_before = len(log.messages())

    outcome = pickup(index, store, inventory, log)

    assert not outcome.picked_up
    assert outcome.inventory_full
    assert list(store) == store_before
    assert list(inventory) == inventory_before
    new_messages = log.messages()[messages_before:]
    assert [m.text for m in new_messages] == ["Your inventory is full, cannot pick up healing potion."]
    assert new_messages[0].color == colors.RED


def test_pickup_reassigns_another_objects_index(store, inventory, log, player):
    target = store.add(healing_potion(player.x, player.y))
    elsewhere = healing_potion(0, 0)
    store.add(elsewhere)

    pickup(target, store, inventory, log)

    # swap-with-last: the far potion now lives at the picked-up object's old index
    assert store[target] is elsewhere


def test_pick_item_up_with_nothing_here(store, inventory, log):
    store.add(healing_potion(0, 0))
    assert pick_item_up(store, inventory, log) is None
    assert len(inventory) == 0
    assert log.messages() == []


def test_rejected_add_leaves_store_untouched(store, inventory, log, player, monkeypatch):
    index = store.add(healing_potion(player.x, player.y))
    before = list(store)

    def reject(item):
        raise InventoryFullError("full")

    monkeypatch.setattr(inventory, "add", reject)

    outcome = pickup(index, store, inventory, log)

    assert not outcome.picked_up
    assert list(store) == before
    assert log.texts() == ["Your inventory is full, cannot pick up healing potion."]
