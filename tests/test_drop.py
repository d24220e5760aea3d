from ossuary.actions.drop import drop_item
from ossuary.actions.pickup import pick_item_up
from ossuary.items.factory import healing_potion
from ossuary.ui import colors


def test_drop_places_item_under_player(inventory, store, log, player):
    potion = healing_potion(0, 0)
    inventory.add(potion)

    dropped = drop_item(0, inventory, store, log)

    assert dropped is potion
    assert len(inventory) == 0
    assert potion in store
    assert potion.pos() == player.pos()
    assert log.messages()[-1].text == "You dropped a healing potion."
    assert log.messages()[-1].color == colors.YELLOW


def test_dropped_item_can_be_picked_up_again(inventory, store, log):
    inventory.add(healing_potion(0, 0))
    drop_item(0, inventory, store, log)

    outcome = pick_item_up(store, inventory, log)

    assert outcome.picked_up
    assert len(inventory) == 1
    assert len(store) == 1
