from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..entities.store import EntityStore
from ..exceptions import InventoryFullError
from ..feedback.messages import MessageLog
from ..inventory.inventory import Inventory
from ..ui import colors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PickupOutcome:
    """Result of a pickup attempt.

    Attributes:
        picked_up: False when the inventory was full and nothing moved.
        name: Display name of the targeted object.
        inventory_index: Slot the object landed in, when picked up.
    """

    picked_up: bool
    name: str
    inventory_index: Optional[int] = None

    @property
    def inventory_full(self) -> bool:
        return not self.picked_up


def pickup(
    object_id: int,
    store: EntityStore,
    inventory: Inventory,
    feedback: MessageLog,
) -> PickupOutcome:
    """
    Move the object at ``object_id`` from the entity store into the inventory.

    The caller has already checked the object sits on the player's tile and
    carries an item tag. A full inventory leaves both collections unchanged.
    The store index of another object may change on success.
    """
    obj = store[object_id]
    try:
        slot = inventory.add(obj)
    except InventoryFullError:
        feedback.add(f'Your inventory is full, cannot pick up {obj.name}.', colors.RED)
        logger.info('Inventory full; %s left on the floor', obj.name)
        return PickupOutcome(picked_up=False, name=obj.name)

    store.swap_remove(object_id)
    feedback.add(f'You picked up a {obj.name}!', colors.GREEN)
    logger.debug('Picked up %s into slot %d', obj.name, slot)
    return PickupOutcome(picked_up=True, name=obj.name, inventory_index=slot)


def pick_item_up(
    store: EntityStore,
    inventory: Inventory,
    feedback: MessageLog,
) -> Optional[PickupOutcome]:
    """Pick up the first item on the player's tile. Returns None when there is none."""
    x, y = store.player.pos()
    object_id = store.first_item_at(x, y)
    if object_id is None:
        logger.debug('Nothing to pick up at (%d, %d)', x, y)
        return None
    return pickup(object_id, store, inventory, feedback)
