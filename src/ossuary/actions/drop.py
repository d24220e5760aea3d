from __future__ import annotations

import logging

from ..entities.entity import Entity
from ..entities.store import EntityStore
from ..feedback.messages import MessageLog
from ..inventory.inventory import Inventory
from ..ui import colors

logger = logging.getLogger(__name__)


def drop_item(
    inventory_id: int,
    inventory: Inventory,
    store: EntityStore,
    feedback: MessageLog,
) -> Entity:
    """Take the item at ``inventory_id`` out of the inventory and leave it on the player's tile."""
    item = inventory.remove(inventory_id)
    item.set_pos(*store.player.pos())
    index = store.add(item)
    feedback.add(f'You dropped a {item.name}.', colors.YELLOW)
    logger.debug('Dropped %s at (%d, %d) as store #%d', item.name, item.x, item.y, index)
    return item
