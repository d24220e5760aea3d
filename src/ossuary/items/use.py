from __future__ import annotations

import logging
from typing import Optional

from ..entities.store import EntityStore
from ..feedback.messages import MessageLog
from ..inventory.inventory import Inventory
from ..ui import colors
from .effects import DEFAULT_EFFECT_REGISTRY, EffectRegistry
from .tags import UseResult

logger = logging.getLogger(__name__)


def use_item(
    inventory_id: int,
    inventory: Inventory,
    store: EntityStore,
    feedback: MessageLog,
    registry: Optional[EffectRegistry] = None,
) -> Optional[UseResult]:
    """
    Use the inventory item at ``inventory_id``.

    - Objects without an item tag are narrated as unusable; returns None.
    - Otherwise the tag's effect runs. USED_UP removes the item (later items
      keep their order); CANCELLED leaves the inventory as it was and narrates
      "Cancelled".
    """
    registry = registry or DEFAULT_EFFECT_REGISTRY
    obj = inventory[inventory_id]
    if obj.item is None:
        feedback.add(f'The {obj.name} cannot be used.', colors.WHITE)
        logger.info('%s has no item tag; nothing to use', obj.name)
        return None

    effect = registry.get(obj.item)
    result = effect(inventory_id, store, feedback)
    if result is UseResult.USED_UP:
        inventory.remove(inventory_id)
        logger.debug('%s used up', obj.name)
    elif result is UseResult.CANCELLED:
        feedback.add('Cancelled', colors.WHITE)
        logger.info('Use of %s cancelled', obj.name)
    return result
