from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from ..entities.entity import Entity
from ..exceptions import InventoryFullError

logger = logging.getLogger(__name__)

# One slot per selectable letter, a-z.
MAX_INVENTORY_ITEMS = 26


class Inventory:
    """
    Ordered, bounded list of carried objects.

    Indices double as menu selections, so removal shifts later entries left and
    keeps their relative order (unlike the entity store).
    """

    def __init__(self, items: Optional[Iterable[Entity]] = None) -> None:
        self._items: List[Entity] = []
        for item in items or ():
            self.add(item)

    @property
    def capacity(self) -> int:
        return MAX_INVENTORY_ITEMS

    def is_full(self) -> bool:
        return len(self._items) >= MAX_INVENTORY_ITEMS

    def add(self, item: Entity) -> int:
        """
        Append an item and return its index.

        Raises InventoryFullError (leaving the inventory untouched) when full.
        """
        if self.is_full():
            raise InventoryFullError(
                f'Inventory is full ({MAX_INVENTORY_ITEMS} items), cannot add {item.name}'
            )
        self._items.append(item)
        logger.debug('Added %s to inventory (count=%d)', item.name, len(self._items))
        return len(self._items) - 1

    def remove(self, index: int) -> Entity:
        """Remove and return the item at index, shifting later items left."""
        item = self._items.pop(index)
        logger.debug('Removed %s from inventory slot %d (count=%d)', item.name, index, len(self._items))
        return item

    def names(self) -> List[str]:
        return [item.name for item in self._items]

    def count(self, item: Entity) -> int:
        """Number of slots holding this exact object."""
        return sum(1 for carried in self._items if carried is item)

    def __getitem__(self, index: int) -> Entity:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._items)
