from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from ..exceptions import EntityStoreError
from .entity import Entity

logger = logging.getLogger(__name__)

# The player always occupies the first slot of the store.
PLAYER = 0


class EntityStore:
    """
    Ordered collection of every object currently placed in the world.

    Objects are addressed by index. Removal swaps the last object into the freed
    slot, so an index handed out before a removal may afterwards name a different
    object (or nothing). Callers must not hold indices across a removal.

    The player is added first and stays at ``PLAYER``: slot 0 is never the
    target of a removal, and a swap only moves the object that was last.
    """

    def __init__(self, player: Entity) -> None:
        self._objects: List[Entity] = [player]

    @property
    def player(self) -> Entity:
        return self._objects[PLAYER]

    def add(self, obj: Entity) -> int:
        """Append an object and return its current index."""
        self._objects.append(obj)
        index = len(self._objects) - 1
        logger.debug('Placed %s at (%d, %d) as #%d', obj.name, obj.x, obj.y, index)
        return index

    def swap_remove(self, index: int) -> Entity:
        """
        Remove and return the object at index, moving the last object into its slot.

        Raises EntityStoreError for an out of range index or the player's slot.
        """
        if index == PLAYER:
            raise EntityStoreError('The player cannot be removed from the entity store')
        if not 0 <= index < len(self._objects):
            raise EntityStoreError(f'No object at index {index} (store size {len(self._objects)})')
        last = self._objects.pop()
        if index == len(self._objects):
            removed = last
        else:
            removed = self._objects[index]
            self._objects[index] = last
            logger.debug('Moved %s from #%d to #%d', last.name, len(self._objects), index)
        logger.debug('Removed %s (#%d) from entity store', removed.name, index)
        return removed

    def items_at(self, x: int, y: int) -> List[int]:
        """Indices of item-tagged objects at (x, y), excluding the player."""
        return [
            i for i, obj in enumerate(self._objects)
            if i != PLAYER and obj.item is not None and obj.is_at(x, y)
        ]

    def first_item_at(self, x: int, y: int) -> Optional[int]:
        found = self.items_at(x, y)
        return found[0] if found else None

    def index_of(self, obj: Entity) -> Optional[int]:
        for i, candidate in enumerate(self._objects):
            if candidate is obj:
                return i
        return None

    def __getitem__(self, index: int) -> Entity:
        return self._objects[index]

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._objects)

    def __contains__(self, obj: object) -> bool:
        return any(candidate is obj for candidate in self._objects)
