from __future__ import annotations

from typing import Optional

from ..inventory.inventory import Inventory
from .menu import present_menu
from .rendering import Renderer

INVENTORY_WIDTH = 50
EMPTY_INVENTORY_TEXT = 'Inventory is empty.'

USE_HEADER = 'Press the key next to an item to use it, or any other to cancel.\n'
DROP_HEADER = 'Press the key next to an item to drop it, or any other to cancel.\n'


def inventory_menu(
    inventory: Inventory,
    header: str,
    renderer: Renderer,
    width: int = INVENTORY_WIDTH,
    **menu_options: float,
) -> Optional[int]:
    """Show the inventory as a menu. The returned index addresses ``inventory`` directly."""
    if len(inventory) == 0:
        # Informational only: nothing can be picked from an empty inventory.
        present_menu(header, [EMPTY_INVENTORY_TEXT], width, renderer, **menu_options)
        return None
    return present_menu(header, inventory.names(), width, renderer, **menu_options)
