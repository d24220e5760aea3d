from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Optional

from ..actions.drop import drop_item
from ..actions.pickup import pick_item_up
from ..config import GameConfig
from ..entities.store import EntityStore
from ..feedback.messages import MessageLog
from ..inventory.inventory import Inventory
from ..items.effects import EffectRegistry
from ..items.tags import UseResult
from ..items.use import use_item
from ..ui.inventory_menu import DROP_HEADER, USE_HEADER, inventory_menu
from ..ui.rendering import KeyPress, Renderer

logger = logging.getLogger(__name__)


class PlayerAction(Enum):
    """What a command means for the turn scheduler."""

    TOOK_TURN = auto()
    DIDNT_TAKE_TURN = auto()
    EXIT = auto()


class GameSession:
    """
    Binds the entity store, inventory and message log to a renderer and
    exposes the player's item commands.

    Every command runs to completion before returning, including any menu it
    opens, so the store and inventory are only ever touched by one caller.
    """

    def __init__(
        self,
        store: EntityStore,
        renderer: Renderer,
        *,
        inventory: Optional[Inventory] = None,
        feedback: Optional[MessageLog] = None,
        config: Optional[GameConfig] = None,
        registry: Optional[EffectRegistry] = None,
    ) -> None:
        self.store = store
        self.renderer = renderer
        self.inventory = inventory if inventory is not None else Inventory()
        self.feedback = feedback if feedback is not None else MessageLog()
        self.config = config or GameConfig()
        self.registry = registry or EffectRegistry(heal_amount=self.config.heal_amount)

    def _choose(self, header: str) -> Optional[int]:
        return inventory_menu(
            self.inventory,
            header,
            self.renderer,
            self.config.inventory_width,
            foreground_alpha=self.config.menu_foreground_alpha,
            background_alpha=self.config.menu_background_alpha,
        )

    # ---- Commands ----

    def pick_up(self) -> PlayerAction:
        outcome = pick_item_up(self.store, self.inventory, self.feedback)
        if outcome is not None and outcome.picked_up:
            return PlayerAction.TOOK_TURN
        return PlayerAction.DIDNT_TAKE_TURN

    def use_from_inventory(self) -> PlayerAction:
        index = self._choose(USE_HEADER)
        if index is None:
            return PlayerAction.DIDNT_TAKE_TURN
        result = use_item(index, self.inventory, self.store, self.feedback, self.registry)
        if result is UseResult.USED_UP:
            return PlayerAction.TOOK_TURN
        return PlayerAction.DIDNT_TAKE_TURN

    def drop_from_inventory(self) -> PlayerAction:
        index = self._choose(DROP_HEADER)
        if index is None:
            return PlayerAction.DIDNT_TAKE_TURN
        drop_item(index, self.inventory, self.store, self.feedback)
        return PlayerAction.TOOK_TURN

    def handle_key(self, key: KeyPress) -> PlayerAction:
        """Dispatch a top-level keystroke: g (pick up), i (use), d (drop), q or ESCAPE (exit)."""
        if key.name == "ESCAPE":
            return PlayerAction.EXIT
        command = key.char.lower()
        if command == "g":
            return self.pick_up()
        if command == "i":
            return self.use_from_inventory()
        if command == "d":
            return self.drop_from_inventory()
        if command == "q":
            return PlayerAction.EXIT
        logger.debug("Unbound key: %r", key.char or key.name)
        return PlayerAction.DIDNT_TAKE_TURN
