from __future__ import annotations

import functools
import logging
from typing import Callable, Dict, Optional

from ..entities.store import EntityStore
from ..feedback.messages import MessageLog
from ..ui import colors
from .tags import ItemTag, UseResult

logger = logging.getLogger(__name__)

HEAL_AMOUNT = 4

# (inventory index, entity store, feedback log) -> outcome
Effect = Callable[[int, EntityStore, MessageLog], UseResult]


def heal_effect(
    inventory_id: int,
    store: EntityStore,
    feedback: MessageLog,
    amount: int = HEAL_AMOUNT,
) -> UseResult:
    """Heal the player by ``amount``. Declines (CANCELLED) when already at full health."""
    fighter = store.player.fighter
    if fighter is None:
        logger.warning('Heal used by a player without combat state; cancelled')
        return UseResult.CANCELLED
    if fighter.is_full_health:
        feedback.add('You are already at full health.', colors.RED)
        return UseResult.CANCELLED
    feedback.add('Your wounds start to feel better!', colors.LIGHT_VIOLET)
    before = fighter.hp
    healed = fighter.heal(amount)
    logger.debug('Healed player by %d (HP %d -> %d) from inventory slot %d', healed, before, fighter.hp, inventory_id)
    return UseResult.USED_UP


class EffectRegistry:
    """
    Mapping from item tag to effect function.

    New item kinds only need an ItemTag member and a register() call; the
    dispatcher never changes.
    """

    def __init__(self, heal_amount: int = HEAL_AMOUNT) -> None:
        self._effects: Dict[ItemTag, Effect] = {}
        self._load_defaults(heal_amount)

    def _load_defaults(self, heal_amount: int) -> None:
        self.register(ItemTag.HEAL, functools.partial(heal_effect, amount=heal_amount))

    def register(self, tag: ItemTag, effect: Effect) -> None:
        self._effects[tag] = effect

    def get(self, tag: ItemTag) -> Effect:
        try:
            return self._effects[tag]
        except KeyError as exc:
            raise KeyError(f'No effect registered for item tag: {tag}') from exc

    def find(self, tag: ItemTag) -> Optional[Effect]:
        return self._effects.get(tag)

    def __contains__(self, tag: object) -> bool:
        return tag in self._effects


# A default, module-level registry for convenience
DEFAULT_EFFECT_REGISTRY = EffectRegistry()
