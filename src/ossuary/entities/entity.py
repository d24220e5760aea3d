from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..items.tags import ItemTag
from ..ui.colors import Color, WHITE
from ..utils.math import clamp

logger = logging.getLogger(__name__)


@dataclass
class Fighter:
    """Combat state for anything that can be hurt or healed."""

    max_hp: int
    hp: int
    defense: int = 0
    power: int = 0

    def __post_init__(self) -> None:
        self.hp = clamp(self.hp, 0, self.max_hp)

    @property
    def is_full_health(self) -> bool:
        return self.hp >= self.max_hp

    def heal(self, amount: int) -> int:
        """Raise hp by amount, never past max_hp. Returns the hp actually restored."""
        if amount <= 0:
            return 0
        before = self.hp
        self.hp = clamp(self.hp + amount, 0, self.max_hp)
        return self.hp - before

    def take_damage(self, amount: int) -> int:
        if amount <= 0:
            return 0
        before = self.hp
        self.hp = clamp(self.hp - amount, 0, self.max_hp)
        return before - self.hp


@dataclass
class Entity:
    """
    A game object placed in the world or carried in an inventory.

    Entities have no identity of their own: they are addressed by their index in
    whichever collection currently holds them.
    """

    x: int
    y: int
    glyph: str
    name: str
    color: Color = WHITE
    blocks: bool = False
    alive: bool = False
    fighter: Optional[Fighter] = None
    item: Optional[ItemTag] = None

    def pos(self) -> tuple[int, int]:
        return self.x, self.y

    def set_pos(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def is_at(self, x: int, y: int) -> bool:
        return self.x == x and self.y == y
