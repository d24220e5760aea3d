"""Constructors for the item objects placed during world population."""

from __future__ import annotations

from ..entities.entity import Entity, Fighter
from ..ui import colors
from .tags import ItemTag


def healing_potion(x: int, y: int) -> Entity:
    return Entity(x, y, '!', 'healing potion', colors.VIOLET, item=ItemTag.HEAL)


def make_player(x: int, y: int, max_hp: int = 30) -> Entity:
    return Entity(
        x, y, '@', 'player', colors.WHITE,
        blocks=True,
        alive=True,
        fighter=Fighter(max_hp=max_hp, hp=max_hp, defense=2, power=5),
    )
