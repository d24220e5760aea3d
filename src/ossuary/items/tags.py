from __future__ import annotations

from enum import Enum


class ItemTag(str, Enum):
    """Kinds of usable item. Effect logic is looked up by kind in the effect registry."""

    HEAL = 'heal'


class UseResult(Enum):
    """Outcome of one attempt to use an item."""

    USED_UP = 'used_up'
    CANCELLED = 'cancelled'


__all__ = [
    'ItemTag',
    'UseResult',
]
