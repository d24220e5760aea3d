from .entity import Entity, Fighter
from .store import PLAYER, EntityStore

__all__ = ["Entity", "Fighter", "EntityStore", "PLAYER"]
