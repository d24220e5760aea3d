from .session import GameSession, PlayerAction

__all__ = ["GameSession", "PlayerAction"]
