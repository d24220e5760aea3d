"""
Ossuary package root.

Core item handling for a turn-based dungeon crawler: the world entity store,
the player's inventory, the letter-keyed selection menu and item effects.
Rendering backends (Arcade, console) live under ``ossuary.ui`` and stay out
of the domain modules.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
