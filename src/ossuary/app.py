from __future__ import annotations

import logging
from typing import Optional, TextIO

from .config import GameConfig
from .entities.store import EntityStore
from .game.session import GameSession, PlayerAction
from .items.factory import healing_potion, make_player
from .ui.console import ConsoleRenderer
from .ui.rendering import Renderer

logger = logging.getLogger(__name__)

STARTING_POTIONS = 3
STARTING_WOUNDS = 10


def _arcade_available() -> bool:
    try:
        import arcade  # noqa: F401
        return True
    except ImportError:
        return False


def new_session(config: GameConfig, renderer: Renderer) -> GameSession:
    """Populate a small starting room: a wounded player standing on a few potions."""
    x, y = config.screen_width // 2, config.screen_height // 2
    player = make_player(x, y, max_hp=config.player_max_hp)
    player.fighter.take_damage(STARTING_WOUNDS)
    store = EntityStore(player)
    for _ in range(STARTING_POTIONS):
        store.add(healing_potion(x, y))
    session = GameSession(store, renderer, config=config)
    session.feedback.add("Welcome stranger! Prepare to perish in the Tombs of the Ancient Kings.")
    return session


def run_headless(
    config: GameConfig,
    max_steps: Optional[int] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Run a console session. One line of input is one keystroke.

    Args:
        config: Game configuration.
        max_steps: Stop after N commands; None runs until quit or end of input.
    """
    renderer = ConsoleRenderer(config.screen_width, config.screen_height, stdin=stdin, stdout=stdout)
    session = new_session(config, renderer)
    shown = 0
    steps = 0
    try:
        while max_steps is None or steps < max_steps:
            messages = session.feedback.messages()
            # Only the newest message_history unseen messages are shown each step.
            for message in messages[shown:][-config.message_history:]:
                renderer.write(message.text)
            shown = len(messages)
            fighter = session.store.player.fighter
            renderer.write(f"HP: {fighter.hp}/{fighter.max_hp}  Items: {len(session.inventory)}")
            renderer.write("Command [g]et [i]nventory [d]rop [q]uit:")
            action = session.handle_key(renderer.wait_for_keypress())
            steps += 1
            logger.debug("Step %d -> %s", steps, action)
            if action is PlayerAction.EXIT:
                break
        return 0
    except KeyboardInterrupt:
        renderer.write("Interrupted by user")
        return 130


def run_gui(config: GameConfig) -> int:
    """Run the Arcade front end, falling back to headless when Arcade cannot be imported."""
    if not _arcade_available():
        logger.warning("Arcade not available; falling back to headless mode")
        return run_headless(config)

    import arcade

    from .ui.arcade_renderer import GameWindow

    GameWindow(lambda renderer: new_session(config, renderer), config.screen_width, config.screen_height)
    try:
        logger.info("Launching Arcade window")
        arcade.run()
        logger.info("Arcade loop finished")
        return 0
    except Exception:
        logger.exception("Unhandled exception in GUI loop; exiting with code 1")
        return 1
