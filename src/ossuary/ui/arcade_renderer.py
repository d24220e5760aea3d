from __future__ import annotations

import logging
import time
from typing import List, Optional, Tuple

import arcade

from ..game.session import GameSession, PlayerAction
from .colors import BLACK, WHITE
from .console import ConsoleRenderer
from .rendering import KeyPress, Panel

logger = logging.getLogger(__name__)

CELL_WIDTH = 10
CELL_HEIGHT = 16
FONT_SIZE = 11


class ArcadeRenderer:
    """Renderer that draws grid-cell panels in an Arcade window.

    The modal keystroke wait pumps the window's own event loop until a key
    arrives, so callers see a plain blocking call.
    """

    def __init__(self, window: "GameWindow", screen_width: int, screen_height: int) -> None:
        self.window = window
        self._width = screen_width
        self._height = screen_height
        self.overlays: List[Tuple[Panel, int, int, float, float]] = []
        self._capturing = False
        self._pending: Optional[KeyPress] = None

    @property
    def screen_width(self) -> int:
        return self._width

    @property
    def screen_height(self) -> int:
        return self._height

    @property
    def capturing(self) -> bool:
        return self._capturing

    def wrapped_line_count(self, text: str, width: int) -> int:
        return len(ConsoleRenderer.wrap(text, width))

    def blit(self, panel: Panel, x: int, y: int, foreground_alpha: float, background_alpha: float) -> None:
        self.overlays.append((panel, x, y, foreground_alpha, background_alpha))

    def deliver(self, key: KeyPress) -> None:
        self._pending = key

    def wait_for_keypress(self) -> KeyPress:
        self._capturing = True
        self._pending = None
        try:
            while self._pending is None:
                if self.window.exit_requested:
                    return KeyPress(name="ESCAPE")
                self.window.dispatch_events()
                self.window.on_draw()
                self.window.flip()
                time.sleep(1 / 60)
            return self._pending
        finally:
            self._capturing = False
            self.overlays.clear()

    # ---- Drawing helpers (grid cells, origin top-left) ----

    def _cell_to_px(self, x: int, y: int) -> Tuple[float, float]:
        return x * CELL_WIDTH, self.window.height - (y + 1) * CELL_HEIGHT

    def draw_cell_text(self, x: int, y: int, text: str, color=WHITE, alpha: int = 255) -> None:  # pragma: no cover - rendering
        px, py = self._cell_to_px(x, y)
        arcade.draw_text(text, px, py, (*color, alpha), FONT_SIZE, font_name="Courier New")

    def draw_overlays(self) -> None:  # pragma: no cover - rendering
        for panel, x, y, fg_alpha, bg_alpha in self.overlays:
            left, top = x * CELL_WIDTH, self.window.height - y * CELL_HEIGHT
            arcade.draw_lrbt_rectangle_filled(
                left,
                left + panel.width * CELL_WIDTH,
                top - panel.height * CELL_HEIGHT,
                top,
                (*BLACK, int(255 * bg_alpha)),
            )
            for item in panel.texts:
                wrapped = ConsoleRenderer.wrap(item.text, item.width) if item.width else [item.text]
                for offset, line in enumerate(wrapped):
                    self.draw_cell_text(x + item.x, y + item.y + offset, line, alpha=int(255 * fg_alpha))


class GameWindow(arcade.Window):
    """Arcade window showing the map glyphs, player HP and the message log."""

    def __init__(self, session_factory, screen_width: int, screen_height: int) -> None:
        super().__init__(screen_width * CELL_WIDTH, screen_height * CELL_HEIGHT, title="Ossuary")
        arcade.set_background_color(arcade.color.BLACK)
        self.renderer = ArcadeRenderer(self, screen_width, screen_height)
        self.session: GameSession = session_factory(self.renderer)

    @property
    def exit_requested(self) -> bool:
        return self.has_exit

    def on_draw(self):  # pragma: no cover - rendering
        self.clear()
        for obj in sorted(self.session.store, key=lambda o: o.fighter is not None):
            self.renderer.draw_cell_text(obj.x, obj.y, obj.glyph, obj.color)
        fighter = self.session.store.player.fighter
        history = self.session.config.message_history
        bottom = self.renderer.screen_height - history - 1
        if fighter is not None:
            self.renderer.draw_cell_text(1, bottom, f"HP: {fighter.hp}/{fighter.max_hp}")
        for offset, message in enumerate(self.session.feedback.recent(history)):
            self.renderer.draw_cell_text(1, bottom + 1 + offset, message.text, message.color)
        self.renderer.draw_overlays()

    def on_key_press(self, symbol: int, modifiers: int):
        key = _key_from_symbol(symbol)
        if self.renderer.capturing:
            self.renderer.deliver(key)
            return
        action = self.session.handle_key(key)
        logger.debug("Key %r -> %s", key.char or key.name, action)
        if action is PlayerAction.EXIT:
            self.close()


def _key_from_symbol(symbol: int) -> KeyPress:
    if arcade.key.A <= symbol <= arcade.key.Z:
        return KeyPress(char=chr(symbol))
    if symbol == arcade.key.ESCAPE:
        return KeyPress(name="ESCAPE")
    return KeyPress(name=str(symbol))
