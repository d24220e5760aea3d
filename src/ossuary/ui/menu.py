from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..exceptions import MenuOverflowError
from .rendering import KeyPress, Panel, Renderer

logger = logging.getLogger(__name__)

# Options are keyed a-z.
MAX_MENU_OPTIONS = 26


def menu_label(index: int) -> str:
    return chr(ord('a') + index)


@dataclass(frozen=True)
class MenuLayout:
    """Geometry and text of a menu panel, centered on the screen."""

    header: str
    header_height: int
    lines: List[str]
    width: int
    x: int
    y: int

    @property
    def height(self) -> int:
        return self.header_height + len(self.lines)


def menu_layout(header: str, options: Sequence[str], width: int, renderer: Renderer) -> MenuLayout:
    """Compute the panel layout for a menu.

    Raises MenuOverflowError when there are more options than letters.
    """
    if len(options) > MAX_MENU_OPTIONS:
        raise MenuOverflowError(
            f'Cannot have a menu with more than {MAX_MENU_OPTIONS} options (got {len(options)}).'
        )
    header_height = renderer.wrapped_line_count(header, width) if header else 0
    lines = [f'({menu_label(i)}) {text}' for i, text in enumerate(options)]
    height = header_height + len(lines)
    return MenuLayout(
        header=header,
        header_height=header_height,
        lines=lines,
        width=width,
        x=renderer.screen_width // 2 - width // 2,
        y=renderer.screen_height // 2 - height // 2,
    )


def selection_index(key: KeyPress, option_count: int) -> Optional[int]:
    """Map a keystroke to an option index, or None for anything that is not a listed letter."""
    if not key.is_alpha:
        return None
    index = ord(key.char.lower()) - ord('a')
    if 0 <= index < option_count:
        return index
    return None


def present_menu(
    header: str,
    options: Sequence[str],
    width: int,
    renderer: Renderer,
    *,
    foreground_alpha: float = 1.0,
    background_alpha: float = 0.7,
) -> Optional[int]:
    """
    Show a header and letter-labelled options, block for one keystroke and
    return the chosen index. Any key that does not name an option returns None.
    """
    layout = menu_layout(header, options, width, renderer)
    panel = Panel(width, layout.height)
    if header:
        panel.print_wrapped(0, 0, width, layout.header_height, header)
    for offset, line in enumerate(layout.lines):
        panel.print_line(0, layout.header_height + offset, line)
    renderer.blit(panel, layout.x, layout.y, foreground_alpha, background_alpha)

    key = renderer.wait_for_keypress()
    index = selection_index(key, len(options))
    logger.debug('Menu key %r -> %s', key.char or key.name, index)
    return index
