"""Named RGB colors shared by the feedback log, glyphs and menus."""

from typing import Tuple

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
YELLOW: Color = (255, 255, 0)
VIOLET: Color = (127, 0, 255)
LIGHT_VIOLET: Color = (184, 115, 255)
DESATURATED_GREEN: Color = (63, 127, 63)
DARKER_GREEN: Color = (0, 127, 0)
DARK_WALL: Color = (0, 0, 100)
DARK_GROUND: Color = (50, 50, 150)
