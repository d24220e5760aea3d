from __future__ import annotations

import logging
import sys
import textwrap
from typing import List, Optional, TextIO

from .rendering import KeyPress, Panel

logger = logging.getLogger(__name__)


class ConsoleRenderer:
    """Headless renderer writing panels to a text stream and reading keys from another.

    One line of input is one keystroke: its first character, or ENTER for an
    empty line. End of input reads as ESCAPE so scripted sessions terminate.
    """

    def __init__(
        self,
        screen_width: int = 80,
        screen_height: int = 50,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self._width = screen_width
        self._height = screen_height
        self._in = stdin or sys.stdin
        self._out = stdout or sys.stdout

    @property
    def screen_width(self) -> int:
        return self._width

    @property
    def screen_height(self) -> int:
        return self._height

    @staticmethod
    def wrap(text: str, width: int) -> List[str]:
        """Word-wrap each newline-separated paragraph; blank paragraphs keep one empty line."""
        lines: List[str] = []
        for paragraph in text.split("\n"):
            lines.extend(textwrap.wrap(paragraph, width) or [""])
        return lines

    def wrapped_line_count(self, text: str, width: int) -> int:
        return len(self.wrap(text, width))

    def write(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def blit(self, panel: Panel, x: int, y: int, foreground_alpha: float, background_alpha: float) -> None:
        rows: List[str] = [""] * panel.height
        for item in panel.texts:
            wrapped = self.wrap(item.text, item.width) if item.width else [item.text]
            for offset, line in enumerate(wrapped):
                row = item.y + offset
                if 0 <= row < panel.height:
                    rows[row] = " " * item.x + line[: panel.width - item.x]
        indent = " " * max(0, x)
        border = indent + "+" + "-" * panel.width + "+"
        self.write(border)
        for row in rows:
            self.write(f"{indent}|{row.ljust(panel.width)}|")
        self.write(border)

    def wait_for_keypress(self) -> KeyPress:
        self._out.flush()
        line = self._in.readline()
        if not line:
            logger.debug("Console input closed; reading as ESCAPE")
            return KeyPress(name="ESCAPE")
        line = line.rstrip("\r\n")
        if not line:
            return KeyPress(name="ENTER")
        return KeyPress(char=line[0])
