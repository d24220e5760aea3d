from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol


@dataclass(frozen=True)
class KeyPress:
    """A single keystroke delivered by a renderer's blocking wait.

    Attributes:
        char: The printed character, empty for non-printing keys.
        name: Backend key name for non-printing keys (e.g. "ESCAPE").
    """

    char: str = ""
    name: str = ""

    @property
    def is_alpha(self) -> bool:
        return len(self.char) == 1 and self.char.isascii() and self.char.isalpha()


@dataclass(frozen=True)
class PanelText:
    x: int
    y: int
    text: str
    # Wrap region for word-wrapped text; None for a plain single line.
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass
class Panel:
    """Off-screen, backend-agnostic draw model for an overlay.

    Coordinates are grid cells relative to the panel's top-left corner.
    Renderers composite the panel onto their surface in blit().
    """

    width: int
    height: int
    texts: List[PanelText] = field(default_factory=list)

    def print_wrapped(self, x: int, y: int, width: int, height: int, text: str) -> None:
        self.texts.append(PanelText(x, y, text, width, height))

    def print_line(self, x: int, y: int, text: str) -> None:
        self.texts.append(PanelText(x, y, text))

    def lines(self) -> List[str]:
        return [t.text for t in self.texts]


class Renderer(Protocol):
    """What the core needs from a rendering and input backend."""

    @property
    def screen_width(self) -> int:  # pragma: no cover - type contract
        ...

    @property
    def screen_height(self) -> int:  # pragma: no cover - type contract
        ...

    def wrapped_line_count(self, text: str, width: int) -> int:
        """Number of lines ``text`` occupies once word-wrapped to ``width`` cells."""

    def blit(self, panel: Panel, x: int, y: int, foreground_alpha: float, background_alpha: float) -> None:
        """Composite ``panel`` onto the screen with its top-left corner at (x, y)."""

    def wait_for_keypress(self) -> KeyPress:
        """Present what has been drawn and block until exactly one key is pressed."""
