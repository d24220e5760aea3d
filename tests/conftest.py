import sys
from pathlib import Path
from typing import List

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from ossuary.entities.store import EntityStore  # noqa: E402
from ossuary.feedback.messages import MessageLog  # noqa: E402
from ossuary.inventory.inventory import Inventory  # noqa: E402
from ossuary.items.factory import make_player  # noqa: E402
from ossuary.ui.console import ConsoleRenderer  # noqa: E402
from ossuary.ui.rendering import KeyPress, Panel  # noqa: E402


class ScriptedRenderer:
    """Renderer double: records blitted panels and replays scripted keys."""

    def __init__(self, keys: str = "", screen_width: int = 80, screen_height: int = 50) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.keys: List[KeyPress] = [KeyPress(char=c) for c in keys]
        self.blits = []
        self.waits = 0

    def press(self, *keys: KeyPress) -> None:
        self.keys.extend(keys)

    def wrapped_line_count(self, text: str, width: int) -> int:
        return len(ConsoleRenderer.wrap(text, width))

    def blit(self, panel: Panel, x: int, y: int, foreground_alpha: float, background_alpha: float) -> None:
        self.blits.append((panel, x, y, foreground_alpha, background_alpha))

    def wait_for_keypress(self) -> KeyPress:
        self.waits += 1
        return self.keys.pop(0)

    @property
    def last_panel(self) -> Panel:
        return self.blits[-1][0]


@pytest.fixture()
def renderer():
    return ScriptedRenderer()


@pytest.fixture()
def player():
    return make_player(5, 5, max_hp=30)


@pytest.fixture()
def store(player):
    return EntityStore(player)


@pytest.fixture()
def inventory():
    return Inventory()


@pytest.fixture()
def log():
    return MessageLog()


@pytest.fixture()
def make_renderer():
    return ScriptedRenderer
