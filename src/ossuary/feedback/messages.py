from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List

from ..ui.colors import Color, WHITE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Message:
    """A single line of player-facing narration.

    Attributes:
        text: The message as shown to the player.
        color: RGB color the message is drawn in.
    """

    text: str
    color: Color = WHITE


class MessageLog:
    """Append-only narration log written by pickup, use and effect operations.

    Game logic only ever appends. Renderers read the tail via recent().
    """

    def __init__(self) -> None:
        self._messages: List[Message] = []

    def add(self, text: str, color: Color = WHITE) -> Message:
        message = Message(text=text, color=color)
        self._messages.append(message)
        logger.debug('Message: %s', text)
        return message

    def messages(self) -> List[Message]:
        return list(self._messages)

    def texts(self) -> List[str]:
        return [m.text for m in self._messages]

    def recent(self, n: int) -> List[Message]:
        if n <= 0:
            return []
        return self._messages[-n:]

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)
