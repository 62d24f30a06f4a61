import math
import time
from collections import deque
from datetime import datetime, timezone
from typing import Any, Callable

from ..errors import BadRequestError
from ..models.board import BoardMessage
from ..models.chat import ChatMessage


def parse_since(raw: Any) -> float:
    """Parse the ``since`` query value; anything unusable means "everything"."""
    if raw is None:
        return 0
    try:
        since = float(raw)
    except (TypeError, ValueError):
        return 0
    if math.isnan(since):
        return 0
    return since


def _utc_iso(ts: float) -> str:
    dt = datetime.fromtimestamp(ts, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class MessageLog:
    """Size-capped, append-only chat log used by the chat deployment."""

    def __init__(self, max_length: int = 200, cap: int = 500,
                 clock: Callable[[], float] = time.time):
        self.max_length = max_length
        self.cap = cap
        self._clock = clock
        self._messages: deque[ChatMessage] = deque()

    def __len__(self) -> int:
        return len(self._messages)

    def append(self, username: str, content: Any) -> ChatMessage:
        """Append a message; the oldest entries are dropped past the cap."""
        if not content or not isinstance(content, str) or len(content) > self.max_length:
            raise BadRequestError("Invalid message content")

        message = ChatMessage(username=username, content=content, timestamp=int(self._clock()))
        self._messages.append(message)
        while len(self._messages) > self.cap:
            self._messages.popleft()
        return message

    def list_since(self, since: float = 0) -> list[ChatMessage]:
        """Messages strictly newer than ``since``, oldest first."""
        return [m for m in self._messages if m.timestamp > since]


class BoardLog:
    """Open message board: no auth, no filtering, no cap."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._messages: list[BoardMessage] = []

    def __len__(self) -> int:
        return len(self._messages)

    def append(self, user: Any, text: Any) -> BoardMessage:
        if not user or not text or not isinstance(user, str) or not isinstance(text, str):
            raise BadRequestError("Missing user or text")

        message = BoardMessage(user=user, text=text, time=_utc_iso(self._clock()))
        self._messages.append(message)
        return message

    def list(self) -> list[BoardMessage]:
        return list(self._messages)
