import datetime
import itertools
import threading
from dataclasses import dataclass


MESSAGE_KINDS = ("user", "system")


@dataclass(frozen=True)
class CommandMessage:
    id: int
    kind: str
    content: str
    timestamp: datetime.datetime


class MessageLog:
    """Ordered, append-only chat log. Unbounded; lives for the window's lifetime."""

    def __init__(self):
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._items = []

    def add(self, kind, content):
        if kind not in MESSAGE_KINDS:
            raise ValueError(f"Unknown message kind: {kind!r}")
        with self._lock:
            message = CommandMessage(
                id=next(self._ids),
                kind=kind,
                content=str(content),
                timestamp=datetime.datetime.now(),
            )
            self._items.append(message)
        return message

    def all(self):
        with self._lock:
            return tuple(self._items)

    def __len__(self):
        with self._lock:
            return len(self._items)
