"""Notification bus: technicians hear about every attached feature (Observer)."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Listener(Protocol):
    def on_message(self, message: str) -> None: ...


class NotificationBus:
    """Ordered listener registry.  Insertion order is notification order."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Drop *listener*; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def publish(self, message: str) -> None:
        logger.debug(f"Publishing to {len(self._listeners)} listener(s): {message}")
        # Copy so a listener may unsubscribe itself mid-publish.
        for listener in list(self._listeners):
            listener.on_message(message)

    @property
    def listeners(self) -> tuple[Listener, ...]:
        return tuple(self._listeners)

    def __len__(self) -> int:
        return len(self._listeners)


class Technician:
    """Listener that acknowledges each message under its own name."""

    def __init__(self, name: str, write: Callable[[str], object] = print):
        self.name = name
        self._write = write

    def on_message(self, message: str) -> None:
        self._write(f"Technician {self.name} received message: {message}")

    def __repr__(self) -> str:
        return f"Technician({self.name!r})"
