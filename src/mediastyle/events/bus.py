"""Synchronous event bus that StyleBindings report through."""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger("mediastyle.events")

Listener = Callable[[Any], None]


class EventBus:
    """Dispatches binding events to listeners in the order they subscribed.

    Catch-all listeners run before listeners registered for the event's
    exact type. Listener errors propagate to the emitter.
    """

    def __init__(self) -> None:
        self._by_type: dict[type, list[Listener]] = {}
        self._catch_all: list[Listener] = []

    def subscribe(self, event_type: type, listener: Listener) -> Callable[[], None]:
        """Listen for *event_type*; returns a function that unsubscribes."""
        listeners = self._by_type.setdefault(event_type, [])
        listeners.append(listener)
        return lambda: listeners.remove(listener)

    def on_all(self, listener: Listener) -> Callable[[], None]:
        """Listen for every event; returns a function that unsubscribes."""
        self._catch_all.append(listener)
        return lambda: self._catch_all.remove(listener)

    def emit(self, event: Any) -> None:
        listeners = [*self._catch_all, *self._by_type.get(type(event), [])]
        logger.debug("%s -> %d listener(s)", type(event).__name__, len(listeners))
        for listener in listeners:
            listener(event)
