"""In-memory pub/sub event bus with per-tick flush semantics."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]

# Subscribing to ANY receives every signal, after the named handlers.
ANY = "*"


class SignalBus:
    """Queues published signals until ``flush`` dispatches them.

    Handlers run in subscription order. Signals published by a handler
    during a flush are held for the next flush.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        if signal_name == ANY:
            raise ValueError(f"{ANY!r} is reserved for subscriptions")
        self._queue.append((signal_name, data))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)
            for handler in list(self._subscribers.get(ANY, ())):
                handler(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()
