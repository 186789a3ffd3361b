"""Routes simulation events to UI-side handlers, keyed by event type."""
from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from starfall.types import Event

E = TypeVar("E", bound=Event)


class EventBus:
    """Delivers each queued event to the handlers subscribed to its exact type.

    Events published during a tick are held until ``flush`` so that sound,
    score display and overlays see a whole tick at once, in emission order.
    """

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[[Event], None]]] = {}
        self._queue: list[Event] = []

    def subscribe(self, event_type: type[E], handler: Callable[[E], None]) -> None:
        self._handlers.setdefault(event_type, []).append(handler)  # type: ignore[arg-type]

    def unsubscribe(self, event_type: type[E], handler: Callable[[E], None]) -> None:
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)  # type: ignore[arg-type]

    def publish(self, events: Iterable[Event]) -> None:
        self._queue.extend(events)

    def flush(self) -> int:
        """Deliver everything queued so far. Returns how many events went out."""
        batch, self._queue = self._queue, []
        for event in batch:
            for handler in list(self._handlers.get(type(event), ())):
                handler(event)
        return len(batch)

    def clear(self) -> None:
        self._queue.clear()
