"""Simple synchronous event bus for snapshot change events."""

from typing import Any, Callable


class Subscription:
    """Handle returned by :class:`EventBus` registrations.

    Calling :meth:`unsubscribe` more than once is harmless.
    """

    def __init__(self, listeners: list[Callable], callback: Callable) -> None:
        self._listeners = listeners
        self._callback = callback
        self.active = True

    def unsubscribe(self) -> None:
        if not self.active:
            return
        self.active = False
        try:
            self._listeners.remove(self._callback)
        except ValueError:
            pass


class EventBus:
    """Synchronous publish-subscribe event bus.

    Listeners can subscribe to specific event types or receive all events.
    Events are dispatched synchronously in registration order.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Callable]] = {}
        self._global_listeners: list[Callable] = []

    def subscribe(self, event_type: type, callback: Callable) -> Subscription:
        """Register a callback for a specific event type."""
        listeners = self._listeners.setdefault(event_type, [])
        listeners.append(callback)
        return Subscription(listeners, callback)

    def on_all(self, callback: Callable) -> Subscription:
        """Register a callback that receives every event."""
        self._global_listeners.append(callback)
        return Subscription(self._global_listeners, callback)

    def emit(self, event: Any) -> None:
        """Dispatch an event to all matching listeners."""
        for cb in list(self._global_listeners):
            cb(event)
        for cb in list(self._listeners.get(type(event), [])):
            cb(event)

    def listener_count(self) -> int:
        return len(self._global_listeners) + sum(len(v) for v in self._listeners.values())
