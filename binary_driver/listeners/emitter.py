"""
Minimal synchronous event emitter.
"""

from typing import Any, Callable, Optional

Handler = Callable[..., Any]


class EventEmitter:
    """
    Named events dispatched synchronously to handlers in registration order.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}
        self._once: list[tuple[str, Handler]] = []

    def on(self, event: str, handler: Handler) -> "EventEmitter":
        """
        Subscribe a handler to an event.

        Returns:
            Self for chaining
        """
        self._handlers.setdefault(event, []).append(handler)
        return self

    def once(self, event: str, handler: Handler) -> "EventEmitter":
        """Subscribe a handler removed after its first call."""
        self.on(event, handler)
        self._once.append((event, handler))
        return self

    def remove_listener(self, event: str, handler: Handler) -> "EventEmitter":
        handlers = self._handlers.get(event)
        if handlers and handler in handlers:
            handlers.remove(handler)
            if not handlers:
                del self._handlers[event]
        if (event, handler) in self._once:
            self._once.remove((event, handler))
        return self

    def remove_all_listeners(self, event: Optional[str] = None) -> "EventEmitter":
        if event is None:
            self._handlers.clear()
            self._once.clear()
        else:
            self._handlers.pop(event, None)
            self._once = [entry for entry in self._once if entry[0] != event]
        return self

    def listeners(self, event: str) -> list[Handler]:
        """Get the handlers subscribed to an event."""
        return list(self._handlers.get(event, []))

    def emit(self, event: str, *args: Any) -> None:
        """Call every handler of an event with the given arguments."""
        for handler in self.listeners(event):
            if (event, handler) in self._once:
                self.remove_listener(event, handler)
            handler(*args)
