"""
Listener registry scoped to one driver.
"""

from contextlib import contextmanager
from typing import Iterable, Iterator

from ..utils import get_logger
from .base import Listener
from .emitter import EventEmitter, Handler

logger = get_logger(__name__)


class Listeners:
    """
    Ordered set of listeners with their event forwarding.

    Registering a listener subscribes one forwarder per declared event name,
    re-emitting the event on the target emitter. The registry knows event
    names and targets only, never event content.
    """

    def __init__(self) -> None:
        self._storage: dict[Listener, list[tuple[str, Handler]]] = {}

    def register(self, listener: Listener, target: EventEmitter) -> "Listeners":
        """
        Register a listener, forwarding its declared events to target.

        Registering an already registered listener does nothing.

        Returns:
            Self for chaining
        """
        if listener in self._storage:
            return self

        forwarders = []
        for event in listener.forwarded_events():
            forwarder = self._build_forwarder(event, target)
            listener.on(event, forwarder)
            forwarders.append((event, forwarder))

        self._storage[listener] = forwarders
        logger.debug(f"Registered listener {listener!r}")
        return self

    def unregister(self, listener: Listener, target: EventEmitter) -> "Listeners":
        """
        Unregister a listener and drop its forwarders.

        Unknown listeners are ignored.

        Returns:
            Self for chaining
        """
        forwarders = self._storage.pop(listener, None)
        if forwarders is None:
            return self

        for event, forwarder in forwarders:
            listener.remove_listener(event, forwarder)

        logger.debug(f"Unregistered listener {listener!r}")
        return self

    def copy(self) -> "Listeners":
        """Copy the registry; forwarders stay shared between both copies."""
        clone = type(self)()
        clone._storage = {listener: list(forwarders) for listener, forwarders in self._storage.items()}
        return clone

    @contextmanager
    def temporary(self, listeners: Iterable[Listener], target: EventEmitter) -> Iterator["Listeners"]:
        """
        Register extra listeners for the duration of a block.

        Yields a copy of this registry holding the extra listeners on top of
        the registered ones. On exit, whatever the outcome, the extras that
        were not already registered here are unregistered again.
        """
        active = self.copy()
        added = []
        try:
            for listener in listeners:
                if listener not in active:
                    active.register(listener, target)
                    added.append(listener)
            yield active
        finally:
            for listener in added:
                active.unregister(listener, target)

    @staticmethod
    def _build_forwarder(event: str, target: EventEmitter) -> Handler:
        def forward(*args):
            target.emit(event, *args)

        return forward

    def __contains__(self, listener: object) -> bool:
        return listener in self._storage

    def __iter__(self) -> Iterator[Listener]:
        return iter(list(self._storage))

    def __len__(self) -> int:
        return len(self._storage)

    def __repr__(self) -> str:
        return f"Listeners({list(self._storage)!r})"
