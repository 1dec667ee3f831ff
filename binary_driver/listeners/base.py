"""
Listener capability.
"""

from abc import ABC, abstractmethod

from .emitter import EventEmitter


class Listener(EventEmitter, ABC):
    """
    Observer of process output.

    The runner calls handle() for every output line; a listener turns those
    lines into named events, and the events listed by forwarded_events() are
    re-emitted on the driver the listener is registered with.
    """

    @abstractmethod
    def handle(self, stream: str, data: str) -> None:
        """
        Receive one line of process output.

        Args:
            stream: Process.OUT or Process.ERR
            data: Output line without trailing line break
        """

    @abstractmethod
    def forwarded_events(self) -> frozenset[str]:
        """Names of the events re-emitted on the owning driver."""
