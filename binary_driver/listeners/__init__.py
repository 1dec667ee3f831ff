"""Process output listeners and their registry."""

from binary_driver.listeners.base import Listener
from binary_driver.listeners.debug import DebugListener
from binary_driver.listeners.emitter import EventEmitter
from binary_driver.listeners.progress import ProgressListener
from binary_driver.listeners.registry import Listeners

__all__ = [
    "DebugListener",
    "EventEmitter",
    "Listener",
    "Listeners",
    "ProgressListener",
]
