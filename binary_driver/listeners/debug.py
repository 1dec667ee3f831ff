"""
Listener re-emitting process output as prefixed debug lines.
"""

from ..executor.process import Process
from .base import Listener


class DebugListener(Listener):
    """
    Emits every non-blank output line, prefixed by its stream.

    Example:
        driver.listen(DebugListener())
        driver.on("debug", print)
    """

    def __init__(
        self,
        prefix_out: str = "[OUT] ",
        prefix_err: str = "[ERROR] ",
        event_out: str = "debug",
        event_err: str = "debug",
    ):
        super().__init__()
        self.prefix_out = prefix_out
        self.prefix_err = prefix_err
        self.event_out = event_out
        self.event_err = event_err

    def handle(self, stream: str, data: str) -> None:
        if stream == Process.ERR:
            event, prefix = self.event_err, self.prefix_err
        else:
            event, prefix = self.event_out, self.prefix_out

        for line in data.splitlines():
            if line.strip():
                self.emit(event, f"{prefix}{line}")

    def forwarded_events(self) -> frozenset[str]:
        return frozenset({self.event_out, self.event_err})
