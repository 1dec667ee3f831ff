"""
Progress tracking for FFmpeg-style tools.

Parses the duration banner and the periodic status lines FFmpeg (and tools
sharing its output format) write on stderr, and emits the completed
fraction.
"""

import re
from typing import Optional

from ..executor.process import Process
from ..utils import get_logger
from .base import Listener

logger = get_logger(__name__)


def _to_seconds(hours: str, minutes: str, seconds: str) -> float:
    return float(hours) * 3600 + float(minutes) * 60 + float(seconds)


class ProgressListener(Listener):
    """
    Emits (progress, speed) on every status line.

    progress is a float from 0.0 to 1.0; speed is the reported fps, or the
    speed multiplier converted to an approximate fps, or None.
    """

    # Regex patterns for parsing FFmpeg output
    DURATION_PATTERN = re.compile(r"Duration: (\d{2}):(\d{2}):(\d{2}\.\d{2})")
    PROGRESS_PATTERN = re.compile(r"time=(\d{2}):(\d{2}):(\d{2}\.\d{2})")
    FPS_PATTERN = re.compile(r"fps=\s*(\d+\.?\d*)")
    SPEED_PATTERN = re.compile(r"speed=\s*(\d+\.?\d*)x")

    # Base frame rate used to turn a speed multiplier into fps
    BASE_FPS = 30.0

    def __init__(self, duration: Optional[float] = None, event: str = "progress"):
        """
        Initialize progress listener.

        Args:
            duration: Total media duration in seconds (read from the
                      output banner when None)
            event: Name of the emitted event
        """
        super().__init__()
        self.duration = duration
        self.event = event
        self.progress = 0.0

    # FFmpeg rewrites its status line in place with a bare carriage return
    STATUS_BREAK = re.compile(r"[\r\n]+")

    def handle(self, stream: str, data: str) -> None:
        if stream != Process.ERR:
            return

        for line in self.STATUS_BREAK.split(data):
            if line:
                self._handle_line(line)

    def _handle_line(self, line: str) -> None:
        if self.duration is None:
            duration_match = self.DURATION_PATTERN.search(line)
            if duration_match:
                self.duration = _to_seconds(*duration_match.groups())
                logger.debug(f"Detected duration: {self.duration}s")
            return

        progress_match = self.PROGRESS_PATTERN.search(line)
        if not progress_match or not self.duration:
            return

        current_time = _to_seconds(*progress_match.groups())
        self.progress = min(current_time / self.duration, 1.0)

        speed: Optional[float] = None
        fps_match = self.FPS_PATTERN.search(line)
        speed_match = self.SPEED_PATTERN.search(line)
        if fps_match:
            speed = float(fps_match.group(1))
        elif speed_match:
            speed = float(speed_match.group(1)) * self.BASE_FPS

        self.emit(self.event, self.progress, speed)

    def forwarded_events(self) -> frozenset[str]:
        return frozenset({self.event})
