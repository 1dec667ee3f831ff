"""
Subprocess wrapper for binary execution.

This module provides the process descriptor used by drivers: a fixed
command line and timeout, executed once with line streaming of
stdout and stderr to a callback. Execution is built on asyncio
subprocesses; run() drives it to completion for synchronous callers.
"""

import asyncio
import codecs
import re
import shlex
from typing import Callable, Mapping, Optional, Sequence

from ..utils import ProcessTimeoutError, get_logger

logger = get_logger(__name__)

OutputCallback = Callable[[str, str], None]


class Process:
    """
    A single invocation of an executable.

    Provides:
    - Line streaming of stdout and stderr to a callback
    - Captured output once finished
    - Timeout handling with graceful then forced termination
    - Cleanup of the child on every exit path
    """

    OUT = "out"
    ERR = "err"

    # Grace period between SIGTERM and SIGKILL
    TERMINATE_TIMEOUT = 5.0

    # Size of each read from a pipe
    CHUNK_SIZE = 64 * 1024

    # Longest line handed to the callback; longer runs are passed on in pieces
    LINE_LIMIT = 1024 * 1024

    # ffmpeg-style tools end status lines with a bare carriage return
    LINE_BREAK = re.compile(r"\r\n|\r|\n")

    def __init__(
        self,
        command: Sequence[str],
        timeout: Optional[float] = None,
        cwd: Optional[str] = None,
        env: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize process.

        Args:
            command: Full argv, executable first
            timeout: Maximum execution time in seconds (None or 0 = no timeout)
            cwd: Working directory of the child
            env: Environment of the child (inherits the current one if None)
        """
        if not command:
            raise ValueError("Process command must not be empty")

        self._command = tuple(command)
        self._timeout = timeout or None
        self._cwd = cwd
        self._env = dict(env) if env is not None else None

        self._process: Optional[asyncio.subprocess.Process] = None
        self._started = False
        self._timed_out = False
        self._stdout_chunks: list[str] = []
        self._stderr_chunks: list[str] = []

    @property
    def command(self) -> tuple[str, ...]:
        return self._command

    @property
    def command_line(self) -> str:
        """Shell-quoted command line, for diagnostics."""
        return shlex.join(self._command)

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    @property
    def cwd(self) -> Optional[str]:
        return self._cwd

    @property
    def env(self) -> Optional[dict[str, str]]:
        return dict(self._env) if self._env is not None else None

    def run(self, callback: Optional[OutputCallback] = None) -> int:
        """
        Run the process and block until it exits.

        Must not be called from a running event loop; await arun() there.

        Args:
            callback: Called as callback(stream, line) for every output line,
                      stream being Process.OUT or Process.ERR

        Returns:
            Exit status

        Raises:
            ProcessTimeoutError: If the process exceeds its timeout
            OSError: If the executable cannot be started
        """
        return asyncio.run(self.arun(callback))

    async def arun(self, callback: Optional[OutputCallback] = None) -> int:
        """
        Run the process and wait for completion.

        Args:
            callback: Called as callback(stream, line) for every output line

        Returns:
            Exit status

        Raises:
            ProcessTimeoutError: If the process exceeds its timeout
            OSError: If the executable cannot be started
        """
        if self._started:
            raise RuntimeError("Process has already been run")
        self._started = True

        logger.debug(f"Full command: {self.command_line}")

        self._process = await asyncio.create_subprocess_exec(
            *self._command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=self._cwd,
            env=self._env,
        )

        try:
            if self._timeout:
                await asyncio.wait_for(self._communicate(callback), timeout=self._timeout)
            else:
                await self._communicate(callback)

        except asyncio.TimeoutError:
            logger.error(f"Process exceeded timeout of {self._timeout}s: {self.command_line}")
            self._timed_out = True
            await self.terminate()
            raise ProcessTimeoutError(
                f"Process exceeded timeout of {self._timeout}s",
                timeout=self._timeout or 0.0,
                command=self._command,
                stdout=self.output,
                stderr=self.error_output,
            )

        except BaseException:
            await self.terminate()
            raise

        return self._process.returncode

    async def _communicate(self, callback: Optional[OutputCallback]) -> None:
        """Stream both pipes until EOF, then wait for the exit status."""
        if not self._process:
            raise RuntimeError("Process not started")

        await asyncio.gather(
            self._read_stream(self._process.stdout, self.OUT, self._stdout_chunks, callback),
            self._read_stream(self._process.stderr, self.ERR, self._stderr_chunks, callback),
        )

        await self._process.wait()

    async def _read_stream(
        self,
        stream: Optional[asyncio.StreamReader],
        kind: str,
        chunks: list[str],
        callback: Optional[OutputCallback],
    ) -> None:
        """
        Read a pipe chunk by chunk.

        The decoded text is captured in full. The callback gets one call per
        line without its line break, where "\\n", "\\r\\n" and a bare "\\r" all
        end a line. A line longer than LINE_LIMIT is handed over in pieces.
        """
        if stream is None:
            return

        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        pending = ""

        while True:
            data = await stream.read(self.CHUNK_SIZE)
            final = not data

            text = decoder.decode(data, final=final)
            if text:
                chunks.append(text)

            if callback is not None:
                pending = self._dispatch_lines(kind, pending + text, final, callback)

            if final:
                break

    def _dispatch_lines(self, kind: str, buffer: str, final: bool, callback: OutputCallback) -> str:
        """Hand the complete lines of buffer to callback and return the rest."""
        start = 0
        for match in self.LINE_BREAK.finditer(buffer):
            # A trailing "\r" may be the first half of a "\r\n" split across reads
            if not final and match.group() == "\r" and match.end() == len(buffer):
                break
            callback(kind, buffer[start : match.start()])
            start = match.end()

        rest = buffer[start:]
        while len(rest) > self.LINE_LIMIT:
            callback(kind, rest[: self.LINE_LIMIT])
            rest = rest[self.LINE_LIMIT :]

        if final and rest:
            callback(kind, rest)
            rest = ""

        return rest

    async def terminate(self) -> None:
        """
        Terminate the process gracefully.

        Sends SIGTERM, waits briefly, then sends SIGKILL if needed.
        """
        if not self._process or self._process.returncode is not None:
            return

        logger.info(f"Terminating process {self._process.pid}...")
        try:
            self._process.terminate()
        except ProcessLookupError:
            pass

        try:
            await asyncio.wait_for(self._process.wait(), timeout=self.TERMINATE_TIMEOUT)
            logger.debug("Process terminated gracefully")
        except asyncio.TimeoutError:
            logger.warning("Forcing process termination...")
            try:
                self._process.kill()
            except ProcessLookupError:
                pass
            await self._process.wait()
            logger.debug("Process killed")

    @property
    def is_started(self) -> bool:
        return self._started

    @property
    def is_running(self) -> bool:
        """Check if process is currently running."""
        return self._process is not None and self._process.returncode is None

    @property
    def returncode(self) -> Optional[int]:
        """Get process return code."""
        return self._process.returncode if self._process else None

    @property
    def is_successful(self) -> bool:
        return self.returncode == 0

    @property
    def timed_out(self) -> bool:
        return self._timed_out

    @property
    def output(self) -> str:
        """Get captured stdout."""
        return "".join(self._stdout_chunks)

    @property
    def error_output(self) -> str:
        """Get captured stderr."""
        return "".join(self._stderr_chunks)

    def __repr__(self) -> str:
        return f"Process({self.command_line!r}, timeout={self._timeout!r})"
