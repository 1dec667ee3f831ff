"""
Helpers for testing drivers built on binary_driver.

The mock builders return ``unittest.mock`` objects specced on the real
classes, preconfigured the way driver tests usually need them.
"""

import logging
import shlex
from typing import Iterable, Optional
from unittest.mock import MagicMock

from .config import Configuration
from .executor import Process, ProcessBuilderFactory, ProcessRunner
from .executor.builder import Arguments
from .listeners import Listener


def create_process_mock(
    success: bool = True,
    command_line: Optional[str] = None,
    output: str = "",
    error: str = "",
    returncode: Optional[int] = None,
    lines: Iterable[tuple[str, str]] = (),
) -> MagicMock:
    """
    Create a Process mock.

    Args:
        success: Value of is_successful
        command_line: Value of command_line
        output: Captured stdout
        error: Captured stderr
        returncode: Exit status (0 or 1 from success when None)
        lines: (stream, line) pairs fed to the run() callback

    Returns:
        Mock whose run() replays lines to its callback
    """
    process = MagicMock(spec=Process)
    lines = list(lines)

    def run(callback=None):
        if callback is not None:
            for stream, line in lines:
                callback(stream, line)
        return process.returncode

    process.run.side_effect = run
    process.is_successful = success
    process.returncode = returncode if returncode is not None else (0 if success else 1)
    process.command_line = command_line or ""
    process.command = tuple(shlex.split(command_line)) if command_line else ()
    process.output = output
    process.error_output = error
    return process


def create_process_builder_factory_mock() -> MagicMock:
    return MagicMock(spec=ProcessBuilderFactory)


def create_process_runner_mock(output: str = "") -> MagicMock:
    runner = MagicMock(spec=ProcessRunner)
    runner.run.return_value = output
    return runner


def create_logger_mock() -> MagicMock:
    return MagicMock(spec=logging.Logger)


def create_configuration_mock() -> MagicMock:
    """Create an empty-looking Configuration mock."""
    configuration = MagicMock(spec=Configuration)
    configuration.has.return_value = False
    configuration.get.side_effect = lambda key, default=None: default
    configuration.all.return_value = {}
    return configuration


def create_listener_mock(events: Iterable[str] = ()) -> MagicMock:
    listener = MagicMock(spec=Listener)
    listener.forwarded_events.return_value = frozenset(events)
    return listener


class ShellEscapingProcessBuilderFactory(ProcessBuilderFactory):
    """
    Factory running commands through ``sh -c`` with every argument quoted.

    Only meant for tests exercising quoting of awkward arguments.
    """

    SHELL = "/bin/sh"

    def create(self, arguments: Arguments = ()) -> Process:
        if isinstance(arguments, str):
            arguments = [arguments]

        script = shlex.join([self.binary, *arguments])
        return Process([self.SHELL, "-c", script], timeout=self.timeout)
