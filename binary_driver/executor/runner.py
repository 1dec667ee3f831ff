"""
Process execution with listener notification and logging.
"""

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from ..utils import ProcessExecutionError, ProcessTimeoutError, get_logger
from .process import OutputCallback, Process

if TYPE_CHECKING:
    from ..listeners.base import Listener


class ProcessRunner:
    """
    Runs processes on behalf of a driver.

    Output lines are forwarded to the listeners given for the run, the
    command line and outcome are logged, and failures are turned into
    ProcessExecutionError unless errors are bypassed.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, name: str = "binary-driver"):
        """
        Initialize runner.

        Args:
            logger: Logger receiving command lines and outcomes
            name: Driver name used in log and error messages
        """
        self._logger = logger or get_logger(__name__)
        self._name = name

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    @property
    def name(self) -> str:
        return self._name

    def run(
        self,
        process: Process,
        listeners: Iterable["Listener"] = (),
        bypass_errors: bool = False,
    ) -> str:
        """
        Run a process to completion.

        Args:
            process: Process to run
            listeners: Listeners receiving every output line, in order
            bypass_errors: Return output instead of raising on non-zero exit

        Returns:
            Captured stdout

        Raises:
            ProcessExecutionError: If the process cannot be started, or exits
                with a non-zero status and errors are not bypassed
            ProcessTimeoutError: If the process exceeds its timeout
        """
        command_line = process.command_line
        self._logger.debug(f"{self._name} running command {command_line}")

        try:
            process.run(self._build_callback(listeners))
        except ProcessTimeoutError:
            self._logger.error(f"{self._name} command timed out: {command_line}")
            raise
        except OSError as e:
            message = f"{self._name} failed to execute command {command_line}: {e}"
            self._logger.error(message)
            raise ProcessExecutionError(message, command=process.command) from e

        if not process.is_successful:
            message = self._create_error_message(command_line, process.error_output)
            self._logger.error(message)
            if not bypass_errors:
                raise ProcessExecutionError(
                    message,
                    command=process.command,
                    returncode=process.returncode,
                    stdout=process.output,
                    stderr=process.error_output,
                )
            return process.output

        self._logger.info(f"{self._name} executed command successfully")
        return process.output

    def _build_callback(self, listeners: Iterable["Listener"]) -> OutputCallback:
        listeners = list(listeners)

        def callback(stream: str, line: str) -> None:
            for listener in listeners:
                listener.handle(stream, line)

        return callback

    def _create_error_message(self, command_line: str, error_output: str) -> str:
        return (
            f"{self._name} failed to execute command {command_line}\n\n"
            f"Error Output:\n\n {error_output}"
        )
