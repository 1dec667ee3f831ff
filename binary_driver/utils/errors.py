"""
Custom exceptions for binary driver.

This module defines the exception hierarchy used throughout the library.
Every error raised on purpose by the library derives from BinaryDriverError.
"""

from typing import Optional, Sequence


class BinaryDriverError(Exception):
    """Base exception for all binary driver errors."""

    pass


class InvalidArgumentError(BinaryDriverError, ValueError):
    """An argument passed to the library is invalid."""

    pass


class ConfigurationError(BinaryDriverError):
    """Configuration is invalid or cannot be loaded."""

    pass


class ExecutableNotFoundError(BinaryDriverError):
    """None of the candidate binaries could be resolved."""

    def __init__(self, message: str, candidates: Optional[Sequence[str]] = None):
        """
        Initialize error with the attempted candidates.

        Args:
            message: Error message
            candidates: Every binary name or path that was tried, in order
        """
        super().__init__(message)
        self.candidates = list(candidates or [])


class ProcessExecutionError(BinaryDriverError):
    """Process exited with a non-zero status or could not be started."""

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        stdout: Optional[str] = None,
        stderr: Optional[str] = None,
    ):
        """
        Initialize execution error with process details.

        Args:
            message: Error message
            command: Command that failed
            returncode: Exit status (None if the process never started)
            stdout: Captured standard output
            stderr: Captured standard error
        """
        super().__init__(message)
        self.command = list(command) if command is not None else None
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class ProcessTimeoutError(BinaryDriverError):
    """Process exceeded its timeout and was terminated."""

    def __init__(
        self,
        message: str,
        timeout: float,
        command: Optional[Sequence[str]] = None,
        stdout: Optional[str] = None,
        stderr: Optional[str] = None,
    ):
        """
        Initialize timeout error.

        Args:
            message: Error message
            timeout: Timeout value in seconds
            command: Command that timed out
            stdout: Standard output captured before termination
            stderr: Standard error captured before termination
        """
        super().__init__(message)
        self.timeout = timeout
        self.command = list(command) if command is not None else None
        self.stdout = stdout
        self.stderr = stderr
