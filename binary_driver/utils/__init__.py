"""Shared utilities: errors and logging."""

from binary_driver.utils.errors import (
    BinaryDriverError,
    ConfigurationError,
    ExecutableNotFoundError,
    InvalidArgumentError,
    ProcessExecutionError,
    ProcessTimeoutError,
)
from binary_driver.utils.logger import get_logger, setup_logger

__all__ = [
    # Errors
    "BinaryDriverError",
    "ConfigurationError",
    "ExecutableNotFoundError",
    "InvalidArgumentError",
    "ProcessExecutionError",
    "ProcessTimeoutError",
    # Logging
    "get_logger",
    "setup_logger",
]
