"""
Binary Driver

Locate an external executable and run it, streaming its output to
pluggable listeners.
"""

__version__ = "0.1.0"

from binary_driver.config import Configuration, DriverSettings
from binary_driver.driver import BinaryDriver, load
from binary_driver.executor import (
    Process,
    ProcessBuilderFactory,
    ProcessRunner,
    find_executable,
)
from binary_driver.listeners import (
    DebugListener,
    EventEmitter,
    Listener,
    Listeners,
    ProgressListener,
)
from binary_driver.utils import (
    BinaryDriverError,
    ConfigurationError,
    ExecutableNotFoundError,
    InvalidArgumentError,
    ProcessExecutionError,
    ProcessTimeoutError,
    get_logger,
    setup_logger,
)

__all__ = [
    "__version__",
    # Driver
    "BinaryDriver",
    "load",
    # Configuration
    "Configuration",
    "DriverSettings",
    # Execution
    "Process",
    "ProcessBuilderFactory",
    "ProcessRunner",
    "find_executable",
    # Listeners
    "DebugListener",
    "EventEmitter",
    "Listener",
    "Listeners",
    "ProgressListener",
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
