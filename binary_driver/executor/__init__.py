"""Executable resolution and process execution."""

from binary_driver.executor.builder import ProcessBuilderFactory
from binary_driver.executor.finder import find_executable
from binary_driver.executor.process import Process
from binary_driver.executor.runner import ProcessRunner

__all__ = [
    "Process",
    "ProcessBuilderFactory",
    "ProcessRunner",
    "find_executable",
]
