"""Configuration management for binary drivers."""

from binary_driver.config.configuration import Configuration
from binary_driver.config.models import DriverSettings

__all__ = [
    "Configuration",
    "DriverSettings",
]
