"""
Configuration models using Pydantic.

This module validates the options a driver reads out of its Configuration.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from binary_driver.utils import ConfigurationError


class DriverSettings(BaseModel):
    """Options consumed by BinaryDriver."""

    timeout: Optional[float] = Field(
        default=None,
        ge=0,
        description="Process timeout in seconds (None or 0 disables the timeout)",
    )

    @classmethod
    def from_configuration(cls, configuration: Any) -> "DriverSettings":
        """
        Validate the known options of a configuration.

        Args:
            configuration: Configuration (or any object with get())

        Returns:
            Validated DriverSettings

        Raises:
            ConfigurationError: If an option has an invalid value
        """
        try:
            return cls(timeout=configuration.get("timeout"))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid driver configuration: {e}") from e
