"""
Configuration store for binary drivers.

A Configuration is a plain ordered bag of options (timeout, custom
flags, ...). It does not validate values; see models.DriverSettings for the
options the driver itself consumes.
"""

from collections.abc import Iterator, Mapping, MutableMapping
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from binary_driver.utils import ConfigurationError, get_logger

logger = get_logger(__name__)


class Configuration(MutableMapping):
    """Mutable, insertion-ordered mapping of option name to value."""

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        """
        Initialize configuration.

        Args:
            data: Optional initial options (copied)
        """
        self._data: dict[str, Any] = dict(data or {})

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Configuration":
        """
        Load configuration from a YAML file.

        Args:
            path: Path to a YAML document holding a mapping

        Returns:
            Loaded Configuration

        Raises:
            ConfigurationError: If the file is missing, invalid, or not a mapping
        """
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Configuration file must contain a mapping, got {type(data).__name__}: {path}"
            )

        logger.debug(f"Loaded configuration from {path}")
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> "Configuration":
        """
        Set an option.

        Returns:
            Self for chaining
        """
        self._data[key] = value
        return self

    def has(self, key: str) -> bool:
        return key in self._data

    def remove(self, key: str, default: Any = None) -> Any:
        """
        Remove an option.

        Returns:
            The removed value, or default if the option was not set
        """
        return self._data.pop(key, default)

    def all(self) -> dict[str, Any]:
        """Get a snapshot of every option."""
        return dict(self._data)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Configuration({self._data!r})"
