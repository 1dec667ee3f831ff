"""
Process construction for a resolved binary.
"""

import os
from typing import Optional, Sequence, Union

from ..utils import InvalidArgumentError, get_logger
from .process import Process

logger = get_logger(__name__)

Arguments = Union[str, Sequence[str]]


class ProcessBuilderFactory:
    """
    Builds Process descriptors bound to one executable.

    Every descriptor targets the binary given at construction and gets the
    factory's current timeout.
    """

    def __init__(self, binary: Union[str, os.PathLike]):
        """
        Initialize factory.

        Args:
            binary: Path of the executable

        Raises:
            InvalidArgumentError: If binary is not an executable file
        """
        binary = os.fspath(binary)
        if not os.path.isfile(binary) or not os.access(binary, os.X_OK):
            raise InvalidArgumentError(f"`{binary}` is not an executable binary")

        self._binary = binary
        self._timeout: Optional[float] = None

    @property
    def binary(self) -> str:
        return self._binary

    @property
    def timeout(self) -> Optional[float]:
        """Timeout applied to new processes, in seconds."""
        return self._timeout

    @timeout.setter
    def timeout(self, timeout: Optional[float]) -> None:
        self._timeout = timeout

    def create(self, arguments: Arguments = ()) -> Process:
        """
        Build a process running the binary with the given arguments.

        Arguments are passed through as is; a single string is one argument.

        Args:
            arguments: Argument or sequence of arguments

        Returns:
            New Process descriptor
        """
        if isinstance(arguments, str):
            arguments = [arguments]

        return Process([self._binary, *arguments], timeout=self._timeout)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._binary!r}, timeout={self._timeout!r})"
