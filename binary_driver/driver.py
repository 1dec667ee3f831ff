"""
Binary driver façade.

A BinaryDriver binds a resolved executable to a configuration, a process
builder factory, a process runner and a listener registry. Drivers for a
specific tool subclass it and set ``name``:

    class FFmpeg(BinaryDriver):
        name = "ffmpeg"

    ffmpeg = FFmpeg.load(["ffmpeg", "/opt/ffmpeg/bin/ffmpeg"], configuration={"timeout": 30})
    ffmpeg.listen(DebugListener())
    ffmpeg.on("debug", print)
    output = ffmpeg.command(["-version"])
"""

import logging
from collections.abc import Mapping
from typing import Iterable, Optional, Union

from .config import Configuration, DriverSettings
from .executor import ProcessBuilderFactory, ProcessRunner, find_executable
from .executor.builder import Arguments
from .executor.finder import Candidates
from .listeners import EventEmitter, Listener, Listeners
from .utils import InvalidArgumentError, get_logger

logger = get_logger(__name__)

ConfigurationLike = Union[Configuration, Mapping]
ListenersLike = Union[Listener, Iterable[Listener], None]


class BinaryDriver(EventEmitter):
    """Runs commands of one external binary and re-emits listener events."""

    name = "binary-driver"

    def __init__(
        self,
        factory: ProcessBuilderFactory,
        logger: Optional[logging.Logger] = None,
        configuration: Optional[ConfigurationLike] = None,
    ):
        """
        Initialize driver.

        Args:
            factory: Process builder factory bound to the resolved binary
            logger: Logger handed to the process runner
            configuration: Options as a Configuration or a plain mapping

        Raises:
            ConfigurationError: If a known option has an invalid value
        """
        super().__init__()
        self._factory = factory
        self._configuration = self._coerce_configuration(configuration)
        self._runner = ProcessRunner(logger, self.name)
        self._listeners = Listeners()
        self._apply_process_configuration()

    @classmethod
    def load(
        cls,
        binaries: Candidates,
        logger: Optional[logging.Logger] = None,
        configuration: Optional[ConfigurationLike] = None,
    ) -> "BinaryDriver":
        """
        Resolve a binary and build a driver for it.

        Args:
            binaries: Binary name/path or a sequence of them, tried in order
            logger: Logger handed to the process runner
            configuration: Options as a Configuration or a plain mapping

        Returns:
            Driver bound to the first binary found

        Raises:
            ExecutableNotFoundError: If no candidate resolves
        """
        binary = find_executable(binaries)
        return cls(ProcessBuilderFactory(binary), logger, configuration)

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @configuration.setter
    def configuration(self, configuration: ConfigurationLike) -> None:
        self._configuration = self._coerce_configuration(configuration)
        self._apply_process_configuration()

    @property
    def process_builder_factory(self) -> ProcessBuilderFactory:
        return self._factory

    @process_builder_factory.setter
    def process_builder_factory(self, factory: ProcessBuilderFactory) -> None:
        self._factory = factory
        self._apply_process_configuration()

    @property
    def process_runner(self) -> ProcessRunner:
        return self._runner

    @process_runner.setter
    def process_runner(self, runner: ProcessRunner) -> None:
        self._runner = runner

    def listen(self, listener: Listener) -> "BinaryDriver":
        """
        Register a listener for every subsequent command.

        Returns:
            Self for chaining
        """
        self._listeners.register(listener, self)
        return self

    def unlisten(self, listener: Listener) -> "BinaryDriver":
        """
        Unregister a listener registered with listen().

        Returns:
            Self for chaining
        """
        self._listeners.unregister(listener, self)
        return self

    def command(
        self,
        arguments: Arguments,
        bypass_errors: bool = False,
        listeners: ListenersLike = None,
    ) -> str:
        """
        Run the binary with the given arguments.

        Args:
            arguments: Argument or sequence of arguments, passed as is
            bypass_errors: Return output instead of raising on non-zero exit
            listeners: Listener(s) active for this command only

        Returns:
            Captured stdout

        Raises:
            ProcessExecutionError: If the binary cannot be started, or exits
                with a non-zero status and errors are not bypassed
            ProcessTimeoutError: If the command exceeds the configured timeout
        """
        if isinstance(arguments, str):
            arguments = [arguments]

        process = self._factory.create(list(arguments))

        with self._listeners.temporary(self._normalize_listeners(listeners), self) as active:
            return self._runner.run(process, tuple(active), bypass_errors)

    def _apply_process_configuration(self) -> None:
        # Keep the factory timeout in sync with the configuration
        if self._configuration.has("timeout"):
            self._factory.timeout = DriverSettings.from_configuration(self._configuration).timeout

    @staticmethod
    def _coerce_configuration(configuration: Optional[ConfigurationLike]) -> Configuration:
        if configuration is None:
            return Configuration()
        if isinstance(configuration, Configuration):
            return configuration
        if isinstance(configuration, Mapping):
            return Configuration(configuration)
        raise InvalidArgumentError(
            f"Configuration must be a mapping or a Configuration, got {type(configuration).__name__}"
        )

    @staticmethod
    def _normalize_listeners(listeners: ListenersLike) -> list[Listener]:
        if listeners is None:
            return []
        if isinstance(listeners, Listener):
            return [listeners]
        return list(listeners)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._factory.binary!r})"


def load(
    binaries: Candidates,
    logger: Optional[logging.Logger] = None,
    configuration: Optional[ConfigurationLike] = None,
) -> BinaryDriver:
    """
    Resolve a binary and build a BinaryDriver for it.

    Raises:
        ExecutableNotFoundError: If no candidate resolves
    """
    return BinaryDriver.load(binaries, logger, configuration)
