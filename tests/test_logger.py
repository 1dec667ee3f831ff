"""
Tests for logging setup.
"""

import logging
from io import StringIO

from rich.console import Console
from rich.logging import RichHandler

from binary_driver.utils import get_logger, setup_logger


class TestLogger:
    """Test logger helpers."""

    def test_get_logger_name(self):
        logger = get_logger("binary_driver.executor.runner")

        assert logger.name == "binary_driver.executor.runner"

    def test_setup_logger_installs_rich_handler(self):
        console = Console(file=StringIO(), width=200)
        logger = setup_logger(level="WARNING", console=console)

        assert logger.name == "binary_driver"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.propagate is False

    def test_setup_logger_is_repeatable(self):
        console = Console(file=StringIO(), width=200)
        setup_logger(console=console)
        logger = setup_logger(console=console)

        assert len(logger.handlers) == 1

    def test_verbose_enables_debug(self):
        logger = setup_logger(verbose=True, console=Console(file=StringIO()))

        assert logger.level == logging.DEBUG

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "driver.log"
        logger = setup_logger(log_file=log_file, console=Console(file=StringIO()))

        get_logger("binary_driver.test").info("running [OUT] ffmpeg -i in.mp4")
        for handler in logger.handlers:
            handler.flush()

        assert "running [OUT] ffmpeg -i in.mp4" in log_file.read_text()

    def test_command_lines_with_brackets_render(self):
        stream = StringIO()
        setup_logger(console=Console(file=stream, width=200))

        get_logger("binary_driver.test").warning("[ERROR] broken [/not-a-tag]")

        assert "[ERROR] broken [/not-a-tag]" in stream.getvalue()

    def teardown_method(self):
        logger = logging.getLogger("binary_driver")
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.propagate = True
