"""
Tests for process builder factories.
"""

import pytest

from binary_driver.executor import Process, ProcessBuilderFactory
from binary_driver.testing import ShellEscapingProcessBuilderFactory
from binary_driver.utils import InvalidArgumentError


class TestProcessBuilderFactory:
    """Test ProcessBuilderFactory."""

    def test_binary(self, sh_binary):
        factory = ProcessBuilderFactory(sh_binary)

        assert factory.binary == sh_binary
        assert factory.timeout is None

    def test_invalid_binary(self, tmp_path):
        """Test that a missing or non-executable binary is refused."""
        with pytest.raises(InvalidArgumentError, match="not an executable binary"):
            ProcessBuilderFactory("/zz/path/to/unexisting/command")

        plain = tmp_path / "plain"
        plain.write_text("data")
        with pytest.raises(InvalidArgumentError):
            ProcessBuilderFactory(plain)

        with pytest.raises(ValueError):
            ProcessBuilderFactory(tmp_path)

    def test_create_with_list(self, sh_binary):
        factory = ProcessBuilderFactory(sh_binary)

        process = factory.create(["-c", "echo hi"])

        assert isinstance(process, Process)
        assert process.command == (sh_binary, "-c", "echo hi")

    def test_create_with_string(self, sh_binary):
        """Test that a single string is one argument, never split."""
        factory = ProcessBuilderFactory(sh_binary)

        process = factory.create("-a -b")

        assert process.command == (sh_binary, "-a -b")

    def test_create_without_arguments(self, sh_binary):
        process = ProcessBuilderFactory(sh_binary).create()
        assert process.command == (sh_binary,)

    def test_timeout_applied_to_every_process(self, sh_binary):
        factory = ProcessBuilderFactory(sh_binary)
        factory.timeout = 42

        first = factory.create(["-a"])
        second = factory.create(["-b"])

        assert first.timeout == 42
        assert second.timeout == 42
        assert first is not second

    def test_timeout_change_does_not_affect_built_processes(self, sh_binary):
        factory = ProcessBuilderFactory(sh_binary)
        factory.timeout = 10
        process = factory.create()

        factory.timeout = 20

        assert process.timeout == 10
        assert factory.create().timeout == 20

    def test_created_process_runs(self, executable_script):
        factory = ProcessBuilderFactory(executable_script)

        process = factory.create(["one", "two words"])
        process.run()

        assert process.output == "one\ntwo words\n"


class TestShellEscapingProcessBuilderFactory:
    """Test the shell escaping factory used in tests."""

    def test_create_wraps_in_shell(self, executable_script):
        factory = ShellEscapingProcessBuilderFactory(executable_script)
        factory.timeout = 5

        process = factory.create(["it's", "$HOME"])

        assert process.command[:2] == ("/bin/sh", "-c")
        assert process.timeout == 5

    def test_arguments_survive_the_shell(self, executable_script):
        """Test that quoting keeps awkward arguments intact."""
        factory = ShellEscapingProcessBuilderFactory(executable_script)

        process = factory.create(["it's", "$HOME", "a b"])
        process.run()

        assert process.output.splitlines() == ["it's", "$HOME", "a b"]
