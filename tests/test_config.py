"""
Tests for configuration system.
"""

import pytest

from binary_driver.config import Configuration, DriverSettings
from binary_driver.utils import ConfigurationError


class TestConfiguration:
    """Test the Configuration store."""

    def test_empty(self):
        """Test creating an empty configuration."""
        config = Configuration()

        assert len(config) == 0
        assert config.all() == {}
        assert config.get("timeout") is None

    def test_initial_data_is_copied(self):
        """Test that the initial mapping is not shared."""
        data = {"timeout": 200}
        config = Configuration(data)
        config.set("threads", 4)

        assert data == {"timeout": 200}
        assert config.all() == {"timeout": 200, "threads": 4}

    def test_get_with_default(self):
        config = Configuration({"timeout": 200})

        assert config.get("timeout") == 200
        assert config.get("threads", 8) == 8

    def test_set_is_fluent(self):
        """Test that set() returns the configuration itself."""
        config = Configuration()

        assert config.set("a", 1).set("b", 2) is config
        assert config.all() == {"a": 1, "b": 2}

    def test_has(self):
        config = Configuration({"timeout": None})

        assert config.has("timeout")
        assert not config.has("threads")
        assert "timeout" in config

    def test_remove(self):
        """Test removing returns the previous value or the default."""
        config = Configuration({"timeout": 200})

        assert config.remove("timeout") == 200
        assert not config.has("timeout")
        assert config.remove("timeout") is None
        assert config.remove("timeout", "fallback") == "fallback"

    def test_all_is_a_snapshot(self):
        config = Configuration({"timeout": 200})
        snapshot = config.all()
        snapshot["timeout"] = 1

        assert config.get("timeout") == 200

    def test_iteration_follows_insertion_order(self):
        config = Configuration()
        config.set("z", 1).set("a", 2).set("m", 3)

        assert list(config) == ["z", "a", "m"]

    def test_mapping_access(self):
        """Test item access, assignment and deletion."""
        config = Configuration()
        config["timeout"] = 42

        assert config["timeout"] == 42
        del config["timeout"]
        with pytest.raises(KeyError):
            config["timeout"]

    def test_values_are_not_validated(self):
        config = Configuration().set("timeout", "not a number").set("hook", object)

        assert config.get("timeout") == "not a number"
        assert config.get("hook") is object


class TestConfigurationFromFile:
    """Test loading configuration from YAML."""

    def test_load(self, tmp_path):
        path = tmp_path / "driver.yaml"
        path.write_text("timeout: 60\nthreads: 4\n")

        config = Configuration.from_file(path)

        assert config.all() == {"timeout": 60, "threads": 4}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "driver.yaml"
        path.write_text("")

        assert Configuration.from_file(path).all() == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            Configuration.from_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "driver.yaml"
        path.write_text("timeout: [60\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            Configuration.from_file(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "driver.yaml"
        path.write_text("- timeout\n- threads\n")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            Configuration.from_file(path)


class TestDriverSettings:
    """Test DriverSettings validation."""

    def test_defaults(self):
        settings = DriverSettings.from_configuration(Configuration())
        assert settings.timeout is None

    def test_timeout(self):
        settings = DriverSettings.from_configuration(Configuration({"timeout": 42}))
        assert settings.timeout == 42

    def test_negative_timeout(self):
        with pytest.raises(ConfigurationError, match="Invalid driver configuration"):
            DriverSettings.from_configuration(Configuration({"timeout": -1}))

    def test_non_numeric_timeout(self):
        with pytest.raises(ConfigurationError):
            DriverSettings.from_configuration(Configuration({"timeout": "soon"}))
