"""Tests for the YAML configuration loader."""

from pathlib import Path

import pytest

from ottoperf.core.config import DEFAULT_SETTINGS, ConfigError, ConfigLoader, merge_dicts

PROJECT_ROOT = Path(__file__).parents[2]


class TestConfigLoader:
    """Test loading and accessing configuration."""

    def test_defaults_are_copied(self) -> None:
        """Test modifying a default loader leaves the built-in settings alone."""
        config = ConfigLoader.defaults()
        config.merge(ConfigLoader({"display": {"units": "metric"}}))

        assert config.get("display.units") == "metric"
        assert DEFAULT_SETTINGS["display"]["units"] == "imperial"

    def test_dot_notation(self) -> None:
        """Test nested access and defaults for missing keys."""
        config = ConfigLoader({"a": {"b": {"c": 3}}})

        assert config.get("a.b.c") == 3
        assert config.get("a.x", default="missing") == "missing"
        assert config.get("a.b.c.d") is None

    def test_merge_overrides_nested_values(self) -> None:
        """Test merge keeps untouched keys and replaces overridden ones."""
        config = ConfigLoader.defaults()
        config.merge(ConfigLoader({"defaults": {"weight_lbs": 2000}}))

        assert config.get("defaults.weight_lbs") == 2000
        assert config.get("defaults.temperature_c") == 15.0

    def test_merge_dicts_leaves_inputs_untouched(self) -> None:
        """Test the shared merge helper returns a new mapping."""
        base = {"console": {"enabled": True, "level": "WARNING"}, "loggers": {}}
        override = {"console": {"level": "DEBUG"}, "loggers": None}

        merged = merge_dicts(base, override)

        assert merged == {"console": {"enabled": True, "level": "DEBUG"}, "loggers": None}
        assert base["console"]["level"] == "WARNING"
        assert base["loggers"] == {}

    def test_load_missing_file(self, tmp_path: Path) -> None:
        """Test loading a missing file raises ConfigError."""
        with pytest.raises(ConfigError, match="not found"):
            ConfigLoader.load(tmp_path / "nope.yaml")

    def test_load_empty_file(self, tmp_path: Path) -> None:
        """Test an empty file loads as an empty configuration."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert ConfigLoader.load(path).get("display.units", default="imperial") == "imperial"

    def test_load_non_mapping(self, tmp_path: Path) -> None:
        """Test a YAML list at the root is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")

        with pytest.raises(ConfigError, match="mapping"):
            ConfigLoader.load(path)

    def test_load_invalid_yaml(self, tmp_path: Path) -> None:
        """Test malformed YAML is wrapped in ConfigError."""
        path = tmp_path / "bad.yaml"
        path.write_text("display: [unclosed\n")

        with pytest.raises(ConfigError, match="Failed to load"):
            ConfigLoader.load(path)

    def test_shipped_settings_example(self) -> None:
        """Test the example settings file in config/ loads."""
        config = ConfigLoader.load(PROJECT_ROOT / "config" / "settings.yaml")

        assert config.get("display.units") == "mixed"
        assert config.get("logging.config") == "config/logging.yaml"
