"""Tests for configuration loading and validation."""

import os

import pytest

from mojo_spy.config import DEFAULT_CONFIG, SpyConfig, load_config, load_config_from_dict
from mojo_spy.exceptions import ConfigFileNotFoundError, ConfigValidationError


class TestLoadConfigFromDict:
    """Tests for dict-based configuration."""

    def test_defaults(self):
        config = load_config_from_dict({})
        assert config.version == "1.0"
        assert config.interception.thread_safe is False
        assert config.interception.log_calls is False
        assert config.registry.retire_on_exit is True

    def test_default_dict_matches_model(self):
        assert load_config_from_dict(DEFAULT_CONFIG) == SpyConfig()

    def test_partial_override_is_merged(self):
        config = load_config_from_dict({"interception": {"thread_safe": True}})
        assert config.interception.thread_safe is True
        assert config.interception.log_calls is False

    def test_unknown_key_rejected(self):
        with pytest.raises(ConfigValidationError):
            load_config_from_dict({"interception": {"record_returns": True}})

    def test_unsupported_version_rejected(self):
        with pytest.raises(ConfigValidationError):
            load_config_from_dict({"version": "2.0"})

    def test_numeric_version_accepted(self):
        assert load_config_from_dict({"version": 1.0}).version == "1.0"


class TestLoadConfig:
    """Tests for YAML file configuration."""

    def test_missing_file(self, temp_dir):
        with pytest.raises(ConfigFileNotFoundError):
            load_config(os.path.join(temp_dir, "absent.yaml"))

    def test_loads_yaml(self, temp_dir):
        path = os.path.join(temp_dir, "spy_config.yaml")
        with open(path, "w") as f:
            f.write("version: 1.0\ninterception:\n  log_calls: true\n")
        config = load_config(path)
        assert config.interception.log_calls is True
        assert config.interception.thread_safe is False

    def test_empty_file_uses_defaults(self, temp_dir):
        path = os.path.join(temp_dir, "empty.yaml")
        open(path, "w").close()
        assert load_config(path) == SpyConfig()

    def test_invalid_yaml(self, temp_dir):
        path = os.path.join(temp_dir, "bad.yaml")
        with open(path, "w") as f:
            f.write("interception: [unclosed\n")
        with pytest.raises(ConfigValidationError):
            load_config(path)

    def test_missing_file_reports_path(self, temp_dir):
        path = os.path.join(temp_dir, "absent.yaml")
        with pytest.raises(ConfigFileNotFoundError) as exc_info:
            load_config(path)
        assert exc_info.value.details == {"path": path}

    def test_non_mapping_yaml(self, temp_dir):
        path = os.path.join(temp_dir, "list.yaml")
        with open(path, "w") as f:
            f.write("- a\n- b\n")
        with pytest.raises(ConfigValidationError):
            load_config(path)
