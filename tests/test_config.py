"""
Tests for the Config loader

These tests verify:
1. Config can be instantiated with test data (dependency injection)
2. Config.get() works with dot notation
3. Config handles missing keys gracefully
4. YAML files are loaded from the package or from TYPED_GET_CONFIG_DIR
"""

from typing import Any

import pytest

from typed_get.config.loader import CONFIG_DIR_ENV, Config


class TestConfigDependencyInjection:
    """Test that Config supports dependency injection for testing"""

    def test_config_with_test_dict(self):
        """Should accept config dictionary for testing"""
        test_config = {
            "client": {"timeouts": {"request": 30}},
            "logging": {"level": "DEBUG"},
        }

        config = Config(test_config)

        assert config.get("client.timeouts.request") == 30
        assert config.get("logging.level") == "DEBUG"
        assert config._config_dir is None

    def test_config_get_with_dot_notation(self):
        """Should navigate nested config with dot notation"""
        test_config = {"level1": {"level2": {"level3": {"value": "deep_value"}}}}

        config = Config(test_config)

        assert config.get("level1.level2.level3.value") == "deep_value"

    def test_config_get_returns_default_when_not_found(self):
        """Should return default value for missing keys"""
        test_config = {"existing": {"key": "value"}}

        config = Config(test_config)

        assert config.get("non.existent.key", "default") == "default"
        assert config.get("existing.missing", 42) == 42
        assert config.get("missing") is None

    def test_config_get_handles_non_dict_values(self):
        """Should return default if path goes through non-dict value"""
        test_config = {"string_value": "just a string", "number": 42}

        config = Config(test_config)

        assert config.get("string_value.key", "default") == "default"
        assert config.get("number.nested", "default") == "default"

    def test_config_property_accessors(self):
        """Should provide property accessors for config sections"""
        config = Config({"client": {"key": "client_value"}, "logging": {"key": "logging_value"}})

        assert config.client == {"key": "client_value"}
        assert config.logging == {"key": "logging_value"}

    def test_config_property_returns_empty_dict_when_missing(self):
        """Should return empty dict for missing config sections"""
        test_config: dict[str, Any] = {}

        config = Config(test_config)

        assert config.client == {}
        assert config.logging == {}


class TestConfigFiles:
    """Test loading YAML files from disk"""

    def test_packaged_defaults(self, monkeypatch):
        """Should load the YAML files shipped with the package"""
        monkeypatch.delenv(CONFIG_DIR_ENV, raising=False)

        config = Config()

        assert config.get("client.timeouts.request") == 30
        assert config.get("client.headers.Accept") == "application/json"
        assert config.get("client.validation.acceptable_status") == [200, 299]
        assert config.get("client.base_url") is None
        assert config.get("logging.level") == "WARNING"

    def test_config_dir_override(self, tmp_path, monkeypatch):
        """Should load files from TYPED_GET_CONFIG_DIR when set"""
        (tmp_path / "client_config.yaml").write_text(
            "base_url: https://api.github.com\ntimeouts:\n  request: 7\n", encoding="utf-8"
        )
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))

        config = Config()

        assert config.get("client.base_url") == "https://api.github.com"
        assert config.get("client.timeouts.request") == 7
        # logging_config.yaml is absent
        assert config.logging == {}

    def test_non_dict_file_uses_empty_section(self, tmp_path, monkeypatch, caplog):
        """Should warn and fall back to an empty section for non-dict YAML"""
        (tmp_path / "client_config.yaml").write_text("- just\n- a list\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))

        config = Config()

        assert config.client == {}
        assert "must contain a dictionary" in caplog.text

    def test_missing_config_dir(self, tmp_path, monkeypatch):
        """Should raise FileNotFoundError for a missing directory"""
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path / "nope"))

        with pytest.raises(FileNotFoundError):
            Config()

    def test_reload(self, tmp_path, monkeypatch):
        """Should pick up changed files on reload"""
        config_file = tmp_path / "client_config.yaml"
        config_file.write_text("timeouts:\n  request: 1\n", encoding="utf-8")
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
        config = Config()

        config_file.write_text("timeouts:\n  request: 2\n", encoding="utf-8")
        config.reload()

        assert config.get("client.timeouts.request") == 2
