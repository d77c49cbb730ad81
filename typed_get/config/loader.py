"""Configuration loader for typed-get.

This module loads the YAML configuration files shipped next to it (or from
the directory named by TYPED_GET_CONFIG_DIR) and provides a singleton
config object for easy access throughout the package.
"""

import os
from pathlib import Path
from typing import Any, cast

import yaml

from typed_get.logging_config import get_module_logger

CONFIG_DIR_ENV = "TYPED_GET_CONFIG_DIR"

logger = get_module_logger("config")


class Config:
    """Configuration manager that loads and provides access to all config files."""

    config_files = {
        "client": "client_config.yaml",
        "logging": "logging_config.yaml",
    }

    def __init__(self, config_dict: dict[str, Any] | None = None):
        """
        Initialize the configuration manager.

        Args:
            config_dict: Optional dictionary of config values for testing.
                        If provided, config files won't be loaded from disk.
        """
        self._configs: dict[str, Any]
        self._config_dir: Path | None

        if config_dict is not None:
            # Testing mode: use provided config
            self._configs = config_dict
            self._config_dir = None
        else:
            # Normal mode: load from files
            self._configs = {}
            self._config_dir = self._find_config_dir()
            self._load_all_configs()

    def _find_config_dir(self) -> Path:
        """Find the config directory, honouring the environment override."""
        override = os.environ.get(CONFIG_DIR_ENV)
        config_dir = Path(override) if override else Path(__file__).resolve().parent

        if not config_dir.is_dir():
            raise FileNotFoundError(
                f"Config directory not found at {config_dir}. "
                f"Check the {CONFIG_DIR_ENV} environment variable."
            )

        return config_dir

    def _load_all_configs(self):
        """Load all YAML configuration files from the config directory."""
        if self._config_dir is None:
            return

        for key, filename in self.config_files.items():
            config_path = self._config_dir / filename
            if config_path.exists():
                with open(config_path, encoding="utf-8") as f:
                    loaded_config = yaml.safe_load(f)

                # Validate that loaded config is a dictionary
                if not isinstance(loaded_config, dict):
                    logger.warning(
                        f"Config file {filename} must contain a dictionary, "
                        f"got {type(loaded_config).__name__}. Using empty config."
                    )
                    self._configs[key] = {}
                else:
                    self._configs[key] = loaded_config
            else:
                logger.warning(f"Config file {filename} not found at {config_path}")
                self._configs[key] = {}

    def get(self, path: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            path: Dot-separated path to the config value (e.g., "client.timeouts.request")
            default: Default value to return if path is not found

        Returns:
            The configuration value or default if not found

        Example:
            >>> config.get("client.timeouts.request")
            30
            >>> config.get("logging.level")
            "WARNING"
        """
        parts = path.split(".")
        value = self._configs

        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    @property
    def client(self) -> dict[str, Any]:
        """Get client configuration."""
        # Safe cast: _load_all_configs validates all config values are dicts
        return cast(dict[str, Any], self._configs.get("client", {}))

    @property
    def logging(self) -> dict[str, Any]:
        """Get logging configuration."""
        return cast(dict[str, Any], self._configs.get("logging", {}))

    def reload(self):
        """Reload all configuration files."""
        self._configs.clear()
        self._load_all_configs()


# Create a singleton instance
config = Config()
