"""Configuration module for loading and accessing client settings."""

from typed_get.exceptions import ConfigurationError

from .loader import Config, config

__all__ = ["Config", "ConfigurationError", "config"]
