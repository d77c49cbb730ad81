"""
Logging configuration for typed-get

Provides the package logger with console output and optional file output.
Libraries using typed-get can skip this entirely and configure the
"typed_get" logger themselves.
"""

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = "typed_get"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class TypedGetLogger:
    """Centralized logger for the package"""

    def __init__(
        self,
        name: str = PACKAGE_LOGGER,
        log_file: Path | None = None,
        console_output: bool = True,
        level: str = "WARNING",
        fmt: str = DEFAULT_FORMAT,
        datefmt: str = "%Y-%m-%d %H:%M:%S",
    ):
        """
        Initialize logger

        Args:
            name: Logger name (usually "typed_get")
            log_file: Path to log file (optional)
            console_output: Whether to log to stderr
            level: Console log level name
            fmt: Log record format
            datefmt: Timestamp format
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)

        # Clear existing handlers
        self.logger.handlers = []

        formatter = logging.Formatter(fmt, datefmt=datefmt)

        # Console handler (if enabled)
        if console_output:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(getattr(logging, level.upper(), logging.WARNING))
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # File handler (if path provided) always records everything
        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def get_logger(self) -> logging.Logger:
        """Get the underlying logger instance"""
        return self.logger


def setup_logging(
    log_file: Path | None = None, verbose: bool = False, config_obj=None
) -> logging.Logger:
    """
    Configure the typed_get logger from configuration

    Args:
        log_file: Optional path of a debug log file
        verbose: Log DEBUG records to the console regardless of config
        config_obj: Config object (optional, uses global config if None)

    Returns:
        Configured logger instance
    """
    if config_obj is None:
        from .config import config as config_obj

    level = "DEBUG" if verbose else config_obj.get("logging.level", "WARNING")

    logger_wrapper = TypedGetLogger(
        log_file=log_file,
        console_output=True,
        level=level,
        fmt=config_obj.get("logging.format", DEFAULT_FORMAT),
        datefmt=config_obj.get("logging.datefmt", "%Y-%m-%d %H:%M:%S"),
    )

    return logger_wrapper.get_logger()


def get_module_logger(module_name: str) -> logging.Logger:
    """
    Get logger for a specific module

    Args:
        module_name: Name of the module (e.g., 'client', 'decoding')

    Returns:
        Logger instance
    """
    return logging.getLogger(f"{PACKAGE_LOGGER}.{module_name}")
