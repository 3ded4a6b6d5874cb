"""
Structured Logging for mimeconf.

All modules should import get_logger() from here rather than using
Python's logging directly:

    from mimeconf.core.logging import get_logger
    logger = get_logger(__name__)

StructuredLogger
----------------
Appends keyword arguments to the message as key=value fields:

    logger.debug("Registry built", extensions=1024, conflicts=3)

Console output is written to stderr. Standard output is reserved for
the generated configuration. User-facing reports (the -v conflict
list, the missing-database warning) are printed by the CLI directly
and do not depend on the log level.
"""

import logging
import sys
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "%(levelname)s: %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    console: bool = True


class StructuredLogger:
    """
    Structured logger with key=value fields.

    Provides consistent logging across the application.
    """

    def __init__(self, name: str, config: Optional[LogConfig] = None) -> None:
        self.logger = logging.getLogger(name)
        self.config = config or _ConfigHolder.get_config()
        self._setup_logger()

    def _setup_logger(self) -> None:
        """Configure the logger."""
        level = getattr(logging, self.config.level.upper(), logging.WARNING)
        self.logger.setLevel(level)

        # Remove existing handlers
        self.logger.handlers.clear()

        formatter = logging.Formatter(
            self.config.format,
            datefmt=self.config.date_format,
        )

        if self.config.console:
            try:
                from rich.console import Console
                from rich.logging import RichHandler

                console_handler = RichHandler(
                    console=Console(stderr=True),
                    show_time=False,
                    show_path=False,
                    markup=False,
                )
                console_handler.setLevel(level)
            except ImportError:
                console_handler = logging.StreamHandler(sys.stderr)
                console_handler.setLevel(level)
                console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

    def _format_message(self, message: str, **kwargs: Any) -> str:
        """Format message with extra key=value fields."""
        if kwargs:
            field_str = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            return f"{message} | {field_str}"
        return message

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self.logger.debug(self._format_message(message, **kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        self.logger.info(self._format_message(message, **kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self.logger.warning(self._format_message(message, **kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        self.logger.error(self._format_message(message, **kwargs))


# Module-level logger factory
_loggers: dict[str, StructuredLogger] = {}


def get_logger(name: str, config: Optional[LogConfig] = None) -> StructuredLogger:
    """
    Get or create a structured logger.

    Args:
        name: Logger name (typically __name__).
        config: Optional logging configuration.

    Returns:
        Configured StructuredLogger instance.
    """
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name, config)
    return _loggers[name]


def configure_logging(
    level: str = "WARNING",
    console: bool = True,
) -> None:
    """
    Configure global logging settings.

    Loggers that were already handed out are reconfigured in place so
    that module-level loggers pick up the new level.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        console: Whether to log to console.
    """
    config = LogConfig(
        level=level,
        console=console,
    )

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    _ConfigHolder.set_config(config)

    for structured in _loggers.values():
        structured.config = config
        structured._setup_logger()


class _ConfigHolder:
    """Holds default logging configuration."""

    _config: LogConfig = LogConfig()

    @classmethod
    def get_config(cls) -> LogConfig:
        """Get the default config."""
        return cls._config

    @classmethod
    def set_config(cls, config: LogConfig) -> None:
        """Set the default config."""
        cls._config = config
