"""
Mnemonic Logger Module

Logging for the mnemonic package:
- Configurable log levels
- Text (simple or detailed) or JSON output
- Console output with an optional log file

Until logging is configured the package logger only carries a
``NullHandler``, so importing the library writes nothing.
"""

import json
import logging
import sys
import threading
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional, TextIO, Union

ROOT_LOGGER_NAME = "mnemonic"


class LogLevel(Enum):
    """Enumeration for log levels."""

    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    NOTSET = logging.NOTSET


class LogFormat(Enum):
    """Enumeration for log output formats."""

    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


class JSONFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False)


class MnemonicLoggerConfig:
    """Configuration class for the mnemonic logger."""

    def __init__(
        self,
        level: Union[LogLevel, str, int] = LogLevel.WARNING,
        format_type: LogFormat = LogFormat.DETAILED,
        log_file: Optional[str] = None,
        stream: Optional[TextIO] = None,
    ):
        """Initialize logger configuration.

        Args:
            level: Logging level (LogLevel enum, string, or int)
            format_type: Format type for log messages
            log_file: Optional path to log file for additional file output
            stream: Console stream. If None, stdout at the time handlers are built.
        """
        self.level = self._normalize_level(level)
        self.format_type = format_type
        self.log_file = log_file
        self.stream = stream

    def _normalize_level(self, level: Union[LogLevel, str, int]) -> int:
        """Normalize log level to integer."""
        if isinstance(level, LogLevel):
            return level.value
        if isinstance(level, str):
            return getattr(logging, level.upper(), logging.WARNING)
        if isinstance(level, int):
            return level
        raise ValueError(f"Invalid log level: {level}")


class MnemonicLogger:
    """Process-wide owner of the ``mnemonic`` logger hierarchy."""

    _instance = None
    _lock = threading.Lock()

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, config: Optional[MnemonicLoggerConfig] = None):
        # Already set up: only a new config changes anything
        if hasattr(self, "_initialized"):
            if config is not None:
                self.update_config(config)
            return

        self.logger = logging.getLogger(ROOT_LOGGER_NAME)
        self.logger.propagate = False
        self.config: Optional[MnemonicLoggerConfig] = None
        if config is None:
            self._setup_null_logger()
        else:
            self.update_config(config)
        self._initialized = True

    def _clear_handlers(self):
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

    def _setup_null_logger(self):
        self._clear_handlers()
        self.logger.setLevel(logging.WARNING)
        self.logger.addHandler(logging.NullHandler())

    def _setup_logger(self):
        """Attach console and file handlers to the package logger."""
        self._clear_handlers()
        self.logger.setLevel(self.config.level)

        formatter = self._create_formatter()
        self.logger.addHandler(self._create_console_handler(formatter))

        if self.config.log_file:
            self.logger.addHandler(self._create_file_handler(formatter))

    def _create_formatter(self) -> logging.Formatter:
        if self.config.format_type == LogFormat.JSON:
            return JSONFormatter()

        formats = {
            LogFormat.SIMPLE: "%(levelname)s - %(message)s",
            LogFormat.DETAILED: (
                "%(asctime)s - %(name)s - %(levelname)s - "
                "%(module)s:%(funcName)s:%(lineno)d - %(message)s"
            ),
        }
        return logging.Formatter(formats[self.config.format_type])

    def _create_console_handler(self, formatter: logging.Formatter) -> logging.Handler:
        handler = logging.StreamHandler(self.config.stream or sys.stdout)
        handler.setFormatter(formatter)
        return handler

    def _create_file_handler(self, formatter: logging.Formatter) -> logging.Handler:
        if self.config.log_file is None:
            raise ValueError("log_file cannot be None when creating file handler")

        log_path = Path(self.config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(self.config.log_file, encoding="utf-8")
        handler.setFormatter(formatter)
        return handler

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        """Get a logger in the ``mnemonic`` namespace.

        Child loggers carry no handlers of their own and propagate up to the
        package logger, so reconfiguring the package logger reconfigures
        every child.

        Args:
            name: Logger name. Module names already under ``mnemonic`` are
                used as-is. If None, returns the package logger.

        Returns:
            Logger instance.
        """
        if name is None or name == ROOT_LOGGER_NAME:
            return self.logger

        if not name.startswith(f"{ROOT_LOGGER_NAME}."):
            name = f"{ROOT_LOGGER_NAME}.{name}"

        child_logger = logging.getLogger(name)
        child_logger.setLevel(logging.NOTSET)
        child_logger.propagate = True
        return child_logger

    def update_config(self, new_config: MnemonicLoggerConfig):
        self.config = new_config
        self._setup_logger()

    def reset(self):
        """Drop all output handlers and go back to the silent library default."""
        self.config = None
        self._setup_null_logger()


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name. If None, returns the package logger.

    Returns:
        Logger instance.
    """
    return MnemonicLogger().get_logger(name)


def configure_logging(config: MnemonicLoggerConfig):
    """Apply ``config`` to the package logger."""
    MnemonicLogger().update_config(config)


def reset_logging():
    """Return the package logger to its unconfigured, silent state."""
    MnemonicLogger().reset()


def setup_default_logging(
    level: Union[LogLevel, str, int] = LogLevel.WARNING,
    log_file: Optional[str] = None,
    format_type: LogFormat = LogFormat.DETAILED,
    stream: Optional[TextIO] = None,
):
    """Set up default logging configuration.

    Args:
        level: Logging level
        log_file: Optional path to log file
        format_type: Format type for log messages
        stream: Console stream, stdout when None
    """
    config = MnemonicLoggerConfig(
        level=level,
        log_file=log_file,
        format_type=format_type,
        stream=stream,
    )
    configure_logging(config)
