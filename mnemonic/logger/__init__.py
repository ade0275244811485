"""
Mnemonic Logger Package

Logging for the mnemonic package.
"""

from .mnemonic_logger import (
    JSONFormatter,
    LogFormat,
    LogLevel,
    MnemonicLogger,
    MnemonicLoggerConfig,
    configure_logging,
    get_logger,
    reset_logging,
    setup_default_logging,
)

__all__ = [
    "LogLevel",
    "LogFormat",
    "JSONFormatter",
    "MnemonicLoggerConfig",
    "MnemonicLogger",
    "setup_default_logging",
    "get_logger",
    "configure_logging",
    "reset_logging",
]
