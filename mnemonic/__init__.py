"""
mnemonic - Docker-style adjective/noun identifiers such as 'amazing_jordan'.
"""

from .config import ConfigManager, GeneratorConfig
from .errors import ConfigError, EmptyWordListError, MnemonicError
from .generator import DEFAULT_SEPARATOR, Generator, generate_mnemonic

__version__ = "0.1.0"

__all__ = [
    "Generator",
    "generate_mnemonic",
    "DEFAULT_SEPARATOR",
    "ConfigManager",
    "GeneratorConfig",
    "MnemonicError",
    "EmptyWordListError",
    "ConfigError",
]
