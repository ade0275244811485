"""
Configuration loader for the mnemonic generator.

Word lists and the separator can be overridden from a YAML file, either at
the top level or under a ``generator:`` key:

    generator:
      separator: "-"
      adjectives: [amazing, legend]
      nouns: [jordan, larry]

Lists left out of the file fall back to the built-in defaults.

YAML reads bare words such as ``yes``, ``no``, ``on`` and ``off`` as
booleans, and digits as numbers; quote them (``adjectives: ["on"]``).
The file must be UTF-8.
"""

import os
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from mnemonic.errors import ConfigError
from mnemonic.generator import DEFAULT_SEPARATOR, Generator, IndexSource
from mnemonic.logger import get_logger
from mnemonic.words import ADJECTIVES, NOUNS

logger = get_logger(__name__)

# Environment variable naming the config file used when no path is given
CONFIG_PATH_ENV = "MNEMONIC_CONFIG"


class GeneratorConfig(BaseModel):
    adjectives: Optional[List[str]] = None
    nouns: Optional[List[str]] = None
    separator: str = DEFAULT_SEPARATOR

    @field_validator("adjectives", "nouns", mode="before")
    @classmethod
    def words_are_strings(cls, value: Any) -> Any:
        if isinstance(value, list):
            for word in value:
                if not isinstance(word, str):
                    raise ValueError(
                        f"word {word!r} is not a string; quote it in YAML (e.g. 'on', 'no', '1')"
                    )
        return value


class ConfigManager:
    """
    Class for managing the generator configuration.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the YAML configuration file. If None, the
                path in ``MNEMONIC_CONFIG`` is used; with neither, the
                built-in defaults apply.
        """
        self.config_path = config_path or os.environ.get(CONFIG_PATH_ENV)
        self._raw: Dict[str, Any] = {}
        self._config = GeneratorConfig()
        self._loaded = False

    def load(self) -> "ConfigManager":
        """
        Load the configuration from the YAML file.

        Returns:
            Self for method chaining.

        Raises:
            ConfigError: If the configuration file cannot be loaded, parsed or validated.
        """
        if not self.config_path:
            self._raw = {}
            self._config = GeneratorConfig()
            self._loaded = True
            return self

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.warning(f"Could not read configuration {self.config_path}: {e}")
            raise ConfigError(f"Failed to load configuration from {self.config_path}: {str(e)}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Configuration in {self.config_path} must be a mapping")

        section = raw.get("generator", raw)
        if section is None:
            section = {}
        try:
            self._config = GeneratorConfig.model_validate(section)
        except ValidationError as e:
            logger.warning(f"Invalid configuration {self.config_path}: {e}")
            raise ConfigError(f"Invalid configuration in {self.config_path}: {str(e)}") from e

        self._raw = raw
        self._loaded = True
        logger.debug(f"Configuration loaded from {self.config_path}")
        return self

    @property
    def config(self) -> GeneratorConfig:
        if not self._loaded:
            self.load()
        return self._config

    @property
    def separator(self) -> str:
        return self.config.separator

    @property
    def adjectives(self) -> List[str]:
        """Configured adjectives, or the built-in ones when not configured."""
        if self.config.adjectives is None:
            return list(ADJECTIVES)
        return self.config.adjectives

    @property
    def nouns(self) -> List[str]:
        """Configured nouns, or the built-in ones when not configured."""
        if self.config.nouns is None:
            return list(NOUNS)
        return self.config.nouns

    def build_generator(self, next_index: Optional[IndexSource] = None) -> Generator:
        """
        Create a generator from the loaded word lists.

        An explicitly empty list in the file is kept as-is; it only fails
        when a mnemonic is generated.
        """
        return Generator.with_words(self.adjectives, self.nouns, next_index)

    def get_raw_config(self) -> Dict[str, Any]:
        if not self._loaded:
            self.load()
        return self._raw
