#!/usr/bin/env python3
"""
Unit tests for the configuration module.
"""

import os
import tempfile

import pytest

from mnemonic.config import CONFIG_PATH_ENV, ConfigManager, GeneratorConfig
from mnemonic.errors import ConfigError, EmptyWordListError
from mnemonic.words import ADJECTIVES, NOUNS


def write_config(content):
    with tempfile.NamedTemporaryFile(mode="w+", suffix=".yml", delete=False) as f:
        f.write(content)
        return f.name


class TestGeneratorConfig:
    """Test cases for the GeneratorConfig model."""

    def test_defaults(self):
        config = GeneratorConfig()
        assert config.adjectives is None
        assert config.nouns is None
        assert config.separator == "_"

    def test_values(self):
        config = GeneratorConfig(adjectives=["amazing"], nouns=["jordan"], separator="-")
        assert config.adjectives == ["amazing"]
        assert config.nouns == ["jordan"]
        assert config.separator == "-"


class TestConfigManager:
    """Test cases for the ConfigManager class."""

    @pytest.fixture
    def sample_config(self):
        """Fixture to create a temporary config file."""
        path = write_config(
            """
generator:
  separator: "-"
  adjectives: ["amazing", "legend"]
  nouns: ["jordan", "larry"]
"""
        )
        yield path
        os.unlink(path)

    @pytest.fixture
    def no_env(self, monkeypatch):
        monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)

    def test_load(self, sample_config):
        """Test loading configuration from file."""
        manager = ConfigManager(sample_config).load()
        assert manager.separator == "-"
        assert manager.adjectives == ["amazing", "legend"]
        assert manager.nouns == ["jordan", "larry"]

    def test_lazy_load(self, sample_config):
        """Test that properties load the file on first access."""
        manager = ConfigManager(sample_config)
        assert manager.separator == "-"

    def test_build_generator(self, sample_config):
        manager = ConfigManager(sample_config)
        gen = manager.build_generator(next_index=lambda bound: 0)
        assert gen.generate_with_separator(manager.separator) == "amazing-jordan"

    def test_top_level_mapping(self):
        path = write_config("nouns: [jordan]\n")
        try:
            manager = ConfigManager(path)
            assert manager.nouns == ["jordan"]
            assert manager.adjectives == list(ADJECTIVES)
            assert manager.separator == "_"
        finally:
            os.unlink(path)

    def test_empty_file_uses_defaults(self):
        path = write_config("")
        try:
            manager = ConfigManager(path).load()
            assert manager.adjectives == list(ADJECTIVES)
            assert manager.nouns == list(NOUNS)
            assert manager.get_raw_config() == {}
        finally:
            os.unlink(path)

    def test_no_path_uses_defaults(self, no_env):
        manager = ConfigManager()
        assert manager.config_path is None
        gen = manager.build_generator()
        assert gen.adjectives == ADJECTIVES
        assert gen.nouns == NOUNS

    def test_path_from_environment(self, sample_config, monkeypatch):
        monkeypatch.setenv(CONFIG_PATH_ENV, sample_config)
        manager = ConfigManager()
        assert manager.config_path == sample_config
        assert manager.separator == "-"

    def test_explicit_empty_list_kept(self):
        """Test that an empty list is kept and only fails on generation."""
        path = write_config("generator:\n  adjectives: []\n")
        try:
            gen = ConfigManager(path).build_generator()
            assert gen.adjectives == ()
            with pytest.raises(EmptyWordListError):
                gen.generate()
        finally:
            os.unlink(path)

    def test_missing_file(self):
        manager = ConfigManager("/nonexistent/path/to/mnemonic.yml")
        with pytest.raises(ConfigError, match="Failed to load configuration"):
            manager.load()

    def test_invalid_yaml(self):
        path = write_config("generator: [unclosed\n")
        try:
            with pytest.raises(ConfigError):
                ConfigManager(path).load()
        finally:
            os.unlink(path)

    def test_not_a_mapping(self):
        path = write_config("- amazing\n- jordan\n")
        try:
            with pytest.raises(ConfigError, match="must be a mapping"):
                ConfigManager(path).load()
        finally:
            os.unlink(path)

    def test_invalid_values(self):
        path = write_config("generator:\n  nouns: 42\n")
        try:
            with pytest.raises(ConfigError, match="Invalid configuration"):
                ConfigManager(path).load()
        finally:
            os.unlink(path)

    def test_invalid_utf8(self, tmp_path):
        """Test that undecodable bytes surface as a ConfigError."""
        path = tmp_path / "latin.yml"
        path.write_bytes(b"nouns: [\xff\xfe]\n")
        with pytest.raises(ConfigError, match="Failed to load configuration"):
            ConfigManager(str(path)).load()

    def test_unquoted_yaml_boolean_word(self):
        """Test that a word YAML reads as a boolean gets a quoting hint."""
        path = write_config("adjectives: [on, amazing]\n")
        try:
            with pytest.raises(ConfigError, match="quote it in YAML"):
                ConfigManager(path).load()
        finally:
            os.unlink(path)

    def test_quoted_yaml_boolean_word(self):
        path = write_config('adjectives: ["on", "no"]\n')
        try:
            assert ConfigManager(path).adjectives == ["on", "no"]
        finally:
            os.unlink(path)
