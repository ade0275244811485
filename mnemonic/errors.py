"""
Exceptions raised by the mnemonic package.
"""


class MnemonicError(Exception):
    """Base class for all mnemonic errors."""


class EmptyWordListError(MnemonicError):
    """Raised when generating from an adjective or noun list with no entries."""

    def __init__(self, adjectives_count: int, nouns_count: int):
        self.adjectives_count = adjectives_count
        self.nouns_count = nouns_count
        empty = [
            label
            for label, count in (("adjective", adjectives_count), ("noun", nouns_count))
            if count == 0
        ]
        super().__init__(f"Cannot generate a mnemonic: empty {' and '.join(empty)} list")


class ConfigError(MnemonicError):
    """Exception raised for configuration errors."""
