"""
Utility module for generating human-readable mnemonics.
"""

import random
from typing import Callable, Iterable, Optional, Tuple

from mnemonic.errors import EmptyWordListError
from mnemonic.logger import get_logger
from mnemonic.words import ADJECTIVES, NOUNS

logger = get_logger(__name__)

DEFAULT_SEPARATOR = "_"

# Returns an index in [0, bound)
IndexSource = Callable[[int], int]


class Generator:
    """
    Joins a random adjective and a random noun into a mnemonic such as
    'amazing_jordan'.

    Word lists are stored as tuples and never change after construction.
    Emptiness is checked when generating, not when constructing.
    """

    def __init__(
        self,
        adjectives: Iterable[str],
        nouns: Iterable[str],
        next_index: Optional[IndexSource] = None,
    ) -> None:
        self._adjectives: Tuple[str, ...] = tuple(adjectives)
        self._nouns: Tuple[str, ...] = tuple(nouns)
        self._next_index: IndexSource = next_index or random.randrange

    @classmethod
    def new(cls, next_index: Optional[IndexSource] = None) -> "Generator":
        """Create a generator over the built-in word lists."""
        return cls(ADJECTIVES, NOUNS, next_index)

    @classmethod
    def with_words(
        cls,
        adjectives: Iterable[str],
        nouns: Iterable[str],
        next_index: Optional[IndexSource] = None,
    ) -> "Generator":
        """Create a generator over caller-supplied word lists, which may be empty."""
        return cls(adjectives, nouns, next_index)

    @property
    def adjectives(self) -> Tuple[str, ...]:
        return self._adjectives

    @property
    def nouns(self) -> Tuple[str, ...]:
        return self._nouns

    def generate(self) -> str:
        """Generate a mnemonic joined with the default separator.

        Returns:
            A string like 'amazing_jordan'

        Raises:
            EmptyWordListError: If either word list is empty.
        """
        return self.generate_with_separator(DEFAULT_SEPARATOR)

    def generate_with_separator(self, separator: str) -> str:
        """Generate a mnemonic joined with ``separator``.

        Args:
            separator: Inserted verbatim between adjective and noun. Any
                string is accepted, including the empty string.

        Returns:
            A string like 'amazing-jordan' for separator '-'

        Raises:
            EmptyWordListError: If either word list is empty.
        """
        if not self._adjectives or not self._nouns:
            logger.debug(
                f"Refusing to generate: {len(self._adjectives)} adjectives, {len(self._nouns)} nouns"
            )
            raise EmptyWordListError(len(self._adjectives), len(self._nouns))

        adjective = self._adjectives[self._next_index(len(self._adjectives))]
        noun = self._nouns[self._next_index(len(self._nouns))]
        mnemonic = f"{adjective}{separator}{noun}"
        logger.debug(f"Generated mnemonic {mnemonic!r}")
        return mnemonic

    def __repr__(self) -> str:
        return f"Generator(adjectives={len(self._adjectives)}, nouns={len(self._nouns)})"


_default_generator: Optional[Generator] = None


def generate_mnemonic(separator: str = DEFAULT_SEPARATOR) -> str:
    """Generate a mnemonic from the built-in word lists.

    Returns:
        A string like 'crazy_einstein'
    """
    global _default_generator
    if _default_generator is None:
        _default_generator = Generator.new()
    return _default_generator.generate_with_separator(separator)
