"""
Base word pair provider interface.
"""

from abc import ABC, abstractmethod
from typing import Any

from .exceptions import WordGenerationError
from ..core import WordPair
from ..config.game_config import GameConfig, default_config


def validate_word_pair(data: Any) -> WordPair:
    """
    Check a provider result and normalize it to a WordPair.

    Accepts a WordPair or a mapping with "civilian" and "spy" keys. Both words
    must be non-empty strings and must differ.

    Raises:
        WordGenerationError: If the data is malformed
    """
    if isinstance(data, WordPair):
        civilian, spy = data.civilian, data.spy
    elif isinstance(data, dict):
        civilian, spy = data.get("civilian"), data.get("spy")
    else:
        raise WordGenerationError(f"Unexpected word pair type: {type(data).__name__}")

    if not isinstance(civilian, str) or not isinstance(spy, str):
        raise WordGenerationError(f"Word pair must contain two strings, got {data!r}")

    civilian, spy = civilian.strip(), spy.strip()
    if not civilian or not spy:
        raise WordGenerationError(f"Word pair contains an empty word: {data!r}")
    if civilian == spy:
        raise WordGenerationError(f"Civilian and spy words are identical: {civilian!r}")

    return WordPair(civilian=civilian, spy=spy)


class BaseWordProvider(ABC):
    """
    Abstract base class for word pair providers.

    A provider turns an optional topic into a civilian/spy word pair. It
    signals failure by raising; the session controller never substitutes
    words on its own.
    """

    def __init__(self, config: GameConfig = default_config):
        self.config = config

    @abstractmethod
    async def generate(self, topic: str = "") -> WordPair:
        """
        Produce a word pair.

        Args:
            topic: Optional free-text theme, may be empty

        Returns:
            The word pair for a new game

        Raises:
            WordGenerationError: If no pair could be produced
        """
        pass
