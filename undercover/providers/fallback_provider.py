"""
Provider wrapper that falls back to a fixed pair when generation fails.
"""

from typing import Optional

from .base_provider import BaseWordProvider, validate_word_pair
from ..core import WordPair
from ..config.game_config import GameConfig, default_config


class FallbackWordProvider(BaseWordProvider):
    """Delegates to another provider and returns a fixed pair if it fails."""

    def __init__(self, inner: BaseWordProvider, config: GameConfig = default_config,
                 fallback: Optional[WordPair] = None):
        super().__init__(config)
        self.inner = inner
        self.fallback = fallback or WordPair(
            civilian=config.fallback_civilian,
            spy=config.fallback_spy
        )
        self.last_failure: Optional[str] = None

    async def generate(self, topic: str = "") -> WordPair:
        try:
            pair = validate_word_pair(await self.inner.generate(topic))
        except Exception as e:
            # Fallback words in case of API failure or rate limits
            self.last_failure = str(e)
            print(f"Error generating words, using fallback pair: {e}")
            return self.fallback
        self.last_failure = None
        return pair
