"""
Word pair providers for new games.
"""

from .base_provider import BaseWordProvider, validate_word_pair
from .llm_provider import LLMWordProvider
from .dummy_provider import DummyWordProvider, DEFAULT_WORD_PAIRS
from .fallback_provider import FallbackWordProvider
from .exceptions import WordGenerationError
from ..config.game_config import GameConfig, default_config


def create_provider(config: GameConfig = default_config) -> BaseWordProvider:
    """Create the word provider selected in the config."""
    provider_type = config.provider_type.lower()
    if provider_type == "dummy":
        provider = DummyWordProvider(config)
    elif provider_type == "llm":
        provider = LLMWordProvider(config)
    else:
        raise ValueError(
            f"Unknown provider_type: {config.provider_type}. "
            f"Must be 'llm' or 'dummy'"
        )

    if config.use_fallback_words:
        return FallbackWordProvider(provider, config)
    return provider


__all__ = [
    'BaseWordProvider',
    'validate_word_pair',
    'LLMWordProvider',
    'DummyWordProvider',
    'DEFAULT_WORD_PAIRS',
    'FallbackWordProvider',
    'WordGenerationError',
    'create_provider',
]
