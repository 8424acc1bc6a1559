"""
Game configuration and constants.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    """Configuration for game parameters."""

    # Table defaults (clamped by GameSettings when applied)
    total_players: int = 6
    spy_count: int = 1
    topic: str = ""

    # Word pair provider
    provider_type: str = "llm"  # Options: "llm" or "dummy"
    llm_model: str = "gpt-4o-mini"
    llm_temperature: float = 0.9  # Higher creativity for varied words
    language: str = "Chinese"

    # Provider-level fallback when generation fails
    use_fallback_words: bool = True
    fallback_civilian: str = "苹果"
    fallback_spy: str = "梨子"

    random_seed: Optional[int] = None  # Seed for reproducible seating and dummy word choice

    # Judge announcements
    use_judge_announcements: bool = True

    # Local web view
    host: str = "127.0.0.1"
    port: int = 5000


# Default configuration instance
default_config = GameConfig()
