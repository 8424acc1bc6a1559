"""
Pytest fixtures for Undercover game tests.
"""

import asyncio
import random

import pytest

from undercover.core import (
    GameState, GamePhase, GameSettings, Player, Role, WordPair
)
from undercover.config.game_config import GameConfig
from undercover.controller import SessionController
from undercover.providers import BaseWordProvider, WordGenerationError
from undercover.web import EventEmitter


class StaticWordProvider(BaseWordProvider):
    """Provider returning one fixed result and recording the topics it was asked for."""

    def __init__(self, result=None):
        super().__init__()
        self.result = result if result is not None else WordPair(civilian="苹果", spy="梨子")
        self.topics = []

    async def generate(self, topic: str = "") -> WordPair:
        self.topics.append(topic)
        return self.result


class FailingWordProvider(BaseWordProvider):
    """Provider that always fails."""

    async def generate(self, topic: str = "") -> WordPair:
        raise WordGenerationError("provider unavailable", topic)


class RecordingListener:
    """Event listener collecting (event_type, data) tuples."""

    def __init__(self):
        self.events = []

    def __call__(self, event_type, data):
        self.events.append((event_type, data))

    def types(self):
        return [event_type for event_type, _ in self.events]


@pytest.fixture
def game_config():
    """Test game configuration."""
    return GameConfig(
        total_players=5,
        spy_count=1,
        provider_type="dummy",
        use_fallback_words=False,
        random_seed=7,
        use_judge_announcements=False  # Disable for cleaner test output
    )


@pytest.fixture
def word_pair():
    return WordPair(civilian="苹果", spy="梨子")


@pytest.fixture
def static_provider(word_pair):
    return StaticWordProvider(word_pair)


@pytest.fixture
def controller(static_provider, game_config):
    """Controller at SETUP with a seeded RNG and a fixed word pair."""
    return SessionController(static_provider, game_config, rng=random.Random(7))


@pytest.fixture
def failing_controller(game_config):
    return SessionController(FailingWordProvider(), game_config, rng=random.Random(7))


@pytest.fixture
def start_game():
    """Run controller.start_game() to completion."""
    def _start(controller):
        return asyncio.run(controller.start_game())
    return _start


@pytest.fixture
def reveal_all():
    """Drive the reveal sequence to the end."""
    def _reveal(controller):
        while controller.state.phase == GamePhase.REVEAL:
            assert controller.toggle_reveal()
            assert controller.advance()
    return _reveal


@pytest.fixture
def playing_controller(controller, start_game, reveal_all):
    """Controller in PLAYING with 5 players and 1 spy."""
    assert start_game(controller)
    reveal_all(controller)
    assert controller.state.phase == GamePhase.PLAYING
    return controller


@pytest.fixture
def make_state():
    """Build a PLAYING game state with explicit roles in seat order."""
    def _make(roles, phase=GamePhase.PLAYING):
        pair = WordPair(civilian="苹果", spy="梨子")
        players = [
            Player(seat=i + 1, role=role, word=pair.spy if role == Role.SPY else pair.civilian)
            for i, role in enumerate(roles)
        ]
        spies = len([r for r in roles if r == Role.SPY])
        settings = GameSettings(total_players=max(3, len(roles)), spy_count=max(1, spies))
        return GameState(phase=phase, settings=settings, word_pair=pair, players=players)
    return _make


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def emitter(listener):
    """Event emitter with a recording listener attached."""
    emitter = EventEmitter()
    emitter.register_listener(listener)
    return emitter


@pytest.fixture
def make_controller(game_config):
    """Build a controller whose provider returns the given result."""
    def _make(result=None, seed=7):
        return SessionController(StaticWordProvider(result), game_config, rng=random.Random(seed))
    return _make
