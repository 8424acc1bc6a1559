"""
Core game components: game state, players, roles, reveal sequencing and rule enforcement.
"""

from .roles import Role, MIN_PLAYERS, MAX_PLAYERS, max_spy_count, get_role_distribution
from .player import Player, PlayerStatus
from .game_engine import GameState, GamePhase, GameSettings, WordPair
from .assignment import assign_roles, shuffle_roles
from .reveal import RevealSequencer
from .judge import Judge

__all__ = [
    'Role',
    'MIN_PLAYERS',
    'MAX_PLAYERS',
    'max_spy_count',
    'get_role_distribution',
    'Player',
    'PlayerStatus',
    'GameState',
    'GamePhase',
    'GameSettings',
    'WordPair',
    'assign_roles',
    'shuffle_roles',
    'RevealSequencer',
    'Judge',
]
