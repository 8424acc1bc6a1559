"""
Role assignment: deal roles and words to seats.
"""

import random
from typing import List, Optional, TYPE_CHECKING

from .roles import Role, get_role_distribution
from .player import Player

if TYPE_CHECKING:
    from .game_engine import WordPair


def shuffle_roles(roles: List[Role], rng: random.Random) -> None:
    """Fisher-Yates shuffle in place, drawing every index from rng."""
    for i in range(len(roles) - 1, 0, -1):
        j = rng.randint(0, i)
        roles[i], roles[j] = roles[j], roles[i]


def assign_roles(total_players: int, spy_count: int, word_pair: 'WordPair',
                 rng: Optional[random.Random] = None) -> List[Player]:
    """
    Create the seated players for a new game.

    Args:
        total_players: Number of seats (N)
        spy_count: Number of spies (K), 1 <= K <= (N-1)//2
        word_pair: Civilian and spy words
        rng: Random source; pass a seeded random.Random for reproducible seating

    Returns:
        N players in seat order 1..N, exactly K of them spies
    """
    rng = rng or random.Random()
    roles = get_role_distribution(total_players, spy_count)
    shuffle_roles(roles, rng)

    players = []
    for seat in range(1, total_players + 1):
        role = roles[seat - 1]
        word = word_pair.spy if role == Role.SPY else word_pair.civilian
        players.append(Player(seat=seat, role=role, word=word))
    return players
