"""
Role definitions for the Undercover game.
"""

from enum import Enum
from typing import List


class Role(Enum):
    """Player role (also used to name the winning side)."""
    CIVILIAN = "civilian"
    SPY = "spy"
    BLANK = "blank"  # Reserved, never assigned by current rules


MIN_PLAYERS = 3
MAX_PLAYERS = 12


def max_spy_count(total_players: int) -> int:
    """Largest spy count that keeps spies strictly below half the table."""
    return (total_players - 1) // 2


def get_role_distribution(total_players: int, spy_count: int) -> List[Role]:
    """
    Get the unshuffled role tags for a game.
    Returns: spy_count SPY tags followed by CIVILIAN tags.
    """
    roles = [Role.CIVILIAN] * total_players
    for i in range(spy_count):
        roles[i] = Role.SPY
    return roles
