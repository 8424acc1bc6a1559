"""
Player class representing a seat at the table.
"""

from dataclasses import dataclass
from enum import Enum

from .roles import Role


class PlayerStatus(Enum):
    """Player status in the game."""
    ALIVE = "alive"
    ELIMINATED = "eliminated"


@dataclass
class Player:
    """Represents a seated player."""
    seat: int
    role: Role
    word: str
    status: PlayerStatus = PlayerStatus.ALIVE
    has_revealed: bool = False

    def __str__(self) -> str:
        return f"Player {self.seat} ({self.role.value})"

    @property
    def is_alive(self) -> bool:
        """Check if player is alive."""
        return self.status == PlayerStatus.ALIVE

    @property
    def is_spy(self) -> bool:
        return self.role == Role.SPY

    @property
    def is_civilian(self) -> bool:
        return self.role == Role.CIVILIAN

    def eliminate(self) -> bool:
        """
        Mark player as eliminated.
        Returns False if the player was already out (status never goes back).
        """
        if not self.is_alive:
            return False
        self.status = PlayerStatus.ELIMINATED
        return True

    def mark_revealed(self) -> None:
        """Record that this seat has seen its word."""
        self.has_revealed = True
