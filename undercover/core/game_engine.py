"""
Core game state: phases, settings, word pair and the per-game session.
"""

from enum import Enum
from typing import List, Optional, Dict, Any
from dataclasses import dataclass, field

from .roles import Role, MIN_PLAYERS, MAX_PLAYERS, max_spy_count
from .player import Player


class GamePhase(Enum):
    """Current game phase."""
    SETUP = "setup"
    LOADING = "loading"  # Waiting for the word pair provider
    REVEAL = "reveal"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class WordPair:
    """The two secret words of a game."""
    civilian: str
    spy: str

    def to_dict(self) -> Dict[str, str]:
        return {"civilian": self.civilian, "spy": self.spy}


@dataclass
class GameSettings:
    """Table settings chosen during setup."""
    total_players: int = 6
    spy_count: int = 1
    topic: str = ""

    def __post_init__(self):
        self.update(total_players=self.total_players, spy_count=self.spy_count)

    @property
    def max_spies(self) -> int:
        return max(1, max_spy_count(self.total_players))

    def update(self, total_players: Optional[int] = None, spy_count: Optional[int] = None,
               topic: Optional[str] = None) -> None:
        """
        Apply a partial settings change, clamping out-of-range values.

        Changing the player count pulls the spy count down to the new maximum
        but never below one spy.
        """
        if total_players is not None:
            self.total_players = min(MAX_PLAYERS, max(MIN_PLAYERS, int(total_players)))
            self.spy_count = min(self.spy_count, max_spy_count(self.total_players)) or 1
        if spy_count is not None:
            self.spy_count = min(self.max_spies, max(1, int(spy_count)))
        if topic is not None:
            self.topic = topic.strip()

    def copy(self) -> 'GameSettings':
        return GameSettings(self.total_players, self.spy_count, self.topic)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_players": self.total_players,
            "spy_count": self.spy_count,
            "max_spies": self.max_spies,
            "topic": self.topic,
        }


@dataclass
class GameState:
    """Complete state of one game session."""
    phase: GamePhase = GamePhase.SETUP
    settings: GameSettings = field(default_factory=GameSettings)
    word_pair: Optional[WordPair] = None
    players: List[Player] = field(default_factory=list)

    # Reveal phase
    reveal_cursor: int = 0
    reveal_open: bool = False

    # Outcome
    winner: Optional[Role] = None
    last_error: Optional[str] = None

    # Tags carried by provider requests: the session, and the one request it waits for
    generation_id: int = 0
    pending_request_id: Optional[int] = None

    action_log: List[Dict[str, Any]] = field(default_factory=list)

    def get_alive_players(self) -> List[Player]:
        """Get all alive players."""
        return [p for p in self.players if p.is_alive]

    def get_player(self, seat: int) -> Optional[Player]:
        """Get player by seat number."""
        for player in self.players:
            if player.seat == seat:
                return player
        return None

    def get_spy_players(self) -> List[Player]:
        """Get all alive spies."""
        return [p for p in self.get_alive_players() if p.is_spy]

    def get_civilian_players(self) -> List[Player]:
        """Get all alive civilians."""
        return [p for p in self.get_alive_players() if p.is_civilian]

    def start_reveal(self, word_pair: WordPair, players: List[Player]) -> None:
        """Transition LOADING -> REVEAL with freshly dealt players."""
        self.word_pair = word_pair
        self.players = players
        self.reveal_cursor = 0
        self.reveal_open = False
        self.last_error = None
        self.pending_request_id = None
        self.phase = GamePhase.REVEAL
        self._log_action("roles_assigned", {
            "players": len(players),
            "spies": len([p for p in players if p.is_spy]),
        })

    def start_playing(self) -> None:
        """Transition REVEAL -> PLAYING."""
        self.reveal_open = False
        self.phase = GamePhase.PLAYING
        self._log_action("playing_start", {"players": len(self.players)})

    def check_win_condition(self) -> Optional[Role]:
        """
        Check if the game has ended and return the winning side.
        Returns None if the game continues.
        """
        alive_spies = len(self.get_spy_players())
        alive_civilians = len(self.get_civilian_players())

        # Civilians win: all spies eliminated (checked first so 0 >= 0 is a civilian win)
        if alive_spies == 0:
            return Role.CIVILIAN

        # Spies win: civilians can no longer outvote them
        if alive_spies >= alive_civilians:
            return Role.SPY

        return None

    def eliminate_player(self, seat: int) -> bool:
        """
        Eliminate a player and settle the game if a side has won.
        Returns False if the seat is unknown or already eliminated.
        """
        player = self.get_player(seat)
        if player is None or not player.eliminate():
            return False

        self._log_action("player_eliminated", {"seat": seat, "role": player.role.value})

        winner = self.check_win_condition()
        if winner:
            self.finish(winner)
        return True

    def finish(self, winner: Role) -> None:
        """Close the game with a winner. Only reached through a win check."""
        self.phase = GamePhase.GAME_OVER
        self.winner = winner
        self._log_action("game_over", {"winner": winner.value})

    def _log_action(self, action_type: str, data: Dict[str, Any]) -> None:
        """Log a game action."""
        self.action_log.append({
            "type": action_type,
            "phase": self.phase.value,
            "data": data
        })

    def get_game_summary(self) -> Dict[str, Any]:
        """Get a summary of the current game state."""
        return {
            "phase": self.phase.value,
            "alive_players": len(self.get_alive_players()),
            "alive_spies": len(self.get_spy_players()),
            "alive_civilians": len(self.get_civilian_players()),
            "winner": self.winner.value if self.winner else None,
        }
