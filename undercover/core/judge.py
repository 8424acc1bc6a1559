"""
Judge/Moderator: applies eliminations and announces the outcome.
"""

from typing import Dict, Optional, TYPE_CHECKING

from .game_engine import GameState, GamePhase
from .roles import Role
from ..config.game_config import GameConfig, default_config

if TYPE_CHECKING:
    from ..web.event_emitter import EventEmitter


WINNER_NAMES = {
    Role.CIVILIAN: "Civilians",
    Role.SPY: "Spies",
}


class Judge:
    """Judge/Moderator that enforces elimination rules and settles the game."""

    def __init__(self, game_state: GameState, config: GameConfig = default_config,
                 event_emitter: Optional['EventEmitter'] = None):
        self.game_state = game_state
        self.config = config
        self.event_emitter = event_emitter
        self.announcements = []

    def announce(self, message: str) -> None:
        """Make a judge announcement."""
        if self.config.use_judge_announcements:
            self.announcements.append(message)
            print(f"[JUDGE] {message}")

    def get_alive_counts(self) -> Dict[str, int]:
        """Alive players per side."""
        return {
            "alive": len(self.game_state.get_alive_players()),
            "spies": len(self.game_state.get_spy_players()),
            "civilians": len(self.game_state.get_civilian_players()),
        }

    def can_eliminate(self, seat: int) -> bool:
        """Check that seat can be voted out right now."""
        if self.game_state.phase != GamePhase.PLAYING:
            return False
        player = self.game_state.get_player(seat)
        return player is not None and player.is_alive

    def eliminate(self, seat: int) -> bool:
        """
        Vote a player out and settle the game if a side has won.

        Args:
            seat: Seat number of the eliminated player

        Returns:
            False if the elimination was rejected (wrong phase, unknown seat,
            or player already out)
        """
        if not self.can_eliminate(seat):
            return False

        self.game_state.eliminate_player(seat)
        counts = self.get_alive_counts()
        self.announce(f"Player {seat} has been voted out. Players alive: {counts['alive']}")
        if self.event_emitter:
            self.event_emitter.emit_elimination(seat, counts["alive"])

        if self.game_state.phase == GamePhase.GAME_OVER:
            self.announce_game_over()
        return True

    def announce_game_over(self) -> None:
        """Announce the winner and the secret words."""
        state = self.game_state
        winner = state.winner
        spies = [p.seat for p in state.players if p.is_spy]
        self.announce(f"Game over: {WINNER_NAMES[winner]} win!")
        if state.word_pair:
            self.announce(f"Civilian word: {state.word_pair.civilian} | Spy word: {state.word_pair.spy}")
        self.announce(f"Spies were: {spies}")
        if self.event_emitter:
            self.event_emitter.emit_game_over(
                winner.value,
                state.word_pair.to_dict() if state.word_pair else None,
                spies
            )
