"""
Reveal sequencer: pass-the-device secret word disclosure.

Exactly one seat's word can be shown at a time, and seats are visited in
order from the first to the last. Once a seat has been passed its word
cannot be shown again.
"""

from typing import Optional

from .game_engine import GameState, GamePhase
from .player import Player


class RevealSequencer:
    """Drives the REVEAL phase of a game state."""

    def __init__(self, game_state: GameState):
        self.game_state = game_state

    @property
    def is_active(self) -> bool:
        return self.game_state.phase == GamePhase.REVEAL

    def current_player(self) -> Optional[Player]:
        """The player holding the device, or None outside the reveal phase."""
        if not self.is_active:
            return None
        return self.game_state.players[self.game_state.reveal_cursor]

    def is_last_seat(self) -> bool:
        return self.game_state.reveal_cursor >= len(self.game_state.players) - 1

    def visible_word(self) -> Optional[str]:
        """The word currently on screen, if any."""
        if not self.is_active or not self.game_state.reveal_open:
            return None
        return self.current_player().word

    def toggle_reveal(self) -> bool:
        """Show or hide the current seat's word. Never moves the cursor."""
        if not self.is_active:
            return False
        self.game_state.reveal_open = not self.game_state.reveal_open
        return True

    def advance(self) -> bool:
        """
        Hand the device to the next seat.

        Only allowed while the current word is showing. After the last seat
        the game moves on to PLAYING.

        Returns:
            False if the call was rejected (wrong phase or word not shown)
        """
        state = self.game_state
        if not self.is_active or not state.reveal_open:
            return False

        state.reveal_open = False
        self.current_player().mark_revealed()

        if not self.is_last_seat():
            state.reveal_cursor += 1
        else:
            state.start_playing()
        return True
