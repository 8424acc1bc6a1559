"""
Session controller: owns the current game and exposes the action surface.

Every action is processed to completion before the next one. The only
suspension point is the word pair request in start_game(); each request is
tagged with the generation id of the session that issued it, so a result
arriving after that session was discarded never touches the new one.
"""

import asyncio
import random
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .core import (
    GameState, GamePhase, GameSettings, WordPair,
    Judge, RevealSequencer, assign_roles
)
from .providers import BaseWordProvider, validate_word_pair
from .config.game_config import GameConfig, default_config
from .web.event_emitter import EventEmitter


GENERATION_FAILED_MESSAGE = "生成词语失败，请重试"


@dataclass(frozen=True)
class WordRequest:
    """An in-flight word pair request, tagged with its session."""
    generation_id: int
    request_id: int
    topic: str


class SessionController:
    """Main game controller for one shared device."""

    def __init__(self, provider: BaseWordProvider, config: GameConfig = default_config,
                 rng: Optional[random.Random] = None, event_emitter: Optional[EventEmitter] = None):
        self.provider = provider
        self.config = config
        self.rng = rng or random.Random(config.random_seed)
        self.event_emitter = event_emitter
        self._generation_counter = 0
        self._request_counter = 0

        self.state: GameState
        self.judge: Judge
        self.reveal: RevealSequencer
        self._new_session(GameSettings(
            total_players=config.total_players,
            spy_count=config.spy_count,
            topic=config.topic or ""
        ))

    def _new_session(self, settings: GameSettings) -> None:
        """Discard the current session and start a fresh one at SETUP."""
        self._generation_counter += 1
        self.state = GameState(settings=settings, generation_id=self._generation_counter)
        self.judge = Judge(self.state, self.config, event_emitter=self.event_emitter)
        self.reveal = RevealSequencer(self.state)

    def set_event_emitter(self, event_emitter: Optional[EventEmitter]) -> None:
        """Attach the emitter used by this and every later session."""
        self.event_emitter = event_emitter
        self.judge.event_emitter = event_emitter

    def _reject(self, action: str, reason: str) -> bool:
        """Record a rejected action. Rejections never change game state."""
        self.state._log_action("action_rejected", {"action": action, "reason": reason})
        return False

    def _emit_phase_change(self) -> None:
        if self.event_emitter:
            self.event_emitter.emit_phase_change(self.state.phase.value)
            self._emit_game_state_update()

    def _emit_game_state_update(self) -> None:
        if self.event_emitter:
            self.event_emitter.emit_game_state_update(self.get_view())

    def is_current(self, request: WordRequest) -> bool:
        """Check that a request still belongs to the live session."""
        return (request.generation_id == self.state.generation_id
                and request.request_id == self.state.pending_request_id
                and self.state.phase == GamePhase.LOADING)

    # ============================================================
    #  Setup
    # ============================================================

    def update_settings(self, total_players: Optional[int] = None, spy_count: Optional[int] = None,
                        topic: Optional[str] = None) -> bool:
        """Change table settings. Out-of-range values are clamped, not rejected."""
        if self.state.phase != GamePhase.SETUP:
            return self._reject("update_settings", f"phase is {self.state.phase.value}")

        try:
            total_players = int(total_players) if total_players is not None else None
            spy_count = int(spy_count) if spy_count is not None else None
        except (TypeError, ValueError):
            return self._reject("update_settings", "player and spy counts must be integers")
        if topic is not None and not isinstance(topic, str):
            return self._reject("update_settings", "topic must be a string")

        self.state.settings.update(total_players=total_players, spy_count=spy_count, topic=topic)
        if self.event_emitter:
            self.event_emitter.emit_settings_update(self.state.settings.to_dict())
            self._emit_game_state_update()
        return True

    async def start_game(self) -> bool:
        """
        Request a word pair and deal roles.

        Returns:
            True if the game reached the reveal phase with this call
        """
        request = self.begin_generation()
        if request is None:
            return False
        word_pair = await self.fetch_word_pair(request)
        return self.finish_generation(request, word_pair)

    async def fetch_word_pair(self, request: WordRequest) -> Optional[WordPair]:
        """Call the provider for a request. Returns None if it failed or sent malformed data."""
        try:
            return validate_word_pair(await self.provider.generate(request.topic))
        except asyncio.CancelledError:
            self.fail_generation(request)
            raise
        except Exception as e:
            print(f"Error generating words: {e}")
            return None

    def finish_generation(self, request: WordRequest, word_pair: Optional[WordPair]) -> bool:
        """Settle a request with the provider's outcome."""
        if word_pair is None:
            self.fail_generation(request)
            return False
        return self.complete_generation(request, word_pair)

    def begin_generation(self) -> Optional[WordRequest]:
        """SETUP -> LOADING. Returns the tagged request, or None if rejected."""
        if self.state.phase != GamePhase.SETUP:
            self._reject("start_game", f"phase is {self.state.phase.value}")
            return None

        self._request_counter += 1
        self.state.last_error = None
        self.state.pending_request_id = self._request_counter
        self.state.phase = GamePhase.LOADING
        self.state._log_action("generation_start", {"topic": self.state.settings.topic})
        self._emit_phase_change()
        return WordRequest(
            generation_id=self.state.generation_id,
            request_id=self._request_counter,
            topic=self.state.settings.topic
        )

    def complete_generation(self, request: WordRequest, word_pair: WordPair) -> bool:
        """LOADING -> REVEAL once the provider delivered a pair."""
        if not self.is_current(request):
            print(f"Discarding word pair from stale request (generation {request.generation_id})")
            return False

        settings = self.state.settings
        players = assign_roles(settings.total_players, settings.spy_count, word_pair, self.rng)
        self.state.start_reveal(word_pair, players)
        self.judge.announce(
            f"Roles dealt to {settings.total_players} players ({settings.spy_count} spies). "
            f"Pass the device to player 1."
        )
        self._emit_phase_change()
        return True

    def fail_generation(self, request: WordRequest, message: str = GENERATION_FAILED_MESSAGE) -> bool:
        """LOADING -> SETUP after a provider failure. No player or word state is kept."""
        if not self.is_current(request):
            return False

        self.state.word_pair = None
        self.state.players = []
        self.state.pending_request_id = None
        self.state.last_error = message
        self.state.phase = GamePhase.SETUP
        self.state._log_action("generation_failed", {"message": message})
        if self.event_emitter:
            self.event_emitter.emit_generation_failed(message)
        self._emit_phase_change()
        return True

    # ============================================================
    #  Reveal
    # ============================================================

    def toggle_reveal(self) -> bool:
        """Show or hide the current player's word."""
        if not self.reveal.toggle_reveal():
            return self._reject("toggle_reveal", f"phase is {self.state.phase.value}")
        self._emit_game_state_update()
        return True

    def advance(self) -> bool:
        """Pass the device on once the current player has seen their word."""
        current = self.reveal.current_player()
        if not self.reveal.advance():
            return self._reject("advance", "word is not being shown")

        if self.state.phase == GamePhase.PLAYING:
            self.judge.announce("All players have seen their words. Describe, vote, eliminate.")
            if self.event_emitter:
                self.event_emitter.emit_reveal_advance(current.seat, None)
            self._emit_phase_change()
        else:
            next_seat = self.reveal.current_player().seat
            if self.event_emitter:
                self.event_emitter.emit_reveal_advance(current.seat, next_seat)
            self._emit_game_state_update()
        return True

    # ============================================================
    #  Playing
    # ============================================================

    def eliminate(self, seat: int) -> bool:
        """Vote a player out."""
        if not self.judge.eliminate(seat):
            return self._reject("eliminate", f"seat {seat} cannot be eliminated")
        if self.state.phase == GamePhase.GAME_OVER:
            self._emit_phase_change()
        else:
            self._emit_game_state_update()
        return True

    def end_game(self) -> bool:
        """Abandon a game in progress. No winner is recorded."""
        if self.state.phase != GamePhase.PLAYING:
            return self._reject("end_game", f"phase is {self.state.phase.value}")

        alive_count = len(self.state.get_alive_players())
        self.state._log_action("game_abandoned", {"alive_players": alive_count})
        self.judge.announce("Game ended without a winner.")
        if self.event_emitter:
            self.event_emitter.emit_game_abandoned(alive_count)
        self._new_session(self.state.settings.copy())
        self._emit_phase_change()
        return True

    def restart(self) -> bool:
        """Start over after a finished game, keeping the table settings."""
        if self.state.phase != GamePhase.GAME_OVER:
            return self._reject("restart", f"phase is {self.state.phase.value}")

        self._new_session(self.state.settings.copy())
        self._emit_phase_change()
        return True

    # ============================================================
    #  Views
    # ============================================================

    def get_view(self) -> Dict[str, Any]:
        """
        Public snapshot for the presentation layer.

        Words and roles stay hidden except the current reveal seat's word while
        it is shown; everything is disclosed once the game is over.
        """
        state = self.state
        current = self.reveal.current_player()
        counts = self.judge.get_alive_counts()

        view: Dict[str, Any] = {
            "phase": state.phase.value,
            "settings": state.settings.to_dict(),
            "last_error": state.last_error,
            "alive_count": counts["alive"],
            "players": [
                {"seat": p.seat, "is_alive": p.is_alive, "has_revealed": p.has_revealed}
                for p in state.players
            ],
            "reveal": None,
            "winner": None,
        }

        if current is not None:
            view["reveal"] = {
                "seat": current.seat,
                "is_open": state.reveal_open,
                "is_last": self.reveal.is_last_seat(),
                "word": self.reveal.visible_word(),
            }

        if state.phase == GamePhase.GAME_OVER:
            view["winner"] = state.winner.value
            view["word_pair"] = state.word_pair.to_dict() if state.word_pair else None
            view["spies"] = [p.seat for p in state.players if p.is_spy]

        return view
