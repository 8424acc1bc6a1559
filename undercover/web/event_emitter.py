"""
Event emitter delivering game events to presentation listeners.
"""

from typing import Callable, Dict, Any, Optional, List
from threading import Lock


Listener = Callable[[str, Dict[str, Any]], None]


class EventEmitter:
    """In-memory event emitter; nothing is written to disk."""

    def __init__(self):
        self._listeners: List[Listener] = []
        self._lock = Lock()

    def register_listener(self, listener: Listener) -> None:
        """Register a callback receiving (event_type, data)."""
        with self._lock:
            self._listeners.append(listener)

    def unregister_listener(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def _emit(self, event_type: str, data: Dict[str, Any]) -> None:
        """Emit an event to every registered listener."""
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(event_type, data)
            except Exception as e:
                # Don't let listener errors break the game
                print(f"Error delivering event '{event_type}': {e}")

    def emit_phase_change(self, phase: str) -> None:
        """Emit phase change event."""
        self._emit("phase_change", {"phase": phase})

    def emit_settings_update(self, settings: Dict[str, Any]) -> None:
        """Emit settings change event."""
        self._emit("settings_update", {"settings": settings})

    def emit_generation_failed(self, error_message: str) -> None:
        """Emit word generation failure event."""
        self._emit("generation_failed", {"error_message": error_message})

    def emit_reveal_advance(self, seat: int, next_seat: Optional[int]) -> None:
        """Emit event when a seat hands the device on."""
        self._emit("reveal_advance", {
            "seat": seat,
            "next_seat": next_seat
        })

    def emit_elimination(self, seat: int, alive_count: int) -> None:
        """Emit player elimination event."""
        self._emit("elimination", {
            "seat": seat,
            "alive_count": alive_count
        })

    def emit_game_over(self, winner: str, word_pair: Optional[Dict[str, str]], spies: List[int]) -> None:
        """Emit game over event."""
        self._emit("game_over", {
            "winner": winner,
            "word_pair": word_pair,
            "spies": spies
        })

    def emit_game_abandoned(self, alive_count: int) -> None:
        """Emit event when a game is ended without a winner."""
        self._emit("game_abandoned", {"alive_count": alive_count})

    def emit_game_state_update(self, game_state: Dict[str, Any]) -> None:
        """Emit game state update event."""
        self._emit("game_state_update", {"game_state": game_state})
