"""
Terminal driver for a pass-the-device game of Undercover.
"""

import argparse
import asyncio
from dataclasses import replace
from typing import Callable, Optional

from dotenv import load_dotenv

from undercover.core import GamePhase
from undercover.core.judge import WINNER_NAMES
from undercover.controller import SessionController
from undercover.providers import create_provider
from undercover.config.game_config import GameConfig, default_config
from undercover.config.config_loader import load_config
from undercover.web import EventEmitter
from undercover.web.game_server import GameServer

CLEAR_SCREEN = "\n" * 40


class UndercoverGame:
    """Plays games in the terminal; only reads the view and dispatches actions."""

    def __init__(self, config: Optional[GameConfig] = None, controller: Optional[SessionController] = None,
                 input_fn: Callable[[str], str] = input):
        self.config = config or default_config
        self.controller = controller or SessionController(
            create_provider(self.config),
            self.config,
            event_emitter=EventEmitter()
        )
        self.input = input_fn

    def run_setup(self) -> bool:
        """Generate words until the game reaches the reveal phase. Returns False if the user gives up."""
        while True:
            settings = self.controller.state.settings
            print(f"Players: {settings.total_players} | Spies: {settings.spy_count} | "
                  f"Topic: {settings.topic or '(any)'}")
            print("Generating words...")
            if asyncio.run(self.controller.start_game()):
                return True

            print(f"❌ {self.controller.state.last_error}")
            answer = self.input("Try again? [Y/n] ").strip().lower()
            if answer in ("n", "no"):
                return False

    def run_reveal(self) -> None:
        """Hand the device around until every seat has seen its word."""
        while self.controller.state.phase == GamePhase.REVEAL:
            seat = self.controller.reveal.current_player().seat
            print(CLEAR_SCREEN)
            self.input(f"Pass the device to Player {seat}, then press Enter to see your word. ")
            self.controller.toggle_reveal()
            print(f"\nYour word is: {self.controller.get_view()['reveal']['word']}\n")
            self.input("Remember it, then press Enter to hide it and pass the device on. ")
            self.controller.advance()
        print(CLEAR_SCREEN)

    def run_playing(self) -> None:
        """Eliminate players until one side wins or the table gives up."""
        while self.controller.state.phase == GamePhase.PLAYING:
            view = self.controller.get_view()
            alive = [p["seat"] for p in view["players"] if p["is_alive"]]
            print(f"\nAlive players: {alive}")
            answer = self.input("Seat voted out (or 'end' to stop this game): ").strip().lower()
            if answer == "end":
                self.controller.end_game()
                return
            try:
                seat = int(answer)
            except ValueError:
                print(f"Not a seat number: {answer!r}")
                continue
            if not self.controller.judge.can_eliminate(seat):
                print(f"Player {seat} cannot be voted out.")
                continue
            confirm = self.input(f"Vote out player {seat}? [y/N] ").strip().lower()
            if confirm not in ("y", "yes"):
                print("Vote cancelled.")
                continue
            self.controller.eliminate(seat)

    def run_game(self) -> str:
        """
        Run one game from setup to the end.
        Returns winning side name, "Abandoned" or "Cancelled".
        """
        print("=" * 60)
        print("UNDERCOVER - Starting")
        print("=" * 60)

        if not self.run_setup():
            return "Cancelled"
        self.run_reveal()
        self.run_playing()

        if self.controller.state.phase != GamePhase.GAME_OVER:
            return "Abandoned"

        winner = self.controller.state.winner
        self._print_game_summary()
        return WINNER_NAMES[winner]

    def _print_game_summary(self) -> None:
        """Print a formatted game summary."""
        state = self.controller.state
        print("\n" + "=" * 60)
        print(f"GAME OVER - {WINNER_NAMES[state.winner]} WIN!")
        print("=" * 60)
        print(f"Civilian word: {state.word_pair.civilian}")
        print(f"Spy word: {state.word_pair.spy}")
        print(f"Random Seed: {self.config.random_seed}")
        print("\nPlayers:")
        for player in state.players:
            status = "alive" if player.is_alive else "eliminated"
            print(f"  • Player {player.seat}: {player.role.value.title()} ({status})")

    def play(self) -> None:
        """Play games until the table stops."""
        while True:
            self.run_game()
            if self.controller.state.phase == GamePhase.GAME_OVER:
                answer = self.input("\nPlay again? [Y/n] ").strip().lower()
                if answer in ("n", "no"):
                    return
                self.controller.restart()
            elif self.controller.state.phase == GamePhase.SETUP and self.controller.state.last_error:
                return
            else:
                answer = self.input("\nStart a new game? [Y/n] ").strip().lower()
                if answer in ("n", "no"):
                    return


def main():
    """Entry point for running a game."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Play Who is Undercover on one shared device",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                # Use default config (OpenAI words)
  python main.py --dummy                        # Offline built-in word list
  python main.py --players 8 --spies 2 --topic 水果
  python main.py --config configs/party.yaml --web
        """
    )
    parser.add_argument("--config", "-c", type=str, default=None,
                        help="Path to YAML configuration file (default: use default config)")
    parser.add_argument("--seed", "-s", type=int, default=None,
                        help="Random seed for reproducible seating")
    parser.add_argument("--players", "-p", type=int, default=None,
                        help="Number of players (3-12)")
    parser.add_argument("--spies", type=int, default=None,
                        help="Number of spies (at most (players-1)/2)")
    parser.add_argument("--topic", "-t", type=str, default=None,
                        help="Optional topic for the word pair")
    parser.add_argument("--dummy", action="store_true",
                        help="Use the built-in word list instead of the LLM")
    parser.add_argument("--web", action="store_true",
                        help="Serve the game as a local web page instead of the terminal")

    args = parser.parse_args()

    config = replace(load_config(args.config) if args.config else default_config)
    if args.seed is not None:
        config.random_seed = args.seed
    if args.players is not None:
        config.total_players = args.players
    if args.spies is not None:
        config.spy_count = args.spies
    if args.topic is not None:
        config.topic = args.topic
    if args.dummy:
        config.provider_type = "dummy"

    controller = SessionController(create_provider(config), config, event_emitter=EventEmitter())

    if args.web:
        GameServer(controller, port=config.port, host=config.host).start()
        return

    UndercoverGame(config, controller).play()


if __name__ == "__main__":
    main()
