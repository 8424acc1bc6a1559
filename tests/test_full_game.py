"""
End-to-end games through the controller and the terminal driver.
"""

import random

from undercover.core import GamePhase, Role
from undercover.controller import SessionController
from undercover.config.game_config import GameConfig
from undercover.providers import create_provider
from main import UndercoverGame


def test_spies_win_when_civilians_run_out(controller, start_game, reveal_all):
    """N=5, K=1: voting out three civilians leaves one spy against one civilian."""
    assert start_game(controller)
    reveal_all(controller)
    assert all(p.has_revealed for p in controller.state.players)

    civilians = [p.seat for p in controller.state.players if p.role == Role.CIVILIAN]
    for seat in civilians[:2]:
        assert controller.eliminate(seat)
        assert controller.state.phase == GamePhase.PLAYING

    assert controller.eliminate(civilians[2])
    assert controller.state.phase == GamePhase.GAME_OVER
    assert controller.state.winner == Role.SPY
    assert not controller.eliminate(civilians[3])

    view = controller.get_view()
    assert view["alive_count"] == 2
    assert view["winner"] == "spy"


def test_dummy_provider_game_is_reproducible(start_game):
    """Same seed, same words and same seating."""
    def play_once():
        config = GameConfig(provider_type="dummy", use_fallback_words=False, random_seed=3,
                            total_players=6, spy_count=2, use_judge_announcements=False)
        controller = SessionController(create_provider(config), config, rng=random.Random(3))
        assert start_game(controller)
        return controller.state

    first, second = play_once(), play_once()
    assert first.word_pair == second.word_pair
    assert [p.role for p in first.players] == [p.role for p in second.players]
    assert len(first.get_spy_players()) == 2


class ScriptedTable:
    """Answers the terminal prompts, voting out the seats chosen by `pick`."""

    def __init__(self, controller, pick, replay=False, confirm="y"):
        self.controller = controller
        self.pick = pick
        self.replay = replay
        self.confirm = confirm
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if prompt.startswith("Seat voted out"):
            return self.pick(self.controller.state)
        if prompt.startswith("Vote out player"):
            return self.confirm() if callable(self.confirm) else self.confirm
        if "again" in prompt or "new game" in prompt:
            return "y" if self.replay else "n"
        return ""


def test_terminal_game_civilians_win(controller, game_config, capsys):
    def vote_spy(state):
        return str(state.get_spy_players()[0].seat)

    table = ScriptedTable(controller, vote_spy)
    game = UndercoverGame(game_config, controller, input_fn=table)

    assert game.run_game() == "Civilians"

    out = capsys.readouterr().out
    assert "GAME OVER - Civilians WIN!" in out
    assert "Civilian word: 苹果" in out
    assert "Spy word: 梨子" in out
    pass_prompts = [p for p in table.prompts if p.startswith("Pass the device")]
    assert len(pass_prompts) == 5
    assert pass_prompts[0].startswith("Pass the device to Player 1")


def test_terminal_game_rejects_bad_seats(controller, game_config, capsys):
    answers = iter(["abc", "99"])

    def vote(state):
        answer = next(answers, None)
        if answer is not None:
            return answer
        return str(state.get_spy_players()[0].seat)

    game = UndercoverGame(game_config, controller, input_fn=ScriptedTable(controller, vote))

    assert game.run_game() == "Civilians"
    out = capsys.readouterr().out
    assert "Not a seat number: 'abc'" in out
    assert "Player 99 cannot be voted out." in out


def test_terminal_game_can_be_abandoned(controller, game_config):
    game = UndercoverGame(game_config, controller, input_fn=ScriptedTable(controller, lambda state: "end"))

    assert game.run_game() == "Abandoned"
    assert controller.state.phase == GamePhase.SETUP
    assert controller.state.players == []


def test_terminal_setup_gives_up_after_failure(failing_controller, game_config, capsys):
    answers = iter(["y", "n"])
    game = UndercoverGame(game_config, failing_controller, input_fn=lambda prompt: next(answers))

    assert game.run_game() == "Cancelled"
    assert capsys.readouterr().out.count("生成词语失败，请重试") == 2
    assert failing_controller.state.phase == GamePhase.SETUP


def test_play_restarts_after_game_over(controller, game_config):
    games = []

    def vote_spy(state):
        games.append(state.generation_id)
        return str(state.get_spy_players()[0].seat)

    table = ScriptedTable(controller, vote_spy, replay=True)
    replies = {"count": 0}

    def input_fn(prompt):
        if "again" in prompt:
            replies["count"] += 1
            return "y" if replies["count"] < 2 else "n"
        return table(prompt)

    UndercoverGame(game_config, controller, input_fn=input_fn).play()

    assert len(games) == 2
    assert games[0] != games[1]
    assert controller.state.phase == GamePhase.GAME_OVER


def test_terminal_vote_needs_confirmation(controller, game_config, capsys):
    answers = iter(["n", "y"])

    def vote_spy(state):
        return str(state.get_spy_players()[0].seat)

    table = ScriptedTable(controller, vote_spy, confirm=lambda: next(answers))
    game = UndercoverGame(game_config, controller, input_fn=table)

    assert game.run_game() == "Civilians"
    assert "Vote cancelled." in capsys.readouterr().out
    confirms = [p for p in table.prompts if p.startswith("Vote out player")]
    assert len(confirms) == 2
    assert len([p for p in table.prompts if p.startswith("Seat voted out")]) == 2
