"""
Tests for the Judge elimination and announcement system.
"""

from undercover.core import GamePhase, Judge, Role
from undercover.config.game_config import GameConfig


C, S = Role.CIVILIAN, Role.SPY


def test_eliminate_requires_playing(make_state, game_config):
    state = make_state([S, C, C, C], phase=GamePhase.REVEAL)
    judge = Judge(state, game_config)

    assert not judge.eliminate(2)
    assert state.players[1].is_alive


def test_eliminate_twice_is_rejected(make_state, game_config):
    """A second elimination of the same seat changes nothing."""
    state = make_state([S, C, C, C, C], phase=GamePhase.PLAYING)
    judge = Judge(state, game_config)

    assert judge.eliminate(3)
    assert not judge.eliminate(3)

    assert not state.players[2].is_alive
    assert judge.get_alive_counts() == {"alive": 4, "spies": 1, "civilians": 3}
    assert state.phase == GamePhase.PLAYING


def test_eliminate_unknown_seat(make_state, game_config):
    state = make_state([S, C, C], phase=GamePhase.PLAYING)
    judge = Judge(state, game_config)
    assert not judge.eliminate(0)
    assert not judge.eliminate(4)


def test_eliminate_dead_seat_after_game_over(make_state, game_config):
    state = make_state([S, C, C], phase=GamePhase.PLAYING)
    judge = Judge(state, game_config)

    assert judge.eliminate(1)
    assert state.winner == Role.CIVILIAN
    assert not judge.eliminate(2)
    assert state.players[1].is_alive


def test_announcements(make_state, capsys):
    state = make_state([S, C, C], phase=GamePhase.PLAYING)
    judge = Judge(state, GameConfig(use_judge_announcements=True))

    judge.eliminate(1)

    output = capsys.readouterr().out
    assert "[JUDGE] Player 1 has been voted out" in output
    assert "Civilians win!" in output
    assert "Spies were: [1]" in output
    assert len(judge.announcements) == 4


def test_announcements_disabled(make_state, game_config, capsys):
    state = make_state([S, C, C], phase=GamePhase.PLAYING)
    judge = Judge(state, game_config)

    judge.eliminate(2)

    assert capsys.readouterr().out == ""
    assert judge.announcements == []


def test_elimination_events(make_state, game_config, emitter, listener):
    state = make_state([C, S, C], phase=GamePhase.PLAYING)
    judge = Judge(state, game_config, event_emitter=emitter)

    judge.eliminate(1)

    assert listener.types() == ["elimination", "game_over"]
    _, game_over = listener.events[1]
    assert game_over["winner"] == "spy"
    assert game_over["spies"] == [2]
    assert game_over["word_pair"] == {"civilian": "苹果", "spy": "梨子"}
